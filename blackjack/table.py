"""
Sit down at the table and play a single round from the terminal.

    python -m blackjack.table [--seed SEED] [--verbose]
"""

import argparse
import logging
import sys
from typing import List, Optional

from blackjack.constants import START_PROMPT, TABLE_BANNER, WELCOME_BANNER
from blackjack.deck import get_rng
from blackjack.display import clear_screen
from blackjack.game import play_round


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Play a round of Blackjack against the dealer'
    )
    parser.add_argument('--seed',
                        type=int,
                        help='Seed the shuffle to replay the same round')
    parser.add_argument('--verbose',
                        action='store_true',
                        help='Log deals and outcomes to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Return the exit status: 1 if standard input closes before the round
    starts, 0 once a round has been played to the end.
    """
    args = setup_parser().parse_args(argv)
    log_format = '[%(asctime)s %(threadName)s, %(levelname)s] %(message)s'
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=log_format
    )
    logger = logging.getLogger(__name__)

    # Seeded once for the whole process
    rng = get_rng(args.seed)

    print(WELCOME_BANNER)
    print(START_PROMPT)
    try:
        started = sys.stdin.readline() != ''
    except (OSError, UnicodeDecodeError) as ex:
        logger.error('Could not read standard input: {0}'.format(ex))
        return 1
    if not started:
        logger.error('Standard input was closed before the game started')
        return 1

    clear_screen()
    print(TABLE_BANNER)

    won = play_round(rng)
    logger.info('Round finished, player {0}'.format('won' if won else 'lost'))
    return 0


if __name__ == '__main__':
    sys.exit(main())
