"""
A single round of Blackjack against a dealer who never acts.

Examples
--------
>>> r = get_round(get_rng())
>>> r.player_cards
[Card(9D), Card(QH)]

Two cards each are dealt from the end of a shuffled deck, the dealer first.

>>> r.commit_choice('hit')
Invalid option. Please select either 'Hit' or 'Stay'.

Only "1" (hit) and "2" (stand) are accepted. Nothing else changes the hands.

>>> r.commit_choice('2')
You won! [Dealer score: (13) < Player score: (19)]
>>> r.won
True

Standing compares both totals. The dealer is never dealt another card, and a
tie goes to the player.
"""

from enum import Enum
import logging
import sys
from typing import Callable, Iterable, List, Optional, TextIO

import numpy as np

from blackjack.card import Card
from blackjack.constants import (
    BUST_MESSAGE,
    DECK_EXHAUSTED_MESSAGE,
    HIT,
    INITIAL_HAND_SIZE,
    INVALID_OPTION,
    LOSS_MESSAGE,
    MAX_VALUE,
    STAND,
    THANKS_MESSAGE,
    WIN_MESSAGE
)
from blackjack.deck import DeckExhaustedError, draw, shuffled_deck
from blackjack.display import (
    clear_screen,
    print_dealer_cards,
    print_player_cards,
    print_player_options
)
from blackjack.hand import total


class State(Enum):
    DEALING = 1
    AWAITING_CHOICE = 2
    PLAYER_BUST = 3
    PLAYER_WIN = 4
    PLAYER_LOSS = 5
    DECK_EXHAUSTED = 6
    INPUT_CLOSED = 7


TERMINAL_STATES = {
    State.PLAYER_BUST,
    State.PLAYER_WIN,
    State.PLAYER_LOSS,
    State.DECK_EXHAUSTED,
    State.INPUT_CLOSED
}


def get_round(rng: np.random.Generator,
              out: Optional[TextIO] = None) -> "Round":
    return Round(rng, shuffled_deck, out=out)


class Round:
    def __init__(self,
                 rng: np.random.Generator,
                 deck_fn: Callable[[np.random.Generator],
                                   List[Card]] = shuffled_deck,
                 out: Optional[TextIO] = None):
        """
        Build a deck and deal the opening hands.

        Parameters
        ----------
        rng : np.random.Generator
            The random source handed to `deck_fn`
        deck_fn : Callable[[np.random.Generator], List[Card]]
            A function that takes in `rng` and returns the deck for the round.
            Cards are dealt from the end of the returned list.
        out : Optional[TextIO]
            Where the table is rendered. Defaults to the current `sys.stdout`.
        """
        self.logger = logging.getLogger(__name__)
        self.out = out
        self.state = State.DEALING
        self.deck = deck_fn(rng)
        self.dealer_cards: List[Card] = draw(self.deck, INITIAL_HAND_SIZE)
        self.player_cards: List[Card] = draw(self.deck, INITIAL_HAND_SIZE)
        self.logger.debug('Dealer was dealt {0}'.format(self.dealer_cards))
        self.logger.debug('Player was dealt {0}'.format(self.player_cards))
        self.state = State.AWAITING_CHOICE

    @property
    def completed(self) -> bool:
        """ Indicate whether the round is finished. """
        return self.state in TERMINAL_STATES

    @property
    def won(self) -> bool:
        """ Only standing on a total at least as high as the dealer's wins. """
        return self.state == State.PLAYER_WIN

    def render(self) -> None:
        clear_screen(self.out)
        print_dealer_cards(self.dealer_cards, self.out)
        print_player_cards(self.player_cards, self.out)
        print_player_options(self.out)

    def commit_choice(self, choice: str) -> None:
        """
        Apply one line of player input: "1" to hit, "2" to stand. Anything
        else is reported as invalid and changes nothing.
        """
        if self.completed:
            raise ValueError('The round is already over')
        if choice == HIT:
            self._hit()
        elif choice == STAND:
            self._stand()
        else:
            self.logger.debug('Ignoring invalid option {0!r}'.format(choice))
            self._say(INVALID_OPTION)

    def play(self, lines: Iterable[str]) -> bool:
        """
        Run the round, reading one choice per line from `lines`. Return
        whether the player won.

        If `lines` runs out, or can no longer be read, before the round is
        over, the player loses.
        """
        self.render()
        remaining = iter(lines)
        while True:
            try:
                line = next(remaining)
            except StopIteration:
                self.logger.info('Input closed before the round was finished')
                break
            except (OSError, UnicodeDecodeError) as ex:
                self.logger.warning('Could not read a choice: {0}'.format(ex))
                break
            self.render()
            self.commit_choice(_strip_line_ending(line))
            if self.completed:
                return self.won
        self.state = State.INPUT_CLOSED
        return False

    def _hit(self) -> None:
        try:
            drawn = draw(self.deck)
        except DeckExhaustedError:
            self.logger.warning('Player hit on an empty deck')
            self._say(DECK_EXHAUSTED_MESSAGE)
            self._say(THANKS_MESSAGE)
            self.state = State.DECK_EXHAUSTED
            return
        self.player_cards.extend(drawn)
        player_total = total(self.player_cards)
        self.logger.debug('Player drew {0}, total {1}'.format(drawn[0],
                                                               player_total))
        if player_total > MAX_VALUE:
            print_player_cards(self.player_cards, self.out)
            self._say(BUST_MESSAGE.format(MAX_VALUE))
            self._say(THANKS_MESSAGE)
            self.state = State.PLAYER_BUST
            self.logger.info('Player is bust with {0}'.format(player_total))

    def _stand(self) -> None:
        player_total = total(self.player_cards)
        dealer_total = total(self.dealer_cards)
        if player_total < dealer_total:
            self._say(LOSS_MESSAGE.format(dealer_total, player_total))
            self.state = State.PLAYER_LOSS
        else:
            self._say(WIN_MESSAGE.format(dealer_total, player_total))
            self.state = State.PLAYER_WIN
        self.logger.info('{0}: dealer {1}, player {2}'.format(
            self.state.name, dealer_total, player_total
        ))

    def _say(self, message: str) -> None:
        print(message, file=self.out)


def _strip_line_ending(line: str) -> str:
    """ Remove a single trailing "\\n" or "\\r\\n", nothing more. """
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def play_round(rng: np.random.Generator,
               lines: Optional[Iterable[str]] = None,
               out: Optional[TextIO] = None) -> bool:
    """
    Play one round, reading choices from standard input by default.

    Parameters
    ----------
    rng : np.random.Generator
        The random source used to shuffle the deck
    lines : Optional[Iterable[str]]
        The player's choices, one per line. If None, read from `sys.stdin`.
    out : Optional[TextIO]
        Where to render the table. If None, write to `sys.stdout`.
    """
    if lines is None:
        lines = sys.stdin
    return get_round(rng, out=out).play(lines)
