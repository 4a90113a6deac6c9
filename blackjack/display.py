"""
Rendering of the table to the terminal.

Every function writes to `out`, which defaults to the current `sys.stdout`.
"""

from typing import List, Optional, TextIO

from blackjack.card import Card
from blackjack.constants import CLEAR_SCREEN, HIDDEN_CARD
from blackjack.hand import total


def clear_screen(out: Optional[TextIO] = None) -> None:
    print(CLEAR_SCREEN, end='', file=out)


def print_dealer_cards(cards: List[Card], out: Optional[TextIO] = None) -> None:
    """
    Print the dealer's hand. The first `Card` is always hidden, no matter
    how many `Cards` the dealer holds.
    """
    print("Dealer cards:", file=out)
    for i, card in enumerate(cards):
        if i == 0:
            print("* {0}".format(HIDDEN_CARD), file=out)
        else:
            print("* {0}".format(card), file=out)
    print("", file=out)


def print_player_cards(cards: List[Card], out: Optional[TextIO] = None) -> None:
    print("Your cards:", file=out)
    for card in cards:
        print("* {0}".format(card), file=out)
    print("* Total: {0}".format(total(cards)), file=out)
    print("", file=out)


def print_player_options(out: Optional[TextIO] = None) -> None:
    print("\nOptions\n1.) Hit\n2.) Stay\n    ", file=out)
