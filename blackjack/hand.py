from typing import Iterable

from blackjack.card import Card


def total(hand: Iterable[Card]) -> int:
    """ Sum the point values of every `Card` in `hand`, without a cap. """
    return sum(c.rank.points for c in hand)
