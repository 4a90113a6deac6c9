"""
Classes related to the definition of what a `Card` is.
"""

from enum import Enum
from functools import total_ordering

from blackjack.constants import RANK_SYMBOLS, RANK_VALUES


@total_ordering
class Suit(Enum):
    SPADES = 1
    HEARTS = 2
    DIAMONDS = 3
    CLUBS = 4

    def __lt__(self, other):
        return self.value < other.value

    def __str__(self):
        return self.name.title()


@total_ordering
class Rank(Enum):
    """
    A `Card` value: 2 - 10, Jack, Queen, King, or Ace, ordered by position.
    """
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __lt__(self, other):
        return self.value < other.value

    def __str__(self):
        return self.name.title()

    @property
    def points(self) -> int:
        return RANK_VALUES[self.value]

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self.value]


def rank_value(rank: Rank) -> int:
    """ Return the number of points a `Rank` is worth in a hand. """
    return rank.points


@total_ordering
class Card:
    """
    An immutable playing card. Two `Cards` are equal if both the `Rank` and
    the `Suit` match. `Cards` sort suit-major, rank-minor, which is the order
    a fresh deck is built in.

    Examples
    --------
    >>> str(Card(Rank.KING, Suit.SPADES))
    'King of Spades'
    >>> Card(Rank.TEN, Suit.HEARTS).serialize()
    '10H'
    """
    __slots__ = ('_rank', '_suit')

    def __init__(self, rank: Rank, suit: Suit):
        self._rank = rank
        self._suit = suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __lt__(self, other):
        if self.suit != other.suit:
            return self.suit < other.suit
        return self.rank < other.rank

    def __hash__(self):
        return hash((self.rank, self.suit))

    def __str__(self):
        return "{0} of {1}".format(self.rank, self.suit)

    def __repr__(self):
        return "Card({0})".format(self.serialize())

    def serialize(self) -> str:
        return "{0}{1}".format(self.rank.symbol, self.suit.name[0])


def deserialize(rank: str, suit: str) -> Card:
    """
    Convert a serialized card string to a `Card`.

    Parameters
    ----------
    rank : str
        2, 3, ..., 10, J, Q, K, A
    suit : str
        S, H, D, C
    """
    suit_map = {s.name[0]: s for s in Suit}
    rank_map = {r.symbol: r for r in Rank}
    if rank.upper() not in rank_map:
        raise ValueError("Unknown rank: {0}".format(rank))
    if suit.upper() not in suit_map:
        raise ValueError("Unknown suit: {0}".format(suit))
    return Card(rank_map[rank.upper()], suit_map[suit.upper()])
