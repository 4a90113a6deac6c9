"""
Building, shuffling and dealing from a 52-card deck.

The random source is never global: a `numpy.random.Generator` is created once
with `get_rng` and handed to everything that shuffles.
"""

import logging
from typing import List, Optional

import numpy as np

from blackjack.card import Card, Rank, Suit


class DeckExhaustedError(ValueError):
    """ Raised when more cards are drawn than the deck still holds. """


def get_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Return the random source for this process.

    Parameters
    ----------
    seed : Optional[int]
        Makes every shuffle reproducible. If None, fresh entropy is pulled
        from the operating system.
    """
    return np.random.default_rng(seed)


def build_deck() -> List[Card]:
    """ Return the 52 cards in suit-major, rank-minor order. """
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle(deck: List[Card], rng: np.random.Generator) -> None:
    """ Permute `deck` in place, every ordering being equally likely. """
    order = rng.permutation(len(deck))
    deck[:] = [deck[i] for i in order]


def shuffled_deck(rng: np.random.Generator) -> List[Card]:
    deck = build_deck()
    shuffle(deck, rng)
    logging.getLogger(__name__).debug(
        'Shuffled a fresh deck of {0} cards'.format(len(deck))
    )
    return deck


def draw(deck: List[Card], n: int = 1) -> List[Card]:
    """
    Remove the last `n` cards from `deck` and return them in order.

    The deck is left untouched if it holds fewer than `n` cards.

    Parameters
    ----------
    deck : List[Card]
        The deck to deal from
    n : int
        The number of cards to take off the end
    """
    if n < 0:
        raise ValueError('Cannot draw a negative number of cards')
    if n > len(deck):
        raise DeckExhaustedError(
            'Cannot draw {0} cards from a deck of {1}'.format(n, len(deck))
        )
    if n == 0:
        return []
    drawn = deck[-n:]
    del deck[-n:]
    return drawn
