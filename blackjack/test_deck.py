""" Basic tests for building, shuffling and drawing from the deck. """

import numpy as np
import pytest

from blackjack.card import Card, Rank, Suit
from blackjack.deck import (
    build_deck,
    DeckExhaustedError,
    draw,
    get_rng,
    shuffle
)

# Chi-square critical value for 51 degrees of freedom at p = 1e-5
CHI_SQUARE_LIMIT = 106.0


@pytest.fixture()
def deck():
    return build_deck()


def test_build_deck(deck):
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert set(deck) == {Card(r, s) for r in Rank for s in Suit}


def test_canonical_order(deck):
    assert deck[0] == Card(Rank.TWO, Suit.SPADES)
    assert deck[12] == Card(Rank.ACE, Suit.SPADES)
    assert deck[13] == Card(Rank.TWO, Suit.HEARTS)
    assert deck[-1] == Card(Rank.ACE, Suit.CLUBS)
    assert sorted(deck) == deck
    assert build_deck() == deck


def test_shuffle_keeps_cards(deck):
    shuffle(deck, get_rng(0))
    assert len(deck) == 52
    assert sorted(deck) == build_deck()
    assert deck != build_deck()


def test_seeded_shuffle_repeats():
    first, second = build_deck(), build_deck()
    shuffle(first, get_rng(42))
    shuffle(second, get_rng(42))
    assert first == second


def test_shuffle_has_no_positional_bias():
    canonical = build_deck()
    index = {c: i for i, c in enumerate(canonical)}
    trials = 5200
    counts = np.zeros((52, 52))
    rng = get_rng(2024)
    for _ in range(trials):
        deck = list(canonical)
        shuffle(deck, rng)
        for position, card in enumerate(deck):
            counts[index[card], position] += 1
    expected = trials / 52
    chi_square = ((counts - expected) ** 2 / expected).sum(axis=1)
    assert (chi_square < CHI_SQUARE_LIMIT).all()


def test_draw_takes_from_the_end(deck):
    drawn = draw(deck, 2)
    assert drawn == [Card(Rank.KING, Suit.CLUBS), Card(Rank.ACE, Suit.CLUBS)]
    assert len(deck) == 50
    assert draw(deck) == [Card(Rank.QUEEN, Suit.CLUBS)]
    assert draw(deck, 0) == []
    assert len(deck) == 49


def test_overdraw(deck):
    draw(deck, 51)
    with pytest.raises(DeckExhaustedError):
        draw(deck, 2)
    # A failed draw leaves the deck alone
    assert deck == [Card(Rank.TWO, Suit.SPADES)]
    draw(deck)
    with pytest.raises(ValueError):
        draw(deck)


def test_negative_draw(deck):
    with pytest.raises(ValueError):
        draw(deck, -1)
    assert len(deck) == 52
