""" Basic tests for `Cards` and hand totals. """

import pytest

from blackjack.card import Card, deserialize, Rank, rank_value, Suit
from blackjack.hand import total


def test_rank_values():
    for r in (Rank.TWO, Rank.FIVE, Rank.NINE, Rank.TEN):
        assert rank_value(r) == r.value
    for r in (Rank.JACK, Rank.QUEEN, Rank.KING):
        assert rank_value(r) == 10
    assert rank_value(Rank.ACE) == 11


def test_card_label():
    assert str(Card(Rank.KING, Suit.SPADES)) == 'King of Spades'
    assert str(Card(Rank.TWO, Suit.HEARTS)) == 'Two of Hearts'
    assert str(Card(Rank.ACE, Suit.CLUBS)) == 'Ace of Clubs'


def test_card_equality():
    assert Card(Rank.TEN, Suit.DIAMONDS) == Card(Rank.TEN, Suit.DIAMONDS)
    assert Card(Rank.TEN, Suit.DIAMONDS) != Card(Rank.TEN, Suit.HEARTS)
    assert Card(Rank.TEN, Suit.DIAMONDS) != Card(Rank.NINE, Suit.DIAMONDS)
    assert len({Card(Rank.TEN, Suit.DIAMONDS),
                Card(Rank.TEN, Suit.DIAMONDS)}) == 1


def test_card_is_immutable():
    card = Card(Rank.QUEEN, Suit.HEARTS)
    with pytest.raises(AttributeError):
        card.rank = Rank.KING


def test_serialization():
    assert Card(Rank.TEN, Suit.HEARTS).serialize() == '10H'
    assert deserialize('k', 's') == Card(Rank.KING, Suit.SPADES)
    for r in Rank:
        for s in Suit:
            c = Card(r, s)
            assert deserialize(c.serialize()[:-1], c.serialize()[-1]) == c
    with pytest.raises(ValueError):
        deserialize('1', 'S')
    with pytest.raises(ValueError):
        deserialize('A', 'X')


def test_ace_is_always_eleven():
    # No soft totals: an Ace never drops to 1
    assert total([deserialize('K', 'S'), deserialize('A', 'H')]) == 21
    assert total([deserialize('A', 'S'), deserialize('A', 'H')]) == 22


def test_total():
    assert total([]) == 0
    hand = [deserialize('2', 'C'), deserialize('J', 'D'), deserialize('7', 'S')]
    assert total(hand) == 19
    assert total(reversed(hand)) == 19
