from blackjack.card import Card, deserialize, Rank, rank_value, Suit
from blackjack.constants import *
from blackjack.deck import (
    build_deck,
    DeckExhaustedError,
    draw,
    get_rng,
    shuffle,
    shuffled_deck
)
from blackjack.game import get_round, play_round, Round, State
from blackjack.hand import total
