"""
Constants that define the game's operation.
"""

from typing import Dict

# A hand totalling more than this is bust
MAX_VALUE = 21

# The number of cards dealt to each hand at the start of a round
INITIAL_HAND_SIZE = 2

# Point values, indexed by rank position: 2 - 10, Jack, Queen, King, Ace.
# The Ace is always worth 11.
RANK_VALUES: Dict[int, int] = {i: i for i in range(2, 11)}
RANK_VALUES[11] = 10
RANK_VALUES[12] = 10
RANK_VALUES[13] = 10
RANK_VALUES[14] = 11

RANK_SYMBOLS = {i: str(i) for i in range(2, 11)}
RANK_SYMBOLS[11] = "J"
RANK_SYMBOLS[12] = "Q"
RANK_SYMBOLS[13] = "K"
RANK_SYMBOLS[14] = "A"

# Accepted player input
HIT = "1"
STAND = "2"

HIDDEN_CARD = "??"
CLEAR_SCREEN = "\x1b[2J"

WELCOME_BANNER = "--- Welcome to the Blackjack table! ---"
START_PROMPT = "Press any key to start playing."
TABLE_BANNER = "--- Blackjack table ---"

INVALID_OPTION = "Invalid option. Please select either 'Hit' or 'Stay'."
BUST_MESSAGE = "You went over {0}! Game over."
DECK_EXHAUSTED_MESSAGE = "The deck is out of cards! Game over."
THANKS_MESSAGE = "Thanks for playing!"
LOSS_MESSAGE = "You lost! [Dealer score ({0}) > Player score ({1})]"
WIN_MESSAGE = "You won! [Dealer score: ({0}) < Player score: ({1})]"
