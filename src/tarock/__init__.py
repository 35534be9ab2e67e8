"""Three-player tarock deal engine (54-card deck)."""

__version__ = "0.1.0"

from .deck import Card, Face, Suit, card_greater, make_deck_54
from .deal import Player, RandomSource, deal_hands, next_player, split_talon
from .bidding import BID_LADDER, Bid, run_auction
from .play import playable_cards, trick_winner, winning_player
from .scoring import card_points, evaluate_points
from .agents import FirstLegalPlayer, HandValueBidder
from .game import DealResult, DealState, play_one_deal, run_deal
