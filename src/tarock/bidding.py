"""
Bidding (auction) for 3 players.
Order: Small < Under < Over < Solo. Forehand speaks first; each turn the player
is offered the next bid up the ladder and either takes it or passes.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING

from .deal import Player, next_player

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .agents import BidStrategy
    from .game import DealState

logger = logging.getLogger(__name__)


class Bid(IntEnum):
    """Contract levels in ascending order. PASSED marks an auction nobody took."""
    PASSED = 0
    SMALL = 1
    UNDER = 2
    OVER = 3
    SOLO = 4


BID_LADDER = (Bid.SMALL, Bid.UNDER, Bid.OVER, Bid.SOLO)

PASSES_TO_CLOSE = 2  # passes after the last bid that end the auction
PASSES_TO_ABANDON = 3  # passes with no bid that end the auction


def possible_bids(game: Bid | None) -> tuple[Bid, ...]:
    """Bids strictly above ``game`` (the whole ladder when nobody has bid yet)."""
    if game is None:
        return BID_LADDER
    if game is Bid.PASSED:
        return ()
    return tuple(b for b in BID_LADDER if b > game)


def next_bid(game: Bid | None) -> Bid:
    """The bid a player is offered on top of ``game``."""
    bids = possible_bids(game)
    if not bids:
        raise ValueError(f"No bid left above {game!r}")
    return bids[0]


def auction_over(state: "DealState") -> bool:
    """
    True once the auction has a result: the ladder is exhausted, the last bid
    drew two passes, or everyone passed without a bid.
    """
    if not possible_bids(state.game):
        # Highest bid reached, or the auction was already abandoned.
        return True
    if state.game is not None and state.pass_count - state.passes_at_bid >= PASSES_TO_CLOSE:
        return True
    return state.game is None and state.pass_count >= PASSES_TO_ABANDON


def auction_step(state: "DealState", bidder: "BidStrategy") -> None:
    """Offer the next bid to the player whose turn it is and apply the answer."""
    player: Player = state.turn
    offered = next_bid(state.game)
    if bidder.accept_bid(offered, state.hands[player], player):
        logger.debug("%s bids %s", player.value, offered.name)
        state.game = offered
        state.declarer = player
        state.passes_at_bid = state.pass_count
        state.auction_history.append((player, offered))
    else:
        logger.debug("%s passes on %s", player.value, offered.name)
        state.pass_count += 1
        state.auction_history.append((player, None))
    state.turn = next_player(player)


def run_auction(state: "DealState", bidder: "BidStrategy") -> Bid:
    """
    Loop over ``state`` until a player wins a bid or all players pass.
    Returns the final game (a ladder bid or PASSED).
    """
    while not auction_over(state):
        auction_step(state, bidder)
    if state.game is None:
        state.game = Bid.PASSED
    logger.debug("Auction closed: %s by %s", state.game.name,
                 state.declarer.value if state.declarer else "nobody")
    return state.game
