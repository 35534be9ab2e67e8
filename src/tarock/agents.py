"""
Baseline strategies and the strategy interfaces used by the deal engine.

Two small protocols define what the engine asks of a player:

- ``BidStrategy.accept_bid(bid, hand, player) -> bool`` during the auction;
- ``PlayStrategy.choose_card(state, player, legal) -> card`` during trick play.

The shipped strategies are deliberately simple; anything implementing the
protocols can replace them without touching the rules.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Protocol, Sequence

from .bidding import Bid
from .deal import Player, RandomSource
from .deck import Card, Suit
from .play import filter_suit
from .scoring import count_kings

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .game import DealState


class BidStrategy(Protocol):
    def accept_bid(self, bid: Bid, hand: Sequence[Card], player: Player) -> bool:
        """Return True for ``player`` to take ``bid`` with ``hand``, False to pass."""


class PlayStrategy(Protocol):
    def choose_card(self, state: "DealState", player: Player, legal: Sequence[Card]) -> Card:
        """
        Pick the card ``player`` plays.

        Implementations must return one of ``legal``; the engine rejects
        anything else.
        """


DEFAULT_BID_THRESHOLDS: Dict[Bid, int] = {
    Bid.SMALL: 11,
    Bid.UNDER: 12,
    Bid.OVER: 13,
    Bid.SOLO: 14,
}


def hand_value(hand: Sequence[Card], high_trump: int = 16) -> int:
    """Trumps, plus trumps ranked above ``high_trump`` once more, plus kings."""
    trumps = filter_suit(Suit.TRUMP, hand)
    return (
        len(trumps)
        + sum(1 for c in trumps if c.rank > high_trump)
        + count_kings(hand)
    )


@dataclass
class HandValueBidder:
    """
    Guess if a hand is good enough for a bid: accept when ``hand_value``
    exceeds the threshold for the bid offered.
    """

    thresholds: Dict[Bid, int] = field(default_factory=lambda: dict(DEFAULT_BID_THRESHOLDS))
    high_trump: int = 16

    def accept_bid(self, bid: Bid, hand: Sequence[Card], player: Player) -> bool:
        return hand_value(hand, self.high_trump) > self.thresholds[bid]


@dataclass
class CoinFlipBidder:
    """Takes any bid on a fair coin flip."""

    rng: RandomSource = field(default_factory=RandomSource)

    def accept_bid(self, bid: Bid, hand: Sequence[Card], player: Player) -> bool:
        return self.rng.coin_flip()


class NeverBidder:
    """Passes every offer."""

    def accept_bid(self, bid: Bid, hand: Sequence[Card], player: Player) -> bool:
        return False


@dataclass
class FixedBidder:
    """
    Drives the auction to ``target``. Handy for forcing a contract in tests.

    Without ``player``, every seat accepts every offer up to and including
    ``target``. With ``player``, the other seats push the ladder up to just
    below ``target`` and only ``player`` takes ``target`` itself, so
    ``player`` ends up declarer.
    """

    target: Bid
    player: Player | None = None

    def accept_bid(self, bid: Bid, hand: Sequence[Card], player: Player) -> bool:
        if self.player is None:
            return bid <= self.target
        if player == self.player:
            return bid == self.target
        return bid < self.target


class FirstLegalPlayer:
    """Plays the first legal card."""

    def choose_card(self, state: "DealState", player: Player, legal: Sequence[Card]) -> Card:
        return legal[0]


@dataclass
class RandomPlayer:
    """
    Baseline strategy that plays uniformly among legal cards.

    Usage:
        player = RandomPlayer(seed=42)
        card = player.choose_card(state, Player.FOREHAND, legal)
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = RandomSource(self.seed)

    def choose_card(self, state: "DealState", player: Player, legal: Sequence[Card]) -> Card:
        if not legal:
            raise ValueError("No legal cards available for RandomPlayer")
        return self._rng.choice(list(legal))


__all__ = [
    "BidStrategy",
    "PlayStrategy",
    "DEFAULT_BID_THRESHOLDS",
    "hand_value",
    "HandValueBidder",
    "CoinFlipBidder",
    "NeverBidder",
    "FixedBidder",
    "FirstLegalPlayer",
    "RandomPlayer",
]
