"""
Run many independent deals and summarise them.

Each deal gets its own seed derived from the run seed, so a run is
reproducible and any single deal can be replayed on its own.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List

import numpy as np

from .agents import BidStrategy, FirstLegalPlayer, HandValueBidder, PlayStrategy
from .bidding import Bid
from .deal import RandomSource
from .game import DealResult, play_one_deal


@dataclass
class SimulationConfig:
    """Settings for a batch of simulated deals."""

    num_deals: int = 1000
    seed: int = 0


@dataclass
class SimulationSummary:
    """Per-deal results of a batch plus derived statistics."""

    results: List[DealResult] = field(default_factory=list)

    @property
    def player_scores(self) -> np.ndarray:
        return np.array([r.player_score for r in self.results], dtype=np.int64)

    @property
    def defender_scores(self) -> np.ndarray:
        return np.array([r.defender_score for r in self.results], dtype=np.int64)

    @property
    def _played(self) -> np.ndarray:
        return np.array([r.game != Bid.PASSED for r in self.results], dtype=bool)

    @property
    def pass_rate(self) -> float:
        if not self.results:
            return 0.0
        return float(1.0 - self._played.mean())

    @property
    def win_rate(self) -> float:
        """Share of played deals (with a declarer) that the declarer won."""
        played = self._played
        if not played.any():
            return 0.0
        won = np.array([r.won for r in self.results], dtype=bool)
        return float(won[played].mean())

    @property
    def mean_player_score(self) -> float:
        played = self._played
        if not played.any():
            return 0.0
        return float(self.player_scores[played].mean())

    @property
    def mean_defender_score(self) -> float:
        played = self._played
        if not played.any():
            return 0.0
        return float(self.defender_scores[played].mean())

    def bid_counts(self) -> Dict[str, int]:
        counts = {b.name.lower(): 0 for b in Bid}
        for r in self.results:
            counts[r.game.name.lower()] += 1
        return counts

    def as_dict(self) -> Dict[str, object]:
        return {
            "deals": len(self.results),
            "pass_rate": round(self.pass_rate, 4),
            "win_rate": round(self.win_rate, 4),
            "mean_player_score": round(self.mean_player_score, 2),
            "mean_defender_score": round(self.mean_defender_score, 2),
            "bids": self.bid_counts(),
        }


def deal_seeds(config: SimulationConfig) -> List[int]:
    rng = random.Random(config.seed)
    return [rng.randrange(2**32) for _ in range(config.num_deals)]


def simulate(
    config: SimulationConfig,
    bidder_factory: Callable[[RandomSource], BidStrategy] | None = None,
    player_factory: Callable[[RandomSource], PlayStrategy] | None = None,
) -> SimulationSummary:
    """
    Run ``config.num_deals`` deals. Factories receive the deal's RandomSource
    and build fresh strategies for it; defaults are the baseline strategies.
    """
    summary = SimulationSummary()
    for seed in deal_seeds(config):
        rng = RandomSource(seed)
        bidder = bidder_factory(rng) if bidder_factory is not None else HandValueBidder()
        player = player_factory(rng) if player_factory is not None else FirstLegalPlayer()
        summary.results.append(play_one_deal(bidder, player, rng=rng))
    return summary


__all__ = ["SimulationConfig", "SimulationSummary", "deal_seeds", "simulate"]
