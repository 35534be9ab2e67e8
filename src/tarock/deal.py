"""
Distribution (deal) and seating for 3 players.
16 cards each to forehand, middlehand and rearhand; the last 6 form the talon.
"""
from __future__ import annotations

import random
from enum import Enum
from typing import NamedTuple, Sequence, TypeVar

from .deck import Card, make_deck_54

T = TypeVar("T")

HAND_SIZE = 16
TALON_SIZE = 6


class Player(Enum):
    """Seats in play order. Forehand bids and leads first."""
    FOREHAND = "forehand"
    MIDDLEHAND = "middlehand"
    REARHAND = "rearhand"


PLAYER_ORDER = (Player.FOREHAND, Player.MIDDLEHAND, Player.REARHAND)


def next_player(player: Player) -> Player:
    """Player to act after ``player`` (forehand -> middlehand -> rearhand -> forehand)."""
    return player_after(player, 1)


def player_after(player: Player, steps: int) -> Player:
    """Player ``steps`` seats after ``player`` in play order."""
    return PLAYER_ORDER[(PLAYER_ORDER.index(player) + steps) % len(PLAYER_ORDER)]


class RandomSource:
    """
    Injectable randomness: deck shuffling, talon pickup reshuffle and coin flips.

    Pass a seed (or a ``random.Random``) for reproducible deals.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def shuffle(self, cards: Sequence[T]) -> list[T]:
        """Return a shuffled copy of ``cards``."""
        out = list(cards)
        self._rng.shuffle(out)
        return out

    def coin_flip(self) -> bool:
        return self._rng.random() < 0.5

    def choice(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)


class Deal3P(NamedTuple):
    """Result of a deal. Hands and talon are lists (can be mutated for play)."""
    hands: dict[Player, list[Card]]
    talon: list[Card]


def deal_hands(deck: list[Card] | None = None, rng: RandomSource | None = None) -> Deal3P:
    """
    Shuffle ``deck`` and deal it in packets of 16.
    Forehand, middlehand and rearhand get one packet each, the rest is the talon.
    """
    if deck is None:
        deck = make_deck_54()
    if rng is None:
        rng = RandomSource()
    if len(deck) != len(PLAYER_ORDER) * HAND_SIZE + TALON_SIZE:
        raise ValueError(f"Cannot deal {len(deck)} cards")
    shuffled = rng.shuffle(deck)

    hands = {
        player: shuffled[i * HAND_SIZE:(i + 1) * HAND_SIZE]
        for i, player in enumerate(PLAYER_ORDER)
    }
    talon = shuffled[len(PLAYER_ORDER) * HAND_SIZE:]
    return Deal3P(hands=hands, talon=talon)


def split_talon(talon: Sequence[Card]) -> tuple[list[Card], list[Card]]:
    """Upper half is the first three cards, lower half the last three."""
    half = TALON_SIZE // 2
    return list(talon[:half]), list(talon[half:])
