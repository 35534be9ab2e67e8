"""
Score calculation: card points counted in groups of three.
Each group of 3 cards is worth (sum of card points) - 2; 70 points per deal.
"""
from __future__ import annotations

from typing import Sequence

from .deck import Card, Face

# Trulls: Pagat (1), Mond (21), Škis (22)
TRULLS = (1, 21, 22)
TRULL_POINTS = 5

FACE_POINTS = {Face.JACK: 2, Face.RIDER: 3, Face.QUEEN: 4, Face.KING: 5}

GROUP_SIZE = 3
GROUP_DEDUCTION = 2

TOTAL_DEAL_POINTS = 70


def is_trull(card: Card) -> bool:
    return card.is_trump() and card.rank in TRULLS


def card_points(card: Card) -> int:
    """Trulls and kings 5, queen 4, rider 3, jack 2, everything else 1."""
    if card.is_trump():
        return TRULL_POINTS if card.rank in TRULLS else 1
    if card.is_face():
        return FACE_POINTS[card.rank]
    return 1


def score_group(three_cards: Sequence[Card]) -> int:
    """Sum the values of ``three_cards`` and subtract two."""
    return sum(card_points(c) for c in three_cards) - GROUP_DEDUCTION


def evaluate_points(cards: Sequence[Card]) -> int:
    """
    Convert ``cards`` won by a side into a numeric score.

    The cards are split into consecutive groups of three, so the length
    must be a multiple of three.
    """
    if len(cards) % GROUP_SIZE != 0:
        raise ValueError(f"Cannot score {len(cards)} cards: not a multiple of {GROUP_SIZE}")
    return sum(
        score_group(cards[i:i + GROUP_SIZE])
        for i in range(0, len(cards), GROUP_SIZE)
    )


def count_trulls(cards: Sequence[Card]) -> int:
    return sum(1 for c in cards if is_trull(c))


def count_kings(cards: Sequence[Card]) -> int:
    return sum(1 for c in cards if c.is_king())
