"""
Tarock deck: 54 cards (4 suits × 8, 22 trumps).
Red suits rank 4, 3, 2, 1 below the faces; black suits 7..10 below the faces.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


class Suit(Enum):
    """Hearts and diamonds are the red group, clubs and spades the black group."""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"
    TRUMP = "trump"


class Face(Enum):
    JACK = "jack"
    RIDER = "rider"
    QUEEN = "queen"
    KING = "king"


Rank = Union[int, Face]

RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)
BLACK_SUITS = (Suit.CLUBS, Suit.SPADES)

# Reference sequences, authored as in the rule sheet.
RED_RANKS: tuple[Rank, ...] = (4, 3, 2, 1, Face.JACK, Face.RIDER, Face.QUEEN, Face.KING)
BLACK_RANKS: tuple[Rank, ...] = (7, 8, 9, 10, Face.JACK, Face.RIDER, Face.QUEEN, Face.KING)

TRUMP_COUNT = 22
DECK_SIZE = 54


def _is_face(rank: Rank) -> bool:
    return isinstance(rank, Face)


@dataclass(frozen=True)
class Card:
    """
    A single tarock card. Either:
    - trump: rank 1..22 (no faces)
    - red: rank in RED_RANKS
    - black: rank in BLACK_RANKS
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if self.suit is Suit.TRUMP:
            if not isinstance(self.rank, int) or not 1 <= self.rank <= TRUMP_COUNT:
                raise ValueError(f"Invalid trump rank: {self.rank!r}")
        elif self.rank not in reference_ranks(self.suit):
            raise ValueError(f"Invalid rank {self.rank!r} for {self.suit.value}")

    def is_trump(self) -> bool:
        return self.suit is Suit.TRUMP

    def is_face(self) -> bool:
        return _is_face(self.rank)

    def is_king(self) -> bool:
        return self.rank is Face.KING

    def __str__(self) -> str:
        if self.is_trump():
            return f"Tarock-{self.rank}"
        rank_str = self.rank.name.capitalize() if self.is_face() else str(self.rank)
        suit_char = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }[self.suit]
        return f"{rank_str}{suit_char}"

    def __repr__(self) -> str:
        return str(self)


def reference_ranks(suit: Suit) -> tuple[Rank, ...]:
    """Reference sequence for a coloured suit's group."""
    if suit in RED_SUITS:
        return RED_RANKS
    if suit in BLACK_SUITS:
        return BLACK_RANKS
    raise ValueError(f"{suit.value} has no reference sequence")


def listed_greater(a: Rank, b: Rank, reference: Sequence[Rank]) -> bool:
    """
    Scan ``reference`` reversed and report whether ``a`` is reached before ``b``.

    The reference is read as higher-to-lower once reversed, so equal ranks
    compare as False. Ranks missing from the reference raise ValueError.
    """
    for rank in reversed(reference):
        if rank == b:
            return False
        if rank == a:
            return True
    raise ValueError(f"Neither {a!r} nor {b!r} is in {list(reference)!r}")


def card_greater(a: Card, b: Card) -> bool:
    """Compare the ranks of two cards ``a`` and ``b`` of the same suit."""
    if a.suit is not b.suit:
        raise ValueError(f"Cannot compare {a} and {b}: different suits")
    if a.suit is Suit.TRUMP:
        return a.rank > b.rank
    # TODO: confirm the scan direction against the printed rule sheet for both groups.
    return listed_greater(a.rank, b.rank, reference_ranks(a.suit))


def make_trump_card(number: int) -> Card:
    return Card(rank=number, suit=Suit.TRUMP)


def make_suit_card(suit: Suit, rank: Rank) -> Card:
    return Card(rank=rank, suit=suit)


def make_deck_54() -> list[Card]:
    """Build the full 54-card deck (red, then black, then trumps)."""
    deck: list[Card] = []
    for rank in RED_RANKS:
        for suit in RED_SUITS:
            deck.append(make_suit_card(suit, rank))
    for rank in BLACK_RANKS:
        for suit in BLACK_SUITS:
            deck.append(make_suit_card(suit, rank))
    for n in range(1, TRUMP_COUNT + 1):
        deck.append(make_trump_card(n))
    return deck
