"""
Trick-taking: legal moves and trick winner.
Follow suit if possible, otherwise play a trump if possible, otherwise discard any card.
"""
from __future__ import annotations

from typing import Callable, Sequence

from .deal import Player, player_after
from .deck import Card, Suit, card_greater


def filter_suit(suit: Suit, cards: Sequence[Card]) -> list[Card]:
    """Cards in ``cards`` of the suit ``suit``."""
    return [c for c in cards if c.suit is suit]


def remove_from(cards: Sequence[Card], card: Card) -> list[Card]:
    """Drop every element equal to ``card``. Leaves ``cards`` as is if it is absent."""
    return [c for c in cards if c != card]


def playable_cards(led_card: Card | None, hand: Sequence[Card]) -> list[Card]:
    """Cards from ``hand`` that can legally be played to ``led_card`` (None when leading)."""
    if led_card is None:
        return list(hand)
    same_suit = filter_suit(led_card.suit, hand)
    if same_suit:
        return same_suit
    trumps = filter_suit(Suit.TRUMP, hand)
    if trumps:
        return trumps
    return list(hand)


def best(greater: Callable[[Card, Card], bool], cards: Sequence[Card]) -> Card:
    """Fold ``cards`` keeping the current best whenever it beats the challenger."""
    if not cards:
        raise ValueError("No cards to choose from")
    winner = cards[0]
    for card in cards[1:]:
        if not greater(winner, card):
            winner = card
    return winner


def trick_winner(ground: Sequence[Card]) -> Card:
    """
    The card that wins the trick on ``ground``.
    Highest trump if any was played, else the highest card of the suit led.
    """
    trumps = filter_suit(Suit.TRUMP, ground)
    if trumps:
        return best(card_greater, trumps)
    return best(card_greater, filter_suit(ground[0].suit, ground))


def winning_player(leader: Player, ground: Sequence[Card]) -> Player:
    """Player who played the winning card, counted from ``leader``."""
    return player_after(leader, list(ground).index(trick_winner(ground)))
