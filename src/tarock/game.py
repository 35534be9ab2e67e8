"""
Single deal orchestration: deal → auction → talon → play → tally.
Three players, one declarer against two defenders; no match scoring.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .agents import BidStrategy, FirstLegalPlayer, HandValueBidder, PlayStrategy
from .bidding import Bid, run_auction
from .deal import (
    PLAYER_ORDER,
    Deal3P,
    Player,
    RandomSource,
    deal_hands,
    next_player,
    split_talon,
)
from .deck import Card
from .play import playable_cards, remove_from, winning_player
from .scoring import evaluate_points

logger = logging.getLogger(__name__)

TRICK_SIZE = len(PLAYER_ORDER)


@dataclass
class DealState:
    """Mutable state for one deal: hands, talon, ground, auction and scores."""

    hands: Dict[Player, List[Card]]
    talon: List[Card] = field(default_factory=list)
    turn: Player = Player.FOREHAND
    ground: List[Card] = field(default_factory=list)
    discard: List[Card] = field(default_factory=list)
    # Cards laid away by the declarer and talon halves scored without being picked up
    set_aside: List[Card] = field(default_factory=list)
    game: Bid | None = None
    declarer: Player | None = None
    pass_count: int = 0
    passes_at_bid: int = 0
    auction_history: List[Tuple[Player, Bid | None]] = field(default_factory=list)
    player_score: int = 0
    defender_score: int = 0

    @classmethod
    def from_deal(cls, deal: Deal3P) -> "DealState":
        return cls(
            hands={p: list(deal.hands[p]) for p in PLAYER_ORDER},
            talon=list(deal.talon),
        )

    def card_count(self) -> int:
        """
        Cards accounted for across hands, discard, talon and set-aside pile.

        Ground cards are already on the discard, so they are not counted again.
        """
        return (
            sum(len(h) for h in self.hands.values())
            + len(self.discard)
            + len(self.talon)
            + len(self.set_aside)
        )

    def is_declarer(self, player: Player) -> bool:
        return player == self.declarer

    def legal_cards(self, player: Player) -> List[Card]:
        led = self.ground[0] if self.ground else None
        return playable_cards(led, self.hands[player])

    def play_card(self, player: Player, card: Card) -> None:
        """Move ``card`` from ``player``'s hand to the ground and discard, then pass the turn."""
        self.hands[player] = remove_from(self.hands[player], card)
        self.ground.append(card)
        self.discard.append(card)
        self.turn = next_player(player)

    def resolve_trick(self) -> Player:
        """Score the three cards on the ground for the winner's side; the winner leads next."""
        # turn has come back round to the player who led
        winner = winning_player(self.turn, self.ground)
        points = evaluate_points(self.ground)
        if self.is_declarer(winner):
            self.player_score += points
        else:
            self.defender_score += points
        logger.debug("Trick %s won by %s for %d", self.ground, winner.value, points)
        self.ground = []
        self.turn = winner
        return winner


@dataclass(frozen=True)
class DealResult:
    """What is left of a deal once it is over."""

    player_score: int
    defender_score: int
    won: bool
    game: Bid
    declarer: Player | None = None

    @classmethod
    def from_state(cls, state: DealState) -> "DealResult":
        return cls(
            player_score=state.player_score,
            defender_score=state.defender_score,
            won=state.player_score > state.defender_score,
            game=state.game if state.game is not None else Bid.PASSED,
            declarer=state.declarer,
        )


def _pickup_cards(state: DealState, cards: List[Card], rng: RandomSource) -> None:
    """Add ``cards`` to the declarer's hand and reshuffle it."""
    hand = state.hands[state.declarer]
    state.hands[state.declarer] = rng.shuffle(hand + cards)


def _lay_away(state: DealState, n: int) -> None:
    """Set aside the first ``n`` cards of the declarer's hand, scored for the declarer."""
    hand = state.hands[state.declarer]
    laid, state.hands[state.declarer] = hand[:n], hand[n:]
    state.player_score += evaluate_points(laid)
    state.set_aside.extend(laid)


def _score_for_defenders(state: DealState, cards: List[Card]) -> None:
    state.defender_score += evaluate_points(cards)
    state.set_aside.extend(cards)


def distribute_talon(state: DealState, rng: RandomSource) -> None:
    """Incorporate the talon into the state according to the result of the auction."""
    talon, state.talon = state.talon, []
    upper, lower = split_talon(talon)
    game = state.game

    if game == Bid.SMALL:
        _pickup_cards(state, talon, rng)
        _lay_away(state, len(talon))
    elif game == Bid.OVER:
        _pickup_cards(state, upper, rng)
        _lay_away(state, len(upper))
        _score_for_defenders(state, lower)
    elif game == Bid.UNDER:
        _pickup_cards(state, lower, rng)
        _lay_away(state, len(lower))
        _score_for_defenders(state, upper)
    elif game == Bid.SOLO:
        _score_for_defenders(state, talon)
    else:
        # Everyone passed: the talon stays where it is.
        state.talon = talon
        return
    logger.debug(
        "Talon distributed for %s: player %d, defenders %d",
        game.name, state.player_score, state.defender_score,
    )


def play_tricks(state: DealState, player: PlayStrategy) -> None:
    """Main game loop: play tricks until the player to act has no cards left."""
    while True:
        if len(state.ground) == TRICK_SIZE:
            state.resolve_trick()
            continue
        current = state.turn
        if not state.hands[current]:
            break
        legal = state.legal_cards(current)
        if not legal:
            raise RuntimeError(f"No legal card for {current.value} with ground {state.ground}")
        card = player.choose_card(state, current, legal)
        if card not in legal:
            raise ValueError(f"Illegal play {card}; legal {legal}")
        state.play_card(current, card)


def run_deal(
    state: DealState,
    bidder: BidStrategy,
    player: PlayStrategy,
    rng: RandomSource,
) -> DealResult:
    """
    Run one deal from a freshly dealt state: auction, talon, play, tally.
    A passed auction skips play and leaves both scores at zero.
    """
    run_auction(state, bidder)
    distribute_talon(state, rng)
    # Forehand leads the first trick whoever won the auction.
    state.turn = Player.FOREHAND
    if state.game != Bid.PASSED:
        play_tricks(state, player)
    result = DealResult.from_state(state)
    logger.debug("Deal over: %s", result)
    return result


def play_one_deal(
    bidder: BidStrategy | None = None,
    player: PlayStrategy | None = None,
    rng: RandomSource | None = None,
    deck: List[Card] | None = None,
) -> DealResult:
    """
    Deal a shuffled deck and run the whole deal.
    Defaults: HandValueBidder, FirstLegalPlayer, unseeded RandomSource.
    """
    if bidder is None:
        bidder = HandValueBidder()
    if player is None:
        player = FirstLegalPlayer()
    if rng is None:
        rng = RandomSource()
    state = DealState.from_deal(deal_hands(deck, rng))
    return run_deal(state, bidder, player, rng)
