"""Tests for talon distribution, the play loop and whole deals."""
import pytest

from tarock.agents import FirstLegalPlayer, FixedBidder, NeverBidder, RandomPlayer
from tarock.bidding import Bid, run_auction
from tarock.deal import HAND_SIZE, PLAYER_ORDER, Player, RandomSource, deal_hands
from tarock.deck import DECK_SIZE, make_deck_54, make_trump_card
from tarock.game import DealResult, DealState, distribute_talon, play_one_deal, play_tricks, run_deal
from tarock.scoring import TOTAL_DEAL_POINTS, evaluate_points


class ConservationChecker:
    """Plays the first legal card and checks the card count before each play."""

    def __init__(self, forbidden=()):
        self.forbidden = list(forbidden)
        self.plays = 0

    def choose_card(self, state, player, legal):
        assert state.card_count() == DECK_SIZE
        for hand in state.hands.values():
            assert not any(c in hand for c in self.forbidden)
        self.plays += 1
        return legal[0]


def _fixed_state():
    """Unshuffled deck: 16/16/16 in deck order, trumps 17..22 as the talon."""
    deck = make_deck_54()
    hands = {p: deck[i * HAND_SIZE:(i + 1) * HAND_SIZE] for i, p in enumerate(PLAYER_ORDER)}
    return DealState(hands=hands, talon=deck[3 * HAND_SIZE:])


def _auctioned_state(target, seed=9):
    state = DealState.from_deal(deal_hands(rng=RandomSource(seed)))
    run_auction(state, FixedBidder(target))
    return state


def test_solo_talon_goes_to_defenders():
    state = _fixed_state()
    talon = list(state.talon)
    assert talon == [make_trump_card(n) for n in range(17, 23)]
    rng = RandomSource(0)
    run_auction(state, FixedBidder(Bid.SOLO))
    assert state.game is Bid.SOLO

    distribute_talon(state, rng)
    assert state.defender_score == evaluate_points(talon) == 10
    assert state.player_score == 0
    assert state.talon == []
    for hand in state.hands.values():
        assert len(hand) == HAND_SIZE

    checker = ConservationChecker(forbidden=talon)
    state.turn = Player.FOREHAND
    play_tricks(state, checker)
    assert checker.plays == 3 * HAND_SIZE
    assert state.player_score + state.defender_score == TOTAL_DEAL_POINTS


def test_card_count_mid_trick():
    state = _fixed_state()
    run_auction(state, FixedBidder(Bid.SOLO))
    distribute_talon(state, RandomSource(0))
    state.turn = Player.FOREHAND
    for expected_ground in (1, 2, 3):
        player = state.turn
        state.play_card(player, state.legal_cards(player)[0])
        assert len(state.ground) == expected_ground
        assert all(c in state.discard for c in state.ground)
        assert state.card_count() == DECK_SIZE
    state.resolve_trick()
    assert state.ground == []
    assert state.card_count() == DECK_SIZE


def test_small_declarer_takes_whole_talon():
    state = _auctioned_state(Bid.SMALL)
    declarer = state.declarer
    distribute_talon(state, RandomSource(1))
    assert len(state.hands[declarer]) == HAND_SIZE
    assert len(state.set_aside) == 6
    assert state.player_score == evaluate_points(state.set_aside)
    assert state.defender_score == 0
    assert state.card_count() == DECK_SIZE


def test_over_declarer_takes_upper_half():
    state = _auctioned_state(Bid.OVER)
    upper, lower = state.talon[:3], state.talon[3:]
    declarer = state.declarer
    assert declarer is Player.REARHAND
    distribute_talon(state, RandomSource(1))
    assert len(state.hands[declarer]) == HAND_SIZE
    assert state.defender_score == evaluate_points(lower)
    for hand in state.hands.values():
        assert not any(c in hand for c in lower)
    laid = [c for c in state.set_aside if c not in lower]
    assert len(laid) == 3
    assert state.player_score == evaluate_points(laid)
    assert all(c in state.hands[declarer] or c in laid for c in upper)
    assert state.card_count() == DECK_SIZE


def test_under_declarer_takes_lower_half():
    state = _auctioned_state(Bid.UNDER)
    upper, lower = state.talon[:3], state.talon[3:]
    declarer = state.declarer
    assert declarer is Player.MIDDLEHAND
    distribute_talon(state, RandomSource(1))
    assert state.defender_score == evaluate_points(upper)
    for hand in state.hands.values():
        assert not any(c in hand for c in upper)
    assert all(c in state.hands[declarer] or c in state.set_aside for c in lower)
    assert state.card_count() == DECK_SIZE


def test_passed_deal_is_void():
    state = DealState.from_deal(deal_hands(rng=RandomSource(4)))
    result = run_deal(state, NeverBidder(), FirstLegalPlayer(), RandomSource(4))
    assert result == DealResult(player_score=0, defender_score=0, won=False, game=Bid.PASSED)
    assert len(state.talon) == 6
    assert state.discard == []
    assert all(len(h) == HAND_SIZE for h in state.hands.values())


@pytest.mark.parametrize("target", [Bid.SMALL, Bid.UNDER, Bid.OVER, Bid.SOLO])
def test_full_deal_conserves_cards_and_points(target):
    state = DealState.from_deal(deal_hands(rng=RandomSource(17)))
    checker = ConservationChecker()
    result = run_deal(state, FixedBidder(target), checker, RandomSource(17))
    assert result.game is target
    assert checker.plays == 3 * HAND_SIZE
    assert len(state.discard) == 3 * HAND_SIZE
    assert state.ground == []
    assert all(h == [] for h in state.hands.values())
    assert result.player_score + result.defender_score == TOTAL_DEAL_POINTS
    assert result.won == (result.player_score > result.defender_score)


def test_play_one_deal_reproducible():
    a = play_one_deal(player=RandomPlayer(seed=3), rng=RandomSource(99))
    b = play_one_deal(player=RandomPlayer(seed=3), rng=RandomSource(99))
    assert a == b


def test_play_one_deal_defaults():
    result = play_one_deal(rng=RandomSource(123))
    assert result.player_score >= 0
    assert result.defender_score >= 0
    if result.game is Bid.PASSED:
        assert result.declarer is None
    else:
        assert result.player_score + result.defender_score == TOTAL_DEAL_POINTS


def test_illegal_play_rejected():
    class Cheater:
        def choose_card(self, state, player, legal):
            return make_trump_card(22)

    hands = {p: [make_trump_card(i + 1)] for i, p in enumerate(PLAYER_ORDER)}
    state = DealState(hands=hands, game=Bid.SOLO, declarer=Player.FOREHAND)
    with pytest.raises(ValueError):
        play_tricks(state, Cheater())


def test_empty_hand_ends_play_immediately():
    state = DealState(hands={p: [] for p in PLAYER_ORDER})
    play_tricks(state, FirstLegalPlayer())
    assert state.player_score == state.defender_score == 0
