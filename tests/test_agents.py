"""Tests for baseline strategies."""

from tarock.agents import (
    CoinFlipBidder,
    FirstLegalPlayer,
    FixedBidder,
    HandValueBidder,
    NeverBidder,
    RandomPlayer,
    hand_value,
)
from tarock.bidding import Bid
from tarock.deal import Player, RandomSource
from tarock.deck import Face, Suit, make_suit_card, make_trump_card


def test_hand_value_counts_trumps_high_trumps_and_kings():
    hand = [
        make_trump_card(3),
        make_trump_card(17),
        make_trump_card(22),
        make_suit_card(Suit.HEARTS, Face.KING),
        make_suit_card(Suit.CLUBS, Face.QUEEN),
    ]
    # 3 trumps + 2 above 16 + 1 king
    assert hand_value(hand) == 6


def test_hand_value_bidder_must_exceed_threshold():
    hand = [make_trump_card(n) for n in range(1, 12)]
    bidder = HandValueBidder()
    assert hand_value(hand) == 11
    assert not bidder.accept_bid(Bid.SMALL, hand, Player.FOREHAND)
    hand.append(make_suit_card(Suit.SPADES, Face.KING))
    assert bidder.accept_bid(Bid.SMALL, hand, Player.FOREHAND)
    assert not bidder.accept_bid(Bid.UNDER, hand, Player.FOREHAND)


def test_hand_value_bidder_strong_hand_takes_solo():
    hand = [make_trump_card(n) for n in range(11, 23)]
    assert HandValueBidder().accept_bid(Bid.SOLO, hand, Player.FOREHAND)


def test_hand_value_bidder_custom_thresholds():
    bidder = HandValueBidder(thresholds={b: 0 for b in Bid})
    assert bidder.accept_bid(Bid.OVER, [make_trump_card(2)], Player.FOREHAND)


def test_stub_bidders():
    assert not NeverBidder().accept_bid(Bid.SMALL, [], Player.MIDDLEHAND)
    bidder = FixedBidder(Bid.UNDER)
    assert bidder.accept_bid(Bid.SMALL, [], Player.MIDDLEHAND)
    assert bidder.accept_bid(Bid.UNDER, [], Player.MIDDLEHAND)
    assert not bidder.accept_bid(Bid.OVER, [], Player.MIDDLEHAND)


def test_fixed_bidder_for_one_seat():
    bidder = FixedBidder(Bid.OVER, Player.REARHAND)
    assert bidder.accept_bid(Bid.OVER, [], Player.REARHAND)
    assert not bidder.accept_bid(Bid.UNDER, [], Player.REARHAND)
    assert bidder.accept_bid(Bid.UNDER, [], Player.FOREHAND)
    assert not bidder.accept_bid(Bid.OVER, [], Player.FOREHAND)


def test_coin_flip_bidder_is_seeded():
    a = CoinFlipBidder(RandomSource(8))
    b = CoinFlipBidder(RandomSource(8))
    answers = [a.accept_bid(Bid.SMALL, [], Player.MIDDLEHAND) for _ in range(50)]
    assert answers == [b.accept_bid(Bid.SMALL, [], Player.MIDDLEHAND) for _ in range(50)]
    assert set(answers) == {True, False}


def test_first_legal_player():
    legal = [make_trump_card(4), make_trump_card(9)]
    assert FirstLegalPlayer().choose_card(None, Player.FOREHAND, legal) == make_trump_card(4)


def test_random_player_respects_legal_cards():
    player = RandomPlayer(seed=123)
    legal = [make_trump_card(4), make_suit_card(Suit.HEARTS, 2)]
    for _ in range(50):
        assert player.choose_card(None, Player.REARHAND, legal) in legal
