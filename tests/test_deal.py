"""Tests for dealing and turn order."""
import random

import pytest

from callbreak.deal import deal_hands, first_to_play, next_dealer, turn_order
from callbreak.deck import Card, Suit, RANK_ACE, RANK_KING, make_deck_52
from callbreak.seats import make_seats


def test_deal_partitions_deck():
    for seed in range(5):
        seats = make_seats()
        deal_hands(seats, rng=random.Random(seed))
        hands = [set(s.hand) for s in seats]
        for h in hands:
            assert len(h) == 13
        assert set().union(*hands) == set(make_deck_52())
        for i in range(4):
            for j in range(i + 1, 4):
                assert not hands[i] & hands[j]


def test_deal_exhausts_deck():
    deck = make_deck_52()
    deal_hands(make_seats(), deck=deck, rng=random.Random(1))
    assert deck == []


def test_deal_clears_previous_hands():
    seats = make_seats()
    deal_hands(seats, rng=random.Random(2))
    deal_hands(seats, rng=random.Random(3))
    assert all(len(s.hand) == 13 for s in seats)


def test_deal_round_robin_from_end_of_deck():
    seats = make_seats()
    deal_hands(seats, deck=make_deck_52(), shuffle_deck=False)
    assert seats[0].hand[0] == Card(Suit.CLUBS, RANK_ACE)
    assert seats[1].hand[0] == Card(Suit.CLUBS, RANK_KING)
    assert seats[0].hand[1] == Card(Suit.CLUBS, 10)
    assert seats[3].hand[-1] == Card(Suit.SPADES, 2)


def test_deal_rejects_wrong_seat_count():
    with pytest.raises(ValueError):
        deal_hands(make_seats()[:3])


def test_deal_rejects_short_deck():
    with pytest.raises(ValueError):
        deal_hands(make_seats(), deck=make_deck_52()[:51])


def test_deal_rejects_duplicate_cards():
    deck = make_deck_52()
    deck[0] = deck[1]
    with pytest.raises(ValueError, match="51 distinct"):
        deal_hands(make_seats(), deck=deck, shuffle_deck=False)


def test_turn_order_and_rotation():
    assert first_to_play(0) == 1
    assert first_to_play(3) == 0
    assert next_dealer(3) == 0
    assert turn_order(2) == [2, 3, 0, 1]
