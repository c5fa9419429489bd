"""Tests for cards and the 52-card deck."""
import random

import pytest

from callbreak.deck import (
    Card,
    Suit,
    RANK_ACE,
    RANK_JACK,
    RANK_KING,
    RANK_QUEEN,
    make_deck_52,
    parse_card,
    shuffle,
    sort_hand,
)


def test_deck_52_distinct():
    deck = make_deck_52()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    for s in Suit:
        assert sum(1 for c in deck if c.suit == s) == 13


def test_card_values():
    assert Card(Suit.SPADES, 2).value == 2
    assert Card(Suit.SPADES, 10).value == 10
    assert Card(Suit.HEARTS, RANK_JACK).value == 11
    assert Card(Suit.CLUBS, RANK_ACE).value == 14


def test_card_is_immutable_and_hashable():
    c = Card(Suit.DIAMONDS, 7)
    with pytest.raises(Exception):
        c.rank = 8  # type: ignore[misc]
    assert {c, Card(Suit.DIAMONDS, 7)} == {c}


def test_card_rejects_bad_rank():
    with pytest.raises(ValueError):
        Card(Suit.SPADES, 1)
    with pytest.raises(ValueError):
        Card(Suit.SPADES, 15)


def test_card_str():
    assert str(Card(Suit.SPADES, RANK_ACE)) == "A♠"
    assert str(Card(Suit.HEARTS, 10)) == "10♥"


def test_parse_card():
    assert parse_card("10S") == Card(Suit.SPADES, 10)
    assert parse_card("ah") == Card(Suit.HEARTS, RANK_ACE)
    assert parse_card("Q♦") == Card(Suit.DIAMONDS, 12)
    assert parse_card(" 2c ") == Card(Suit.CLUBS, 2)
    for bad in ("", "1S", "11H", "ZZ", "AX"):
        with pytest.raises(ValueError):
            parse_card(bad)


def test_shuffle_is_seeded_permutation():
    a = make_deck_52()
    b = make_deck_52()
    shuffle(a, random.Random(5))
    shuffle(b, random.Random(5))
    assert a == b
    assert set(a) == set(make_deck_52())
    assert a != make_deck_52()


def test_sort_hand_groups_suits_high_first():
    hand = [Card(Suit.HEARTS, 3), Card(Suit.SPADES, 2), Card(Suit.HEARTS, RANK_ACE), Card(Suit.SPADES, 9)]
    assert sort_hand(hand) == [
        Card(Suit.SPADES, 9),
        Card(Suit.SPADES, 2),
        Card(Suit.HEARTS, RANK_ACE),
        Card(Suit.HEARTS, 3),
    ]


def test_honours_are_jack_and_above():
    honours = [c for c in make_deck_52() if c.is_honour()]
    assert len(honours) == 16
    assert {c.rank for c in honours} == {RANK_JACK, RANK_QUEEN, RANK_KING, RANK_ACE}
    assert not Card(Suit.HEARTS, 10).is_honour()
