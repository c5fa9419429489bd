"""
Call Break deck: 52 cards (4 suits × 13 ranks).
Card value for trick comparison: 2..10 face value, Jack 11, Queen 12, King 13, Ace 14.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Spade, Heart, Diamond, Club. Order is used for display and deck construction only."""
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


SUIT_SYMBOLS = "♠♥♦♣"
SUIT_LETTERS = "SHDC"

RANK_JACK = 11
RANK_QUEEN = 12
RANK_KING = 13
RANK_ACE = 14
RANKS = tuple(range(2, 15))

_RANK_NAMES = {RANK_JACK: "J", RANK_QUEEN: "Q", RANK_KING: "K", RANK_ACE: "A"}
_RANK_FROM_NAME = {v: k for k, v in _RANK_NAMES.items()}

DECK_SIZE = 52
HAND_SIZE = 13


@dataclass(frozen=True)
class Card:
    """A single playing card. ``rank`` doubles as the comparison value (2..14)."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Unknown suit: {self.suit!r}")
        if self.rank not in RANKS:
            raise ValueError(f"Rank out of range: {self.rank!r}")

    @property
    def value(self) -> int:
        return self.rank

    def is_honour(self) -> bool:
        """True for Jack, Queen, King and Ace (the cards counted as high-card points)."""
        return self.rank >= RANK_JACK

    def __str__(self) -> str:
        return f"{_RANK_NAMES.get(self.rank, str(self.rank))}{self.suit.symbol}"

    def __repr__(self) -> str:
        return str(self)


def parse_card(text: str) -> Card:
    """
    Parse "10♠", "A♥", "10S", "ah", "qd" into a Card.
    Raises ValueError for anything else.
    """
    s = text.strip().upper()
    if len(s) < 2:
        raise ValueError(f"Cannot parse card: {text!r}")
    rank_str, suit_str = s[:-1], s[-1]
    if suit_str in SUIT_SYMBOLS:
        suit = Suit(SUIT_SYMBOLS.index(suit_str))
    elif suit_str in SUIT_LETTERS:
        suit = Suit(SUIT_LETTERS.index(suit_str))
    else:
        raise ValueError(f"Cannot parse card: {text!r}")
    if rank_str in _RANK_FROM_NAME:
        rank = _RANK_FROM_NAME[rank_str]
    elif rank_str.isdigit() and int(rank_str) in range(2, 11):
        rank = int(rank_str)
    else:
        raise ValueError(f"Cannot parse card: {text!r}")
    return Card(suit, rank)


def make_deck_52() -> list[Card]:
    """Build a full 52-card deck, suit-major then rank 2..Ace."""
    return [Card(s, r) for s in Suit for r in RANKS]


def shuffle(cards: list[Card], rng: random.Random | None = None) -> None:
    """
    Shuffle in place. random.Random.shuffle is Fisher–Yates: for i from len-1 down
    to 1, swap cards[i] with a uniformly chosen cards[j], 0 <= j <= i.
    """
    if rng is None:
        rng = random.Random()
    rng.shuffle(cards)


def sort_hand(cards: list[Card]) -> list[Card]:
    """Display order: grouped by suit, each suit high to low."""
    return sorted(cards, key=lambda c: (int(c.suit), -c.rank))
