"""
Bidding: each seat commits to a number of tricks (0..13) before play.
Computer seats bid from high-card points, optionally adding a long-suit bonus.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from .deck import RANK_ACE, RANK_JACK, RANK_KING, RANK_QUEEN, Card

MIN_BID = 0
MAX_BID = 13

# High-card points
HCP_WEIGHTS = {RANK_ACE: 4, RANK_KING: 3, RANK_QUEEN: 2, RANK_JACK: 1}

# Cards beyond this many in one suit count one trick each in advanced mode.
LONG_SUIT_THRESHOLD = 4


def high_card_points(hand: Iterable[Card]) -> int:
    """Ace 4, King 3, Queen 2, Jack 1."""
    return sum(HCP_WEIGHTS[c.rank] for c in hand if c.is_honour())


def length_bonus(hand: Iterable[Card]) -> int:
    """Sum over suits of max(0, cards_in_suit - 4)."""
    counts = Counter(c.suit for c in hand)
    return sum(max(0, n - LONG_SUIT_THRESHOLD) for n in counts.values())


def compute_bid(hand: Iterable[Card], advanced: bool = True) -> int:
    """
    Deterministic computer bid: floor(HCP / 2), plus the length bonus when
    ``advanced`` is set, clamped to [0, 13].
    """
    cards = list(hand)
    bid = high_card_points(cards) // 2
    if advanced:
        bid += length_bonus(cards)
    return max(MIN_BID, min(MAX_BID, bid))


def is_valid_bid(value: object) -> bool:
    """True for an int in [0, 13]. Booleans are rejected."""
    return isinstance(value, int) and not isinstance(value, bool) and MIN_BID <= value <= MAX_BID
