"""
Round scoring: a made bid is worth 10 per bid trick plus 1 per overtrick;
a missed bid costs 10 per bid trick.
"""
from __future__ import annotations

from typing import Sequence

from .seats import Seat

POINTS_PER_BID_TRICK = 10
POINTS_PER_OVERTRICK = 1


def round_score_delta(bid: int, tricks_won: int) -> int:
    """
    bid=5, tricks=7 -> 52; bid=5, tricks=3 -> -50; bid=0, tricks=0 -> 0.
    """
    if tricks_won >= bid:
        return bid * POINTS_PER_BID_TRICK + (tricks_won - bid) * POINTS_PER_OVERTRICK
    return -bid * POINTS_PER_BID_TRICK


def round_deltas(seats: Sequence[Seat]) -> tuple[int, int, int, int]:
    """Per-seat deltas for a finished round."""
    d = [round_score_delta(s.bid, s.tricks_won) for s in seats]
    return (d[0], d[1], d[2], d[3])


def bid_made(bid: int, tricks_won: int) -> bool:
    return tricks_won >= bid
