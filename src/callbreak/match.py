"""
Match state carried from round to round: cumulative scores, dealer, round counter.

It is an immutable value: the engine receives one, and scoring returns the next.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from .deal import NUM_SEATS, next_dealer


@dataclass(frozen=True)
class MatchState:
    scores: tuple[int, int, int, int] = (0, 0, 0, 0)
    dealer_index: int = 0
    round_number: int = 0  # completed rounds

    def __post_init__(self) -> None:
        if len(self.scores) != NUM_SEATS:
            raise ValueError(f"Expected {NUM_SEATS} scores, got {len(self.scores)}")
        if not 0 <= self.dealer_index < NUM_SEATS:
            raise ValueError(f"Dealer index out of range: {self.dealer_index}")
        if self.round_number < 0:
            raise ValueError(f"Negative round number: {self.round_number}")

    def apply_round(self, deltas: Sequence[int]) -> "MatchState":
        """Fold one round's deltas in, pass the deal on and count the round."""
        if len(deltas) != NUM_SEATS:
            raise ValueError(f"Expected {NUM_SEATS} deltas, got {len(deltas)}")
        s = [a + b for a, b in zip(self.scores, deltas)]
        return replace(
            self,
            scores=(s[0], s[1], s[2], s[3]),
            dealer_index=next_dealer(self.dealer_index),
            round_number=self.round_number + 1,
        )

    @property
    def current_round(self) -> int:
        """1-based number of the round about to be (or being) played."""
        return self.round_number + 1

    def leaders(self) -> list[int]:
        """Seats sharing the highest cumulative score."""
        top = max(self.scores)
        return [i for i, s in enumerate(self.scores) if s == top]
