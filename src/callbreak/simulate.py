"""
Headless simulation: four computer seats play a series of rounds and the
results are summarised per seat.

Useful for comparing the simple and advanced bidding heuristics, or the two
rule variants, over many deals.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Any, Dict

import numpy as np

from .config import GameConfig
from .game import RoundEngine, run_round


@dataclass
class SimulationSummary:
    """Per-round arrays have shape (rounds, 4)."""

    bids: np.ndarray
    tricks: np.ndarray
    deltas: np.ndarray

    @property
    def num_rounds(self) -> int:
        return int(self.deltas.shape[0])

    @property
    def totals(self) -> np.ndarray:
        return self.deltas.sum(axis=0)

    @property
    def mean_delta(self) -> np.ndarray:
        return self.deltas.mean(axis=0)

    @property
    def std_delta(self) -> np.ndarray:
        return self.deltas.std(axis=0)

    @property
    def bid_success_rate(self) -> np.ndarray:
        """Fraction of rounds in which each seat took at least its bid."""
        return (self.tricks >= self.bids).mean(axis=0)

    @property
    def mean_overtricks(self) -> np.ndarray:
        return np.clip(self.tricks - self.bids, 0, None).mean(axis=0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rounds": self.num_rounds,
            "totals": self.totals.tolist(),
            "mean_delta": self.mean_delta.tolist(),
            "std_delta": self.std_delta.tolist(),
            "bid_success_rate": self.bid_success_rate.tolist(),
            "mean_overtricks": self.mean_overtricks.tolist(),
        }


def simulate(
    num_rounds: int,
    config: GameConfig | None = None,
    seed: int | None = None,
) -> SimulationSummary:
    """
    Play ``num_rounds`` rounds with four computer seats from a fresh match.
    A seed makes the whole run reproducible.
    """
    if num_rounds < 1:
        raise ValueError(f"num_rounds must be positive, got {num_rounds}")
    cfg = replace(config or GameConfig(), human_seat=None)
    engine = RoundEngine(config=cfg, rng=random.Random(seed))

    bids = np.zeros((num_rounds, 4), dtype=np.int64)
    tricks = np.zeros((num_rounds, 4), dtype=np.int64)
    deltas = np.zeros((num_rounds, 4), dtype=np.int64)
    for i in range(num_rounds):
        deltas[i] = run_round(engine)
        bids[i] = [s.bid for s in engine.seats]
        tricks[i] = [s.tricks_won for s in engine.seats]
    return SimulationSummary(bids=bids, tricks=tricks, deltas=deltas)


__all__ = ["SimulationSummary", "simulate"]
