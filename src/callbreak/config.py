"""
Game configuration.

Two explicit rule variants are supported and never mixed:

- ``Variant.TRUMP``: a trump suit (Spades unless configured otherwise) beats
  every other suit; the winner of a trick leads the next one.
- ``Variant.NO_TRUMP``: only the led suit can win a trick; the winner leads next.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

from .deck import Suit
from .persistence import STORAGE_KEY


class Variant(str, Enum):
    TRUMP = "trump"
    NO_TRUMP = "no_trump"


@dataclass
class GameConfig:
    """Rules and pacing for a table."""

    advanced_bidding: bool = True
    variant: Variant = Variant.TRUMP
    # None draws a random trump suit at the start of each round (TRUMP variant only).
    trump_suit: Suit | None = Suit.SPADES
    # Index of the human seat, or None for a table of four computers.
    human_seat: int | None = 0
    # Front-end pacing only; the engine itself is synchronous.
    decision_delay_ms: int = 800
    trick_pause_ms: int = 500
    storage_key: str = STORAGE_KEY

    def __post_init__(self) -> None:
        if self.human_seat is not None and not 0 <= self.human_seat < 4:
            raise ValueError(f"human_seat must be in 0..3 or None, got {self.human_seat}")
        if self.decision_delay_ms < 0 or self.trick_pause_ms < 0:
            raise ValueError("Delays must be non-negative")

    @property
    def uses_trump(self) -> bool:
        return self.variant == Variant.TRUMP


def config_to_dict(cfg: GameConfig) -> Dict[str, Any]:
    d = asdict(cfg)
    d["variant"] = cfg.variant.value
    d["trump_suit"] = None if cfg.trump_suit is None else cfg.trump_suit.name
    return d
