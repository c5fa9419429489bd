"""
Match state serialization and the load/save services.

The stored form mirrors the browser game's local-storage entry:

    {"scores": [0, 0, 0, 0], "dealerIndex": 0, "round": 0}

Missing keys take their defaults. Anything malformed yields a fresh match.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Protocol

from .deal import NUM_SEATS
from .match import MatchState

STORAGE_KEY = "callBreakState"

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def match_state_to_dict(state: MatchState) -> Dict[str, Any]:
    return {
        "scores": list(state.scores),
        "dealerIndex": state.dealer_index,
        "round": state.round_number,
    }


def match_state_from_dict(d: Any) -> MatchState:
    """
    Rebuild a MatchState. Returns a fresh state (and logs a warning) when ``d``
    is not a dict or holds a value of the wrong type or range.
    """
    if not isinstance(d, dict):
        logger.warning("stored match state is not an object; starting fresh")
        return MatchState()
    scores = d.get("scores", [0] * NUM_SEATS)
    dealer = d.get("dealerIndex", 0)
    round_number = d.get("round", 0)
    if (
        not isinstance(scores, list)
        or len(scores) != NUM_SEATS
        or not all(_is_int(s) for s in scores)
        or not _is_int(dealer)
        or not 0 <= dealer < NUM_SEATS
        or not _is_int(round_number)
        or round_number < 0
    ):
        logger.warning("malformed stored match state %r; starting fresh", d)
        return MatchState()
    return MatchState(
        scores=(scores[0], scores[1], scores[2], scores[3]),
        dealer_index=dealer,
        round_number=round_number,
    )


def match_state_to_json(state: MatchState) -> str:
    return json.dumps(match_state_to_dict(state))


def match_state_from_json(s: str | None) -> MatchState:
    """Parse JSON text; empty, missing or invalid text gives a fresh match."""
    if not s:
        return MatchState()
    try:
        data = json.loads(s)
    except (ValueError, RecursionError):
        logger.warning("stored match state cannot be decoded; starting fresh")
        return MatchState()
    return match_state_from_dict(data)


class StateStore(Protocol):
    """Opaque key-value persistence for the match state."""

    def load(self) -> MatchState:
        ...

    def save(self, state: MatchState) -> None:
        ...

    def clear(self) -> None:
        ...


class MemoryStore:
    """In-process store holding the JSON text, for tests and headless runs."""

    def __init__(self, text: str | None = None) -> None:
        self.text = text

    def load(self) -> MatchState:
        return match_state_from_json(self.text)

    def save(self, state: MatchState) -> None:
        self.text = match_state_to_json(state)

    def clear(self) -> None:
        self.text = None


class JsonFileStore:
    """
    A JSON file holding a {key: state} object, so several entries can share
    one file the way browser local storage does.
    """

    def __init__(self, path: Path | str, key: str = STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("cannot read %s (%s); starting fresh", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("%s does not hold a JSON object; starting fresh", self.path)
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp.replace(self.path)

    def load(self) -> MatchState:
        data = self._read_all()
        if self.key not in data:
            return MatchState()
        return match_state_from_dict(data[self.key])

    def save(self, state: MatchState) -> None:
        data = self._read_all()
        data[self.key] = match_state_to_dict(state)
        self._write_all(data)

    def clear(self) -> None:
        data = self._read_all()
        if data.pop(self.key, None) is not None:
            self._write_all(data)


__all__ = [
    "STORAGE_KEY",
    "StateStore",
    "MemoryStore",
    "JsonFileStore",
    "match_state_to_dict",
    "match_state_from_dict",
    "match_state_to_json",
    "match_state_from_json",
]
