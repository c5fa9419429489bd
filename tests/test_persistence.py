"""Tests for match state serialization and the stores."""
import json
from pathlib import Path

from callbreak.match import MatchState
from callbreak.persistence import (
    STORAGE_KEY,
    JsonFileStore,
    MemoryStore,
    match_state_from_dict,
    match_state_from_json,
    match_state_to_dict,
    match_state_to_json,
)


def _state() -> MatchState:
    return MatchState(scores=(52, -50, 0, 21), dealer_index=2, round_number=7)


def test_round_trip_dict():
    d = match_state_to_dict(_state())
    assert d == {"scores": [52, -50, 0, 21], "dealerIndex": 2, "round": 7}
    assert match_state_from_dict(d) == _state()


def test_round_trip_json():
    assert match_state_from_json(match_state_to_json(_state())) == _state()


def test_missing_keys_take_defaults():
    assert match_state_from_dict({}) == MatchState()
    assert match_state_from_dict({"scores": [1, 2, 3, 4]}) == MatchState(scores=(1, 2, 3, 4))
    assert match_state_from_dict({"round": 3}).round_number == 3


def test_malformed_state_starts_fresh():
    bad_values = [
        None,
        [1, 2, 3, 4],
        "scores",
        {"scores": [1, 2, 3]},
        {"scores": "1,2,3,4"},
        {"scores": [1, 2, "3", 4]},
        {"scores": [1, 2, 3, 4], "dealerIndex": 4},
        {"scores": [1, 2, 3, 4], "dealerIndex": "1"},
        {"scores": [1, 2, 3, 4], "round": -2},
        {"scores": [1, 2, 3, 4], "round": 1.5},
    ]
    for bad in bad_values:
        assert match_state_from_dict(bad) == MatchState()


def test_bad_json_starts_fresh():
    assert match_state_from_json(None) == MatchState()
    assert match_state_from_json("") == MatchState()
    assert match_state_from_json("{not json") == MatchState()


def test_memory_store():
    store = MemoryStore()
    assert store.load() == MatchState()
    store.save(_state())
    assert store.load() == _state()
    store.clear()
    assert store.load() == MatchState()


def test_json_file_store(tmp_path: Path):
    path = tmp_path / "nested" / "state.json"
    store = JsonFileStore(path)
    assert store.load() == MatchState()
    store.save(_state())
    assert path.exists()
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    assert data[STORAGE_KEY]["dealerIndex"] == 2
    assert JsonFileStore(path).load() == _state()

    store.clear()
    assert store.load() == MatchState()


def test_json_file_store_keeps_other_keys(tmp_path: Path):
    path = tmp_path / "state.json"
    other = JsonFileStore(path, key="other")
    other.save(MatchState(scores=(1, 1, 1, 1)))
    JsonFileStore(path).save(_state())
    assert other.load() == MatchState(scores=(1, 1, 1, 1))
    JsonFileStore(path).clear()
    assert other.load() == MatchState(scores=(1, 1, 1, 1))


def test_json_file_store_corrupt_file(tmp_path: Path):
    path = tmp_path / "state.json"
    path.write_text("][", encoding="utf-8")
    store = JsonFileStore(path)
    assert store.load() == MatchState()
    store.save(_state())
    assert store.load() == _state()


def test_json_file_store_undecodable_bytes(tmp_path: Path):
    path = tmp_path / "state.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert JsonFileStore(path).load() == MatchState()


def test_deeply_nested_state_starts_fresh(tmp_path: Path):
    nested = "[" * 100000 + "]" * 100000
    assert match_state_from_json(nested) == MatchState()
    assert MemoryStore(nested).load() == MatchState()

    path = tmp_path / "state.json"
    path.write_text(nested, encoding="utf-8")
    assert JsonFileStore(path).load() == MatchState()
