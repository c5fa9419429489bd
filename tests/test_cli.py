"""CLI-level tests for the play, simulate, scores and reset commands."""
import itertools
import json
from pathlib import Path

import pytest

from callbreak.cli import _cmd_play, _cmd_reset, _cmd_scores, _cmd_simulate, build_parser, main
from callbreak.match import MatchState
from callbreak.persistence import JsonFileStore


class _Args:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def _scripted_input(first: list[str]):
    answers = itertools.chain(first, itertools.cycle([str(i) for i in range(1, 14)]))
    prompts = []

    def input_fn(prompt):
        prompts.append(prompt)
        return next(answers)

    return input_fn, prompts


def test_cli_play_rounds_persist(tmp_path: Path):
    state = tmp_path / "state.json"
    args = _Args(rounds=2, seed=0, simple_bidding=False, no_trump=False, state=str(state))
    input_fn, prompts = _scripted_input(["abc", "20", "7"])
    lines = []

    _cmd_play(args, input_fn=input_fn, print_fn=lambda *a: lines.append(" ".join(map(str, a))))

    assert any("Not a number" in line for line in lines)
    assert any("between 0 and 13" in line for line in lines)
    assert sum(1 for line in lines if "-> trick" in line) == 26
    assert sum(1 for line in lines if "(made)" in line or "(missed)" in line) == 8
    saved = JsonFileStore(state).load()
    assert saved.round_number == 2
    assert saved.dealer_index == 2
    assert lines[-1] == f"Scores after round 2: {list(saved.scores)}"


def test_cli_play_no_trump(tmp_path: Path):
    args = _Args(rounds=1, seed=3, simple_bidding=True, no_trump=True, state=str(tmp_path / "s.json"))
    input_fn, _ = _scripted_input(["0"])
    lines = []
    _cmd_play(args, input_fn=input_fn, print_fn=lambda *a: lines.append(" ".join(map(str, a))))
    assert any("trump: none" in line for line in lines)


def test_cli_simulate_writes_summary(tmp_path: Path):
    out = tmp_path / "sim" / "summary.json"
    args = _Args(rounds=5, seed=1, simple_bidding=False, no_trump=False, output=str(out))
    lines = []
    _cmd_simulate(args, print_fn=lines.append)
    assert lines[0] == "Simulated 5 rounds"
    assert len(lines) == 5
    with out.open("r", encoding="utf-8") as f:
        data = json.load(f)
    assert data["rounds"] == 5
    assert data["config"]["variant"] == "trump"
    assert data["config"]["human_seat"] is None


def test_cli_scores_and_reset(tmp_path: Path):
    state = tmp_path / "state.json"
    JsonFileStore(state).save(MatchState(scores=(12, -30, 40, 0), dealer_index=3, round_number=2))
    args = _Args(state=str(state))

    lines = []
    _cmd_scores(args, print_fn=lines.append)
    assert lines[0] == "Rounds played: 2, next dealer: Player 3"
    assert lines[1:] == [
        "  Player 0: 12",
        "  Player 1: -30",
        "  Player 2: 40",
        "  Player 3: 0",
        "Leading: Player 2",
    ]

    _cmd_reset(args, print_fn=lines.append)
    assert JsonFileStore(state).load() == MatchState()


def test_main_simulate(tmp_path: Path, capsys):
    out = tmp_path / "summary.json"
    main(["--log-level", "INFO", "simulate", "--rounds", "3", "--seed", "0", "--output", str(out)])
    assert "Simulated 3 rounds" in capsys.readouterr().out
    assert out.exists()


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_scores_fresh_match_has_no_leader(tmp_path: Path):
    lines = []
    _cmd_scores(_Args(state=str(tmp_path / "missing.json")), print_fn=lines.append)
    assert lines[0] == "Rounds played: 0, next dealer: Player 0"
    assert not any(line.startswith("Leading") for line in lines)
