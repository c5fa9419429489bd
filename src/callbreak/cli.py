"""
Command-line interface for Call Break.

Usage examples (after installing the package):

    python -m callbreak.cli play --rounds 3
    python -m callbreak.cli simulate --rounds 1000 --seed 7 --simple-bidding
    python -m callbreak.cli scores
    python -m callbreak.cli reset
"""
from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Callable, Optional

from .config import GameConfig, Variant, config_to_dict
from .deck import Card, parse_card, sort_hand
from .game import GameListener, Phase, RoundEngine
from .persistence import JsonFileStore
from .scoring import bid_made
from .simulate import simulate

DEFAULT_STATE_FILE = Path.home() / ".callbreak" / "state.json"

InputFn = Callable[[str], str]
PrintFn = Callable[..., None]


def _config_from_args(args: argparse.Namespace, human_seat: int | None = 0) -> GameConfig:
    return GameConfig(
        advanced_bidding=not getattr(args, "simple_bidding", False),
        variant=Variant.NO_TRUMP if getattr(args, "no_trump", False) else Variant.TRUMP,
        human_seat=human_seat,
        decision_delay_ms=0,
        trick_pause_ms=0,
    )


def _add_rule_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--simple-bidding",
        action="store_true",
        help="Computer seats bid from high-card points only (no long-suit bonus).",
    )
    parser.add_argument(
        "--no-trump",
        action="store_true",
        help="Play without a trump suit: only the led suit wins tricks.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the deal.",
    )


def _add_state_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--state",
        type=str,
        default=str(DEFAULT_STATE_FILE),
        help="JSON file holding the persisted match.",
    )


# ---- play ----


def _format_hand(hand: list[Card]) -> str:
    return "  ".join(f"{i}:{c}" for i, c in enumerate(hand, start=1))


def _read_bid(engine: RoundEngine, input_fn: InputFn, print_fn: PrintFn) -> None:
    while engine.phase == Phase.BIDDING:
        raw = input_fn("Your bid (0-13): ").strip()
        try:
            value = int(raw)
        except ValueError:
            print_fn(f"Not a number: {raw!r}")
            continue
        if not engine.submit_bid(value):
            print_fn("Bid must be between 0 and 13.")


def _read_card(engine: RoundEngine, input_fn: InputFn, print_fn: PrintFn) -> Card:
    human = engine.human
    assert human is not None
    shown = sort_hand(human.hand)
    print_fn(f"Your hand: {_format_hand(shown)}")
    while True:
        raw = input_fn("Card to play (number or e.g. AS, 10H): ").strip()
        card: Card | None = None
        if raw.isdigit() and 1 <= int(raw) <= len(shown):
            card = shown[int(raw) - 1]
        else:
            try:
                card = parse_card(raw)
            except ValueError:
                print_fn(f"Unknown card: {raw!r}")
                continue
        if engine.select_card(card):
            return card
        print_fn(f"{card} cannot be played now.")


class TextListener(GameListener):
    """Prints plays and trick results as they happen."""

    def __init__(self, engine: RoundEngine, print_fn: PrintFn = print) -> None:
        self.engine = engine
        self.print_fn = print_fn

    def card_played(self, seat_id: int, card: Card) -> None:
        seat = self.engine.seats[seat_id]
        verb = "play" if seat is self.engine.human else "plays"
        self.print_fn(f"  {seat.name} {verb} {card}")

    def trick_resolved(self, winner: int, card: Card) -> None:
        self.print_fn(
            f"  -> trick {self.engine.trick_count} to {self.engine.seats[winner].name} with {card}"
        )


def play_text_round(
    engine: RoundEngine,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> tuple[int, int, int, int]:
    """Play one round in the terminal against the three computer seats."""
    engine.start_round()
    trump = engine.trump.name.title() if engine.trump is not None else "none"
    print_fn(f"Round {engine.round_number}, dealer: Player {engine.dealer}, trump: {trump}")
    for seat in engine.seats:
        if seat is not engine.human:
            print_fn(f"  {seat.name} bids {seat.bid}")
    human = engine.human
    assert human is not None
    print_fn(f"Your hand: {_format_hand(sort_hand(human.hand))}")
    _read_bid(engine, input_fn, print_fn)

    while engine.phase == Phase.PLAYING:
        engine.advance()
        if engine.awaiting_human():
            if engine.current_trick:
                table = ", ".join(f"{engine.seats[s].name}: {c}" for s, c in engine.current_trick)
                print_fn(f"On the table: {table}")
            _read_card(engine, input_fn, print_fn)

    assert engine.last_deltas is not None
    for seat, delta in zip(engine.seats, engine.last_deltas):
        result = "made" if bid_made(seat.bid, seat.tricks_won) else "missed"
        print_fn(
            f"  {seat.name}: bid {seat.bid}, won {seat.tricks_won} ({result}), {delta:+d} -> {seat.score}"
        )
    return engine.last_deltas


def _add_play_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "play",
        help="Play against three computer seats in the terminal.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=1,
        help="Number of rounds to play.",
    )
    _add_rule_options(parser)
    _add_state_option(parser)
    parser.set_defaults(func=_cmd_play)


def _cmd_play(
    args: argparse.Namespace,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> None:
    store = JsonFileStore(args.state)
    engine = RoundEngine(
        config=_config_from_args(args),
        store=store,
        rng=random.Random(args.seed),
    )
    engine.add_listener(TextListener(engine, print_fn=print_fn))
    for _ in range(args.rounds):
        play_text_round(engine, input_fn=input_fn, print_fn=print_fn)
    print_fn(f"Scores after round {engine.match.round_number}: {list(engine.match.scores)}")


# ---- simulate ----


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Autoplay rounds between four computer seats and summarise the results.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=100,
        help="Number of rounds to simulate.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional JSON file for the summary.",
    )
    _add_rule_options(parser)
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace, print_fn: PrintFn = print) -> None:
    config = _config_from_args(args, human_seat=None)
    summary = simulate(args.rounds, config=config, seed=args.seed)
    print_fn(f"Simulated {summary.num_rounds} rounds")
    for seat in range(4):
        print_fn(
            f"  Player {seat}: total={int(summary.totals[seat])} "
            f"mean={summary.mean_delta[seat]:.2f} "
            f"std={summary.std_delta[seat]:.2f} "
            f"made_bid={summary.bid_success_rate[seat]:.1%}"
        )
    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", encoding="utf-8") as f:
            json.dump({**summary.to_dict(), "config": config_to_dict(config)}, f, indent=2)


# ---- scores / reset ----


def _add_scores_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("scores", help="Show the persisted match.")
    _add_state_option(parser)
    parser.set_defaults(func=_cmd_scores)


def _cmd_scores(args: argparse.Namespace, print_fn: PrintFn = print) -> None:
    state = JsonFileStore(args.state).load()
    print_fn(f"Rounds played: {state.round_number}, next dealer: Player {state.dealer_index}")
    for seat, score in enumerate(state.scores):
        print_fn(f"  Player {seat}: {score}")
    if state.round_number > 0:
        print_fn("Leading: " + ", ".join(f"Player {i}" for i in state.leaders()))


def _add_reset_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("reset", help="Forget the persisted match.")
    _add_state_option(parser)
    parser.set_defaults(func=_cmd_reset)


def _cmd_reset(args: argparse.Namespace, print_fn: PrintFn = print) -> None:
    JsonFileStore(args.state).clear()
    print_fn("Match history cleared.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="callbreak", description="Call Break card game.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_play_parser(subparsers)
    _add_simulate_parser(subparsers)
    _add_scores_parser(subparsers)
    _add_reset_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
