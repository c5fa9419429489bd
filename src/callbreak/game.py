"""
Round orchestration: deal → bids → 13 tricks → score, as an explicit state machine.

The engine never blocks. When the human seat must act it stays in BIDDING or
PLAYING until ``submit_bid`` / ``select_card`` is called with valid input;
computer seats act through ``step`` (one card) or ``advance`` (until the human
must act or the round is over). Front ends decide how to pace those calls.
"""
from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, Optional, Sequence

from .bidding import compute_bid, is_valid_bid
from .config import GameConfig
from .deal import NUM_SEATS, deal_hands, first_to_play, turn_order
from .deck import HAND_SIZE, Card, Suit
from .match import MatchState
from .persistence import StateStore
from .play import choose_card, is_legal, leading_suit, legal_plays, trick_winner
from .scoring import round_deltas
from .seats import AnySeat, ComputerSeat, HumanSeat, make_seats

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    DEALING = "dealing"
    BIDDING = "bidding"
    PLAYING = "playing"
    ROUND_SCORING = "round_scoring"
    COMPLETE = "complete"


class GameListener:
    """
    Observer for presentation. Override what you need; every hook is a no-op here.
    The engine's behaviour never depends on what listeners do.
    """

    def hand_changed(self, seat_id: int, hand: Sequence[Card]) -> None:
        pass

    def bid_set(self, seat_id: int, bid: int) -> None:
        pass

    def card_played(self, seat_id: int, card: Card) -> None:
        pass

    def trick_resolved(self, winner: int, card: Card) -> None:
        pass

    def round_finished(self, scores: Sequence[int], deltas: Sequence[int]) -> None:
        pass


class RoundEngine:
    """Runs rounds for one table and carries the match state between them."""

    def __init__(
        self,
        config: GameConfig | None = None,
        match: MatchState | None = None,
        store: StateStore | None = None,
        rng: random.Random | None = None,
        listener: GameListener | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.store = store
        self.rng = rng or random.Random()
        if match is None:
            match = store.load() if store is not None else MatchState()
        self.match: MatchState = match
        self.seats: list[AnySeat] = make_seats(self.config.human_seat, self.config.advanced_bidding)
        self._sync_scores()
        self.listeners: list[GameListener] = [listener] if listener is not None else []

        self.phase: Phase = Phase.IDLE
        self.trump: Suit | None = None
        self.current_trick: list[tuple[int, Card]] = []
        self.last_trick: list[tuple[int, Card]] = []
        self.leader: int = first_to_play(self.match.dealer_index)
        self.trick_count: int = 0
        self.last_deltas: tuple[int, int, int, int] | None = None

    # ---- Accessors ----

    def add_listener(self, listener: GameListener) -> None:
        self.listeners.append(listener)

    @property
    def human(self) -> HumanSeat | None:
        for s in self.seats:
            if isinstance(s, HumanSeat):
                return s
        return None

    @property
    def dealer(self) -> int:
        return self.match.dealer_index

    @property
    def round_number(self) -> int:
        return self.match.current_round

    @property
    def leading_suit(self) -> Suit | None:
        return leading_suit(self.current_trick)

    def current_seat(self) -> int | None:
        """Seat whose turn it is to play, or None outside the play phase."""
        if self.phase != Phase.PLAYING:
            return None
        return turn_order(self.leader)[len(self.current_trick)]

    def awaiting_human(self) -> bool:
        """True when the engine is suspended on the human input channel."""
        human = self.human
        if human is None:
            return False
        if self.phase == Phase.BIDDING:
            return True
        return self.current_seat() == human.id

    def legal_cards(self, seat_id: int) -> list[Card]:
        return legal_plays(self.seats[seat_id].hand, self.current_trick)

    def is_legal(self, card: Card, seat_id: int | None = None) -> bool:
        """Legality of ``card`` for ``seat_id`` (the human seat by default)."""
        if seat_id is None:
            human = self.human
            if human is None:
                return False
            seat_id = human.id
        hand = self.seats[seat_id].hand
        return card in hand and is_legal(card, hand, self.current_trick)

    # ---- Round lifecycle ----

    def start_round(self, deck: list[Card] | None = None, shuffle_deck: bool = True) -> None:
        """
        Deal a new round and collect the computer bids. Any round in progress is
        abandoned; the match state is untouched.
        """
        self.phase = Phase.DEALING
        self.current_trick = []
        self.last_trick = []
        self.trick_count = 0
        self.last_deltas = None
        for seat in self.seats:
            seat.reset_for_round()
        self._sync_scores()

        deal_hands(self.seats, deck=deck, rng=self.rng, shuffle_deck=shuffle_deck)
        self.trump = self._choose_trump()
        self.leader = first_to_play(self.dealer)
        logger.debug(
            "round %d: dealer=%d trump=%s",
            self.round_number,
            self.dealer,
            self.trump.name if self.trump is not None else "none",
        )
        for seat in self.seats:
            self._notify("hand_changed", seat.id, list(seat.hand))

        self.phase = Phase.BIDDING
        for seat in self.seats:
            if isinstance(seat, ComputerSeat):
                bid = seat.make_bid()
                logger.debug("seat %d bids %d", seat.id, bid)
                self._notify("bid_set", seat.id, bid)
        if self.human is None:
            self.phase = Phase.PLAYING

    def _choose_trump(self) -> Suit | None:
        if not self.config.uses_trump:
            return None
        if self.config.trump_suit is not None:
            return self.config.trump_suit
        return self.rng.choice(list(Suit))

    def submit_bid(self, value: object) -> bool:
        """Human bid. Rejected (False, no state change) outside BIDDING or outside 0..13."""
        human = self.human
        if self.phase != Phase.BIDDING or human is None or not is_valid_bid(value):
            return False
        human.bid = int(value)  # type: ignore[call-overload]
        logger.debug("seat %d (human) bids %d", human.id, human.bid)
        self._notify("bid_set", human.id, human.bid)
        self.phase = Phase.PLAYING
        return True

    def select_card(self, card: object) -> bool:
        """Human play. Rejected (False, no state change) unless it is a legal card on the human's turn."""
        human = self.human
        if human is None or self.current_seat() != human.id:
            return False
        if not isinstance(card, Card) or not self.is_legal(card, human.id):
            return False
        human.remove_card(card)
        self._accept_play(human.id, card)
        return True

    def step(self) -> tuple[int, Card] | None:
        """
        Let the computer seat on turn play one card. Returns (seat, card), or None
        when the human must act or the round is not in play.
        """
        seat_id = self.current_seat()
        if seat_id is None:
            return None
        seat = self.seats[seat_id]
        if not isinstance(seat, ComputerSeat):
            return None
        card = seat.play(self.leading_suit, trump=self.trump)
        self._accept_play(seat_id, card)
        return seat_id, card

    def advance(self) -> list[tuple[int, Card]]:
        """Play computer turns until the human must act or the round is complete."""
        plays: list[tuple[int, Card]] = []
        while True:
            play = self.step()
            if play is None:
                return plays
            plays.append(play)

    def _accept_play(self, seat_id: int, card: Card) -> None:
        self.current_trick.append((seat_id, card))
        logger.debug("seat %d plays %s", seat_id, card)
        self._notify("card_played", seat_id, card)
        self._notify("hand_changed", seat_id, list(self.seats[seat_id].hand))
        if len(self.current_trick) == NUM_SEATS:
            self._resolve_trick()

    def _resolve_trick(self) -> None:
        winner, card = trick_winner(self.current_trick, self.trump)
        self.seats[winner].tricks_won += 1
        self.trick_count += 1
        self.last_trick = self.current_trick
        self.current_trick = []
        self.leader = winner
        logger.debug("trick %d won by seat %d with %s", self.trick_count, winner, card)
        self._notify("trick_resolved", winner, card)
        if self.trick_count == HAND_SIZE:
            self.phase = Phase.ROUND_SCORING
            self.finish_round()

    def finish_round(self) -> MatchState:
        """Score the finished round, fold it into the match and persist it."""
        if self.phase != Phase.ROUND_SCORING:
            raise RuntimeError(f"Cannot score a round in phase {self.phase.value}")
        if any(seat.hand for seat in self.seats):
            raise RuntimeError("Cannot score a round while cards remain in hand")
        deltas = round_deltas(self.seats)
        self.match = self.match.apply_round(deltas)
        self.last_deltas = deltas
        self._sync_scores()
        if self.store is not None:
            self.store.save(self.match)
        logger.info("round %d finished: deltas=%s scores=%s", self.match.round_number, deltas, self.match.scores)
        self.phase = Phase.COMPLETE
        self._notify("round_finished", self.match.scores, deltas)
        return self.match

    def reset_match(self) -> None:
        """Forget the match history and deal a fresh round."""
        self.match = MatchState()
        if self.store is not None:
            self.store.clear()
        self._sync_scores()
        self.start_round()

    # ---- Internal helpers ----

    def _sync_scores(self) -> None:
        for seat, score in zip(self.seats, self.match.scores):
            seat.score = score

    def _notify(self, hook: str, *args: object) -> None:
        for listener in self.listeners:
            getattr(listener, hook)(*args)


# ---- Headless drivers ----

GetBid = Callable[[RoundEngine], int]
GetPlay = Callable[[RoundEngine, int], Card]


def autopilot_bid(engine: RoundEngine) -> int:
    """Bid for the human seat with the computer heuristic."""
    human = engine.human
    assert human is not None
    return compute_bid(human.hand, advanced=engine.config.advanced_bidding)


def autopilot_play(engine: RoundEngine, seat_id: int) -> Card:
    """Choose the human seat's card with the computer heuristic (without playing it)."""
    seat = engine.seats[seat_id]
    return choose_card(seat.hand, engine.leading_suit, seat.tricks_won, seat.bid, trump=engine.trump)


def run_round(
    engine: RoundEngine,
    get_bid: Optional[GetBid] = None,
    get_play: Optional[GetPlay] = None,
    deck: list[Card] | None = None,
    shuffle_deck: bool = True,
) -> tuple[int, int, int, int]:
    """
    Play one full round synchronously. get_bid(engine) and get_play(engine, seat)
    answer for the human seat (default: the computer heuristics). Rejected human
    input is a caller bug and raises ValueError. Returns the per-seat deltas.
    """
    get_bid = get_bid or autopilot_bid
    get_play = get_play or autopilot_play
    engine.start_round(deck=deck, shuffle_deck=shuffle_deck)
    if engine.phase == Phase.BIDDING:
        bid = get_bid(engine)
        if not engine.submit_bid(bid):
            raise ValueError(f"Invalid bid {bid!r}")
    while engine.phase == Phase.PLAYING:
        engine.advance()
        if engine.awaiting_human():
            human = engine.human
            assert human is not None
            card = get_play(engine, human.id)
            if not engine.select_card(card):
                raise ValueError(f"Illegal play {card}; legal {engine.legal_cards(human.id)}")
    assert engine.last_deltas is not None
    return engine.last_deltas


def run_match(
    num_rounds: int,
    config: GameConfig | None = None,
    get_bid: Optional[GetBid] = None,
    get_play: Optional[GetPlay] = None,
    rng: random.Random | None = None,
    match: MatchState | None = None,
    store: StateStore | None = None,
) -> tuple[tuple[int, int, int, int], list[tuple[int, int, int, int]]]:
    """
    Play ``num_rounds`` rounds. Returns (final cumulative scores, list of per-round deltas).
    """
    engine = RoundEngine(config=config, match=match, store=store, rng=rng)
    per_round: list[tuple[int, int, int, int]] = []
    for _ in range(num_rounds):
        per_round.append(run_round(engine, get_bid=get_bid, get_play=get_play))
    return engine.match.scores, per_round
