"""
Seats at the table. All seats share the same per-round data (hand, bid, tricks won)
and the match score; only computer seats carry a bidding and play policy.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .bidding import compute_bid
from .deck import Card, Suit
from .play import choose_card


@dataclass
class Seat:
    """Common seat data."""

    id: int
    hand: list[Card] = field(default_factory=list)
    bid: int = 0
    tricks_won: int = 0
    score: int = 0

    def reset_for_round(self) -> None:
        self.hand.clear()
        self.bid = 0
        self.tricks_won = 0

    def remove_card(self, card: Card) -> None:
        if card not in self.hand:
            raise ValueError(f"Card {card} not in hand of seat {self.id}")
        self.hand.remove(card)

    @property
    def name(self) -> str:
        return f"Player {self.id}"


@dataclass
class HumanSeat(Seat):
    """Seat driven through the human input channel (submit_bid / select_card)."""

    @property
    def name(self) -> str:
        return "You"


@dataclass
class ComputerSeat(Seat):
    """Seat driven by the greedy heuristics in ``bidding`` and ``play``."""

    advanced_bidding: bool = True

    def make_bid(self) -> int:
        """Compute and record this seat's bid for the round."""
        self.bid = compute_bid(self.hand, advanced=self.advanced_bidding)
        return self.bid

    def play(self, led: Suit | None, trump: Suit | None = None) -> Card:
        """Pick a card with the greedy policy and remove it from the hand."""
        card = choose_card(self.hand, led, self.tricks_won, self.bid, trump=trump)
        self.remove_card(card)
        return card


AnySeat = Union[HumanSeat, ComputerSeat]


def make_seats(human_seat: int | None = 0, advanced_bidding: bool = True) -> list[AnySeat]:
    """Four seats; ``human_seat`` is the index of the human, or None for an all-computer table."""
    seats: list[AnySeat] = []
    for i in range(4):
        if i == human_seat:
            seats.append(HumanSeat(id=i))
        else:
            seats.append(ComputerSeat(id=i, advanced_bidding=advanced_bidding))
    return seats
