"""
Distribution (deal) for the 4 Call Break seats: 13 cards each, one at a time.
Seats are numbered 0..3 in play direction; play starts right after the dealer.
"""
from __future__ import annotations

import logging
import random
from typing import Sequence

from .deck import DECK_SIZE, HAND_SIZE, Card, make_deck_52, shuffle
from .seats import Seat

NUM_SEATS = 4

logger = logging.getLogger(__name__)


def deal_hands(
    seats: Sequence[Seat],
    deck: list[Card] | None = None,
    rng: random.Random | None = None,
    shuffle_deck: bool = True,
) -> None:
    """
    Shuffle the deck, clear every hand and deal round-robin, one card per seat per
    pass, 13 passes. Cards are drawn from the end of the deck, which is exhausted.

    Pass ``shuffle_deck=False`` with a pre-ordered ``deck`` to get a fixed deal.
    """
    if len(seats) != NUM_SEATS:
        raise ValueError(f"Call Break needs exactly {NUM_SEATS} seats, got {len(seats)}")
    if deck is None:
        deck = make_deck_52()
    if len(deck) != DECK_SIZE or len(set(deck)) != DECK_SIZE:
        raise ValueError(
            f"Deck must hold {DECK_SIZE} distinct cards, got {len(deck)} with {len(set(deck))} distinct"
        )
    if shuffle_deck:
        shuffle(deck, rng)

    for seat in seats:
        seat.hand.clear()
    for _ in range(HAND_SIZE):
        for seat in seats:
            seat.hand.append(deck.pop())
    logger.debug("dealt %d cards to %d seats", HAND_SIZE * NUM_SEATS, NUM_SEATS)


def next_dealer(dealer: int) -> int:
    """Dealer rotates in play direction (0 -> 1 -> 2 -> 3 -> 0)."""
    return (dealer + 1) % NUM_SEATS


def first_to_play(dealer: int) -> int:
    """The seat immediately after the dealer leads the first trick."""
    return (dealer + 1) % NUM_SEATS


def turn_order(leader: int) -> list[int]:
    """Seats in play order for a trick led by ``leader``."""
    return [(leader + i) % NUM_SEATS for i in range(NUM_SEATS)]
