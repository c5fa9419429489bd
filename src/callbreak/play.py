"""
Trick-taking: legal moves, trick winner, computer card choice.
Follow the leading suit if able; otherwise any card may be played.
"""
from __future__ import annotations

from typing import Sequence

from .deck import Card, Suit

Trick = Sequence[tuple[int, Card]]


def leading_suit(trick: Trick) -> Suit | None:
    """Suit of the first card of the trick, or None while the trick is empty."""
    if not trick:
        return None
    return trick[0][1].suit


def has_suit(hand: Sequence[Card], suit: Suit) -> bool:
    return any(c.suit == suit for c in hand)


def is_legal(card: Card, hand: Sequence[Card], trick: Trick) -> bool:
    """
    A card is legal if no suit has been led yet, if the hand is void in the led
    suit, or if it follows the led suit. Only the player's own hand is consulted.
    """
    led = leading_suit(trick)
    if led is None:
        return True
    return card.suit == led or not has_suit(hand, led)


def legal_plays(hand: Sequence[Card], trick: Trick) -> list[Card]:
    """Cards from ``hand`` that may be played on ``trick``, in hand order."""
    return [c for c in hand if is_legal(c, hand, trick)]


def _beats(card: Card, best: Card, trump: Suit | None) -> bool:
    """True if ``card`` takes over from the current best card of the trick."""
    if trump is not None and card.suit == trump and best.suit != trump:
        return True
    return card.suit == best.suit and card.value > best.value


def trick_winner(trick: Trick, trump: Suit | None = None) -> tuple[int, Card]:
    """
    (seat, card) winning a complete trick.

    With a trump suit, the highest trump wins if any was played; otherwise the
    highest card of the led suit. With ``trump=None`` only the led suit counts.
    """
    if not trick:
        raise ValueError("Cannot resolve an empty trick")
    best_seat, best_card = trick[0]
    for seat, card in trick[1:]:
        if _beats(card, best_card, trump):
            best_seat, best_card = seat, card
    return best_seat, best_card


def choose_card(
    hand: Sequence[Card],
    led: Suit | None,
    tricks_won: int,
    bid: int,
    trump: Suit | None = None,
) -> Card:
    """
    Greedy computer play, no look-ahead.

    Candidates are the led-suit cards; when void, the trump cards (if a trump
    suit is in force); failing that, the whole hand. While short of the bid the
    highest candidate is played, otherwise the lowest. Ties keep hand order.
    """
    if not hand:
        raise ValueError("Cannot choose a card from an empty hand")
    candidates: list[Card] = []
    if led is not None:
        candidates = [c for c in hand if c.suit == led]
        if not candidates and trump is not None:
            candidates = [c for c in hand if c.suit == trump]
    if not candidates:
        candidates = list(hand)
    if tricks_won < bid:
        return max(candidates, key=lambda c: c.value)
    return min(candidates, key=lambda c: c.value)
