"""Call Break game engine: one human seat against three computer seats."""

__version__ = "0.1.0"

from .deck import Card, Suit, make_deck_52, parse_card
from .deal import deal_hands, first_to_play, next_dealer, turn_order
from .seats import ComputerSeat, HumanSeat, Seat, make_seats
from .bidding import compute_bid, high_card_points, is_valid_bid
from .play import choose_card, is_legal, legal_plays, trick_winner
from .scoring import round_score_delta
from .match import MatchState
from .persistence import JsonFileStore, MemoryStore, match_state_from_dict, match_state_to_dict
from .config import GameConfig, Variant
from .game import GameListener, Phase, RoundEngine, run_match, run_round
