"""
Balatro Hand Solver
"""

from .engine.deck import Card, CardCollection, Deck, Hand, OverfullHand, Rank, Suit, parse_cards
from .engine.hand_detector import (HandKind, Options, DetectedHand, HandEvaluator,
                                   GAPPED_STRAIGHTS, FOUR_CARD_STRAIGHTS_AND_FLUSHES,
                                   evaluate_poker_hand, find_best_poker_hand)
from .engine.scoring import ScoreBreakdown, score_breakdown, score_hand

__version__ = "0.1.0"
