"""
Balatro solver engine components.
"""

from .deck import (Card, CardCollection, Deck, Hand, OverfullHand, Rank, Suit,
                   HAND_CAPACITY, parse_cards)
from .cardset import CardSet
from .hand_detector import (HandKind, Options, DetectedHand, HandEvaluator,
                            GAPPED_STRAIGHTS, FOUR_CARD_STRAIGHTS_AND_FLUSHES,
                            evaluate_poker_hand, find_best_poker_hand)
from .scoring import ScoreBreakdown, score_breakdown, score_hand
