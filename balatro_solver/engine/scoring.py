"""
Scoring for the Balatro solver.

Score = (Base Chips + Card Chips) × Base Mult
"""

from dataclasses import dataclass
from typing import Iterable

from .deck import Card, Rank
from .hand_detector import HandKind


# Base chips and mult for each hand kind (level 1)
HAND_BASE_VALUES = {
    HandKind.HIGH_CARD: (5.0, 1.0),
    HandKind.PAIR: (10.0, 2.0),
    HandKind.TWO_PAIR: (20.0, 2.0),
    HandKind.THREE_OF_A_KIND: (30.0, 3.0),
    HandKind.STRAIGHT: (30.0, 4.0),
    HandKind.FLUSH: (35.0, 4.0),
    HandKind.FULL_HOUSE: (40.0, 4.0),
    HandKind.FOUR_OF_A_KIND: (60.0, 7.0),
    HandKind.STRAIGHT_FLUSH: (100.0, 8.0),
    HandKind.FIVE_OF_A_KIND: (120.0, 12.0),
    HandKind.FLUSH_HOUSE: (140.0, 14.0),
    HandKind.FLUSH_FIVE: (160.0, 16.0),
}

# Chips added by each scoring card
RANK_CHIPS = {
    Rank.DEUCE: 2.0,
    Rank.THREE: 3.0,
    Rank.FOUR: 4.0,
    Rank.FIVE: 5.0,
    Rank.SIX: 6.0,
    Rank.SEVEN: 7.0,
    Rank.EIGHT: 8.0,
    Rank.NINE: 9.0,
    Rank.TEN: 10.0,
    Rank.JACK: 10.0,
    Rank.QUEEN: 10.0,
    Rank.KING: 10.0,
    Rank.ACE: 11.0,
}


@dataclass
class ScoreBreakdown:
    """How a hand's score was put together."""
    kind: HandKind
    base_chips: float
    card_chips: float
    mult: float

    @property
    def chips(self) -> float:
        return self.base_chips + self.card_chips

    @property
    def score(self) -> float:
        return self.chips * self.mult

    def __str__(self) -> str:
        return (f"{self.kind.label}: ({self.base_chips:g} + {self.card_chips:g}) chips"
                f" × {self.mult:g} mult = {self.score:g}")


def score_breakdown(kind: HandKind, hand: Iterable[Card]) -> ScoreBreakdown:
    """Break down the score of the scoring cards `hand` played as `kind`."""
    base_chips, mult = HAND_BASE_VALUES[kind]
    card_chips = sum(RANK_CHIPS[card.rank] for card in hand)
    return ScoreBreakdown(kind=kind, base_chips=base_chips, card_chips=card_chips, mult=mult)


def score_hand(kind: HandKind, hand: Iterable[Card]) -> float:
    return score_breakdown(kind, hand).score
