"""
Tests for the base chips × mult scoring.
"""

import pytest

from balatro_solver.engine.deck import Hand
from balatro_solver.engine.hand_detector import HandKind, evaluate_poker_hand
from balatro_solver.engine.scoring import (
    HAND_BASE_VALUES, RANK_CHIPS, score_breakdown, score_hand,
)


@pytest.mark.parametrize("cards, kind, expected", [
    ("2H 3H 4H 5H 6C", HandKind.STRAIGHT, 200.0),
    ("3D 3D 2C 2C", HandKind.TWO_PAIR, 60.0),
    ("AS KS QS JS TS", HandKind.STRAIGHT_FLUSH, 1208.0),
    ("AS", HandKind.HIGH_CARD, 16.0),
    ("", HandKind.HIGH_CARD, 5.0),
])
def test_score_hand(cards, kind, expected):
    assert score_hand(kind, Hand.from_idents(cards)) == pytest.approx(expected)


def test_tables_cover_every_kind_and_rank():
    assert len(HAND_BASE_VALUES) == 12
    assert len(RANK_CHIPS) == 13


def test_breakdown():
    breakdown = score_breakdown(HandKind.PAIR, Hand.from_idents("KH KD"))
    assert breakdown.base_chips == 10.0
    assert breakdown.card_chips == 20.0
    assert breakdown.mult == 2.0
    assert breakdown.chips == 30.0
    assert breakdown.score == 60.0
    assert str(breakdown) == "Pair: (10 + 20) chips × 2 mult = 60"


def test_scores_detected_hand():
    kind, hand = evaluate_poker_hand(Hand.from_idents("9S 9S 9S 9S 9S"))
    assert kind == HandKind.FLUSH_FIVE
    assert score_hand(kind, hand) == pytest.approx((160 + 5 * 9) * 16)


def test_score_is_float():
    assert isinstance(score_hand(HandKind.PAIR, Hand.from_idents("2C 2D")), float)
