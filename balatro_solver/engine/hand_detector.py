"""
Hand detection for the Balatro solver.
Classifies up to five cards into one of the twelve Balatro poker hands.
"""

import logging
from dataclasses import dataclass, fields
from enum import IntEnum
from itertools import combinations
from typing import Iterable, NamedTuple, Optional

from .cardset import CardSet
from .deck import Card, Hand, Rank, Suit, HAND_CAPACITY

logger = logging.getLogger(__name__)


class HandKind(IntEnum):
    """Poker hand types, ordered by strength."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    FIVE_OF_A_KIND = 9
    FLUSH_HOUSE = 10
    FLUSH_FIVE = 11

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class Options:
    """Rule variants for hand detection."""
    gapped_straights: bool = False                  # Shortcut: straights may skip one rank
    four_card_straights_and_flushes: bool = False   # Four Fingers: 4 cards are enough

    @classmethod
    def from_jokers(cls, shortcut: bool = False, four_fingers: bool = False) -> "Options":
        return cls(gapped_straights=shortcut, four_card_straights_and_flushes=four_fingers)

    def __or__(self, other: "Options") -> "Options":
        if not isinstance(other, Options):
            return NotImplemented
        return Options(**{
            f.name: getattr(self, f.name) or getattr(other, f.name) for f in fields(self)
        })

    def __contains__(self, other: "Options") -> bool:
        return all(getattr(self, f.name) for f in fields(other) if getattr(other, f.name))

    def __str__(self) -> str:
        enabled = [f.name for f in fields(self) if getattr(self, f.name)]
        return " | ".join(enabled) if enabled else "none"


GAPPED_STRAIGHTS = Options(gapped_straights=True)
FOUR_CARD_STRAIGHTS_AND_FLUSHES = Options(four_card_straights_and_flushes=True)


class DetectedHand(NamedTuple):
    """Result of hand detection: the hand kind and the cards that make it."""
    kind: HandKind
    hand: Hand


def _is_consecutive(left: Rank, right: Rank) -> bool:
    if left == Rank.DEUCE and right == Rank.ACE:
        return True
    return left - 1 == right


def _has_gap(left: Rank, right: Rank) -> bool:
    if left == Rank.THREE and right == Rank.ACE:
        return True
    return left - 2 == right


class HandEvaluator:
    """
    Classifies a single hand of at most five cards.

    Evaluating more than five cards at once would need tie-breaking between
    overlapping five-card subsets, so it is refused here; use
    find_best_poker_hand for larger pools.
    """

    def __init__(self, cards: Iterable[Card], options: Optional[Options] = None):
        cards = list(cards)
        if len(cards) > HAND_CAPACITY:
            raise ValueError(
                f"HandEvaluator takes at most {HAND_CAPACITY} cards, got {len(cards)}"
            )

        self.options = options or Options()
        self.length = len(cards)
        self.cards = Hand.from_slice(cards)
        self.sorted = Hand.from_slice(sorted(cards, reverse=True))
        self.cardset = CardSet.from_cards(cards)

    @property
    def four_card(self) -> bool:
        return self.options.four_card_straights_and_flushes

    def evaluate_high_card(self) -> Optional[Hand]:
        if not self.length:
            return None
        return Hand.from_slice([self.sorted[0]])

    def evaluate_suit_matches(self, four_card: bool) -> Optional[Hand]:
        """Flush check. Returns every played card, not just the suited ones."""
        length = 4 if four_card else 5

        if self.length < length:
            return None

        if self.cardset.count() < self.length:
            # Duplicated cards collapse in the card set, count them by hand
            seen = [0] * len(Suit)
            for card in self.cards:
                seen[card.suit] += 1
            if any(count >= length for count in seen):
                return self.cards
            return None

        if any(self.cardset.count_in_suit(suit) == 5 for suit in Suit):
            return self.cards
        return None

    def evaluate_run(self) -> Optional[Hand]:
        """Straight check, honouring the Shortcut and Four Fingers variants."""
        four_card = self.four_card

        min_length = 4 if four_card else 5
        if self.length < min_length:
            return None

        can_gap = self.options.gapped_straights
        can_fail = four_card
        straight_length = 1

        ordered = self.sorted.view()
        for i, (left, right) in enumerate(zip(ordered, ordered[1:])):
            if _is_consecutive(left.rank, right.rank):
                straight_length += 1
            elif can_gap and _has_gap(left.rank, right.rank):
                straight_length += 1
                can_gap = False
            elif four_card and i == 3:
                # Only the lowest card broke the run; it gets dropped below
                break
            elif can_fail:
                straight_length = 1
                can_fail = False
            else:
                break

        if straight_length == 5 or (self.length == 4 and four_card and straight_length == 4):
            return self.cards

        if four_card and straight_length == 4:
            dropped = ordered[4] if can_fail else ordered[0]
            kept = list(self.cards)
            kept.remove(dropped)
            return Hand.from_slice(kept)

        return None

    def evaluate_rank_matches(self, match_size: int, match_count: int) -> Optional[Hand]:
        """
        Find exactly `match_count` ranks that each appear exactly `match_size` times.

        Returns the matching cards in play order.
        """
        if self.length < match_size * match_count:
            return None

        ranks = [0] * len(Rank)
        for card in self.sorted:
            ranks[card.rank] += 1

        matched_ranks = {rank for rank, count in enumerate(ranks) if count == match_size}
        if len(matched_ranks) != match_count:
            return None

        return Hand.from_slice(c for c in self.cards if c.rank in matched_ranks)

    def evaluate_full_house(self) -> Optional[Hand]:
        if self.length < 5:
            return None

        ordered = self.sorted.view()
        top_rank = ordered[0].rank

        # Either the triple or the pair sits on top, both need two matching cards
        if ordered[1].rank != top_rank:
            return None

        if ordered[2].rank == top_rank:
            pair_rank = ordered[3].rank
            if pair_rank == top_rank or ordered[4].rank != pair_rank:
                return None
        else:
            triple_rank = ordered[2].rank
            if ordered[3].rank != triple_rank or ordered[4].rank != triple_rank:
                return None

        return self.cards

    def evaluate(self) -> Optional[DetectedHand]:
        """Detect the best hand, checking kinds from strongest to weakest."""
        if not self.length:
            return None

        five_card_flush = self.evaluate_suit_matches(False) is not None

        if five_card_flush:
            hand = self.evaluate_rank_matches(5, 1)
            if hand is not None:
                return DetectedHand(HandKind.FLUSH_FIVE, hand)

        full_house = self.evaluate_full_house()

        if five_card_flush and full_house is not None:
            return DetectedHand(HandKind.FLUSH_HOUSE, full_house)

        hand = self.evaluate_rank_matches(5, 1)
        if hand is not None:
            return DetectedHand(HandKind.FIVE_OF_A_KIND, hand)

        straight = self.evaluate_run()

        if straight is not None and all(c.suit == straight[0].suit for c in straight):
            return DetectedHand(HandKind.STRAIGHT_FLUSH, straight)

        hand = self.evaluate_rank_matches(4, 1)
        if hand is not None:
            return DetectedHand(HandKind.FOUR_OF_A_KIND, hand)

        if full_house is not None:
            return DetectedHand(HandKind.FULL_HOUSE, full_house)

        hand = self.evaluate_suit_matches(self.four_card)
        if hand is not None:
            return DetectedHand(HandKind.FLUSH, hand)

        if straight is not None:
            return DetectedHand(HandKind.STRAIGHT, straight)

        hand = self.evaluate_rank_matches(3, 1)
        if hand is not None:
            return DetectedHand(HandKind.THREE_OF_A_KIND, hand)

        hand = self.evaluate_rank_matches(2, 2)
        if hand is not None:
            return DetectedHand(HandKind.TWO_PAIR, hand)

        hand = self.evaluate_rank_matches(2, 1)
        if hand is not None:
            return DetectedHand(HandKind.PAIR, hand)

        return DetectedHand(HandKind.HIGH_CARD, self.evaluate_high_card())


def evaluate_poker_hand(cards: Iterable[Card],
                        options: Optional[Options] = None) -> Optional[DetectedHand]:
    """Classify up to five cards. Returns None for an empty hand."""
    return HandEvaluator(cards, options).evaluate()


def find_best_poker_hand(cards: Iterable[Card],
                         options: Optional[Options] = None) -> Optional[DetectedHand]:
    """
    Best hand that can be played from a pool of any size.

    Every five-card combination is classified; the first combination of the
    strongest kind wins.
    """
    cards = list(cards)
    if len(cards) <= HAND_CAPACITY:
        return evaluate_poker_hand(cards, options)

    best: Optional[DetectedHand] = None
    for subset in combinations(cards, HAND_CAPACITY):
        detected = evaluate_poker_hand(subset, options)
        if best is None or detected.kind > best.kind:
            best = detected

    logger.debug("Best of %d cards: %s (%s)", len(cards), best.kind.name, best.hand)
    return best
