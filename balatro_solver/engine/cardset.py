"""
Bitmask card set used by the hand evaluator.

Each suit owns a 16-bit lane of a 64-bit word; inside a lane the bit
position is the rank. Bits 13-15 of every lane stay clear.
"""

from dataclasses import dataclass
from typing import Iterable

from .deck import Card, Suit


SPADES_MASK = 0x0000_0000_0000_1FFF
CLUBS_MASK = 0x0000_0000_1FFF_0000
HEARTS_MASK = 0x0000_1FFF_0000_0000
DIAMONDS_MASK = 0x1FFF_0000_0000_0000

ALL_CARDS_MASK = SPADES_MASK | CLUBS_MASK | HEARTS_MASK | DIAMONDS_MASK

SUIT_MASKS = {
    Suit.SPADES: SPADES_MASK,
    Suit.CLUBS: CLUBS_MASK,
    Suit.HEARTS: HEARTS_MASK,
    Suit.DIAMONDS: DIAMONDS_MASK,
}


def _popcount(bits: int) -> int:
    return bin(bits).count("1")


def card_mask(card: Card) -> int:
    return 1 << ((card.suit << 4) | card.rank)


@dataclass
class CardSet:
    bits: int = 0

    @classmethod
    def empty(cls) -> "CardSet":
        return cls(0)

    @classmethod
    def full(cls) -> "CardSet":
        return cls(ALL_CARDS_MASK)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "CardSet":
        """Fold cards into a set. Duplicate cards land on the same bit."""
        cardset = cls.empty()
        for card in cards:
            cardset.insert(card)
        return cardset

    def count(self) -> int:
        return _popcount(self.bits)

    def count_in_suit(self, suit: Suit) -> int:
        return _popcount(self.bits & SUIT_MASKS[suit])

    def insert(self, card: Card) -> None:
        self.bits |= card_mask(card)

    def remove(self, card: Card) -> None:
        self.bits &= ALL_CARDS_MASK & ~card_mask(card)

    def contains(self, card: Card) -> bool:
        return (self.bits & card_mask(card)) != 0

    def __contains__(self, card: Card) -> bool:
        return self.contains(card)

    def __len__(self) -> int:
        return self.count()
