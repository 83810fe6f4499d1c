"""
Card model for the Balatro solver.
Suits, ranks, cards, fixed-size hands, loose card collections and the 52-card deck.
"""

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional


class Suit(IntEnum):
    SPADES = 0
    CLUBS = 1
    HEARTS = 2
    DIAMONDS = 3


class Rank(IntEnum):
    DEUCE = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


RANK_IDENTS = "23456789TJQKA"
SUIT_IDENTS = "SCHD"

HAND_CAPACITY = 5


class OverfullHand(ValueError):
    """Raised when more than HAND_CAPACITY cards are put into a Hand."""

    def __init__(self):
        super().__init__(f"a hand can have a maximum of {HAND_CAPACITY} cards")


@dataclass(frozen=True, order=True)
class Card:
    rank: Rank
    suit: Suit

    @classmethod
    def from_ident(cls, ident: str) -> "Card":
        """
        Build a card from its two-character identifier, e.g. "KH" or "td".

        Raises ValueError for anything that isn't a rank character followed
        by a suit character.
        """
        if len(ident) != 2:
            raise ValueError(f"Card identifier must be 2 characters: {ident!r}")

        rank_char, suit_char = ident.upper()
        if rank_char not in RANK_IDENTS:
            raise ValueError(f"Unknown rank {rank_char!r} in {ident!r}")
        if suit_char not in SUIT_IDENTS:
            raise ValueError(f"Unknown suit {suit_char!r} in {ident!r}")

        return cls(rank=Rank(RANK_IDENTS.index(rank_char)),
                   suit=Suit(SUIT_IDENTS.index(suit_char)))

    @property
    def ident(self) -> str:
        return f"{RANK_IDENTS[self.rank]}{SUIT_IDENTS[self.suit]}"

    def __str__(self) -> str:
        return self.ident

    def __repr__(self) -> str:
        return self.__str__()


def parse_cards(idents: str) -> list[Card]:
    """Parse a whitespace-separated list of card identifiers."""
    return [Card.from_ident(ident) for ident in idents.split()]


class Hand:
    """
    Up to five cards, in play order.

    Backed by a fixed list of HAND_CAPACITY slots and an explicit length, so
    a sixth card is refused instead of silently growing the hand.
    """

    def __init__(self):
        self._slots: list[Optional[Card]] = [None] * HAND_CAPACITY
        self._len = 0

    @classmethod
    def empty(cls) -> "Hand":
        return cls()

    @classmethod
    def from_slice(cls, cards: Iterable[Card]) -> "Hand":
        """Copy cards into a new hand. Raises OverfullHand past five cards."""
        hand = cls()
        for card in cards:
            hand.push(card)
        return hand

    @classmethod
    def from_idents(cls, idents: str) -> "Hand":
        return cls.from_slice(parse_cards(idents))

    def push(self, card: Card) -> None:
        if self._len >= HAND_CAPACITY:
            raise OverfullHand()
        self._slots[self._len] = card
        self._len += 1

    def view(self) -> tuple[Card, ...]:
        return tuple(self._slots[:self._len])

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Card]:
        return iter(self.view())

    def __getitem__(self, index):
        return self.view()[index]

    def __eq__(self, other) -> bool:
        # Positional: the same cards in a different order are a different hand
        if not isinstance(other, Hand):
            return NotImplemented
        return self.view() == other.view()

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.view())

    def __repr__(self) -> str:
        return f"Hand({self.__str__()})"


class CardCollection:
    """Any number of cards, e.g. an 8-card draw before it is cut down to a hand."""

    def __init__(self, cards: Iterable[Card] = ()):
        self.cards: list[Card] = list(cards)

    @classmethod
    def empty(cls) -> "CardCollection":
        return cls()

    @classmethod
    def from_idents(cls, idents: str) -> "CardCollection":
        return cls(parse_cards(idents))

    def nth(self, n: int) -> Optional[Card]:
        if 0 <= n < len(self.cards):
            return self.cards[n]
        return None

    def view(self) -> tuple[Card, ...]:
        return tuple(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CardCollection):
            return NotImplemented
        return self.cards == other.cards

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"CardCollection({self.__str__()})"


# Built once; every Deck starts from a copy
BASE_DECK_CARDS: tuple[Card, ...] = tuple(
    Card(rank=rank, suit=suit) for suit in Suit for rank in Rank
)


class Deck:
    """A 52-card deck. The top of the deck is the end of the list."""

    def __init__(self, cards: Iterable[Card] = ()):
        self.cards: list[Card] = list(cards)

    @classmethod
    def base_deck(cls) -> "Deck":
        """Create a standard, unshuffled 52-card deck."""
        return cls(BASE_DECK_CARDS)

    @classmethod
    def shuffled(cls, rng: random.Random) -> "Deck":
        deck = cls.base_deck()
        deck.shuffle(rng)
        return deck

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self.cards)

    def peek_top_card(self) -> Optional[Card]:
        if self.cards:
            return self.cards[-1]
        return None

    def draw(self) -> Optional[Card]:
        """Draw the top card, or None once the deck is empty."""
        if self.cards:
            return self.cards.pop()
        return None

    def draw_hand(self) -> Optional[Hand]:
        """Draw exactly five cards, or None if fewer remain."""
        if self.count() < HAND_CAPACITY:
            return None
        return Hand.from_slice(self.cards.pop() for _ in range(HAND_CAPACITY))

    def draw_n(self, n: int) -> Optional[CardCollection]:
        """Draw exactly n cards, or None if fewer remain."""
        if self.count() < n:
            return None
        return CardCollection(self.cards.pop() for _ in range(n))

    def count(self) -> int:
        return len(self.cards)

    def view(self) -> tuple[Card, ...]:
        return tuple(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Deck({self.count()} cards)"
