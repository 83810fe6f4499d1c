"""
Tests for the bitmask card set.
"""

from balatro_solver.engine.cardset import (
    CardSet, ALL_CARDS_MASK, SUIT_MASKS, card_mask,
)
from balatro_solver.engine.deck import BASE_DECK_CARDS, Card, CardCollection, Suit


def c(ident: str) -> Card:
    return Card.from_ident(ident)


class TestCardSet:
    def test_counting(self):
        cardset = CardSet.full()

        assert cardset.count() == 52
        for suit in Suit:
            assert cardset.count_in_suit(suit) == 13

        assert cardset.contains(c("KH"))
        cardset.remove(c("KH"))
        assert not cardset.contains(c("KH"))
        assert cardset.count() == 51
        assert cardset.count_in_suit(Suit.HEARTS) == 12

    def test_from_cards_collapses_duplicates(self):
        cardset = CardSet.from_cards(CardCollection.from_idents("KH TS 9D 8C 8C 8C TS KS KD"))
        assert cardset.count() == 6

    def test_empty(self):
        cardset = CardSet.empty()
        assert cardset.count() == 0
        assert not any(card in cardset for card in BASE_DECK_CARDS)

    def test_insert_is_idempotent(self):
        cardset = CardSet.empty()
        cardset.insert(c("AS"))
        cardset.insert(c("AS"))
        assert cardset.count() == 1
        assert c("AS") in cardset

    def test_remove_absent_card_is_noop(self):
        cardset = CardSet.from_cards([c("2S"), c("3C")])
        cardset.remove(c("AD"))
        assert cardset == CardSet.from_cards([c("2S"), c("3C")])

    def test_remove_stays_in_valid_positions(self):
        cardset = CardSet(bits=0xFFFF_FFFF_FFFF_FFFF)
        cardset.remove(c("2S"))
        assert cardset.bits & ~ALL_CARDS_MASK == 0
        assert cardset.count() == 51

    def test_lane_layout(self):
        assert card_mask(c("2S")) == 1
        assert card_mask(c("AS")) == 1 << 12
        assert card_mask(c("2C")) == 1 << 16
        assert card_mask(c("AD")) == 1 << 60

    def test_suit_lanes(self):
        for suit, mask in SUIT_MASKS.items():
            assert bin(mask).count("1") == 13
            assert mask == 0x1FFF << (suit << 4)
        assert bin(ALL_CARDS_MASK).count("1") == 52
        assert ALL_CARDS_MASK & ~0x1FFF_1FFF_1FFF_1FFF == 0

    def test_full_mask_is_every_card(self):
        assert CardSet.from_cards(BASE_DECK_CARDS) == CardSet.full()
        assert sum(bin(mask).count("1") for mask in SUIT_MASKS.values()) == 52

    def test_count_in_suit(self):
        cardset = CardSet.from_cards(CardCollection.from_idents("AS KS 2H 3H 4H"))
        assert cardset.count_in_suit(Suit.SPADES) == 2
        assert cardset.count_in_suit(Suit.HEARTS) == 3
        assert cardset.count_in_suit(Suit.CLUBS) == 0
