from __future__ import annotations

import pytest

from carddeck import deck, ordering, rng, transforms
from carddeck.cards import MAX_RANK, MIN_RANK, Card, Rank, Suit


def test_new_builds_base_deck_in_order() -> None:
    cards = deck.new()

    assert len(cards) == deck.BASE_DECK_SIZE == 13 * 4
    for i, suit in enumerate(Suit.standard()):
        for value in range(MIN_RANK, MAX_RANK + 1):
            card = cards[i * 13 + value - 1]
            assert card.suit == suit
            assert card.rank == Rank(value)


def test_new_returns_fresh_lists() -> None:
    first = deck.new()
    first.pop()

    assert len(deck.new()) == 52


def test_new_default_sort() -> None:
    cards = deck.new(transforms.default_sort)

    assert cards[0] == Card(Suit.SPADE, Rank.ACE)


def test_new_custom_sort() -> None:
    cards = deck.new(transforms.sort(ordering.less))

    assert cards[0] == Card(Suit.SPADE, Rank.ACE)


def test_new_with_jokers() -> None:
    cards = deck.new(transforms.jokers(3))

    assert sum(1 for card in cards if card.suit == Suit.JOKER) == 3


def test_new_with_filter() -> None:
    cards = deck.new(transforms.filter_cards(lambda card: card.rank in (Rank.TWO, Rank.THREE)))

    assert len(cards) == 44
    assert not any(card.rank in (Rank.TWO, Rank.THREE) for card in cards)


def test_new_with_multiple_decks() -> None:
    cards = deck.new(transforms.decks(3))

    assert len(cards) == 13 * 4 * 3
    assert cards == deck.base_deck() * 3


def test_transforms_apply_left_to_right() -> None:
    jokers_then_filter = deck.new(transforms.jokers(2), transforms.filter_cards(lambda card: card.is_joker))
    filter_then_jokers = deck.new(transforms.filter_cards(lambda card: card.is_joker), transforms.jokers(2))

    assert len(jokers_then_filter) == 52
    assert len(filter_then_jokers) == 54


def test_shuffle_then_sort_round_trip() -> None:
    source = rng.ShuffleSource(2024)

    assert deck.new(transforms.shuffler(source), transforms.default_sort) == deck.new()


def test_seeded_shuffle_is_reproducible() -> None:
    first = deck.new(transforms.shuffler(rng.ShuffleSource(0)))
    second = deck.new(transforms.shuffler(rng.ShuffleSource(0)))

    assert first == second
    assert first != deck.new()


def test_apply_transforms_on_custom_sequence() -> None:
    hand = [Card(Suit.HEART, Rank.KING), Card(Suit.SPADE, Rank.TWO)]

    result = deck.apply_transforms(hand, [transforms.decks(2), transforms.default_sort])

    assert result == [hand[1], hand[1], hand[0], hand[0]]
    assert hand == [Card(Suit.HEART, Rank.KING), Card(Suit.SPADE, Rank.TWO)]


def test_transform_errors_propagate() -> None:
    calls: list[int] = []

    def _boom(cards: list[Card]) -> list[Card]:
        raise RuntimeError("broken transform")

    def _record(cards: list[Card]) -> list[Card]:
        calls.append(len(cards))
        return cards

    with pytest.raises(RuntimeError, match="broken transform"):
        deck.new(_record, _boom, _record)

    assert calls == [52]
