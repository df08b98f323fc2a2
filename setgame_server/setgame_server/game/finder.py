"""Match search over an unordered collection of cards.

All searches enumerate pairs (or 6-card subsets) in ascending index order
over the given card list, so the reported match is reproducible: it is the
first one found in that order.
"""

from itertools import combinations
from typing import Iterable, Sequence

from setgame_server.models.card import Card, CardSet

from .algebra import check_set_hyper, conjugate


def unique_cards(cards: Iterable[Card]) -> list[Card]:
    """Get cards as a duplicate-free list.

    A CardSet is listed sorted by code; other iterables keep their order
    (first occurrence wins).
    """
    if isinstance(cards, CardSet):
        return cards.to_list()
    return list(dict.fromkeys(cards))


def find_triple(cards: Sequence[Card]) -> list[Card] | None:
    """Find a set among the cards.

    Returns:
        [a, b, conjugate(a, b)] for the first pair whose conjugate is present.
    """
    present = set(cards)
    for a, b in combinations(cards, 2):
        c = conjugate(a, b)
        if c in present:
            return [a, b, c]
    return None


def find_chained_triple(
    cards: Sequence[Card], previous: Sequence[Card]
) -> list[Card] | None:
    """Find a set made of two cards plus one card of the previous match.

    Returns:
        [carried, a, b] where carried is taken from `previous`.
    """
    for a, b in combinations(cards, 2):
        c = conjugate(a, b)
        if c in previous:
            return [c, a, b]
    return None


def find_ultra(cards: Sequence[Card]) -> list[Card] | None:
    """Find an ultraset: two pairs sharing the same conjugate.

    Returns:
        The earlier pair's cards followed by the later pair's cards.
    """
    seen: dict[Card, tuple[Card, Card]] = {}
    for a, b in combinations(cards, 2):
        c = conjugate(a, b)
        if c in seen:
            return [*seen[c], a, b]
        seen[c] = (a, b)
    return None


def find_hyper(cards: Sequence[Card]) -> list[Card] | None:
    """Find a hyperset by testing every 6-card subset.

    This is a choose-6 scan, only meant for the small collections a
    hyperset board holds.
    """
    for subset in combinations(cards, 6):
        if check_set_hyper(*subset):
            return list(subset)
    return None
