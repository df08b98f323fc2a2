"""Formatters for replay log output."""

from typing import Iterable

from setgame_server.models.card import Card, CardSet
from setgame_server.models.event import GameEvent


def format_card(card: Card) -> str:
    """Format a single card to its code (e.g., "0120")."""
    return card.code


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string.

    Args:
        cards: Cards to format. A CardSet is listed sorted by code;
            other iterables keep their order.

    Returns:
        Comma-separated card codes (e.g., "0000,1111,2222").
        Empty string if no cards.
    """
    if isinstance(cards, CardSet):
        cards = cards.to_list()
    return ",".join(format_card(c) for c in cards)


def format_event(event: GameEvent) -> dict[str, object]:
    """Format an event to a dict in stored document shape.

    Empty card slots are omitted.
    """
    record: dict[str, object] = {"time": event.time, "user": event.player}
    for i, code in enumerate(event.card_codes(), 1):
        if code is not None:
            record[f"c{i}"] = code
    return record


def format_scores(scores: dict[str, int]) -> str:
    """Format scores as "player:count" pairs, best first.

    Returns:
        e.g. "alice:3, bob:1". Empty string if no scores.
    """
    ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
    return ", ".join(f"{player}:{count}" for player, count in ranked)
