"""Game models."""

from .card import ALL_CARDS, Card, CardCodeError, CardSet, create_full_deck
from .event import GameEvent, GameMode, parse_events
from .game_state import AcceptedMatch, History, ReplayResult
from .snapshot import GameSnapshot, load_snapshot

__all__ = [
    "ALL_CARDS",
    "Card",
    "CardCodeError",
    "CardSet",
    "create_full_deck",
    "GameEvent",
    "GameMode",
    "parse_events",
    "AcceptedMatch",
    "History",
    "ReplayResult",
    "GameSnapshot",
    "load_snapshot",
]
