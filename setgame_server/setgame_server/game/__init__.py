"""Game logic."""

from .algebra import check_set, check_set_hyper, check_set_ultra, conjugate
from .dealer import generate_deck
from .engine import ReplayEngine, find_set, is_game_over, replay_events, replay_snapshot
from .modes import (
    HyperSetPolicy,
    ModePolicy,
    NormalPolicy,
    SetChainPolicy,
    UltraSetPolicy,
    get_policy,
)
from .validator import ValidationResult

__all__ = [
    "check_set",
    "check_set_hyper",
    "check_set_ultra",
    "conjugate",
    "generate_deck",
    "ReplayEngine",
    "find_set",
    "is_game_over",
    "replay_events",
    "replay_snapshot",
    "ModePolicy",
    "NormalPolicy",
    "SetChainPolicy",
    "UltraSetPolicy",
    "HyperSetPolicy",
    "get_policy",
    "ValidationResult",
]
