"""Replay logging module."""

from .formatters import format_card, format_cards, format_event, format_scores
from .replay_logger import ReplayLogConfig, ReplayLogger

__all__ = [
    "ReplayLogConfig",
    "ReplayLogger",
    "format_card",
    "format_cards",
    "format_event",
    "format_scores",
]
