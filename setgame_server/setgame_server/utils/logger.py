"""Logging utilities and replay result display."""

import logging
import sys
from typing import TYPE_CHECKING

from setgame_server.logging.formatters import format_cards, format_scores

if TYPE_CHECKING:
    from setgame_server.models.card import Card
    from setgame_server.models.game_state import ReplayResult


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class ReplayDisplay:
    """Display replay results to stdout."""

    def __init__(self, show_deck: bool = False):
        """Initialize display.

        Args:
            show_deck: Whether to list the remaining cards
        """
        self.show_deck = show_deck

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_match(self, cards: "list[Card] | None") -> None:
        """Print a found match (or its absence)."""
        if cards is None:
            print("No match found")
        else:
            print(f"Match: {format_cards(cards)}")

    def print_result(self, mode: str, result: "ReplayResult", game_over: bool) -> None:
        """Print a replay summary."""
        self.print_separator()
        print(f"REPLAY ({mode})")
        self.print_separator()
        print(f"Accepted events: {result.accepted_count}")
        print(f"Final time: {result.final_time}")
        print(f"Cards left: {result.deck.count()}")
        if self.show_deck:
            print(f"Deck: {format_cards(result.deck)}")
        if result.last_set:
            print(f"Last set: {format_cards(result.last_set)}")
        print(f"Scores: {format_scores(result.scores) or '-'}")
        print(f"Game over: {'yes' if game_over else 'no'}")
