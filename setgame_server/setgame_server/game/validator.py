"""Structural validation for submitted claims."""

from dataclasses import dataclass, field
from typing import Sequence

from setgame_server.models.card import Card, CardSet


@dataclass
class ValidationResult:
    """Result of validating one event.

    The error message is diagnostic only; callers treat every rejection the
    same way.
    """

    is_valid: bool
    error_message: str = ""
    removed: list[Card] = field(default_factory=list)

    @classmethod
    def reject(cls, message: str) -> "ValidationResult":
        """Create a rejection."""
        return cls(is_valid=False, error_message=message)


def check_distinct(cards: Sequence[Card]) -> bool:
    """Check that no card appears twice in a claim."""
    return len(set(cards)) == len(cards)


def check_claim(deck: CardSet, cards: Sequence[Card]) -> ValidationResult:
    """Check that claimed cards are pairwise distinct and all in the deck.

    Args:
        deck: Cards still in play
        cards: Cards named by the claim

    Returns:
        ValidationResult (removed is left empty)
    """
    if not check_distinct(cards):
        return ValidationResult.reject("Claim names the same card twice")

    for card in cards:
        if card not in deck:
            return ValidationResult.reject(f"Card {card} is not in the deck")

    return ValidationResult(is_valid=True)
