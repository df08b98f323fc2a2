"""Replay state models."""

from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field

from .card import Card, CardSet
from .event import GameEvent


class AcceptedMatch(BaseModel):
    """An event accepted during replay, with the cards it claimed."""

    model_config = ConfigDict(frozen=True)

    event: GameEvent
    cards: tuple[Card, ...]


class History:
    """Append-only log of accepted matches, in acceptance order."""

    def __init__(self) -> None:
        self._matches: list[AcceptedMatch] = []

    def append(self, match: AcceptedMatch) -> None:
        """Record an accepted match."""
        self._matches.append(match)

    def last(self) -> AcceptedMatch | None:
        """Get the most recently accepted match, if any."""
        return self._matches[-1] if self._matches else None

    def is_empty(self) -> bool:
        """Check if no match has been accepted yet."""
        return not self._matches

    def __iter__(self) -> Iterator[AcceptedMatch]:
        return iter(self._matches)

    def __len__(self) -> int:
        return len(self._matches)

    def __repr__(self) -> str:
        return f"History({len(self._matches)} matches)"


class ReplayResult(BaseModel):
    """Outcome of replaying an event log."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    deck: CardSet = Field(default_factory=CardSet)
    final_time: int | float = 0
    scores: dict[str, int] = Field(default_factory=dict)
    last_set: list[Card] = Field(default_factory=list)  # setchain only
    accepted_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored game document shape."""
        return {
            "deck": self.deck.to_codes(),
            "finalTime": self.final_time,
            "scores": dict(self.scores),
            "lastSet": [c.code for c in self.last_set],
        }

    def __str__(self) -> str:
        return (
            f"{self.deck.count()} cards left, {self.accepted_count} accepted, "
            f"final time {self.final_time}"
        )
