"""Game event and game mode models."""

import logging
from enum import Enum
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, ValidationError

from .card import Card, CardCodeError

logger = logging.getLogger(__name__)


class GameMode(str, Enum):
    """Rule variant of a game session."""

    NORMAL = "normal"  # Classic triple match
    SETCHAIN = "setchain"  # Each match reuses one card of the previous match
    ULTRASET = "ultraset"  # Four cards, two pairs with equal conjugates
    HYPERSET = "hyperset"  # Six cards, pair conjugates form a triple match


# Number of card slots an event carries in each mode
MODE_ARITY: dict[GameMode, int] = {
    GameMode.NORMAL: 3,
    GameMode.SETCHAIN: 3,
    GameMode.ULTRASET: 4,
    GameMode.HYPERSET: 6,
}

MAX_CARD_SLOTS = 6


class GameEvent(BaseModel):
    """A player's timestamped claim of a match.

    Field names follow the stored event documents: "user" is the player
    identifier and c1..c6 are card codes. Events are untrusted input, so
    card slots are kept as raw strings until a policy validates them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    time: int | FiniteFloat
    player: str = Field(alias="user")
    c1: str | None = None
    c2: str | None = None
    c3: str | None = None
    c4: str | None = None
    c5: str | None = None
    c6: str | None = None

    def card_codes(self) -> list[str | None]:
        """Get all six card slots in order."""
        return [self.c1, self.c2, self.c3, self.c4, self.c5, self.c6]

    def cards(self, count: int) -> list[Card]:
        """Parse the first `count` card slots.

        Args:
            count: Number of cards the game mode expects.

        Returns:
            Parsed cards, in slot order.

        Raises:
            CardCodeError: If a slot within `count` is missing or malformed,
                or a slot beyond `count` is filled.
        """
        slots = self.card_codes()
        if any(code is not None for code in slots[count:]):
            raise CardCodeError(f"Event carries more than {count} cards")
        return [Card.from_code(code) for code in slots[:count]]


def parse_events(
    raw_events: Iterable[Any] | Mapping[str, Any] | None,
) -> list[GameEvent]:
    """Parse raw event documents into GameEvent objects.

    Entries that cannot be parsed (e.g. missing time or player, or a NaN or
    infinite time) are dropped.

    Args:
        raw_events: A list of event dicts, or a mapping of push ids to event
            dicts as delivered by the document store. None (a game with no
            events yet) is treated as an empty log.

    Returns:
        Parsed events in input order.
    """
    if raw_events is None:
        return []
    if isinstance(raw_events, Mapping):
        raw_events = raw_events.values()

    events: list[GameEvent] = []
    for raw in raw_events:
        if isinstance(raw, GameEvent):
            events.append(raw)
            continue
        try:
            events.append(GameEvent.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Dropping malformed event {raw!r}: {e.error_count()} errors")
    return events
