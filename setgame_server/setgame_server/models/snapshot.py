"""Game snapshot model."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .event import GameMode


class GameSnapshot(BaseModel):
    """Materialized game document: initial deck, raw events and mode.

    Events may be a list or a mapping of push ids to events, which is how
    the document store returns them, or null before the first claim. They
    stay raw here; replay parses them.
    """

    deck: list[str] = Field(default_factory=list)
    events: list[Any] | dict[str, Any] | None = Field(default_factory=list)
    mode: GameMode = GameMode.NORMAL


def load_snapshot(path: Path | str) -> GameSnapshot:
    """Load a game snapshot from a JSON file.

    Args:
        path: Path to snapshot file.

    Returns:
        GameSnapshot object.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    return GameSnapshot.model_validate(data)
