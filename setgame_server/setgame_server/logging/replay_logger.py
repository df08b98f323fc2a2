"""Replay logger for auditing event decisions."""

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from pydantic import BaseModel

from setgame_server.models.event import GameEvent

from .formatters import format_cards, format_event

if TYPE_CHECKING:
    from setgame_server.game.validator import ValidationResult
    from setgame_server.models.card import CardSet
    from setgame_server.models.game_state import ReplayResult


class ReplayLogConfig(BaseModel):
    """Configuration for replay logging."""

    enabled: bool = False
    output_path: str = "replay_log.jsonl"


class ReplayLogger:
    """Logger for replay decisions in JSONL format.

    Each line in the output file is a JSON object representing one record:
    the start of a replay, one decision per event, and the final result.
    """

    def __init__(self, config: ReplayLogConfig | None = None):
        """Initialize replay logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or ReplayLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "ReplayLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, record: dict[str, Any]) -> None:
        """Write a record to the log file.

        Args:
            record: Record dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(record, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_replay_start(self, mode: str, deck: "CardSet", num_events: int) -> None:
        """Log replay start.

        Args:
            mode: Game mode value.
            deck: Initial deck.
            num_events: Number of parsed events to replay.
        """
        self._write({
            "type": "replay_start",
            "timestamp": datetime.now().isoformat(),
            "mode": mode,
            "deck_size": deck.count(),
            "num_events": num_events,
        })

    def log_event(
        self,
        index: int,
        event: GameEvent,
        result: "ValidationResult",
    ) -> None:
        """Log the decision for a single event.

        Args:
            index: Position of the event in replay (time) order.
            event: The event.
            result: Validation outcome.
        """
        record: dict[str, Any] = {
            "type": "event",
            "index": index,
            "event": format_event(event),
            "accepted": result.is_valid,
        }
        if result.is_valid:
            record["removed"] = format_cards(result.removed)
        else:
            record["reason"] = result.error_message
        self._write(record)

    def log_replay_end(self, result: "ReplayResult") -> None:
        """Log the final replay result."""
        self._write({
            "type": "replay_end",
            "accepted": result.accepted_count,
            **result.to_dict(),
        })
