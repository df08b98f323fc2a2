"""Tests for event models."""

import logging

import pytest
from pydantic import ValidationError

from setgame_server.models.card import Card, CardCodeError
from setgame_server.models.event import MODE_ARITY, GameEvent, GameMode, parse_events


class TestGameMode:
    """Tests for GameMode."""

    def test_values(self):
        """Test the stored mode names."""
        assert [m.value for m in GameMode] == ["normal", "setchain", "ultraset", "hyperset"]

    def test_arity(self):
        """Test cards per match in each mode."""
        assert MODE_ARITY[GameMode.NORMAL] == 3
        assert MODE_ARITY[GameMode.SETCHAIN] == 3
        assert MODE_ARITY[GameMode.ULTRASET] == 4
        assert MODE_ARITY[GameMode.HYPERSET] == 6

    def test_unknown(self):
        """Test that unknown modes are rejected."""
        with pytest.raises(ValueError):
            GameMode("speedset")


class TestGameEvent:
    """Tests for GameEvent."""

    def test_parse_document(self):
        """Test parsing a stored event document."""
        event = GameEvent.model_validate(
            {"time": 1700000000000, "user": "uid1", "c1": "0000", "c2": "1111", "c3": "2222"}
        )
        assert event.time == 1700000000000
        assert event.player == "uid1"
        assert event.card_codes() == ["0000", "1111", "2222", None, None, None]

    def test_extra_fields_ignored(self):
        """Test that unknown document fields are ignored."""
        event = GameEvent.model_validate({"time": 1, "user": "a", "c1": "0000", "color": "red"})
        assert event.c1 == "0000"

    def test_missing_time(self):
        """Test that time is required."""
        with pytest.raises(ValidationError):
            GameEvent.model_validate({"user": "a"})

    @pytest.mark.parametrize("time", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_time(self, time):
        """Test that NaN and infinite times are rejected."""
        with pytest.raises(ValidationError):
            GameEvent.model_validate({"time": time, "user": "a"})

    def test_cards(self):
        """Test parsing card slots."""
        event = GameEvent(time=1, user="a", c1="0000", c2="1111", c3="2222")
        assert event.cards(3) == [Card.from_code(c) for c in ("0000", "1111", "2222")]

    def test_cards_missing_slot(self):
        """Test that a missing slot within the arity fails."""
        event = GameEvent(time=1, user="a", c1="0000", c2="1111", c3="2222")
        with pytest.raises(CardCodeError):
            event.cards(4)

    def test_cards_extra_slot(self):
        """Test that a filled slot beyond the arity fails."""
        event = GameEvent(time=1, user="a", c1="0000", c2="1111", c3="2222", c4="0120")
        with pytest.raises(CardCodeError):
            event.cards(3)

    def test_cards_malformed(self):
        """Test that a malformed code fails."""
        event = GameEvent(time=1, user="a", c1="0000", c2="1111", c3="2223")
        with pytest.raises(CardCodeError):
            event.cards(3)


class TestParseEvents:
    """Tests for parse_events()."""

    def test_list(self):
        """Test parsing a list keeps order."""
        events = parse_events([{"time": 2, "user": "b"}, {"time": 1, "user": "a"}])
        assert [e.player for e in events] == ["b", "a"]

    def test_mapping(self):
        """Test parsing a push-id mapping."""
        events = parse_events({"-Na": {"time": 1, "user": "a"}, "-Nb": {"time": 2, "user": "b"}})
        assert [e.player for e in events] == ["a", "b"]

    def test_passes_events_through(self):
        """Test that parsed events are accepted as-is."""
        event = GameEvent(time=1, user="a")
        assert parse_events([event]) == [event]

    def test_drops_malformed(self, caplog):
        """Test that unparseable entries are dropped with a warning."""
        with caplog.at_level(logging.WARNING):
            events = parse_events([{"user": "a"}, "junk", {"time": 1, "user": "b"}])

        assert [e.player for e in events] == ["b"]
        assert "Dropping malformed event" in caplog.text

    def test_none(self):
        """Test that a missing event log parses as empty."""
        assert parse_events(None) == []

    def test_drops_non_finite_time(self):
        """Test that events with a NaN or infinite time are dropped."""
        events = parse_events([
            {"time": float("nan"), "user": "a"},
            {"time": float("inf"), "user": "b"},
            {"time": 1.5, "user": "c"},
        ])
        assert [e.player for e in events] == ["c"]
