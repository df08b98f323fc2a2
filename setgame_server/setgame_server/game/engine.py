"""Replay engine for claimed matches."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from setgame_server.config import Config
from setgame_server.models.card import Card, CardSet
from setgame_server.models.event import GameMode, parse_events
from setgame_server.models.game_state import History, ReplayResult

from .finder import unique_cards
from .modes import ModePolicy, get_policy

if TYPE_CHECKING:
    from setgame_server.config import RulesConfig
    from setgame_server.logging import ReplayLogger
    from setgame_server.models.snapshot import GameSnapshot

logger = logging.getLogger(__name__)


def _to_card(card: Card | str) -> Card:
    """Accept a card or its code."""
    if isinstance(card, Card):
        return card
    return Card.from_code(card)


def _to_card_set(cards: Iterable[Card | str]) -> CardSet:
    """Copy cards (or codes) into a fresh CardSet."""
    if isinstance(cards, CardSet):
        return cards.copy()
    return CardSet(_to_card(c) for c in cards)


def _candidates(cards: Iterable[Card | str]) -> list[Card]:
    """Get the duplicate-free search order for cards (or codes)."""
    if isinstance(cards, CardSet):
        return unique_cards(cards)
    return unique_cards(_to_card(c) for c in cards)


class ReplayEngine:
    """Replays a game's event log under one game mode."""

    def __init__(
        self,
        mode: GameMode | str,
        config: Config | None = None,
        replay_logger: ReplayLogger | None = None,
    ):
        """Initialize replay engine.

        Args:
            mode: Game mode of the session
            config: Configuration (uses defaults if not provided)
            replay_logger: ReplayLogger instance for auditing decisions
        """
        self.mode = GameMode(mode)
        self.config = config or Config()
        self.policy: ModePolicy = get_policy(self.mode, self.config.rules)
        self.replay_logger = replay_logger

    def replay(
        self,
        initial_deck: Iterable[Card | str],
        raw_events: Iterable[Any] | Mapping[str, Any] | None,
    ) -> ReplayResult:
        """Replay events against an initial deck.

        Events are applied in time order (ties keep input order). Each event
        is either accepted, removing its cards and scoring a point for its
        player, or discarded without any effect.

        Args:
            initial_deck: Cards (or card codes) at the start of the game
            raw_events: Event documents, as a list or a mapping of push ids,
                or None for a game with no events

        Returns:
            ReplayResult with the remaining deck, final time and scores

        Raises:
            CardCodeError: If the initial deck holds a malformed code
        """
        deck = _to_card_set(initial_deck)
        # sorted() is stable, so events with equal times keep their order
        events = sorted(parse_events(raw_events), key=lambda e: e.time)

        history = History()
        scores: dict[str, int] = {}
        final_time: int | float = 0

        if self.replay_logger:
            self.replay_logger.log_replay_start(self.mode.value, deck, len(events))

        for index, event in enumerate(events):
            result = self.policy.validate_and_apply(deck, history, event)

            if self.replay_logger:
                self.replay_logger.log_event(index, event, result)

            if not result.is_valid:
                logger.debug(
                    f"Rejected event from {event.player} at {event.time}: "
                    f"{result.error_message}"
                )
                continue

            scores[event.player] = scores.get(event.player, 0) + 1
            final_time = event.time

        last_set: list[Card] = []
        last = history.last()
        if self.mode == GameMode.SETCHAIN and last is not None:
            last_set = list(last.cards)

        replay_result = ReplayResult(
            deck=deck,
            final_time=final_time,
            scores=scores,
            last_set=last_set,
            accepted_count=len(history),
        )
        logger.debug(f"Replayed {len(events)} events ({self.mode.value}): {replay_result}")

        if self.replay_logger:
            self.replay_logger.log_replay_end(replay_result)

        return replay_result

    def find_set(
        self,
        cards: Iterable[Card | str],
        old: Iterable[Card | str] | None = None,
    ) -> list[Card] | None:
        """Find a match among cards under this engine's mode."""
        previous = [_to_card(c) for c in old or []]
        return self.policy.find_match(_candidates(cards), previous)

    def is_game_over(self, result: ReplayResult) -> bool:
        """Check if no match remains after a replay.

        In setchain the previous match's cards count as available carries.
        """
        return self.find_set(result.deck, result.last_set) is None


def replay_events(
    initial_deck: Iterable[Card | str],
    raw_events: Iterable[Any] | Mapping[str, Any] | None,
    mode: GameMode | str,
    config: Config | None = None,
) -> ReplayResult:
    """Replay an event log. See ReplayEngine.replay."""
    return ReplayEngine(mode, config).replay(initial_deck, raw_events)


def replay_snapshot(
    snapshot: GameSnapshot,
    config: Config | None = None,
    replay_logger: ReplayLogger | None = None,
) -> ReplayResult:
    """Replay a materialized game snapshot under its own mode."""
    engine = ReplayEngine(snapshot.mode, config, replay_logger)
    return engine.replay(snapshot.deck, snapshot.events)


def find_set(
    cards: Iterable[Card | str],
    mode: GameMode | str,
    old: Iterable[Card | str] | None = None,
    rules: RulesConfig | None = None,
) -> list[Card] | None:
    """Find a match in an unordered collection of cards.

    Pairs are enumerated in ascending index order over `cards` (a CardSet
    is sorted by code first), so the result is deterministic.

    Args:
        cards: Cards (or codes) to search; duplicates are ignored
        mode: Game mode deciding the match shape
        old: Cards of the previous match (setchain only)
        rules: Rules configuration

    Returns:
        The matched cards, or None if no match exists
    """
    policy = get_policy(mode, rules)
    return policy.find_match(_candidates(cards), [_to_card(c) for c in old or []])


def is_game_over(result: ReplayResult, mode: GameMode | str) -> bool:
    """Check if the remaining deck of a replay holds no match."""
    return find_set(result.deck, mode, result.last_set) is None
