"""Rule policies for each game mode.

Each GameMode is handled by one ModePolicy subclass that knows how to search
for a match and how to validate and apply a submitted event.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from setgame_server.config import RulesConfig
from setgame_server.models.card import Card, CardCodeError, CardSet
from setgame_server.models.event import MODE_ARITY, GameEvent, GameMode
from setgame_server.models.game_state import AcceptedMatch, History

from .algebra import check_set, check_set_hyper, check_set_ultra
from .finder import find_chained_triple, find_hyper, find_triple, find_ultra
from .validator import ValidationResult, check_claim, check_distinct


class ModePolicy(ABC):
    """Abstract base class for game mode rules."""

    mode: GameMode

    @property
    def arity(self) -> int:
        """Number of cards in a match."""
        return MODE_ARITY[self.mode]

    @abstractmethod
    def find_match(
        self, cards: Sequence[Card], previous: Sequence[Card] = ()
    ) -> list[Card] | None:
        """Search a duplicate-free card list for a match.

        Args:
            cards: Cards to search, in enumeration order
            previous: Cards of the last accepted match (used by setchain)

        Returns:
            The matched cards, or None if there is no match
        """
        pass

    @abstractmethod
    def check_match(self, cards: Sequence[Card]) -> bool:
        """Check the algebraic rule for a claim of `arity` cards."""
        pass

    def validate_and_apply(
        self, deck: CardSet, history: History, event: GameEvent
    ) -> ValidationResult:
        """Validate an event and, if valid, apply it.

        On success the claimed cards are removed from `deck` and the match is
        appended to `history`. On failure neither is touched.

        Args:
            deck: Cards still in play
            history: Matches accepted so far
            event: Submitted claim

        Returns:
            ValidationResult with the removed cards
        """
        try:
            cards = event.cards(self.arity)
        except CardCodeError as e:
            return ValidationResult.reject(str(e))

        result = check_claim(deck, cards)
        if not result.is_valid:
            return result

        if not self.check_match(cards):
            return ValidationResult.reject(f"Cards do not form a {self.mode.value}")

        deck.remove_all(cards)
        history.append(AcceptedMatch(event=event, cards=tuple(cards)))
        return ValidationResult(is_valid=True, removed=cards)


class NormalPolicy(ModePolicy):
    """Classic rules: three cards forming a set."""

    mode = GameMode.NORMAL

    def find_match(
        self, cards: Sequence[Card], previous: Sequence[Card] = ()
    ) -> list[Card] | None:
        return find_triple(cards)

    def check_match(self, cards: Sequence[Card]) -> bool:
        return check_set(*cards)


class SetChainPolicy(ModePolicy):
    """Chained rules: each match reuses one card of the previous match.

    The first match of a game takes three cards from the deck. Every later
    match names a carried card from the previous match in c1 and two fresh
    cards in c2 and c3; only the fresh cards leave the deck.
    """

    mode = GameMode.SETCHAIN

    def __init__(self, require_set: bool = False):
        """Initialize policy.

        Args:
            require_set: Also require the three cards to form a set
        """
        self.require_set = require_set

    def find_match(
        self, cards: Sequence[Card], previous: Sequence[Card] = ()
    ) -> list[Card] | None:
        if not previous:
            return find_triple(cards)
        return find_chained_triple(cards, previous)

    def check_match(self, cards: Sequence[Card]) -> bool:
        if self.require_set:
            return check_set(*cards)
        return True

    def validate_and_apply(
        self, deck: CardSet, history: History, event: GameEvent
    ) -> ValidationResult:
        try:
            cards = event.cards(self.arity)
        except CardCodeError as e:
            return ValidationResult.reject(str(e))

        if not check_distinct(cards):
            return ValidationResult.reject("Claim names the same card twice")

        carried, *fresh = cards
        last = history.last()
        if last is None:
            fresh = cards
        elif carried not in last.cards:
            return ValidationResult.reject(
                f"Card {carried} is not carried over from the previous match"
            )

        result = check_claim(deck, fresh)
        if not result.is_valid:
            return result

        if not self.check_match(cards):
            return ValidationResult.reject("Cards do not form a set")

        deck.remove_all(fresh)
        history.append(AcceptedMatch(event=event, cards=tuple(cards)))
        return ValidationResult(is_valid=True, removed=list(fresh))


class UltraSetPolicy(ModePolicy):
    """Ultraset rules: four cards split into two pairs with equal conjugates."""

    mode = GameMode.ULTRASET

    def find_match(
        self, cards: Sequence[Card], previous: Sequence[Card] = ()
    ) -> list[Card] | None:
        return find_ultra(cards)

    def check_match(self, cards: Sequence[Card]) -> bool:
        return check_set_ultra(*cards) is not None


class HyperSetPolicy(ModePolicy):
    """Hyperset rules: six cards whose pair conjugates form a set."""

    mode = GameMode.HYPERSET

    def find_match(
        self, cards: Sequence[Card], previous: Sequence[Card] = ()
    ) -> list[Card] | None:
        return find_hyper(cards)

    def check_match(self, cards: Sequence[Card]) -> bool:
        return check_set_hyper(*cards)


def get_policy(mode: GameMode | str, rules: RulesConfig | None = None) -> ModePolicy:
    """Get the rule policy for a game mode.

    Args:
        mode: Game mode (enum or its string value)
        rules: Rules configuration (uses defaults if not provided)

    Returns:
        ModePolicy instance

    Raises:
        ValueError: If the mode is unknown
    """
    rules = rules or RulesConfig()
    mode = GameMode(mode)
    if mode == GameMode.NORMAL:
        return NormalPolicy()
    if mode == GameMode.SETCHAIN:
        return SetChainPolicy(require_set=rules.chain_requires_set)
    if mode == GameMode.ULTRASET:
        return UltraSetPolicy()
    return HyperSetPolicy()
