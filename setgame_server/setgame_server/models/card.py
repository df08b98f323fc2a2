"""Card and CardSet models."""

from typing import Iterable, Iterator

from pydantic import BaseModel, Field

# Attribute order of the 4-character card code
ATTRIBUTES = ("color", "shape", "shading", "number")

# Symbols allowed at each position of a card code
CODE_SYMBOLS = "012"

NUM_VALUES = 3
DECK_SIZE = NUM_VALUES ** len(ATTRIBUTES)  # 81


class CardCodeError(ValueError):
    """Raised when a string is not a valid 4-character card code."""


class Card(BaseModel, frozen=True):
    """Single card: a point in the 4-attribute, 3-value space.

    Cards serialize as 4-character codes such as "0120", one digit per
    attribute in ATTRIBUTES order.
    """

    color: int = Field(ge=0, le=2)
    shape: int = Field(ge=0, le=2)
    shading: int = Field(ge=0, le=2)
    number: int = Field(ge=0, le=2)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Card":
        """Get the card with the given attribute values."""
        return cls.from_code("".join(str(v) for v in values))

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a card code.

        Args:
            code: 4-character string over "0", "1", "2".

        Returns:
            The matching card.

        Raises:
            CardCodeError: If the code is malformed.
        """
        card = _CARDS_BY_CODE.get(code) if isinstance(code, str) else None
        if card is None:
            raise CardCodeError(f"Invalid card code: {code!r}")
        return card

    @property
    def values(self) -> tuple[int, int, int, int]:
        """Attribute values in code order."""
        return (self.color, self.shape, self.shading, self.number)

    @property
    def code(self) -> str:
        """Wire encoding of this card."""
        return "".join(str(v) for v in self.values)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Card({self.code!r})"


class CardSet:
    """Set of distinct cards (a deck or a player's claim)."""

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize card set.

        Args:
            cards: Initial cards. Duplicates are collapsed.
        """
        self._cards: set[Card] = set(cards) if cards else set()

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> "CardSet":
        """Build a card set from card codes.

        Raises:
            CardCodeError: If any code is malformed.
        """
        return cls(Card.from_code(code) for code in codes)

    def add(self, card: Card) -> None:
        """Add a card to the set."""
        self._cards.add(card)

    def remove(self, card: Card) -> None:
        """Remove a card from the set."""
        self._cards.discard(card)

    def remove_all(self, cards: Iterable[Card]) -> None:
        """Remove several cards from the set."""
        for card in cards:
            self._cards.discard(card)

    def contains(self, card: Card) -> bool:
        """Check if card is in the set."""
        return card in self._cards

    def contains_all(self, cards: Iterable[Card]) -> bool:
        """Check if every given card is in the set."""
        return all(card in self._cards for card in cards)

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if set is empty."""
        return len(self._cards) == 0

    def to_list(self) -> list[Card]:
        """Get cards as a list sorted by code."""
        return sorted(self._cards, key=lambda c: c.code)

    def to_codes(self) -> list[str]:
        """Get sorted card codes."""
        return [c.code for c in self.to_list()]

    def copy(self) -> "CardSet":
        """Create a copy of this card set."""
        return CardSet(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardSet):
            return NotImplemented
        return self._cards == other._cards

    def __sub__(self, other: "CardSet") -> "CardSet":
        """Set difference."""
        return CardSet(self._cards - other._cards)

    def __or__(self, other: "CardSet") -> "CardSet":
        """Set union."""
        return CardSet(self._cards | other._cards)

    def __and__(self, other: "CardSet") -> "CardSet":
        """Set intersection."""
        return CardSet(self._cards & other._cards)

    def __str__(self) -> str:
        if not self._cards:
            return "[]"
        return "[" + ", ".join(self.to_codes()) + "]"

    def __repr__(self) -> str:
        return f"CardSet({self.to_codes()!r})"


def _enumerate_cards() -> list[Card]:
    cards = []
    for color in range(NUM_VALUES):
        for shape in range(NUM_VALUES):
            for shading in range(NUM_VALUES):
                for number in range(NUM_VALUES):
                    cards.append(
                        Card(color=color, shape=shape, shading=shading, number=number)
                    )
    return cards


# All 81 cards, in nested attribute order
ALL_CARDS: tuple[Card, ...] = tuple(_enumerate_cards())

_CARDS_BY_CODE: dict[str, Card] = {card.code: card for card in ALL_CARDS}


def create_full_deck() -> list[Card]:
    """Create the full 81-card deck in fixed nested order (unshuffled)."""
    return list(ALL_CARDS)
