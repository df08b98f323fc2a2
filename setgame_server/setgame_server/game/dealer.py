"""Deck generation."""

import logging
import random

from setgame_server.models.card import Card, create_full_deck

logger = logging.getLogger(__name__)


def generate_deck(rng: random.Random | None = None) -> list[Card]:
    """Generate a shuffled 81-card deck.

    Uses a Fisher-Yates shuffle: walking from the last position down to the
    second, each card is swapped with a uniformly chosen card at or before it.

    Args:
        rng: Random source (a fresh unseeded one if not provided)

    Returns:
        All 81 cards in random order.
    """
    rng = rng or random.Random()
    deck = create_full_deck()
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]

    logger.debug(f"Generated deck of {len(deck)} cards")
    return deck
