"""Card arithmetic over attribute values modulo 3.

Three cards form a set (triple match) when, for every attribute, the sum of
their values is divisible by 3. This covers both "all same" (0+0+0) and
"all different" (0+1+2).
"""

from setgame_server.models.card import NUM_VALUES, Card


def conjugate(a: Card, b: Card) -> Card:
    """Get the unique card c such that {a, b, c} is a set.

    Args:
        a: First card
        b: Second card

    Returns:
        The completing card. Distinct from a and b whenever a != b.
    """
    return Card.from_values(
        (NUM_VALUES - (x + y) % NUM_VALUES) % NUM_VALUES
        for x, y in zip(a.values, b.values)
    )


def check_set(a: Card, b: Card, c: Card) -> bool:
    """Check if three cards form a set."""
    return all(
        (x + y + z) % NUM_VALUES == 0
        for x, y, z in zip(a.values, b.values, c.values)
    )


def check_set_ultra(a: Card, b: Card, c: Card, d: Card) -> list[Card] | None:
    """Check if four cards form an ultraset.

    Four cards form an ultraset when they split into two pairs sharing the
    same conjugate. Pairings are tried in the order {a,b}&{c,d},
    {a,c}&{b,d}, {a,d}&{b,c}.

    Returns:
        The cards reordered as first pair then second pair, or None.
    """
    if conjugate(a, b) == conjugate(c, d):
        return [a, b, c, d]
    if conjugate(a, c) == conjugate(b, d):
        return [a, c, b, d]
    if conjugate(a, d) == conjugate(b, c):
        return [a, d, b, c]
    return None


def check_set_hyper(a: Card, b: Card, c: Card, d: Card, e: Card, f: Card) -> bool:
    """Check if six cards form a hyperset.

    The conjugates of (a, b), (c, d) and (e, f) must form a set. If one
    pairing of the six cards works, every other pairing does too, so the
    argument order does not matter.
    """
    return check_set(conjugate(a, b), conjugate(c, d), conjugate(e, f))
