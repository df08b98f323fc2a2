"""Tests for card algebra."""

from itertools import permutations, product

import pytest

from setgame_server.game.algebra import (
    check_set,
    check_set_hyper,
    check_set_ultra,
    conjugate,
)
from setgame_server.models.card import ALL_CARDS, Card


def cards(*codes: str) -> list[Card]:
    return [Card.from_code(code) for code in codes]


class TestConjugate:
    """Tests for conjugate()."""

    def test_all_same(self):
        """Test conjugate of two equal-valued attributes."""
        a, b = cards("0000", "0000")
        assert conjugate(a, b) == Card.from_code("0000")

    def test_all_different(self):
        """Test conjugate completes 0+1 with 2."""
        a, b = cards("0000", "1111")
        assert conjugate(a, b) == Card.from_code("2222")

    def test_mixed(self):
        """Test conjugate attribute by attribute."""
        a, b = cards("0120", "0210")
        # 0+0 -> 0, 1+2 -> 0, 2+1 -> 0, 0+0 -> 0
        assert conjugate(a, b) == Card.from_code("0000")

    def test_completes_set_for_all_pairs(self):
        """Test that the conjugate of any pair completes a set."""
        for a, b in product(ALL_CARDS, repeat=2):
            c = conjugate(a, b)
            assert check_set(a, b, c)
            if a == b:
                assert c == a
            else:
                assert c != a and c != b

    def test_symmetric(self):
        """Test that conjugate ignores argument order."""
        a, b = cards("0120", "2201")
        assert conjugate(a, b) == conjugate(b, a)


class TestCheckSet:
    """Tests for check_set()."""

    def test_valid_set(self):
        """Test a set with all attributes different."""
        assert check_set(*cards("0000", "1111", "2222"))

    def test_valid_set_mixed(self):
        """Test a set with some attributes equal and some different."""
        assert check_set(*cards("0120", "0201", "0012"))

    def test_invalid_set(self):
        """Test that 0+0+1 fails."""
        assert not check_set(*cards("0000", "0000", "1000"))
        assert not check_set(*cards("0000", "1111", "2221"))

    def test_permutation_symmetry(self):
        """Test that check_set ignores argument order."""
        for triple in [cards("0000", "1111", "2222"), cards("0000", "1111", "2221")]:
            expected = check_set(*triple)
            for perm in permutations(triple):
                assert check_set(*perm) == expected


class TestCheckSetUltra:
    """Tests for check_set_ultra()."""

    def test_first_pairing(self):
        """Test pairing {a,b}&{c,d}."""
        # Both pairs conjugate to 2222
        a, b, c, d = cards("0000", "1111", "0001", "1110")
        assert conjugate(a, b) == conjugate(c, d)
        assert check_set_ultra(a, b, c, d) == [a, b, c, d]

    def test_second_pairing(self):
        """Test pairing {a,c}&{b,d} is reordered."""
        a, c, b, d = cards("0000", "1111", "0001", "1110")
        assert check_set_ultra(a, b, c, d) == [a, c, b, d]

    def test_third_pairing(self):
        """Test pairing {a,d}&{b,c} is reordered."""
        a, d, b, c = cards("0000", "1111", "0001", "1110")
        assert check_set_ultra(a, b, c, d) == [a, d, b, c]

    def test_no_pairing(self):
        """Test that no shared conjugate gives None."""
        assert check_set_ultra(*cards("0000", "0001", "0010", "0100")) is None


class TestCheckSetHyper:
    """Tests for check_set_hyper()."""

    HYPER = ("0000", "1111", "0001", "1110", "0010", "1101")
    NOT_HYPER = ("0000", "0001", "0002", "0010", "0020", "0100")

    def test_valid_hyper(self):
        """Test six cards whose pair conjugates form a set."""
        a, b, c, d, e, f = cards(*self.HYPER)
        assert check_set(conjugate(a, b), conjugate(c, d), conjugate(e, f))
        assert check_set_hyper(a, b, c, d, e, f)

    def test_invalid_hyper(self):
        """Test six cards that do not form a hyperset."""
        assert not check_set_hyper(*cards(*self.NOT_HYPER))

    @pytest.mark.parametrize("codes", [HYPER, NOT_HYPER])
    def test_pairing_invariance(self, codes):
        """Test that every pairing of the same six cards agrees."""
        six = cards(*codes)
        expected = check_set_hyper(*six)
        for perm in permutations(six):
            assert check_set_hyper(*perm) == expected
