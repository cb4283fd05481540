"""
Unit tests for specificity ordering.
"""

from itertools import product

import pytest

from uripattern.cache import compile_pattern
from uripattern.ordering import Ordering, compare_patterns, sort_patterns


def _compile(pattern: str):
    return compile_pattern(pattern, use_cache=False)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TestOrdering:
    """Pairs where the first pattern is strictly more specific."""

    @pytest.mark.parametrize("a,b", [
        ("/a", "/{a}"),
        ("/a/b", "/{a}/b"),
        ("/a/b", "/a/{b}"),
        ("/a/b/", "/a/{b}/"),
        ("/a/b", "/{a}/{b}"),
        ("/a/b/", "/{a}/{b}/"),
        ("/{a}/b", "/{a}/{b}"),
        ("/a/{b}", "/{a}/{b}"),
        ("/ab", "/a{b}"),
        ("/ab", "/{a}b"),
        ("/a{b}", "/{a}"),
        ("/{a}", "/{+a}"),
        ("/a/{+b}", "/{a}/{+b}"),
    ])
    def test_more_specific_first(self, a, b):
        pa, pb = _compile(a), _compile(b)
        assert compare_patterns(pa, pb) == Ordering.LESS
        assert compare_patterns(pb, pa) == Ordering.GREATER

    def test_method_delegates(self):
        assert _compile("/a").compare(_compile("/{a}")) == Ordering.LESS

    def test_reflexive(self):
        pattern = _compile("/a/{b}/{+c}")
        assert compare_patterns(pattern, pattern) == Ordering.EQUAL

    def test_same_ranks_are_equal(self):
        assert compare_patterns(_compile("/a/{b}"), _compile("/x/{y}")) == Ordering.EQUAL
        assert compare_patterns(_compile("/a{b}"), _compile("/{b}c")) == Ordering.EQUAL

    def test_shorter_wins_when_shared_positions_tie(self):
        assert compare_patterns(_compile("/a"), _compile("/a/b")) == Ordering.LESS
        assert compare_patterns(_compile("/a/b"), _compile("/a")) == Ordering.GREATER

    def test_shorter_wins_over_longer_catch_all(self):
        assert compare_patterns(_compile("/a"), _compile("/b/{+x}")) == Ordering.LESS

    def test_ordering_is_int_compatible(self):
        assert Ordering.LESS < 0 < Ordering.GREATER
        assert Ordering.EQUAL == 0


class TestInvariants:
    """Comparable contract over a fixed set of patterns."""

    PATTERNS = [
        "/",
        "/a",
        "/ab",
        "/a{b}",
        "/{a}/{b}",
        "/{a}",
        "/{a}",
        "/a/{b}",
        "/ab/{b}",
        "/{a}/b",
        "/{+a}",
        "/a/{+b}",
        "/a/b/",
        "/index",
    ]

    def setup_method(self):
        self.patterns = [_compile(p) for p in self.PATTERNS]

    def test_antisymmetric(self):
        for x, y in product(self.patterns, repeat=2):
            assert _sign(compare_patterns(x, y)) == -_sign(compare_patterns(y, x))

    def test_transitive(self):
        for x, y, z in product(self.patterns, repeat=3):
            if compare_patterns(x, y) > 0 and compare_patterns(y, z) > 0:
                assert compare_patterns(x, z) > 0

    def test_equal_elements_compare_alike(self):
        for x, y, z in product(self.patterns, repeat=3):
            if compare_patterns(x, y) == 0:
                assert _sign(compare_patterns(x, z)) == _sign(compare_patterns(y, z))


class TestSortPatterns:
    """Test precedence sorting."""

    def test_most_specific_first(self):
        patterns = [_compile(p) for p in ["/{+rest}", "/{a}", "/a{b}", "/a"]]
        assert [p.raw for p in sort_patterns(patterns)] == ["/a", "/a{b}", "/{a}", "/{+rest}"]

    def test_stable_for_equal(self):
        patterns = [_compile(p) for p in ["/{y}", "/{x}", "/{z}"]]
        assert [p.raw for p in sort_patterns(patterns)] == ["/{y}", "/{x}", "/{z}"]

    def test_returns_new_list(self):
        patterns = [_compile("/{a}"), _compile("/a")]
        result = sort_patterns(patterns)
        assert result is not patterns
        assert [p.raw for p in patterns] == ["/{a}", "/a"]
