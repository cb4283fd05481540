"""
Specificity ordering between compiled patterns.

``compare_patterns(a, b)`` walks both patterns segment by segment; the first
position where the segment ranks differ decides, and the lower rank sorts
first. When one pattern runs out of segments while every shared position
ties, the shorter pattern sorts first. Patterns with the same rank sequence
are equal in specificity.

This is the lexicographic order on rank tuples, so it is a strict total
preorder: antisymmetric, transitive, and consistent for equal elements.
"""

from enum import IntEnum
from functools import cmp_to_key
from typing import Iterable, List

from .compiler.compiler import CompiledPattern


class Ordering(IntEnum):
    """Result of a specificity comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_patterns(a: CompiledPattern, b: CompiledPattern) -> Ordering:
    """Compare two patterns; ``LESS`` means ``a`` is more specific."""
    for rank_a, rank_b in zip(a.specificity, b.specificity):
        if rank_a != rank_b:
            return Ordering.LESS if rank_a < rank_b else Ordering.GREATER

    if len(a.specificity) != len(b.specificity):
        return Ordering.LESS if len(a.specificity) < len(b.specificity) else Ordering.GREATER

    return Ordering.EQUAL


def sort_patterns(patterns: Iterable[CompiledPattern]) -> List[CompiledPattern]:
    """Return the patterns most specific first; equal patterns keep their order."""
    return sorted(patterns, key=cmp_to_key(compare_patterns))
