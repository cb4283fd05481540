"""
Specificity ranking for pattern ordering.

Ranks (lower is more specific):
-------------------------------
- Literal segment:  0  (matches exactly one string)
- Mixed segment:    1  (fixed affix around a free span)
- Variable segment: 2  (free span)
- Reserved segment: 3  (free span that also crosses '/')

Patterns are ordered lexicographically by the ranks of their segments.
"""

from enum import IntEnum
from typing import Tuple

from .ast_nodes import PatternAST, Segment, SegmentKind


class Specificity(IntEnum):
    """Rank of a segment kind."""
    LITERAL = 0
    MIXED = 1
    VARIABLE = 2
    RESERVED = 3


_RANKS = {
    SegmentKind.LITERAL: Specificity.LITERAL,
    SegmentKind.MIXED: Specificity.MIXED,
    SegmentKind.VARIABLE: Specificity.VARIABLE,
    SegmentKind.RESERVED: Specificity.RESERVED,
}


def classify(segment: Segment) -> Specificity:
    """Rank a single segment."""
    return _RANKS[segment.kind]


def calculate_specificity(ast: PatternAST) -> Tuple[Specificity, ...]:
    """Rank every segment of a parsed pattern, left to right."""
    return tuple(classify(segment) for segment in ast.segments)
