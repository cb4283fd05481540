"""
Compiler that turns a parsed AST into an immutable compiled pattern.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .ast_nodes import PatternAST, Segment, SegmentKind
from .parser import parse_pattern
from .specificity import Specificity, calculate_specificity
from ..diagnostics.errors import PatternSyntaxError
from .. import grammar

logger = logging.getLogger("uripattern.compiler")


@dataclass(frozen=True, eq=False)
class CompiledPattern:
    """Fully compiled pattern ready for matching and ordering.

    Two compiled patterns are equal when they were compiled from the same
    source string.
    """
    raw: str
    ast: PatternAST
    segments: Tuple[Segment, ...]
    match_segments: Tuple[Segment, ...]
    static_prefix: str
    specificity: Tuple[Specificity, ...]
    is_index: bool

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompiledPattern):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __str__(self) -> str:
        return self.raw

    @property
    def has_catch_all(self) -> bool:
        return self.segments[-1].kind is SegmentKind.RESERVED

    @property
    def variable_names(self) -> List[str]:
        return self.ast.get_param_names()

    def match(self, path: str):
        """Match ``path`` and return a ``MatchResult`` or ``None``."""
        from ..matcher import match_pattern
        return match_pattern(self, path)

    def matches(self, path: str) -> bool:
        from ..matcher import matches
        return matches(self, path)

    def compare(self, other: "CompiledPattern"):
        """Order against ``other``; ``Ordering.LESS`` means more specific."""
        from ..ordering import compare_patterns
        return compare_patterns(self, other)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "raw": self.raw,
            "segments": [s.to_dict() for s in self.segments],
            "static_prefix": self.static_prefix,
            "specificity": [int(rank) for rank in self.specificity],
            "is_index": self.is_index,
            "variables": self.variable_names,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def _is_index_segment(segment: Segment) -> bool:
    return segment.kind is SegmentKind.LITERAL and segment.literal == grammar.INDEX_SEGMENT


class PatternCompiler:
    """Compiles AST into executable patterns."""

    def compile(self, ast: PatternAST) -> CompiledPattern:
        """Compile AST into an immutable pattern."""
        segments = ast.segments
        is_index = _is_index_segment(segments[-1])

        # An index page answers for its parent: match without the last segment.
        if is_index:
            match_segments = segments[:-1] or (Segment(),)
        else:
            match_segments = segments

        compiled = CompiledPattern(
            raw=ast.raw,
            ast=ast,
            segments=segments,
            match_segments=match_segments,
            static_prefix=PatternAST(raw=ast.raw, segments=match_segments).get_static_prefix(),
            specificity=calculate_specificity(ast),
            is_index=is_index,
        )
        logger.debug(
            "Compiled pattern %r (segments=%d, specificity=%s)",
            ast.raw,
            len(segments),
            [int(rank) for rank in compiled.specificity],
        )
        return compiled


@dataclass(frozen=True)
class ParseResult:
    """Outcome of compiling a pattern: exactly one of ``pattern``/``error`` is set."""
    source: str
    pattern: Optional[CompiledPattern] = None
    error: Optional[PatternSyntaxError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> CompiledPattern:
        """Return the compiled pattern or raise the syntax error."""
        if self.error is not None:
            raise self.error
        return self.pattern


def try_compile(source: str, compiler: Optional[PatternCompiler] = None) -> ParseResult:
    """Compile ``source`` without raising; malformed input yields ``error``."""
    try:
        ast = parse_pattern(source)
    except PatternSyntaxError as e:
        logger.debug("Rejected pattern %r: %s", source, e)
        return ParseResult(source=source, error=e)
    compiler = compiler or PatternCompiler()
    return ParseResult(source=source, pattern=compiler.compile(ast))
