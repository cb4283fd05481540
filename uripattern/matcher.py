"""
Pattern matcher.

Each segment holds at most one variable, so matching a segment never
backtracks: strip the fixed prefix and suffix, and whatever is left in the
middle is the captured value. A catch-all segment applies the same rule to
the whole remainder of the path.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .compiler.compiler import CompiledPattern
from .compiler.ast_nodes import Segment, SegmentKind
from . import grammar


@dataclass(frozen=True)
class MatchResult:
    """Result of pattern matching."""
    pattern: CompiledPattern
    path: str
    params: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern.raw,
            "path": self.path,
            "params": dict(self.params),
        }


def _capture(segment: Segment, text: str) -> Optional[str]:
    """Return the variable span of ``text`` for a mixed/variable segment."""
    prefix, suffix = segment.prefix, segment.suffix
    if len(text) <= len(prefix) + len(suffix):
        return None
    if not text.startswith(prefix) or not text.endswith(suffix):
        return None
    return text[len(prefix):len(text) - len(suffix)]


def _match_segments(
    segments: List[Segment],
    path_segments: List[str],
    params: Dict[str, str],
) -> bool:
    for segment, text in zip(segments, path_segments):
        if segment.kind is SegmentKind.LITERAL:
            if text != segment.literal:
                return False
        else:
            value = _capture(segment, text)
            if value is None:
                return False
            # Repeated names keep the rightmost capture
            params[segment.variable.name] = value
    return True


def match_pattern(pattern: CompiledPattern, path: str) -> Optional[MatchResult]:
    """Match ``path`` against ``pattern``, returning captured variables."""
    if not path.startswith(grammar.SEPARATOR):
        return None

    # Quick prefix check
    if not path.startswith(pattern.static_prefix):
        return None

    segments = pattern.match_segments
    path_segments = path[1:].split(grammar.SEPARATOR)
    params: Dict[str, str] = {}

    last = segments[-1]
    if last.kind is SegmentKind.RESERVED:
        leading = len(segments) - 1
        if len(path_segments) <= leading:
            return None
        if not _match_segments(segments[:-1], path_segments[:leading], params):
            return None

        rest = grammar.SEPARATOR.join(path_segments[leading:])
        prefix = last.prefix
        if len(rest) <= len(prefix) or not rest.startswith(prefix):
            return None
        params[last.variable.name] = rest[len(prefix):]
    else:
        if len(path_segments) != len(segments):
            return None
        if not _match_segments(segments, path_segments, params):
            return None

    return MatchResult(pattern=pattern, path=path, params=params)


def matches(pattern: CompiledPattern, path: str) -> bool:
    """Whether ``path`` conforms to ``pattern``."""
    return match_pattern(pattern, path) is not None
