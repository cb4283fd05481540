"""
AST node definitions for URI patterns.

These nodes represent the parsed structure of a pattern such as
``/a/{x}/c/de{+y}``: a list of segments, each an ordered run of tokens.
All nodes are frozen so a parsed pattern can be shared between threads.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union
from enum import Enum


class SegmentKind(str, Enum):
    """Structural kind of a path segment."""
    LITERAL = "literal"
    MIXED = "mixed"
    VARIABLE = "variable"
    RESERVED = "reserved"


@dataclass(frozen=True)
class Span:
    """Source span for diagnostics (zero-based, end exclusive)."""
    start: int
    end: int

    def __repr__(self) -> str:
        return f"pos {self.start}-{self.end}"


@dataclass(frozen=True)
class LiteralToken:
    """Fixed run of characters that must match exactly."""
    value: str
    span: Optional[Span] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "literal", "value": self.value}


@dataclass(frozen=True)
class VariableToken:
    """Named placeholder; ``reserved`` marks a ``{+name}`` catch-all."""
    name: str
    reserved: bool = False
    span: Optional[Span] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "variable", "name": self.name, "reserved": self.reserved}


Token = Union[LiteralToken, VariableToken]


@dataclass(frozen=True)
class Segment:
    """Tokens between two ``/`` boundaries.

    A segment with no tokens is the empty literal (the only segment of ``/``
    or the one after a trailing slash).
    """
    tokens: Tuple[Token, ...] = ()

    @property
    def variable(self) -> Optional[VariableToken]:
        for token in self.tokens:
            if isinstance(token, VariableToken):
                return token
        return None

    @property
    def kind(self) -> SegmentKind:
        variable = self.variable
        if variable is None:
            return SegmentKind.LITERAL
        if variable.reserved:
            return SegmentKind.RESERVED
        if len(self.tokens) > 1:
            return SegmentKind.MIXED
        return SegmentKind.VARIABLE

    @property
    def literal(self) -> str:
        """Full text of a literal segment."""
        return "".join(t.value for t in self.tokens if isinstance(t, LiteralToken))

    @property
    def prefix(self) -> str:
        """Literal text before the variable."""
        parts = []
        for token in self.tokens:
            if isinstance(token, VariableToken):
                break
            parts.append(token.value)
        return "".join(parts)

    @property
    def suffix(self) -> str:
        """Literal text after the variable."""
        parts = []
        for token in reversed(self.tokens):
            if isinstance(token, VariableToken):
                break
            parts.append(token.value)
        return "".join(reversed(parts))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "tokens": [t.to_dict() for t in self.tokens],
        }


@dataclass(frozen=True)
class PatternAST:
    """Complete AST for a URI pattern."""
    raw: str
    segments: Tuple[Segment, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "raw": self.raw,
            "segments": [s.to_dict() for s in self.segments],
        }

    def get_static_prefix(self) -> str:
        """Extract the leading run of literal segments."""
        prefix_parts = []
        for segment in self.segments:
            if segment.kind is not SegmentKind.LITERAL:
                break
            prefix_parts.append(segment.literal)
        return "/" + "/".join(prefix_parts)

    def get_param_names(self) -> List[str]:
        """Get all variable names in declaration order."""
        return [s.variable.name for s in self.segments if s.variable is not None]
