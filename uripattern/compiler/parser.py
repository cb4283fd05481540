"""
State-machine parser for URI patterns.

Scans the source once, left to right. The parser is always in one of three
states:

- ``LITERAL``: collecting literal characters of the current segment
- ``IN_VARIABLE``: collecting the name of an open ``{...}``
- ``RESERVED_CLOSED``: a ``{+name}`` has closed; any further input is an error

Every error carries the zero-based index of the offending character.
"""

from enum import Enum
from typing import List, Optional

from .ast_nodes import (
    PatternAST,
    Segment,
    LiteralToken,
    VariableToken,
    Span,
    Token,
)
from ..diagnostics.errors import ErrorCategory, PatternSyntaxError
from .. import grammar


class ParserState(str, Enum):
    """States of the pattern scanner."""
    LITERAL = "literal"
    IN_VARIABLE = "in_variable"
    RESERVED_CLOSED = "reserved_closed"


class PatternParser:
    """Parser for URI patterns."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.state = ParserState.LITERAL
        self.segments: List[Segment] = []
        self.tokens: List[Token] = []
        self.literal_start = 0
        self.literal_chars: List[str] = []
        self.var_start = 0
        self.var_reserved = False
        self.var_chars: List[str] = []

    def error(
        self,
        category: ErrorCategory,
        message: str,
        index: Optional[int] = None,
    ) -> PatternSyntaxError:
        """Create syntax error at the current (or given) position."""
        return PatternSyntaxError.at(
            category,
            message,
            self.source,
            self.pos if index is None else index,
        )

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        return self.source[pos] if pos < len(self.source) else None

    def parse(self) -> PatternAST:
        """Parse the source into an AST."""
        if not self.source:
            raise self.error(ErrorCategory.EMPTY_PATTERN, "URI pattern cannot be empty", 0)
        if self.source[0] != grammar.SEPARATOR:
            raise self.error(
                ErrorCategory.MISSING_LEADING_SLASH,
                "URI pattern must start with a '/'",
                0,
            )

        self.pos = 1
        self.literal_start = 1
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if self.state is ParserState.RESERVED_CLOSED:
                raise self.error(
                    ErrorCategory.CONTENT_AFTER_CATCH_ALL,
                    f"unexpected '{ch}' after catch-all variable",
                )
            elif self.state is ParserState.IN_VARIABLE:
                self.scan_variable(ch)
            else:
                self.scan_literal(ch)
            self.pos += 1

        if self.state is ParserState.IN_VARIABLE:
            raise self.error(
                ErrorCategory.UNTERMINATED_VARIABLE,
                "unterminated '{'",
                self.var_start,
            )

        self.end_segment()
        return PatternAST(raw=self.source, segments=tuple(self.segments))

    def scan_literal(self, ch: str):
        """Handle one character outside a variable."""
        if ch == grammar.SEPARATOR:
            self.end_segment()
        elif ch == grammar.OPEN_BRACE:
            if any(isinstance(t, VariableToken) for t in self.tokens):
                raise self.error(
                    ErrorCategory.MULTIPLE_VARIABLES,
                    "a segment can hold only one variable, unexpected '{'",
                )
            self.flush_literal()
            self.state = ParserState.IN_VARIABLE
            self.var_start = self.pos
            self.var_chars = []
            self.var_reserved = self.peek(1) == grammar.RESERVED_MARKER
            if self.var_reserved:
                self.pos += 1
        elif ch == grammar.CLOSE_BRACE:
            raise self.error(ErrorCategory.UNMATCHED_CLOSE_BRACE, "unmatched '}'")
        else:
            if not self.literal_chars:
                self.literal_start = self.pos
            self.literal_chars.append(ch)

    def scan_variable(self, ch: str):
        """Handle one character inside ``{...}``."""
        if ch == grammar.OPEN_BRACE:
            raise self.error(ErrorCategory.NESTED_OPEN_BRACE, "unexpected '{' inside a variable")
        elif ch == grammar.CLOSE_BRACE:
            self.close_variable()
        else:
            self.var_chars.append(ch)

    def close_variable(self):
        name = "".join(self.var_chars)
        if not name:
            raise self.error(ErrorCategory.EMPTY_VARIABLE_NAME, "variable name cannot be empty")
        self.tokens.append(VariableToken(
            name=name,
            reserved=self.var_reserved,
            span=Span(self.var_start, self.pos + 1),
        ))
        if self.var_reserved:
            self.state = ParserState.RESERVED_CLOSED
        else:
            self.state = ParserState.LITERAL

    def flush_literal(self):
        if self.literal_chars:
            value = "".join(self.literal_chars)
            self.tokens.append(LiteralToken(
                value=value,
                span=Span(self.literal_start, self.literal_start + len(value)),
            ))
            self.literal_chars = []

    def end_segment(self):
        self.flush_literal()
        self.segments.append(Segment(tokens=tuple(self.tokens)))
        self.tokens = []


def parse_pattern(source: str) -> PatternAST:
    """Parse a URI pattern into an AST."""
    return PatternParser(source).parse()
