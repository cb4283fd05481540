"""
uripattern - URI route templates: compile, match, and order by specificity.

A template such as ``/a/{x}/c/de{+y}`` is compiled once into an immutable
``CompiledPattern``. The compiled form matches concrete request paths
(capturing variables) and orders itself against other patterns so a
dispatcher can try the most specific route first.

- ``{name}`` captures a non-empty part of one segment
- ``{+name}`` captures the rest of the path and must end the pattern
- a final ``index`` segment answers for the parent path
"""

from .compiler.parser import PatternParser, ParserState, parse_pattern
from .compiler.ast_nodes import (
    PatternAST,
    Segment,
    SegmentKind,
    LiteralToken,
    VariableToken,
    Span,
)
from .compiler.compiler import PatternCompiler, CompiledPattern, ParseResult, try_compile
from .compiler.specificity import Specificity, classify, calculate_specificity
from .diagnostics.errors import (
    ErrorCategory,
    PatternDiagnostic,
    PatternSyntaxError,
)
from .matcher import MatchResult, match_pattern, matches
from .ordering import Ordering, compare_patterns, sort_patterns
from .config import ConfigError, PatternConfig, load_config
from .cache import PatternCache, CacheStats, compile_pattern, get_global_cache, set_global_cache

__version__ = "0.1.0"

__all__ = [
    # Parser
    "PatternParser",
    "ParserState",
    "parse_pattern",
    # AST
    "PatternAST",
    "Segment",
    "SegmentKind",
    "LiteralToken",
    "VariableToken",
    "Span",
    # Compiler
    "PatternCompiler",
    "CompiledPattern",
    "ParseResult",
    "try_compile",
    "compile_pattern",
    # Specificity
    "Specificity",
    "classify",
    "calculate_specificity",
    # Diagnostics
    "ErrorCategory",
    "PatternDiagnostic",
    "PatternSyntaxError",
    # Matcher
    "MatchResult",
    "match_pattern",
    "matches",
    # Ordering
    "Ordering",
    "compare_patterns",
    "sort_patterns",
    # Config
    "ConfigError",
    "PatternConfig",
    "load_config",
    # Caching
    "PatternCache",
    "CacheStats",
    "get_global_cache",
    "set_global_cache",
]
