"""Compiler package for URI patterns."""

from .parser import PatternParser, ParserState, parse_pattern
from .ast_nodes import *
from .compiler import PatternCompiler, CompiledPattern, ParseResult, try_compile
from .specificity import Specificity, classify, calculate_specificity

__all__ = [
    "PatternParser",
    "ParserState",
    "parse_pattern",
    "PatternCompiler",
    "CompiledPattern",
    "ParseResult",
    "try_compile",
    "Specificity",
    "classify",
    "calculate_specificity",
]
