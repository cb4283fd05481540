"""Diagnostics package."""

from .errors import (
    ErrorCategory,
    PatternDiagnostic,
    PatternSyntaxError,
)

__all__ = [
    "ErrorCategory",
    "PatternDiagnostic",
    "PatternSyntaxError",
]
