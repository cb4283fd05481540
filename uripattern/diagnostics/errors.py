"""
Diagnostic errors for URI patterns.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCategory(str, Enum):
    """Why a pattern was rejected."""
    EMPTY_PATTERN = "empty_pattern"
    MISSING_LEADING_SLASH = "missing_leading_slash"
    UNMATCHED_CLOSE_BRACE = "unmatched_close_brace"
    NESTED_OPEN_BRACE = "nested_open_brace"
    UNTERMINATED_VARIABLE = "unterminated_variable"
    EMPTY_VARIABLE_NAME = "empty_variable_name"
    MULTIPLE_VARIABLES = "multiple_variables"
    CONTENT_AFTER_CATCH_ALL = "content_after_catch_all"


_SUGGESTIONS: Dict[ErrorCategory, List[str]] = {
    ErrorCategory.EMPTY_PATTERN: ["Use '/' for the root path"],
    ErrorCategory.MISSING_LEADING_SLASH: ["Prefix the pattern with '/'"],
    ErrorCategory.UNMATCHED_CLOSE_BRACE: ["Remove the stray '}' or add a matching '{'"],
    ErrorCategory.NESTED_OPEN_BRACE: ["Close the open variable with '}' before starting another"],
    ErrorCategory.UNTERMINATED_VARIABLE: ["Close the variable with '}'"],
    ErrorCategory.EMPTY_VARIABLE_NAME: ["Name the variable, e.g. '{id}'"],
    ErrorCategory.MULTIPLE_VARIABLES: ["Split the variables into separate segments"],
    ErrorCategory.CONTENT_AFTER_CATCH_ALL: [
        "A catch-all variable '{+name}' must end the pattern",
        "Remove everything after the closing '}'",
    ],
}


@dataclass
class PatternDiagnostic:
    """Base class for all pattern diagnostics."""
    message: str
    source: str = ""
    index: Optional[int] = None
    suggestions: List[str] = None

    def __post_init__(self):
        if self.suggestions is None:
            self.suggestions = []

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"{self.message} at index {self.index}"

    def format(self) -> str:
        """Format diagnostic for display, with a caret under the offending character."""
        parts = [f"{self.__class__.__name__}: {self}"]

        if self.source and self.index is not None:
            parts.append(f"  {self.source}")
            parts.append("  " + " " * self.index + "^")

        if self.suggestions:
            parts.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                parts.append(f"  {i}) {suggestion}")

        return "\n".join(parts)


@dataclass
class PatternSyntaxError(PatternDiagnostic, Exception):
    """Malformed route template."""
    category: ErrorCategory = ErrorCategory.EMPTY_PATTERN

    @classmethod
    def at(
        cls,
        category: ErrorCategory,
        message: str,
        source: str,
        index: int,
    ) -> "PatternSyntaxError":
        return cls(
            message=message,
            source=source,
            index=index,
            suggestions=list(_SUGGESTIONS.get(category, [])),
            category=category,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "index": self.index,
            "message": str(self),
            "source": self.source,
            "suggestions": list(self.suggestions),
        }
