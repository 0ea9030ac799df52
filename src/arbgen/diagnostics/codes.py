"""Diagnostic codes and data structures.

Defines error codes, source locations, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceLocation",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Resource loading (malformed or unexpected file content)
        2000-2999: Classification (string ids and plural groups)
    """

    # Resource loading (1000-1999)
    RESOURCE_SYNTAX_ERROR = 1001
    RESOURCE_NOT_OBJECT = 1002
    NON_STRING_VALUE = 1003

    # Classification (2000-2999)
    ID_NOT_IN_DEFAULT = 2001
    PLURAL_CATEGORY_INVALID = 2002
    PLURAL_CATEGORIES_MISSING = 2003


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position inside a resource file.

    Attributes:
        offset: Character offset (0-indexed)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    offset: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceLocation invariants.

        Raises:
            ValueError: If offset is negative, or line/column are below 1
        """
        if self.offset < 0:
            msg = f"SourceLocation.offset must be >= 0, got {self.offset}"
            raise ValueError(msg)
        if self.line < 1 or self.column < 1:
            msg = (
                "SourceLocation.line and column are 1-indexed, "
                f"got line={self.line}, column={self.column}"
            )
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        location: Position in the resource file (None when not applicable)
        source_path: Resource file the diagnostic refers to
        hint: Suggestion for fixing the problem
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    location: SourceLocation | None = None
    source_path: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[RESOURCE_SYNTAX_ERROR]: Expecting ',' delimiter
              --> res/values/strings_fr.arb:3:5
              = help: Fix the JSON syntax; the locale is generated without overrides

        Control characters in the message are escaped so the result is safe
        to write to a single log line.

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.source_path is not None or self.location is not None:
            where = self.source_path or "<resource>"
            if self.location is not None:
                where = f"{where}:{self.location.line}:{self.location.column}"
            lines.append(f"  --> {where}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
