"""arbgen exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArbGenError",
    "InvalidPluralCategoryError",
    "ResourceSyntaxError",
]


class ArbGenError(Exception):
    """Base exception for all arbgen errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ArbGenError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ResourceSyntaxError(ArbGenError):
    """Resource file is not a well-formed JSON object.

    Only raised in strict mode. By default a malformed file is absorbed and
    contributes an empty table for its locale.

    Attributes:
        locale: Locale tag of the offending file
        source_path: Human-readable path of the offending file
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str = "",
        source_path: str = "",
    ) -> None:
        """Initialize ResourceSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            locale: Locale tag of the offending file
            source_path: Human-readable path of the offending file
        """
        super().__init__(message)
        self.locale = locale
        self.source_path = source_path


class InvalidPluralCategoryError(ArbGenError, ValueError):
    """Plural category or switch value outside the supported set.

    Signals a corrupted internal mapping rather than bad user input, so it
    is never absorbed.
    """
