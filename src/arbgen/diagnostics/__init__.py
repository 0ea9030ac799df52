"""Diagnostic system for arbgen errors.

Provides structured error diagnostics with codes, locations and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation
from .errors import ArbGenError, InvalidPluralCategoryError, ResourceSyntaxError

__all__ = [
    "ArbGenError",
    "Diagnostic",
    "DiagnosticCode",
    "InvalidPluralCategoryError",
    "ResourceSyntaxError",
    "SourceLocation",
]
