"""Enumerations for arbgen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """Plural category suffix recognized on string ids.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "One"
    """

    ZERO = "Zero"
    """itemsZero: selected when the accessor receives "0"."""

    ONE = "One"
    """itemsOne: selected when the accessor receives "1"."""

    TWO = "Two"
    """itemsTwo: selected when the accessor receives "2"."""

    FEW = "Few"
    """itemsFew: selected when the accessor receives "few"."""

    MANY = "Many"
    """itemsMany: selected when the accessor receives "many"."""

    OTHER = "Other"
    """itemsOther: default branch. Required for the group to exist."""


class TextDirection(StrEnum):
    """Text direction declared by a generated locale class.

    Values match the Dart ``TextDirection`` enum members.
    """

    LTR = "ltr"
    RTL = "rtl"


class LoadStatus(StrEnum):
    """Outcome of loading one locale resource file."""

    SUCCESS = "success"
    """File parsed as a JSON object."""

    MALFORMED = "malformed"
    """File was not valid JSON (or not an object); contributes an empty table."""

    CREATED = "created"
    """File did not exist and was created empty for the default locale."""


__all__ = [
    "LoadStatus",
    "PluralCategory",
    "TextDirection",
]
