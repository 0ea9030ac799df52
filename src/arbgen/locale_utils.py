"""Locale tag utilities.

Centralizes locale tag handling used by the loader, the classifier and the
Dart emitter. Tags use the resource file convention ``<language>[_<REGION>]``
(e.g. ``en``, ``pt_BR``).

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from arbgen.constants import LEGACY_HEBREW, RTL_LANGUAGES
from arbgen.enums import TextDirection

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_legacy_hebrew",
    "language_of",
    "split_locale_tag",
    "text_direction",
    "to_posix",
]


def split_locale_tag(tag: str) -> tuple[str, str]:
    """Split a locale tag into language and country parts.

    The country part is only filled in for two-part tags; anything else
    (``en``, ``zh_Hans_CN``) yields an empty country.

    Example:
        >>> split_locale_tag("pt_BR")
        ('pt', 'BR')
        >>> split_locale_tag("en")
        ('en', '')
    """
    parts = tag.split("_")
    country = parts[1] if len(parts) == 2 else ""
    return parts[0], country


def language_of(tag: str) -> str:
    """Return the language portion of a tag (text before the first ``_``)."""
    return tag.split("_")[0]


def text_direction(tag: str) -> TextDirection:
    """Return the text direction declared for a locale tag.

    Example:
        >>> text_direction("ar_EG")
        <TextDirection.RTL: 'rtl'>
        >>> text_direction("fr")
        <TextDirection.LTR: 'ltr'>
    """
    return TextDirection.RTL if language_of(tag) in RTL_LANGUAGES else TextDirection.LTR


def is_legacy_hebrew(tag: str) -> bool:
    """Check whether a tag uses the legacy Hebrew code and needs a he_IL alias."""
    return tag.startswith(LEGACY_HEBREW)


def to_posix(tag: str) -> str:
    """Convert a BCP-47 style tag (``pt-BR``) to the POSIX form Babel expects."""
    return tag.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(tag: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        tag: Locale tag (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix(tag))
