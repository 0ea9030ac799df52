"""Type aliases for the resource domain.

Provides semantic type aliases used throughout arbgen and by user code when
annotating generator call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleCode",
    "ResourceSet",
    "StringId",
    "StringTable",
    "TemplateText",
]

type LocaleCode = str
"""Locale tag taken from a resource file name (e.g., 'en', 'pt_BR')."""

type StringId = str
"""Identifier of a string resource (e.g., 'greeting', 'itemsOther')."""

type TemplateText = str
"""Raw template text as written between the quotes of the resource file."""

type StringTable = dict[StringId, TemplateText]
"""Strings of one locale, in file key order."""

type ResourceSet = dict[LocaleCode, StringTable]
"""All loaded locales, in discovery order."""
