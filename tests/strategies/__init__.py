"""Hypothesis strategies for arbgen property-based testing.

Strategies are organized by domain:

- resources: string ids, templates, tables and locale tags

Usage:
    from tests.strategies import string_tables, locale_tables
    from tests.strategies.resources import plural_families, rtl_languages
"""

from .resources import (
    LOCALE_POOL,
    locale_tables,
    locale_tags,
    non_rtl_languages,
    placeholder_names,
    plural_families,
    regions,
    rtl_languages,
    string_ids,
    string_tables,
    templates,
)

__all__ = [
    "LOCALE_POOL",
    "locale_tables",
    "locale_tags",
    "non_rtl_languages",
    "placeholder_names",
    "plural_families",
    "regions",
    "rtl_languages",
    "string_ids",
    "string_tables",
    "templates",
]
