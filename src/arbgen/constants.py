"""Shared constants for arbgen.

This module provides centralized configuration constants used across the
loading, classification and code generation packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Resource files: naming and location of per-locale string files
- Generated output: location and banner of the generated Dart unit
- Locales: default locale, right-to-left languages, legacy aliases
- Placeholders: marker character and plural fallback parameter

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource files
    "RESOURCE_PREFIX",
    "RESOURCE_EXTENSION",
    "RES_FOLDER",
    "VALUES_FOLDER",
    "EMPTY_RESOURCE",
    # Generated output
    "GENERATED_FILE",
    "GENERATED_BANNER",
    # Locales
    "DEFAULT_LOCALE",
    "RTL_LANGUAGES",
    "LEGACY_HEBREW",
    "HEBREW_ALIAS_TAG",
    "HEBREW_ALIAS_LANGUAGE",
    "HEBREW_ALIAS_COUNTRY",
    # Placeholders
    "PLACEHOLDER_MARKER",
    "DEFAULT_PLURAL_PARAMETER",
]

# ============================================================================
# RESOURCE FILES
# ============================================================================

# Resource files are named strings_<tag>.arb, e.g. strings_pt_BR.arb.
# The prefix is matched case-insensitively.
RESOURCE_PREFIX: str = "strings_"

# Extension of resource files (without the dot), matched case-insensitively.
RESOURCE_EXTENSION: str = "arb"

# Resource files live in <project>/res/values.
RES_FOLDER: str = "res"
VALUES_FOLDER: str = "values"

# Content written to a freshly created default-locale resource file.
EMPTY_RESOURCE: str = "{}"

# ============================================================================
# GENERATED OUTPUT
# ============================================================================

# Generated unit, relative to the project root.
GENERATED_FILE: tuple[str, ...] = ("lib", "generated", "i18n.dart")

GENERATED_BANNER: str = (
    "//This file is automatically generated. DO NOT EDIT, all your changes would be lost.\n"
)

# ============================================================================
# LOCALES
# ============================================================================

DEFAULT_LOCALE: str = "en"

# Language codes rendered right-to-left. Matched against the language part
# of a tag (text before the first underscore).
RTL_LANGUAGES: frozenset[str] = frozenset(
    {"ar", "dv", "fa", "ha", "he", "iw", "ji", "ps", "ur", "yi"}
)

# Android still reports Hebrew with the legacy ISO 639 code "iw". Any tag
# starting with it gets an additional he_IL alias class.
LEGACY_HEBREW: str = "iw"
HEBREW_ALIAS_TAG: str = "he_IL"
HEBREW_ALIAS_LANGUAGE: str = "he"
HEBREW_ALIAS_COUNTRY: str = "IL"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# Dart string interpolation marker. Templates keep it verbatim so the
# generated getters interpolate their own parameters.
PLACEHOLDER_MARKER: str = "$"

# Parameter name used for a plural accessor whose Other template has no
# placeholder at all.
DEFAULT_PLURAL_PARAMETER: str = "count"
