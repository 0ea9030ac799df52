"""CLDR plural coverage using Babel.

The generated plural accessors only switch on the categories a resource
defines and fall through to Other for everything else. This module compares
a plural group against the CLDR categories of its locale so that missing
translations show up in the generation report.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from arbgen.diagnostics import Diagnostic, DiagnosticCode
from arbgen.enums import PluralCategory
from arbgen.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from arbgen.classify.classifier import PluralGroup
    from arbgen.resources.types import LocaleCode

__all__ = ["cldr_plural_categories", "missing_cldr_categories", "plural_coverage_diagnostic"]


def cldr_plural_categories(locale: LocaleCode) -> frozenset[PluralCategory] | None:
    """Return the CLDR plural categories used by a locale.

    Args:
        locale: Locale tag (e.g. "ru", "pt_BR")

    Returns:
        Categories including Other, or None when Babel does not know the locale

    Examples:
        >>> sorted(str(c) for c in cldr_plural_categories("en"))
        ['One', 'Other']
        >>> cldr_plural_categories("not_a_locale") is None
        True
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return None

    # PluralRule.tags lists explicit rules only; "other" is implicit
    tags = set(locale_obj.plural_form.tags) | {"other"}
    return frozenset(PluralCategory(tag.capitalize()) for tag in tags)


def missing_cldr_categories(group: PluralGroup, locale: LocaleCode) -> tuple[PluralCategory, ...]:
    """List CLDR categories of the locale that the group does not define.

    Returns:
        Missing categories in canonical order; empty for unknown locales
    """
    expected = cldr_plural_categories(locale)
    if expected is None:
        return ()
    present = set(group.categories)
    return tuple(category for category in PluralCategory if category in expected - present)


def plural_coverage_diagnostic(group: PluralGroup, locale: LocaleCode) -> Diagnostic | None:
    """Build a warning diagnostic for a group missing CLDR categories."""
    missing = missing_cldr_categories(group, locale)
    if not missing:
        return None
    names = ", ".join(f"{group.base}{category}" for category in missing)
    return Diagnostic(
        code=DiagnosticCode.PLURAL_CATEGORIES_MISSING,
        message=f"Plural '{group.base}' in locale '{locale}' has no {names}",
        hint=f"Missing categories fall back to {group.base}{PluralCategory.OTHER}",
        severity="warning",
    )
