"""Key classification for one locale's string table.

Partitions the ids of a StringTable into simple strings, parametrized
strings and plural groups, in the order the Dart emitter writes them:

1. simple ids (table order)
2. parametrized ids (table order)
3. plural groups (order of first member in the table)

Only ids present in the default table are classified. Ids that a locale
defines but the default table does not are dropped and reported, because
the generated locale classes can only override accessors of the base class.

Plural groups:
    An id ending in a plural category (``itemsZero``, ``itemsOne``, ...,
    ``itemsOther``) is a plural candidate. Candidates sharing a base form a
    group only if the ``Other`` member exists; otherwise every candidate is
    classified as an ordinary string under its full id.

    The accessor parameter of a group is the first placeholder of its
    ``Other`` template. All categories share that one parameter; templates
    using several placeholders are not supported as plurals.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass

from arbgen.constants import DEFAULT_PLURAL_PARAMETER, PLACEHOLDER_MARKER
from arbgen.diagnostics import Diagnostic, DiagnosticCode, InvalidPluralCategoryError
from arbgen.enums import PluralCategory
from arbgen.resources.types import LocaleCode, StringId, StringTable, TemplateText

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Results
    "ClassifiedTable",
    "ParametrizedEntry",
    "PluralGroup",
    "SimpleEntry",
    # Operations
    "classify_table",
    "extract_parameters",
    "find_plural_groups",
    "plural_parameter",
    # Category mapping
    "category_from_suffix",
    "category_from_value",
    "value_for_category",
]

logger = logging.getLogger(__name__)

# Emission order of plural branches; Other is always the default branch.
_CATEGORY_ORDER: tuple[PluralCategory, ...] = tuple(PluralCategory)

# Switch literal compared against the accessor argument for each category.
_CATEGORY_VALUES: dict[PluralCategory, str] = {
    PluralCategory.ZERO: "0",
    PluralCategory.ONE: "1",
    PluralCategory.TWO: "2",
    PluralCategory.FEW: "few",
    PluralCategory.MANY: "many",
}
_VALUE_CATEGORIES: dict[str, PluralCategory] = {v: k for k, v in _CATEGORY_VALUES.items()}

_PLURAL_ID = re.compile(
    r"(?P<base>.+)(?P<category>" + "|".join(c.value for c in PluralCategory) + r")"
)

# Code point ranges that never belong to a placeholder name: CJK text
# commonly follows a placeholder without any separating space. Han,
# Hiragana and Katakana follow the Script property of Unicode 15.1
# (Scripts.txt); Common-script marks such as U+30FC stay name characters.
_EXCLUDED_SCRIPTS: tuple[tuple[int, int], ...] = (
    # Han
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
    (0x16FE2, 0x16FE3),
    (0x16FF0, 0x16FF1),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B739),
    (0x2B740, 0x2B81D),
    (0x2B820, 0x2CEA1),
    (0x2CEB0, 0x2EBE0),
    (0x2EBF0, 0x2EE5D),
    (0x2F800, 0x2FA1D),
    (0x30000, 0x3134A),
    (0x31350, 0x323AF),
    # Hiragana
    (0x3041, 0x3096),
    (0x309D, 0x309F),
    (0x1B001, 0x1B11F),
    (0x1B132, 0x1B132),
    (0x1B150, 0x1B152),
    (0x1F200, 0x1F200),
    # Katakana
    (0x30A1, 0x30FA),
    (0x30FD, 0x30FF),
    (0x31F0, 0x31FF),
    (0x32D0, 0x32FE),
    (0x3300, 0x3357),
    (0xFF66, 0xFF6F),
    (0xFF71, 0xFF9D),
    (0x1AFF0, 0x1AFF3),
    (0x1AFF5, 0x1AFFB),
    (0x1AFFD, 0x1AFFE),
    (0x1B000, 0x1B000),
    (0x1B120, 0x1B122),
    (0x1B155, 0x1B155),
    (0x1B164, 0x1B167),
    # En dash
    (0x2013, 0x2013),
)

_PARAMETER = re.compile(
    re.escape(PLACEHOLDER_MARKER)
    + "([^"
    + re.escape(string.punctuation)
    + r"\s"
    + "".join(f"{chr(start)}-{chr(end)}" for start, end in _EXCLUDED_SCRIPTS)
    + "]*)"
)


@dataclass(frozen=True, slots=True)
class SimpleEntry:
    """String without placeholders, emitted as a getter."""

    id: StringId
    text: TemplateText


@dataclass(frozen=True, slots=True)
class ParametrizedEntry:
    """String with placeholders, emitted as a method.

    Attributes:
        id: String id
        text: Template text, placeholders kept verbatim
        parameters: Distinct placeholder names in first-seen order
    """

    id: StringId
    text: TemplateText
    parameters: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PluralGroup:
    """Family of ids sharing a base name and differing by plural category.

    Attributes:
        base: Shared id prefix, used as the accessor name
        variants: (category, text) pairs in canonical category order; always
            contains PluralCategory.OTHER
        parameter: Name of the single accessor parameter
    """

    base: StringId
    variants: tuple[tuple[PluralCategory, TemplateText], ...]
    parameter: str

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        """Categories defined by the group, in canonical order."""
        return tuple(category for category, _ in self.variants)

    @property
    def member_ids(self) -> tuple[StringId, ...]:
        """Full ids of the group members (e.g. ``itemsOne``)."""
        return tuple(f"{self.base}{category}" for category in self.categories)

    def text_for(self, category: PluralCategory) -> TemplateText:
        """Return the template of one category.

        Raises:
            KeyError: If the group does not define the category
        """
        for candidate, text in self.variants:
            if candidate is category:
                return text
        raise KeyError(category)


@dataclass(frozen=True, slots=True)
class ClassifiedTable:
    """Classified strings of one locale.

    Attributes:
        locale: Locale tag
        simple: Getters, in table order
        parametrized: Methods with placeholder parameters, in table order
        plurals: Plural accessors, in grouping order
        dropped: Ids defined by the locale but absent from the default table
    """

    locale: LocaleCode
    simple: tuple[SimpleEntry, ...] = ()
    parametrized: tuple[ParametrizedEntry, ...] = ()
    plurals: tuple[PluralGroup, ...] = ()
    dropped: tuple[StringId, ...] = ()

    @property
    def accessor_names(self) -> tuple[str, ...]:
        """Names of all generated accessors, in emission order."""
        return (
            tuple(entry.id for entry in self.simple)
            + tuple(entry.id for entry in self.parametrized)
            + tuple(group.base for group in self.plurals)
        )

    @property
    def string_ids(self) -> frozenset[StringId]:
        """All ids covered by the accessors, plural members included."""
        ids = {entry.id for entry in self.simple}
        ids.update(entry.id for entry in self.parametrized)
        for group in self.plurals:
            ids.update(group.member_ids)
        return frozenset(ids)

    @property
    def is_empty(self) -> bool:
        """Check if the locale overrides nothing."""
        return not (self.simple or self.parametrized or self.plurals)


def category_from_suffix(suffix: str) -> PluralCategory:
    """Map an id suffix (``"One"``) to its plural category.

    Raises:
        InvalidPluralCategoryError: If suffix is not a plural category
    """
    try:
        return PluralCategory(suffix)
    except ValueError:
        diagnostic = Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_INVALID,
            message=f"'{suffix}' is not a plural category",
            hint="Expected one of: " + ", ".join(PluralCategory),
        )
        raise InvalidPluralCategoryError(diagnostic) from None


def category_from_value(value: str) -> PluralCategory:
    """Map a switch literal (``"0"``, ``"1"``, ``"2"``, ``"few"``, ``"many"``) to its category.

    Raises:
        InvalidPluralCategoryError: If value is not one of the switch literals
    """
    category = _VALUE_CATEGORIES.get(value)
    if category is None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_INVALID,
            message=f"This value {value} is not valid.",
            hint="Expected one of: " + ", ".join(_VALUE_CATEGORIES),
        )
        raise InvalidPluralCategoryError(diagnostic)
    return category


def value_for_category(category: PluralCategory) -> str:
    """Return the switch literal matched for a category.

    Other is the default branch and has no literal.

    Raises:
        InvalidPluralCategoryError: If category is Other or unknown
    """
    value = _CATEGORY_VALUES.get(category)
    if value is None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_INVALID,
            message=f"Plural category '{category}' has no switch value",
        )
        raise InvalidPluralCategoryError(diagnostic)
    return value


def extract_parameters(text: TemplateText) -> tuple[str, ...]:
    """Extract placeholder names from a template.

    A placeholder is the marker followed by a run of characters that are not
    ASCII punctuation, whitespace, Han, Hiragana, Katakana or an en dash.
    A marker with no such characters after it is not a placeholder.

    Example:
        >>> extract_parameters("Hello $name, you have $count new $count")
        ('name', 'count')
        >>> extract_parameters("$nameさん")
        ('name',)
    """
    names: dict[str, None] = {}
    for match in _PARAMETER.finditer(text):
        name = match.group(1)
        if name:
            names.setdefault(name)
    return tuple(names)


def plural_parameter(other_text: TemplateText) -> str:
    """Return the parameter name of a plural accessor.

    Taken from the first placeholder of the Other template, or
    DEFAULT_PLURAL_PARAMETER when that template has none.
    """
    parameters = extract_parameters(other_text)
    return parameters[0] if parameters else DEFAULT_PLURAL_PARAMETER


def find_plural_groups(ids: list[StringId]) -> dict[StringId, tuple[PluralCategory, ...]]:
    """Find plural groups among ids.

    Args:
        ids: Candidate ids, in table order

    Returns:
        Base id -> categories present (canonical order), in order of the
        first member of each group. Candidates whose group has no Other
        member are not returned.
    """
    candidates: dict[StringId, set[PluralCategory]] = {}
    for string_id in ids:
        match = _PLURAL_ID.fullmatch(string_id)
        if match is None:
            continue
        category = category_from_suffix(match.group("category"))
        candidates.setdefault(match.group("base"), set()).add(category)

    groups: dict[StringId, tuple[PluralCategory, ...]] = {}
    for base, categories in candidates.items():
        if PluralCategory.OTHER not in categories:
            logger.debug("'%s' has no %s variant; not a plural", base, PluralCategory.OTHER)
            continue
        groups[base] = tuple(c for c in _CATEGORY_ORDER if c in categories)
    return groups


def classify_table(
    locale: LocaleCode,
    table: StringTable,
    default_table: StringTable,
) -> ClassifiedTable:
    """Classify the strings of one locale.

    Args:
        locale: Locale tag
        table: Strings of the locale
        default_table: Strings of the default locale; pass ``table`` itself
            when classifying the default locale

    Returns:
        ClassifiedTable in emission order
    """
    ids = [string_id for string_id in table if string_id in default_table]
    dropped = tuple(string_id for string_id in table if string_id not in default_table)
    for string_id in dropped:
        logger.info(
            "Dropping '%s' from locale '%s': not defined in the default locale",
            string_id,
            locale,
        )

    groups = find_plural_groups(ids)
    grouped = {
        f"{base}{category}" for base, categories in groups.items() for category in categories
    }
    plain = [string_id for string_id in ids if string_id not in grouped]

    simple = tuple(
        SimpleEntry(string_id, table[string_id])
        for string_id in plain
        if PLACEHOLDER_MARKER not in table[string_id]
    )
    parametrized = tuple(
        ParametrizedEntry(string_id, table[string_id], extract_parameters(table[string_id]))
        for string_id in plain
        if PLACEHOLDER_MARKER in table[string_id]
    )
    plurals = tuple(
        PluralGroup(
            base=base,
            variants=tuple((c, table[f"{base}{c}"]) for c in categories),
            parameter=plural_parameter(table[f"{base}{PluralCategory.OTHER}"]),
        )
        for base, categories in groups.items()
    )

    logger.debug(
        "Classified locale '%s': %d simple, %d parametrized, %d plural",
        locale,
        len(simple),
        len(parametrized),
        len(plurals),
    )
    return ClassifiedTable(
        locale=locale,
        simple=simple,
        parametrized=parametrized,
        plurals=plurals,
        dropped=dropped,
    )
