"""Emit the Flutter localization unit from classified string tables.

The generated unit contains, in order:

- imports and the "automatically generated" banner;
- ``class S``: one accessor per default-locale string, text direction ltr;
- one class per locale tag, extending ``S`` and overriding the strings the
  locale defines (the default tag gets a subclass without accessors,
  declaring rtl when its language is right-to-left);
- ``class he_IL`` after every tag starting with the legacy Hebrew code
  ``iw``, extending that tag's class with direction rtl;
- ``GeneratedLocalizationsDelegate`` with the supported locales, the
  exact -> language-only -> fallback resolution callback, and the
  ``load`` switch from tag to class.

Template texts are inserted verbatim between double quotes, so Dart's own
``$name`` interpolation resolves the accessor parameters at call time.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from arbgen.classify.classifier import (
    ClassifiedTable,
    ParametrizedEntry,
    PluralGroup,
    SimpleEntry,
    value_for_category,
)
from arbgen.constants import (
    DEFAULT_LOCALE,
    GENERATED_BANNER,
    HEBREW_ALIAS_COUNTRY,
    HEBREW_ALIAS_LANGUAGE,
    HEBREW_ALIAS_TAG,
)
from arbgen.enums import PluralCategory, TextDirection
from arbgen.locale_utils import is_legacy_hebrew, split_locale_tag, text_direction
from arbgen.resources.types import LocaleCode

from .templates import (
    DELEGATE_CLASS_END,
    DELEGATE_CLASS_HEADER,
    DELEGATE_CLASS_RESOLUTION,
    I18N_FILE_IMPORTS,
    S_CLASS_HEADER,
)

__all__ = ["DartEmitter", "emit_dart"]

logger = logging.getLogger(__name__)

_OVERRIDE: str = "  @override\n"


class DartEmitter:
    """Renders classified tables as one Dart source unit.

    Stateless between calls: every emit() builds its output in a local
    fragment list, so one emitter can be reused across runs.

    Usage:
        >>> emitter = DartEmitter()
        >>> table = classify_table("en", {"title": "Hi"}, {"title": "Hi"})
        >>> source = emitter.emit({"en": table})
        >>> 'String get title => "Hi";' in source
        True
    """

    __slots__ = ("_default_locale",)

    def __init__(self, default_locale: LocaleCode = DEFAULT_LOCALE) -> None:
        """Initialize emitter.

        Args:
            default_locale: Tag whose table defines the base class
        """
        self._default_locale = default_locale

    @property
    def default_locale(self) -> LocaleCode:
        """Tag whose table defines the base class."""
        return self._default_locale

    def emit(self, tables: Mapping[LocaleCode, ClassifiedTable]) -> str:
        """Render the generated unit.

        Args:
            tables: Classified tables in locale discovery order. Must contain
                the default locale.

        Returns:
            Dart source text

        Raises:
            KeyError: If the default locale is missing from tables
        """
        default_table = tables[self._default_locale]

        output: list[str] = [I18N_FILE_IMPORTS, GENERATED_BANNER]
        self._emit_base_class(default_table, output)
        for locale, table in tables.items():
            if locale == self._default_locale:
                self._emit_default_class(locale, output)
            else:
                self._emit_locale_class(locale, table, output)
        self._emit_delegate_class(list(tables), output)

        logger.debug("Emitted Dart unit for %d locales", len(tables))
        return "".join(output)

    def _emit_base_class(self, table: ClassifiedTable, output: list[str]) -> None:
        output.append(S_CLASS_HEADER)
        self._emit_accessors(table, output, is_override=False)
        output.append("}\n\n")

    def _emit_default_class(self, locale: LocaleCode, output: list[str]) -> None:
        direction = text_direction(locale)
        output.append(f"class {locale} extends S {{\n")
        output.append(f"  {locale}(Locale locale) : super(locale);\n")
        # S already declares ltr.
        if direction is TextDirection.RTL:
            output.append("\n")
            self._emit_text_direction(direction, output)
        output.append("}\n\n")
        self._emit_hebrew_alias(locale, output)

    def _emit_locale_class(
        self,
        locale: LocaleCode,
        table: ClassifiedTable,
        output: list[str],
    ) -> None:
        output.append(f"class {locale} extends S {{\n")
        output.append(f"  {locale}(Locale locale) : super(locale);\n\n")
        self._emit_text_direction(text_direction(locale), output)
        self._emit_accessors(table, output, is_override=True)
        output.append("}\n\n")
        self._emit_hebrew_alias(locale, output)

    def _emit_hebrew_alias(self, locale: LocaleCode, output: list[str]) -> None:
        if not is_legacy_hebrew(locale):
            return
        output.append(f"class {HEBREW_ALIAS_TAG} extends {locale} {{\n")
        output.append(f"  {HEBREW_ALIAS_TAG}(Locale locale) : super(locale);\n\n")
        self._emit_text_direction(TextDirection.RTL, output)
        output.append("}\n\n")

    def _emit_text_direction(self, direction: TextDirection, output: list[str]) -> None:
        output.append(_OVERRIDE)
        output.append(f"  TextDirection get textDirection => TextDirection.{direction};\n\n")

    def _emit_accessors(
        self,
        table: ClassifiedTable,
        output: list[str],
        *,
        is_override: bool,
    ) -> None:
        for entry in table.simple:
            self._emit_string_getter(entry, output, is_override=is_override)
        for param_entry in table.parametrized:
            self._emit_parametrized_method(param_entry, output, is_override=is_override)
        for group in table.plurals:
            self._emit_plural_method(group, output, is_override=is_override)

    def _emit_string_getter(
        self,
        entry: SimpleEntry,
        output: list[str],
        *,
        is_override: bool,
    ) -> None:
        if is_override:
            output.append(_OVERRIDE)
        output.append(f'  String get {entry.id} => "{entry.text}";\n')

    def _emit_parametrized_method(
        self,
        entry: ParametrizedEntry,
        output: list[str],
        *,
        is_override: bool,
    ) -> None:
        if is_override:
            output.append(_OVERRIDE)
        parameters = ", ".join(f"String {name}" for name in entry.parameters)
        output.append(f'  String {entry.id}({parameters}) => "{entry.text}";\n')

    def _emit_plural_method(
        self,
        group: PluralGroup,
        output: list[str],
        *,
        is_override: bool,
    ) -> None:
        if is_override:
            output.append(_OVERRIDE)
        output.append(f"  String {group.base}(String {group.parameter}) {{\n")
        output.append(f"    switch ({group.parameter}) {{\n")
        for category, text in group.variants:
            if category is PluralCategory.OTHER:
                continue
            output.append(f'      case "{value_for_category(category)}":\n')
            output.append(f'        return "{text}";\n')
        output.append("      default:\n")
        output.append(f'        return "{group.text_for(PluralCategory.OTHER)}";\n')
        output.append("    }\n")
        output.append("  }\n")

    def _emit_delegate_class(self, locales: list[LocaleCode], output: list[str]) -> None:
        output.append(DELEGATE_CLASS_HEADER)
        for locale in locales:
            language, country = split_locale_tag(locale)
            output.append(f'      new Locale("{language}", "{country}"),\n')
            if is_legacy_hebrew(locale):
                output.append(
                    f'      new Locale("{HEBREW_ALIAS_LANGUAGE}", "{HEBREW_ALIAS_COUNTRY}"),\n'
                )

        output.append(DELEGATE_CLASS_RESOLUTION)
        for locale in locales:
            self._emit_load_case(locale, output)
            if is_legacy_hebrew(locale):
                self._emit_load_case(HEBREW_ALIAS_TAG, output)

        output.append(DELEGATE_CLASS_END)

    def _emit_load_case(self, class_name: str, output: list[str]) -> None:
        output.append(f'      case "{class_name}":\n')
        output.append(
            "        return new SynchronousFuture<WidgetsLocalizations>"
            f"(new {class_name}(locale));\n"
        )


def emit_dart(
    tables: Mapping[LocaleCode, ClassifiedTable],
    *,
    default_locale: LocaleCode = DEFAULT_LOCALE,
) -> str:
    """Render classified tables as Dart source.

    Convenience function for DartEmitter.emit().

    Args:
        tables: Classified tables in locale discovery order
        default_locale: Tag whose table defines the base class

    Returns:
        Dart source text
    """
    return DartEmitter(default_locale).emit(tables)
