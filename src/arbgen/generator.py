"""Generation orchestrator: resource files in, Dart localization unit out.

One run is a straight pipeline with no state carried between runs:

1. list resource files through the host and create the default-locale file
   when it does not exist;
2. load every file into a StringTable (malformed files become empty tables);
3. classify each table against the default table;
4. emit the Dart unit;
5. hand the text to the host and ask it to reformat the written unit.

The locale order of the ResourceSet is the host's listing order. It decides
the order of locale classes, supported locales and ``load`` cases, so a host
must list files deterministically for the output to be reproducible.

Initialization Behavior:
    Malformed resource files do not stop a run. Each one is logged and
    reported on the returned GenerationSummary:

        summary = I18nFileGenerator(FileSystemHost("my_app")).generate()
        if summary.has_malformed:
            print(f"Generated without overrides: {summary.malformed}")

    Pass ``GeneratorConfig(strict=True)`` to raise ResourceSyntaxError
    instead. Errors raised by the host while writing propagate unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from arbgen.classify.classifier import ClassifiedTable, classify_table
from arbgen.classify.plural_rules import plural_coverage_diagnostic
from arbgen.codegen.dart import DartEmitter
from arbgen.constants import (
    DEFAULT_LOCALE,
    EMPTY_RESOURCE,
    HEBREW_ALIAS_TAG,
    RESOURCE_EXTENSION,
    RESOURCE_PREFIX,
)
from arbgen.diagnostics import Diagnostic, DiagnosticCode
from arbgen.enums import LoadStatus
from arbgen.host import FileSystemHost, ProjectHost
from arbgen.locale_utils import is_legacy_hebrew
from arbgen.resources.loading import (
    ResourceLoadResult,
    is_resource_file,
    load_resource,
    locale_tag_from_filename,
)
from arbgen.resources.types import LocaleCode, ResourceSet, StringId

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Orchestrator
    "I18nFileGenerator",
    "rebuild_i18n_file",
    "render_i18n",
    "classify_resources",
    # Configuration
    "GeneratorConfig",
    "DroppedIdInfo",
    # Reports
    "LocaleReport",
    "GenerationSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DroppedIdInfo:
    """Information about a string id dropped from a locale.

    Provided to the on_dropped_id callback when a locale defines an id the
    default locale does not have.

    Attributes:
        locale: Locale that defined the id
        string_id: The dropped id
        default_locale: Locale whose table decides which ids exist
    """

    locale: LocaleCode
    string_id: StringId
    default_locale: LocaleCode


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Settings of a generation run.

    Attributes:
        default_locale: Tag whose table defines the base class
        strict: Raise ResourceSyntaxError on malformed resource files instead
            of generating the locale without overrides
        on_dropped_id: Called once per id dropped from a non-default locale
        report_plural_coverage: Compare plural groups against the locale's
            CLDR plural categories and report missing ones
    """

    default_locale: LocaleCode = DEFAULT_LOCALE
    strict: bool = False
    on_dropped_id: Callable[[DroppedIdInfo], None] | None = None
    report_plural_coverage: bool = True


@dataclass(frozen=True, slots=True)
class LocaleReport:
    """What one locale contributed to the generated unit.

    Attributes:
        load: Result of loading the locale's resource file
        classified: Accessors generated for the locale
        diagnostics: Dropped-id and CLDR plural coverage warnings
    """

    load: ResourceLoadResult
    classified: ClassifiedTable
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def locale(self) -> LocaleCode:
        """Locale tag."""
        return self.load.locale

    @property
    def status(self) -> LoadStatus:
        """Load status of the resource file."""
        return self.load.status

    @property
    def dropped(self) -> tuple[StringId, ...]:
        """Ids dropped because the default locale does not define them."""
        return self.classified.dropped

    @property
    def accessor_count(self) -> int:
        """Number of accessors generated for the locale."""
        return len(self.classified.accessor_names)


@dataclass(frozen=True, slots=True)
class GenerationSummary:
    """Immutable outcome of a generation run.

    Attributes:
        reports: One report per locale, in emission order
        source: Generated Dart text as handed to the host (before reformat)
    """

    reports: tuple[LocaleReport, ...]
    source: str

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"GenerationSummary(locales={len(self.reports)}, "
            f"malformed={len(self.malformed)}, "
            f"dropped={self.dropped_count})"
        )

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locale tags in emission order."""
        return tuple(report.locale for report in self.reports)

    @property
    def malformed(self) -> tuple[LocaleCode, ...]:
        """Locales whose resource file was absorbed as an empty table."""
        return tuple(r.locale for r in self.reports if r.status == LoadStatus.MALFORMED)

    @property
    def created_default(self) -> bool:
        """Check if the run created the default-locale resource file."""
        return any(r.status == LoadStatus.CREATED for r in self.reports)

    @property
    def dropped_count(self) -> int:
        """Total number of ids dropped across all locales."""
        return sum(len(r.dropped) for r in self.reports)

    @property
    def has_malformed(self) -> bool:
        """Check if any resource file was malformed."""
        return bool(self.malformed)

    def get_by_locale(self, locale: LocaleCode) -> LocaleReport | None:
        """Get the report of one locale, or None if it was not generated."""
        for report in self.reports:
            if report.locale == locale:
                return report
        return None

    def get_diagnostics(self) -> tuple[Diagnostic, ...]:
        """Get every diagnostic of the run, in locale order."""
        diagnostics: list[Diagnostic] = []
        for report in self.reports:
            diagnostics.extend(report.load.diagnostics)
            diagnostics.extend(report.diagnostics)
        return tuple(diagnostics)


def classify_resources(
    resources: ResourceSet,
    *,
    default_locale: LocaleCode = DEFAULT_LOCALE,
) -> dict[LocaleCode, ClassifiedTable]:
    """Classify every table of a ResourceSet against its default table.

    A missing default table is treated as empty and placed first.

    Returns:
        Classified tables in ResourceSet order
    """
    if default_locale not in resources:
        resources = {default_locale: {}, **resources}
    default_table = resources[default_locale]
    return {
        locale: classify_table(locale, table, default_table)
        for locale, table in resources.items()
    }


def render_i18n(resources: ResourceSet, *, default_locale: LocaleCode = DEFAULT_LOCALE) -> str:
    """Render a ResourceSet as Dart source without touching any host.

    Example:
        >>> source = render_i18n({"en": {"greeting": "Hello $name"}})
        >>> 'String greeting(String name) => "Hello $name";' in source
        True
    """
    tables = classify_resources(resources, default_locale=default_locale)
    return DartEmitter(default_locale).emit(tables)


class I18nFileGenerator:
    """Regenerates the Dart localization unit of one project.

    Example:
        >>> generator = I18nFileGenerator(FileSystemHost("my_app"))
        >>> summary = generator.generate()
        >>> summary.locales
        ('en', 'fr')

    Attributes:
        host: Host providing resource files and receiving the output
        config: Run settings
    """

    __slots__ = ("_config", "_emitter", "_host")

    def __init__(self, host: ProjectHost, config: GeneratorConfig | None = None) -> None:
        """Initialize generator.

        Args:
            host: Host providing resource files and receiving the output
            config: Run settings (defaults to GeneratorConfig())
        """
        self._host = host
        self._config = config if config is not None else GeneratorConfig()
        self._emitter = DartEmitter(self._config.default_locale)

    @property
    def host(self) -> ProjectHost:
        """Host providing resource files and receiving the output."""
        return self._host

    @property
    def config(self) -> GeneratorConfig:
        """Run settings."""
        return self._config

    def generate(self) -> GenerationSummary:
        """Run the whole pipeline and write the generated unit.

        Returns:
            GenerationSummary describing every locale of the run

        Raises:
            ResourceSyntaxError: If strict mode is on and a file is malformed
            OSError: If the host fails to read or write
        """
        results = self.load_resources()
        resources: ResourceSet = {result.locale: result.table for result in results}
        default_table = resources[self._config.default_locale]
        _warn_duplicate_alias(list(resources))

        reports: list[LocaleReport] = []
        tables: dict[LocaleCode, ClassifiedTable] = {}
        for result in results:
            classified = classify_table(result.locale, result.table, default_table)
            self._notify_dropped(classified)
            tables[result.locale] = classified
            reports.append(
                LocaleReport(
                    load=result,
                    classified=classified,
                    diagnostics=(
                        *_dropped_diagnostics(classified, result.source_path),
                        *self._plural_diagnostics(classified),
                    ),
                )
            )

        source = self._emitter.emit(tables)
        self._host.write_generated(source)
        self._host.reformat_generated()

        summary = GenerationSummary(reports=tuple(reports), source=source)
        logger.info("Generated i18n unit: %r", summary)
        return summary

    def load_resources(self) -> list[ResourceLoadResult]:
        """Load every resource file, one result per distinct locale tag.

        The default-locale file is created through the host when missing;
        its result comes first and has status CREATED.

        Returns:
            Load results in host listing order
        """
        by_locale: dict[LocaleCode, ResourceLoadResult] = {}
        for path in self._host.list_children():
            if not is_resource_file(path.name):
                continue
            locale = locale_tag_from_filename(path.name)
            source_path = self._host.describe_path(path)
            if locale in by_locale:
                logger.warning(
                    "Locale '%s' defined by more than one file; using %s", locale, source_path
                )
            by_locale[locale] = load_resource(
                locale,
                self._host.read_text(path),
                source_path=source_path,
                strict=self._config.strict,
            )

        default_locale = self._config.default_locale
        if default_locale not in by_locale:
            created = self._create_default_resource()
            by_locale = {default_locale: created, **by_locale}

        return list(by_locale.values())

    def _create_default_resource(self) -> ResourceLoadResult:
        locale = self._config.default_locale
        name = f"{RESOURCE_PREFIX}{locale}.{RESOURCE_EXTENSION}"
        path = self._host.create_file(name, EMPTY_RESOURCE)
        logger.info("No resource file for default locale '%s'; created %s", locale, name)
        return ResourceLoadResult(
            locale=locale,
            status=LoadStatus.CREATED,
            source_path=self._host.describe_path(path),
        )

    def _notify_dropped(self, classified: ClassifiedTable) -> None:
        callback = self._config.on_dropped_id
        if callback is None:
            return
        for string_id in classified.dropped:
            callback(
                DroppedIdInfo(
                    locale=classified.locale,
                    string_id=string_id,
                    default_locale=self._config.default_locale,
                )
            )

    def _plural_diagnostics(self, classified: ClassifiedTable) -> tuple[Diagnostic, ...]:
        if not self._config.report_plural_coverage:
            return ()
        diagnostics: list[Diagnostic] = []
        for group in classified.plurals:
            diagnostic = plural_coverage_diagnostic(group, classified.locale)
            if diagnostic is not None:
                logger.info("%s", diagnostic.format_error())
                diagnostics.append(diagnostic)
        return tuple(diagnostics)


def _warn_duplicate_alias(locales: list[LocaleCode]) -> None:
    legacy = [locale for locale in locales if is_legacy_hebrew(locale)]
    if len(legacy) > 1:
        logger.warning(
            "Locales %s each get a %s alias class; the generated unit declares it %d times",
            ", ".join(legacy),
            HEBREW_ALIAS_TAG,
            len(legacy),
        )


def _dropped_diagnostics(
    classified: ClassifiedTable, source_path: str | None
) -> tuple[Diagnostic, ...]:
    return tuple(
        Diagnostic(
            code=DiagnosticCode.ID_NOT_IN_DEFAULT,
            message=f"'{string_id}' is not defined by the default locale",
            source_path=source_path,
            hint="Add the id to the default resource file to generate it",
            severity="warning",
        )
        for string_id in classified.dropped
    )


def rebuild_i18n_file(
    project_root: str | Path,
    config: GeneratorConfig | None = None,
) -> GenerationSummary:
    """Regenerate ``lib/generated/i18n.dart`` from ``res/values`` of a project.

    Creates ``res/values`` and an empty default-locale resource file when
    they do not exist yet.

    Args:
        project_root: Root directory of the Flutter project
        config: Run settings (defaults to GeneratorConfig())

    Returns:
        GenerationSummary of the run
    """
    return I18nFileGenerator(FileSystemHost(project_root), config).generate()
