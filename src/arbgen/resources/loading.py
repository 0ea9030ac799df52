"""Resource loading for per-locale string files.

Turns the text of one ``strings_<tag>.arb`` file into a StringTable. A file
that is not a well-formed JSON object is absorbed: it contributes an empty
table for its locale and a diagnostic, unless strict mode is requested.

String values are kept exactly as written between their quotes. Escape
sequences are not decoded, so ``\\"`` and ``$name`` reach the generated Dart
source verbatim.

Components:
    is_resource_file - File name filter for resource files
    locale_tag_from_filename - Locale tag embedded in a resource file name
    load_resource - Parse resource text into a ResourceLoadResult
    ResourceLoadResult - Immutable result of a single load

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from json.decoder import scanstring
from json.scanner import py_make_scanner
from pathlib import PurePath

from arbgen.constants import RESOURCE_EXTENSION, RESOURCE_PREFIX
from arbgen.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ResourceSyntaxError,
    SourceLocation,
)
from arbgen.enums import LoadStatus
from arbgen.resources.types import LocaleCode, StringTable

__all__ = [
    "ResourceLoadResult",
    "is_resource_file",
    "load_resource",
    "locale_tag_from_filename",
]

logger = logging.getLogger(__name__)


def is_resource_file(name: str) -> bool:
    """Check whether a file name denotes a locale resource file.

    The ``strings_`` prefix and the ``.arb`` extension are both matched
    case-insensitively.

    Example:
        >>> is_resource_file("strings_pt_BR.arb")
        True
        >>> is_resource_file("Strings_en.ARB")
        True
        >>> is_resource_file("strings_en.json")
        False
    """
    path = PurePath(name)
    return (
        path.name.lower().startswith(RESOURCE_PREFIX)
        and path.suffix.lower() == f".{RESOURCE_EXTENSION}"
    )


def locale_tag_from_filename(name: str) -> LocaleCode:
    """Return the locale tag of a resource file: the stem after the first ``_``.

    Example:
        >>> locale_tag_from_filename("strings_pt_BR.arb")
        'pt_BR'
    """
    stem = PurePath(name).stem
    _, sep, tag = stem.partition("_")
    return tag if sep else stem


class _Members(list[tuple[str, object]]):
    """Key/value pairs of a JSON object, in source order."""


class _NonStandardConstantError(ValueError):
    """NaN or Infinity literal, accepted by Python's json but not by JSON."""


# String literals are matched first so constants inside them are skipped.
_BARE_CONSTANT = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)')


def _raw_parse_string(string: str, end: int, strict: bool = True) -> tuple[str, int]:
    # scanstring validates the literal and finds its closing quote; the raw
    # text between the quotes is returned instead of the decoded value.
    _, next_end = scanstring(string, end, strict)
    return string[end : next_end - 1], next_end


def _reject_constant(name: str) -> object:
    raise _NonStandardConstantError(name)


class _RawValueDecoder(json.JSONDecoder):
    """JSON decoder returning string values undecoded.

    Object keys are decoded normally. The pure-Python scanner is used because
    the C accelerator ignores ``parse_string``. ``NaN``, ``Infinity`` and
    ``-Infinity`` are rejected as syntax errors.
    """

    def __init__(self) -> None:
        super().__init__(object_pairs_hook=_Members, parse_constant=_reject_constant)
        self.parse_string = _raw_parse_string
        self.scan_once = py_make_scanner(self)

    def decode(self, s: str) -> object:  # type: ignore[override]
        """Decode s, reporting non-standard constants as JSONDecodeError."""
        try:
            return super().decode(s)
        except _NonStandardConstantError as e:
            pos = next(
                (m.start(1) for m in _BARE_CONSTANT.finditer(s) if m.group(1) == str(e)),
                0,
            )
            msg = f"Invalid constant {e}"
            raise json.JSONDecodeError(msg, s, pos) from None


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single resource file.

    Attributes:
        locale: Locale tag of the file
        table: Loaded strings (empty when the file is malformed)
        status: Load status (success, malformed, created)
        source_path: Human-readable path to the file (if available)
        diagnostics: Problems found while loading, in source order
    """

    locale: LocaleCode
    table: StringTable = field(default_factory=dict)
    status: LoadStatus = LoadStatus.SUCCESS
    source_path: str | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_success(self) -> bool:
        """Check if the file parsed as a JSON object."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_malformed(self) -> bool:
        """Check if the file was absorbed as an empty table."""
        return self.status == LoadStatus.MALFORMED

    @property
    def was_created(self) -> bool:
        """Check if the file was created empty for the default locale."""
        return self.status == LoadStatus.CREATED

    @property
    def entry_count(self) -> int:
        """Number of strings loaded."""
        return len(self.table)


def _malformed(
    diagnostic: Diagnostic,
    locale: LocaleCode,
    source_path: str | None,
    *,
    strict: bool,
) -> ResourceLoadResult:
    if strict:
        raise ResourceSyntaxError(diagnostic, locale=locale, source_path=source_path or "")
    logger.warning(
        "Ignoring malformed resource for locale '%s': %s",
        locale,
        diagnostic.format_error(),
    )
    return ResourceLoadResult(
        locale=locale,
        status=LoadStatus.MALFORMED,
        source_path=source_path,
        diagnostics=(diagnostic,),
    )


def load_resource(
    locale: LocaleCode,
    source: str,
    *,
    source_path: str | None = None,
    strict: bool = False,
) -> ResourceLoadResult:
    """Parse the text of a resource file.

    Args:
        locale: Locale tag of the file
        source: File content
        source_path: Human-readable path used in diagnostics
        strict: Raise instead of absorbing a malformed file

    Returns:
        ResourceLoadResult with the table in file key order. Duplicate keys
        keep their first position and their last value. Non-string values
        are skipped with a warning diagnostic.

    Raises:
        ResourceSyntaxError: If strict is True and the file is not a
            well-formed JSON object
    """
    try:
        document = _RawValueDecoder().decode(source)
    except json.JSONDecodeError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.RESOURCE_SYNTAX_ERROR,
            message=e.msg,
            location=SourceLocation(offset=e.pos, line=e.lineno, column=e.colno),
            source_path=source_path,
            hint="Fix the JSON syntax; the locale is generated without overrides",
        )
        return _malformed(diagnostic, locale, source_path, strict=strict)

    if not isinstance(document, _Members):
        diagnostic = Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_OBJECT,
            message=f"Expected a JSON object, got {type(document).__name__}",
            source_path=source_path,
            hint='Resource files hold a flat object: { "id": "text", ... }',
        )
        return _malformed(diagnostic, locale, source_path, strict=strict)

    table: StringTable = {}
    diagnostics: list[Diagnostic] = []
    for string_id, value in document:
        if isinstance(value, str):
            table[string_id] = value
            continue
        diagnostic = Diagnostic(
            code=DiagnosticCode.NON_STRING_VALUE,
            message=f"Value of '{string_id}' is not a string",
            source_path=source_path,
            hint="Only string values are generated",
            severity="warning",
        )
        logger.warning("Skipping '%s' in locale '%s': value is not a string", string_id, locale)
        diagnostics.append(diagnostic)

    logger.debug("Loaded %d strings for locale '%s'", len(table), locale)
    return ResourceLoadResult(
        locale=locale,
        table=table,
        status=LoadStatus.SUCCESS,
        source_path=source_path,
        diagnostics=tuple(diagnostics),
    )
