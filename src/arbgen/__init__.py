"""arbgen - Flutter localization code generator for ARB string resources.

Reads per-locale string resources (``res/values/strings_<tag>.arb``, flat
JSON objects) and generates ``lib/generated/i18n.dart``: a base class ``S``
with one accessor per default-locale string, one subclass per locale
overriding the strings it translates, and a LocalizationsDelegate that
resolves a requested locale to the matching class.

Public API:
    rebuild_i18n_file - Regenerate the unit of a project directory
    I18nFileGenerator - Pipeline driver over any ProjectHost
    GeneratorConfig - Run settings (default locale, strict mode, callbacks)
    GenerationSummary - Per-locale report of a run
    render_i18n - Pure ResourceSet -> Dart source rendering
    FileSystemHost - Disk-based ProjectHost

Exceptions:
    ArbGenError - Base exception class
    ResourceSyntaxError - Malformed resource file (strict mode)
    InvalidPluralCategoryError - Unknown plural category or switch value

Submodules:
    arbgen.resources - Type aliases and resource file loading
    arbgen.classify - Simple/parametrized/plural classification
    arbgen.codegen - Dart emission
    arbgen.diagnostics - Error types and diagnostic codes
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import ArbGenError, InvalidPluralCategoryError, ResourceSyntaxError
from .generator import (
    GenerationSummary,
    GeneratorConfig,
    I18nFileGenerator,
    rebuild_i18n_file,
    render_i18n,
)
from .host import FileSystemHost, ProjectHost

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("arbgen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArbGenError",
    "FileSystemHost",
    "GenerationSummary",
    "GeneratorConfig",
    "I18nFileGenerator",
    "InvalidPluralCategoryError",
    "ProjectHost",
    "ResourceSyntaxError",
    "__version__",
    "rebuild_i18n_file",
    "render_i18n",
]
