"""Resource package: type aliases and per-locale file loading.

Submodules:
    types   - PEP 695 type aliases (LocaleCode, StringId, StringTable, ResourceSet)
    loading - Resource file filter, tag extraction, load_resource, ResourceLoadResult

Python 3.13+. Zero external dependencies.
"""

from arbgen.enums import LoadStatus
from arbgen.resources.loading import (
    ResourceLoadResult,
    is_resource_file,
    load_resource,
    locale_tag_from_filename,
)
from arbgen.resources.types import (
    LocaleCode,
    ResourceSet,
    StringId,
    StringTable,
    TemplateText,
)

__all__ = [
    "LoadStatus",
    "LocaleCode",
    "ResourceLoadResult",
    "ResourceSet",
    "StringId",
    "StringTable",
    "TemplateText",
    "is_resource_file",
    "load_resource",
    "locale_tag_from_filename",
]
