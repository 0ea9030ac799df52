"""Project host: the file operations the generator needs from its environment.

The generator never touches the filesystem directly. It talks to a
ProjectHost, which locates the resource folder, lists and reads resource
files, creates the default resource when none exists, and writes and
reformats the generated unit.

Components:
    ProjectHost - Protocol for host implementations (structural typing)
    FileSystemHost - Disk-based host rooted at a project directory
    reformat_source - Whitespace normalization applied after writes

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from arbgen.constants import GENERATED_FILE, RES_FOLDER, VALUES_FOLDER

__all__ = [
    "FileSystemHost",
    "ProjectHost",
    "reformat_source",
]

logger = logging.getLogger(__name__)

_BLANK_RUN = re.compile(r"\n{3,}")


class ProjectHost(Protocol):
    """Protocol for the environment a generation run writes into.

    This is a Protocol (structural typing) rather than ABC so that IDE
    integrations and in-memory test doubles need no common base class.

    Example:
        >>> class MemoryHost:
        ...     def __init__(self, files): self.files = files
        ...     def values_folder(self): return Path("res/values")
        ...     def list_children(self): return [Path("res/values", n) for n in self.files]
        ...     def read_text(self, path): return self.files[path.name]
        ...     def create_file(self, name, text): ...
        ...     def write_generated(self, text): self.output = text
        ...     def reformat_generated(self): ...
        ...     def describe_path(self, path): return path.name
    """

    def values_folder(self) -> Path:
        """Locate the resource folder, creating it if needed."""

    def list_children(self) -> list[Path]:
        """List the files of the resource folder in a stable order."""

    def read_text(self, path: Path) -> str:
        """Read one resource file.

        Raises:
            OSError: If the file cannot be read
        """

    def create_file(self, name: str, text: str) -> Path:
        """Create a file in the resource folder and return its path."""

    def write_generated(self, text: str) -> None:
        """Overwrite the generated unit with text."""

    def reformat_generated(self) -> None:
        """Reformat the generated unit in place."""

    def describe_path(self, path: Path) -> str:
        """Return human-readable path for diagnostics.

        Default implementation returns the path unchanged as a string.
        """
        return str(path)


def reformat_source(text: str) -> str:
    """Normalize whitespace of a generated or created file.

    Strips trailing whitespace from every line, collapses runs of blank
    lines into one, drops leading blank lines and ends the text with
    exactly one newline.

    Example:
        >>> reformat_source("a  \\n\\n\\n\\nb")
        'a\\n\\nb\\n'
    """
    lines = [line.rstrip() for line in text.splitlines()]
    normalized = _BLANK_RUN.sub("\n\n", "\n".join(lines)).strip("\n")
    return f"{normalized}\n"


@dataclass(frozen=True, slots=True)
class FileSystemHost:
    """Project host backed by a directory on disk.

    Resource files live in ``<project_root>/res/values`` and the generated
    unit in ``<project_root>/lib/generated/i18n.dart``.

    Uses Python 3.13 frozen dataclass with slots for low memory overhead.

    Security:
        create_file() rejects names containing path separators or "..",
        so files can only be created inside the resource folder.

    Example:
        >>> host = FileSystemHost("my_app")
        >>> host.values_folder()
        PosixPath('my_app/res/values')

    Attributes:
        project_root: Root directory of the Flutter project
        generated_path: Generated unit, relative to project_root
    """

    project_root: str | Path
    generated_path: tuple[str, ...] = GENERATED_FILE
    _root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the root as a Path."""
        object.__setattr__(self, "_root", Path(self.project_root))

    @property
    def generated_file(self) -> Path:
        """Absolute or root-relative path of the generated unit."""
        return self._root.joinpath(*self.generated_path)

    def values_folder(self) -> Path:
        """Locate ``res/values`` under the project root, creating it if needed."""
        folder = self._root / RES_FOLDER / VALUES_FOLDER
        if not folder.is_dir():
            logger.info("Creating resource folder %s", folder)
            folder.mkdir(parents=True, exist_ok=True)
        return folder

    def list_children(self) -> list[Path]:
        """List regular files of the resource folder, sorted by name."""
        return sorted(
            (child for child in self.values_folder().iterdir() if child.is_file()),
            key=lambda child: child.name,
        )

    def read_text(self, path: Path) -> str:
        """Read a resource file as UTF-8.

        Raises:
            OSError: If the file cannot be read
        """
        return path.read_text(encoding="utf-8")

    @staticmethod
    def _validate_name(name: str) -> None:
        """Validate a file name for path traversal.

        Raises:
            ValueError: If name is empty or contains unsafe path components
        """
        if not name:
            msg = "File name cannot be empty"
            raise ValueError(msg)
        if ".." in name:
            msg = f"Path traversal sequences not allowed in file name: '{name}'"
            raise ValueError(msg)
        if "/" in name or "\\" in name:
            msg = f"Path separators not allowed in file name: '{name}'"
            raise ValueError(msg)

    def create_file(self, name: str, text: str) -> Path:
        """Create (or overwrite) a file in the resource folder.

        The content is reformatted before it is written.

        Raises:
            ValueError: If name contains path separators or ".."
            OSError: If the file cannot be written
        """
        self._validate_name(name)
        path = self.values_folder() / name
        path.write_text(reformat_source(text), encoding="utf-8")
        logger.info("Created resource file %s", path)
        return path

    def write_generated(self, text: str) -> None:
        """Overwrite the generated unit, creating its folder if needed.

        Raises:
            OSError: If the file cannot be written
        """
        target = self.generated_file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        logger.debug("Wrote %d characters to %s", len(text), target)

    def reformat_generated(self) -> None:
        """Normalize whitespace of the generated unit in place.

        Raises:
            OSError: If the file cannot be read or written
        """
        target = self.generated_file
        target.write_text(reformat_source(target.read_text(encoding="utf-8")), encoding="utf-8")

    def describe_path(self, path: Path) -> str:
        """Return the path relative to the project root when possible."""
        try:
            return path.relative_to(self._root).as_posix()
        except ValueError:
            return str(path)
