"""In-memory project host for generator tests.

Records every call it receives so tests can check the order in which the
generator talks to its host:

    host = MemoryHost({"strings_en.arb": '{"title": "Title"}'})
    I18nFileGenerator(host).generate()
    assert host.calls[-2:] == ["write_generated", "reformat_generated"]
"""

from __future__ import annotations

from pathlib import Path


class MemoryHost:
    """ProjectHost keeping resource files and the generated unit in memory."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.generated: str | None = None
        self.calls: list[str] = []

    def values_folder(self) -> Path:
        return Path("res/values")

    def list_children(self) -> list[Path]:
        self.calls.append("list_children")
        return [self.values_folder() / name for name in self.files]

    def read_text(self, path: Path) -> str:
        self.calls.append(f"read_text:{path.name}")
        return self.files[path.name]

    def create_file(self, name: str, text: str) -> Path:
        self.calls.append(f"create_file:{name}")
        self.files[name] = text
        return self.values_folder() / name

    def write_generated(self, text: str) -> None:
        self.calls.append("write_generated")
        self.generated = text

    def reformat_generated(self) -> None:
        self.calls.append("reformat_generated")

    def describe_path(self, path: Path) -> str:
        return path.as_posix()
