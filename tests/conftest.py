from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from i18n_keysort import config
from i18n_keysort.utils import configure_logging


class MemoryFileSystem:
    """In-memory file tree keyed by absolute paths."""

    def __init__(
        self, files: dict[str, str | bytes], symlinks: Iterable[str] = ()
    ) -> None:
        self.files: dict[Path, bytes] = {
            Path(name): data.encode("utf-8") if isinstance(data, str) else data
            for name, data in files.items()
        }
        self.symlinks = {Path(name) for name in symlinks}
        self.writes: list[Path] = []

    def is_dir(self, path: Path) -> bool:
        return any(path in name.parents for name in self.files)

    def is_symlink(self, path: Path) -> bool:
        return path in self.symlinks

    def iter_dir(self, path: Path) -> Iterable[Path]:
        return {
            path / name.relative_to(path).parts[0]
            for name in self.files
            if path in name.parents
        }

    def read_bytes(self, path: Path) -> bytes:
        return self.files[path]

    def write_bytes(self, path: Path, data: bytes) -> None:
        self.files[path] = data
        self.writes.append(path)

    def text(self, path: str) -> str:
        return self.files[Path(path)].decode("utf-8")


@pytest.fixture
def memory_fs() -> type[MemoryFileSystem]:
    return MemoryFileSystem


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    path = tmp_path / "i18n_keysort_config.json"
    monkeypatch.setattr(config, "CONFIG_PATH", path)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging()


@pytest.fixture
def unsorted_json() -> str:
    return '{"fruit_one": "one", "fruit": "base", "fruit_red": "red"}\n'


@pytest.fixture
def sorted_json() -> str:
    return '{\n  "fruit": "base",\n  "fruit_one": "one",\n  "fruit_red": "red"\n}\n'
