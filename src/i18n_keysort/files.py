"""Discover, sort and rewrite locale JSON files.

The sorting core never touches the disk. Everything here talks to a
:class:`FileSystem` so callers and tests can substitute an in-memory tree
for :class:`LocalFileSystem`.
"""

from __future__ import annotations

import json
import re
import typing as t
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from i18n_keysort.sorting import JSONValue, deep_sort
from i18n_keysort.utils import logger
from i18n_keysort.validation import is_locale_file

ENCODING = "utf-8"
INDENT = 2

ERR_PARSE = "Failed to parse JSON in %s: %s"
ERR_SORT = "Failed to sort %s: %s"
MSG_SORTED = "Sorted: %s"
MSG_WOULD_SORT = "Would sort: %s"
MSG_UNCHANGED = "Unchanged: %s"
MSG_SUMMARY = "{processed} file(s) processed: {changed} changed, {unchanged} unchanged, {failed} failed"
MSG_NO_FILES = "No locale files found under %s"
MSG_SKIP_LINK = "Skipping symlinked directory: %s"

# json.loads keeps unpaired surrogates as single code points
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")

FileStatus = t.Literal["unchanged", "changed", "failed"]


class FileSystem(t.Protocol):
    """Minimal file access needed to sort a locale tree."""

    def is_dir(self, path: Path) -> bool: ...

    def is_symlink(self, path: Path) -> bool: ...

    def iter_dir(self, path: Path) -> Iterable[Path]: ...

    def read_bytes(self, path: Path) -> bytes: ...

    def write_bytes(self, path: Path, data: bytes) -> None: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by :mod:`pathlib`."""

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def iter_dir(self, path: Path) -> Iterable[Path]:
        return path.iterdir()

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        path.write_bytes(data)


@dataclass
class FileResult:
    """Outcome of sorting a single locale file."""

    path: Path
    status: FileStatus
    error: str | None = None


@dataclass
class RunSummary:
    """Results of one run over one or more locale roots."""

    results: list[FileResult] = field(default_factory=list)
    check: bool = False

    def _count(self, status: FileStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def changed(self) -> int:
        return self._count("changed")

    @property
    def unchanged(self) -> int:
        return self._count("unchanged")

    @property
    def failed(self) -> int:
        return self._count("failed")

    @property
    def exit_code(self) -> int:
        """Return ``1`` in check mode when any file is out of order."""
        return 1 if self.check and self.changed else 0

    def describe(self) -> str:
        return MSG_SUMMARY.format(
            processed=self.processed,
            changed=self.changed,
            unchanged=self.unchanged,
            failed=self.failed,
        )


def discover_json_files(root: Path, fs: FileSystem) -> list[Path]:
    """Return all ``.json`` files below *root* in sorted path order.

    A *root* that is itself a locale file yields just that file. Symlinked
    directories below *root* are not followed.
    """
    if not fs.is_dir(root):
        return [root] if is_locale_file(root) else []
    found: list[Path] = []
    for entry in sorted(fs.iter_dir(root)):
        if fs.is_dir(entry):
            if fs.is_symlink(entry):
                logger.debug(MSG_SKIP_LINK, entry)
                continue
            found.extend(discover_json_files(entry, fs))
        elif is_locale_file(entry):
            found.append(entry)
    return found


def format_document(value: JSONValue) -> str:
    """Serialize *value* with two-space indentation and a trailing newline.

    Non-ASCII text is written verbatim; unpaired surrogates, which cannot be
    encoded as UTF-8, are written as ``\\uXXXX`` escapes.
    """
    text = json.dumps(value, indent=INDENT, ensure_ascii=False)
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text) + "\n"


def process_file(path: Path, fs: FileSystem, *, check: bool = False) -> FileResult:
    """Sort the keys of one locale file.

    The file is rewritten only when its canonical form differs from the bytes
    on disk and *check* is false. Files that are not valid UTF-8 JSON, or
    that nest too deeply to decode or sort, are logged and reported as
    ``failed``.
    """
    raw = fs.read_bytes(path)
    try:
        document = json.loads(raw.decode(ENCODING))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        logger.error(ERR_PARSE, path, exc)
        return FileResult(path=path, status="failed", error=str(exc))

    try:
        rendered = format_document(deep_sort(document)).encode(ENCODING)
    except RecursionError as exc:
        logger.error(ERR_SORT, path, exc)
        return FileResult(path=path, status="failed", error=str(exc))

    if rendered == raw:
        logger.debug(MSG_UNCHANGED, path)
        return FileResult(path=path, status="unchanged")
    if check:
        logger.info(MSG_WOULD_SORT, path)
    else:
        fs.write_bytes(path, rendered)
        logger.info(MSG_SORTED, path)
    return FileResult(path=path, status="changed")


def sort_locales(
    roots: Iterable[str | Path],
    fs: FileSystem | None = None,
    *,
    check: bool = False,
) -> RunSummary:
    """Sort every locale file below *roots* and return the run summary."""
    fs = fs or LocalFileSystem()
    summary = RunSummary(check=check)
    for root in roots:
        files = discover_json_files(Path(root), fs)
        if not files:
            logger.warning(MSG_NO_FILES, root)
        for path in files:
            summary.results.append(process_file(path, fs, check=check))
    logger.info(summary.describe())
    return summary


__all__ = [
    "FileResult",
    "FileSystem",
    "LocalFileSystem",
    "RunSummary",
    "discover_json_files",
    "format_document",
    "process_file",
    "sort_locales",
]
