"""Root path validation for locale directories."""

from __future__ import annotations

from pathlib import Path

ERR_NULL_BYTES = "path contains null bytes"
ERR_NOT_EXIST = "path does not exist: {path}"


class PathValidationError(ValueError):
    """Raised when a user-supplied path is invalid."""


def validate_path(path: str | Path, *, must_exist: bool = False) -> Path:
    """Return *path* as an absolute, resolved path.

    Raises:
    ------
    PathValidationError:
        If the path contains null bytes or is missing when ``must_exist``
        is set.
    """
    if "\x00" in str(path):
        raise PathValidationError(ERR_NULL_BYTES)
    candidate = Path(path).resolve()
    if must_exist and not candidate.exists():
        raise PathValidationError(ERR_NOT_EXIST.format(path=path))
    return candidate


__all__ = ["PathValidationError", "validate_path"]
