"""Command line interface for sorting locale files."""

from __future__ import annotations

import argparse
import sys
import typing as t
from pathlib import Path
from typing import Self

from i18n_keysort import config
from i18n_keysort.files import sort_locales
from i18n_keysort.paths import PathValidationError, validate_path
from i18n_keysort.utils import configure_logging
from i18n_keysort.validation import LOG_LEVELS


class CliError(RuntimeError):
    """Raised when CLI arguments cannot be processed."""

    @classmethod
    def unrecognized_arguments(cls, extra: t.Sequence[str]) -> Self:
        joined = " ".join(extra)
        return cls(f"unrecognized arguments: {joined}")

    @classmethod
    def invalid_path(cls, path: str, reason: str) -> Self:
        return cls(f"invalid path {path!r}: {reason}")

    @classmethod
    def invalid_config(cls, path: Path | None, reason: str) -> Self:
        where = str(path) if path is not None else "user configuration"
        return cls(f"invalid configuration in {where}: {reason}")


def main(argv: t.Sequence[str] | None = None) -> int:
    """Parse *argv*, sort the requested locale trees and return an exit code.

    Default mode rewrites out-of-order files and returns ``0``. With
    ``--check`` nothing is written and ``1`` signals that at least one file
    would change. Usage errors return ``2``.
    """
    parser = _create_parser()
    try:
        args, extra = parser.parse_known_args(argv)
    except SystemExit as exc:  # pragma: no cover - argparse handles usage exits  # i18n-keysort: delegate help/usage exit codes to argparse | issue:-
        code = exc.code
        return code if isinstance(code, int) else 1

    try:
        if extra:
            raise CliError.unrecognized_arguments(extra)
        return _cmd_sort(args)
    except CliError as exc:
        _write_line(sys.stderr, str(exc))
        return 2
    except Exception as exc:  # pragma: no cover - exercised in integration tests  # i18n-keysort: runtime errors bubble up to stderr for CLI users | issue:-
        _write_line(sys.stderr, f"Error: {exc}")
        return 1


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-keysort",
        description=(
            "Sort keys in JSON translation files by base key, context and "
            "plural form."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Locale directories or JSON files (default: configured locales_dir).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report files that would change without writing; exit 1 if any.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: configured log_level).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Read settings from this JSON file instead of the user config.",
    )
    return parser


def _load_settings(config_path: Path | None) -> dict:
    try:
        if config_path is None:
            return config.load_config()
        return config.load_config_at(config_path)
    except ValueError as exc:
        raise CliError.invalid_config(config_path, str(exc)) from exc


def _resolve_roots(paths: t.Sequence[str]) -> list[Path]:
    roots: list[Path] = []
    for raw in paths:
        try:
            roots.append(validate_path(raw, must_exist=True))
        except PathValidationError as exc:
            raise CliError.invalid_path(raw, str(exc)) from exc
    return roots


def _cmd_sort(args: argparse.Namespace) -> int:
    settings = _load_settings(args.config)
    configure_logging(args.log_level or settings["log_level"])
    roots = _resolve_roots(args.paths or [settings["locales_dir"]])
    summary = sort_locales(roots, check=args.check)
    return summary.exit_code


def _write_line(stream: t.TextIO, text: str) -> None:
    stream.write(f"{text}\n")


__all__ = ["CliError", "main"]
