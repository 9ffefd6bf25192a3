"""Deterministic key ordering for JSON translation files."""

import sys

from i18n_keysort.files import sort_locales
from i18n_keysort.keys import ParsedKey, PluralForm, parse_key
from i18n_keysort.sorting import compare_keys, deep_sort
from i18n_keysort.utils import configure_logging, logger

# locale files may carry integers longer than the default conversion limit
sys.set_int_max_str_digits(0)

__all__ = [
    "ParsedKey",
    "PluralForm",
    "compare_keys",
    "configure_logging",
    "deep_sort",
    "logger",
    "parse_key",
    "sort_locales",
]
