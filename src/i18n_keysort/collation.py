"""Locale-aware string ordering for translation keys.

Key comparison mirrors the default Unicode collation used by browser
``localeCompare`` closely enough for identifier-like keys without depending
on the process locale:

- primary: letters compared without accents or case, with whitespace before
  punctuation, punctuation before digits and digits before letters; ASCII
  punctuation follows the root order ``_ - , ; : ! ? . ' " ( ) ...``
- secondary: accents (``resume`` before ``résumé``)
- tertiary: case, lowercase before uppercase (``banana`` before ``Banana``)

Two distinct strings never compare equal; the raw text breaks the final tie.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

_GROUP_SPACE = 0
_GROUP_PUNCTUATION = 1
_GROUP_DIGIT = 2
_GROUP_LETTER = 3

# ASCII punctuation and symbols in Unicode root collation order
_PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_PUNCTUATION_RANK = {char: rank for rank, char in enumerate(_PUNCTUATION_ORDER)}

CollationKey = tuple[
    tuple[tuple[int, int, str], ...],
    tuple[str, ...],
    tuple[int, ...],
    str,
]


def _char_rank(char: str) -> tuple[int, int]:
    if char.isspace():
        return _GROUP_SPACE, 0
    if char.isdigit():
        return _GROUP_DIGIT, 0
    if char.isalpha():
        return _GROUP_LETTER, 0
    return _GROUP_PUNCTUATION, _PUNCTUATION_RANK.get(char, len(_PUNCTUATION_ORDER))


@lru_cache(maxsize=4096)
def collation_key(text: str) -> CollationKey:
    """Return a sort key for *text* usable with :func:`sorted`."""
    primary: list[tuple[int, int, str]] = []
    secondary: list[str] = []
    tertiary: list[int] = []
    for char in unicodedata.normalize("NFD", text):
        if unicodedata.combining(char) and secondary:
            # accents attach to the preceding base character
            secondary[-1] += char
            continue
        primary.append((*_char_rank(char), char.casefold()))
        secondary.append("")
        tertiary.append(1 if char != char.lower() else 0)
    return tuple(primary), tuple(secondary), tuple(tertiary), text


def compare_text(left: str, right: str) -> int:
    """Return ``-1``, ``0`` or ``1`` comparing *left* and *right*."""
    left_key = collation_key(left)
    right_key = collation_key(right)
    return (left_key > right_key) - (left_key < right_key)


__all__ = ["CollationKey", "collation_key", "compare_text"]
