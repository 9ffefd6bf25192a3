"""Deterministic ordering of translation keys in nested JSON values."""

from __future__ import annotations

import typing as t
from collections.abc import Mapping
from functools import cmp_to_key

from i18n_keysort.collation import compare_text
from i18n_keysort.keys import ParsedKey, parse_key

JSONValue = t.Any


def _compare_optional(left: t.Any, right: t.Any, compare: t.Callable[[t.Any, t.Any], int]) -> int:
    # missing facets sort before present ones
    if left is None and right is None:
        return 0
    if left is None:
        return -1
    if right is None:
        return 1
    return compare(left, right)


def _compare_rank(left: int, right: int) -> int:
    return (left > right) - (left < right)


def compare_keys(a: ParsedKey, b: ParsedKey) -> int:
    """Order two parsed keys by base, then context, then plural form.

    For one base the bare key comes first, followed by its ``zero``, ``one``
    and ``other`` variants and finally its contexts in alphabetical order.
    """
    result = compare_text(a.base, b.base)
    if result:
        return result
    result = _compare_optional(a.context, b.context, compare_text)
    if result:
        return result
    return _compare_optional(a.plural_rank, b.plural_rank, _compare_rank)


def sort_mapping(mapping: Mapping[str, JSONValue]) -> list[ParsedKey]:
    """Return the entries of *mapping* as parsed keys in sorted order."""
    parsed = [parse_key(key, value) for key, value in mapping.items()]
    return sorted(parsed, key=cmp_to_key(compare_keys))


def deep_sort(value: JSONValue) -> JSONValue:
    """Return a copy of *value* with mapping keys ordered at every level.

    Lists keep their element order; only their elements are sorted. Scalars
    are returned unchanged. The input is never modified.
    """
    if isinstance(value, list):
        return [deep_sort(item) for item in value]
    if isinstance(value, dict):
        return {entry.original: deep_sort(entry.value) for entry in sort_mapping(value)}
    return value


__all__ = ["JSONValue", "compare_keys", "deep_sort", "sort_mapping"]
