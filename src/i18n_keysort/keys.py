"""Decompose flat translation keys into base, context and plural facets.

Keys follow the ``base[_context][_plural]`` convention where the plural
suffix is one of ``zero``, ``one`` or ``other``. A key carries either a
context or a plural form, never both: the plural suffix check runs first, so
``color_red_one`` is the ``one`` variant of ``color_red`` rather than the
``red_one`` context of ``color``.
"""

from __future__ import annotations

import typing as t
from dataclasses import dataclass

PluralForm = t.Literal["zero", "one", "other"]

KEY_SEPARATOR = "_"
PLURAL_ORDER: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "other": 2,
}


@dataclass(frozen=True)
class ParsedKey:
    """A mapping entry with its key split into sortable facets."""

    original: str
    base: str
    context: str | None
    plural: PluralForm | None
    value: t.Any = None

    @property
    def plural_rank(self) -> int | None:
        """Return the fixed rank of the plural form, if any."""
        return None if self.plural is None else PLURAL_ORDER[self.plural]


def is_plural_form(segment: str) -> bool:
    """Return ``True`` when *segment* names a supported plural form."""
    return segment in PLURAL_ORDER


def parse_key(key: str, value: t.Any = None) -> ParsedKey:
    """Split *key* into its facets and attach *value* unchanged.

    A single-segment key is always a plain base key, even when it is spelled
    like a plural form.
    """
    parts = key.split(KEY_SEPARATOR)
    last = parts[-1]
    if len(parts) > 1 and is_plural_form(last):
        return ParsedKey(
            original=key,
            base=KEY_SEPARATOR.join(parts[:-1]),
            context=None,
            plural=t.cast(PluralForm, last),
            value=value,
        )
    context = KEY_SEPARATOR.join(parts[1:]) if len(parts) > 1 else None
    return ParsedKey(
        original=key,
        base=parts[0],
        context=context,
        plural=None,
        value=value,
    )


__all__ = [
    "KEY_SEPARATOR",
    "PLURAL_ORDER",
    "ParsedKey",
    "PluralForm",
    "is_plural_form",
    "parse_key",
]
