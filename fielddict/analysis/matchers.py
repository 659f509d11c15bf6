"""Literal identifier matching used by the reference scanners."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Pattern


@lru_cache(maxsize=4096)
def _compile(identifier: str, ignore_case: bool) -> Pattern[str]:
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf"\b{re.escape(identifier)}\b", flags)


def contains_field(
    text: str,
    identifier: str,
    *,
    ignore_case: bool = True,
    whole_word: bool = True,
) -> bool:
    """Return True when ``identifier`` occurs in ``text``.

    Whole-word matching is the default: the identifier must be bounded by
    non-word characters (or the ends of the text) on both sides. The identifier
    is escaped before it becomes part of a pattern, so it is always matched
    literally.
    """
    if not text or not identifier:
        return False

    if not whole_word:
        if ignore_case:
            return identifier.lower() in text.lower()
        return identifier in text

    return _compile(identifier, ignore_case).search(text) is not None


__all__ = ["contains_field"]
