#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Single source of truth for location-text normalisation.
Import this module everywhere you need to compare location names or aliases.

Guidelines
---------
* Always normalise before using a name as a registry key or for matching.
* Normalisation is intentionally minimal (trim + lowercase) so that substring
  containment between aliases and user text behaves exactly as curated.
* Display names are never normalised.
"""
from __future__ import annotations

from functools import lru_cache
from collections.abc import Iterable


__all__ = ["normalise_location_text", "normalise_aliases"]


@lru_cache(maxsize=2048)
def normalise_location_text(text: str | None) -> str:
    """Return the lookup form of *text*.

    Parameters
    ----------
    text : str | None
        Raw key, alias or user phrase. `None` yields an empty string.

    Returns
    -------
    str
        Trimmed, lowercased text. Inner whitespace is left untouched.
    """
    if not text:
        return ""
    return str(text).strip().lower()


def normalise_aliases(aliases: Iterable[str]) -> tuple[str, ...]:
    """Normalise aliases, keeping first-seen order and dropping repeats."""
    seen: dict[str, None] = {}
    for alias in aliases:
        seen.setdefault(normalise_location_text(alias), None)
    return tuple(seen)
