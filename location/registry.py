#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Location registry: canonical campus locations, their coordinates and aliases.

The registry is built once from an explicit configuration structure and is
read-only afterwards, so one instance can be shared across threads. Invalid
entries (duplicate keys, missing names or coordinates) stop initialisation
with RegistryError instead of being dropped.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Any, Optional

from emojis import EMOJI_TICK
from parking_exceptions import RegistryError
from proximity.facility import Coordinates, to_coordinates
from .campus_locations import CAMPUS_LOCATIONS
from .normaliser import normalise_aliases, normalise_location_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationEntry:
    key: str
    display_name: str
    coordinates: Coordinates
    aliases: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.display_name,
            "coordinates": self.coordinates.to_dict(),
            "aliases": list(self.aliases),
        }


class LocationRegistry:
    """
    Ordered, immutable directory of LocationEntry objects.

    Iteration order is insertion order; resolution relies on it for
    deterministic first-match-wins behaviour.
    """

    def __init__(self, entries: Iterable[LocationEntry]):
        by_key: dict[str, LocationEntry] = {}
        for entry in entries:
            if not isinstance(entry, LocationEntry):
                raise RegistryError(
                    f"Registry entries must be LocationEntry, got {type(entry).__name__}")
            key = normalise_location_text(entry.key)
            if not key:
                raise RegistryError("Location entry has an empty key")
            if key != entry.key:
                raise RegistryError(
                    f"Location key {entry.key!r} must be trimmed lowercase")
            for alias in entry.aliases:
                if not isinstance(alias, str) or not normalise_location_text(alias):
                    raise RegistryError(f"Location {key!r} has an empty alias")
                if normalise_location_text(alias) != alias:
                    raise RegistryError(
                        f"Location {key!r} alias {alias!r} must be trimmed lowercase")
            if key in by_key:
                raise RegistryError(f"Duplicate location key: {key!r}")
            if not entry.display_name or not entry.display_name.strip():
                raise RegistryError(f"Location {key!r} has no display name")
            if to_coordinates(entry.coordinates) is None:
                raise RegistryError(
                    f"Location {key!r} has missing or non-numeric coordinates")
            by_key[key] = entry

        self._entries: tuple[LocationEntry, ...] = tuple(by_key.values())
        self._by_key: Mapping[str, LocationEntry] = by_key

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    @classmethod
    def from_records(cls, records: Any) -> "LocationRegistry":
        """
        Build from the curated configuration structure.

        Accepts either a mapping of key -> record, or a sequence of records
        each carrying a "key". A record looks like:

            {"name": "Frank Melville Jr. Memorial Library",
             "coordinates": {"latitude": 40.9144, "longitude": -73.1251},
             "aliases": ["melville library", "main library"]}
        """
        if isinstance(records, Mapping):
            items = list(records.items())
        elif isinstance(records, (list, tuple)):
            items = []
            for record in records:
                if not isinstance(record, Mapping):
                    raise RegistryError(
                        f"Location record must be a mapping, got {record!r}")
                items.append((record.get("key"), record))
        else:
            raise RegistryError(
                f"Unsupported registry structure: {type(records).__name__}")

        registry = cls(_entry_from_record(key, record) for key, record in items)
        logger.info("%s Location registry loaded: %d locations",
                    EMOJI_TICK, len(registry))
        return registry

    @classmethod
    def from_json(cls, path: str | Path) -> "LocationRegistry":
        """Load a registry file; duplicate top-level keys are rejected."""
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                records = json.load(handle, object_pairs_hook=_reject_duplicates)
        except OSError as exc:
            raise RegistryError(f"Cannot read registry file {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise RegistryError(f"Invalid registry JSON in {path}: {exc}") from exc
        return cls.from_records(records)

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    def lookup(self, key: Optional[str]) -> Optional[LocationEntry]:
        return self._by_key.get(normalise_location_text(key))

    def all(self) -> tuple[LocationEntry, ...]:
        return self._entries

    def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]

    def __iter__(self) -> Iterator[LocationEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __repr__(self) -> str:
        return f"LocationRegistry({len(self._entries)} locations)"


# ============================================================================
# RECORD PARSING
# ============================================================================


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    seen: dict[str, Any] = {}
    for key, value in pairs:
        if key in seen:
            raise RegistryError(f"Duplicate key in registry file: {key!r}")
        seen[key] = value
    return seen


def _entry_from_record(raw_key: Any, record: Any) -> LocationEntry:
    if not isinstance(record, Mapping):
        raise RegistryError(f"Location {raw_key!r} record must be a mapping")

    key = normalise_location_text(raw_key if isinstance(raw_key, str) else None)
    if not key:
        raise RegistryError(f"Location record has an empty key: {record!r}")

    name = record.get("name") or record.get("display_name") or record.get(
        "displayName")
    if not isinstance(name, str) or not name.strip():
        raise RegistryError(f"Location {key!r} has no display name")

    coords = to_coordinates(record.get("coordinates"))
    if coords is None:
        raise RegistryError(
            f"Location {key!r} has missing or non-numeric coordinates")

    raw_aliases = record.get("aliases") or []
    if isinstance(raw_aliases, str) or not isinstance(raw_aliases, Iterable):
        raise RegistryError(f"Location {key!r} aliases must be a list")
    for alias in raw_aliases:
        if not isinstance(alias, str) or not alias.strip():
            raise RegistryError(f"Location {key!r} has an empty alias")

    return LocationEntry(
        key=key,
        display_name=name.strip(),
        coordinates=coords,
        aliases=normalise_aliases(raw_aliases),
    )


@lru_cache(maxsize=1)
def default_registry() -> LocationRegistry:
    """The curated main-campus registry, built once per process."""
    return LocationRegistry.from_records(CAMPUS_LOCATIONS)
