#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Location resolver: map a free-text name or phrase to one registry entry.

Resolution order:
    1. Exact key match (after trim + lowercase)
    2. Alias containment, either direction, first entry in registry order

Matching is binary; there is no confidence score. Short aliases can match
inside longer words (e.g. "cs" inside "physics"); callers rely on the
first-match-wins result, so precision is not tightened here.
"""

from __future__ import annotations

import logging
from typing import Optional

from .normaliser import normalise_location_text
from .registry import LocationEntry, LocationRegistry, default_registry


class LocationResolver:
    """Resolves location names against an injected LocationRegistry."""

    def __init__(self, registry: Optional[LocationRegistry] = None):
        self.registry = registry if registry is not None else default_registry()
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve(self, text: Optional[str]) -> Optional[LocationEntry]:
        """
        Return the best-matching entry for *text*, or None.

        Args:
            text: Location name, alias or short phrase

        Returns:
            LocationEntry or None when nothing matches
        """
        name = normalise_location_text(text)
        if not name:
            return None

        # 1. Exact key
        entry = self.registry.lookup(name)
        if entry is not None:
            return entry

        # 2. Alias containment, registry order
        for entry in self.registry:
            if any(alias in name or name in alias for alias in entry.aliases):
                self.logger.debug("Resolved %r via alias to %r", name, entry.key)
                return entry

        return None

    def resolve_key(self, text: Optional[str]) -> Optional[str]:
        entry = self.resolve(text)
        return entry.key if entry else None
