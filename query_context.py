#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
QueryContext - Holds all query-related information during processing.

It is passed through:
    • Handler routing (ParkingAssistant)
    • Handlers (BuildingParkingHandler, FindParkingHandler)

Handlers enrich the cache while deciding and answering.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
import time


@dataclass
class QueryContext:
    """
    Represents all relevant state for a single chat message.

    Attributes:
        query (str): Raw user message.
        facilities (list): Active parking lots fetched by the caller.
        limit (int | None): Override for the number of lots to list.
        user_name (str | None): First name used to personalise replies.
        cache (dict): Internal scratchpad for handlers.
        created_at (float): Timestamp when context was created.
    """

    query: str
    facilities: List[Any] = field(default_factory=list)
    limit: Optional[int] = None
    user_name: Optional[str] = None

    # Internal scratchpad
    cache: Dict[str, Any] = field(default_factory=dict)

    created_at: float = field(default_factory=time.time)

    def add_to_cache(self, key: str, value: Any) -> None:
        """Store arbitrary metadata used by handlers."""
        self.cache[key] = value

    def get_from_cache(self, key: str, default: Any = None) -> Any:
        """Retrieve cached information."""
        return self.cache.get(key, default)

    def __repr__(self) -> str:
        return (
            f"QueryContext(query={self.query!r}, "
            f"facilities={len(self.facilities)}, limit={self.limit!r})"
        )
