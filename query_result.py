#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
QueryResult - the unified output container for chat handlers.

Returned by ParkingAssistant.process_query(), it carries:
    • The final answer string
    • The structured recommendation (ranked lots) when one was produced
    • Diagnostics: which handler was used, success state, processing time
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional


@dataclass
class QueryResult:
    """
    Represents the final response for a processed chat message.

    Required:
        query (str) - The original user message
        answer (str) - Final reply text produced by a handler

    Optional fields:
        results (list) - Ranked lots as transport dicts
        handler_used (str) - Name of the handler that produced the answer
        query_type (str) - Logical category: 'building_parking', ...
        success (bool) - False when the user must clarify or nothing matched
        used_ai (bool) - Whether the answer was phrased by the AI model
        metadata (dict) - Resolved location and other details
    """

    query: str
    answer: str

    results: List[Dict[str, Any]] = field(default_factory=list)
    handler_used: Optional[str] = None
    query_type: Optional[str] = None
    success: bool = True
    used_ai: bool = False
    processing_time_ms: Optional[float] = None

    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        """Add a single metadata item."""
        self.metadata[key] = value

    @property
    def location(self) -> Optional[Dict[str, Any]]:
        """Resolved location dict, when the handler resolved one."""
        return self.metadata.get("location")

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a dict (safe for transport or API output)."""
        return asdict(self)

    def to_chat_payload(self) -> Dict[str, Any]:
        """
        Body for the chat route: the reply text plus the data the client
        renders as lot cards.
        """
        if self.location is not None:
            data: Dict[str, Any] = {"building": self.location,
                                    "closestLots": list(self.results)}
        else:
            data = {"lots": list(self.results)}
        return {
            "success": True,
            "response": self.answer,
            "data": data,
            "queryType": self.query_type,
        }

    def __repr__(self) -> str:
        return (
            f"QueryResult(query={self.query!r}, "
            f"handler={self.handler_used!r}, "
            f"query_type={self.query_type!r}, success={self.success}, "
            f"results={len(self.results)} items)"
        )
