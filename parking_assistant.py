#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Parking Assistant - chat orchestration for parking questions.

The caller (chat route) supplies the message and a freshly fetched list of
active lots; the assistant routes the message to the first handler that
accepts it and returns a QueryResult. Lots are never fetched or stored here.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging
import threading
import time

from config import AssistantConfig
from location import LocationRegistry
from parking_exceptions import HandlerError
from proximity import RankedFacility
from query_context import QueryContext
from query_handlers import (
    BuildingParkingHandler,
    FindParkingHandler,
    OpenAIReplyPhraser,
    ReplyPhraser,
)
from query_result import QueryResult
from query_types import QueryType
from recommendation import ParkingRecommender


HELP_REPLY = (
    "I can help you find parking on campus. Try asking \"Where can I park "
    "near the library?\" or \"Are there any open spaces right now?\""
)


class ParkingAssistant:
    """
    Orchestrates the chat lifecycle:
      • Build QueryContext
      • Route to the highest-priority handler that accepts the message
      • Track performance stats
    """

    def __init__(
        self,
        config: Optional[AssistantConfig] = None,
        registry: Optional[LocationRegistry] = None,
        phraser: Optional[ReplyPhraser] = None,
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.config = config or AssistantConfig.from_env()
        self.config.validate()

        if registry is None and self.config.registry_path:
            registry = LocationRegistry.from_json(self.config.registry_path)
        self.recommender = ParkingRecommender(
            registry, map_radius_meters=self.config.map_radius_meters)

        if phraser is None and self.config.use_ai:
            phraser = OpenAIReplyPhraser(self.config)
        self.phraser = phraser

        self.handlers = [
            BuildingParkingHandler(
                self.recommender, phraser, limit=self.config.building_limit),
            FindParkingHandler(
                self.recommender, phraser, limit=self.config.chat_limit),
        ]
        # Lower priority value runs first
        self.handlers.sort(key=lambda h: h.priority)

        self._stats_lock = threading.Lock()
        self.stats = {
            "total_queries": 0,
            "overall_total_ms": 0.0,
            "by_type": {},
        }

    # =========================================================================
    # Main processing pipeline
    # =========================================================================

    def process_query(
        self,
        message: str,
        facilities: Optional[Iterable[Any]] = None,
        **kwargs,
    ) -> QueryResult:
        """
        Main entry point.

        Args:
            message: The user's chat message.
            facilities: Active lots (mappings or FacilityRecord).
            kwargs: Passed to QueryContext (limit, user_name).

        Returns:
            QueryResult
        """
        start_time = time.time()
        context = QueryContext(
            query=message or "", facilities=list(facilities or []), **kwargs)

        result = self._dispatch(context)

        elapsed_ms = (time.time() - start_time) * 1000
        result.processing_time_ms = elapsed_ms
        self._update_stats(result.query_type or "unhandled", elapsed_ms)
        return result

    def _dispatch(self, context: QueryContext) -> QueryResult:
        if context.query.strip():
            for handler in self.handlers:
                if not handler.can_handle(context):
                    continue
                try:
                    return handler.handle(context)
                except HandlerError as e:
                    self.logger.error(
                        "Handler %s failed: %s", handler.__class__.__name__, e,
                        exc_info=True)
                    return QueryResult(
                        query=context.query,
                        answer="Sorry, something went wrong while looking up parking.",
                        handler_used=handler.__class__.__name__,
                        query_type=QueryType.ERROR.value,
                        success=False,
                        metadata={"error": str(e)},
                    )

        return QueryResult(query=context.query, answer=HELP_REPLY, success=False)

    # =========================================================================
    # Statistics
    # =========================================================================

    def _update_stats(self, query_type: str, elapsed_ms: float) -> None:
        with self._stats_lock:
            self.stats["total_queries"] += 1
            self.stats["overall_total_ms"] += elapsed_ms
            self.stats["by_type"][query_type] = (
                self.stats["by_type"].get(query_type, 0) + 1)

    def get_statistics(self) -> Dict[str, Any]:
        with self._stats_lock:
            total = self.stats["total_queries"]
            avg_time = self.stats["overall_total_ms"] / total if total > 0 else 0.0
            return {
                "total_queries": total,
                "avg_time_ms": avg_time,
                "by_type": dict(self.stats["by_type"]),
            }

    def search_near_point(
        self,
        coordinates: Any,
        facilities: Iterable[Any],
        limit: Optional[int] = None,
    ) -> Tuple[RankedFacility, ...]:
        """Map search: lots within the configured radius of a selected point."""
        return self.recommender.recommend_near_point(coordinates, facilities, limit)

    def get_handler_names(self) -> List[str]:
        return [h.__class__.__name__ for h in self.handlers]
