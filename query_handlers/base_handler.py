#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base classes for the parking chat handlers.

Handlers form a chain of responsibility: ParkingAssistant asks each one, in
priority order, whether it accepts the message and lets the first taker
answer. Both concrete handlers share a ParkingRecommender, an optional
reply phraser and a default lot limit, so those live here.
"""
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from query_context import QueryContext
from query_result import QueryResult
from recommendation import ParkingRecommender

from .reply_phraser import ReplyPhraser


class BaseQueryHandler(ABC):
    """Abstract chat handler. Lower priority values are asked first."""

    def __init__(
        self,
        recommender: Optional[ParkingRecommender] = None,
        phraser: Optional[ReplyPhraser] = None,
        limit: Optional[int] = None,
    ):
        self.query_type = None
        self.priority = 0
        self.recommender = recommender or ParkingRecommender()
        self.phraser = phraser
        self.limit = limit
        self.logger = logging.getLogger(self.__class__.__name__)

    def _log_handling(self, context: QueryContext) -> None:
        self.logger.info(
            "Handling message: '%s...' (type: %s, lots: %d)",
            context.query[:50],
            self.query_type.value if self.query_type else "unknown",
            len(context.facilities),
        )

    def _limit_for(self, context: QueryContext) -> Optional[int]:
        """Per-message limit wins over the handler default."""
        return context.limit if context.limit is not None else self.limit

    def _result(self, context: QueryContext, answer: str, **fields: Any) -> QueryResult:
        """QueryResult stamped with this handler's name, type and metadata."""
        return QueryResult(
            query=context.query,
            answer=answer,
            handler_used=self.__class__.__name__,
            query_type=self.query_type.value if self.query_type else None,
            metadata=self.get_metadata(context),
            **fields,
        )

    @abstractmethod
    def can_handle(self, context: QueryContext) -> bool:
        """
        Decide whether this handler should answer the message.

        Args:
            context: Query context for the message

        Returns:
            True to claim the message
        """

    @abstractmethod
    def handle(self, context: QueryContext) -> QueryResult:
        """
        Answer the message.

        Args:
            context: Query context carrying the caller's active lots

        Returns:
            QueryResult with the reply and any ranked lots
        """

    def get_metadata(self, context: QueryContext) -> Dict[str, Any]:
        return {}


class PatternBasedHandler(BaseQueryHandler):
    """
    Handler that claims a message when one of its regexes matches.

    Subclasses fill self.patterns with compiled, lowercase regexes.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.patterns: List[re.Pattern] = []

    def can_handle(self, context: QueryContext) -> bool:
        message = context.query.lower().strip()
        pattern = next((p for p in self.patterns if p.search(message)), None)
        if pattern is None:
            return False
        context.add_to_cache("matched_pattern", pattern)
        return True

    def get_metadata(self, context: QueryContext) -> Dict[str, Any]:
        matched = context.get_from_cache("matched_pattern")
        return {"matched_pattern": matched.pattern} if matched else {}
