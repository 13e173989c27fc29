#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Handler for general "find me parking" messages.
"""

import re
from typing import Any, List, Optional

from config import CHAT_RECOMMENDATION_LIMIT
from emojis import EMOJI_CAR, EMOJI_MONEY, EMOJI_PARKING
from proximity import facility_field, facility_to_dict
from query_context import QueryContext
from query_result import QueryResult
from query_types import QueryType
from recommendation import ParkingRecommender

from .base_handler import PatternBasedHandler
from .reply_phraser import ReplyPhraser, phrase_or_template


def _has_space(lot: Any) -> bool:
    spaces = facility_field(lot, "availableSpaces")
    return isinstance(spaces, (int, float)) and spaces > 0


class FindParkingHandler(PatternBasedHandler):
    """
    Lists lots that currently have free spaces.

    When the message also names a building, the available lots are ranked
    around it and the closest few are returned instead.
    """

    def __init__(
        self,
        recommender: Optional[ParkingRecommender] = None,
        phraser: Optional[ReplyPhraser] = None,
        limit: int = CHAT_RECOMMENDATION_LIMIT,
    ):
        super().__init__(recommender, phraser, limit)
        self.query_type = QueryType.FIND_PARKING
        self.priority = 2

        self.patterns = [
            re.compile(r"\bpark(?:ing)?\b"),
            re.compile(r"\b(?:lots?|spaces?|spots?)\b.*\b(?:free|open|available)\b"),
            re.compile(r"\b(?:free|open|available)\b.*\b(?:lots?|spaces?|spots?)\b"),
        ]

    def handle(self, context: QueryContext) -> QueryResult:
        self._log_handling(context)

        limit = self._limit_for(context)
        available = [lot for lot in context.facilities if _has_space(lot)]

        recommendation = self.recommender.recommend(
            context.query, available, limit)
        if recommendation is not None and recommendation.ranked:
            answer, used_ai = phrase_or_template(
                self.phraser, context.query, recommendation)
            result = self._result(
                context,
                answer,
                results=[r.to_dict() for r in recommendation.ranked],
                used_ai=used_ai,
            )
            result.add_metadata("location", recommendation.location.to_dict())
            return result

        shown = available if limit is None else available[:max(limit, 0)]
        return self._result(
            context,
            self._availability_reply(available, shown, context.user_name),
            results=[facility_to_dict(lot) for lot in shown],
            success=bool(available),
        )

    @staticmethod
    def _availability_reply(available: List[Any], shown: List[Any],
                            user_name: Optional[str]) -> str:
        name = f" {user_name}" if user_name else ""
        if not available:
            return (f"Sorry{name}, all lots are currently full. Would you like "
                    "me to check for upcoming availability?")

        lines = [f"Great news{name}! I found {len(available)} lots with "
                 "available spaces:", ""]
        for lot in shown:
            lines.append(f"{EMOJI_PARKING} **{facility_field(lot, 'name', '')}**")
            total = facility_field(lot, "totalSpaces")
            spaces = facility_field(lot, "availableSpaces")
            lines.append(f"   {EMOJI_CAR} {spaces}/{total} spaces available"
                         if total is not None
                         else f"   {EMOJI_CAR} {spaces} spaces available")
            rate = facility_field(lot, "hourlyRate")
            if rate is not None:
                lines.append(f"   {EMOJI_MONEY} ${rate}/hour")
            lines.append("")
        lines.append("Would you like me to help you make a reservation?")
        return "\n".join(lines)
