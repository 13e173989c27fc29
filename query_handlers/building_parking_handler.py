#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Handler for "parking near <building>" messages.
"""

import re
from typing import Optional

from config import BUILDING_PARKING_LIMIT, EXAMPLE_BUILDINGS
from query_context import QueryContext
from query_result import QueryResult
from query_types import QueryType
from recommendation import ParkingRecommender

from .base_handler import PatternBasedHandler
from .reply_phraser import ReplyPhraser, phrase_or_template


class BuildingParkingHandler(PatternBasedHandler):
    """
    Finds the lots closest to a building the user names.

    Unresolvable buildings produce a clarification reply, not an error.
    """

    def __init__(
        self,
        recommender: Optional[ParkingRecommender] = None,
        phraser: Optional[ReplyPhraser] = None,
        limit: int = BUILDING_PARKING_LIMIT,
    ):
        super().__init__(recommender, phraser, limit)
        self.query_type = QueryType.BUILDING_PARKING
        self.priority = 1

        self.patterns = [
            re.compile(r"\bpark(?:ing)?\b.*\b(?:near|close to|next to|by)\b"),
            re.compile(r"\b(?:near|close to|next to)\b.*\bpark(?:ing)?\b"),
            re.compile(r"\bpark(?:ing)?\s+(?:for|at)\b"),
            re.compile(r"\b(?:going to|headed to|visiting)\b"),
            re.compile(r"\bwhere\s+(?:can|should|do)\s+i\s+park\b"),
        ]

    def handle(self, context: QueryContext) -> QueryResult:
        self._log_handling(context)

        recommendation = self.recommender.recommend(
            context.query, context.facilities, self._limit_for(context))

        if recommendation is None:
            return self._result(context, self._clarification(), success=False)

        answer, used_ai = phrase_or_template(
            self.phraser, context.query, recommendation)

        result = self._result(
            context,
            answer,
            results=[r.to_dict() for r in recommendation.ranked],
            success=bool(recommendation.ranked),
            used_ai=used_ai,
        )
        result.add_metadata("location", recommendation.location.to_dict())
        return result

    @staticmethod
    def _clarification() -> str:
        examples = "\n".join(f"• {name}" for name in EXAMPLE_BUILDINGS)
        return (
            "I'd be happy to help you find parking near a specific building! "
            "Could you tell me which building you're visiting? For example:\n\n"
            f"{examples}\n\n"
            'Just say something like "I need parking near the library" and '
            "I'll find the closest spots!"
        )
