#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Query Handlers Package

Each handler:
- Inherits from BaseQueryHandler
- Implements can_handle() to determine if it should process a message
- Implements handle() to process the message and return a QueryResult
- Has a priority (lower number = higher priority)

Available Handlers:
- BuildingParkingHandler: "parking near <building>" (closest lots + walk times)
- FindParkingHandler: general availability, ranked when a building is named
"""

from query_handlers.base_handler import (
    BaseQueryHandler,
    PatternBasedHandler
)

from query_handlers.building_parking_handler import BuildingParkingHandler
from query_handlers.find_parking_handler import FindParkingHandler
from query_handlers.reply_phraser import (
    OpenAIReplyPhraser,
    ReplyPhraser,
    format_recommendation,
    phrase_or_template,
    recommendation_facts,
)


__all__ = [
    'BaseQueryHandler',
    'PatternBasedHandler',
    'BuildingParkingHandler',
    'FindParkingHandler',
    'OpenAIReplyPhraser',
    'ReplyPhraser',
    'format_recommendation',
    'phrase_or_template',
    'recommendation_facts',
]
