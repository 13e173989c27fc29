#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constants for the campus parking locator.
"""

from __future__ import annotations

import os

# ===========================================================================
# GEODESY CONFIGURATION
# ===========================================================================
EARTH_RADIUS_METERS = 6_371_000
KILOMETRE_METERS = 1000
MILE_METERS = 1609.34

# ===========================================================================
# RANKING CONFIGURATION
# ===========================================================================
WALKING_SPEED_METERS_PER_MINUTE = 80
CHAT_RECOMMENDATION_LIMIT = 3
BUILDING_PARKING_LIMIT = 5
MAP_SEARCH_RADIUS_METERS = MILE_METERS

# ===========================================================================
# CHAT / AI CONFIGURATION
# ===========================================================================
ANSWER_MODEL = os.getenv("ANSWER_MODEL", "gpt-4o-mini")
ANSWER_MAX_TOKENS = 400
ANSWER_TEMPERATURE = 0.4
OPENAI_TIMEOUT_DEFAULT_S = 30.0
EXAMPLE_BUILDINGS = [
    "Library",
    "Student Union",
    "Computer Science Building",
    "Engineering Building",
    "Recreation Center",
    "Hospital",
]

# ===========================================================================
# LOGGING CONFIGURATION
# ===========================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


__all__ = [
    "EARTH_RADIUS_METERS",
    "KILOMETRE_METERS",
    "MILE_METERS",
    "WALKING_SPEED_METERS_PER_MINUTE",
    "CHAT_RECOMMENDATION_LIMIT",
    "BUILDING_PARKING_LIMIT",
    "MAP_SEARCH_RADIUS_METERS",
    "ANSWER_MODEL",
    "ANSWER_MAX_TOKENS",
    "ANSWER_TEMPERATURE",
    "OPENAI_TIMEOUT_DEFAULT_S",
    "EXAMPLE_BUILDINGS",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
