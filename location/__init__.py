"""
Location package exports.
"""

from .campus_locations import CAMPUS_LOCATIONS
from .extractor import MENTION_PATTERNS, MentionExtractor
from .normaliser import normalise_aliases, normalise_location_text
from .registry import LocationEntry, LocationRegistry, default_registry
from .resolver import LocationResolver

__all__ = [
    "CAMPUS_LOCATIONS",
    "MENTION_PATTERNS",
    "MentionExtractor",
    "normalise_aliases",
    "normalise_location_text",
    "LocationEntry",
    "LocationRegistry",
    "default_registry",
    "LocationResolver",
]
