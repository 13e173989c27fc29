"""
Proximity package exports.
"""

from .distance import distance_meters, format_distance, walking_minutes
from .facility import (
    Coordinates,
    FacilityRecord,
    RankedFacility,
    coordinates_of,
    facility_field,
    facility_to_dict,
    to_coordinates,
)
from .ranker import rank_by_proximity, rank_within_radius

__all__ = [
    "distance_meters",
    "format_distance",
    "walking_minutes",
    "Coordinates",
    "FacilityRecord",
    "RankedFacility",
    "coordinates_of",
    "facility_field",
    "facility_to_dict",
    "to_coordinates",
    "rank_by_proximity",
    "rank_within_radius",
]
