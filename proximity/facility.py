#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Facility shapes consumed and produced by the proximity ranker.

Facilities (parking lots) are owned by the caller. The ranker only needs an
identifier and a coordinate pair; every other field is carried through
untouched. Two input shapes are accepted:

    • FacilityRecord - the typed record used inside this repo and the CLIs
    • Mapping        - a lot document as the portal stores it, e.g.
                       {"_id": ..., "name": ..., "location": {"latitude": ..,
                       "longitude": ..}} or {"coordinates": [lat, lng]}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import math
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in degrees (WGS84)."""
    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class FacilityRecord:
    facility_id: str
    name: str = ""
    coordinates: Optional[Coordinates] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Read a passthrough field (capacity, pricing, permits...)."""
        return self.extra.get(key, default)


Facility = Union[FacilityRecord, Mapping[str, Any]]
CoordinateLike = Union[Coordinates, tuple, list, Mapping]


@dataclass(frozen=True)
class RankedFacility:
    """
    One facility annotated with its distance from the resolved location.

    Created per ranking call and discarded once the caller has rendered it.
    """
    facility: Facility
    distance_meters: float
    walking_minutes: int

    @property
    def name(self) -> str:
        return str(facility_field(self.facility, "name", "") or "")

    def to_dict(self) -> dict[str, Any]:
        """Flatten for transport, using the portal's field names."""
        data = facility_to_dict(self.facility)
        data["distanceFromBuilding"] = self.distance_meters
        data["walkingTimeMinutes"] = self.walking_minutes
        return data


# ============================================================================
# COORDINATE EXTRACTION
# ============================================================================


def _as_number(value: Any) -> Optional[float]:
    """Return a finite float for *value*, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def to_coordinates(value: Any) -> Optional[Coordinates]:
    """
    Coerce a coordinate-like value to Coordinates.

    Accepts Coordinates, a (lat, lng) pair, or a mapping with
    latitude/longitude (or lat/lng) keys. Returns None when unusable.
    """
    if isinstance(value, Coordinates):
        return value

    if isinstance(value, Mapping):
        lat = value.get("latitude", value.get("lat"))
        lng = value.get("longitude", value.get("lng", value.get("lon")))
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        lat, lng = value
    else:
        return None

    lat_num = _as_number(lat)
    lng_num = _as_number(lng)
    if lat_num is None or lng_num is None:
        return None
    return Coordinates(lat_num, lng_num)


def coordinates_of(facility: Facility) -> Optional[Coordinates]:
    """Locate the coordinates of a facility in any supported shape."""
    if isinstance(facility, FacilityRecord):
        return to_coordinates(facility.coordinates)

    if not isinstance(facility, Mapping):
        return None

    for key in ("location", "coordinates"):
        if facility.get(key) is not None:
            return to_coordinates(facility[key])

    if "latitude" in facility or "lat" in facility:
        return to_coordinates(facility)

    return None


# ============================================================================
# FIELD ACCESS
# ============================================================================


def facility_field(facility: Facility, key: str, default: Any = None) -> Any:
    if isinstance(facility, FacilityRecord):
        if key == "name":
            return facility.name
        if key in ("id", "_id", "facility_id"):
            return facility.facility_id
        return facility.get(key, default)
    if isinstance(facility, Mapping):
        if key in ("id", "_id") and key not in facility:
            return facility.get("_id" if key == "id" else "id", default)
        return facility.get(key, default)
    return default


def facility_to_dict(facility: Facility) -> dict[str, Any]:
    if isinstance(facility, FacilityRecord):
        data: dict[str, Any] = {
            "id": facility.facility_id,
            "name": facility.name,
            "location": (facility.coordinates.to_dict()
                         if facility.coordinates else None),
        }
        for key, value in facility.extra.items():
            data.setdefault(key, value)
        return data
    return dict(facility)
