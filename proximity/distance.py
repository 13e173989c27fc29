#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Great-circle distance helpers.

Distances are straight-line (Haversine) on a sphere; no road or footpath
network is consulted.
"""

from __future__ import annotations

from math import atan2, ceil, cos, radians, sin, sqrt

from config import (
    EARTH_RADIUS_METERS,
    KILOMETRE_METERS,
    WALKING_SPEED_METERS_PER_MINUTE,
)
from .facility import CoordinateLike, Coordinates, to_coordinates


def _lat_lng(point: CoordinateLike) -> tuple[float, float]:
    coords = to_coordinates(point)
    if coords is None:
        raise TypeError(f"Unusable coordinates: {point!r}")
    return coords.latitude, coords.longitude


def distance_meters(a: CoordinateLike, b: CoordinateLike) -> float:
    """
    Haversine distance in meters between two latitude/longitude points.

    Args:
        a: Coordinates, (lat, lng) pair or latitude/longitude mapping, degrees
        b: Same shapes as *a*

    Returns:
        Distance in meters (>= 0). Identical points yield 0.

    Raises:
        TypeError: If either point has no usable latitude/longitude
    """
    lat1, lng1 = _lat_lng(a)
    lat2, lng2 = _lat_lng(b)

    phi1 = radians(lat1)
    phi2 = radians(lat2)
    d_phi = radians(lat2 - lat1)
    d_lambda = radians(lng2 - lng1)

    h = sin(d_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(d_lambda / 2) ** 2
    # Rounding can push h a hair past 1 for antipodal points
    h = min(1.0, h)
    return 2 * EARTH_RADIUS_METERS * atan2(sqrt(h), sqrt(1 - h))


def walking_minutes(meters: float) -> int:
    """Whole minutes to walk *meters* at the fixed campus walking pace."""
    return ceil(meters / WALKING_SPEED_METERS_PER_MINUTE)


def format_distance(meters: float) -> str:
    """Format a distance for chat replies: '240m' or '1.3km'."""
    if meters < KILOMETRE_METERS:
        return f"{round(meters)}m"
    return f"{meters / KILOMETRE_METERS:.1f}km"
