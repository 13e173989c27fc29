#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Facility ranker - the one place where "compute distance, sort, take top-N"
happens. Both the chat recommendation flow and the map search flow call
rank_by_proximity().
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Optional

from .distance import distance_meters, walking_minutes
from .facility import (
    CoordinateLike,
    Facility,
    RankedFacility,
    coordinates_of,
    facility_field,
)

logger = logging.getLogger(__name__)


def rank_by_proximity(
    location: CoordinateLike,
    facilities: Iterable[Facility],
    limit: Optional[int] = None,
) -> tuple[RankedFacility, ...]:
    """
    Rank facilities by straight-line distance from *location*.

    Facilities without usable coordinates are skipped. Equal distances keep
    their input order.

    Args:
        location: Coordinates or (lat, lng) pair of the resolved location
        facilities: Facility records or lot mappings
        limit: Maximum number of results; None keeps every facility

    Returns:
        Tuple of RankedFacility sorted by distance_meters ascending
    """
    if limit is not None and limit <= 0:
        return ()

    ranked: list[RankedFacility] = []
    skipped = 0

    for facility in facilities or ():
        coords = coordinates_of(facility)
        if coords is None:
            skipped += 1
            logger.debug(
                "Skipping facility %r: no usable coordinates",
                facility_field(facility, "id") or facility_field(facility, "name"))
            continue

        meters = distance_meters(location, coords)
        ranked.append(RankedFacility(
            facility=facility,
            distance_meters=meters,
            walking_minutes=walking_minutes(meters),
        ))

    if skipped:
        logger.debug("Ranked %d facilities, skipped %d without coordinates",
                     len(ranked), skipped)

    # list.sort is stable, so ties keep input order
    ranked.sort(key=lambda r: r.distance_meters)

    if limit is not None:
        ranked = ranked[:limit]
    return tuple(ranked)


def rank_within_radius(
    location: CoordinateLike,
    facilities: Iterable[Facility],
    radius_meters: float,
    limit: Optional[int] = None,
) -> tuple[RankedFacility, ...]:
    """Rank facilities and keep those no farther than *radius_meters*."""
    ranked = rank_by_proximity(location, facilities)
    nearby = tuple(r for r in ranked if r.distance_meters <= radius_meters)
    if limit is not None:
        nearby = nearby[:max(limit, 0)]
    return nearby
