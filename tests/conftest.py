#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared fixtures: a small campus registry and helpers that place lots at
exact distances due north of a point.
"""

import math

import pytest

from config import EARTH_RADIUS_METERS
from location import LocationRegistry

# Meters per degree of latitude on the Haversine sphere
METERS_PER_DEGREE = EARTH_RADIUS_METERS * math.pi / 180

ORIGIN = (40.0, -73.0)


def north_of(point, meters):
    """(lat, lng) exactly *meters* north of *point* along its meridian."""
    lat, lng = point
    return (lat + meters / METERS_PER_DEGREE, lng)


def make_lot(lot_id, meters, origin=ORIGIN, **extra):
    lat, lng = north_of(origin, meters)
    lot = {
        "_id": lot_id,
        "name": f"Lot {lot_id}",
        "location": {"latitude": lat, "longitude": lng},
    }
    lot.update(extra)
    return lot


@pytest.fixture
def small_registry():
    return LocationRegistry.from_records({
        "library": {
            "name": "Main Library",
            "coordinates": {"latitude": ORIGIN[0], "longitude": ORIGIN[1]},
            "aliases": ["main library", "melville library"],
        },
        "computer science": {
            "name": "Computer Science Building",
            "coordinates": {"latitude": 40.01, "longitude": -73.0},
            "aliases": ["cs building", "comp sci"],
        },
    })


@pytest.fixture
def lots():
    return [
        make_lot("far", 400, availableSpaces=10, totalSpaces=50, hourlyRate=2),
        make_lot("near", 50, availableSpaces=3, totalSpaces=20, hourlyRate=4,
                 permitTypes=["student", "visitor"]),
        make_lot("mid", 100, availableSpaces=0, totalSpaces=40),
    ]
