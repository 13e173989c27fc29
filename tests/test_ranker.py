#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the proximity ranker and facility coordinate handling.
"""

import logging

import pytest

from proximity import (
    Coordinates,
    FacilityRecord,
    coordinates_of,
    facility_field,
    rank_by_proximity,
    rank_within_radius,
    to_coordinates,
)
from conftest import ORIGIN, make_lot, north_of


def _ids(ranked):
    return [facility_field(r.facility, "id") for r in ranked]


class TestRankByProximity:

    def test_sorted_nearest_first(self, lots):
        ranked = rank_by_proximity(ORIGIN, lots)
        assert _ids(ranked) == ["near", "mid", "far"]
        distances = [r.distance_meters for r in ranked]
        assert distances == sorted(distances)

    def test_limit_truncates(self, lots):
        ranked = rank_by_proximity(ORIGIN, lots, limit=2)
        assert _ids(ranked) == ["near", "mid"]

    def test_limit_larger_than_input(self, lots):
        assert len(rank_by_proximity(ORIGIN, lots, limit=10)) == 3

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_is_empty(self, lots, limit):
        assert rank_by_proximity(ORIGIN, lots, limit=limit) == ()

    def test_empty_input(self):
        assert rank_by_proximity(ORIGIN, []) == ()
        assert rank_by_proximity(ORIGIN, None) == ()

    def test_annotations(self, lots):
        ranked = rank_by_proximity(ORIGIN, lots)
        by_id = dict(zip(_ids(ranked), ranked))
        assert by_id["near"].distance_meters == pytest.approx(50, abs=1e-6)
        assert by_id["near"].walking_minutes == 1
        assert by_id["mid"].walking_minutes == 2

    def test_passthrough_fields_untouched(self, lots):
        ranked = rank_by_proximity(ORIGIN, lots, limit=1)
        assert ranked[0].facility is lots[1]
        data = ranked[0].to_dict()
        assert data["permitTypes"] == ["student", "visitor"]
        assert data["distanceFromBuilding"] == pytest.approx(50, abs=1e-6)
        assert data["walkingTimeMinutes"] == 1

    def test_ties_keep_input_order(self):
        twins = [make_lot("first", 75), make_lot("second", 75), make_lot("close", 10)]
        assert _ids(rank_by_proximity(ORIGIN, twins)) == ["close", "first", "second"]

    def test_skips_unusable_coordinates(self, lots, caplog):
        broken = [
            {"_id": "none", "name": "No location"},
            {"_id": "text", "location": {"latitude": "north", "longitude": -73.0}},
            {"_id": "nan", "location": {"latitude": float("nan"), "longitude": -73.0}},
            {"_id": "flag", "location": {"latitude": True, "longitude": False}},
        ]
        caplog.set_level(logging.DEBUG, logger="proximity.ranker")
        ranked = rank_by_proximity(ORIGIN, broken + lots)
        assert _ids(ranked) == ["near", "mid", "far"]
        assert "no usable coordinates" in caplog.text

    def test_zero_coordinates_are_valid(self):
        equator = {"_id": "eq", "location": {"latitude": 0, "longitude": 0}}
        ranked = rank_by_proximity((0.0, 0.0), [equator])
        assert _ids(ranked) == ["eq"]
        assert ranked[0].distance_meters == 0

    def test_accepts_facility_records(self):
        records = [
            FacilityRecord("b", "Lot B", Coordinates(*north_of(ORIGIN, 300))),
            FacilityRecord("a", "Lot A", Coordinates(*north_of(ORIGIN, 30))),
            FacilityRecord("x", "Unmapped"),
        ]
        ranked = rank_by_proximity(Coordinates(*ORIGIN), records)
        assert _ids(ranked) == ["a", "b"]
        assert ranked[0].name == "Lot A"
        assert ranked[0].to_dict()["id"] == "a"

    def test_alternative_coordinate_shapes(self):
        shapes = [
            {"id": "pair", "coordinates": list(north_of(ORIGIN, 20))},
            {"id": "flat", "lat": north_of(ORIGIN, 40)[0], "lng": ORIGIN[1]},
            {"id": "short", "location": {"lat": north_of(ORIGIN, 60)[0], "lng": ORIGIN[1]}},
        ]
        assert _ids(rank_by_proximity(ORIGIN, shapes)) == ["pair", "flat", "short"]


class TestRankWithinRadius:

    def test_filters_by_radius(self, lots):
        ranked = rank_within_radius(ORIGIN, lots, radius_meters=150)
        assert _ids(ranked) == ["near", "mid"]

    def test_radius_and_limit(self, lots):
        ranked = rank_within_radius(ORIGIN, lots, radius_meters=1000, limit=1)
        assert _ids(ranked) == ["near"]

    def test_nothing_in_range(self, lots):
        assert rank_within_radius(ORIGIN, lots, radius_meters=10) == ()


class TestCoordinateHelpers:

    @pytest.mark.parametrize("value,expected", [
        ((40.0, -73.0), Coordinates(40.0, -73.0)),
        ({"latitude": "40.5", "longitude": "-73"}, Coordinates(40.5, -73.0)),
        ({"lat": 1, "lon": 2}, Coordinates(1.0, 2.0)),
        ((1, 2, 3), None),
        ("40,-73", None),
        ({"latitude": None, "longitude": 2}, None),
        ({"latitude": float("inf"), "longitude": 2}, None),
    ])
    def test_to_coordinates(self, value, expected):
        assert to_coordinates(value) == expected

    def test_location_takes_precedence(self):
        lot = {"location": {"latitude": 1, "longitude": 2},
               "coordinates": [3, 4]}
        assert coordinates_of(lot) == Coordinates(1.0, 2.0)

    def test_non_mapping_facility(self):
        assert coordinates_of("lot") is None

    def test_id_aliasing(self):
        assert facility_field({"_id": "abc"}, "id") == "abc"
        assert facility_field({"id": "abc"}, "_id") == "abc"
        assert facility_field({"name": "Lot"}, "id", "n/a") == "n/a"
