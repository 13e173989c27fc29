#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the command line tools.
"""

import json

import pytest

from cli import list_locations, rank_lots
from parking_exceptions import FacilityDataError
from proximity import Coordinates

# Computer Science Building in the curated table
CS = (40.9142, -73.1235)

LOTS_CSV = """id,name,latitude,longitude,availableSpaces,hourlyRate,permitTypes
far,Far Lot,40.9200,-73.1235,12,2.5,student;visitor
near,Near Lot,40.9145,-73.1235,0,3,faculty
blank,No Coordinates,,,5,,
"""


@pytest.fixture
def lots_csv(tmp_path):
    path = tmp_path / "lots.csv"
    path.write_text(LOTS_CSV, encoding="utf-8")
    return path


class TestLoadLotsCsv:

    def test_reads_rows(self, lots_csv):
        lots = rank_lots.load_lots_csv(lots_csv)
        assert [lot.facility_id for lot in lots] == ["far", "near", "blank"]

        far = lots[0]
        assert far.name == "Far Lot"
        assert far.coordinates == Coordinates(40.92, -73.1235)
        assert far.get("availableSpaces") == 12
        assert far.get("hourlyRate") == 2.5
        assert far.get("permitTypes") == ["student", "visitor"]

    def test_missing_coordinates_kept_as_none(self, lots_csv):
        blank = rank_lots.load_lots_csv(lots_csv)[2]
        assert blank.coordinates is None
        assert "hourlyRate" not in blank.extra

    def test_missing_file(self, tmp_path):
        with pytest.raises(FacilityDataError):
            rank_lots.load_lots_csv(tmp_path / "missing.csv")


class TestRankLotsMain:

    def test_near_building_table(self, lots_csv, capsys):
        assert rank_lots.main(["--lots", str(lots_csv), "--near", "computer science"]) == 0
        out = capsys.readouterr().out
        assert "Computer Science Building" in out
        assert out.index("Near Lot") < out.index("Far Lot")
        assert "No Coordinates" not in out

    def test_point_json_with_radius(self, lots_csv, capsys):
        argv = ["--lots", str(lots_csv), "--lat", str(CS[0]), "--lng", str(CS[1]),
                "--radius", "100", "--json"]
        assert rank_lots.main(argv) == 0
        data = json.loads(capsys.readouterr().out)
        assert [lot["id"] for lot in data["closestLots"]] == ["near"]
        assert data["origin"]["latitude"] == CS[0]

    def test_point_search_defaults_to_map_radius(self, tmp_path, capsys, monkeypatch):
        monkeypatch.delenv("MAP_SEARCH_RADIUS_METERS", raising=False)
        path = tmp_path / "lots.csv"
        path.write_text(LOTS_CSV + "remote,Remote Lot,40.9442,-73.1235,,,\n",
                        encoding="utf-8")
        argv = ["--lots", str(path), "--lat", str(CS[0]), "--lng", str(CS[1]), "--json"]
        assert rank_lots.main(argv) == 0
        data = json.loads(capsys.readouterr().out)
        assert [lot["id"] for lot in data["closestLots"]] == ["near", "far"]

    def test_building_search_has_no_default_radius(self, tmp_path, capsys, monkeypatch):
        monkeypatch.delenv("MAP_SEARCH_RADIUS_METERS", raising=False)
        path = tmp_path / "lots.csv"
        path.write_text(LOTS_CSV + "remote,Remote Lot,40.9442,-73.1235,,,\n",
                        encoding="utf-8")
        argv = ["--lots", str(path), "--near", "computer science", "--json"]
        assert rank_lots.main(argv) == 0
        data = json.loads(capsys.readouterr().out)
        assert [lot["id"] for lot in data["closestLots"]][-1] == "remote"

    def test_unknown_building(self, lots_csv, capsys):
        assert rank_lots.main(["--lots", str(lots_csv), "--near", "the moon"]) == 2
        assert "No campus location" in capsys.readouterr().err

    def test_missing_lots_file(self, tmp_path, capsys):
        argv = ["--lots", str(tmp_path / "missing.csv"), "--near", "library"]
        assert rank_lots.main(argv) == 1

    @pytest.mark.parametrize("argv", [
        [],
        ["--near", "library", "--lat", "40.9"],
        ["--lat", "40.9"],
    ])
    def test_requires_one_origin(self, lots_csv, argv):
        with pytest.raises(SystemExit):
            rank_lots.parse_args(["--lots", str(lots_csv)] + argv)


class TestListLocations:

    def test_lists_default_registry(self, capsys):
        assert list_locations.main([]) == 0
        out = capsys.readouterr().out
        assert "library: Frank Melville Jr. Memorial Library" in out
        assert "Total: 49 locations" in out

    def test_sample_extraction(self, capsys):
        assert list_locations.main(["--test"]) == 0
        out = capsys.readouterr().out
        assert "-> library (Frank Melville Jr. Memorial Library)" in out
        assert "not found" not in out

    def test_bad_registry_file(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("[", encoding="utf-8")
        assert list_locations.main(["--json", str(path)]) == 1
