#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rank parking lots from a CSV export by distance to a building or a point.

The CSV needs id, name, latitude and longitude columns; any other columns
(availableSpaces, hourlyRate, permitTypes...) are carried through.

Usage:
  python cli/rank_lots.py --lots lots.csv --near "computer science"
  python cli/rank_lots.py --lots lots.csv --lat 40.9142 --lng -73.1235 --radius 800 --json
"""
from __future__ import annotations

import argparse
import csv
import json
from pathlib import Path
from typing import Any, Optional, Sequence

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import AssistantConfig, configure_logging
from emojis import EMOJI_CROSS, EMOJI_PIN
from location import LocationRegistry
from parking_exceptions import FacilityDataError, ParkingLocatorError
from proximity import (
    Coordinates,
    FacilityRecord,
    RankedFacility,
    format_distance,
    to_coordinates,
)
from recommendation import ParkingRecommender

_NUMERIC_FIELDS = ("availableSpaces", "totalSpaces", "hourlyRate")
_CORE_FIELDS = ("id", "name", "latitude", "longitude")


def _to_number(raw: str) -> Any:
    try:
        value = float(raw)
    except ValueError:
        return raw
    return int(value) if value.is_integer() else value


def load_lots_csv(path: Path) -> list[FacilityRecord]:
    """Read lots from CSV. Rows without usable coordinates keep coordinates=None."""
    lots: list[FacilityRecord] = []
    try:
        with path.open("r", newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            for row in reader:
                lot_id = (row.get("id") or "").strip()
                if not lot_id:
                    continue
                extra: dict[str, Any] = {}
                for key, raw in row.items():
                    if key is None or key in _CORE_FIELDS or raw is None:
                        continue
                    raw = raw.strip()
                    if not raw:
                        continue
                    if key in _NUMERIC_FIELDS:
                        extra[key] = _to_number(raw)
                    elif key == "permitTypes":
                        extra[key] = [p.strip() for p in raw.split(";") if p.strip()]
                    else:
                        extra[key] = raw
                lots.append(FacilityRecord(
                    facility_id=lot_id,
                    name=(row.get("name") or "").strip(),
                    coordinates=to_coordinates(
                        (row.get("latitude"), row.get("longitude"))),
                    extra=extra,
                ))
    except OSError as exc:
        raise FacilityDataError(f"Cannot read lots file {path}: {exc}") from exc
    return lots


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank parking lots by distance.")
    parser.add_argument("--lots", required=True, help="Path to lots CSV.")
    parser.add_argument("--near", help="Building name or sentence mentioning one.")
    parser.add_argument("--lat", type=float, help="Latitude of the search point.")
    parser.add_argument("--lng", type=float, help="Longitude of the search point.")
    parser.add_argument("--limit", type=int, default=None, help="Maximum lots to print.")
    parser.add_argument(
        "--radius", type=float, default=None,
        help="Only lots within this many meters (--lat/--lng default: MAP_SEARCH_RADIUS_METERS).")
    parser.add_argument("--registry", help="Optional registry JSON file.")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    args = parser.parse_args(argv)

    has_point = args.lat is not None or args.lng is not None
    if bool(args.near) == has_point:
        parser.error("give either --near or both --lat and --lng")
    if has_point and (args.lat is None or args.lng is None):
        parser.error("--lat and --lng must be given together")
    return args


def _print_table(ranked: Sequence[RankedFacility]) -> None:
    print("rank\tid\tname\tdistance\twalk_min")
    for index, item in enumerate(ranked, 1):
        lot = item.facility
        print(f"{index}\t{lot.facility_id}\t{item.name}\t"
              f"{format_distance(item.distance_meters)}\t{item.walking_minutes}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        lots = load_lots_csv(Path(args.lots))
        map_radius = AssistantConfig.from_env().map_radius_meters
        registry = LocationRegistry.from_json(args.registry) if args.registry else None
    except ParkingLocatorError as exc:
        print(f"{EMOJI_CROSS} {exc}", file=sys.stderr)
        return 1

    recommender = ParkingRecommender(registry, map_radius_meters=None)
    radius = args.radius

    if args.near:
        location = recommender.locate(args.near)
        if location is None:
            print(f"{EMOJI_CROSS} No campus location matches {args.near!r}",
                  file=sys.stderr)
            return 2
        origin = location.coordinates
        label = location.display_name
    else:
        origin = Coordinates(args.lat, args.lng)
        label = f"{args.lat:.5f}, {args.lng:.5f}"
        if radius is None:
            radius = map_radius

    ranked = recommender.recommend_near_point(
        origin, lots, limit=args.limit, radius_meters=radius)

    if args.json:
        print(json.dumps({
            "origin": {"label": label, **origin.to_dict()},
            "closestLots": [r.to_dict() for r in ranked],
        }, indent=2))
    else:
        print(f"{EMOJI_PIN} Lots ranked from {label}\n")
        _print_table(ranked)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
