#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
List the campus locations the assistant can resolve, with their aliases.

Usage:
  python cli/list_locations.py
  python cli/list_locations.py --json locations.json
  python cli/list_locations.py --test
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import configure_logging
from emojis import EMOJI_BUILDING, EMOJI_CHART, EMOJI_CROSS, EMOJI_TEST, EMOJI_TICK
from location import LocationRegistry, LocationResolver, MentionExtractor, default_registry
from parking_exceptions import RegistryError

SAMPLE_MESSAGES = [
    "I need parking near the library",
    "Where can I park close to cs building?",
    "parking for roth quad",
    "I'm going to the hospital",
    "best parking for rec center",
    "parking near the student union",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List resolvable campus locations.")
    parser.add_argument("--json", help="Optional registry JSON file to load instead of the built-in table.")
    parser.add_argument("--test", action="store_true", help="Run sample messages through the extractor.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    return parser.parse_args(argv)


def _print_locations(registry: LocationRegistry) -> None:
    print(f"{EMOJI_BUILDING} Campus locations\n")
    for entry in registry:
        coords = entry.coordinates
        print(f"{entry.key}: {entry.display_name} "
              f"({coords.latitude:.4f}, {coords.longitude:.4f})")
        if entry.aliases:
            print(f"   aliases: {', '.join(entry.aliases)}")
    print(f"\n{EMOJI_CHART} Total: {len(registry)} locations")


def _run_samples(registry: LocationRegistry) -> None:
    extractor = MentionExtractor(LocationResolver(registry))
    print(f"\n{EMOJI_TEST} Testing location extraction:\n")
    for message in SAMPLE_MESSAGES:
        entry = extractor.extract_location(message)
        if entry is None:
            print(f"{EMOJI_CROSS} \"{message}\" -> not found")
        else:
            print(f"{EMOJI_TICK} \"{message}\" -> {entry.key} ({entry.display_name})")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        registry = (LocationRegistry.from_json(args.json)
                    if args.json else default_registry())
    except RegistryError as exc:
        print(f"{EMOJI_CROSS} {exc}", file=sys.stderr)
        return 1

    _print_locations(registry)
    if args.test:
        _run_samples(registry)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
