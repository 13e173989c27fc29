#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Recommendation - nearest-parking answers for a location mention or a point.

ParkingRecommender is the entry point the chat handler and the map search
flow depend on. It wires together:
    • MentionExtractor / LocationResolver  (text -> LocationEntry)
    • rank_by_proximity / rank_within_radius (LocationEntry -> ranked lots)

Facility lists are supplied by the caller on every request; nothing is
fetched, stored or cached here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
from typing import Any, Optional

from config import CHAT_RECOMMENDATION_LIMIT, MAP_SEARCH_RADIUS_METERS
from emojis import EMOJI_CAUTION, EMOJI_PARKING
from location import (
    LocationEntry,
    LocationRegistry,
    LocationResolver,
    MentionExtractor,
    default_registry,
)
from proximity import (
    RankedFacility,
    rank_by_proximity,
    rank_within_radius,
)
from proximity.facility import CoordinateLike, Facility


@dataclass(frozen=True)
class Recommendation:
    """
    Ranked facilities relative to one resolved location.

    Callers report the list as "ranked relative to <location.display_name>".
    """
    location: LocationEntry
    ranked: tuple[RankedFacility, ...]

    @property
    def closest(self) -> Optional[RankedFacility]:
        return self.ranked[0] if self.ranked else None

    def to_dict(self) -> dict[str, Any]:
        """Transport shape: {"building": ..., "closestLots": [...]}."""
        return {
            "building": self.location.to_dict(),
            "closestLots": [r.to_dict() for r in self.ranked],
        }

    def __repr__(self) -> str:
        return (
            f"Recommendation(location={self.location.key!r}, "
            f"ranked={len(self.ranked)} facilities)"
        )


class ParkingRecommender:
    """Resolve a location, then rank the caller's facilities around it."""

    def __init__(
        self,
        registry: Optional[LocationRegistry] = None,
        map_radius_meters: Optional[float] = MAP_SEARCH_RADIUS_METERS,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.map_radius_meters = map_radius_meters
        self.resolver = LocationResolver(self.registry)
        self.extractor = MentionExtractor(self.resolver)
        self.logger = logging.getLogger(self.__class__.__name__)

    def locate(self, mention_text: Optional[str]) -> Optional[LocationEntry]:
        """Extract a location from a sentence, or resolve the text directly."""
        entry = self.extractor.extract_location(mention_text)
        if entry is None:
            entry = self.resolver.resolve(mention_text)
        return entry

    def recommend(
        self,
        mention_text: Optional[str],
        facilities: Iterable[Facility],
        limit: Optional[int] = CHAT_RECOMMENDATION_LIMIT,
    ) -> Optional[Recommendation]:
        """
        Rank facilities around the location mentioned in *mention_text*.

        Args:
            mention_text: Chat message or location name
            facilities: Facility records or lot mappings
            limit: Maximum facilities to return (None for all)

        Returns:
            Recommendation, or None when no location could be resolved
        """
        location = self.locate(mention_text)
        if location is None:
            self.logger.info("%s No location resolved for %r",
                             EMOJI_CAUTION, (mention_text or "")[:80])
            return None

        ranked = rank_by_proximity(location.coordinates, facilities, limit)
        self.logger.info("%s %d facilities ranked near %s",
                         EMOJI_PARKING, len(ranked), location.display_name)
        return Recommendation(location=location, ranked=ranked)

    def recommend_near_point(
        self,
        coordinates: CoordinateLike,
        facilities: Iterable[Facility],
        limit: Optional[int] = None,
        radius_meters: Optional[float] = None,
    ) -> tuple[RankedFacility, ...]:
        """
        Map/search flow: rank facilities around a selected point.

        Only facilities inside *radius_meters* are kept; when it is None the
        recommender's map_radius_meters applies, and a recommender built
        with map_radius_meters=None ranks every facility.
        """
        if radius_meters is None:
            radius_meters = self.map_radius_meters
        if radius_meters is None:
            return rank_by_proximity(coordinates, facilities, limit)
        return rank_within_radius(coordinates, facilities, radius_meters, limit)
