#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reply phrasing: turn structured parking facts into chat text.

The template reply is always available. When AI phrasing is enabled the
facts are sent to the OpenAI chat model, which only rewords them; any model
failure surfaces as ExternalServiceError so the handler can fall back to
the template.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from config import AssistantConfig
from clients import get_oai
from emojis import (
    EMOJI_BULB,
    EMOJI_CAR,
    EMOJI_MONEY,
    EMOJI_PARKING,
    EMOJI_PIN,
    EMOJI_TICKET,
)
from parking_exceptions import ExternalServiceError
from proximity import RankedFacility, facility_field, format_distance
from recommendation import Recommendation

SYSTEM_PROMPT = (
    "You are a friendly campus parking assistant. Rephrase the parking facts "
    "you are given into a short, helpful reply. Never invent lots, distances, "
    "prices or availability that are not in the facts."
)


class ReplyPhraser(Protocol):
    def phrase(self, user_message: str, facts: str) -> str: ...


# ============================================================================
# TEMPLATE FORMATTING
# ============================================================================


def _format_lot(index: int, ranked: RankedFacility) -> list[str]:
    lot = ranked.facility
    lines = [
        f"{index}. {EMOJI_PARKING} **{ranked.name}**",
        f"   {EMOJI_PIN} {format_distance(ranked.distance_meters)} away "
        f"({ranked.walking_minutes} min walk)",
    ]

    available = facility_field(lot, "availableSpaces")
    if isinstance(available, (int, float)):
        status = (f"{available} spaces available" if available > 0
                  else "Currently full")
        lines.append(f"   {EMOJI_CAR} {status}")

    rate = facility_field(lot, "hourlyRate")
    if rate is not None:
        lines.append(f"   {EMOJI_MONEY} ${rate}/hour")

    permits = facility_field(lot, "permitTypes") or []
    if isinstance(permits, str):
        permits = [permits]
    if permits:
        lines.append(f"   {EMOJI_TICKET} Permits: {', '.join(permits)}")

    return lines


def format_recommendation(recommendation: Recommendation) -> str:
    """Deterministic reply listing the closest lots."""
    location = recommendation.location
    closest = recommendation.closest
    if closest is None:
        return (f"I found {location.display_name}, but none of the active lots "
                f"have location data I can measure from right now.")

    lines = [f"Here are the closest parking options to {location.display_name}:", ""]
    for index, ranked in enumerate(recommendation.ranked, 1):
        lines.extend(_format_lot(index, ranked))
        lines.append("")

    lines.append(
        f"{EMOJI_BULB} Tip: The closest option is {closest.name}, just "
        f"{format_distance(closest.distance_meters)} from {location.display_name}!")
    return "\n".join(lines)


def recommendation_facts(recommendation: Recommendation) -> str:
    """Compact fact sheet handed to the AI model."""
    lines = [f"Target building: {recommendation.location.display_name}",
             "Closest parking lots:"]
    for index, ranked in enumerate(recommendation.ranked, 1):
        lot = ranked.facility
        line = (f"{index}. {ranked.name}: {round(ranked.distance_meters)}m away "
                f"({ranked.walking_minutes} min walk)")
        available = facility_field(lot, "availableSpaces")
        total = facility_field(lot, "totalSpaces")
        if available is not None and total is not None:
            line += f", {available}/{total} spaces"
        rate = facility_field(lot, "hourlyRate")
        if rate is not None:
            line += f", ${rate}/hour"
        lines.append(line)
    return "\n".join(lines)


# ============================================================================
# AI PHRASING
# ============================================================================


class OpenAIReplyPhraser:
    """Phrases replies with the OpenAI chat completions API."""

    def __init__(self, config: Optional[AssistantConfig] = None, client: Any = None):
        self.config = config or AssistantConfig.from_env()
        self._client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = get_oai(self.config.openai_api_key or None,
                                   self.config.openai_timeout)
        return self._client

    def phrase(self, user_message: str, facts: str) -> str:
        prompt = (
            f"User message: {user_message}\n\n"
            f"{facts}\n\n"
            "Provide a helpful response highlighting the best options and "
            "walking distances."
        )
        try:
            response = self.client.chat.completions.create(
                model=self.config.answer_model,
                messages=[{"role": "system", "content": SYSTEM_PROMPT},
                          {"role": "user", "content": prompt}],
                max_tokens=self.config.answer_max_tokens,
                temperature=self.config.answer_temperature,
            )
        except Exception as exc:  # pylint: disable=broad-except
            self.logger.warning("AI phrasing failed: %s", exc)
            raise ExternalServiceError(f"AI phrasing failed: {exc}") from exc

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise ExternalServiceError("AI model returned an empty reply")
        return content.strip()


def phrase_or_template(
    phraser: Optional[ReplyPhraser],
    user_message: str,
    recommendation: Recommendation,
) -> tuple[str, bool]:
    """
    Return (answer, used_ai). The template is used when no phraser is set,
    when there is nothing ranked, or when the AI model fails.
    """
    template = format_recommendation(recommendation)
    if phraser is None or not recommendation.ranked:
        return template, False
    try:
        return phraser.phrase(user_message, recommendation_facts(recommendation)), True
    except ExternalServiceError as exc:
        logging.getLogger(__name__).warning(
            "Falling back to template reply: %s", exc)
        return template, False
