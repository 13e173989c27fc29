#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for ParkingRecommender and the reply phrasing helpers.
"""

from types import SimpleNamespace

import pytest

from config import AssistantConfig
from emojis import EMOJI_PARKING
from parking_exceptions import ExternalServiceError
from query_handlers import (
    OpenAIReplyPhraser,
    format_recommendation,
    phrase_or_template,
    recommendation_facts,
)
from recommendation import ParkingRecommender, Recommendation
from conftest import ORIGIN, make_lot


class FakePhraser:
    def __init__(self, reply="AI reply"):
        self.reply = reply
        self.calls = []

    def phrase(self, user_message, facts):
        self.calls.append((user_message, facts))
        return self.reply


class FailingPhraser:
    def phrase(self, user_message, facts):
        raise ExternalServiceError("model unavailable")


def _fake_client(content=None, error=None):
    def create(**kwargs):
        create.kwargs = kwargs
        if error is not None:
            raise error
        message = SimpleNamespace(content=content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    create.kwargs = None
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


class TestParkingRecommender:

    @pytest.fixture(autouse=True)
    def _recommender(self, small_registry):
        self.recommender = ParkingRecommender(small_registry)

    def test_closest_two_lots_near_library(self, lots):
        recommendation = self.recommender.recommend(
            "I need parking near the library", lots, limit=2)

        assert recommendation.location.key == "library"
        assert [r.name for r in recommendation.ranked] == ["Lot near", "Lot mid"]
        assert recommendation.ranked[0].distance_meters == pytest.approx(50, abs=1e-6)
        assert recommendation.ranked[1].distance_meters == pytest.approx(100, abs=1e-6)
        assert [r.walking_minutes for r in recommendation.ranked] == [1, 2]
        assert recommendation.closest is recommendation.ranked[0]

    def test_default_limit_is_three(self, lots):
        extra = lots + [make_lot("extra", 200)]
        recommendation = self.recommender.recommend("parking near the library", extra)
        assert len(recommendation.ranked) == 3

    def test_no_limit(self, lots):
        recommendation = self.recommender.recommend("library", lots, limit=None)
        assert len(recommendation.ranked) == 3

    def test_unresolved_location(self, lots):
        assert self.recommender.recommend("parking near the moon", lots) is None

    def test_resolved_without_usable_lots(self):
        recommendation = self.recommender.recommend(
            "comp sci", [{"_id": "x", "name": "Unmapped"}])
        assert recommendation.location.key == "computer science"
        assert recommendation.ranked == ()
        assert recommendation.closest is None

    def test_to_dict_transport_shape(self, lots):
        data = self.recommender.recommend("library", lots, limit=1).to_dict()
        assert data["building"]["name"] == "Main Library"
        assert data["closestLots"][0]["_id"] == "near"
        assert data["closestLots"][0]["walkingTimeMinutes"] == 1

    def test_near_point(self, lots):
        ranked = self.recommender.recommend_near_point(ORIGIN, lots, limit=2)
        assert [r.name for r in ranked] == ["Lot near", "Lot mid"]

    def test_near_point_with_radius(self, lots):
        ranked = self.recommender.recommend_near_point(ORIGIN, lots, radius_meters=75)
        assert [r.name for r in ranked] == ["Lot near"]

    def test_near_point_defaults_to_map_radius(self, lots):
        lots = lots + [make_lot("remote", 2000)]
        ranked = self.recommender.recommend_near_point(ORIGIN, lots)
        assert "Lot remote" not in [r.name for r in ranked]
        assert len(ranked) == 3

    def test_near_point_without_map_radius(self, small_registry, lots):
        recommender = ParkingRecommender(small_registry, map_radius_meters=None)
        ranked = recommender.recommend_near_point(ORIGIN, lots + [make_lot("remote", 2000)])
        assert [r.name for r in ranked][-1] == "Lot remote"

    def test_near_point_accepts_registry_coordinates(self, small_registry, lots):
        origin = small_registry.lookup("library").to_dict()["coordinates"]
        ranked = self.recommender.recommend_near_point(origin, lots, limit=1)
        assert ranked[0].name == "Lot near"

    def test_caller_lots_are_not_modified(self, lots):
        before = [dict(lot) for lot in lots]
        self.recommender.recommend("library", lots)
        assert lots == before


class TestTemplateReply:

    def setup_method(self):
        self.lots = [
            make_lot("A", 50, availableSpaces=12, hourlyRate=2.5,
                     permitTypes=["student", "visitor"]),
            make_lot("B", 300, availableSpaces=0),
        ]

    def _recommendation(self, registry, lots):
        return ParkingRecommender(registry).recommend("library", lots)

    def test_lists_lots_with_details(self, small_registry):
        answer = format_recommendation(self._recommendation(small_registry, self.lots))
        assert answer.startswith("Here are the closest parking options to Main Library:")
        assert f"1. {EMOJI_PARKING} **Lot A**" in answer
        assert "50m away (1 min walk)" in answer
        assert "12 spaces available" in answer
        assert "$2.5/hour" in answer
        assert "Permits: student, visitor" in answer
        assert "Currently full" in answer
        assert "Tip: The closest option is Lot A, just 50m from Main Library!" in answer

    def test_nothing_ranked(self, small_registry):
        answer = format_recommendation(self._recommendation(small_registry, []))
        assert "none of the active lots have location data" in answer

    def test_facts_for_model(self, small_registry):
        facts = recommendation_facts(self._recommendation(small_registry, self.lots))
        assert "Target building: Main Library" in facts
        assert "1. Lot A: 50m away (1 min walk)" in facts


class TestPhrasing:

    def test_uses_phraser(self, small_registry, lots):
        recommendation = ParkingRecommender(small_registry).recommend("library", lots)
        phraser = FakePhraser()
        answer, used_ai = phrase_or_template(phraser, "library?", recommendation)
        assert (answer, used_ai) == ("AI reply", True)
        assert phraser.calls[0][0] == "library?"
        assert "Lot near" in phraser.calls[0][1]

    def test_falls_back_on_model_failure(self, small_registry, lots):
        recommendation = ParkingRecommender(small_registry).recommend("library", lots)
        answer, used_ai = phrase_or_template(FailingPhraser(), "library?", recommendation)
        assert used_ai is False
        assert answer == format_recommendation(recommendation)

    def test_skips_model_when_nothing_ranked(self, small_registry):
        recommendation = Recommendation(small_registry.lookup("library"), ())
        phraser = FakePhraser()
        answer, used_ai = phrase_or_template(phraser, "library?", recommendation)
        assert used_ai is False
        assert phraser.calls == []

    def test_openai_phraser_sends_configured_model(self):
        client = _fake_client(content="  Try Lot A.  ")
        config = AssistantConfig(answer_model="test-model", answer_max_tokens=50)
        phraser = OpenAIReplyPhraser(config, client=client)

        assert phraser.phrase("where?", "facts") == "Try Lot A."
        kwargs = client.chat.completions.create.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["max_tokens"] == 50
        assert kwargs["messages"][0]["role"] == "system"
        assert "facts" in kwargs["messages"][1]["content"]

    def test_openai_errors_become_external_service_error(self):
        phraser = OpenAIReplyPhraser(
            AssistantConfig(), client=_fake_client(error=RuntimeError("timeout")))
        with pytest.raises(ExternalServiceError, match="timeout"):
            phraser.phrase("where?", "facts")

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_empty_model_reply(self, content):
        phraser = OpenAIReplyPhraser(AssistantConfig(), client=_fake_client(content=content))
        with pytest.raises(ExternalServiceError):
            phraser.phrase("where?", "facts")
