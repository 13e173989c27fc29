#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Mention extractor: find the location a chat message is talking about.

A short ordered list of trigger patterns isolates a candidate phrase
("near the library", "going to roth quad", "cs building?"), which is handed
to the LocationResolver. If no pattern produces a resolution, every registry
key and alias is searched for literally inside the message.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from emojis import EMOJI_SEARCH
from .registry import LocationEntry
from .resolver import LocationResolver

# Trigger patterns, tried in order. Each captures the phrase up to "?", "."
# or end of message. Triggers are plain substrings, so "at" also fires inside
# "what"; the first phrase that resolves wins.
MENTION_PATTERNS = [
    # Pattern 1: "near X", "close to X", "by X", "at X", "in X", "parking for X"
    re.compile(
        r"(?:near|close to|by|at|in|parking (?:for|near))\s+(.+?)(?:\?|\.|$)"),

    # Pattern 2: "going to X", "headed to X", "visiting X"
    re.compile(r"(?:going to|headed to|visiting)\s+(.+?)(?:\?|\.|$)"),

    # Pattern 3: "X building", "X center", "X library", "X quad", "X apartments"
    re.compile(
        r"(.+?)\s+(?:building|center|library|quad|apartments?)(?:\?|\.|$)"),
]


class MentionExtractor:
    """Pulls a canonical location key out of an informal sentence."""

    def __init__(self, resolver: Optional[LocationResolver] = None):
        self.resolver = resolver if resolver is not None else LocationResolver()
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def registry(self):
        return self.resolver.registry

    def extract_location(self, sentence: Optional[str]) -> Optional[LocationEntry]:
        if not sentence or not sentence.strip():
            return None

        message = sentence.lower()

        for pattern in MENTION_PATTERNS:
            match = pattern.search(message)
            if not match:
                continue
            phrase = match.group(1).strip()
            entry = self.resolver.resolve(phrase)
            if entry is not None:
                self.logger.info("%s Location from phrase %r: %s",
                                 EMOJI_SEARCH, phrase, entry.key)
                return entry

        # Fallback: literal key/alias scan
        for entry in self.registry:
            if entry.key in message or any(alias in message for alias in entry.aliases):
                self.logger.info("%s Location from direct scan: %s",
                                 EMOJI_SEARCH, entry.key)
                return entry

        self.logger.debug("No location found in %r", sentence[:80])
        return None

    def extract_mention(self, sentence: Optional[str]) -> Optional[str]:
        """
        Return the canonical key of the location mentioned in *sentence*.

        Returns None when nothing resolves; callers should ask the user to
        name the building.
        """
        entry = self.extract_location(sentence)
        return entry.key if entry else None
