#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OpenAI client used for optional AI phrasing of parking replies.
"""

import os
import threading
from typing import Optional
from openai import OpenAI

from config import OPENAI_TIMEOUT_DEFAULT_S
from parking_exceptions import ConfigError


class ClientManager:
    """Builds the OpenAI client on first use and shares it process-wide."""

    _oai: Optional[OpenAI] = None
    _lock = threading.Lock()

    @classmethod
    def get_oai(
        cls,
        api_key: Optional[str] = None,
        timeout: float = OPENAI_TIMEOUT_DEFAULT_S,
    ) -> OpenAI:
        """
        Return the shared OpenAI client.

        The key comes from *api_key* or OPENAI_API_KEY. Only the first call's
        arguments are used; later calls get the cached client.
        """
        with cls._lock:
            if cls._oai is not None:
                return cls._oai

            key = api_key or os.environ.get("OPENAI_API_KEY")
            if not key:
                raise ConfigError(
                    "OPENAI_API_KEY is not set. "
                    "Set it, disable PARKING_USE_AI, or inject a phraser in tests."
                )

            cls._oai = OpenAI(api_key=key, timeout=timeout)
            return cls._oai

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._oai = None


def get_oai(api_key: Optional[str] = None,
            timeout: float = OPENAI_TIMEOUT_DEFAULT_S) -> OpenAI:
    return ClientManager.get_oai(api_key, timeout)
