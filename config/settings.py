#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration settings for the parking assistant.
Enhanced with validation and type safety.
"""

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from parking_exceptions import ConfigError
from .constant import (
    ANSWER_MAX_TOKENS,
    ANSWER_MODEL,
    ANSWER_TEMPERATURE,
    BUILDING_PARKING_LIMIT,
    CHAT_RECOMMENDATION_LIMIT,
    LOG_FORMAT,
    LOG_LEVEL,
    MAP_SEARCH_RADIUS_METERS,
    OPENAI_TIMEOUT_DEFAULT_S,
)


# Load a local .env so OPENAI_API_KEY and friends can live outside the shell
load_dotenv()

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


# ===========================================================================
# ASSISTANT CONFIGURATION
# ===========================================================================


@dataclass
class AssistantConfig:
    """Centralised configuration for the parking assistant."""

    openai_api_key: str = ""
    answer_model: str = ANSWER_MODEL
    answer_max_tokens: int = ANSWER_MAX_TOKENS
    answer_temperature: float = ANSWER_TEMPERATURE
    openai_timeout: float = OPENAI_TIMEOUT_DEFAULT_S
    ai_enabled: bool = True

    chat_limit: int = CHAT_RECOMMENDATION_LIMIT
    building_limit: int = BUILDING_PARKING_LIMIT
    map_radius_meters: float = MAP_SEARCH_RADIUS_METERS

    registry_path: str = ""
    log_level: str = LOG_LEVEL

    @property
    def use_ai(self) -> bool:
        """AI phrasing only runs when it is enabled and a key is present."""
        return self.ai_enabled and bool(self.openai_api_key)

    # -----------------------------------------------------------------------
    # ENVIRONMENT LOADERS
    # -----------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "AssistantConfig":
        defaults = cls()
        try:
            return cls(
                openai_api_key=os.getenv("OPENAI_API_KEY", ""),
                answer_model=os.getenv("ANSWER_MODEL", defaults.answer_model),
                answer_max_tokens=int(
                    os.getenv("ANSWER_MAX_TOKENS", defaults.answer_max_tokens)),
                answer_temperature=float(
                    os.getenv("ANSWER_TEMPERATURE", defaults.answer_temperature)),
                openai_timeout=float(
                    os.getenv("OPENAI_TIMEOUT", defaults.openai_timeout)),
                ai_enabled=_env_flag("PARKING_USE_AI"),
                chat_limit=int(
                    os.getenv("CHAT_RECOMMENDATION_LIMIT", defaults.chat_limit)),
                building_limit=int(
                    os.getenv("BUILDING_PARKING_LIMIT", defaults.building_limit)),
                map_radius_meters=float(
                    os.getenv("MAP_SEARCH_RADIUS_METERS", defaults.map_radius_meters)),
                registry_path=os.getenv("LOCATION_REGISTRY_PATH", ""),
                log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid numeric setting: {exc}") from exc

    # -----------------------------------------------------------------------
    # VALIDATION
    # -----------------------------------------------------------------------

    def validate(self) -> None:

        if self.chat_limit < 1:
            raise ConfigError("chat_limit must be >= 1")

        if self.building_limit < 1:
            raise ConfigError("building_limit must be >= 1")

        if self.map_radius_meters <= 0:
            raise ConfigError("map_radius_meters must be > 0")

        if self.answer_max_tokens < 1:
            raise ConfigError("answer_max_tokens must be >= 1")

        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}")

        if self.registry_path and not os.path.isfile(self.registry_path):
            raise ConfigError(
                f"registry_path does not exist: {self.registry_path}")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install the shared log format on the root logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


__all__ = [
    "AssistantConfig",
    "configure_logging",
]
