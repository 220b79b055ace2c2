"""Configuration management using Pydantic Settings.

Every environment-driven option and its fallback lives on ``Settings``. The
server builds one instance at startup and hands it to each component.
Credentials are not stored here; they are read at call time through
``shared.env`` so key rotation and late ``.env`` loading keep working.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_UNIVERSE_ID = "9730686096"
DEFAULT_PLACE_ID = "87666753607582"
DEFAULT_CREATOR_ID = "3394700055"
DEFAULT_USER_ID = "3394700055"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Roblox defaults (used when a tool call omits the ID)
    roblox_universe_id: str = DEFAULT_UNIVERSE_ID
    roblox_place_id: str = DEFAULT_PLACE_ID
    roblox_creator_id: str = DEFAULT_CREATOR_ID
    roblox_user_id: str = DEFAULT_USER_ID

    # Local filesystem
    local_assets_dir: str = str(Path.home() / "GameDev" / "assets")
    # Empty means "<cwd>/packages"
    monorepo_packages_dir: str = ""

    # Logging (the logger itself re-reads LOG_LEVEL on every call)
    log_level: str = "info"

    # OpenAI
    openai_text_model: str = "gpt-5.2"
    openai_image_model: str = "gpt-image-1"
    openai_vision_model: str = "gpt-4o"
    openai_max_retries: int = 2
    openai_timeout_ms: int = 60_000

    # Outbound HTTP
    http_timeout_seconds: float = 30.0
    thumbnail_retry_delay_seconds: float = 2.0
    operation_poll_attempts: int = 10
    operation_poll_interval_seconds: float = 1.0
    upload_poll_interval_seconds: float = 3.0

    model_config = SettingsConfigDict(extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


class EnvironmentReport(BaseModel):
    """Outcome of the startup environment scan."""

    valid: bool
    errors: list[str] = []
    warnings: list[str] = []


def validate_environment(environ: Mapping[str, str] | None = None) -> EnvironmentReport:
    """Classify missing variables without raising.

    Missing credentials are errors (the tools that need them will fail) and
    missing IDs are warnings (a default is used). The server still starts
    either way.
    """
    env = os.environ if environ is None else environ
    errors: list[str] = []
    warnings: list[str] = []

    if not (env.get("ROBLOX_CLOUD_API_KEY") or "").strip():
        errors.append("ROBLOX_CLOUD_API_KEY is not set — Roblox tools will fail.")
    if not (env.get("OPENAI_API_KEY") or "").strip():
        errors.append("OPENAI_API_KEY is not set — AI tools will fail.")

    if not env.get("ROBLOX_UNIVERSE_ID"):
        warnings.append(f"ROBLOX_UNIVERSE_ID not set — using default {DEFAULT_UNIVERSE_ID}.")
    if not env.get("ROBLOX_PLACE_ID"):
        warnings.append(f"ROBLOX_PLACE_ID not set — using default {DEFAULT_PLACE_ID}.")

    return EnvironmentReport(valid=not errors, errors=errors, warnings=warnings)
