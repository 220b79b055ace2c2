"""Environment loader and typed credential getters.

``EnvResolver`` owns the one-shot "loaded" flag explicitly so tests can build
a fresh resolver (with its own environment mapping) instead of resetting
process globals.

Usage::

    from shared.env import load_env, get_openai_config

    load_env()                     # call once at startup
    openai = get_openai_config()   # OpenAIConfig(api_key="sk-...")
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping
from pathlib import Path

from dotenv import dotenv_values
from pydantic import BaseModel

from shared.errors import ConfigurationError

# Repository root .env, one level above this package.
DEFAULT_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


class OpenAIConfig(BaseModel):
    """Credentials for the OpenAI API."""

    api_key: str


class RobloxCloudConfig(BaseModel):
    """Credentials for the Roblox Open Cloud API."""

    api_key: str


class EnvResolver:
    """Idempotent ``.env`` loader plus required-variable lookups."""

    def __init__(
        self,
        default_path: Path | str | None = None,
        environ: MutableMapping[str, str] | None = None,
    ):
        self.default_path = Path(default_path) if default_path else DEFAULT_ENV_PATH
        self.environ = os.environ if environ is None else environ
        self.loaded = False

    def load(self, path: Path | str | None = None) -> None:
        """Load variables from a ``.env`` file.

        Only the first call reads a file; later calls are no-ops whatever
        ``path`` they pass. Variables already present in the environment win.
        """
        if self.loaded:
            return

        resolved = Path(path) if path else self.default_path
        # dotenv_values never prints, so stdout stays free for protocol frames.
        for key, value in dotenv_values(resolved).items():
            if value is not None and key not in self.environ:
                self.environ[key] = value
        self.loaded = True

    def get_required(self, key: str) -> str:
        """Return the trimmed value of ``key``.

        Raises:
            ConfigurationError: If the variable is missing or blank.
        """
        value = (self.environ.get(key) or "").strip()
        if not value:
            raise ConfigurationError(key)
        return value

    def openai_config(self) -> OpenAIConfig:
        self.load()
        return OpenAIConfig(api_key=self.get_required("OPENAI_API_KEY"))

    def roblox_cloud_config(self) -> RobloxCloudConfig:
        self.load()
        return RobloxCloudConfig(api_key=self.get_required("ROBLOX_CLOUD_API_KEY"))


_default_resolver = EnvResolver()


def get_default_resolver() -> EnvResolver:
    """Return the process-wide resolver used by the module-level helpers."""
    return _default_resolver


def load_env(path: Path | str | None = None) -> None:
    _default_resolver.load(path)


def get_required_env(key: str) -> str:
    return _default_resolver.get_required(key)


def get_openai_config() -> OpenAIConfig:
    return _default_resolver.openai_config()


def get_roblox_cloud_config() -> RobloxCloudConfig:
    return _default_resolver.roblox_cloud_config()
