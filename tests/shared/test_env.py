"""Tests for the .env loader and required-variable lookups."""

from __future__ import annotations

import pytest

from shared.env import EnvResolver, get_openai_config, get_required_env, get_roblox_cloud_config
from shared.errors import ConfigurationError


def test_load_reads_file_without_overriding(write_env_file):
    path = write_env_file("OPENAI_API_KEY=from-file\nROBLOX_CLOUD_API_KEY=rbx-file\n")
    environ = {"OPENAI_API_KEY": "from-env"}
    resolver = EnvResolver(default_path=path, environ=environ)

    resolver.load()

    assert resolver.loaded is True
    assert environ["OPENAI_API_KEY"] == "from-env"
    assert environ["ROBLOX_CLOUD_API_KEY"] == "rbx-file"


def test_load_is_idempotent(write_env_file):
    first = write_env_file("A=1\n", name="first.env")
    second = write_env_file("B=2\n", name="second.env")
    environ: dict[str, str] = {}
    resolver = EnvResolver(environ=environ)

    resolver.load(first)
    resolver.load(second)

    assert environ == {"A": "1"}


def test_missing_file_marks_loaded(tmp_path):
    environ: dict[str, str] = {}
    resolver = EnvResolver(default_path=tmp_path / "nope.env", environ=environ)

    resolver.load()

    assert resolver.loaded is True
    assert environ == {}


def test_get_required_trims_value():
    resolver = EnvResolver(environ={"OPENAI_API_KEY": "  sk-abc \n"})
    assert resolver.get_required("OPENAI_API_KEY") == "sk-abc"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_get_required_missing_or_blank(value):
    environ = {} if value is None else {"ROBLOX_CLOUD_API_KEY": value}
    resolver = EnvResolver(environ=environ)

    with pytest.raises(ConfigurationError) as exc_info:
        resolver.get_required("ROBLOX_CLOUD_API_KEY")

    assert exc_info.value.key == "ROBLOX_CLOUD_API_KEY"
    assert "ROBLOX_CLOUD_API_KEY" in str(exc_info.value)


def test_credential_accessors_load_first(write_env_file):
    path = write_env_file("OPENAI_API_KEY=sk-file\nROBLOX_CLOUD_API_KEY=rbx-file\n")
    resolver = EnvResolver(default_path=path, environ={})

    assert resolver.openai_config().api_key == "sk-file"
    assert resolver.roblox_cloud_config().api_key == "rbx-file"


def test_openai_config_missing_key(tmp_path):
    resolver = EnvResolver(default_path=tmp_path / "missing.env", environ={})
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        resolver.openai_config()


def test_module_helpers_use_process_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", " sk-proc ")
    monkeypatch.setenv("ROBLOX_CLOUD_API_KEY", "rbx-proc")

    assert get_required_env("OPENAI_API_KEY") == "sk-proc"
    assert get_openai_config().api_key == "sk-proc"
    assert get_roblox_cloud_config().api_key == "rbx-proc"
