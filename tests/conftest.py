"""Fixtures for the cross-cutting test suite (shared/, core/, CLI).

Tool-level fixtures (fake Roblox API, stub AI session, services) live in
the repository-root conftest so module test folders can use them too.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def write_env_file(tmp_path):
    """Write a ``.env`` file and return its path."""

    def _write(contents: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text(contents)
        return path

    return _write
