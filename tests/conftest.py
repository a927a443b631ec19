"""Shared fixtures for the dotbuilder test-suite."""

from __future__ import annotations

import pytest

from dotbuilder import config


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Run every test without rendering overrides from the environment."""

    for key in ("DOTBUILDER_INDENT", "DOTBUILDER_STRICT_PORTS"):
        monkeypatch.delenv(key, raising=False)
    config._load_environment.cache_clear()
    yield
    config._load_environment.cache_clear()
