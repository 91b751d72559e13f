"""Pytest configuration and fixtures."""

import pytest

from hl.core.color import Palette
from hl.core.matcher import Matcher
from hl.core.renderer import Renderer


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Keep the user's own configuration file out of the tests."""
    monkeypatch.setattr("hl.config.loader.DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")


@pytest.fixture
def palette() -> Palette:
    """Standard palette."""
    return Palette.default()


@pytest.fixture
def red_blue_matcher() -> Matcher:
    """Matcher with red=abc and blue=cde."""
    return Matcher([("red", "abc"), ("blue", "cde")])


@pytest.fixture
def renderer() -> Renderer:
    """Renderer with colors enabled."""
    return Renderer()
