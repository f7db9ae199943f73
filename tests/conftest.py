"""Pytest configuration and fixtures for all tests."""

from typing import Callable

import pytest

from faultline.core import config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and styling environment variables."""
    for env_name in config_module.ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    for env_name in ("FAULTLINE_LOG_LEVEL", "NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setattr(
        config_module.config_manager, "config_path", tmp_path / "home" / ".faultline.json"
    )
    monkeypatch.setattr(config_module.config_manager, "_config", None)
    yield config_module.config_manager


@pytest.fixture
def numbered_source() -> Callable[[int], str]:
    """Build a source text whose lines read ``line 1`` .. ``line <count>``."""

    def _build(count: int) -> str:
        return "".join(f"line {number}\n" for number in range(1, count + 1))

    return _build


@pytest.fixture
def ten_line_source(numbered_source) -> str:
    return numbered_source(10)
