"""Shared pytest fixtures for fraction_text tests."""

from __future__ import annotations

from typing import Generator

import pytest

from fraction_text.codec import FractionConfig, FractionFormatter, MaxDenominator
from fraction_text.config import get_settings

SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "FRACTEXT_PARSING_LOCALE",
    "FRACTEXT_LOCALE_AWARE_PARSING",
    "FRACTEXT_MAX_DENOMINATOR",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings, regardless of the host shell."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def config() -> FractionConfig:
    return FractionConfig()


@pytest.fixture
def formatter() -> FractionFormatter:
    """Formatter with the exact-digits policy and en_US parsing."""
    return FractionFormatter()


@pytest.fixture
def bounded_formatter() -> FractionFormatter:
    """Formatter limited to denominators up to 16."""
    return FractionFormatter(reduction_policy=MaxDenominator(16))
