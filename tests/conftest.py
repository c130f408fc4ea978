"""Shared test fixtures."""

from __future__ import annotations

import pytest

from selectorkit.builder.selector import SimpleSelector, css_selector_builder
from selectorkit.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env overrides in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def builder() -> SimpleSelector:
    return css_selector_builder
