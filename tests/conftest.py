"""Shared fixtures for feed tests."""

from zoneinfo import ZoneInfo

import pytest


@pytest.fixture
def paris() -> ZoneInfo:
    """Timezone in which feed dates and hours are expressed."""
    return ZoneInfo("Europe/Paris")
