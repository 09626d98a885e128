"""Pytest fixtures and configuration for scoring tests."""

from __future__ import annotations

import os

# Set environment variables BEFORE any imports that might load settings
# This is necessary because settings are cached at import time
os.environ.setdefault("APP_MODE", "development")
os.environ.setdefault("LOG_LEVEL", "silent")

from datetime import UTC, datetime
from typing import Any

import pytest

from tests.helpers import iso_days_before


@pytest.fixture
def fixed_now() -> datetime:
    """Reference time used for every account-age computation in tests."""
    return datetime(2025, 1, 1, tzinfo=UTC)


@pytest.fixture
def sample_profile() -> dict[str, Any]:
    """Two-year-old account with a single short comment and lopsided karma."""
    return {
        "accountAge": "2023-01-01",
        "recentComments": [{"text": "hi"}],
        "description": "",
        "postKarma": 1000,
        "commentKarma": 5,
    }


@pytest.fixture
def established_profile() -> dict[str, Any]:
    """Long-lived account with varied, detailed comments and typical karma."""
    return {
        "accountAge": "2015-06-01",
        "recentComments": [
            {"text": "I switched to tubeless tires last year and never looked back."},
            {"text": "The climb after the second bridge is brutal in August heat."},
            {"text": "Does anyone know if the trailhead parking opens before sunrise?"},
            {"text": "Thanks for the write-up, the elevation chart was really helpful."},
        ],
        "description": "Long-time reader, occasional poster about cycling.",
        "postKarma": 1000,
        "commentKarma": 5000,
    }


@pytest.fixture
def new_account_profile(fixed_now: datetime) -> dict[str, Any]:
    """Three-month-old account with a blank description and no karma data."""
    return {
        "accountAge": iso_days_before(fixed_now, 92),
        "recentComments": [
            {"text": "Welcome everyone, glad to be here"},
            {"text": "That match last night was wild"},
        ],
        "description": "",
    }
