"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta

import pytest

from pantrytracker.config import Settings

# =============================================================================
# Date Fixtures
# =============================================================================


@pytest.fixture
def today():
    """Fixed reference date used for expiry checks."""
    return date(2024, 6, 15)


@pytest.fixture
def yesterday(today):
    return (today - timedelta(days=1)).isoformat()


@pytest.fixture
def next_month(today):
    return (today + timedelta(days=30)).isoformat()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def settings():
    """Settings with defaults, isolated from the environment and .env."""
    return Settings(_env_file=None)


# =============================================================================
# Pantry Fixtures
# =============================================================================


@pytest.fixture
def pantry_snapshot(next_month):
    """Sample pantry snapshot as stored by the pantry collection."""
    return [
        {"name": "Eggs", "amount": "12", "unit": "pcs", "expiryDate": next_month},
        {"name": "Flour", "amount": "500", "unit": "g", "expiryDate": next_month},
        {"name": "Flour", "amount": "1", "unit": "kg", "expiryDate": next_month},
        {"name": "Whole Milk", "amount": "1", "unit": "l", "expiryDate": next_month},
        {"name": "Butter", "amount": "250", "unit": "g", "expiryDate": ""},
    ]
