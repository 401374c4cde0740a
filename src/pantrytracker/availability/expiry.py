"""Expiry checks for pantry stock.

Expiry dates are calendar dates (``YYYY-MM-DD``) compared against today's
local date, so there is no time-of-day component: an entry expiring today
is still usable, one that expired yesterday is not. Absent or malformed
dates never expire.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pantrytracker.config import Settings, get_settings
from pantrytracker.logging_config import get_logger

logger = get_logger(__name__)


class ExpiryStatus(str, Enum):
    """Badge shown next to a pantry item."""

    EXPIRED = "expired"
    EXPIRING_SOON = "expiring_soon"
    EXPIRING_IN_TWO_WEEKS = "expiring_in_two_weeks"
    FRESH = "fresh"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str | None:
        return _STATUS_LABELS.get(self)


_STATUS_LABELS = {
    ExpiryStatus.EXPIRED: "Expired",
    ExpiryStatus.EXPIRING_SOON: "Expiring soon",
    ExpiryStatus.EXPIRING_IN_TWO_WEEKS: "Expiring in 2 weeks",
}


def parse_expiry_date(value: Any) -> date | None:
    """
    Parse an expiry date into a calendar date.

    Accepts ``date``/``datetime`` objects and ISO strings; a datetime
    string is reduced to its date part. Returns None for anything else.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        logger.debug(f"Ignoring non-string expiry date {value!r}")
        return None

    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        logger.debug(f"Malformed expiry date {value!r}, treating as never expiring")
        return None


def days_until_expiry(value: Any, *, today: date | None = None) -> int | None:
    """Whole days from today until the expiry date (negative once expired)."""
    expiry = parse_expiry_date(value)
    if expiry is None:
        return None
    return (expiry - (today or date.today())).days


def is_expired(value: Any, *, today: date | None = None) -> bool:
    """Return True if the expiry date is strictly before today."""
    days_left = days_until_expiry(value, today=today)
    return days_left is not None and days_left < 0


def expiry_status(
    value: Any,
    *,
    today: date | None = None,
    settings: Settings | None = None,
) -> ExpiryStatus:
    """Classify an expiry date for display."""
    days_left = days_until_expiry(value, today=today)
    if days_left is None:
        return ExpiryStatus.UNKNOWN

    settings = settings or get_settings()
    if days_left < 0:
        return ExpiryStatus.EXPIRED
    if days_left <= settings.expiring_soon_days:
        return ExpiryStatus.EXPIRING_SOON
    if days_left <= settings.expiring_warning_days:
        return ExpiryStatus.EXPIRING_IN_TWO_WEEKS
    return ExpiryStatus.FRESH
