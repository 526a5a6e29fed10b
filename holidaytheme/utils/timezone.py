"""
Timezone utilities for holiday resolution and midnight scheduling.
Every "which day is it" question is answered in the display's configured zone.
"""
import logging
from datetime import datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "America/New_York"

# Admin dropdown choices: (IANA name, label)
COMMON_TIMEZONES = (
    # US
    ("America/New_York", "Eastern Time (ET)"),
    ("America/Chicago", "Central Time (CT)"),
    ("America/Denver", "Mountain Time (MT)"),
    ("America/Phoenix", "Arizona (no DST)"),
    ("America/Los_Angeles", "Pacific Time (PT)"),
    ("America/Anchorage", "Alaska Time (AKT)"),
    ("Pacific/Honolulu", "Hawaii Time (HST)"),
    # International
    ("Europe/London", "London (GMT/BST)"),
    ("Europe/Paris", "Paris (CET)"),
    ("Europe/Berlin", "Berlin (CET)"),
    ("Asia/Tokyo", "Tokyo (JST)"),
    ("Asia/Shanghai", "Shanghai (CST)"),
    ("Asia/Kolkata", "India (IST)"),
    ("Asia/Dubai", "Dubai (GST)"),
    ("Australia/Sydney", "Sydney (AEST)"),
    ("Pacific/Auckland", "Auckland (NZST)"),
)


def is_valid_timezone(name: Optional[str]) -> bool:
    """True if `name` is a loadable IANA zone."""
    if not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def get_zoneinfo(timezone_str: Optional[str] = None, default: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    """Get ZoneInfo object, falling back to the default zone if unknown."""
    if timezone_str:
        if is_valid_timezone(timezone_str):
            return ZoneInfo(timezone_str)
        logger.warning(
            "Unknown timezone %s, falling back to %s", timezone_str, default,
            extra={"timezone": timezone_str},
        )
    return ZoneInfo(default)


def get_all_timezones() -> list[str]:
    """Every IANA zone known to the system tz database (advanced admin picker)."""
    return sorted(available_timezones())


def _utc_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        # Naive datetimes are treated as UTC
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def get_current_instant_in_timezone(timezone_str: Optional[str], now: Optional[datetime] = None) -> datetime:
    """
    The instant `now` (default: the current time) as an aware datetime whose
    wall-clock fields are those of `timezone_str`.
    """
    return _utc_now(now).astimezone(get_zoneinfo(timezone_str))


def get_year_in_timezone(timezone_str: Optional[str], now: Optional[datetime] = None) -> int:
    return get_current_instant_in_timezone(timezone_str, now).year


def milliseconds_until_next_local_midnight(timezone_str: Optional[str], now: Optional[datetime] = None) -> int:
    """
    Milliseconds from `now` until 00:00 of the next local day.

    The difference is taken between UTC instants, so DST transition days
    are 23 or 25 hours long instead of a fixed 24.
    """
    utc_now = _utc_now(now)
    tz = get_zoneinfo(timezone_str)
    local_now = utc_now.astimezone(tz)
    next_day = local_now.date() + timedelta(days=1)
    next_midnight = datetime.combine(next_day, time(0), tzinfo=tz)
    delta = next_midnight.astimezone(timezone.utc) - utc_now
    return max(0, int(delta.total_seconds() * 1000))
