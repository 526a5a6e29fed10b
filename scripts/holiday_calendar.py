"""
Print the holiday calendar for a year, or show what a display would theme at an instant.

Useful before a season starts: confirms every holiday's dates and which one
wins where they overlap.

Usage:
    python scripts/holiday_calendar.py
    python scripts/holiday_calendar.py --year 2033
    python scripts/holiday_calendar.py --at 2025-12-25T08:30:00Z --timezone America/Los_Angeles
    python scripts/holiday_calendar.py --year 2025 --disable christmas --disable kwanzaa
"""
import argparse
import logging
from datetime import datetime

from holidaytheme.config import get_settings
from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig
from holidaytheme.services.registry import get_holidays_in_year
from holidaytheme.services.resolver import get_active_holidays_on_date, resolve_holiday_state
from holidaytheme.utils.timezone import get_current_instant_in_timezone, get_year_in_timezone

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def print_year(year: int, disabled: list[str]):
    entries = get_holidays_in_year(year, disabled)
    dated = sorted((e for e in entries if e[1] is not None), key=lambda e: e[1].start)
    undated = [holiday for holiday, dates in entries if dates is None]

    logger.info("Holiday calendar for %d (%d holidays)", year, len({h.id for h, _ in entries}))
    logger.info("=" * 60)
    for holiday, dates in dated:
        span = dates.start.strftime("%b %d")
        if dates.total_days > 1:
            span += f" - {dates.end.strftime('%b %d')}"
        logger.info("  %-16s %-28s p%-2d %s", span, holiday.name, holiday.priority, holiday.category.value)
    if undated:
        logger.info("")
        logger.info("No data for %d: %s", year, ", ".join(h.id for h in undated))


def print_instant(at: datetime | None, timezone_name: str, disabled: list[str]):
    config = HolidayResolutionConfig(timezone=timezone_name, disabled_holidays=disabled)
    local = get_current_instant_in_timezone(timezone_name, at)
    state = resolve_holiday_state(config, now=at)

    logger.info("Local time in %s: %s", timezone_name, local.strftime("%Y-%m-%d %H:%M:%S"))
    for candidate in get_active_holidays_on_date(local, disabled):
        logger.info(
            "  candidate: %s (priority %d, day %d/%d)",
            candidate.holiday.id, candidate.holiday.priority,
            candidate.day_of_holiday, candidate.total_days,
        )
    if not state.is_holiday:
        logger.info("No holiday - default theme")
        return
    logger.info(
        "Active: %s day %d/%d %s",
        state.holiday.name, state.day_of_holiday, state.total_days,
        state.theme.decorations.icon_emoji or "",
    )
    if state.progression_emoji:
        logger.info("Progression: %s", state.progression_emoji)
    if state.zodiac_animal:
        logger.info("Year of the %s", state.zodiac_animal)


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Holiday calendar inspector")
    parser.add_argument("--year", type=int, help="Print every holiday's dates for this year")
    parser.add_argument("--at", type=datetime.fromisoformat, help="Resolve the holiday at this ISO instant")
    parser.add_argument("--timezone", default=settings.holiday_timezone or settings.default_timezone)
    parser.add_argument("--disable", action="append", default=[], help="Holiday id to disable (repeatable)")
    args = parser.parse_args()

    disabled = args.disable or settings.disabled_holiday_ids
    if args.year is None and args.at is None:
        # No arguments: this year's calendar plus what is showing right now
        print_year(get_year_in_timezone(args.timezone), disabled)
        logger.info("")
        print_instant(None, args.timezone, disabled)
        return

    if args.year is not None:
        print_year(args.year, disabled)
    if args.at is not None:
        print_instant(args.at, args.timezone, disabled)


if __name__ == "__main__":
    main()
