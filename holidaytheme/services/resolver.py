"""
Active-holiday resolver.

Turns an instant plus display settings into the holiday (if any) to theme
the kiosk with. Pipeline: localize -> preview override -> auto-detect
-> attach theme.

Overlaps resolve by priority (highest wins), then by id so the result never
depends on catalog order. Every holiday is evaluated for the local year and
the year before, which catches ranges that cross December 31 (Hanukkah,
Kwanzaa).
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig
from holidaytheme.services.registry import (
    DEFAULT_REGISTRY,
    HolidayDefinition,
    HolidayRegistry,
    priority_sort_key,
)
from holidaytheme.services.themes import (
    HolidayTheme,
    get_default_theme,
    get_holiday_theme,
    get_progression_emoji,
)
from holidaytheme.utils.calendar_math import (
    HolidayDateRange,
    Moment,
    UnsupportedYearError,
    get_chinese_zodiac,
)
from holidaytheme.utils.timezone import get_current_instant_in_timezone, is_valid_timezone

logger = logging.getLogger(__name__)

LUNAR_NEW_YEAR_ID = "lunar-new-year"


@dataclass(frozen=True)
class ResolvedHolidayState:
    holiday: Optional[HolidayDefinition] = None
    day_of_holiday: int = 0
    total_days: int = 0
    date_range: Optional[HolidayDateRange] = None

    @property
    def is_holiday(self) -> bool:
        return self.holiday is not None


NO_HOLIDAY = ResolvedHolidayState()


@dataclass(frozen=True)
class HolidayThemeState:
    """Everything the rendering layer needs for one local day."""
    holiday: Optional[HolidayDefinition]
    day_of_holiday: int
    total_days: int
    theme: HolidayTheme
    is_holiday: bool
    local_date: date
    zodiac_animal: Optional[str] = None
    progression_emoji: Optional[str] = None
    is_preview: bool = False


def _local_date(moment: Moment) -> date:
    return moment.date() if isinstance(moment, datetime) else moment


def _occurrence_on(holiday: HolidayDefinition, day: date) -> Optional[HolidayDateRange]:
    for year in (day.year, day.year - 1):
        try:
            ranges = holiday.ranges_in_year(year)
        except UnsupportedYearError as e:
            logger.debug(
                "Skipping %s for %d: %s", holiday.id, year, str(e),
                extra={"holiday_id": holiday.id, "year": year},
            )
            continue
        for date_range in ranges:
            if date_range.contains(day):
                return date_range
    return None


def get_active_holidays_on_date(
    moment: Moment,
    disabled_ids: Iterable[str] = (),
    registry: HolidayRegistry = DEFAULT_REGISTRY,
) -> list[ResolvedHolidayState]:
    """
    Every enabled holiday covering the local date of `moment`, best first.

    `moment` must already be in the display's timezone; only its calendar
    date is used.
    """
    day = _local_date(moment)
    active = []
    for holiday in registry.get_enabled_holidays(disabled_ids):
        date_range = _occurrence_on(holiday, day)
        if date_range is None:
            continue
        active.append(ResolvedHolidayState(
            holiday=holiday,
            day_of_holiday=date_range.day_of_holiday(day),
            total_days=date_range.total_days,
            date_range=date_range,
        ))
    active.sort(key=lambda state: priority_sort_key(state.holiday))
    return active


def get_active_holiday(
    moment: Moment,
    disabled_ids: Iterable[str] = (),
    registry: HolidayRegistry = DEFAULT_REGISTRY,
) -> ResolvedHolidayState:
    active = get_active_holidays_on_date(moment, disabled_ids, registry)
    if not active:
        return NO_HOLIDAY
    if len(active) > 1:
        logger.debug(
            "Overlapping holidays on %s: %s, picked %s",
            _local_date(moment), [s.holiday.id for s in active], active[0].holiday.id,
            extra={"holiday_id": active[0].holiday.id},
        )
    return active[0]


def _default_state(local_date: date) -> HolidayThemeState:
    return HolidayThemeState(
        holiday=None,
        day_of_holiday=0,
        total_days=0,
        theme=get_default_theme(),
        is_holiday=False,
        local_date=local_date,
    )


def _theme_state(
    holiday: HolidayDefinition,
    day_of_holiday: int,
    total_days: int,
    local_date: date,
    zodiac_year: int,
    is_preview: bool = False,
) -> HolidayThemeState:
    theme = get_holiday_theme(holiday.id) or get_default_theme()
    return HolidayThemeState(
        holiday=holiday,
        day_of_holiday=day_of_holiday,
        total_days=total_days,
        theme=theme,
        is_holiday=True,
        local_date=local_date,
        zodiac_animal=get_chinese_zodiac(zodiac_year) if holiday.id == LUNAR_NEW_YEAR_ID else None,
        progression_emoji=get_progression_emoji(theme, day_of_holiday),
        is_preview=is_preview,
    )


def _preview_state(
    config: HolidayResolutionConfig,
    registry: HolidayRegistry,
    local_date: date,
) -> Optional[HolidayThemeState]:
    holiday = registry.get_holiday_by_id(config.preview_holiday)
    if holiday is None:
        logger.warning(
            "Preview holiday %s not found, using date detection", config.preview_holiday,
            extra={"holiday_id": config.preview_holiday},
        )
        return None

    try:
        occurrences = holiday.ranges_in_year(local_date.year)
    except UnsupportedYearError:
        occurrences = []
    total_days = occurrences[0].total_days if occurrences else 1

    return _theme_state(
        holiday,
        day_of_holiday=config.preview_day,
        total_days=total_days,
        local_date=local_date,
        zodiac_year=local_date.year,
        is_preview=True,
    )


def resolve_holiday_state(
    config: HolidayResolutionConfig,
    now: Optional[datetime] = None,
    registry: HolidayRegistry = DEFAULT_REGISTRY,
) -> HolidayThemeState:
    """
    Resolve the theme state for `now` (default: the current time).

    A preview holiday takes total precedence over the calendar. Themes
    switched off entirely yield the default state, preview included.
    """
    if not is_valid_timezone(config.timezone):
        logger.warning(
            "Invalid display timezone %s", config.timezone,
            extra={"timezone": config.timezone},
        )
    local_now = get_current_instant_in_timezone(config.timezone, now)
    local_date = local_now.date()

    if not config.enable_holiday_themes:
        return _default_state(local_date)

    if config.preview_holiday:
        preview = _preview_state(config, registry, local_date)
        if preview is not None:
            return preview

    active = get_active_holiday(local_date, config.disabled_holidays, registry)
    if not active.is_holiday:
        return _default_state(local_date)

    return _theme_state(
        active.holiday,
        day_of_holiday=active.day_of_holiday,
        total_days=active.total_days,
        local_date=local_date,
        zodiac_year=active.date_range.start.year,
    )
