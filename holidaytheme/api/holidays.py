"""
Holiday API - display state for the kiosk plus admin lookups.

- GET /api/v1/holidays/current    - the session's resolved state
- PUT /api/v1/holidays/settings   - change session settings (re-resolves)
- GET /api/v1/holidays/resolve    - resolve an arbitrary instant
- GET /api/v1/holidays            - every holiday's dates for a year
"""
import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from holidaytheme.schemas.api_responses import (
    DateRangeOut,
    HolidayDetail,
    HolidayStateResponse,
    HolidaySummary,
    TimezoneOption,
    YearHolidayEntry,
    YearHolidaysResponse,
)
from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig, HolidaySettingsUpdate
from holidaytheme.services.registry import HolidayRegistry
from holidaytheme.services.resolver import resolve_holiday_state
from holidaytheme.services.themes import get_holiday_theme
from holidaytheme.utils.calendar_math import UnsupportedYearError
from holidaytheme.utils.logging import log_context
from holidaytheme.utils.timezone import COMMON_TIMEZONES, get_year_in_timezone, is_valid_timezone
from holidaytheme.workers.midnight_refresh import MidnightRefresher

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/holidays", tags=["holidays"])

MIN_YEAR = 1900
MAX_YEAR = 2100


def get_refresher(request: Request) -> MidnightRefresher:
    refresher = getattr(request.app.state, "holiday_refresher", None)
    if refresher is None:
        raise HTTPException(status_code=503, detail="Holiday session not started")
    return refresher


def get_registry(refresher: MidnightRefresher = Depends(get_refresher)) -> HolidayRegistry:
    return refresher.registry


def _require_timezone(tz: str):
    if not is_valid_timezone(tz):
        raise HTTPException(status_code=400, detail=f"Unknown timezone: {tz}")


@router.get("/current", response_model=HolidayStateResponse)
async def current_holiday(refresher: MidnightRefresher = Depends(get_refresher)):
    return HolidayStateResponse.from_state(refresher.state, refresher.config.timezone)


@router.put("/settings", response_model=HolidayStateResponse)
async def update_settings(
    payload: HolidaySettingsUpdate,
    refresher: MidnightRefresher = Depends(get_refresher),
):
    config = payload.apply_to(refresher.config)
    _require_timezone(config.timezone)

    unknown = [h for h in config.disabled_holidays if refresher.registry.get_holiday_by_id(h) is None]
    if unknown:
        logger.warning("Ignoring unknown disabled holiday ids: %s", ", ".join(unknown))

    state = refresher.reconfigure(config)
    logger.info(
        "Holiday settings updated (tz=%s, enabled=%s, preview=%s)",
        config.timezone, config.enable_holiday_themes, config.preview_holiday,
        extra={"timezone": config.timezone},
    )
    return HolidayStateResponse.from_state(state, config.timezone)


@router.get("/resolve", response_model=HolidayStateResponse)
async def resolve_at(
    at: Optional[datetime] = Query(default=None, description="ISO instant; naive values are UTC"),
    timezone: Optional[str] = Query(default=None),
    refresher: MidnightRefresher = Depends(get_refresher),
):
    config: HolidayResolutionConfig = refresher.config
    if timezone is not None:
        _require_timezone(timezone)
        config = config.model_copy(update={"timezone": timezone})
    try:
        with log_context(timezone=config.timezone):
            state = resolve_holiday_state(config, now=at, registry=refresher.registry)
    except OverflowError:
        raise HTTPException(status_code=400, detail=f"{at} has no local date in {config.timezone}")
    return HolidayStateResponse.from_state(state, config.timezone)


@router.get("", response_model=YearHolidaysResponse)
async def list_holidays_for_year(
    year: Optional[int] = Query(default=None, ge=MIN_YEAR, le=MAX_YEAR),
    refresher: MidnightRefresher = Depends(get_refresher),
):
    """Admin calendar: every enabled holiday with its dates (null when unsupported)."""
    if year is None:
        year = get_year_in_timezone(refresher.config.timezone)
    entries = [
        YearHolidayEntry(
            holiday=HolidaySummary.from_definition(holiday),
            dates=DateRangeOut.from_range(dates) if dates else None,
        )
        for holiday, dates in refresher.registry.get_holidays_in_year(
            year, refresher.config.disabled_holidays,
        )
    ]
    return YearHolidaysResponse(year=year, holidays=entries)


@router.get("/ids", response_model=list[str])
async def holiday_ids(registry: HolidayRegistry = Depends(get_registry)):
    return registry.get_all_holiday_ids()


@router.get("/timezones", response_model=list[TimezoneOption])
async def common_timezones():
    return [TimezoneOption(value=value, label=label) for value, label in COMMON_TIMEZONES]


@router.get("/{holiday_id}", response_model=HolidayDetail)
async def holiday_detail(
    holiday_id: str,
    year: Optional[int] = Query(default=None, ge=MIN_YEAR, le=MAX_YEAR),
    refresher: MidnightRefresher = Depends(get_refresher),
):
    holiday = refresher.registry.get_holiday_by_id(holiday_id)
    if holiday is None:
        raise HTTPException(status_code=404, detail="Holiday not found")

    if year is None:
        year = get_year_in_timezone(refresher.config.timezone)
    try:
        occurrences = [DateRangeOut.from_range(r) for r in holiday.ranges_in_year(year)]
    except UnsupportedYearError:
        occurrences = []

    return HolidayDetail(
        **HolidaySummary.from_definition(holiday).model_dump(),
        theme=get_holiday_theme(holiday.id),
        dates=occurrences[0] if occurrences else None,
        occurrences=occurrences,
        year=year,
    )
