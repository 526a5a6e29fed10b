"""
API response schemas for the display and admin holiday endpoints.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

from holidaytheme.services.registry import HolidayDefinition
from holidaytheme.services.resolver import HolidayThemeState
from holidaytheme.services.themes import HolidayTheme
from holidaytheme.utils.calendar_math import HolidayDateRange


class DateRangeOut(BaseModel):
    start: date
    end: date
    total_days: int

    @classmethod
    def from_range(cls, date_range: HolidayDateRange) -> "DateRangeOut":
        return cls(start=date_range.start, end=date_range.end, total_days=date_range.total_days)


class HolidaySummary(BaseModel):
    id: str
    name: str
    short_name: Optional[str] = None
    type: str
    category: str
    priority: int
    enabled: bool
    description: Optional[str] = None

    @classmethod
    def from_definition(cls, holiday: HolidayDefinition) -> "HolidaySummary":
        return cls(
            id=holiday.id,
            name=holiday.name,
            short_name=holiday.short_name,
            type=holiday.type.value,
            category=holiday.category.value,
            priority=holiday.priority,
            enabled=holiday.enabled,
            description=holiday.description,
        )


class HolidayDetail(HolidaySummary):
    theme: Optional[HolidayTheme] = None
    dates: Optional[DateRangeOut] = Field(default=None, description="First occurrence in the year")
    occurrences: list[DateRangeOut] = Field(default_factory=list)
    year: int


class HolidayStateResponse(BaseModel):
    holiday: Optional[HolidaySummary] = None
    is_holiday: bool
    day_of_holiday: int
    total_days: int
    local_date: date
    timezone: str
    theme: HolidayTheme
    zodiac_animal: Optional[str] = None
    progression_emoji: Optional[str] = None
    is_preview: bool = False

    @classmethod
    def from_state(cls, state: HolidayThemeState, timezone: str) -> "HolidayStateResponse":
        return cls(
            holiday=HolidaySummary.from_definition(state.holiday) if state.holiday else None,
            is_holiday=state.is_holiday,
            day_of_holiday=state.day_of_holiday,
            total_days=state.total_days,
            local_date=state.local_date,
            timezone=timezone,
            theme=state.theme,
            zodiac_animal=state.zodiac_animal,
            progression_emoji=state.progression_emoji,
            is_preview=state.is_preview,
        )


class YearHolidayEntry(BaseModel):
    holiday: HolidaySummary
    dates: Optional[DateRangeOut] = Field(default=None, description="None when the year is not supported")


class YearHolidaysResponse(BaseModel):
    year: int
    holidays: list[YearHolidayEntry]


class TimezoneOption(BaseModel):
    value: str
    label: str
