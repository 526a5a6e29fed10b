"""
Test configuration and fixtures.
Registries are built from small hand-made catalogs so resolver tests do not
depend on the full production holiday list.
"""
import pytest
from datetime import date

from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig
from holidaytheme.services.registry import (
    HolidayCategory,
    HolidayDefinition,
    HolidayRegistry,
    HolidayType,
)
from holidaytheme.utils.calendar_math import HolidayDateRange, UnsupportedYearError


def make_holiday(holiday_id, priority, start, end, **overrides) -> HolidayDefinition:
    """Holiday that occupies (month, day) start..end every year."""

    def calculator(year):
        return HolidayDateRange(date(year, *start), date(year, *end))

    fields = {
        "id": holiday_id,
        "name": holiday_id.replace("-", " ").title(),
        "type": HolidayType.FIXED,
        "category": HolidayCategory.FUN,
        "priority": priority,
        "date_calculator": calculator,
    }
    fields.update(overrides)
    return HolidayDefinition(**fields)


def unsupported_calculator(year):
    raise UnsupportedYearError("Tabled Festival", year, (2020, 2035))


@pytest.fixture
def small_registry():
    """Two overlapping holidays (priority 5 and 8) around March 10, plus a solo one."""
    return HolidayRegistry([
        make_holiday("spring-fair", 5, (3, 8), (3, 12)),
        make_holiday("spring-gala", 8, (3, 10), (3, 11)),
        make_holiday("autumn-fest", 6, (10, 1), (10, 3)),
    ])


@pytest.fixture
def eastern_config():
    return HolidayResolutionConfig(timezone="America/New_York")


@pytest.fixture
def holiday_factory():
    return make_holiday


@pytest.fixture
def unsupported():
    return unsupported_calculator
