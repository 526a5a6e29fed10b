"""
Holiday registry - the static catalog of holiday definitions.

Each definition pairs metadata (id, name, category, priority) with the
calendar function that computes its date range for a given year.
The catalog is fixed at import time. HolidayRegistry wraps any catalog so
tests and callers can inject a smaller one instead of DEFAULT_REGISTRY.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Iterable, Optional

from holidaytheme.utils.calendar_math import (
    DATE_YEARS,
    LAST,
    MONDAY,
    SUNDAY,
    THURSDAY,
    HolidayDateRange,
    UnsupportedYearError,
    get_diwali,
    get_easter,
    get_eid_al_adha,
    get_eid_al_adha_occurrences,
    get_eid_al_fitr,
    get_eid_al_fitr_occurrences,
    get_fixed_date,
    get_fixed_span,
    get_good_friday,
    get_hanukkah,
    get_holi,
    get_lunar_new_year,
    get_nth_weekday,
    get_passover,
    get_purim,
    get_rosh_hashanah,
    get_super_bowl,
    get_yom_kippur,
)

logger = logging.getLogger(__name__)

MIN_PRIORITY = 1
MAX_PRIORITY = 10


class HolidayType(str, Enum):
    FIXED = "fixed"
    VARIABLE = "variable"


class HolidayCategory(str, Enum):
    FEDERAL = "federal"
    RELIGIOUS = "religious"
    CULTURAL = "cultural"
    OBSERVANCE = "observance"
    FUN = "fun"


@dataclass(frozen=True)
class HolidayDefinition:
    id: str
    name: str
    type: HolidayType
    category: HolidayCategory
    priority: int  # Higher wins when ranges overlap (1-10)
    date_calculator: Callable[[int], HolidayDateRange]
    enabled: bool = True
    short_name: Optional[str] = None
    description: Optional[str] = None
    # Only for holidays that can occur twice in one Gregorian year
    occurrence_calculator: Optional[Callable[[int], list[HolidayDateRange]]] = None

    def __post_init__(self):
        if not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            raise ValueError(
                f"Holiday {self.id!r} priority {self.priority} outside "
                f"{MIN_PRIORITY}-{MAX_PRIORITY}"
            )

    def ranges_in_year(self, year: int) -> list[HolidayDateRange]:
        """
        All occurrences starting in `year`, earliest first.

        Raises UnsupportedYearError when the algorithm has no data for `year`
        or an occurrence would leave the years datetime can represent.
        """
        if not DATE_YEARS[0] <= year <= DATE_YEARS[1]:
            raise UnsupportedYearError(self.name, year, DATE_YEARS)
        try:
            if self.occurrence_calculator is not None:
                return self.occurrence_calculator(year)
            return [self.date_calculator(year)]
        except OverflowError:
            raise UnsupportedYearError(self.name, year, DATE_YEARS) from None


def _fixed(month: int, day: int) -> Callable[[int], HolidayDateRange]:
    return partial(_fixed_for_year, month=month, day=day)


def _fixed_for_year(year: int, month: int, day: int) -> HolidayDateRange:
    return get_fixed_date(year, month, day)


def _span(month: int, day: int, total_days: int) -> Callable[[int], HolidayDateRange]:
    return partial(_span_for_year, month=month, day=day, total_days=total_days)


def _span_for_year(year: int, month: int, day: int, total_days: int) -> HolidayDateRange:
    return get_fixed_span(year, month, day, total_days)


def _nth(month: int, weekday: int, n: int) -> Callable[[int], HolidayDateRange]:
    return partial(_nth_for_year, month=month, weekday=weekday, n=n)


def _nth_for_year(year: int, month: int, weekday: int, n: int) -> HolidayDateRange:
    return get_nth_weekday(year, month, weekday, n)


FIXED = HolidayType.FIXED
VARIABLE = HolidayType.VARIABLE

HOLIDAYS: tuple[HolidayDefinition, ...] = (
    # January
    HolidayDefinition(
        id="new-years-day", name="New Year's Day", short_name="New Year",
        type=FIXED, category=HolidayCategory.FEDERAL, priority=10,
        date_calculator=_fixed(1, 1),
        description="Celebrate the start of a new year!",
    ),
    HolidayDefinition(
        id="mlk-day", name="Martin Luther King Jr. Day", short_name="MLK Day",
        type=VARIABLE, category=HolidayCategory.FEDERAL, priority=8,
        date_calculator=_nth(1, MONDAY, 3),
        description="Honoring the legacy of Dr. Martin Luther King Jr.",
    ),
    HolidayDefinition(
        id="lunar-new-year", name="Lunar New Year", short_name="Lunar New Year",
        type=VARIABLE, category=HolidayCategory.CULTURAL, priority=7,
        date_calculator=get_lunar_new_year,
        description="Celebrating the start of the lunar calendar year",
    ),
    # February
    HolidayDefinition(
        id="groundhog-day", name="Groundhog Day",
        type=FIXED, category=HolidayCategory.FUN, priority=3,
        date_calculator=_fixed(2, 2),
        description="Will the groundhog see its shadow?",
    ),
    HolidayDefinition(
        id="super-bowl", name="Super Bowl Sunday", short_name="Super Bowl",
        type=VARIABLE, category=HolidayCategory.FUN, priority=4,
        date_calculator=get_super_bowl,
        description="The big game!",
    ),
    HolidayDefinition(
        id="valentines-day", name="Valentine's Day", short_name="Valentine",
        type=FIXED, category=HolidayCategory.OBSERVANCE, priority=6,
        date_calculator=_fixed(2, 14),
        description="A day to celebrate love and friendship",
    ),
    HolidayDefinition(
        id="presidents-day", name="Presidents' Day",
        type=VARIABLE, category=HolidayCategory.FEDERAL, priority=7,
        date_calculator=_nth(2, MONDAY, 3),
        description="Honoring the presidents of the United States",
    ),
    # March
    HolidayDefinition(
        id="purim", name="Purim",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=5,
        date_calculator=get_purim,
        description="Festival of lots",
    ),
    HolidayDefinition(
        id="holi", name="Holi", short_name="Holi",
        type=VARIABLE, category=HolidayCategory.CULTURAL, priority=6,
        date_calculator=get_holi,
        description="Festival of colors",
    ),
    HolidayDefinition(
        id="st-patricks-day", name="St. Patrick's Day", short_name="St. Pat's",
        type=FIXED, category=HolidayCategory.CULTURAL, priority=6,
        date_calculator=_fixed(3, 17),
        description="Celebrating Irish culture and heritage",
    ),
    # March/April
    HolidayDefinition(
        id="passover", name="Passover", short_name="Passover",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=7,
        date_calculator=get_passover,
        description="Festival of freedom",
    ),
    HolidayDefinition(
        id="good-friday", name="Good Friday",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=6,
        date_calculator=get_good_friday,
        description="Commemorating the crucifixion of Jesus",
    ),
    HolidayDefinition(
        id="easter", name="Easter",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=8,
        date_calculator=get_easter,
        description="Celebrating resurrection and renewal",
    ),
    HolidayDefinition(
        id="eid-al-fitr", name="Eid al-Fitr", short_name="Eid",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=7,
        date_calculator=get_eid_al_fitr,
        occurrence_calculator=get_eid_al_fitr_occurrences,
        description="Festival of breaking the fast",
    ),
    # April
    HolidayDefinition(
        id="earth-day", name="Earth Day",
        type=FIXED, category=HolidayCategory.OBSERVANCE, priority=5,
        date_calculator=_fixed(4, 22),
        description="Celebrating our planet",
    ),
    # May
    HolidayDefinition(
        id="cinco-de-mayo", name="Cinco de Mayo",
        type=FIXED, category=HolidayCategory.CULTURAL, priority=5,
        date_calculator=_fixed(5, 5),
        description="Celebrating Mexican heritage and pride",
    ),
    HolidayDefinition(
        id="mothers-day", name="Mother's Day", short_name="Mom's Day",
        type=VARIABLE, category=HolidayCategory.OBSERVANCE, priority=7,
        date_calculator=_nth(5, SUNDAY, 2),
        description="Honoring mothers everywhere",
    ),
    HolidayDefinition(
        id="memorial-day", name="Memorial Day",
        type=VARIABLE, category=HolidayCategory.FEDERAL, priority=8,
        date_calculator=_nth(5, MONDAY, LAST),
        description="Honoring those who gave their lives in service",
    ),
    # June
    HolidayDefinition(
        id="eid-al-adha", name="Eid al-Adha", short_name="Eid",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=7,
        date_calculator=get_eid_al_adha,
        occurrence_calculator=get_eid_al_adha_occurrences,
        description="Festival of sacrifice",
    ),
    HolidayDefinition(
        id="fathers-day", name="Father's Day", short_name="Dad's Day",
        type=VARIABLE, category=HolidayCategory.OBSERVANCE, priority=7,
        date_calculator=_nth(6, SUNDAY, 3),
        description="Honoring fathers everywhere",
    ),
    HolidayDefinition(
        id="juneteenth", name="Juneteenth",
        type=FIXED, category=HolidayCategory.FEDERAL, priority=8,
        date_calculator=_fixed(6, 19),
        description="Celebrating freedom and emancipation",
    ),
    # July
    HolidayDefinition(
        id="independence-day", name="Independence Day", short_name="July 4th",
        type=FIXED, category=HolidayCategory.FEDERAL, priority=10,
        date_calculator=_fixed(7, 4),
        description="Celebrating American independence",
    ),
    HolidayDefinition(
        id="bastille-day", name="Bastille Day",
        type=FIXED, category=HolidayCategory.CULTURAL, priority=4,
        date_calculator=_fixed(7, 14),
        enabled=False,  # Enable for French communities
        description="French National Day",
    ),
    # September
    HolidayDefinition(
        id="labor-day", name="Labor Day",
        type=VARIABLE, category=HolidayCategory.FEDERAL, priority=8,
        date_calculator=_nth(9, MONDAY, 1),
        description="Celebrating workers and their achievements",
    ),
    HolidayDefinition(
        id="rosh-hashanah", name="Rosh Hashanah",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=7,
        date_calculator=get_rosh_hashanah,
        description="Jewish New Year",
    ),
    HolidayDefinition(
        id="yom-kippur", name="Yom Kippur",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=7,
        date_calculator=get_yom_kippur,
        description="Day of Atonement",
    ),
    # October
    HolidayDefinition(
        id="indigenous-peoples-day", name="Indigenous Peoples' Day", short_name="Indigenous Day",
        type=VARIABLE, category=HolidayCategory.FEDERAL, priority=7,
        date_calculator=_nth(10, MONDAY, 2),
        description="Honoring Indigenous peoples and cultures",
    ),
    HolidayDefinition(
        id="diwali", name="Diwali",
        type=VARIABLE, category=HolidayCategory.CULTURAL, priority=7,
        date_calculator=get_diwali,
        description="Festival of lights",
    ),
    HolidayDefinition(
        id="halloween", name="Halloween",
        type=FIXED, category=HolidayCategory.FUN, priority=8,
        date_calculator=_fixed(10, 31),
        description="Spooky season is here!",
    ),
    # November
    HolidayDefinition(
        id="day-of-the-dead", name="Day of the Dead", short_name="Día de Muertos",
        type=FIXED, category=HolidayCategory.CULTURAL, priority=6,
        date_calculator=_span(11, 1, 2),
        description="Celebrating and remembering loved ones",
    ),
    HolidayDefinition(
        id="veterans-day", name="Veterans Day",
        type=FIXED, category=HolidayCategory.FEDERAL, priority=8,
        date_calculator=_fixed(11, 11),
        description="Honoring all who have served",
    ),
    HolidayDefinition(
        id="thanksgiving", name="Thanksgiving",
        type=VARIABLE, category=HolidayCategory.FEDERAL, priority=9,
        date_calculator=_nth(11, THURSDAY, 4),
        description="A day of gratitude and togetherness",
    ),
    # December
    HolidayDefinition(
        id="hanukkah", name="Hanukkah", short_name="Hanukkah",
        type=VARIABLE, category=HolidayCategory.RELIGIOUS, priority=8,
        date_calculator=get_hanukkah,
        description="Festival of lights",
    ),
    HolidayDefinition(
        id="christmas-eve", name="Christmas Eve",
        type=FIXED, category=HolidayCategory.OBSERVANCE, priority=7,
        date_calculator=_fixed(12, 24),
        description="The night before Christmas",
    ),
    HolidayDefinition(
        id="christmas", name="Christmas",
        type=FIXED, category=HolidayCategory.FEDERAL, priority=10,
        date_calculator=_fixed(12, 25),
        description="Celebrating the holiday season",
    ),
    HolidayDefinition(
        id="kwanzaa", name="Kwanzaa",
        type=FIXED, category=HolidayCategory.CULTURAL, priority=7,
        date_calculator=_span(12, 26, 7),  # December 26 - January 1
        description="Celebrating African heritage and culture",
    ),
    HolidayDefinition(
        id="new-years-eve", name="New Year's Eve", short_name="NYE",
        type=FIXED, category=HolidayCategory.OBSERVANCE, priority=9,
        date_calculator=_fixed(12, 31),
        description="Ring in the new year!",
    ),
)


def priority_sort_key(holiday: HolidayDefinition) -> tuple[int, str]:
    """Highest priority first; equal priorities ordered by id so output never depends on catalog order."""
    return (-holiday.priority, holiday.id)


class HolidayRegistry:
    """Read-only lookup and filtering over a holiday catalog."""

    def __init__(self, holidays: Iterable[HolidayDefinition]):
        self._holidays = tuple(holidays)
        self._by_id: dict[str, HolidayDefinition] = {}
        for holiday in self._holidays:
            if holiday.id in self._by_id:
                raise ValueError(f"Duplicate holiday id: {holiday.id}")
            self._by_id[holiday.id] = holiday

    def __iter__(self):
        return iter(self._holidays)

    def __len__(self) -> int:
        return len(self._holidays)

    @property
    def holidays(self) -> tuple[HolidayDefinition, ...]:
        return self._holidays

    def get_holiday_by_id(self, holiday_id: str) -> Optional[HolidayDefinition]:
        """Lookup ignores enabled/disabled state; disabling is not deletion."""
        return self._by_id.get(holiday_id)

    def get_enabled_holidays(self, disabled_ids: Iterable[str] = ()) -> list[HolidayDefinition]:
        disabled = set(disabled_ids)
        return [h for h in self._holidays if h.enabled and h.id not in disabled]

    def get_holidays_by_category(self, category: HolidayCategory) -> list[HolidayDefinition]:
        category = HolidayCategory(category)
        return [h for h in self._holidays if h.category == category]

    def get_holidays_by_priority(
        self, holidays: Optional[Iterable[HolidayDefinition]] = None,
    ) -> list[HolidayDefinition]:
        source = self._holidays if holidays is None else holidays
        return sorted(source, key=priority_sort_key)

    def get_holidays_in_year(
        self, year: int, disabled_ids: Iterable[str] = (),
    ) -> list[tuple[HolidayDefinition, Optional[HolidayDateRange]]]:
        """
        Evaluate every enabled holiday for a year (admin calendar listing).

        One pair per occurrence, so a holiday that falls twice in `year`
        appears twice. A None range marks a holiday whose algorithm does not
        cover `year`.
        """
        results = []
        for holiday in self.get_enabled_holidays(disabled_ids):
            try:
                occurrences = holiday.ranges_in_year(year) or [None]
            except UnsupportedYearError as e:
                logger.info(
                    "Holiday %s unsupported for %d: %s", holiday.id, year, str(e),
                    extra={"holiday_id": holiday.id, "year": year},
                )
                occurrences = [None]
            results.extend((holiday, dates) for dates in occurrences)
        return results

    def get_all_holiday_ids(self) -> list[str]:
        return [h.id for h in self._holidays]


DEFAULT_REGISTRY = HolidayRegistry(HOLIDAYS)


def get_holiday_by_id(holiday_id: str) -> Optional[HolidayDefinition]:
    return DEFAULT_REGISTRY.get_holiday_by_id(holiday_id)


def get_enabled_holidays(disabled_ids: Iterable[str] = ()) -> list[HolidayDefinition]:
    return DEFAULT_REGISTRY.get_enabled_holidays(disabled_ids)


def get_holidays_by_category(category: HolidayCategory) -> list[HolidayDefinition]:
    return DEFAULT_REGISTRY.get_holidays_by_category(category)


def get_holidays_in_year(
    year: int, disabled_ids: Iterable[str] = (),
) -> list[tuple[HolidayDefinition, Optional[HolidayDateRange]]]:
    return DEFAULT_REGISTRY.get_holidays_in_year(year, disabled_ids)


def get_all_holiday_ids() -> list[str]:
    return DEFAULT_REGISTRY.get_all_holiday_ids()
