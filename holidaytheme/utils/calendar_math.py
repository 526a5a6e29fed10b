"""
Holiday date computation - exact date ranges for any holiday in any year.

Covers fixed dates, nth-weekday rules, Easter, Hebrew, Chinese lunisolar,
Hindu and Islamic festivals. Uses dateutil for the Easter computus and
lunardate for the Chinese calendar.
All computations are pure functions of the Gregorian year: no I/O, no clock.

Ranges are whole local calendar days with an inclusive end. The timezone is
applied by the caller when it turns an instant into a local date.
A range that would cross the first or last year datetime can represent
raises OverflowError, as datetime arithmetic does.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union

from dateutil.easter import EASTER_WESTERN, easter
from lunardate import LunarDate

from holidaytheme.utils.hebrew_calendar import (
    AUTUMN_YEAR_OFFSET,
    SPRING_YEAR_OFFSET,
    hebrew_to_gregorian,
)
from holidaytheme.utils.islamic_calendar import islamic_dates_in_gregorian_year

Moment = Union[date, datetime]

# Sentinel ordinal for "last occurrence in month"
LAST = -1

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

DATE_YEARS = (date.min.year, date.max.year)


class UnsupportedYearError(ValueError):
    """Raised when a holiday's algorithm has no data for the requested year."""

    def __init__(self, holiday: str, year: int, supported: tuple[int, int]):
        self.holiday = holiday
        self.year = year
        self.supported = supported
        super().__init__(
            f"{holiday} dates are not available for {year} "
            f"(supported {supported[0]}-{supported[1]})"
        )


@dataclass(frozen=True)
class HolidayDateRange:
    """Inclusive range of local calendar days for one holiday occurrence."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Holiday range starts after it ends: {self.start} > {self.end}")

    @property
    def total_days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, moment: Moment) -> bool:
        return self.start <= _as_date(moment) <= self.end

    def day_of_holiday(self, moment: Moment) -> int:
        """1-indexed day within the range, clamped to total_days. 0 when outside."""
        if not self.contains(moment):
            return 0
        day = (_as_date(moment) - self.start).days + 1
        return max(1, min(day, self.total_days))


def _as_date(moment: Moment) -> date:
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def _span(start: date, total_days: int) -> HolidayDateRange:
    return HolidayDateRange(start=start, end=start + timedelta(days=total_days - 1))


# ---------------------------------------------------------------------------
# Fixed dates
# ---------------------------------------------------------------------------

def get_fixed_date(year: int, month: int, day: int, total_days: int = 1) -> HolidayDateRange:
    """Same calendar date every year, one day long unless total_days says otherwise."""
    if total_days < 1:
        raise ValueError(f"total_days must be >= 1, got {total_days}")
    return _span(date(year, month, day), total_days)


def get_fixed_span(year: int, month: int, day: int, total_days: int) -> HolidayDateRange:
    """Fixed multi-day span starting on (month, day); may run into the next year."""
    return get_fixed_date(year, month, day, total_days)


# ---------------------------------------------------------------------------
# Nth weekday of month (e.g. "4th Thursday of November")
# ---------------------------------------------------------------------------

def _nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """
    Find the nth occurrence of a weekday in a given month.
    weekday: 0=Monday, 6=Sunday
    n: 1-based (1st, 2nd, 3rd, etc.)
    """
    first_day = date(year, month, 1)
    days_ahead = weekday - first_day.weekday()
    if days_ahead < 0:
        days_ahead += 7
    result = first_day + timedelta(days=days_ahead, weeks=n - 1)
    if result.month != month:
        raise ValueError(f"No occurrence {n} of weekday {weekday} in {year}-{month:02d}")
    return result


def _last_weekday(year: int, month: int, weekday: int) -> date:
    """Find the last occurrence of a weekday in a given month."""
    if month == 12:
        last_day = date(year, 12, 31)
    else:
        last_day = date(year, month + 1, 1) - timedelta(days=1)
    days_back = (last_day.weekday() - weekday) % 7
    return last_day - timedelta(days=days_back)


def get_nth_weekday(year: int, month: int, weekday: int, n: int) -> HolidayDateRange:
    """Single-day range for the nth (or LAST) weekday of a month."""
    if n == LAST:
        return _span(_last_weekday(year, month, weekday), 1)
    if n < 1:
        raise ValueError(f"Occurrence must be >= 1 or LAST, got {n}")
    return _span(_nth_weekday(year, month, weekday, n), 1)


# ---------------------------------------------------------------------------
# Easter (Gregorian computus)
# ---------------------------------------------------------------------------

# Range dateutil's western computus accepts
EASTER_YEARS = (1583, 4099)


def _easter_sunday(year: int) -> date:
    if not EASTER_YEARS[0] <= year <= EASTER_YEARS[1]:
        raise UnsupportedYearError("Easter", year, EASTER_YEARS)
    return easter(year, EASTER_WESTERN)


def get_easter(year: int) -> HolidayDateRange:
    return _span(_easter_sunday(year), 1)


def get_good_friday(year: int) -> HolidayDateRange:
    return _span(_easter_sunday(year) - timedelta(days=2), 1)


# ---------------------------------------------------------------------------
# Hebrew calendar holidays
# ---------------------------------------------------------------------------

def get_rosh_hashanah(year: int) -> HolidayDateRange:
    """1-2 Tishrei; the Hebrew year that begins in this Gregorian autumn."""
    return _span(hebrew_to_gregorian(year + AUTUMN_YEAR_OFFSET, "Tishrei", 1), 2)


def get_yom_kippur(year: int) -> HolidayDateRange:
    return _span(hebrew_to_gregorian(year + AUTUMN_YEAR_OFFSET, "Tishrei", 10), 1)


def get_hanukkah(year: int) -> HolidayDateRange:
    """
    Eight nights of candle lighting.

    The first candle is lit on the evening that opens 25 Kislev, so day 1 is
    the civil day before 25 Kislev. Late-December Hanukkah runs into January.
    """
    kislev_25 = hebrew_to_gregorian(year + AUTUMN_YEAR_OFFSET, "Kislev", 25)
    return _span(kislev_25 - timedelta(days=1), 8)


def get_passover(year: int) -> HolidayDateRange:
    """15-22 Nisan (eight days, diaspora observance)."""
    return _span(hebrew_to_gregorian(year + SPRING_YEAR_OFFSET, "Nisan", 15), 8)


def get_purim(year: int) -> HolidayDateRange:
    """14 Adar, or 14 Adar II in a Hebrew leap year."""
    return _span(hebrew_to_gregorian(year + SPRING_YEAR_OFFSET, "Adar", 14), 1)


# ---------------------------------------------------------------------------
# Lunar New Year (Chinese calendar)
# ---------------------------------------------------------------------------

LUNARDATE_YEARS = (1900, 2099)
LUNAR_NEW_YEAR_DAYS = 15  # Spring Festival through the Lantern Festival

ZODIAC_ANIMALS = (
    "Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
    "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig",
)


def get_lunar_new_year(year: int) -> HolidayDateRange:
    if not LUNARDATE_YEARS[0] <= year <= LUNARDATE_YEARS[1]:
        raise UnsupportedYearError("Lunar New Year", year, LUNARDATE_YEARS)
    return _span(LunarDate(year, 1, 1).to_solar_date(), LUNAR_NEW_YEAR_DAYS)


def get_chinese_zodiac(year: int) -> str:
    """Zodiac animal of the lunar year that starts in `year` (2020 = Rat)."""
    return ZODIAC_ANIMALS[(year - 4) % 12]


# ---------------------------------------------------------------------------
# Hindu lunisolar festivals
# ---------------------------------------------------------------------------

# Lakshmi Puja (Amavasya of Kartika, amanta reckoning) and Rangwali Holi
# (day after Phalguna Purnima) as published in the Drik Panchang almanac for
# New Delhi. Regenerate from the same source when extending the range.
SUPPORTED_TABLE_YEARS = (2020, 2035)

DIWALI_DATES = {
    2020: date(2020, 11, 14),
    2021: date(2021, 11, 4),
    2022: date(2022, 10, 24),
    2023: date(2023, 11, 12),
    2024: date(2024, 11, 1),
    2025: date(2025, 10, 20),
    2026: date(2026, 11, 8),
    2027: date(2027, 10, 29),
    2028: date(2028, 10, 17),
    2029: date(2029, 11, 5),
    2030: date(2030, 10, 26),
    2031: date(2031, 10, 15),
    2032: date(2032, 11, 2),
    2033: date(2033, 10, 22),
    2034: date(2034, 11, 10),
    2035: date(2035, 10, 30),
}

HOLI_DATES = {
    2020: date(2020, 3, 10),
    2021: date(2021, 3, 29),
    2022: date(2022, 3, 18),
    2023: date(2023, 3, 8),
    2024: date(2024, 3, 25),
    2025: date(2025, 3, 14),
    2026: date(2026, 3, 3),
    2027: date(2027, 3, 22),
    2028: date(2028, 3, 11),
    2029: date(2029, 3, 1),
    2030: date(2030, 3, 20),
    2031: date(2031, 3, 9),
    2032: date(2032, 2, 27),
    2033: date(2033, 3, 16),
    2034: date(2034, 3, 6),
    2035: date(2035, 3, 25),
}


def get_diwali(year: int) -> HolidayDateRange:
    """Five days, Dhanteras through Bhai Dooj; Lakshmi Puja is day 3."""
    lakshmi_puja = DIWALI_DATES.get(year)
    if lakshmi_puja is None:
        raise UnsupportedYearError("Diwali", year, SUPPORTED_TABLE_YEARS)
    return _span(lakshmi_puja - timedelta(days=2), 5)


def get_holi(year: int) -> HolidayDateRange:
    """Holika Dahan (the evening before) plus Rangwali Holi."""
    rangwali = HOLI_DATES.get(year)
    if rangwali is None:
        raise UnsupportedYearError("Holi", year, SUPPORTED_TABLE_YEARS)
    return _span(rangwali - timedelta(days=1), 2)


# ---------------------------------------------------------------------------
# Islamic festivals (tabular approximation, +-1 day vs. moon sighting)
# ---------------------------------------------------------------------------

EID_AL_FITR_DAYS = 3
EID_AL_ADHA_DAYS = 4
# First Gregorian year with a full Hijri year; upper bound is date's limit
ISLAMIC_YEARS = (623, 9998)


def get_eid_al_fitr_occurrences(year: int) -> list[HolidayDateRange]:
    """1 Shawwal; a Gregorian year can contain two of them."""
    return [_span(d, EID_AL_FITR_DAYS) for d in islamic_dates_in_gregorian_year(year, 10, 1)]


def get_eid_al_adha_occurrences(year: int) -> list[HolidayDateRange]:
    """10 Dhu al-Hijjah."""
    return [_span(d, EID_AL_ADHA_DAYS) for d in islamic_dates_in_gregorian_year(year, 12, 10)]


def _first_occurrence(name: str, year: int, occurrences: list[HolidayDateRange]) -> HolidayDateRange:
    if not occurrences:
        raise UnsupportedYearError(name, year, ISLAMIC_YEARS)
    return occurrences[0]


def get_eid_al_fitr(year: int) -> HolidayDateRange:
    return _first_occurrence("Eid al-Fitr", year, get_eid_al_fitr_occurrences(year))


def get_eid_al_adha(year: int) -> HolidayDateRange:
    return _first_occurrence("Eid al-Adha", year, get_eid_al_adha_occurrences(year))


# ---------------------------------------------------------------------------
# Super Bowl Sunday
# ---------------------------------------------------------------------------

# First Super Bowl after the 17-game regular season (LVI, Feb 13, 2022)
SEVENTEEN_GAME_SEASON_YEAR = 2022

# Scheduled game days; several are the first Sunday of February
SUPER_BOWL_DATES = {
    2024: date(2024, 2, 11),  # LVIII
    2025: date(2025, 2, 9),   # LIX
    2026: date(2026, 2, 8),   # LX
    2027: date(2027, 2, 7),   # LXI
    2028: date(2028, 2, 6),   # LXII
    2029: date(2029, 2, 11),  # LXIII
    2030: date(2030, 2, 10),  # LXIV
    2031: date(2031, 2, 9),   # LXV
    2032: date(2032, 2, 8),   # LXVI
    2033: date(2033, 2, 6),   # LXVII
    2034: date(2034, 2, 5),   # LXVIII
    2035: date(2035, 2, 4),   # LXIX
}


def get_super_bowl(year: int) -> HolidayDateRange:
    """
    Scheduled game day when known, otherwise estimated from the season length:
    first Sunday of February through 2021, second Sunday from 2022.
    """
    scheduled = SUPER_BOWL_DATES.get(year)
    if scheduled is not None:
        return _span(scheduled, 1)
    n = 2 if year >= SEVENTEEN_GAME_SEASON_YEAR else 1
    return get_nth_weekday(year, 2, SUNDAY, n)


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def is_date_in_holiday(moment: Moment, holiday: HolidayDateRange) -> bool:
    """Check whether a local date (or local wall-clock datetime) falls within a holiday."""
    return holiday.contains(moment)


def get_day_of_holiday(moment: Moment, holiday: HolidayDateRange) -> int:
    """1-indexed day of a multi-day holiday, or 0 if the date is outside it."""
    return holiday.day_of_holiday(moment)
