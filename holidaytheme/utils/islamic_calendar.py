"""
Tabular (arithmetic) Islamic calendar.

Real-world Islamic feasts depend on local moon sighting. The arithmetic
calendar used here (civil epoch, 11 leap years per 30-year cycle) is a
calculated approximation: observed dates can differ by +-1 day, sometimes
by region. Callers treat that shift as expected, not as a bug.
"""
from datetime import date

MIN_ORDINAL = date.min.toordinal()
MAX_ORDINAL = date.max.toordinal()

# Ordinal of 1 Muharram AH 1 (Julian July 16, 622)
ISLAMIC_EPOCH = 227015

# Mean Gregorian years per Islamic year (365.2425 / 354.367)
_YEAR_RATIO = 1.030689


def is_islamic_leap_year(h_year: int) -> bool:
    return (14 + 11 * h_year) % 30 < 11


def islamic_to_ordinal(h_year: int, month: int, day: int) -> int:
    """Proleptic Gregorian ordinal of an arithmetic Hijri date (months 1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid Islamic month {month}")
    month_days = 30 if month % 2 == 1 else 29
    if month == 12 and is_islamic_leap_year(h_year):
        month_days = 30
    if not 1 <= day <= month_days:
        raise ValueError(f"Month {month} of AH {h_year} has no day {day}")

    return (
        day
        + 29 * (month - 1)
        + (6 * month - 1) // 11
        + (h_year - 1) * 354
        + (3 + 11 * h_year) // 30
        + ISLAMIC_EPOCH
        - 1
    )


def islamic_to_gregorian(h_year: int, month: int, day: int) -> date:
    return date.fromordinal(islamic_to_ordinal(h_year, month, day))


def islamic_dates_in_gregorian_year(year: int, month: int, day: int) -> list[date]:
    """
    Every Gregorian date in `year` that carries the Hijri (month, day).

    The Islamic year is ~11 days shorter, so a Gregorian year holds one
    occurrence and occasionally two (Eid al-Fitr in 2033, for example).
    """
    estimate = int((year - 622) * _YEAR_RATIO)
    found = []
    for h_year in range(estimate - 2, estimate + 3):
        if h_year < 1:
            continue
        ordinal = islamic_to_ordinal(h_year, month, day)
        # Candidates past either end of datetime's range cannot fall in `year`
        if not MIN_ORDINAL <= ordinal <= MAX_ORDINAL:
            continue
        converted = date.fromordinal(ordinal)
        if converted.year == year:
            found.append(converted)
    return sorted(found)
