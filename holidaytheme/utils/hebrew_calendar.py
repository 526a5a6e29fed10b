"""
Arithmetic Hebrew calendar - converts Hebrew dates to Gregorian dates.

Uses the fixed (molad-based) calendar with the postponement rules, so it
works for any Hebrew year without lookup tables. Day numbers are Python
proleptic Gregorian ordinals (date.toordinal()), which share their epoch
with the "rata die" count used by the conversion formulas.

Hebrew days start at sunset; every Gregorian date returned here is the
civil day whose daytime carries the Hebrew date.
"""
from datetime import date

# Ordinal of 1 Tishrei AM 1 (Julian October 7, 3761 BCE)
HEBREW_EPOCH = -1373427

# Gregorian year + offset = Hebrew year for the autumn (Tishrei..Kislev) months
AUTUMN_YEAR_OFFSET = 3761
# Gregorian year + offset = Hebrew year for the spring (Adar..Nisan) months
SPRING_YEAR_OFFSET = 3760

COMMON_MONTHS = (
    "Tishrei", "Cheshvan", "Kislev", "Tevet", "Shevat", "Adar",
    "Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
)
LEAP_MONTHS = (
    "Tishrei", "Cheshvan", "Kislev", "Tevet", "Shevat", "Adar I",
    "Adar II", "Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
)


def is_hebrew_leap_year(h_year: int) -> bool:
    """Leap years (13 months) are years 3, 6, 8, 11, 14, 17 and 19 of the cycle."""
    return (7 * h_year + 1) % 19 < 7


def _elapsed_days(h_year: int) -> int:
    """Days from the epoch to the molad of Tishrei, with the Monday/Wednesday/Friday rule."""
    months_elapsed = (235 * h_year - 234) // 19
    parts_elapsed = 12084 + 13753 * months_elapsed
    days = 29 * months_elapsed + parts_elapsed // 25920
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def _year_length_correction(h_year: int) -> int:
    """Postponement keeping year lengths within 353-355 / 383-385 days."""
    ny0 = _elapsed_days(h_year - 1)
    ny1 = _elapsed_days(h_year)
    ny2 = _elapsed_days(h_year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


def hebrew_new_year(h_year: int) -> int:
    """Ordinal of 1 Tishrei of the given Hebrew year."""
    return HEBREW_EPOCH + _elapsed_days(h_year) + _year_length_correction(h_year)


def days_in_hebrew_year(h_year: int) -> int:
    return hebrew_new_year(h_year + 1) - hebrew_new_year(h_year)


def month_names(h_year: int) -> tuple:
    return LEAP_MONTHS if is_hebrew_leap_year(h_year) else COMMON_MONTHS


def month_lengths(h_year: int) -> list[int]:
    """
    Month lengths in Tishrei order.

    Cheshvan and Kislev vary with the year type:
    deficient (353/383) 29/29, regular (354/384) 29/30, complete (355/385) 30/30.
    """
    year_days = days_in_hebrew_year(h_year)
    kind = year_days % 10  # 3 deficient, 4 regular, 5 complete
    cheshvan = 30 if kind == 5 else 29
    kislev = 29 if kind == 3 else 30
    if is_hebrew_leap_year(h_year):
        return [30, cheshvan, kislev, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29]
    return [30, cheshvan, kislev, 29, 30, 29, 30, 29, 30, 29, 30, 29]


def hebrew_to_gregorian(h_year: int, month: str, day: int) -> date:
    """
    Convert a Hebrew date to its Gregorian civil day.

    `month` is a month name from COMMON_MONTHS / LEAP_MONTHS. Plain "Adar"
    in a leap year means Adar II, where Purim and other Adar dates fall.
    """
    names = month_names(h_year)
    if month == "Adar" and is_hebrew_leap_year(h_year):
        month = "Adar II"
    if month not in names:
        raise ValueError(f"Unknown Hebrew month {month!r} for year {h_year}")

    index = names.index(month)
    lengths = month_lengths(h_year)
    if not 1 <= day <= lengths[index]:
        raise ValueError(f"{month} {h_year} has no day {day}")

    ordinal = hebrew_new_year(h_year) + sum(lengths[:index]) + day - 1
    if not date.min.toordinal() <= ordinal <= date.max.toordinal():
        raise OverflowError(f"{day} {month} {h_year} is outside the Gregorian years 1-9999")
    return date.fromordinal(ordinal)
