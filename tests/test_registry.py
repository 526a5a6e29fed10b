"""
Holiday registry tests - catalog integrity, lookups and year enumeration.
"""
import pytest
from datetime import date

from holidaytheme.services.registry import (
    DEFAULT_REGISTRY,
    HOLIDAYS,
    HolidayCategory,
    HolidayRegistry,
    get_all_holiday_ids,
    get_enabled_holidays,
    get_holiday_by_id,
    get_holidays_by_category,
    get_holidays_in_year,
)
from holidaytheme.services.themes import HOLIDAY_THEMES
from holidaytheme.utils.calendar_math import DATE_YEARS, UnsupportedYearError, get_eid_al_fitr_occurrences


class TestCatalog:
    def test_has_37_holidays(self):
        assert len(HOLIDAYS) == 37
        assert len(DEFAULT_REGISTRY) == 37

    def test_ids_are_unique(self):
        ids = get_all_holiday_ids()
        assert len(ids) == len(set(ids))

    def test_priorities_in_range(self):
        assert all(1 <= h.priority <= 10 for h in HOLIDAYS)

    def test_every_holiday_has_a_theme(self):
        assert set(get_all_holiday_ids()) == set(HOLIDAY_THEMES)

    def test_bastille_day_disabled_by_default(self):
        assert get_holiday_by_id("bastille-day").enabled is False
        assert "bastille-day" not in [h.id for h in get_enabled_holidays()]

    def test_every_enabled_holiday_computes_2025(self):
        for holiday in get_enabled_holidays():
            dates = holiday.date_calculator(2025)
            assert dates.total_days >= 1, holiday.id

    def test_invalid_priority_rejected(self, holiday_factory):
        with pytest.raises(ValueError):
            holiday_factory("too-loud", 11, (1, 1), (1, 1))

    def test_duplicate_ids_rejected(self, holiday_factory):
        with pytest.raises(ValueError):
            HolidayRegistry([
                holiday_factory("twin", 5, (1, 1), (1, 1)),
                holiday_factory("twin", 6, (2, 1), (2, 1)),
            ])


class TestLookups:
    def test_get_by_id(self):
        holiday = get_holiday_by_id("thanksgiving")
        assert holiday.name == "Thanksgiving"
        assert holiday.priority == 9

    def test_unknown_id_returns_none(self):
        assert get_holiday_by_id("festivus") is None

    def test_disabled_ids_excluded_from_enabled(self):
        enabled = [h.id for h in get_enabled_holidays(["halloween"])]
        assert "halloween" not in enabled
        assert "christmas" in enabled

    def test_disabled_holiday_still_found_by_id(self):
        get_enabled_holidays(["halloween"])
        assert get_holiday_by_id("halloween") is not None

    def test_by_category(self):
        religious = {h.id for h in get_holidays_by_category(HolidayCategory.RELIGIOUS)}
        assert {"easter", "hanukkah", "eid-al-fitr", "yom-kippur"} <= religious
        assert "christmas" not in religious

    def test_by_category_accepts_string(self):
        assert get_holidays_by_category("fun") == get_holidays_by_category(HolidayCategory.FUN)

    def test_by_priority_orders_highest_first_then_id(self, small_registry):
        ordered = [h.id for h in small_registry.get_holidays_by_priority()]
        assert ordered == ["spring-gala", "autumn-fest", "spring-fair"]

    def test_by_priority_ties_break_on_id(self, holiday_factory):
        registry = HolidayRegistry([
            holiday_factory("zulu", 7, (1, 1), (1, 1)),
            holiday_factory("alpha", 7, (1, 1), (1, 1)),
        ])
        assert [h.id for h in registry.get_holidays_by_priority()] == ["alpha", "zulu"]


class TestHolidaysInYear:
    def test_pairs_every_enabled_holiday_with_dates(self):
        entries = get_holidays_in_year(2025)
        assert len(entries) == 36
        by_id = {h.id: dates for h, dates in entries}
        assert by_id["independence-day"].start == date(2025, 7, 4)
        assert by_id["thanksgiving"].start == date(2025, 11, 27)

    def test_disabled_ids_omitted(self):
        ids = [h.id for h, _ in get_holidays_in_year(2025, ["christmas"])]
        assert "christmas" not in ids

    def test_unsupported_year_yields_none(self):
        by_id = {h.id: dates for h, dates in get_holidays_in_year(2040)}
        assert by_id["diwali"] is None
        assert by_id["holi"] is None
        assert by_id["christmas"].start == date(2040, 12, 25)

    def test_custom_registry(self, holiday_factory, unsupported):
        registry = HolidayRegistry([
            holiday_factory("tabled", 5, (1, 1), (1, 1), date_calculator=unsupported),
            holiday_factory("plain", 5, (6, 1), (6, 2)),
        ])
        result = dict((h.id, d) for h, d in registry.get_holidays_in_year(2030))
        assert result["tabled"] is None
        assert result["plain"].total_days == 2

    def test_second_eid_occurrence_listed(self):
        entries = get_holidays_in_year(2033)
        eid = [dates for h, dates in entries if h.id == "eid-al-fitr"]
        assert eid == get_eid_al_fitr_occurrences(2033)
        assert len(eid) == 2
        assert eid[0].start < eid[1].start

    def test_single_occurrence_holidays_listed_once(self):
        ids = [h.id for h, _ in get_holidays_in_year(2033)]
        assert ids.count("christmas") == 1
        assert len(set(ids)) == 36


# ---------------------------------------------------------------------------
# Limits of the representable calendar
# ---------------------------------------------------------------------------


class TestYearLimits:
    @pytest.mark.parametrize("year", [0, -5, 10000])
    def test_years_outside_datetime_unsupported(self, year):
        christmas = get_holiday_by_id("christmas")
        with pytest.raises(UnsupportedYearError) as exc_info:
            christmas.ranges_in_year(year)
        assert exc_info.value.supported == DATE_YEARS

    def test_range_running_past_9999_unsupported(self):
        kwanzaa = get_holiday_by_id("kwanzaa")
        with pytest.raises(UnsupportedYearError) as exc_info:
            kwanzaa.ranges_in_year(9999)
        assert exc_info.value.holiday == "Kwanzaa"

    def test_first_and_last_years_still_computed(self):
        assert get_holiday_by_id("new-years-day").ranges_in_year(1)[0].start == date(1, 1, 1)
        assert get_holiday_by_id("christmas").ranges_in_year(9999)[0].start == date(9999, 12, 25)

    def test_listing_for_9999_marks_overflowing_holidays(self):
        by_id = {h.id: dates for h, dates in get_holidays_in_year(9999)}
        assert by_id["kwanzaa"] is None
        assert by_id["new-years-eve"].start == date(9999, 12, 31)
