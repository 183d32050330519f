"""
tests/calendars/test_holiday_calendars.py

Covers:
  - Holiday rules of the shipped calendars (NYSE, US settlement, Brazil, Australia)
  - Calendar handle identity (value equality, hashing, display name, pickling)
  - Scalar business-day arithmetic: advance, roll-forward, counting
  - NumPy array inputs and broadcasting
  - Horizon auto-extension
"""

import pickle
from datetime import date, datetime

import numpy as np
import pytest

from businessdays.calendars import (
    Australia,
    BRSettlement,
    CalendarError,
    NullHolidayCalendar,
    USNYSE,
    USSettlement,
    WeekendsOnly,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def nyse():
    return USNYSE()


@pytest.fixture
def brazil():
    return BRSettlement()


def d64(*days):
    return np.array(days, dtype="datetime64[D]")


# ── Holiday rules ─────────────────────────────────────────────────────────────

class TestHolidayRules:

    def test_nyse_2023_holidays(self, nyse):
        assert nyse.list_holidays(date(2023, 1, 1), date(2023, 12, 31)) == [
            date(2023, 1, 2),    # New Year's Day (observed)
            date(2023, 1, 16),   # Martin Luther King Jr. Day
            date(2023, 2, 20),   # Washington's Birthday
            date(2023, 4, 7),    # Good Friday
            date(2023, 5, 29),   # Memorial Day
            date(2023, 6, 19),   # Juneteenth
            date(2023, 7, 4),    # Independence Day
            date(2023, 9, 4),    # Labor Day
            date(2023, 11, 23),  # Thanksgiving
            date(2023, 12, 25),  # Christmas
        ]

    def test_nyse_does_not_observe_saturday_new_year(self, nyse):
        # 2022-01-01 was a Saturday; NYSE stayed open on Friday 2021-12-31.
        assert nyse.is_bday(date(2021, 12, 31))
        assert not USSettlement().is_bday(date(2021, 12, 31))

    def test_nyse_saturday_christmas_closes_friday(self, nyse):
        assert not nyse.is_bday(date(2021, 12, 24))

    def test_nyse_special_closures(self, nyse):
        assert not nyse.is_bday(date(2025, 1, 9))
        assert not nyse.is_bday(date(2012, 10, 29))
        assert USSettlement().is_bday(date(2025, 1, 9))

    def test_us_settlement_has_columbus_and_veterans_day(self, nyse):
        settlement = USSettlement()
        assert not settlement.is_bday(date(2023, 10, 9))
        assert not settlement.is_bday(date(2023, 11, 10))   # Nov 11 is a Saturday
        assert nyse.is_bday(date(2023, 10, 9))

    def test_brazil_carnival_and_corpus_christi(self, brazil):
        assert not brazil.is_bday(date(2023, 2, 20))
        assert not brazil.is_bday(date(2023, 2, 21))
        assert not brazil.is_bday(date(2023, 6, 8))
        assert brazil.is_bday(date(2023, 2, 22))

    def test_brazil_black_consciousness_from_2024(self, brazil):
        assert brazil.is_bday(date(2023, 11, 20))
        assert not brazil.is_bday(date(2024, 11, 20))

    def test_weekend_holiday_is_holiday_but_not_listed(self, brazil):
        # Independence Day 2024 fell on a Saturday.
        assert brazil.is_holiday(date(2024, 9, 7))
        assert date(2024, 9, 7) not in brazil.list_holidays(date(2024, 1, 1), date(2024, 12, 31))

    def test_australia_states_differ(self):
        act, nsw = Australia("ACT"), Australia("NSW")
        canberra_day = date(2023, 3, 13)
        bank_holiday = date(2023, 8, 7)
        assert not act.is_bday(canberra_day)
        assert nsw.is_bday(canberra_day)
        assert act.is_bday(bank_holiday)
        assert not nsw.is_bday(bank_holiday)

    def test_australia_christmas_substitution(self):
        act = Australia("ACT")
        # 2021-12-25 Saturday and 2021-12-26 Sunday → Monday 27 and Tuesday 28 off.
        assert not act.is_bday(date(2021, 12, 27))
        assert not act.is_bday(date(2021, 12, 28))
        assert act.is_bday(date(2021, 12, 29))

    def test_act_reconciliation_day(self):
        assert not Australia("ACT").is_bday(date(2023, 5, 29))
        assert Australia("NSW").is_bday(date(2023, 5, 29))

    def test_unsupported_state_raises(self):
        with pytest.raises(CalendarError):
            Australia("XYZ")

    def test_weekends_only(self):
        cal = WeekendsOnly()
        assert cal.is_bday(date(2023, 12, 25))
        assert not cal.is_bday(date(2023, 12, 23))

    def test_null_calendar_every_day_is_bday(self):
        cal = NullHolidayCalendar()
        assert cal.is_bday(date(2023, 1, 7))
        assert cal.advance_bdays(date(2023, 1, 6), 2) == date(2023, 1, 8)


# ── Handle identity ───────────────────────────────────────────────────────────

class TestIdentity:

    def test_same_class_same_params_equal(self):
        assert USNYSE() == USNYSE()
        assert hash(USNYSE()) == hash(USNYSE())
        assert Australia("ACT") == Australia("ACT")

    def test_same_class_different_params_differ(self):
        assert Australia("ACT") != Australia("NSW")
        assert hash(Australia("ACT")) != hash(Australia("NSW"))

    def test_different_classes_differ(self):
        assert USNYSE() != USSettlement()
        assert WeekendsOnly() != NullHolidayCalendar()

    def test_display_name_is_kind(self):
        assert USNYSE().name == "USNYSE"
        assert Australia("NSW").name == "Australia"

    def test_repr_shows_parameters(self):
        assert repr(USNYSE()) == "USNYSE()"
        assert repr(Australia("ACT")) == "Australia('ACT')"

    def test_pickle_round_trip(self, nyse):
        nyse.is_bday(date(2023, 1, 3))   # populate the cache
        assert pickle.loads(pickle.dumps(nyse)) == nyse
        assert pickle.loads(pickle.dumps(Australia("ACT"))) == Australia("ACT")


# ── Scalar business-day arithmetic ────────────────────────────────────────────

class TestScalarArithmetic:

    def test_advance_skips_weekend(self, nyse):
        assert nyse.advance_bdays(date(2023, 1, 3), 5) == date(2023, 1, 10)

    def test_advance_skips_weekend_and_holiday(self, nyse):
        assert nyse.advance_bdays(date(2023, 1, 13), 1) == date(2023, 1, 17)

    def test_advance_backward(self, nyse):
        assert nyse.advance_bdays(date(2023, 1, 17), -1) == date(2023, 1, 13)
        assert nyse.advance_bdays(date(2023, 1, 10), -5) == date(2023, 1, 3)

    def test_zero_count_on_business_day_is_identity(self, nyse):
        assert nyse.advance_bdays(date(2023, 1, 3), 0) == date(2023, 1, 3)

    def test_zero_count_rolls_weekend_forward(self, nyse):
        assert nyse.advance_bdays(date(2023, 1, 7), 0) == date(2023, 1, 9)

    def test_negative_count_rolls_forward_first(self, nyse):
        # Saturday rolls to Monday 2023-01-09 before walking back one day.
        assert nyse.advance_bdays(date(2023, 1, 7), -1) == date(2023, 1, 6)

    def test_datetime_collapses_to_date(self, nyse):
        result = nyse.advance_bdays(datetime(2023, 1, 3, 12, 30), 5)
        assert result == date(2023, 1, 10)
        assert type(result) is date

    def test_datetime64_scalar_stays_datetime64(self, nyse):
        result = nyse.advance_bdays(np.datetime64("2023-01-03"), 5)
        assert result == np.datetime64("2023-01-10")
        assert isinstance(result, np.datetime64)

    def test_non_integer_count_raises(self, nyse):
        with pytest.raises(CalendarError):
            nyse.advance_bdays(date(2023, 1, 3), 1.5)

    def test_result_outside_date_range_raises(self):
        cal = WeekendsOnly()
        with pytest.raises(OverflowError):
            cal.advance_bdays(date(9999, 12, 30), 5)
        with pytest.raises(OverflowError):
            cal.advance_bdays([date(2023, 1, 3), date(9999, 12, 30)], 5)
        expected = np.datetime64("9999-12-30") + np.timedelta64(7, "D")
        assert cal.advance_bdays(np.datetime64("9999-12-30"), 5) == expected

    def test_to_bday(self, nyse):
        assert nyse.to_bday(date(2023, 1, 7)) == date(2023, 1, 9)
        assert nyse.to_bday(date(2023, 1, 7), forward=False) == date(2023, 1, 6)
        assert nyse.to_bday(date(2023, 1, 3)) == date(2023, 1, 3)

    def test_bdays_counts_half_open_interval(self, nyse):
        assert nyse.bdays(date(2023, 1, 3), date(2023, 1, 10)) == 5
        assert nyse.bdays(date(2023, 1, 10), date(2023, 1, 3)) == -5
        assert nyse.bdays(date(2023, 1, 1), date(2023, 2, 1)) == 20

    def test_advance_then_back_returns_to_business_day(self, nyse):
        start = date(2023, 1, 3)
        for n in (1, 7, 63, 252, 2520):
            assert nyse.advance_bdays(nyse.advance_bdays(start, n), -n) == start


# ── NumPy array inputs ────────────────────────────────────────────────────────

class TestNumPyInputs:

    def test_datetime64_array(self, nyse):
        anchors = d64("2023-01-03", "2023-01-13", "2023-01-07")
        result = nyse.advance_bdays(anchors, np.array([5, 1, 0]))
        np.testing.assert_array_equal(result, d64("2023-01-10", "2023-01-17", "2023-01-09"))

    def test_broadcast_scalar_count(self, nyse):
        anchors = d64("2023-01-03", "2023-01-04", "2023-01-05")
        result = nyse.advance_bdays(anchors, 1)
        np.testing.assert_array_equal(result, d64("2023-01-04", "2023-01-05", "2023-01-06"))

    def test_broadcast_scalar_anchor(self, nyse):
        result = nyse.advance_bdays(date(2023, 1, 3), [0, 1, 5])
        assert list(result) == [date(2023, 1, 3), date(2023, 1, 4), date(2023, 1, 10)]

    def test_list_of_dates_returns_dates(self, nyse):
        result = nyse.advance_bdays([date(2023, 1, 13), datetime(2023, 1, 7, 9)], 1)
        assert result.dtype == object
        assert list(result) == [date(2023, 1, 17), date(2023, 1, 10)]

    def test_non_date_elements_rejected(self, nyse):
        with pytest.raises(TypeError):
            nyse.advance_bdays([1, 2], 1)
        with pytest.raises(TypeError):
            nyse.advance_bdays(np.array([date(2023, 1, 3), 19000], dtype=object), 1)

    def test_iso_text_array(self, nyse):
        result = nyse.advance_bdays(np.array(["2023-01-13"]), 1)
        assert list(result) == [date(2023, 1, 17)]

    def test_2d_shape_preserved(self, nyse):
        anchors = np.full((2, 3), np.datetime64("2023-01-03"))
        assert nyse.advance_bdays(anchors, 1).shape == (2, 3)

    def test_is_bday_array(self, nyse):
        result = nyse.is_bday(d64("2023-01-02", "2023-01-03", "2023-01-07"))
        np.testing.assert_array_equal(result, [False, True, False])

    def test_array_consistency_with_scalar(self, nyse):
        rng = np.random.default_rng(42)
        anchors = np.datetime64("2020-01-01") + rng.integers(0, 2000, size=40)
        counts = rng.integers(-300, 300, size=40)
        array_result = nyse.advance_bdays(anchors, counts)
        scalar_results = [
            nyse.advance_bdays(a.item(), int(c)) for a, c in zip(anchors, counts)
        ]
        assert [r.item() for r in array_result] == scalar_results


# ── Horizon extension ─────────────────────────────────────────────────────────

class TestHorizonExtension:

    def test_fresh_calendar_has_no_horizon(self):
        assert USNYSE().horizon is None

    def test_query_covers_its_year(self, nyse):
        nyse.is_bday(date(2023, 1, 3))
        first, last = nyse.horizon
        assert first <= 2023 <= last

    def test_long_advance_extends_horizon(self, nyse):
        nyse.is_bday(date(2023, 1, 3))
        _, initial_last = nyse.horizon
        nyse.advance_bdays(date(2023, 1, 3), 5000)
        assert nyse.horizon[1] > initial_last

    def test_horizon_never_shrinks(self, nyse):
        nyse.is_bday(date(2000, 1, 3))
        nyse.is_bday(date(2030, 1, 3))
        first, last = nyse.horizon
        assert first <= 2000 and last >= 2030

    def test_holidays_correct_after_extension(self, nyse):
        nyse.is_bday(date(2023, 1, 3))
        assert not nyse.is_bday(date(2040, 12, 25))
        assert not nyse.is_bday(date(2023, 1, 16))
