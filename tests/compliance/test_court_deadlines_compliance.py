"""Compliance tests for court procedural deadlines and court-date selection."""

import json

import pytest
from datetime import date

from lexcal.calendar import working_days
from lexcal.calendar.working_days import GreekLegalCalendar, is_working_day
from lexcal.compute import court_deadlines, deadline_status
from lexcal.compute.court_deadlines import (
    additional_pleadings_deadline,
    appeal_deadline,
    cassation_deadline,
    is_court_summer_recess,
    next_court_date,
    opposition_deadline,
)


class TestStatutoryDeadlines:

    def test_appeal_skips_clean_monday(self) -> None:
        # From Mon 2026-02-02; Clean Monday 2026-02-23 is skipped → Tue 2026-03-03
        assert appeal_deadline(date(2026, 2, 2)) == date(2026, 3, 3)

    def test_appeal_lands_on_working_day(self) -> None:
        assert is_working_day(appeal_deadline(date(2025, 4, 1)))

    def test_cassation_is_calendar_days(self) -> None:
        assert cassation_deadline(date(2025, 1, 10)) == date(2025, 2, 9)

    def test_opposition_across_christmas(self) -> None:
        # Fri 2025-12-19 + 15 working days, skipping Dec 25-26, Jan 1, Jan 6
        assert opposition_deadline(date(2025, 12, 19)) == date(2026, 1, 15)

    def test_additional_pleadings_before_hearing(self) -> None:
        # Hearing Tue 2025-04-22: back over Easter Monday and Good Friday
        assert additional_pleadings_deadline(date(2025, 4, 22)) == date(2025, 4, 11)

    def test_custom_calendar_is_used(self, tmp_path) -> None:
        path = tmp_path / "closures.json"
        path.write_text(json.dumps({"closures": [{"date": "2026-03-03"}]}),
                        encoding="utf-8")
        cal = GreekLegalCalendar(closures_path=path)
        # Mar 3 closed → one more day to Wed Mar 4
        assert appeal_deadline(date(2026, 2, 2), calendar=cal) == date(2026, 3, 4)

    def test_compute_modules_share_default_calendar(self) -> None:
        assert court_deadlines.DEFAULT_CALENDAR is working_days.DEFAULT_CALENDAR
        assert deadline_status.DEFAULT_CALENDAR is working_days.DEFAULT_CALENDAR


class TestCourtDates:
    """Courts sit on working days outside the August recess."""

    @pytest.mark.parametrize("d, expected", [
        (date(2025, 8, 1), True),
        (date(2025, 8, 31), True),
        (date(2025, 7, 31), False),
        (date(2025, 9, 1), False),
    ])
    def test_summer_recess(self, d: date, expected: bool) -> None:
        assert is_court_summer_recess(d) is expected

    def test_working_day_is_its_own_court_date(self) -> None:
        assert next_court_date(date(2025, 7, 31)) == date(2025, 7, 31)

    def test_weekend_moves_to_monday(self) -> None:
        assert next_court_date(date(2025, 7, 26)) == date(2025, 7, 28)

    def test_august_moves_to_september(self) -> None:
        assert next_court_date(date(2025, 8, 5)) == date(2025, 9, 1)

    def test_holiday_moves_forward(self) -> None:
        # Tue 2025-10-28 is a holiday → Wed 29
        assert next_court_date(date(2025, 10, 28)) == date(2025, 10, 29)
