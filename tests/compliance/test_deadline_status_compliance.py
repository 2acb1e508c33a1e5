"""Compliance tests for deadline urgency classification and the schedule table."""

import pandas as pd
import pytest
from datetime import date, datetime

from lexcal.compute.deadline_status import (
    DeadlineStatus,
    compute_deadline_schedule,
    days_until_deadline,
    deadline_status,
    is_overdue,
    is_urgent,
    working_days_until_deadline,
)

# Monday
TODAY = date(2025, 4, 14)


class TestSingleDeadline:

    def test_days_until(self) -> None:
        assert days_until_deadline(date(2025, 4, 17), TODAY) == 3
        assert days_until_deadline(date(2025, 4, 10), TODAY) == -4

    def test_datetime_deadline_uses_calendar_date(self) -> None:
        assert days_until_deadline(datetime(2025, 4, 17, 23, 59), TODAY) == 3

    def test_working_days_until_is_inclusive(self) -> None:
        # Mon 14 .. Thu 17
        assert working_days_until_deadline(date(2025, 4, 17), TODAY) == 4

    def test_working_days_until_skips_easter(self) -> None:
        # 14,15,16,17 | 18-21 closed | 22
        assert working_days_until_deadline(date(2025, 4, 22), TODAY) == 5

    def test_working_days_until_past_deadline(self) -> None:
        assert working_days_until_deadline(date(2025, 4, 10), TODAY) == 0

    def test_overdue(self) -> None:
        assert is_overdue(date(2025, 4, 11), TODAY) is True
        assert is_overdue(TODAY, TODAY) is False

    def test_urgent_threshold(self) -> None:
        assert is_urgent(date(2025, 4, 17), TODAY) is True
        assert is_urgent(date(2025, 4, 18), TODAY) is False

    @pytest.mark.parametrize("deadline, expected", [
        (date(2025, 4, 11), DeadlineStatus.OVERDUE),
        (TODAY, DeadlineStatus.URGENT),
        (date(2025, 4, 16), DeadlineStatus.URGENT),
        (date(2025, 5, 30), DeadlineStatus.NORMAL),
    ])
    def test_status(self, deadline: date, expected: DeadlineStatus) -> None:
        assert deadline_status(deadline, TODAY) == expected


@pytest.fixture
def deadlines() -> pd.DataFrame:
    return pd.DataFrame({
        "deadline_id": ["d1", "d2", "d3", "d4", "d5"],
        "due_date": pd.to_datetime([
            "2025-04-17", "2025-04-16", "2025-04-10", "2025-04-16", "2025-04-22",
        ]),
        "status": ["pending", "pending", "pending", "completed", "pending"],
        "working_days_only": [True, True, True, True, False],
    })


class TestDeadlineSchedule:

    def test_output_columns(self, deadlines: pd.DataFrame) -> None:
        out = compute_deadline_schedule(deadlines, TODAY)
        for col in ["days_until_due", "working_days_until_due",
                    "is_overdue", "is_urgent", "deadline_status"]:
            assert col in out.columns
        assert len(out) == len(deadlines)

    def test_working_day_urgency(self, deadlines: pd.DataFrame) -> None:
        out = compute_deadline_schedule(deadlines, TODAY).set_index("deadline_id")
        # 3 calendar days but 4 working days left → not urgent
        assert out.loc["d1", "days_until_due"] == 3
        assert out.loc["d1", "working_days_until_due"] == 4
        assert not out.loc["d1", "is_urgent"]
        assert out.loc["d1", "deadline_status"] == "normal"
        # 3 working days left → urgent
        assert out.loc["d2", "working_days_until_due"] == 3
        assert out.loc["d2", "deadline_status"] == "urgent"

    def test_overdue_row(self, deadlines: pd.DataFrame) -> None:
        out = compute_deadline_schedule(deadlines, TODAY).set_index("deadline_id")
        assert out.loc["d3", "is_overdue"]
        assert out.loc["d3", "days_until_due"] == -4
        assert out.loc["d3", "deadline_status"] == "overdue"

    def test_completed_row_not_classified(self, deadlines: pd.DataFrame) -> None:
        out = compute_deadline_schedule(deadlines, TODAY).set_index("deadline_id")
        assert pd.isna(out.loc["d4", "days_until_due"])
        assert pd.isna(out.loc["d4", "working_days_until_due"])
        assert not out.loc["d4", "is_overdue"]
        assert not out.loc["d4", "is_urgent"]
        assert pd.isna(out.loc["d4", "deadline_status"])

    def test_calendar_day_deadline(self, deadlines: pd.DataFrame) -> None:
        out = compute_deadline_schedule(deadlines, TODAY).set_index("deadline_id")
        assert out.loc["d5", "days_until_due"] == 8
        assert out.loc["d5", "working_days_until_due"] == 8
        assert out.loc["d5", "deadline_status"] == "normal"

    def test_defaults_for_optional_columns(self) -> None:
        df = pd.DataFrame({"deadline_id": ["x"], "due_date": [date(2025, 4, 15)]})
        out = compute_deadline_schedule(df, TODAY)
        assert out.loc[0, "status"] == "pending"
        assert out.loc[0, "working_days_until_due"] == 2
        assert out.loc[0, "deadline_status"] == "urgent"

    def test_input_not_modified(self, deadlines: pd.DataFrame) -> None:
        before = deadlines.copy()
        compute_deadline_schedule(deadlines, TODAY)
        pd.testing.assert_frame_equal(deadlines, before)

    def test_missing_column_raises(self) -> None:
        with pytest.raises(ValueError, match="due_date"):
            compute_deadline_schedule(pd.DataFrame({"deadline_id": ["x"]}), TODAY)
