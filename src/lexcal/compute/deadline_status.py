"""
Deadline urgency classification and the deadline schedule table.

Classification of a single deadline relative to ``today``:

    OVERDUE  deadline date is strictly before today
    URGENT   deadline is at most URGENT_THRESHOLD_DAYS away
    NORMAL   anything else

The schedule table applies the same rules to a whole deadlines DataFrame.
Only pending deadlines are classified; completed, extended or cancelled
records get null countdowns and are never overdue or urgent. A deadline
flagged working_days_only measures urgency in working days; otherwise in
calendar days.

Design notes:
    - ``today`` / ``as_of`` is injectable everywhere so results are reproducible.
    - working_days_until counts [today, deadline] inclusive, so a deadline
      due today on a working day has 1 working day left.
"""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Optional

import numpy as np
import pandas as pd

from lexcal.calendar.greek_holidays import as_date
from lexcal.calendar.working_days import DEFAULT_CALENDAR, GreekLegalCalendar
from lexcal.compute import STATUS_PENDING, URGENT_THRESHOLD_DAYS

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("deadline_id", "due_date")


class DeadlineStatus(Enum):
    OVERDUE = "overdue"
    URGENT = "urgent"
    NORMAL = "normal"


def _today(today: Optional[date]) -> date:
    if today is None:
        return date.today()
    return as_date(today)


def days_until_deadline(deadline: date, today: Optional[date] = None) -> int:
    """Calendar days from today to the deadline (negative once passed)."""
    return (as_date(deadline) - _today(today)).days


def working_days_until_deadline(
    deadline: date,
    today: Optional[date] = None,
    calendar: Optional[GreekLegalCalendar] = None,
) -> int:
    """Working days in [today, deadline]; 0 once the deadline has passed."""
    cal = calendar or DEFAULT_CALENDAR
    return cal.working_days_between(_today(today), as_date(deadline))


def is_overdue(deadline: date, today: Optional[date] = None) -> bool:
    return as_date(deadline) < _today(today)


def is_urgent(deadline: date, today: Optional[date] = None) -> bool:
    """At most URGENT_THRESHOLD_DAYS calendar days away."""
    return days_until_deadline(deadline, today) <= URGENT_THRESHOLD_DAYS


def deadline_status(deadline: date, today: Optional[date] = None) -> DeadlineStatus:
    today = _today(today)
    if is_overdue(deadline, today):
        return DeadlineStatus.OVERDUE
    if is_urgent(deadline, today):
        return DeadlineStatus.URGENT
    return DeadlineStatus.NORMAL


# ─────────────────────────────────────────────────────────
# Batch schedule
# ─────────────────────────────────────────────────────────

def compute_deadline_schedule(
    deadlines: pd.DataFrame,
    as_of: date,
    calendar: Optional[GreekLegalCalendar] = None,
) -> pd.DataFrame:
    """Classify every deadline in a table as of a reference date.

    Args:
        deadlines: DataFrame with columns deadline_id, due_date and
            optionally status (default "pending") and working_days_only
            (default True).
        as_of: Reference date ("today").
        calendar: Calendar for working-day counts.

    Returns:
        DataFrame with columns:
            deadline_id, due_date, status, working_days_only,
            days_until_due, working_days_until_due,
            is_overdue, is_urgent, deadline_status

    Raises:
        ValueError: If a required column is missing.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in deadlines.columns]
    if missing:
        raise ValueError(f"Deadlines table missing required columns: {missing}")

    cal = calendar or DEFAULT_CALENDAR
    as_of = as_date(as_of)

    logger.info(
        "Computing deadline schedule for %d deadlines as of %s",
        len(deadlines), as_of,
    )

    df = deadlines.copy()
    if "status" not in df.columns:
        df["status"] = STATUS_PENDING
    if "working_days_only" not in df.columns:
        df["working_days_only"] = True

    df["due_date"] = pd.to_datetime(df["due_date"]).dt.date
    df["working_days_only"] = df["working_days_only"].astype(bool)
    pending = (df["status"] == STATUS_PENDING).to_numpy()

    rows = []
    for due, is_pending, wd_only in zip(df["due_date"], pending, df["working_days_only"]):
        if not is_pending:
            rows.append((None, None))
            continue
        calendar_days = days_until_deadline(due, as_of)
        if wd_only:
            working = working_days_until_deadline(due, as_of, cal)
        else:
            working = calendar_days
        rows.append((calendar_days, working))

    df["days_until_due"] = pd.array([r[0] for r in rows], dtype="Int64")
    df["working_days_until_due"] = pd.array([r[1] for r in rows], dtype="Int64")

    due_before = (df["due_date"] < as_of).to_numpy()
    days_left = np.where(
        df["working_days_only"].to_numpy(),
        df["working_days_until_due"].fillna(0).to_numpy(dtype=int),
        df["days_until_due"].fillna(0).to_numpy(dtype=int),
    )
    df["is_overdue"] = pending & due_before
    df["is_urgent"] = pending & (days_left <= URGENT_THRESHOLD_DAYS)

    status = np.select(
        [df["is_overdue"].to_numpy(), df["is_urgent"].to_numpy()],
        [DeadlineStatus.OVERDUE.value, DeadlineStatus.URGENT.value],
        default=DeadlineStatus.NORMAL.value,
    )
    df["deadline_status"] = pd.Series(
        [s if p else None for s, p in zip(status, pending)],
        index=df.index, dtype=object,
    )

    # ── Validation assertions ──
    assert not (df["is_overdue"] & ~pending).any(), "non-pending deadline marked overdue"
    assert df.loc[pending, "days_until_due"].notna().all(), \
        "pending deadline without countdown"
    assert (df.loc[pending & ~due_before, "days_until_due"] >= 0).all(), \
        "future deadline with negative countdown"

    # ── Log summary stats ──
    n_pending = int(pending.sum())
    logger.info(
        "  pending=%d overdue=%d urgent=%d",
        n_pending, int(df["is_overdue"].sum()),
        int((df["deadline_status"] == DeadlineStatus.URGENT.value).sum()),
    )
    return df
