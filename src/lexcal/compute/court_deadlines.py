"""
Court procedural deadlines and court-date selection.

    appeal               20 working days after judgment
    cassation            30 calendar days after judgment
    opposition           15 working days after the order
    additional pleadings 5 working days BEFORE the hearing

Courts do not sit during the August summer recess; next_court_date skips it
along with weekends and holidays.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from lexcal.calendar.working_days import DEFAULT_CALENDAR, GreekLegalCalendar
from lexcal.compute import (
    ADDITIONAL_PLEADINGS_WORKING_DAYS,
    APPEAL_WORKING_DAYS,
    CASSATION_CALENDAR_DAYS,
    COURT_SUMMER_RECESS_MONTH,
    OPPOSITION_WORKING_DAYS,
)


def appeal_deadline(
    judgment_date: date,
    calendar: Optional[GreekLegalCalendar] = None,
) -> date:
    """Last day to file an appeal: 20 working days after judgment."""
    cal = calendar or DEFAULT_CALENDAR
    return cal.add_working_days(judgment_date, APPEAL_WORKING_DAYS)


def cassation_deadline(judgment_date: date) -> date:
    """Last day to file for cassation: 30 calendar days after judgment."""
    return judgment_date + timedelta(days=CASSATION_CALENDAR_DAYS)


def opposition_deadline(
    order_date: date,
    calendar: Optional[GreekLegalCalendar] = None,
) -> date:
    """Last day to file an opposition: 15 working days after the order."""
    cal = calendar or DEFAULT_CALENDAR
    return cal.add_working_days(order_date, OPPOSITION_WORKING_DAYS)


def additional_pleadings_deadline(
    hearing_date: date,
    calendar: Optional[GreekLegalCalendar] = None,
) -> date:
    """Last day for additional pleadings: 5 working days before the hearing."""
    cal = calendar or DEFAULT_CALENDAR
    return cal.subtract_working_days(hearing_date, ADDITIONAL_PLEADINGS_WORKING_DAYS)


def is_court_summer_recess(d: date) -> bool:
    """True for every day of August."""
    return d.month == COURT_SUMMER_RECESS_MONTH


def next_court_date(
    d: date,
    calendar: Optional[GreekLegalCalendar] = None,
) -> date:
    """Earliest date on or after ``d`` on which courts sit.

    Skips weekends, holidays and the August recess. ``d`` itself is returned
    when it already qualifies.
    """
    cal = calendar or DEFAULT_CALENDAR
    candidate = d
    while not cal.is_working_day(candidate) or is_court_summer_recess(candidate):
        candidate += timedelta(days=1)
    return candidate
