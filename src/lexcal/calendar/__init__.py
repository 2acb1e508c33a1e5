"""Lexcal Calendar — Greek legal holidays and working-day arithmetic.

This package is the sole source of truth for whether a date is a working
day for Greek courts and law offices.
"""
from lexcal.calendar.easter import orthodox_easter
from lexcal.calendar.greek_holidays import (
    Holiday,
    HolidayKind,
    holiday_name,
    is_legal_holiday,
    legal_holiday_dates,
    legal_holidays,
)
from lexcal.calendar.working_days import (
    GreekLegalCalendar,
    WorkingDayRange,
    add_working_days,
    holidays_in_range,
    is_working_day,
    next_working_day,
    prev_working_day,
    subtract_working_days,
    working_days_between,
    working_days_in_month,
    working_days_range,
)

__all__ = [
    "GreekLegalCalendar",
    "Holiday",
    "HolidayKind",
    "WorkingDayRange",
    "add_working_days",
    "holiday_name",
    "holidays_in_range",
    "is_legal_holiday",
    "is_working_day",
    "legal_holiday_dates",
    "legal_holidays",
    "next_working_day",
    "orthodox_easter",
    "prev_working_day",
    "subtract_working_days",
    "working_days_between",
    "working_days_in_month",
    "working_days_range",
]
