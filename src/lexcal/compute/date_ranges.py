"""
Dashboard date ranges and Greek-locale date formatting.

Ranges are inclusive [start, end] calendar dates. Weeks start on Monday.
Parsing follows the Greek day-first convention (dd/mm/yyyy).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

import pandas as pd

from lexcal.calendar.greek_holidays import as_date

logger = logging.getLogger(__name__)

GREEK_DAY_NAMES = (
    "Δευτέρα", "Τρίτη", "Τετάρτη", "Πέμπτη", "Παρασκευή", "Σάββατο", "Κυριακή",
)

GREEK_MONTH_NAMES = (
    "Ιανουάριος", "Φεβρουάριος", "Μάρτιος", "Απρίλιος", "Μάιος", "Ιούνιος",
    "Ιούλιος", "Αύγουστος", "Σεπτέμβριος", "Οκτώβριος", "Νοέμβριος", "Δεκέμβριος",
)

GREEK_MONTH_ABBREVIATIONS = (
    "Ιαν", "Φεβ", "Μαρ", "Απρ", "Μαΐ", "Ιουν",
    "Ιουλ", "Αυγ", "Σεπ", "Οκτ", "Νοε", "Δεκ",
)

GREEK_DATE_FORMAT = "%d/%m/%Y"
GREEK_DATETIME_FORMAT = "%d/%m/%Y %H:%M"


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date


def _today(today: Optional[date]) -> date:
    if today is None:
        return date.today()
    return as_date(today)


def current_week(today: Optional[date] = None) -> DateRange:
    """Monday through Sunday of the week containing ``today``."""
    today = _today(today)
    monday = today - timedelta(days=today.weekday())
    return DateRange(monday, monday + timedelta(days=6))


def current_month(today: Optional[date] = None) -> DateRange:
    today = _today(today)
    first = today.replace(day=1)
    if today.month == 12:
        last = date(today.year, 12, 31)
    else:
        last = date(today.year, today.month + 1, 1) - timedelta(days=1)
    return DateRange(first, last)


def current_year(today: Optional[date] = None) -> DateRange:
    today = _today(today)
    return DateRange(date(today.year, 1, 1), date(today.year, 12, 31))


def custom_range(days: int, today: Optional[date] = None) -> DateRange:
    """The last ``days`` days, ending today (inclusive)."""
    today = _today(today)
    return DateRange(today - timedelta(days=days - 1), today)


# --- Greek formatting ---

def greek_day_name(d: date) -> str:
    return GREEK_DAY_NAMES[d.weekday()]


def greek_month_name(d: date) -> str:
    return GREEK_MONTH_NAMES[d.month - 1]


def format_date_range(start: date, end: date) -> str:
    """Short Greek label for a range, e.g. "3 Μαρ - 9 Μαρ"."""
    return (
        f"{start.day} {GREEK_MONTH_ABBREVIATIONS[start.month - 1]} - "
        f"{end.day} {GREEK_MONTH_ABBREVIATIONS[end.month - 1]}"
    )


def parse_greek_date(value: str) -> Optional[date]:
    """Parse "dd/mm/yyyy"; None if the string is not a valid date."""
    try:
        return datetime.strptime(value, GREEK_DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None


def parse_greek_datetime(value: str) -> Optional[datetime]:
    """Parse "dd/mm/yyyy HH:MM"; None if the string is not valid."""
    try:
        return datetime.strptime(value, GREEK_DATETIME_FORMAT)
    except (TypeError, ValueError):
        return None


# --- Filtering ---

def filter_by_date_range(
    df: pd.DataFrame,
    start: date,
    end: date,
    column: str = "date",
) -> pd.DataFrame:
    """Rows of ``df`` whose ``column`` date lies in [start, end].

    Raises:
        ValueError: If ``column`` is not in ``df``.
    """
    if column not in df.columns:
        raise ValueError(f"Column {column!r} not in DataFrame")
    dates = pd.to_datetime(df[column]).dt.date
    mask = (dates >= as_date(start)) & (dates <= as_date(end))
    logger.debug("filter_by_date_range: %d of %d rows in [%s, %s]",
                 int(mask.sum()), len(df), start, end)
    return df.loc[mask]
