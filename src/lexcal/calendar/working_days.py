"""Greek legal working-day calendar — working-day test, navigation and counting.

Design Principles:
    - A working day is a working weekday (Mon-Fri by default) that is not a
      Greek legal holiday and not an office closure.
    - Each date is checked against the holiday set of its OWN calendar year,
      so ranges crossing Dec 31 / Jan 1 pick up both years' holidays.
    - Navigation walks one calendar day at a time. Holidays can chain into
      weekends (Good Friday -> weekend -> Easter Monday), so there is no
      closed-form shortcut.
    - Inputs may be ``date`` or ``datetime``. Returned values keep the
      caller's type and time of day; classification uses the calendar date.
    - Nothing is memoised. Every call recomputes from its arguments.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable, Optional

from lexcal.calendar.greek_holidays import as_date, legal_holiday_dates, legal_holidays

logger = logging.getLogger(__name__)

# Weekday constants (Monday=0 ... Sunday=6)
_MONDAY = 0
_FRIDAY = 4

_ALL_WEEKDAYS: frozenset[int] = frozenset(range(7))
DEFAULT_WORKING_WEEKDAYS: frozenset[int] = frozenset(range(_MONDAY, _FRIDAY + 1))

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class WorkingDayRange:
    """A start date and the date a given number of working days after it."""
    start: date
    end: date


class GreekLegalCalendar:
    """Working-day calendar for Greek courts and law offices.

    Usage:
        cal = GreekLegalCalendar()
        cal.is_working_day(date(2025, 4, 18))         # False (Good Friday)
        cal.next_working_day(date(2025, 4, 17))       # date(2025, 4, 22)
        cal.working_days_range(date(2025, 8, 11), 10) # end = date(2025, 8, 26)

    An office can add its own closures (e.g. Dec 31, or a staff day off)
    through a JSON file:

        {"closures": [
            {"date": "2025-12-31", "name": "Office closed", "recurring": true},
            {"date": "2025-05-02", "name": "Bridge day", "recurring": false}
        ]}

    Recurring closures apply on the same month/day every year.
    """

    def __init__(
        self,
        closures_path: Optional[Path] = None,
        working_weekdays: Iterable[int] = DEFAULT_WORKING_WEEKDAYS,
        include_legal_holidays: bool = True,
    ) -> None:
        """Initialise the calendar.

        Args:
            closures_path: Optional path to an office closures JSON file.
            working_weekdays: Weekday numbers (0=Monday) that count as working.
            include_legal_holidays: If False, legal holidays are ignored and
                only weekends and closures are non-working.

        Raises:
            FileNotFoundError: If ``closures_path`` is given but missing.
            ValueError: If ``working_weekdays`` is empty or holds a value
                outside 0-6, or if the closures file is malformed.
        """
        self._working_weekdays = frozenset(working_weekdays)
        if not self._working_weekdays:
            raise ValueError("working_weekdays must contain at least one weekday")
        if not self._working_weekdays <= _ALL_WEEKDAYS:
            raise ValueError(
                f"working_weekdays must be in 0-6 (Monday=0), "
                f"got {set(self._working_weekdays)!r}"
            )
        self._include_legal_holidays = include_legal_holidays
        self._closures: dict[date, str] = {}
        self._recurring_closures: dict[tuple[int, int], str] = {}
        self._closures_path = Path(closures_path) if closures_path is not None else None
        if self._closures_path is not None:
            self._load_closures()

    def _load_closures(self) -> None:
        """Load and parse office closures from JSON."""
        if not self._closures_path.exists():
            raise FileNotFoundError(
                f"Office closures file not found: {self._closures_path}"
            )

        with open(self._closures_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        if "closures" not in raw:
            raise ValueError(
                f"Closures file missing 'closures' key: {self._closures_path}"
            )

        for entry in raw["closures"]:
            try:
                d = date.fromisoformat(entry["date"])
            except (KeyError, TypeError, ValueError) as exc:
                raise ValueError(
                    f"Invalid closure entry {entry!r} in {self._closures_path}"
                ) from exc
            name = entry.get("name", "")
            if entry.get("recurring", False):
                self._recurring_closures[(d.month, d.day)] = name
            else:
                self._closures[d] = name
            if self._include_legal_holidays and d in legal_holiday_dates(d.year):
                logger.warning(
                    "Office closure %s (%s) falls on a legal holiday", d, name,
                )

        logger.info(
            "Loaded %d one-off and %d recurring office closures from %s",
            len(self._closures), len(self._recurring_closures), self._closures_path,
        )

    # --- Core Working Day Functions ---

    def is_working_day(self, d: date) -> bool:
        """Check whether ``d`` is a working day.

        True iff the weekday is a working weekday, ``d`` is not a legal
        holiday of its own year and not an office closure.
        """
        d = as_date(d)
        if d.weekday() not in self._working_weekdays:
            return False
        if self._include_legal_holidays and d in legal_holiday_dates(d.year):
            return False
        return not self._is_closure(d)

    def next_working_day(self, d: date) -> date:
        """Return the earliest working day strictly after ``d``."""
        candidate = d + _ONE_DAY
        while not self.is_working_day(candidate):
            candidate += _ONE_DAY
        return candidate

    def prev_working_day(self, d: date) -> date:
        """Return the latest working day strictly before ``d``."""
        candidate = d - _ONE_DAY
        while not self.is_working_day(candidate):
            candidate -= _ONE_DAY
        return candidate

    def working_days_range(self, start: date, count: int) -> WorkingDayRange:
        """Find the date ``count`` working days after ``start``.

        Walks forward one calendar day at a time from ``start`` (exclusive)
        and counts working days until ``count`` is reached. ``start`` is
        returned unchanged and need not be a working day. For ``count == 0``
        the range is empty and ``end == start``.

        Args:
            start: Anchor date (exclusive).
            count: Number of working days to advance. Negative counts are
                treated as 0.

        Returns:
            WorkingDayRange(start, end) with ``end`` a working day when
            ``count > 0``.
        """
        current = start
        counted = 0
        while counted < count:
            current += _ONE_DAY
            if self.is_working_day(current):
                counted += 1
        return WorkingDayRange(start=start, end=current)

    def working_days_between(self, start: date, end: date) -> int:
        """Count working days in [start, end], both endpoints inclusive.

        Returns 0 if ``end`` is before ``start``.
        """
        current = as_date(start)
        last = as_date(end)
        count = 0
        while current <= last:
            if self.is_working_day(current):
                count += 1
            current += _ONE_DAY
        return count

    def add_working_days(self, d: date, n: int) -> date:
        """The n-th working day after ``d`` (``d`` itself for n <= 0)."""
        return self.working_days_range(d, n).end

    def subtract_working_days(self, d: date, n: int) -> date:
        """The n-th working day before ``d`` (``d`` itself for n <= 0)."""
        current = d
        counted = 0
        while counted < n:
            current -= _ONE_DAY
            if self.is_working_day(current):
                counted += 1
        return current

    # --- Holiday Information ---

    def holiday_description(self, d: date) -> Optional[str]:
        """Name of the legal holiday or office closure on ``d``, or None."""
        d = as_date(d)
        if self._include_legal_holidays:
            for holiday in legal_holidays(d.year):
                if holiday.date == d:
                    return holiday.name
        if d in self._closures:
            return self._closures[d]
        return self._recurring_closures.get((d.month, d.day))

    def holidays_in_range(self, start: date, end: date) -> list[date]:
        """Sorted legal holidays and office closures in [start, end]."""
        start, end = as_date(start), as_date(end)
        found: set[date] = set()
        for year in range(start.year, end.year + 1):
            if self._include_legal_holidays:
                found.update(legal_holiday_dates(year))
            for (month, day), _name in self._recurring_closures.items():
                try:
                    found.add(date(year, month, day))
                except ValueError:
                    continue  # Feb 29 in a non-leap year
        found.update(self._closures)
        return sorted(d for d in found if start <= d <= end)

    def working_days_in_month(self, year: int, month: int) -> int:
        """Count working days in a calendar month."""
        first = date(year, month, 1)
        if month == 12:
            last = date(year, 12, 31)
        else:
            last = date(year, month + 1, 1) - _ONE_DAY
        return self.working_days_between(first, last)

    @property
    def working_weekdays(self) -> frozenset[int]:
        return self._working_weekdays

    # --- Internal Helpers ---

    def _is_closure(self, d: date) -> bool:
        return d in self._closures or (d.month, d.day) in self._recurring_closures


# ---------------------------------------------------------------------------
# Module-level interface: Mon-Fri, legal holidays, no office closures.
# The default calendar holds no mutable state.
# ---------------------------------------------------------------------------
DEFAULT_CALENDAR = GreekLegalCalendar()


def is_working_day(d: date) -> bool:
    """True iff ``d`` is Mon-Fri and not a Greek legal holiday."""
    return DEFAULT_CALENDAR.is_working_day(d)


def next_working_day(d: date) -> date:
    """Earliest working day strictly after ``d``."""
    return DEFAULT_CALENDAR.next_working_day(d)


def prev_working_day(d: date) -> date:
    return DEFAULT_CALENDAR.prev_working_day(d)


def working_days_range(start: date, count: int) -> WorkingDayRange:
    """Range from ``start`` to the date ``count`` working days later."""
    return DEFAULT_CALENDAR.working_days_range(start, count)


def working_days_between(start: date, end: date) -> int:
    """Inclusive count of working days in [start, end]; 0 if end < start."""
    return DEFAULT_CALENDAR.working_days_between(start, end)


def add_working_days(d: date, n: int) -> date:
    return DEFAULT_CALENDAR.add_working_days(d, n)


def subtract_working_days(d: date, n: int) -> date:
    return DEFAULT_CALENDAR.subtract_working_days(d, n)


def holidays_in_range(start: date, end: date) -> list[date]:
    return DEFAULT_CALENDAR.holidays_in_range(start, end)


def working_days_in_month(year: int, month: int) -> int:
    return DEFAULT_CALENDAR.working_days_in_month(year, month)
