"""Greek legal holidays — days on which courts and public services are closed.

Nine holidays recur on a fixed month/day. Four more move with Orthodox
Easter (see easter.py). October 3 (St Dionysius the Areopagite) is a
judicial holiday observed by the courts only; it is part of the set because
this calendar drives procedural deadlines.

The set is rebuilt on every call; nothing is cached across years.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from lexcal.calendar.easter import orthodox_easter


class HolidayKind(Enum):
    """How a holiday's date is determined."""
    FIXED = "fixed"
    MOVEABLE = "moveable"


@dataclass(frozen=True)
class Holiday:
    """A named legal holiday on a specific date."""
    date: date
    name: str
    kind: HolidayKind


# (month, day, name)
FIXED_LEGAL_HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "Πρωτοχρονιά"),
    (1, 6, "Θεοφάνεια"),
    (3, 25, "25η Μαρτίου"),
    (5, 1, "Εργατική Πρωτομαγιά"),
    (8, 15, "Κοίμηση της Θεοτόκου"),
    (10, 3, "Άγιος Διονύσιος Αρεοπαγίτης (Δικαστήρια)"),
    (10, 28, "28η Οκτωβρίου"),
    (12, 25, "Χριστούγεννα"),
    (12, 26, "Σύναξη της Θεοτόκου"),
)

# (days relative to Easter Sunday, name)
MOVEABLE_LEGAL_HOLIDAYS: tuple[tuple[int, str], ...] = (
    (-48, "Καθαρά Δευτέρα"),
    (-2, "Μεγάλη Παρασκευή"),
    (1, "Δευτέρα του Πάσχα"),
    (50, "Αγίου Πνεύματος"),
)


def legal_holidays(year: int) -> list[Holiday]:
    """All Greek legal holidays of ``year``, sorted by date.

    Always 13 entries. A coincidence between a fixed and a moveable holiday
    is kept as two entries.
    """
    holidays = [
        Holiday(date(year, month, day), name, HolidayKind.FIXED)
        for month, day, name in FIXED_LEGAL_HOLIDAYS
    ]
    easter = orthodox_easter(year)
    holidays.extend(
        Holiday(easter + timedelta(days=offset), name, HolidayKind.MOVEABLE)
        for offset, name in MOVEABLE_LEGAL_HOLIDAYS
    )
    return sorted(holidays, key=lambda h: h.date)


def legal_holiday_dates(year: int) -> set[date]:
    """Dates of the legal holidays of ``year``."""
    return {h.date for h in legal_holidays(year)}


def is_legal_holiday(d: date) -> bool:
    """True if ``d`` is a legal holiday of its own calendar year."""
    d = as_date(d)
    return d in legal_holiday_dates(d.year)


def holiday_name(d: date) -> Optional[str]:
    """Name of the legal holiday on ``d``, or None."""
    d = as_date(d)
    for holiday in legal_holidays(d.year):
        if holiday.date == d:
            return holiday.name
    return None


def as_date(d: date) -> date:
    # datetime is a date subclass; comparisons against plain dates need the date part
    if isinstance(d, datetime):
        return d.date()
    return d
