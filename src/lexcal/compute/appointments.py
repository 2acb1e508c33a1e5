"""Appointment scheduling against office working hours."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Iterable


@dataclass(frozen=True)
class WorkingHours:
    """Daily opening and closing times of the office."""
    start: time
    end: time

    @classmethod
    def parse(cls, start: str, end: str) -> "WorkingHours":
        """Build from "HH:MM" strings, e.g. WorkingHours.parse("09:00", "17:00").

        Raises:
            ValueError: If either string is not a valid HH:MM time.
        """
        return cls(_parse_hhmm(start), _parse_hhmm(end))


def _parse_hhmm(value: str) -> time:
    try:
        return datetime.strptime(value, "%H:%M").time()
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid HH:MM time: {value!r}") from exc


def available_slots(
    day: datetime,
    duration_minutes: int,
    working_hours: WorkingHours,
    booked: Iterable[tuple[datetime, datetime]] = (),
) -> list[tuple[datetime, datetime]]:
    """Free appointment slots on ``day``.

    Slots are laid back to back from opening time in steps of
    ``duration_minutes``. A slot is dropped when it overlaps any booked
    (start, end) interval or runs past closing time.

    Args:
        day: Any moment on the target day; only its date is used.
        duration_minutes: Slot length. Must be positive.
        working_hours: Office opening hours.
        booked: Already booked (start, end) intervals.

    Returns:
        Free (start, end) slots in chronological order.
    """
    if duration_minutes <= 0:
        raise ValueError(f"duration_minutes must be positive, got {duration_minutes}")

    day_date = day.date() if isinstance(day, datetime) else day
    opening = datetime.combine(day_date, working_hours.start)
    closing = datetime.combine(day_date, working_hours.end)
    step = timedelta(minutes=duration_minutes)
    booked = list(booked)

    slots = []
    current = opening
    while current < closing:
        slot_end = current + step
        if slot_end > closing:
            break
        # half-open intervals: back-to-back bookings do not overlap
        overlaps = any(current < b_end and slot_end > b_start for b_start, b_end in booked)
        if not overlaps:
            slots.append((current, slot_end))
        current = slot_end
    return slots


def is_within_working_hours(moment: datetime, working_hours: WorkingHours) -> bool:
    """True if the time of day of ``moment`` is within opening hours, bounds included."""
    t = moment.time().replace(second=0, microsecond=0)
    return working_hours.start <= t <= working_hours.end
