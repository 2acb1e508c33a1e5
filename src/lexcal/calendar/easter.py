"""Orthodox Easter — Julian computus converted to the Gregorian calendar.

The Greek Orthodox Church dates Easter on the Julian calendar. The Julian
Easter Sunday is computed with Meeus' Julian algorithm and shifted into the
Gregorian calendar by a flat 13-day offset.

The flat offset is exact only for 1900-2099 (the Julian/Gregorian gap grows
by one day in 2100). Years outside that window still get the 13-day shift so
that results stay reproducible; a warning is logged once per such year.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

logger = logging.getLogger(__name__)

# --- Constants ---
JULIAN_GREGORIAN_OFFSET_DAYS = 13

# Window in which the flat offset matches the real calendar gap.
_EXACT_OFFSET_FIRST_YEAR = 1900
_EXACT_OFFSET_LAST_YEAR = 2099

# Years already reported as outside the exact window; each is logged once.
_warned_years: set[int] = set()


def julian_easter(year: int) -> tuple[int, int]:
    """Return (month, day) of Easter Sunday on the Julian calendar."""
    a = year % 19
    b = year % 4
    c = year % 7
    d = (19 * a + 15) % 30
    e = (2 * b + 4 * c - d + 34) % 7
    month = (d + e + 114) // 31
    day = (d + e + 114) % 31 + 1
    return month, day


def orthodox_easter(year: int) -> date:
    """Gregorian date of Orthodox Easter Sunday for ``year``.

    Args:
        year: Calendar year.

    Returns:
        Easter Sunday as a Gregorian ``date``.
    """
    if (
        not _EXACT_OFFSET_FIRST_YEAR <= year <= _EXACT_OFFSET_LAST_YEAR
        and year not in _warned_years
    ):
        _warned_years.add(year)
        logger.warning(
            "Orthodox Easter for %d uses the fixed %d-day Julian offset, "
            "which is only exact for %d-%d.",
            year, JULIAN_GREGORIAN_OFFSET_DAYS,
            _EXACT_OFFSET_FIRST_YEAR, _EXACT_OFFSET_LAST_YEAR,
        )
    month, day = julian_easter(year)
    return date(year, month, day) + timedelta(days=JULIAN_GREGORIAN_OFFSET_DAYS)
