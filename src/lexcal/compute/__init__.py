"""
Lexcal Compute — law-office date computations built on the working-day calendar.

Module structure:
    court_deadlines.py  — statutory procedural deadlines, next available court date
    deadline_status.py  — overdue/urgent classification, deadline schedule table
    appointments.py     — appointment slot finder, working-hours check
    date_ranges.py      — dashboard date ranges, Greek date formatting/parsing

All functions take an optional GreekLegalCalendar; the default is Mon-Fri
with Greek legal holidays and no office closures.
"""

# Statutory periods (working days unless noted)
APPEAL_WORKING_DAYS = 20
CASSATION_CALENDAR_DAYS = 30
OPPOSITION_WORKING_DAYS = 15
ADDITIONAL_PLEADINGS_WORKING_DAYS = 5

# Courts do not sit in August
COURT_SUMMER_RECESS_MONTH = 8

# A pending deadline this many days away (or fewer) is urgent
URGENT_THRESHOLD_DAYS = 3

# Deadline record statuses
STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"
STATUS_EXTENDED = "extended"
STATUS_CANCELLED = "cancelled"
