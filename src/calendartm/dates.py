"""
Date arithmetic for the calendar: leap years, month lengths and weekdays.

All routines are self-contained integer arithmetic on the proleptic
Gregorian calendar; nothing here touches the system clock.
"""
from enum import IntEnum
from typing import Tuple

from calendartm.recovery import InvalidMonthError

MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Per-month offsets for the congruence, January first
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        """Two-letter column heading used by the month grid."""
        return self.display_name[:2]

def month_name(month: int) -> str:
    """Return the display name of a month number (1..12)."""
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Invalid month: {month}")
    return MONTH_NAMES[month - 1]

def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

def days_in_month(year: int, month: int) -> int:
    """
    Number of days in the given month.

    Returns 0 for a month outside 1..12; callers must treat 0 as an error
    signal rather than a day count.
    """
    if month == 2:
        return 29 if is_leap(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    if 1 <= month <= 12:
        return 31
    return 0

def day_of_week(year: int, month: int, day: int) -> Weekday:
    """
    Weekday of a date, Sunday being 0.

    January and February count as the last months of the previous year so
    the leap day falls at the end of the cycle.
    """
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Invalid month: {month}")
    if month < 3:
        year -= 1
    value = (year + year // 4 - year // 100 + year // 400
             + _MONTH_OFFSETS[month - 1] + day) % 7
    return Weekday(value)
