"""
Data management submodule: the calendar file codec and the load/save context.
"""

from .core import DataCore, CalendarContext
from .io import dumps, loads, save_calendar, load_calendar, atomic_write

__all__ = [
    'DataCore',
    'CalendarContext',
    'dumps',
    'loads',
    'save_calendar',
    'load_calendar',
    'atomic_write',
]
