"""
Calendar Task Manager - a single-user calendar of days and their tasks.

The store is organised as a hierarchy:
Year → Month → Day → Task
"""

from .version import VERSION
from .dates import Weekday, MONTH_NAMES, is_leap, days_in_month, day_of_week
from .models import Task, Day, Month, Year, Calendar, MonthGrid
from .registry import add_task, update_task, delete_task, list_tasks
from .search import SearchHit, contains_ignore_case, search_tasks
from .data import DataCore, dumps, loads, save_calendar, load_calendar

__version__ = VERSION

__all__ = [
    "VERSION",
    "Weekday",
    "MONTH_NAMES",
    "is_leap",
    "days_in_month",
    "day_of_week",
    "Task",
    "Day",
    "Month",
    "Year",
    "Calendar",
    "MonthGrid",
    "add_task",
    "update_task",
    "delete_task",
    "list_tasks",
    "SearchHit",
    "contains_ignore_case",
    "search_tasks",
    "DataCore",
    "dumps",
    "loads",
    "save_calendar",
    "load_calendar",
]
