"""
Task operations scoped to a single day of the calendar.

Within a day, task ids always run 1..N in list order: new tasks are appended
with the next id, updates keep ids untouched, and every deletion renumbers
the remaining tasks of that day.
"""
from typing import List, Tuple

from pydantic import ValidationError

from calendartm.logs import get_logger
from calendartm.models import Calendar, Day, Task
from calendartm.recovery import (
    DateNotFoundError,
    InvalidDayError,
    InvalidDescriptionError,
    InvalidMonthError,
    NoTasksError,
    TaskNotFoundError,
)

log = get_logger("registry")

def _date_label(year: int, month: int, day: int) -> str:
    return f"{year}-{month:02d}-{day:02d}"

def _new_task(task_id: int, description: str) -> Task:
    try:
        return Task(id=task_id, description=description)
    except ValidationError as e:
        raise InvalidDescriptionError(f"Invalid task description: {description!r}") from e

def _resolve_day(calendar: Calendar, year: int, month: int, day: int) -> Day:
    day_node = calendar.get_day(year, month, day)
    if day_node is None:
        raise DateNotFoundError(f"Invalid date / year not found: {_date_label(year, month, day)}")
    return day_node

def add_task(calendar: Calendar, year: int, month: int, day: int, description: str,
             notify: bool = True) -> Task:
    """
    Append a task to a day, creating the year if needed.

    The year is created before month and day are checked, so an invalid
    month or day still leaves the (empty) year behind.

    Args:
        calendar: Store to insert into
        year, month, day: Target date
        description: Task text, stored verbatim
        notify: Emit the "task added" notification; bulk loads pass False

    Returns:
        The new task

    Raises:
        InvalidMonthError, InvalidDayError: date outside the calendar
        InvalidDescriptionError: description spans several lines
    """
    year_node = calendar.find_or_add_year(year)

    month_node = year_node.get_month(month)
    if month_node is None:
        raise InvalidMonthError(f"Invalid month: {month}")

    day_node = month_node.get_day(day)
    if day_node is None:
        raise InvalidDayError(f"Invalid day for {month_node.name} {year}: {day}")

    task = _new_task(day_node.next_task_id(), description)
    day_node.tasks.append(task)

    if notify:
        log.info(f"Task added for {_date_label(year, month, day)}.")
    return task

def update_task(calendar: Calendar, year: int, month: int, day: int, task_id: int,
                new_description: str) -> Task:
    """Replace the description of one task in place; never creates a year."""
    day_node = _resolve_day(calendar, year, month, day)

    task = day_node.find_task(task_id)
    if task is None:
        raise TaskNotFoundError(f"Task {task_id} not found on {_date_label(year, month, day)}")

    try:
        task.description = new_description
    except ValidationError as e:
        raise InvalidDescriptionError(f"Invalid task description: {new_description!r}") from e

    log.debug(f"Updated task {task_id} on {_date_label(year, month, day)}")
    return task

def delete_task(calendar: Calendar, year: int, month: int, day: int, task_id: int) -> Task:
    """
    Remove one task and renumber the rest of that day to 1..N-1.

    Ids of the remaining tasks change after this call; look them up again
    before addressing another task on the same day.

    Returns:
        The removed task, carrying the id it had before removal
    """
    day_node = _resolve_day(calendar, year, month, day)
    label = _date_label(year, month, day)

    if not day_node.tasks:
        raise NoTasksError(f"No tasks to delete for {label}")

    index = next((i for i, t in enumerate(day_node.tasks) if t.id == task_id), None)
    if index is None:
        raise TaskNotFoundError(f"Task {task_id} not found on {label}")

    removed = day_node.tasks.pop(index)
    day_node.renumber()

    log.info(f"Deleted task {task_id} from {label}.")
    return removed

def list_tasks(day: Day) -> List[Tuple[int, str]]:
    """(id, description) pairs of a day in list order."""
    return [(t.id, t.description) for t in day.tasks]
