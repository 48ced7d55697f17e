"""Unit tests for task insertion, update and deletion."""

import logging
import pytest

from calendartm.recovery import (
    DateNotFoundError,
    InvalidDayError,
    InvalidDescriptionError,
    InvalidMonthError,
    NoTasksError,
    TaskNotFoundError,
)
from calendartm.registry import add_task, delete_task, list_tasks, update_task


def _day_tasks(calendar, year, month, day):
    return list_tasks(calendar.get_day(year, month, day))


class TestAddTask:
    """Test add_task."""

    def test_first_task_gets_id_1(self, calendar):
        """Test the first task of a day, creating the year on demand."""
        task = add_task(calendar, 2025, 11, 29, "Finish assignment")
        assert task.id == 1
        assert _day_tasks(calendar, 2025, 11, 29) == [(1, "Finish assignment")]

    def test_appends_with_increasing_ids(self, calendar):
        """Test ids follow call order and descriptions are kept verbatim."""
        for description in ("Task A", "  Task B  ", "Task C, with comma"):
            add_task(calendar, 2025, 11, 29, description)
        assert _day_tasks(calendar, 2025, 11, 29) == [
            (1, "Task A"), (2, "  Task B  "), (3, "Task C, with comma")
        ]

    def test_invalid_month_still_creates_year(self, calendar):
        """Test an invalid month adds no task but leaves the year behind."""
        with pytest.raises(InvalidMonthError):
            add_task(calendar, 2025, 13, 10, "bad month")
        assert 2025 in calendar.years
        assert all(not d.tasks for m in calendar.years[2025].months for d in m.days)

    def test_invalid_day(self, calendar):
        """Test February 30th and day 0 are rejected."""
        with pytest.raises(InvalidDayError):
            add_task(calendar, 2025, 2, 30, "bad day")
        with pytest.raises(InvalidDayError):
            add_task(calendar, 2025, 2, 0, "bad day")
        assert _day_tasks(calendar, 2025, 2, 28) == []

    def test_leap_day(self, calendar):
        """Test February 29th is accepted only in leap years."""
        add_task(calendar, 2024, 2, 29, "Leap day")
        with pytest.raises(InvalidDayError):
            add_task(calendar, 2025, 2, 29, "Not a leap day")

    def test_multiline_description_rejected(self, calendar):
        """Test descriptions that cannot be stored on one line."""
        with pytest.raises(InvalidDescriptionError):
            add_task(calendar, 2025, 1, 1, "first\nsecond")
        assert _day_tasks(calendar, 2025, 1, 1) == []

    def test_notification(self, calendar, package_logs, caplog):
        """Test interactive adds notify and silent adds do not."""
        with caplog.at_level(logging.INFO):
            add_task(calendar, 2025, 11, 29, "loud")
            add_task(calendar, 2025, 11, 30, "quiet", notify=False)
        messages = [r.getMessage() for r in caplog.records if r.name == "calendartm.registry"]
        assert messages == ["Task added for 2025-11-29."]


class TestUpdateTask:
    """Test update_task."""

    @pytest.fixture
    def christmas(self, calendar):
        add_task(calendar, 2025, 12, 25, "Initial Task 1", notify=False)
        add_task(calendar, 2025, 12, 25, "Initial Task 2", notify=False)
        return calendar

    def test_update_head_task(self, christmas):
        """Test updating the first task keeps its id and sibling."""
        task = update_task(christmas, 2025, 12, 25, 1, "Updated Task 1")
        assert task.id == 1
        assert _day_tasks(christmas, 2025, 12, 25) == [(1, "Updated Task 1"), (2, "Initial Task 2")]

    def test_update_non_head_task(self, christmas):
        """Test updating a later task."""
        update_task(christmas, 2025, 12, 25, 2, "Updated Task 2")
        assert _day_tasks(christmas, 2025, 12, 25) == [(1, "Initial Task 1"), (2, "Updated Task 2")]

    def test_task_id_not_found(self, christmas):
        """Test a missing id leaves the day unchanged."""
        with pytest.raises(TaskNotFoundError):
            update_task(christmas, 2025, 12, 25, 3, "nope")
        assert _day_tasks(christmas, 2025, 12, 25) == [(1, "Initial Task 1"), (2, "Initial Task 2")]

    def test_date_not_found_does_not_create_year(self, christmas):
        """Test updates never create a year."""
        with pytest.raises(DateNotFoundError):
            update_task(christmas, 2030, 1, 1, 1, "nope")
        assert 2030 not in christmas.years

        with pytest.raises(DateNotFoundError):
            update_task(christmas, 2025, 2, 30, 1, "nope")

    def test_multiline_update_rejected(self, christmas):
        """Test an invalid description leaves the task as it was."""
        with pytest.raises(InvalidDescriptionError):
            update_task(christmas, 2025, 12, 25, 1, "a\nb")
        assert _day_tasks(christmas, 2025, 12, 25)[0] == (1, "Initial Task 1")


class TestDeleteTask:
    """Test delete_task."""

    @pytest.fixture
    def busy_day(self, calendar):
        for description in ("Task A", "Task B", "Task C", "Task D"):
            add_task(calendar, 2025, 11, 29, description, notify=False)
        return calendar

    def test_delete_middle_renumbers(self, busy_day):
        """Test remaining tasks are renumbered 1..N-1 in their original order."""
        removed = delete_task(busy_day, 2025, 11, 29, 2)
        assert (removed.id, removed.description) == (2, "Task B")
        assert _day_tasks(busy_day, 2025, 11, 29) == [(1, "Task A"), (2, "Task C"), (3, "Task D")]

    def test_delete_head_and_tail(self, busy_day):
        """Test deleting the first and the last task."""
        delete_task(busy_day, 2025, 11, 29, 1)
        delete_task(busy_day, 2025, 11, 29, 3)
        assert _day_tasks(busy_day, 2025, 11, 29) == [(1, "Task B"), (2, "Task C")]

    def test_add_after_delete_continues_sequence(self, busy_day):
        """Test the next id after a delete is count + 1."""
        delete_task(busy_day, 2025, 11, 29, 1)
        task = add_task(busy_day, 2025, 11, 29, "Task E", notify=False)
        assert task.id == 4

    def test_missing_id_leaves_list_unchanged(self, busy_day):
        """Test TaskNotFoundError for an id not on the day."""
        before = _day_tasks(busy_day, 2025, 11, 29)
        with pytest.raises(TaskNotFoundError) as excinfo:
            delete_task(busy_day, 2025, 11, 29, 9)
        assert not isinstance(excinfo.value, NoTasksError)
        assert _day_tasks(busy_day, 2025, 11, 29) == before

    def test_empty_day(self, calendar):
        """Test deleting from a day without tasks is told apart from a missing id."""
        calendar.find_or_add_year(2025)
        with pytest.raises(NoTasksError):
            delete_task(calendar, 2025, 1, 1, 1)

    def test_date_not_found(self, calendar):
        """Test deleting never creates a year."""
        with pytest.raises(DateNotFoundError):
            delete_task(calendar, 2025, 1, 1, 1)
        assert calendar.years == {}

    def test_delete_all(self, busy_day):
        """Test emptying a day one task at a time from the front."""
        for _ in range(4):
            delete_task(busy_day, 2025, 11, 29, 1)
        assert _day_tasks(busy_day, 2025, 11, 29) == []
