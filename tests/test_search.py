"""Unit tests for task search."""

import pytest

from calendartm.recovery import KeywordRequiredError
from calendartm.registry import add_task
from calendartm.search import SearchHit, contains_ignore_case, search_tasks


class TestContainsIgnoreCase:
    """Test the substring primitive."""

    def test_case_insensitive_match(self):
        """Test upper-case keys match mixed-case text."""
        assert contains_ignore_case("Finish Assignment", "ASSIGN") is True
        assert contains_ignore_case("Finish Assignment", "finish a") is True

    def test_empty_inputs(self):
        """Test the empty key matches everything and empty text matches nothing else."""
        assert contains_ignore_case("abc", "") is True
        assert contains_ignore_case("", "") is True
        assert contains_ignore_case("", "x") is False

    def test_no_match(self):
        """Test longer keys and absent substrings."""
        assert contains_ignore_case("abc", "abcd") is False
        assert contains_ignore_case("Dinner at 6", "lunch") is False

    def test_folds_ascii_only(self):
        """Test non-ASCII letters are compared as-is."""
        assert contains_ignore_case("Café", "CAFÉ") is False
        assert contains_ignore_case("Café", "CAFé") is True


class TestSearchTasks:
    """Test search across the whole calendar."""

    def test_hits_in_calendar_order(self, holiday_calendar):
        """Test results come back by year, month, day and task order."""
        add_task(holiday_calendar, 2024, 3, 1, "Day trip", notify=False)
        hits = list(search_tasks(holiday_calendar, "DAY"))
        assert hits == [
            SearchHit(2024, 3, 1, 1, "Day trip"),
            SearchHit(2025, 12, 25, 1, "Christmas Day"),
            SearchHit(2026, 1, 1, 1, "New Year's Day"),
        ]

    def test_no_hits(self, holiday_calendar):
        """Test a keyword that appears nowhere."""
        assert list(search_tasks(holiday_calendar, "birthday")) == []

    def test_restartable(self, holiday_calendar):
        """Test each call scans the current state afresh."""
        assert len(list(search_tasks(holiday_calendar, "dinner"))) == 1
        add_task(holiday_calendar, 2025, 12, 31, "Dinner party", notify=False)
        assert len(list(search_tasks(holiday_calendar, "dinner"))) == 2

    def test_empty_keyword_rejected(self, holiday_calendar):
        """Test an empty keyword is refused rather than matching everything."""
        with pytest.raises(KeywordRequiredError):
            search_tasks(holiday_calendar, "")
