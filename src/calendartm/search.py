from typing import Iterator, NamedTuple

from calendartm.models import Calendar
from calendartm.recovery import KeywordRequiredError

class SearchHit(NamedTuple):
    year: int
    month: int
    day: int
    task_id: int
    description: str

def _fold(ch: str) -> str:
    # ASCII letters only; everything else compares as-is
    if 'A' <= ch <= 'Z':
        return chr(ord(ch) + 32)
    return ch

def contains_ignore_case(text: str, key: str) -> bool:
    """
    ASCII case-insensitive substring test.

    An empty key matches any text, including the empty string.
    """
    if not key:
        return True
    if len(key) > len(text):
        return False
    folded_text = "".join(_fold(c) for c in text)
    folded_key = "".join(_fold(c) for c in key)
    return folded_key in folded_text

def _iter_matches(calendar: Calendar, keyword: str) -> Iterator[SearchHit]:
    for year in calendar.iter_years():
        for month in year.months:
            for day in month.days:
                for task in day.tasks:
                    if contains_ignore_case(task.description, keyword):
                        yield SearchHit(year.year_number, month.month_number, day.day_number,
                                        task.id, task.description)

def search_tasks(calendar: Calendar, keyword: str) -> Iterator[SearchHit]:
    """
    Lazily yield every task whose description contains the keyword.

    Years come in ascending order, then months, days and tasks in their
    natural order. Each call starts a fresh scan.

    Raises:
        KeywordRequiredError: keyword is empty
    """
    if not keyword:
        raise KeywordRequiredError("Search keyword can't be empty.")
    return _iter_matches(calendar, keyword)
