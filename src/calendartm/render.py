"""
Plain-text rendering of calendars, task listings and search results.

Every function returns a string; printing is left to the caller.
"""
from typing import Iterable, List

from calendartm.dates import Weekday
from calendartm.models import Calendar, Day, MonthGrid
from calendartm.recovery import InvalidMonthError
from calendartm.search import SearchHit

GRID_WIDTH = 29
ROW_SEPARATOR = "|___|___|___|___|___|___|___|"
BLANK_CELL = "   "
LEGEND = "* = day has one or more tasks."

def _cell(day_number: int, has_task: bool) -> str:
    marker = "*" if has_task else " "
    if day_number < 10:
        return f"{day_number}{marker} "
    return f"{day_number}{marker}"

def render_month(grid: MonthGrid) -> str:
    """Draw one month as a boxed grid, starring days that hold tasks."""
    title = f"{grid.name} {grid.year}"
    header = "|" + "|".join(f"{w.short_name} " for w in Weekday) + "|"

    cells = [BLANK_CELL] * grid.first_weekday
    cells += [_cell(d, has_task) for d, has_task in enumerate(grid.has_tasks, start=1)]
    cells += [BLANK_CELL] * (-len(cells) % 7)

    rows = ["|" + "|".join(cells[i:i + 7]) + "|" for i in range(0, len(cells), 7)]

    lines = [
        " " * ((GRID_WIDTH - len(title)) // 2) + title,
        "_" * GRID_WIDTH,
        header,
        ROW_SEPARATOR,
    ]
    for row in rows:
        lines.append(row)
        lines.append(ROW_SEPARATOR)
    lines.append("")
    lines.append(LEGEND)
    return "\n".join(lines) + "\n"

def render_year_calendar(calendar: Calendar, year: int) -> str:
    """Banner followed by the twelve month grids; creates the year if needed."""
    banner = f"===Calendar of {year}==="
    parts = [" " * max((GRID_WIDTH - len(banner)) // 2, 0) + banner]
    for month in range(1, 13):
        parts.append(render_month(calendar.month_grid(year, month)))
    return "\n".join(parts)

def render_day(calendar: Calendar, year: int, month: int, day: int) -> str:
    day_node = calendar.get_day(year, month, day)
    if day_node is None or not day_node.has_tasks:
        return f"No tasks for {year}-{month:02d}-{day:02d}."

    month_name = calendar.years[year].months[month - 1].name
    lines = [f"Tasks for {day_node.weekday.display_name}, {month_name} {day}, {year}:"]
    lines += [f" {t.id}. {t.description}" for t in day_node.tasks]
    return "\n".join(lines)

def _day_summary(day: Day) -> str:
    # "29 (Saturday): Task A, Task B"
    descriptions = ", ".join(t.description for t in day.tasks)
    return f"{day.day_number:2d} ({day.weekday.display_name}): {descriptions}"

def render_month_tasks(calendar: Calendar, year: int, month: int) -> str:
    """Every task of a month, one line per day; reading never creates the year."""
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Invalid month: {month}")
    year_node = calendar.find_year(year)
    if year_node is None:
        return f"No data for year {year}."

    month_node = year_node.get_month(month)
    lines = [f"=== {month_node.name} {year} ==="]
    lines += [_day_summary(d) for d in month_node.days if d.has_tasks]
    if len(lines) == 1:
        lines.append(f"No tasks stored for {month_node.name} {year}.")
    return "\n".join(lines)

def render_year_tasks(calendar: Calendar, year: int) -> str:
    year_node = calendar.find_year(year)
    if year_node is None:
        return f"No data for year {year}."

    lines: List[str] = [f"=== Tasks for {year} ==="]
    found_any = False
    for month_node in year_node.months:
        busy_days = [d for d in month_node.days if d.has_tasks]
        if not busy_days:
            continue
        found_any = True
        lines.append("")
        lines.append(f"-- {month_node.name} --")
        lines += [_day_summary(d) for d in busy_days]

    if not found_any:
        lines.append(f"No tasks stored for {year}.")
    return "\n".join(lines)

def render_search(keyword: str, hits: Iterable[SearchHit]) -> str:
    lines = [
        f" - {h.year}-{h.month:02d}-{h.day:02d} (Task {h.task_id}): {h.description}"
        for h in hits
    ]
    if not lines:
        return f'No tasks found containing "{keyword}".'
    return "\n".join([f'Search results for "{keyword}":'] + lines)
