"""
Command Line Interface for the calendar task manager.
"""

import sys
import click
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional

from .version import VERSION
from .config import load_settings
from .data import DataCore
from .logs import setup_logging
from .recovery import ConfigError, FileOperationError, RecoverableError
from .registry import add_task, delete_task, list_tasks, update_task
from .render import (
    render_day,
    render_month,
    render_month_tasks,
    render_search,
    render_year_calendar,
    render_year_tasks,
)
from .search import search_tasks


@contextmanager
def calendar_session(settings, save: bool = True):
    """Load the calendar, run the command body, then save it back.

    Recoverable errors are reported and end the command with exit code 1;
    the calendar is still saved so side effects such as year creation persist.
    """
    failure = None
    try:
        with DataCore.get_context(settings.data_file, autosave=save) as context:
            try:
                yield context
            except RecoverableError as e:
                failure = e
    except FileOperationError as e:
        failure = e

    if failure is not None:
        click.echo(f"❌ {failure}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=VERSION, prog_name="caltm")
@click.option('-f', '--file', 'data_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Calendar file to use (default from config, else tasks.txt)')
@click.pass_context
def main(ctx, data_file):
    """
    Calendar task manager - plan tasks on the days of a calendar.
    """
    try:
        settings = load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e))

    if settings.log_level:
        setup_logging(settings.log_level)
    if data_file is not None:
        settings = settings.model_copy(update={'data_file': data_file})
    ctx.obj = settings


@main.command()
@click.option('--year', type=click.IntRange(min=1), help='First year to lay out')
@click.pass_obj
def init(settings, year):
    """Create the calendar file with a starting year."""
    with calendar_session(settings, save=False) as context:
        if context.has_prior_data:
            click.echo(f"❌ Calendar already initialized ({context.file_path} has data)")
            return

        click.echo("No calendar file found or file is empty.")
        if year is None:
            year = click.prompt("What year would you like to start with?", type=click.IntRange(min=1))

        context.calendar.find_or_add_year(year)
        context.save()
        click.echo(f"✅ Calendar for {year} created and saved.")


@main.command()
@click.argument('year', type=int)
@click.argument('month', type=int)
@click.argument('day', type=int)
@click.argument('description', nargs=-1, required=True)
@click.pass_obj
def add(settings, year, month, day, description):
    """Add a task to a day."""
    with calendar_session(settings) as context:
        add_task(context.calendar, year, month, day, " ".join(description))
        click.echo(f"✅ Task added for {year}-{month:02d}-{day:02d}.")


@main.command()
@click.argument('year', type=int)
@click.argument('month', type=int)
@click.argument('day', type=int)
@click.pass_obj
def day(settings, year, month, day):
    """Show the tasks of one day."""
    with calendar_session(settings, save=False) as context:
        click.echo(render_day(context.calendar, year, month, day))


@main.command()
@click.argument('year', type=int)
@click.argument('month', type=int)
@click.argument('day', type=int)
@click.argument('task_id', type=int)
@click.argument('description', nargs=-1, required=True)
@click.pass_obj
def update(settings, year, month, day, task_id, description):
    """Replace the description of a task."""
    with calendar_session(settings) as context:
        update_task(context.calendar, year, month, day, task_id, " ".join(description))
        click.echo(f"✅ Updated task {task_id} on {year}-{month:02d}-{day:02d}.")


@main.command()
@click.argument('year', type=int)
@click.argument('month', type=int)
@click.argument('day', type=int)
@click.argument('task_id', type=int, required=False)
@click.pass_obj
def delete(settings, year, month, day, task_id):
    """Delete a task; lists the day and asks for the id when none is given."""
    with calendar_session(settings) as context:
        _delete_flow(context.calendar, year, month, day, task_id)


@main.command()
@click.argument('keyword')
@click.pass_obj
def search(settings, keyword):
    """Find tasks whose description contains KEYWORD (case-insensitive)."""
    with calendar_session(settings, save=False) as context:
        click.echo(render_search(keyword, search_tasks(context.calendar, keyword)))


@main.command()
@click.argument('year', type=int)
@click.argument('month', type=int)
@click.pass_obj
def month(settings, year, month):
    """Draw the calendar grid of a month."""
    with calendar_session(settings) as context:
        click.echo(render_month(context.calendar.month_grid(year, month)))


@main.command()
@click.argument('year', type=int)
@click.pass_obj
def year(settings, year):
    """Draw the calendar grids of a whole year."""
    with calendar_session(settings) as context:
        click.echo(render_year_calendar(context.calendar, year))


@main.command()
@click.argument('year', type=int)
@click.argument('month', type=int, required=False)
@click.pass_obj
def tasks(settings, year, month):
    """List every task of a year, or of one month."""
    with calendar_session(settings, save=False) as context:
        if month is None:
            click.echo(render_year_tasks(context.calendar, year))
        else:
            click.echo(render_month_tasks(context.calendar, year, month))


def _delete_flow(calendar, year, month, day, task_id):
    label = f"{year}-{month:02d}-{day:02d}"
    if task_id is None:
        day_node = calendar.get_day(year, month, day)
        if day_node is None or not day_node.has_tasks:
            click.echo(f"No tasks for {label}.")
            return
        click.echo(f"Tasks for {label}:")
        for listed_id, description in list_tasks(day_node):
            click.echo(f" {listed_id}. {description}")
        task_id = click.prompt("Enter the task number to delete", type=int)

    delete_task(calendar, year, month, day, task_id)
    click.echo(f"✅ Deleted task {task_id} from {label}.")


MENU = """
=== Simple Calendar ===
1. Add task
2. Show calendar for a month
3. View tasks for a specific day
4. Delete a task
5. Search tasks
6. View all tasks for a month
7. View all tasks for a year
8. Show calendar for a year
9. Update a task
0. Save and exit"""


def _prompt_ints(text: str, count: int) -> Optional[List[int]]:
    raw = click.prompt(text, default="", show_default=False)
    try:
        values = [int(part) for part in raw.split()]
    except ValueError:
        values = []
    if len(values) != count:
        click.echo("Invalid input.")
        return None
    return values


def _run_choice(calendar, choice: int):
    if choice == 1:
        date = _prompt_ints("Enter year month day (e.g. 2025 11 29)", 3)
        if date:
            description = click.prompt("Enter task description", default="", show_default=False)
            add_task(calendar, *date, description)
            click.echo("Task added for {}-{:02d}-{:02d}.".format(*date))
    elif choice == 2:
        year_month = _prompt_ints("Enter year and month (e.g. 2025 11)", 2)
        if year_month:
            click.echo(render_month(calendar.month_grid(*year_month)))
    elif choice == 3:
        date = _prompt_ints("Enter year month day", 3)
        if date:
            click.echo(render_day(calendar, *date))
    elif choice == 4:
        date = _prompt_ints("Enter year month day to delete from (e.g. 2025 11 29)", 3)
        if date:
            _delete_flow(calendar, *date, None)
    elif choice == 5:
        keyword = click.prompt("Enter keyword to search", default="", show_default=False)
        click.echo(render_search(keyword, search_tasks(calendar, keyword)))
    elif choice == 6:
        year_month = _prompt_ints("Enter year and month (e.g. 2025 11)", 2)
        if year_month:
            click.echo(render_month_tasks(calendar, *year_month))
    elif choice == 7:
        year = _prompt_ints("Enter year (e.g. 2025)", 1)
        if year:
            click.echo(render_year_tasks(calendar, *year))
    elif choice == 8:
        year = _prompt_ints("Enter year (e.g. 2025)", 1)
        if year:
            click.echo(render_year_calendar(calendar, *year))
    elif choice == 9:
        date = _prompt_ints("Enter year month day of the task (e.g. 2025 11 29)", 3)
        if date:
            click.echo(render_day(calendar, *date))
            task_id = click.prompt("Enter the task number to update", type=int)
            description = click.prompt("Enter the new description", default="", show_default=False)
            update_task(calendar, *date, task_id, description)
            click.echo(f"Updated task {task_id}.")
    else:
        click.echo("Invalid choice.")


@main.command()
@click.pass_obj
def menu(settings):
    """Interactive numbered menu; saves when you leave it."""
    with calendar_session(settings) as context:
        if not context.has_prior_data:
            click.echo("No calendar file found or file is empty.")
            start_year = click.prompt("What year would you like to start with?",
                                      type=click.IntRange(min=1))
            context.calendar.find_or_add_year(start_year)
            context.save()
            click.echo(f"Calendar for {start_year} created and saved.")

        while True:
            click.echo(MENU)
            try:
                choice = click.prompt("Choice", type=int)
            except click.Abort:
                click.echo("")
                break
            if choice == 0:
                break
            try:
                _run_choice(context.calendar, choice)
            except RecoverableError as e:
                click.echo(f"❌ {e}")
            except click.Abort:
                click.echo("")
                break

        click.echo("Saving and exiting...")


if __name__ == "__main__":
    main()
