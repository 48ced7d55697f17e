"""
Line-oriented text codec for the calendar file.

    [YEAR] 2025
    11 29 Finish assignment
    12 25 Christmas Day
    [YEAR] 2026
    1 1 New Year's Day

Task ids are not stored; re-inserting the records in file order rebuilds them.
"""
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

from calendartm.logs import get_logger
from calendartm.models import Calendar
from calendartm.recovery import FatalError, FileOperationError, InvalidDateError
from calendartm.registry import add_task

log = get_logger("io")

YEAR_HEADER = re.compile(r'^\[YEAR\]\s*([+-]?\d+)')
TASK_RECORD = re.compile(r'^\s*([+-]?\d+)\s+([+-]?\d+)(?:[ \t](.*))?$')

def _cleanup(temp_path: Optional[str]):
    if temp_path is not None and os.path.exists(temp_path):
        try:
            os.unlink(temp_path)
            log.debug(f"Cleaned up temporary file: {temp_path}")
        except OSError as cleanup_error:
            log.warning(f"Could not clean up temp file {temp_path}: {cleanup_error}")

def _create_dirs(file_path: Path):
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, PermissionError) as e:
        error_msg = f"Cannot create directory {file_path.parent}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def atomic_write(file_path: Union[Path, str], text: str, create_dirs: bool = False):
    """
    Write text to a file using an atomic replace.

    The content goes to a temporary file next to the target, which then
    replaces the target in one step; a failed write leaves the old file intact.
    """
    file_path = Path(file_path)
    temp_path = None

    try:
        if create_dirs:
            _create_dirs(file_path)

        # Same directory as the target so os.replace stays on one filesystem
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', errors='surrogateescape',
                                         newline='\n',
                                         dir=file_path.parent,
                                         prefix=f".{file_path.name}.", suffix='.tmp',
                                         delete=False) as temp_file:
            temp_path = temp_file.name
            temp_file.write(text)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, file_path)
        log.debug(f"Successfully saved file: {file_path}")
        return True

    except FileOperationError:
        raise

    except (IOError, OSError, PermissionError) as e:
        _cleanup(temp_path)
        error_msg = f"I/O error saving file {file_path}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

    except Exception as e:
        _cleanup(temp_path)
        error_msg = f"Unexpected error saving file {file_path}: {e}"
        log.critical(error_msg)
        raise FatalError(error_msg) from e

def dumps(calendar: Calendar) -> str:
    """Serialize every year, then its tasks by month, day and list order."""
    lines = []
    for year in calendar.iter_years():
        lines.append(f"[YEAR] {year.year_number}")
        for month in year.months:
            for day in month.days:
                for task in day.tasks:
                    lines.append(f"{month.month_number} {day.day_number} {task.description}")
    return "".join(f"{line}\n" for line in lines)

def loads(text: str) -> Calendar:
    """
    Parse calendar text into a new store.

    Lines that are neither a year header nor a valid record are skipped, as
    are records before the first header or with an out-of-range date.
    """
    calendar = Calendar()
    current_year = None

    for line_number, raw_line in enumerate(text.split('\n'), start=1):
        line = raw_line.rstrip('\r')

        header = YEAR_HEADER.match(line)
        if header:
            year_number = int(header.group(1))
            try:
                calendar.find_or_add_year(year_number)
                current_year = year_number
            except InvalidDateError as e:
                log.warning(f"Line {line_number}: {e}; skipping its records")
                current_year = None
            continue

        if current_year is None:
            continue

        record = TASK_RECORD.match(line)
        if not record:
            if line.strip():
                log.debug(f"Line {line_number}: unrecognised record skipped")
            continue

        month, day = int(record.group(1)), int(record.group(2))
        description = record.group(3) or ""
        try:
            add_task(calendar, current_year, month, day, description, notify=False)
        except InvalidDateError as e:
            log.debug(f"Line {line_number}: {e}; record skipped")

    return calendar

def save_calendar(calendar: Calendar, file_path: Union[Path, str], create_dirs: bool = False):
    """Write the calendar to a file, raising FileOperationError when it cannot be written."""
    atomic_write(file_path, dumps(calendar), create_dirs=create_dirs)
    log.info(f"Saved {len(calendar.years)} year(s) to {file_path}")
    return True

def load_calendar(file_path: Union[Path, str]) -> Optional[Calendar]:
    """
    Load a calendar file.

    Bytes that are not valid UTF-8 are carried through as surrogate escapes,
    so descriptions in other encodings load and are written back unchanged.

    Returns:
        The parsed calendar, or None when there is no usable prior data
        (missing or unreadable file)
    """
    file_path = Path(file_path)
    if not file_path.exists():
        log.debug(f"No calendar file at {file_path}")
        return None

    try:
        with open(file_path, 'r', encoding='utf-8', errors='surrogateescape') as f:
            text = f.read()
    except (IOError, OSError) as e:
        log.warning(f"Failed to read calendar file {file_path}: {e}; starting empty")
        return None

    calendar = loads(text)
    log.info(f"Loaded {len(calendar.years)} year(s) from {file_path}")
    return calendar
