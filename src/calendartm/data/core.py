"""
DataCore - entry point for loading and saving the calendar file.

A CalendarContext loads the store when created and, with autosave on, writes
it back when its block finishes without an exception.
"""
from pathlib import Path
from typing import Optional, Union

from calendartm.config import DEFAULT_DATA_FILE
from calendartm.logs import get_logger
from calendartm.models import Calendar
from .io import load_calendar, save_calendar

log = get_logger("data")

class CalendarContext:
    """Loaded calendar plus the file it belongs to."""

    def __init__(self, file_path: Union[Path, str], autosave: bool = True):
        self.file_path = Path(file_path)
        self.autosave = autosave
        loaded = load_calendar(self.file_path)
        # An empty file counts as no prior data, same as a missing one
        self.has_prior_data = loaded is not None and bool(loaded.years)
        self.calendar: Calendar = loaded if loaded is not None else Calendar()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Save on clean exit; an exception leaves the file untouched."""
        if exc_type is not None:
            log.debug(f"Not saving {self.file_path} after {exc_type.__name__}")
        elif self.autosave:
            self.save()

    def save(self):
        save_calendar(self.calendar, self.file_path, create_dirs=True)

class DataCore:
    DATA_FILE = DEFAULT_DATA_FILE

    @staticmethod
    def get_context(file_path: Optional[Union[Path, str]] = None,
                    autosave: bool = True) -> CalendarContext:
        return CalendarContext(file_path or DataCore.DATA_FILE, autosave=autosave)
