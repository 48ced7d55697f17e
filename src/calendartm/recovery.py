class CalendarError(Exception):
    """Base exception for all calendar errors."""
    pass

class RecoverableError(CalendarError):
    """An error the caller can report and continue from."""
    pass

class FatalError(CalendarError):
    """An error that aborts the current operation entirely."""
    pass

class AllocationError(FatalError):
    """Resources ran out while building part of the calendar."""
    pass

class ConfigError(FatalError):
    """The configuration file exists but cannot be used."""
    pass

class InvalidDateError(RecoverableError, ValueError):
    """A date component is outside its valid range."""
    pass

class InvalidYearError(InvalidDateError):
    """Year numbers start at 1."""
    pass

class InvalidMonthError(InvalidDateError):
    """Month is not within 1..12."""
    pass

class InvalidDayError(InvalidDateError):
    """Day is not within 1..days-in-month for that year."""
    pass

class DateNotFoundError(RecoverableError, LookupError):
    """The addressed year/month/day does not exist in the calendar."""
    pass

class TaskNotFoundError(RecoverableError, LookupError):
    """The date exists but holds no task with the requested id."""
    pass

class NoTasksError(TaskNotFoundError):
    """The date exists but holds no tasks at all."""
    pass

class InvalidDescriptionError(RecoverableError, ValueError):
    """Task descriptions must fit on a single line."""
    pass

class KeywordRequiredError(RecoverableError, ValueError):
    """Search was requested with an empty keyword."""
    pass

class FileOperationError(RecoverableError):
    """File operation failed but can be retried."""
    pass
