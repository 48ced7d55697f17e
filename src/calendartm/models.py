from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Dict, Iterator, List, Optional

from calendartm.dates import Weekday, day_of_week, days_in_month, month_name
from calendartm.logs import get_logger
from calendartm.recovery import AllocationError, InvalidMonthError, InvalidYearError

log = get_logger("models")

class Task(BaseModel):
    """A single to-do entry on one day."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(ge=1, description="Position of the task within its day, starting at 1")
    description: str = Field(description="Free text of the task, kept verbatim")

    @field_validator('description')
    @classmethod
    def validate_single_line(cls, v):
        if '\n' in v or '\r' in v:
            raise ValueError("Task description must be a single line")
        return v

class Day(BaseModel):
    day_number: int = Field(ge=1, le=31, frozen=True, description="Day of the month")
    weekday: Weekday = Field(frozen=True, description="Day of the week, Sunday being 0")
    tasks: List[Task] = Field(
        default_factory=list,
        description="Tasks for the day in insertion order"
    )

    @property
    def has_tasks(self) -> bool:
        return bool(self.tasks)

    def find_task(self, task_id: int) -> Optional[Task]:
        """Find a task by id."""
        return next((t for t in self.tasks if t.id == task_id), None)

    def next_task_id(self) -> int:
        return max((t.id for t in self.tasks), default=0) + 1

    def renumber(self):
        """Reassign ids 1..N following list order."""
        for position, task in enumerate(self.tasks, start=1):
            task.id = position

class Month(BaseModel):
    month_number: int = Field(ge=1, le=12, frozen=True, description="Month of the year")
    name: str = Field(description="Display name of the month")
    days: List[Day] = Field(
        default_factory=list,
        description="One entry per day of the month, in order"
    )

    @property
    def num_days(self) -> int:
        return len(self.days)

    def get_day(self, day: int) -> Optional[Day]:
        if 1 <= day <= self.num_days:
            return self.days[day - 1]
        return None

class Year(BaseModel):
    year_number: int = Field(ge=1, frozen=True, description="Calendar year")
    months: List[Month] = Field(description="The twelve months of the year, January first")

    @model_validator(mode='after')
    def validate_structure(self):
        if [m.month_number for m in self.months] != list(range(1, 13)):
            raise ValueError("A year must hold months 1..12 in order")
        for month in self.months:
            expected = days_in_month(self.year_number, month.month_number)
            if month.num_days != expected:
                raise ValueError(
                    f"{month.name} {self.year_number} must have {expected} days, got {month.num_days}"
                )
        return self

    @classmethod
    def build(cls, year_number: int) -> 'Year':
        """Build an empty year with every month and day laid out."""
        months = []
        for month_number in range(1, 13):
            days = [
                Day(day_number=d, weekday=day_of_week(year_number, month_number, d))
                for d in range(1, days_in_month(year_number, month_number) + 1)
            ]
            months.append(Month(month_number=month_number, name=month_name(month_number), days=days))
        return cls(year_number=year_number, months=months)

    def get_month(self, month: int) -> Optional[Month]:
        if 1 <= month <= 12:
            return self.months[month - 1]
        return None

class MonthGrid(BaseModel):
    """Everything needed to draw one month without reaching into the calendar."""

    year: int
    month: int
    name: str
    day_count: int
    first_weekday: Weekday
    has_tasks: List[bool] = Field(description="Per day, whether it holds any task; index 0 is day 1")

class Calendar(BaseModel):
    """The whole in-memory store: years keyed by their number."""

    years: Dict[int, Year] = Field(
        default_factory=dict,
        description="Map of year number to year"
    )

    def find_year(self, year_number: int) -> Optional[Year]:
        return self.years.get(year_number)

    def find_or_add_year(self, year_number: int) -> Year:
        """Return the year, building and attaching it first if it is missing."""
        existing = self.years.get(year_number)
        if existing is not None:
            return existing

        if year_number < 1:
            raise InvalidYearError(f"Invalid year: {year_number}")

        # The year is attached only once fully built, so a failure leaves nothing behind
        try:
            year = Year.build(year_number)
        except MemoryError as e:
            error_msg = f"Out of memory while building year {year_number}"
            log.critical(error_msg)
            raise AllocationError(error_msg) from e

        self.years[year_number] = year
        log.debug(f"Created year {year_number}")
        return year

    def get_day(self, year: int, month: int, day: int) -> Optional[Day]:
        """Look up a day without creating anything."""
        year_node = self.years.get(year)
        if year_node is None:
            return None
        month_node = year_node.get_month(month)
        if month_node is None:
            return None
        return month_node.get_day(day)

    def iter_years(self) -> Iterator[Year]:
        """Years in ascending order."""
        for year_number in sorted(self.years):
            yield self.years[year_number]

    def month_grid(self, year: int, month: int) -> MonthGrid:
        """Grid metadata for one month; displaying a month creates its year."""
        if not 1 <= month <= 12:
            raise InvalidMonthError(f"Invalid month: {month}")
        month_node = self.find_or_add_year(year).months[month - 1]
        return MonthGrid(
            year=year,
            month=month,
            name=month_node.name,
            day_count=month_node.num_days,
            first_weekday=month_node.days[0].weekday,
            has_tasks=[d.has_tasks for d in month_node.days],
        )
