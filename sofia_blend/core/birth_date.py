"""Birth Date: validated, immutable calendar date that feeds the numerology deriver.

Invariants:
    - year in [MIN_BIRTH_YEAR, MAX_BIRTH_YEAR], month in [1, 12], day valid for month/year
    - Instances built through BirthDate.create are always calendar-valid
    - age_in_years is the whole-year difference (month and day are ignored)

Design Decisions:
    - Frozen dataclass over datetime.date: keeps the validation rules and error
      fields explicit (ADR: InvalidBirthDateError names the offending field)
"""

import calendar
from dataclasses import dataclass
from datetime import date

from sofia_blend.core.errors import InvalidBirthDateError


MIN_BIRTH_YEAR: int = 1900
MAX_BIRTH_YEAR: int = 2025


@dataclass(frozen=True)
class BirthDate:
    """Day, month and year of birth."""
    day: int
    month: int
    year: int

    @classmethod
    def create(cls, day: int, month: int, year: int) -> "BirthDate":
        """Validate ranges and calendar, then build. Raises InvalidBirthDateError."""
        if not 1 <= day <= 31:
            raise InvalidBirthDateError("Day must be between 1 and 31", field="day")
        if not 1 <= month <= 12:
            raise InvalidBirthDateError("Month must be between 1 and 12", field="month")
        if not MIN_BIRTH_YEAR <= year <= MAX_BIRTH_YEAR:
            raise InvalidBirthDateError(
                f"Year must be between {MIN_BIRTH_YEAR} and {MAX_BIRTH_YEAR}",
                field="year",
            )
        days_in_month = calendar.monthrange(year, month)[1]
        if day > days_in_month:
            raise InvalidBirthDateError(
                f"Month {month} of {year} has only {days_in_month} days",
                field="day",
            )
        return cls(day=day, month=month, year=year)

    @classmethod
    def from_date(cls, value: date) -> "BirthDate":
        return cls.create(value.day, value.month, value.year)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


def age_in_years(birth_date: BirthDate, today: date) -> int:
    """Age as the difference of calendar years."""
    return today.year - birth_date.year
