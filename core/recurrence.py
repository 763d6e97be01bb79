"""
Annual recurrence calculations for birthdays.

All functions are pure: the reference date is always passed in, never read
from the clock. Only the month and day of the base date matter for
recurrence; the year is used for age only.

Feb 29 policy: in a non-leap year a Feb 29 birthday falls on Feb 28.
"""

from datetime import date


def occurrence_in_year(base_date: date, year: int) -> date:
    """Project base_date onto the given year (Feb 29 -> Feb 28 in non-leap years)."""
    try:
        return base_date.replace(year=year)
    except ValueError:
        # Only Feb 29 can fail to project
        return date(year, 2, 28)


def next_occurrence(base_date: date, reference_date: date) -> date:
    """
    Get the next occurrence of base_date on or after reference_date.

    Examples:
        >>> next_occurrence(date(1990, 3, 4), date(2026, 3, 1))
        datetime.date(2026, 3, 4)
        >>> next_occurrence(date(1990, 1, 2), date(2026, 12, 30))
        datetime.date(2027, 1, 2)
    """
    occurrence = occurrence_in_year(base_date, reference_date.year)
    if occurrence < reference_date:
        occurrence = occurrence_in_year(base_date, reference_date.year + 1)
    return occurrence


def days_until(base_date: date, reference_date: date) -> int:
    """Whole calendar days from reference_date to the next occurrence (>= 0)."""
    return (next_occurrence(base_date, reference_date) - reference_date).days


def current_age(base_date: date, reference_date: date) -> int:
    """
    Calendar-year difference between reference_date and base_date.

    Does not check whether this year's birthday has happened yet, so it reads
    one year high before the birthday. Use age_at_next_occurrence() for the
    age someone is turning.
    """
    return reference_date.year - base_date.year


def age_at_next_occurrence(base_date: date, reference_date: date) -> int:
    """Age reached on the next occurrence."""
    return next_occurrence(base_date, reference_date).year - base_date.year
