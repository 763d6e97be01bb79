"""
Decide which birthdays are due for a reminder on a given day.

Pure functions, no I/O. The reference date is passed in by the caller.
"""

from dataclasses import dataclass
from datetime import date
from typing import Collection, Iterable

from core.birthdays import Birthday
from core.recurrence import days_until


@dataclass(frozen=True)
class DueEvent:
    """A birthday that matched one of the user's lead days."""

    birthday: Birthday
    days_until: int


def matches_today(lead_days: Collection[int], days_remaining: int) -> bool:
    """True when days_remaining is one of the configured lead days."""
    return days_remaining in lead_days


def select_due_events(
    birthdays: Iterable[Birthday],
    lead_days: Collection[int],
    reference_date: date,
) -> list[DueEvent]:
    """
    Filter birthdays down to those due for a reminder on reference_date.

    Keeps the input order. Each result carries the days_until value that
    triggered it, so the message wording matches the match.
    """
    lead_days = frozenset(lead_days)
    due = []
    for birthday in birthdays:
        remaining = days_until(birthday.birth_date, reference_date)
        if matches_today(lead_days, remaining):
            due.append(DueEvent(birthday=birthday, days_until=remaining))
    return due
