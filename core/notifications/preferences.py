"""
Per-user notification preferences.

Storage keeps lead days as comma-joined text ("7,3,1") and the send time as
"HH:MM" text. This module converts those columns into a NotificationPreferences
value and back. Parsing here is lenient: bad stored values fall back to
defaults instead of failing the scheduling pass. Strict checks happen in
validate_lead_days(), which the settings API calls before saving.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)


DEFAULT_LEAD_DAYS = (7, 3, 1)
# Used when lead days are set to an empty list
FALLBACK_LEAD_DAY = 1
DEFAULT_PREFERRED_HOUR = 8
DEFAULT_NOTIFICATION_TIME = "08:00"
DEFAULT_MESSAGE_TEMPLATE = (
    "Hey! Just a reminder that {friendName}'s birthday is coming up on "
    "{birthDate}. They will be turning {age} years old!"
)

MIN_LEAD_DAY = 0
MAX_LEAD_DAY = 30

_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


class InvalidLeadDaysError(ValueError):
    """Raised when a lead day is outside [MIN_LEAD_DAY, MAX_LEAD_DAY]."""


@dataclass(frozen=True)
class NotificationPreferences:
    """Notification settings for one user."""

    user_id: int
    lead_days: frozenset[int]
    email_enabled: bool
    preferred_hour: int
    message_template: str
    notification_time: str = DEFAULT_NOTIFICATION_TIME

    @classmethod
    def default(cls, user_id: int) -> "NotificationPreferences":
        return cls(
            user_id=user_id,
            lead_days=frozenset(DEFAULT_LEAD_DAYS),
            email_enabled=True,
            preferred_hour=DEFAULT_PREFERRED_HOUR,
            message_template=DEFAULT_MESSAGE_TEMPLATE,
            notification_time=DEFAULT_NOTIFICATION_TIME,
        )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "NotificationPreferences":
        """Build preferences from a notification_settings row."""
        notification_time = row.get("notification_time") or DEFAULT_NOTIFICATION_TIME
        enabled = row.get("email_enabled")
        return cls(
            user_id=row["user_id"],
            lead_days=frozenset(parse_lead_days(row.get("notification_days"))),
            email_enabled=True if enabled is None else bool(enabled),
            preferred_hour=parse_preferred_hour(notification_time),
            message_template=row.get("email_template") or DEFAULT_MESSAGE_TEMPLATE,
            notification_time=notification_time,
        )

    @property
    def sorted_lead_days(self) -> list[int]:
        return sorted(self.lead_days)


def parse_preferred_hour(raw: str | None) -> int:
    """
    Parse the hour from an "HH:MM" value.

    Never raises: None, empty or malformed input returns DEFAULT_PREFERRED_HOUR.
    """
    if not raw:
        return DEFAULT_PREFERRED_HOUR

    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(raw.strip(), fmt).hour
        except (ValueError, AttributeError):
            continue

    logger.warning(
        f"Failed to parse notification time '{raw}', "
        f"defaulting to {DEFAULT_PREFERRED_HOUR}:00"
    )
    return DEFAULT_PREFERRED_HOUR


def canonicalize_lead_days(values: Iterable[int] | None) -> list[int]:
    """
    Sort and de-duplicate lead days.

    An empty or None input becomes [FALLBACK_LEAD_DAY]. To turn reminders off,
    set email_enabled to False instead.

    Examples:
        >>> canonicalize_lead_days([3, 1, 7, 1])
        [1, 3, 7]
        >>> canonicalize_lead_days([])
        [1]
    """
    days = sorted({int(value) for value in values or ()})
    return days or [FALLBACK_LEAD_DAY]


def validate_lead_days(values: Iterable[int]) -> list[int]:
    """
    Check lead days are in range and return them canonicalized.

    Raises:
        InvalidLeadDaysError: If any value is outside [0, 30]
    """
    values = list(values)
    for value in values:
        if value < MIN_LEAD_DAY or value > MAX_LEAD_DAY:
            raise InvalidLeadDaysError(
                f"Notification days must be between {MIN_LEAD_DAY} and {MAX_LEAD_DAY}"
            )
    return canonicalize_lead_days(values)


def parse_lead_days(raw: str | None) -> list[int]:
    """Parse the stored comma-joined text ("7,3,1") into canonical lead days."""
    if not raw:
        return [FALLBACK_LEAD_DAY]

    days = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            days.append(int(token))
        except ValueError:
            logger.warning(f"Ignoring malformed notification day '{token}'")
    return canonicalize_lead_days(days)


def format_lead_days(values: Iterable[int]) -> str:
    """Serialize lead days for storage: ascending, comma-joined."""
    return ",".join(str(day) for day in canonicalize_lead_days(values))
