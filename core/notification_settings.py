"""
Notification settings service.

Reading settings creates defaults on first access. The reminder pass never
does that: it reads through ReminderStore and treats missing settings as
disabled.
"""

import logging
from typing import Any, Iterable

from core.database import get_transaction
from core.notifications.preferences import (
    DEFAULT_LEAD_DAYS,
    DEFAULT_MESSAGE_TEMPLATE,
    DEFAULT_NOTIFICATION_TIME,
    NotificationPreferences,
    format_lead_days,
    validate_lead_days,
)
from core.queries.settings import (
    create_notification_settings,
    get_notification_settings,
    update_notification_settings,
)

logger = logging.getLogger(__name__)


def _default_values() -> dict[str, Any]:
    return {
        "notification_days": format_lead_days(DEFAULT_LEAD_DAYS),
        "email_enabled": True,
        "email_template": DEFAULT_MESSAGE_TEMPLATE,
        "notification_time": DEFAULT_NOTIFICATION_TIME,
    }


async def get_settings(user_id: int) -> NotificationPreferences:
    """Get a user's settings, creating the defaults if none exist yet."""
    async with get_transaction() as conn:
        row = await get_notification_settings(conn, user_id)
        if row is None:
            logger.info(f"Creating default notification settings for user {user_id}")
            row = await create_notification_settings(conn, user_id, **_default_values())
    return NotificationPreferences.from_row(row)


async def update_settings(
    user_id: int,
    lead_days: Iterable[int] | None = None,
    email_enabled: bool | None = None,
    message_template: str | None = None,
    notification_time: str | None = None,
) -> NotificationPreferences:
    """
    Partially update a user's settings. Fields left as None are unchanged.

    Lead days are validated and stored ascending and de-duplicated. The
    notification time is stored as given; an unparseable value makes the
    pass fall back to the default hour.

    Raises:
        InvalidLeadDaysError: If a lead day is outside [0, 30]
    """
    updates: dict[str, Any] = {}
    if lead_days is not None:
        updates["notification_days"] = format_lead_days(validate_lead_days(lead_days))
    if email_enabled is not None:
        updates["email_enabled"] = email_enabled
    if message_template is not None:
        updates["email_template"] = message_template
    if notification_time is not None:
        updates["notification_time"] = notification_time

    async with get_transaction() as conn:
        row = await get_notification_settings(conn, user_id)
        if row is None:
            row = await create_notification_settings(
                conn, user_id, **{**_default_values(), **updates}
            )
        elif updates:
            row = await update_notification_settings(conn, user_id, **updates)

    logger.info(f"Notification settings updated for user {user_id}")
    return NotificationPreferences.from_row(row)


def preferences_to_response(preferences: NotificationPreferences) -> dict[str, Any]:
    """Serialize preferences for the API."""
    return {
        "lead_days": preferences.sorted_lead_days,
        "email_enabled": preferences.email_enabled,
        "message_template": preferences.message_template,
        "notification_time": preferences.notification_time,
        "preferred_hour": preferences.preferred_hour,
    }
