"""
Notification dispatcher - turns a due birthday into one e-mail.

The reminder pass only decides what is due; everything about wording and
transport lives here.
"""

import asyncio
import logging
from datetime import date, timedelta
from typing import Any, Protocol

from core.birthdays import Birthday
from core.config import get_app_name
from core.enums import NotificationChannel, NotificationStatus
from core.notifications.channels.email import send_email
from core.notifications.context import build_reminder_context
from core.notifications.preferences import NotificationPreferences
from core.notifications.templates import get_message

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    async def send(
        self,
        user: dict[str, Any],
        birthday: Birthday,
        preferences: NotificationPreferences,
        days_until: int,
        *,
        reference_date: date,
    ) -> bool: ...


async def log_notification(
    user_id: int,
    birthday_id: int,
    days_until: int,
    occurrence_date: date,
    success: bool,
    error_message: str | None = None,
) -> None:
    """
    Append a reminder send to notification_log.

    Failures here are logged and dropped so they never affect sending.
    """
    from sqlalchemy import insert
    from core.database import get_transaction
    from core.tables import notification_log

    try:
        async with get_transaction() as conn:
            await conn.execute(
                insert(notification_log).values(
                    user_id=user_id,
                    birthday_id=birthday_id,
                    days_until=days_until,
                    occurrence_date=occurrence_date,
                    channel=NotificationChannel.email,
                    status=NotificationStatus.sent if success else NotificationStatus.failed,
                    error_message=error_message,
                )
            )
    except Exception as e:
        logger.warning(f"Failed to log notification for user {user_id}: {e}")


def get_reminder_subject(context: dict) -> str:
    """Pick the subject wording for today / tomorrow / N days."""
    days_until = context["days_until"]
    if days_until == 0:
        field = "email_subject_today"
    elif days_until == 1:
        field = "email_subject_tomorrow"
    else:
        field = "email_subject"
    return get_message("birthday_reminder", field, context)


class EmailNotifier:
    """Sends birthday reminders by e-mail."""

    def __init__(self, app_name: str | None = None):
        self.app_name = app_name or get_app_name()

    async def send(
        self,
        user: dict[str, Any],
        birthday: Birthday,
        preferences: NotificationPreferences,
        days_until: int,
        *,
        reference_date: date,
    ) -> bool:
        """
        Send one reminder e-mail.

        Returns:
            True if the mail transport accepted the message
        """
        to_email = user.get("email")
        if not to_email:
            logger.warning(f"User {user['user_id']} has no email, cannot send reminder")
            return False

        logger.debug(
            f"Sending reminder to {to_email} for {birthday.friend_name} ({days_until} days)"
        )

        context = {
            **build_reminder_context(birthday, preferences, days_until, reference_date),
            "app_name": self.app_name,
        }
        subject = get_reminder_subject(context)
        body = get_message("birthday_reminder", "email_body", context)

        success = await asyncio.to_thread(
            send_email,
            to_email=to_email,
            subject=subject,
            body=body,
            accent_color=context["urgency_color"],
        )

        await log_notification(
            user_id=user["user_id"],
            birthday_id=birthday.birthday_id,
            days_until=days_until,
            occurrence_date=reference_date + timedelta(days=days_until),
            success=success,
            error_message=None if success else "Mail transport rejected the message",
        )

        if success:
            logger.info(
                f"Birthday reminder sent to {to_email} for {birthday.friend_name}"
            )
        return success


async def send_test_notification(
    user: dict[str, Any],
    app_name: str | None = None,
) -> bool:
    """
    Send a fixed-content e-mail to check the mail setup.

    Skips all matching; the message goes out whatever the user's settings.
    """
    to_email = user.get("email")
    logger.info(f"Sending test notification to user {user.get('user_id')} ({to_email})")
    if not to_email:
        return False

    context = {"app_name": app_name or get_app_name()}
    subject = get_message("test_notification", "email_subject", context)
    body = get_message("test_notification", "email_body", context)

    success = await asyncio.to_thread(
        send_email, to_email=to_email, subject=subject, body=body
    )
    if success:
        logger.info(f"Test notification sent successfully to {to_email}")
    else:
        logger.error(f"Failed to send test notification to {to_email}")
    return success
