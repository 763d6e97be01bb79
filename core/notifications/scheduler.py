"""
Hourly birthday reminder pass, driven by APScheduler.

Each tick runs one pass over all users:
1. Snapshot the reference date and hour once for the whole pass.
2. For each user: skip if preferences are missing or disabled, skip if it
   is not the user's preferred hour, otherwise load active birthdays and
   send one reminder per birthday whose days-until is a configured lead day.
3. Log a summary.

Nothing is stored between passes. A missed tick is not retried, and a failed
send is not retried within the pass or carried over to the next one.

Failures are isolated: a failed send only fails that send, and an error
while handling one user only affects that user. The pass always finishes.

The job runs with max_instances=1, so scheduled passes never overlap. A
manual trigger can still overlap a scheduled pass; there is no dedup guard.
"""

import asyncio
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Mapping

import sentry_sdk
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from core.config import (
    get_notification_concurrency,
    get_notification_cron,
    is_scheduler_enabled,
)
from core.notifications.dispatcher import EmailNotifier, Notifier
from core.notifications.matcher import select_due_events
from core.notifications.store import DatabaseReminderStore, ReminderStore

logger = logging.getLogger(__name__)


PASS_JOB_ID = "birthday_notification_pass"

_scheduler: AsyncIOScheduler | None = None


@dataclass
class PassSummary:
    """Counters for one pass. Owned by the pass, never persisted."""

    reference_time: datetime
    reference_hour: int
    sent: int = 0
    failed: int = 0
    skipped_users: int = 0  # not their hour
    disabled_users: int = 0  # disabled or no preferences
    errored_users: int = 0

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["reference_time"] = self.reference_time.isoformat()
        return data


# =============================================================================
# Scheduler initialization and shutdown
# =============================================================================


def init_scheduler() -> AsyncIOScheduler | None:
    """
    Start the hourly reminder job.

    Call this during app startup (in FastAPI lifespan). Returns None when
    SCHEDULER_ENABLED is off.
    """
    global _scheduler

    if _scheduler is not None:
        return _scheduler

    if not is_scheduler_enabled():
        logger.info("Notification scheduler disabled (SCHEDULER_ENABLED=false)")
        return None

    cron = get_notification_cron()
    _scheduler = AsyncIOScheduler(
        job_defaults={
            "coalesce": True,  # Combine missed runs into one
            "max_instances": 1,  # Never overlap passes
            "misfire_grace_time": 300,
        },
    )
    _scheduler.add_job(
        _run_scheduled_pass,
        trigger=CronTrigger.from_crontab(cron),
        id=PASS_JOB_ID,
        replace_existing=True,
    )
    _scheduler.start()
    logger.info(f"Notification scheduler started (cron: {cron})")
    return _scheduler


def shutdown_scheduler() -> None:
    """
    Shutdown the scheduler.

    An in-flight pass is abandoned; reminders already sent stay sent.
    """
    global _scheduler
    if _scheduler:
        _scheduler.shutdown(wait=False)
        _scheduler = None
        logger.info("Notification scheduler stopped")


async def _run_scheduled_pass() -> None:
    """Job function called by APScheduler once per tick."""
    await run_notification_pass()


# =============================================================================
# The pass
# =============================================================================


async def run_notification_pass(
    reference_time: datetime | None = None,
    *,
    store: ReminderStore | None = None,
    notifier: Notifier | None = None,
    max_concurrency: int | None = None,
) -> PassSummary:
    """
    Run one reminder pass over all users.

    Args:
        reference_time: The pass's "now" (local time). Defaults to datetime.now().
        store: Where users, preferences and birthdays come from
        notifier: Sends each reminder
        max_concurrency: Max users handled at once

    Returns:
        PassSummary with sent/failed/skipped counts. Never raises.
    """
    reference_time = reference_time or datetime.now()
    store = store or DatabaseReminderStore()
    notifier = notifier or EmailNotifier()
    max_concurrency = max_concurrency or get_notification_concurrency()

    summary = PassSummary(
        reference_time=reference_time,
        reference_hour=reference_time.hour,
    )
    logger.info(
        f"Starting birthday notification check at {reference_time} "
        f"(hour: {summary.reference_hour})"
    )

    try:
        users = await store.list_all_users()
    except Exception as e:
        logger.error(f"Could not load users for notification pass: {e}")
        sentry_sdk.capture_exception(e)
        return summary

    semaphore = asyncio.Semaphore(max_concurrency)

    async def process(user: Mapping[str, Any] | int) -> None:
        async with semaphore:
            await _process_user(user, summary, store, notifier)

    await asyncio.gather(*(process(user) for user in users))

    logger.info(
        f"Birthday notification check completed. Sent: {summary.sent}, "
        f"Failed: {summary.failed}, "
        f"Users skipped (not their hour): {summary.skipped_users}, "
        f"Disabled: {summary.disabled_users}, Errors: {summary.errored_users}"
    )
    return summary


async def _process_user(
    user: Mapping[str, Any] | int,
    summary: PassSummary,
    store: ReminderStore,
    notifier: Notifier,
) -> None:
    """
    Handle one user. Any error is contained to this user.

    Accepts a user record or a bare user id from the store.
    """
    user_id = user.get("user_id") if isinstance(user, Mapping) else user
    try:
        if user_id is None:
            raise ValueError(f"User record has no user_id: {user!r}")
        if not isinstance(user, Mapping):
            user = {"user_id": user_id}

        preferences = await store.get_preferences(user_id)
        if preferences is None or not preferences.email_enabled:
            summary.disabled_users += 1
            logger.debug(f"Notifications disabled for user {user_id}")
            return

        if preferences.preferred_hour != summary.reference_hour:
            summary.skipped_users += 1
            logger.debug(
                f"Skipping user {user_id} - not their notification hour "
                f"(current: {summary.reference_hour}, "
                f"preferred: {preferences.preferred_hour})"
            )
            return

        logger.info(
            f"Processing notifications for user {user_id} at their preferred "
            f"time: {preferences.notification_time}"
        )
        birthdays = await store.list_active_events(user_id)
        due = select_due_events(
            birthdays,
            preferences.lead_days,
            summary.reference_time.date(),
        )

        for item in due:
            birthday = item.birthday
            try:
                success = await notifier.send(
                    user,
                    birthday,
                    preferences,
                    item.days_until,
                    reference_date=summary.reference_time.date(),
                )
            except Exception as e:
                summary.failed += 1
                logger.error(
                    f"Failed to send notification for birthday {birthday.birthday_id} "
                    f"({birthday.friend_name}) to user {user_id}: {e}"
                )
                sentry_sdk.capture_exception(e)
                continue

            if success:
                summary.sent += 1
                logger.info(
                    f"Notification sent for {birthday.friend_name}'s birthday "
                    f"({item.days_until} days) to user {user_id}"
                )
            else:
                summary.failed += 1
                logger.warning(
                    f"Notification for birthday {birthday.birthday_id} "
                    f"to user {user_id} was not delivered"
                )

    except Exception as e:
        summary.errored_users += 1
        logger.error(f"Error processing notifications for user {user_id}: {e}")
        sentry_sdk.capture_exception(e)


# =============================================================================
# Manual trigger
# =============================================================================


async def trigger_manual_pass(
    reference_time: datetime | None = None,
    **kwargs: Any,
) -> PassSummary:
    """Run one pass right now, same as a scheduled tick. For operators/testing."""
    logger.info("Manual notification check triggered")
    return await run_notification_pass(reference_time, **kwargs)
