"""
Read access to users, preferences and birthdays for the reminder pass.

The pass depends on the ReminderStore protocol, so tests can swap in an
in-memory store. DatabaseReminderStore opens a fresh connection per read.
There is no cross-read consistency: a preference changed mid-pass is simply
picked up (or not) by whichever read happens next.
"""

from typing import Any, Protocol

from core.birthdays import Birthday
from core.database import get_connection
from core.notifications.preferences import NotificationPreferences
from core.queries.birthdays import get_active_birthdays
from core.queries.settings import get_notification_settings
from core.queries.users import list_users


class ReminderStore(Protocol):
    async def list_all_users(self) -> list[dict[str, Any]]: ...

    async def get_preferences(self, user_id: int) -> NotificationPreferences | None: ...

    async def list_active_events(self, user_id: int) -> list[Birthday]: ...


class DatabaseReminderStore:
    """ReminderStore backed by PostgreSQL. Read-only."""

    async def list_all_users(self) -> list[dict[str, Any]]:
        async with get_connection() as conn:
            return await list_users(conn)

    async def get_preferences(self, user_id: int) -> NotificationPreferences | None:
        # Never creates defaults; that belongs to the settings API
        async with get_connection() as conn:
            row = await get_notification_settings(conn, user_id)
        return NotificationPreferences.from_row(row) if row else None

    async def list_active_events(self, user_id: int) -> list[Birthday]:
        async with get_connection() as conn:
            rows = await get_active_birthdays(conn, user_id)
        return [Birthday.from_row(row) for row in rows]
