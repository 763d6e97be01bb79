"""Notification settings queries."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from ..tables import notification_settings


async def get_notification_settings(
    conn: AsyncConnection,
    user_id: int,
) -> dict[str, Any] | None:
    """Get a user's notification settings row, or None if never created."""
    result = await conn.execute(
        select(notification_settings).where(notification_settings.c.user_id == user_id)
    )
    row = result.mappings().first()
    return dict(row) if row else None


async def create_notification_settings(
    conn: AsyncConnection,
    user_id: int,
    **values: Any,
) -> dict[str, Any]:
    """Insert a settings row and return it."""
    result = await conn.execute(
        insert(notification_settings)
        .values(user_id=user_id, **values)
        .returning(notification_settings)
    )
    return dict(result.mappings().first())


async def update_notification_settings(
    conn: AsyncConnection,
    user_id: int,
    **updates: Any,
) -> dict[str, Any] | None:
    """Update a settings row and return it, or None if the row doesn't exist."""
    updates["updated_at"] = datetime.now(timezone.utc)
    result = await conn.execute(
        update(notification_settings)
        .where(notification_settings.c.user_id == user_id)
        .values(**updates)
        .returning(notification_settings)
    )
    row = result.mappings().first()
    return dict(row) if row else None
