"""User-related database queries using SQLAlchemy Core."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncConnection

from ..tables import users


async def get_user_by_id(
    conn: AsyncConnection,
    user_id: int,
) -> dict[str, Any] | None:
    """Get a user by primary key."""
    result = await conn.execute(
        select(users.c.user_id, users.c.email, users.c.name, users.c.is_admin).where(
            users.c.user_id == user_id
        )
    )
    row = result.mappings().first()
    return dict(row) if row else None


async def list_users(conn: AsyncConnection) -> list[dict[str, Any]]:
    """List every user with the fields needed to address a reminder."""
    result = await conn.execute(
        select(users.c.user_id, users.c.email, users.c.name).order_by(users.c.user_id)
    )
    return [dict(row) for row in result.mappings()]
