"""Birthday queries."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncConnection

from ..tables import birthdays, categories


async def get_active_birthdays(
    conn: AsyncConnection,
    user_id: int,
) -> list[dict[str, Any]]:
    """
    Get a user's active birthdays with their category, ordered by birth date.

    Args:
        conn: Database connection
        user_id: Owner of the birthdays

    Returns:
        List of birthday rows, each with category_name and category_color
        (None when uncategorized)
    """
    query = (
        select(
            birthdays.c.birthday_id,
            birthdays.c.user_id,
            birthdays.c.friend_name,
            birthdays.c.birth_date,
            birthdays.c.friend_email,
            birthdays.c.notes,
            birthdays.c.is_active,
            birthdays.c.category_id,
            categories.c.name.label("category_name"),
            categories.c.color.label("category_color"),
        )
        .select_from(
            birthdays.outerjoin(
                categories, birthdays.c.category_id == categories.c.category_id
            )
        )
        .where(birthdays.c.user_id == user_id)
        .where(birthdays.c.is_active.is_(True))
        .order_by(birthdays.c.birth_date, birthdays.c.birthday_id)
    )
    result = await conn.execute(query)
    return [dict(row) for row in result.mappings()]
