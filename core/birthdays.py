"""Birthday record used by the reminder pipeline."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping


@dataclass(frozen=True)
class Birthday:
    """A tracked birthday owned by one user."""

    birthday_id: int
    user_id: int
    friend_name: str
    birth_date: date
    is_active: bool = True
    category_id: int | None = None
    category_name: str | None = None
    category_color: str | None = None
    friend_email: str | None = None
    notes: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Birthday":
        """Build from a birthdays row (optionally joined with categories)."""
        return cls(
            birthday_id=row["birthday_id"],
            user_id=row["user_id"],
            friend_name=row["friend_name"],
            birth_date=row["birth_date"],
            is_active=row.get("is_active", True),
            category_id=row.get("category_id"),
            category_name=row.get("category_name"),
            category_color=row.get("category_color"),
            friend_email=row.get("friend_email"),
            notes=row.get("notes"),
        )
