"""Query layer for database operations using SQLAlchemy Core."""

from .birthdays import get_active_birthdays
from .settings import (
    create_notification_settings,
    get_notification_settings,
    update_notification_settings,
)
from .users import get_user_by_id, list_users

__all__ = [
    # Users
    "get_user_by_id",
    "list_users",
    # Birthdays
    "get_active_birthdays",
    # Settings
    "get_notification_settings",
    "create_notification_settings",
    "update_notification_settings",
]
