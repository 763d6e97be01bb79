"""SQLAlchemy enum definitions for the database schema."""

import enum

from sqlalchemy import Enum as SQLEnum


# =====================================================
# Python Enum Classes
# =====================================================


class NotificationChannel(str, enum.Enum):
    email = "email"


class NotificationStatus(str, enum.Enum):
    sent = "sent"
    failed = "failed"


# =====================================================
# SQLAlchemy Enum Types (for table definitions)
# =====================================================

notification_channel_enum = SQLEnum(
    NotificationChannel, name="notification_channel", create_type=False, native_enum=True
)
notification_status_enum = SQLEnum(
    NotificationStatus, name="notification_status", create_type=False, native_enum=True
)
