"""SQLAlchemy Core table definitions for the database schema."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

from .enums import notification_channel_enum, notification_status_enum

# Naming convention for constraints (helps Alembic generate better names)
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
metadata = MetaData(naming_convention=convention)


# =====================================================
# 1. USERS
# =====================================================
users = Table(
    "users",
    metadata,
    Column("user_id", Integer, primary_key=True, autoincrement=True),
    Column("email", Text, nullable=False),
    Column("name", Text),
    Column("password_hash", Text),
    Column("is_admin", Boolean, server_default="false"),
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Column("updated_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Index("idx_users_email", "email", unique=True),
)


# =====================================================
# 2. CATEGORIES
# =====================================================
categories = Table(
    "categories",
    metadata,
    Column("category_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", Text, nullable=False),
    Column("color", Text),  # hex, e.g. "#3b82f6"
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Index("idx_categories_user_id", "user_id"),
)


# =====================================================
# 3. BIRTHDAYS
# =====================================================
# Year of birth_date is the birth year; recurrence only uses month/day
birthdays = Table(
    "birthdays",
    metadata,
    Column("birthday_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.category_id", ondelete="SET NULL"),
    ),
    Column("friend_name", Text, nullable=False),
    Column("birth_date", Date, nullable=False),
    Column("friend_email", Text),
    Column("notes", Text),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Column("updated_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Index("idx_birthdays_user_id", "user_id"),
    Index("idx_birthdays_user_active", "user_id", "is_active"),
)


# =====================================================
# 4. NOTIFICATION SETTINGS
# =====================================================
notification_settings = Table(
    "notification_settings",
    metadata,
    Column("settings_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    # Comma-joined ascending lead days, e.g. "1,3,7"
    Column("notification_days", Text, nullable=False, server_default="1,3,7"),
    Column("email_enabled", Boolean, nullable=False, server_default="true"),
    Column("email_template", Text),
    Column("notification_time", Text, server_default="08:00"),  # "HH:MM"
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Column("updated_at", TIMESTAMP(timezone=True), server_default=func.now()),
)


# =====================================================
# 5. NOTIFICATION LOG
# =====================================================
# Audit trail only; not consulted before sending
notification_log = Table(
    "notification_log",
    metadata,
    Column("log_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.user_id", ondelete="SET NULL"),
    ),
    Column(
        "birthday_id",
        Integer,
        ForeignKey("birthdays.birthday_id", ondelete="SET NULL"),
    ),
    Column("days_until", Integer),
    Column("occurrence_date", Date),
    Column("channel", notification_channel_enum, nullable=False),
    Column("status", notification_status_enum, nullable=False),
    Column("error_message", Text),
    Column("sent_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Index("idx_notification_log_user_id", "user_id"),
    Index("idx_notification_log_sent_at", "sent_at"),
    Index(
        "idx_notification_log_occurrence",
        "user_id",
        "birthday_id",
        "occurrence_date",
    ),
)
