"""Tests for the database-backed reminder store (DB mocked)."""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from core.birthdays import Birthday
from core.notifications.store import DatabaseReminderStore


class TestDatabaseReminderStore:
    @pytest.mark.asyncio
    async def test_get_preferences_returns_none_when_absent(self):
        with (
            patch("core.notifications.store.get_connection"),
            patch(
                "core.notifications.store.get_notification_settings",
                new_callable=AsyncMock,
                return_value=None,
            ),
        ):
            result = await DatabaseReminderStore().get_preferences(1)

        assert result is None

    @pytest.mark.asyncio
    async def test_get_preferences_parses_row(self):
        row = {
            "user_id": 1,
            "notification_days": "7,3,1",
            "email_enabled": True,
            "email_template": "Hi",
            "notification_time": "09:30",
        }
        with (
            patch("core.notifications.store.get_connection"),
            patch(
                "core.notifications.store.get_notification_settings",
                new_callable=AsyncMock,
                return_value=row,
            ),
        ):
            result = await DatabaseReminderStore().get_preferences(1)

        assert result.lead_days == frozenset({1, 3, 7})
        assert result.preferred_hour == 9

    @pytest.mark.asyncio
    async def test_list_active_events_maps_rows(self):
        rows = [
            {
                "birthday_id": 10,
                "user_id": 1,
                "friend_name": "Ana",
                "birth_date": date(1990, 3, 4),
                "is_active": True,
                "category_id": 2,
                "category_name": "Family",
                "category_color": "#ff0000",
                "friend_email": None,
                "notes": None,
            }
        ]
        with (
            patch("core.notifications.store.get_connection"),
            patch(
                "core.notifications.store.get_active_birthdays",
                new_callable=AsyncMock,
                return_value=rows,
            ),
        ):
            result = await DatabaseReminderStore().list_active_events(1)

        assert result == [
            Birthday(
                birthday_id=10,
                user_id=1,
                friend_name="Ana",
                birth_date=date(1990, 3, 4),
                category_id=2,
                category_name="Family",
                category_color="#ff0000",
            )
        ]

    @pytest.mark.asyncio
    async def test_list_all_users(self):
        users = [{"user_id": 1, "email": "a@example.com", "name": "A"}]
        with (
            patch("core.notifications.store.get_connection"),
            patch(
                "core.notifications.store.list_users",
                new_callable=AsyncMock,
                return_value=users,
            ),
        ):
            result = await DatabaseReminderStore().list_all_users()

        assert result == users
