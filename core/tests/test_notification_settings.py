"""Tests for the notification settings service (DB mocked)."""

from unittest.mock import AsyncMock, patch

import pytest

from core.notifications.preferences import (
    DEFAULT_MESSAGE_TEMPLATE,
    InvalidLeadDaysError,
)


def settings_row(**overrides):
    row = {
        "user_id": 7,
        "notification_days": "1,3,7",
        "email_enabled": True,
        "email_template": DEFAULT_MESSAGE_TEMPLATE,
        "notification_time": "08:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def mock_tx():
    with patch("core.notification_settings.get_transaction") as mock_get_tx:
        mock_conn = AsyncMock()
        mock_get_tx.return_value.__aenter__.return_value = mock_conn
        mock_get_tx.return_value.__aexit__.return_value = None
        yield mock_conn


class TestGetSettings:
    @pytest.mark.asyncio
    async def test_returns_existing_settings(self, mock_tx):
        from core.notification_settings import get_settings

        with (
            patch(
                "core.notification_settings.get_notification_settings",
                new_callable=AsyncMock,
                return_value=settings_row(notification_time="19:00"),
            ),
            patch(
                "core.notification_settings.create_notification_settings",
                new_callable=AsyncMock,
            ) as mock_create,
        ):
            prefs = await get_settings(7)

        assert prefs.preferred_hour == 19
        mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_defaults_on_first_read(self, mock_tx):
        from core.notification_settings import get_settings

        with (
            patch(
                "core.notification_settings.get_notification_settings",
                new_callable=AsyncMock,
                return_value=None,
            ),
            patch(
                "core.notification_settings.create_notification_settings",
                new_callable=AsyncMock,
                return_value=settings_row(),
            ) as mock_create,
        ):
            prefs = await get_settings(7)

        assert prefs.sorted_lead_days == [1, 3, 7]
        assert prefs.email_enabled is True
        kwargs = mock_create.call_args.kwargs
        assert kwargs["notification_days"] == "1,3,7"
        assert kwargs["notification_time"] == "08:00"


class TestUpdateSettings:
    @pytest.mark.asyncio
    async def test_stores_lead_days_canonical(self, mock_tx):
        from core.notification_settings import update_settings

        with (
            patch(
                "core.notification_settings.get_notification_settings",
                new_callable=AsyncMock,
                return_value=settings_row(),
            ),
            patch(
                "core.notification_settings.update_notification_settings",
                new_callable=AsyncMock,
                return_value=settings_row(notification_days="0,5,14"),
            ) as mock_update,
        ):
            prefs = await update_settings(7, lead_days=[14, 0, 5, 5])

        mock_update.assert_awaited_once_with(mock_tx, 7, notification_days="0,5,14")
        assert prefs.sorted_lead_days == [0, 5, 14]

    @pytest.mark.asyncio
    async def test_empty_lead_days_fall_back_to_one(self, mock_tx):
        from core.notification_settings import update_settings

        with (
            patch(
                "core.notification_settings.get_notification_settings",
                new_callable=AsyncMock,
                return_value=settings_row(),
            ),
            patch(
                "core.notification_settings.update_notification_settings",
                new_callable=AsyncMock,
                return_value=settings_row(notification_days="1"),
            ) as mock_update,
        ):
            await update_settings(7, lead_days=[])

        assert mock_update.call_args.kwargs["notification_days"] == "1"

    @pytest.mark.asyncio
    async def test_rejects_out_of_range_before_touching_db(self):
        from core.notification_settings import update_settings

        with patch("core.notification_settings.get_transaction") as mock_get_tx:
            with pytest.raises(InvalidLeadDaysError):
                await update_settings(7, lead_days=[1, 31])

        mock_get_tx.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_row_with_updates_when_missing(self, mock_tx):
        from core.notification_settings import update_settings

        with (
            patch(
                "core.notification_settings.get_notification_settings",
                new_callable=AsyncMock,
                return_value=None,
            ),
            patch(
                "core.notification_settings.create_notification_settings",
                new_callable=AsyncMock,
                return_value=settings_row(email_enabled=False),
            ) as mock_create,
        ):
            prefs = await update_settings(7, email_enabled=False)

        assert prefs.email_enabled is False
        kwargs = mock_create.call_args.kwargs
        assert kwargs["email_enabled"] is False
        assert kwargs["notification_days"] == "1,3,7"


class TestPreferencesToResponse:
    def test_serializes_sorted(self):
        from core.notification_settings import preferences_to_response
        from core.notifications.preferences import NotificationPreferences

        prefs = NotificationPreferences.from_row(
            settings_row(notification_days="7,1,3", notification_time="21:30")
        )

        assert preferences_to_response(prefs) == {
            "lead_days": [1, 3, 7],
            "email_enabled": True,
            "message_template": DEFAULT_MESSAGE_TEMPLATE,
            "notification_time": "21:30",
            "preferred_hour": 21,
        }
