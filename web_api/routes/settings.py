"""
Notification settings routes.

Endpoints:
- GET /api/settings - Current user's settings (defaults created on first read)
- PUT /api/settings - Update current user's settings
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from core.notification_settings import (
    get_settings,
    preferences_to_response,
    update_settings,
)
from core.notifications.preferences import InvalidLeadDaysError
from web_api.auth import get_current_user

router = APIRouter(prefix="/api/settings", tags=["settings"])


class NotificationSettingsUpdate(BaseModel):
    """Schema for updating notification settings. Omitted fields are unchanged."""

    lead_days: list[int] | None = None
    email_enabled: bool | None = None
    message_template: str | None = None
    notification_time: str | None = None  # "HH:MM"


@router.get("")
async def get_my_settings(
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    """Get the current user's notification settings."""
    preferences = await get_settings(user["user_id"])
    return preferences_to_response(preferences)


@router.put("")
async def update_my_settings(
    updates: NotificationSettingsUpdate,
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    """
    Update the current user's notification settings.

    Lead days must each be between 0 and 30.
    """
    try:
        preferences = await update_settings(
            user["user_id"],
            lead_days=updates.lead_days,
            email_enabled=updates.email_enabled,
            message_template=updates.message_template,
            notification_time=updates.notification_time,
        )
    except InvalidLeadDaysError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"status": "updated", "settings": preferences_to_response(preferences)}
