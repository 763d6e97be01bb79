"""
Notification routes.

Endpoints:
- POST /api/notifications/test - Send a test e-mail to the current user
- POST /api/admin/notifications/run - Run one reminder pass now (admin)
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from core.database import get_connection
from core.notifications.dispatcher import send_test_notification
from core.notifications.scheduler import trigger_manual_pass
from core.queries.users import get_user_by_id
from web_api.auth import get_current_user, require_admin

router = APIRouter(tags=["notifications"])


@router.post("/api/notifications/test")
async def send_test_notification_endpoint(
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    """Send a fixed verification e-mail, ignoring reminder settings."""
    async with get_connection() as conn:
        db_user = await get_user_by_id(conn, user["user_id"])

    if not db_user:
        raise HTTPException(status_code=404, detail="User not found")

    sent = await send_test_notification(db_user)
    return {"sent": sent}


@router.post("/api/admin/notifications/run")
async def run_notification_pass_endpoint(
    admin: dict = Depends(require_admin),
) -> dict[str, Any]:
    """
    Run one reminder pass synchronously and return its counts.

    Same behaviour as the hourly job, including the hour check: only users
    whose preferred hour is the current hour get reminders.
    """
    summary = await trigger_manual_pass()
    return summary.as_dict()
