"""
Birthday reminder notifications.

Public API:
    run_notification_pass(reference_time) - Run one hourly pass now
    trigger_manual_pass() - Same, logged as a manual trigger
    send_test_notification(user) - Send a fixed verification e-mail
    init_scheduler() / shutdown_scheduler() - Hourly job lifecycle
"""

from .dispatcher import EmailNotifier, Notifier, send_test_notification
from .matcher import DueEvent, matches_today, select_due_events
from .preferences import (
    InvalidLeadDaysError,
    NotificationPreferences,
    canonicalize_lead_days,
    parse_preferred_hour,
)
from .scheduler import (
    PassSummary,
    init_scheduler,
    run_notification_pass,
    shutdown_scheduler,
    trigger_manual_pass,
)

__all__ = [
    # Pass
    "run_notification_pass",
    "trigger_manual_pass",
    "PassSummary",
    "init_scheduler",
    "shutdown_scheduler",
    # Sending
    "Notifier",
    "EmailNotifier",
    "send_test_notification",
    # Matching
    "DueEvent",
    "matches_today",
    "select_due_events",
    # Preferences
    "NotificationPreferences",
    "InvalidLeadDaysError",
    "canonicalize_lead_days",
    "parse_preferred_hour",
]
