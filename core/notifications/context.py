"""
Context building for birthday reminder e-mails.

Pure functions: the caller supplies the reference date and the days_until
value that triggered the reminder, so the wording always matches the match.
"""

from datetime import date, timedelta

from core.birthdays import Birthday
from core.notifications.preferences import NotificationPreferences
from core.notifications.templates import render_user_template
from core.recurrence import age_at_next_occurrence


URGENT_COLOR = "#ef4444"
SOON_COLOR = "#f59e0b"
UPCOMING_COLOR = "#3b82f6"


def format_occurrence_date(value: date) -> str:
    """Format like "March 4, 2027" (no zero padding)."""
    return f"{value:%B} {value.day}, {value.year}"


def urgency_label(days_until: int) -> str:
    if days_until == 0:
        return "TODAY!"
    if days_until == 1:
        return "TOMORROW!"
    return f"{days_until} days away"


def urgency_color(days_until: int) -> str:
    if days_until <= 1:
        return URGENT_COLOR
    if days_until <= 3:
        return SOON_COLOR
    return UPCOMING_COLOR


def when_label(days_until: int) -> str:
    if days_until == 0:
        return "Today!"
    if days_until == 1:
        return "Tomorrow"
    return f"{days_until} days"


def build_reminder_context(
    birthday: Birthday,
    preferences: NotificationPreferences,
    days_until: int,
    reference_date: date,
) -> dict:
    """
    Build template variables for one birthday reminder.

    Args:
        birthday: The birthday being reminded about
        preferences: Owner's preferences (supplies the message template)
        days_until: Days until the occurrence, as matched by the pass
        reference_date: The pass's reference date

    Returns:
        Context dict for the "birthday_reminder" templates
    """
    occurrence = reference_date + timedelta(days=days_until)
    # Age on the upcoming occurrence, not current_age()
    age = age_at_next_occurrence(birthday.birth_date, reference_date)
    birth_date = format_occurrence_date(occurrence)

    message = render_user_template(
        preferences.message_template,
        {
            "friendName": birthday.friend_name,
            "birthDate": birth_date,
            "age": age,
            "daysUntil": days_until,
        },
    )

    details = []
    if birthday.category_name:
        details.append(f"🏷️ Category: {birthday.category_name}")
    if birthday.notes:
        details.append(f"📝 Note: {birthday.notes}")

    return {
        "friend_name": birthday.friend_name,
        "birth_date": birth_date,
        "occurrence_date": occurrence.isoformat(),
        "age": age,
        "days_until": days_until,
        "urgency": urgency_label(days_until),
        "urgency_color": urgency_color(days_until),
        "when": when_label(days_until),
        "message": message,
        "details": "\n".join(details),
    }
