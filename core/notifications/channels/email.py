"""SendGrid email delivery channel."""

import html
import logging
import os

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

logger = logging.getLogger(__name__)


SENDGRID_API_KEY = os.environ.get("SENDGRID_API_KEY")
FROM_EMAIL = os.environ.get("FROM_EMAIL", "reminders@example.com")
FROM_NAME = os.environ.get("FROM_NAME", "Birthday Reminder")

DEFAULT_ACCENT_COLOR = "#667eea"

_client: SendGridAPIClient | None = None


def text_to_html(text: str, accent_color: str = DEFAULT_ACCENT_COLOR) -> str:
    """
    Wrap a plain-text body in a minimal HTML document.

    The text is escaped (user templates end up in the body) and line breaks
    are kept. The first line is rendered as a coloured banner.
    """
    lines = text.strip("\n").split("\n")
    banner = html.escape(lines[0]) if lines else ""
    rest = "<br>\n".join(html.escape(line) for line in lines[1:])

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; line-height: 1.6; color: #333;">
<div style="padding: 12px 24px; background-color: {accent_color}; color: #fff; font-weight: bold; border-radius: 8px 8px 0 0;">{banner}</div>
<div style="padding: 24px;">
{rest}
</div>
</body>
</html>"""


def _get_sendgrid_client() -> SendGridAPIClient | None:
    """Get or create SendGrid client singleton."""
    global _client
    if _client is None and SENDGRID_API_KEY:
        _client = SendGridAPIClient(SENDGRID_API_KEY)
    return _client


def send_email(
    to_email: str,
    subject: str,
    body: str,
    accent_color: str = DEFAULT_ACCENT_COLOR,
) -> bool:
    """
    Send an email via SendGrid, as both plain text and HTML.

    Blocking call; async callers should run it in a thread.

    Args:
        to_email: Recipient email address
        subject: Email subject line
        body: Plain-text body
        accent_color: Banner colour for the HTML version

    Returns:
        True if sent successfully, False otherwise
    """
    client = _get_sendgrid_client()
    if not client:
        logger.warning("SendGrid not configured (SENDGRID_API_KEY not set)")
        return False

    try:
        message = Mail(
            from_email=(FROM_EMAIL, FROM_NAME),
            to_emails=to_email,
            subject=subject,
            plain_text_content=body,
            html_content=text_to_html(body, accent_color),
        )
        response = client.send(message)
        return response.status_code in (200, 201, 202)

    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False
