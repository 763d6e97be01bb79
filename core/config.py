"""
Centralized configuration for the birthday reminder service.

All settings come from environment variables with safe defaults.
"""

import logging
import os

logger = logging.getLogger(__name__)


DEFAULT_NOTIFICATION_CRON = "0 * * * *"  # top of every hour
DEFAULT_NOTIFICATION_CONCURRENCY = 10


def is_dev_mode() -> bool:
    """Check if running in development mode (--dev flag or DEV_MODE env)."""
    return os.getenv("DEV_MODE", "").lower() in ("true", "1", "yes")


def is_production() -> bool:
    """Check if running in production (ENVIRONMENT=production)."""
    return os.getenv("ENVIRONMENT", "").lower() == "production"


def get_api_port() -> int:
    """Get API server port from env or default."""
    return _get_int("API_PORT", 8000)


def get_frontend_url() -> str:
    """Get frontend URL for CORS."""
    return os.environ.get("FRONTEND_URL", "http://localhost:5173").rstrip("/")


def get_app_name() -> str:
    """Name shown in e-mail footers."""
    return os.environ.get("APP_NAME", "Birthday Reminder")


def is_scheduler_enabled() -> bool:
    """Whether the hourly reminder job starts with the app (default: yes)."""
    return os.getenv("SCHEDULER_ENABLED", "true").lower() in ("true", "1", "yes")


def get_notification_cron() -> str:
    """Crontab expression for the reminder pass."""
    return os.getenv("NOTIFICATION_CRON", "").strip() or DEFAULT_NOTIFICATION_CRON


def get_notification_concurrency() -> int:
    """Max users processed in parallel during one pass."""
    value = _get_int("NOTIFICATION_CONCURRENCY", DEFAULT_NOTIFICATION_CONCURRENCY)
    return value if value > 0 else DEFAULT_NOTIFICATION_CONCURRENCY


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: '{raw}', using {default}")
        return default


# Required environment variables
# Format: (name, description, required_in_dev)
REQUIRED_ENV_VARS = [
    ("DATABASE_URL", "PostgreSQL connection string", True),
    ("JWT_SECRET", "Secret key for session tokens", True),
    ("SENDGRID_API_KEY", "SendGrid API key for reminder e-mails", False),
]


def check_required_env_vars() -> tuple[bool, list[str]]:
    """
    Check that required environment variables are set.

    Returns:
        (all_ok, warnings): Tuple of success flag and list of warning messages
    """
    warnings = []
    errors = []
    in_dev = is_dev_mode()

    for name, description, required_in_dev in REQUIRED_ENV_VARS:
        if os.environ.get(name):
            continue
        if is_production():
            errors.append(f"  ✗ {name}: Not set ({description})")
        elif required_in_dev or not in_dev:
            warnings.append(f"  ⚠ {name}: Not set ({description})")

    if errors:
        for error in errors:
            logger.error(error)
        return False, warnings

    return True, warnings
