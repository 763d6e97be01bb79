#!/usr/bin/env python3
"""
Run one birthday reminder pass now.

Same logic as the hourly job: only users whose preferred hour matches the
reference hour get reminders. Use --at to pretend it is another time.

Usage:
    python scripts/run_notification_pass.py
    python scripts/run_notification_pass.py --at 2026-03-01T08:00

Requirements:
    - DATABASE_URL set
    - SENDGRID_API_KEY set (otherwise every send is counted as failed)
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
load_dotenv(project_root / ".env")
load_dotenv(project_root / ".env.local", override=True)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


async def main(reference_time: datetime | None) -> int:
    from core.database import close_engine
    from core.notifications.scheduler import trigger_manual_pass

    try:
        summary = await trigger_manual_pass(reference_time)
    finally:
        await close_engine()

    print(f"\n{'=' * 60}")
    for key, value in summary.as_dict().items():
        print(f"{key:>16}: {value}")
    print(f"{'=' * 60}")

    return 1 if summary.failed or summary.errored_users else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run one birthday reminder pass")
    parser.add_argument(
        "--at",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time (ISO format, local time). Defaults to now.",
    )
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.at)))
