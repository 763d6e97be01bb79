#!/usr/bin/env python3
"""
Send the fixed test e-mail to one user to check the mail setup.

Usage:
    python scripts/send_test_notification.py <user_id>
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
load_dotenv(project_root / ".env")
load_dotenv(project_root / ".env.local", override=True)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


async def main(user_id: int) -> int:
    from core.database import close_engine, get_connection
    from core.notifications.dispatcher import send_test_notification
    from core.queries.users import get_user_by_id

    try:
        async with get_connection() as conn:
            user = await get_user_by_id(conn, user_id)
        if not user:
            print(f"User {user_id} not found")
            return 1
        sent = await send_test_notification(user)
    finally:
        await close_engine()

    print(f"Test notification to {user['email']}: {'sent' if sent else 'FAILED'}")
    return 0 if sent else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send a test notification e-mail")
    parser.add_argument("user_id", type=int, help="Database user ID")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.user_id)))
