"""
Unified backend entry point.

One Python process, one asyncio event loop, two peer services:
  1. FastAPI (settings API, test notification, manual trigger)
  2. APScheduler job running the hourly birthday reminder pass

FastAPI's lifespan starts and stops the scheduler, so uvicorn's signal
handling covers both.

Run with: python main.py [--no-scheduler] [--port PORT]
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

project_root = Path(__file__).parent

# .env.local is gitignored and used for local dev overrides
load_dotenv(project_root / ".env.local")
load_dotenv()

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import check_required_env_vars, get_api_port, get_frontend_url
from core.database import close_engine
from core.notifications.scheduler import init_scheduler, shutdown_scheduler
from web_api.routes.notifications import router as notifications_router
from web_api.routes.settings import router as settings_router

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if os.environ.get("SENTRY_DSN"):
    sentry_sdk.init(
        dsn=os.environ["SENTRY_DSN"],
        environment=os.environ.get("ENVIRONMENT", "development"),
        traces_sample_rate=0.0,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Starts the reminder scheduler alongside the HTTP server.
    """
    ok, warnings = check_required_env_vars()
    for warning in warnings:
        logger.warning(warning)
    if not ok:
        raise RuntimeError("Missing required environment variables")

    init_scheduler()

    yield

    logger.info("Shutting down peer services...")
    shutdown_scheduler()
    await close_engine()


app = FastAPI(
    title="Birthday Reminder API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        get_frontend_url(),
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(settings_router)
app.include_router(notifications_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    from core.notifications import scheduler

    return {
        "status": "healthy",
        "scheduler_running": scheduler._scheduler is not None,
    }


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Birthday Reminder Server")
    parser.add_argument(
        "--no-scheduler",
        action="store_true",
        help="Don't start the hourly reminder job",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=get_api_port(),
        help="Port to listen on",
    )
    args = parser.parse_args()

    if args.no_scheduler:
        os.environ["SCHEDULER_ENABLED"] = "false"

    uvicorn.run(app, host="0.0.0.0", port=args.port)
