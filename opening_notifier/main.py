from contextlib import asynccontextmanager
from typing import Optional

from apscheduler.schedulers.base import BaseScheduler
from fastapi import BackgroundTasks, FastAPI, Header, HTTPException
from loguru import logger

from opening_notifier.api.router import api_router
from opening_notifier.config import get_settings
from opening_notifier.db.database import init_db
from opening_notifier.scheduler.jobs import run_opening_notification
from opening_notifier.scheduler.runner import OPENING_JOB_ID, start_scheduler

settings = get_settings()
scheduler: Optional[BaseScheduler] = None


def _next_opening_run() -> Optional[str]:
    job = scheduler.get_job(OPENING_JOB_ID) if scheduler else None
    if job is None or job.next_run_time is None:
        return None
    return job.next_run_time.isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI):
    global scheduler
    await init_db()
    scheduler = start_scheduler()
    logger.info(
        f"Watching {settings.venue_name} ({settings.venue_id}); "
        f"next opening check at {_next_opening_run()}"
    )

    yield

    # 等待中的通知可能長達數小時，不等它結束
    scheduler.shutdown(wait=False)
    scheduler = None
    logger.info(f"Stopped watching {settings.venue_name}")


app = FastAPI(
    title="Opening Notifier API",
    description="Announces when the venue opens each day",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None,
)

app.include_router(api_router)


def _require_admin(x_admin_key: Optional[str]) -> None:
    if not settings.is_production:
        return
    if not settings.admin_api_key:
        raise HTTPException(status_code=503, detail="Admin API not configured")
    if x_admin_key != settings.admin_api_key:
        raise HTTPException(status_code=401, detail="Invalid admin key")


@app.get("/health")
async def health_check():
    return {"status": "ok", "venue_id": settings.venue_id}


@app.get("/api/admin/status")
async def admin_status(x_admin_key: str = Header(None)):
    """Scheduler state and when the next opening check fires."""
    _require_admin(x_admin_key)
    return {
        "venue_id": settings.venue_id,
        "scheduler_running": bool(scheduler and scheduler.running),
        "next_opening_check": _next_opening_run(),
    }


@app.post("/api/admin/run", status_code=202)
async def trigger_run(
    background_tasks: BackgroundTasks,
    wait: bool = True,
    x_admin_key: str = Header(None),
):
    """Kick off one opening announcement outside the daily schedule."""
    _require_admin(x_admin_key)
    background_tasks.add_task(run_opening_notification, wait)
    logger.info(f"Manual opening notification queued (wait={wait})")
    return {"status": "queued", "wait": wait}
