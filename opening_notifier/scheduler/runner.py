from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from loguru import logger

from opening_notifier.config import get_settings
from opening_notifier.scheduler.jobs import run_opening_notification

OPENING_JOB_ID = "opening_notification"


def create_scheduler() -> BackgroundScheduler:
    settings = get_settings()
    scheduler = BackgroundScheduler()

    # 每日固定時間啟動，等待開店後發送通知
    scheduler.add_job(
        run_opening_notification,
        CronTrigger(
            hour=settings.schedule_hour,
            minute=settings.schedule_minute,
            timezone=settings.schedule_timezone,
        ),
        id=OPENING_JOB_ID,
        name="Opening Notification",
        max_instances=1,
        coalesce=True,
    )

    logger.info("Scheduler configured with jobs")
    return scheduler


def start_scheduler():
    scheduler = create_scheduler()
    scheduler.start()
    logger.info("Scheduler started")
    return scheduler
