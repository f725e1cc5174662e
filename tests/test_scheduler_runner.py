from opening_notifier.scheduler.jobs import run_opening_notification
from opening_notifier.scheduler.runner import create_scheduler


def test_create_scheduler_registers_opening_job():
    scheduler = create_scheduler()

    jobs = scheduler.get_jobs()
    assert len(jobs) == 1
    job = jobs[0]
    assert job.id == "opening_notification"
    assert job.name == "Opening Notification"
    assert job.func is run_opening_notification
    assert job.max_instances == 1
    assert job.coalesce is True
