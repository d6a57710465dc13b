import logging

logger = logging.getLogger(__name__)


def start_scheduler():
    """Start APScheduler when a static export directory is configured.

    Returns the scheduler instance or None.
    """
    from spacetraveling.config import get_settings

    settings = get_settings()
    if not settings.STATIC_OUTPUT_DIR:
        logger.info("STATIC_OUTPUT_DIR not set, revalidation disabled")
        return None

    try:
        from apscheduler.schedulers.background import BackgroundScheduler

        scheduler = BackgroundScheduler()

        from spacetraveling.scheduler.jobs import register_jobs

        register_jobs(scheduler, settings)
        scheduler.start()
        logger.info("Scheduler started")
        return scheduler
    except Exception as e:
        logger.warning("Scheduler not started: %s", e)
        return None
