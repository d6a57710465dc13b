import datetime as dt
import logging

logger = logging.getLogger(__name__)


def register_jobs(scheduler, settings):
    """Register scheduled jobs. Called during startup."""
    from spacetraveling.scheduler.tasks import run_site_build

    scheduler.add_job(
        run_site_build,
        "interval",
        seconds=settings.REVALIDATE_SECONDS,
        id="revalidate",
        replace_existing=True,
        next_run_time=dt.datetime.now(dt.timezone.utc),
    )

    logger.info(
        "Jobs registered: static rebuild into %s every %ss",
        settings.STATIC_OUTPUT_DIR,
        settings.REVALIDATE_SECONDS,
    )
