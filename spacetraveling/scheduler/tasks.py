import logging

from spacetraveling.config import get_settings
from spacetraveling.deps import get_prismic_client

logger = logging.getLogger(__name__)


def run_site_build():
    """Scheduled task: regenerate the static export."""
    settings = get_settings()
    try:
        from spacetraveling.services.site_builder import build_site

        result = build_site(get_prismic_client(), settings.STATIC_OUTPUT_DIR, settings)
        logger.info("Static rebuild complete: %s", result)
    except Exception:
        logger.exception("Static rebuild failed")
