import datetime as dt
import logging
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

# pt-BR abbreviated month names
MONTHS = ["jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez"]


def parse_timestamp(value: str | None) -> dt.datetime | None:
    """Parse a Prismic timestamp (``2021-03-25T19:25:28+0000``) or any ISO-8601 string.

    Naive values are taken as UTC. Raises ValueError on garbage.
    """
    if not value:
        return None
    try:
        parsed = dt.datetime.strptime(value, "%Y-%m-%dT%H:%M:%S%z")
    except ValueError:
        parsed = dt.datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed


def format_publication_date(value: str | None, tz: str = "UTC") -> str:
    """Format as ``dd MMM yyyy`` in pt-BR, e.g. ``25 mar 2021``."""
    try:
        parsed = parse_timestamp(value)
    except ValueError:
        logger.warning("Unparseable publication date: %r", value)
        return ""
    if parsed is None:
        return ""
    local = parsed.astimezone(ZoneInfo(tz))
    return f"{local.day:02d} {MONTHS[local.month - 1]} {local.year}"
