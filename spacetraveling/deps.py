from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

from spacetraveling.clients.prismic import PrismicClient
from spacetraveling.config import get_settings

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@lru_cache
def get_prismic_client() -> PrismicClient:
    settings = get_settings()
    return PrismicClient(
        settings.PRISMIC_API_ENDPOINT,
        access_token=settings.PRISMIC_ACCESS_TOKEN,
        timeout=settings.REQUEST_TIMEOUT,
    )


def close_prismic_client():
    if get_prismic_client.cache_info().currsize:
        get_prismic_client().close()
        get_prismic_client.cache_clear()
