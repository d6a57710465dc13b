from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Query

from spacetraveling.clients.prismic import PrismicClient
from spacetraveling.config import get_settings
from spacetraveling.deps import get_prismic_client
from spacetraveling.services.posts import fetch_next_page, summary_view

router = APIRouter()


def load_more_url(next_page: str | None) -> str | None:
    if not next_page:
        return None
    return "/api/posts?" + urlencode({"next_page": next_page})


@router.get("")
def load_more_posts(
    next_page: str = Query(...),
    client: PrismicClient = Depends(get_prismic_client),
):
    """Next page of post summaries for the "load more" button."""
    if not client.owns_url(next_page):
        raise HTTPException(status_code=400, detail="Invalid page cursor")

    settings = get_settings()
    page = fetch_next_page(client, next_page)
    return {
        "results": [summary_view(p, settings.DISPLAY_TIMEZONE) for p in page.results],
        "next": load_more_url(page.next_page),
    }
