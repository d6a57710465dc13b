from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from spacetraveling.api.posts import load_more_url
from spacetraveling.clients.prismic import PrismicClient
from spacetraveling.config import get_settings
from spacetraveling.deps import get_prismic_client, templates
from spacetraveling.services.posts import fetch_posts_page, summary_view

router = APIRouter(tags=["home"])


@router.get("/", response_class=HTMLResponse)
def home(request: Request, client: PrismicClient = Depends(get_prismic_client)):
    settings = get_settings()
    page = fetch_posts_page(client, settings.POSTS_PAGE_SIZE)
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "posts": [summary_view(p, settings.DISPLAY_TIMEZONE) for p in page.results],
            "next_url": load_more_url(page.next_page),
        },
    )
