from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from spacetraveling.clients.prismic import PrismicClient
from spacetraveling.config import get_settings
from spacetraveling.deps import get_prismic_client, templates
from spacetraveling.services.posts import detail_view, get_post

router = APIRouter(tags=["posts"])

PREVIEW_COOKIE = "io.prismic.preview"


@router.get("/{slug}", response_class=HTMLResponse)
def post_detail(
    request: Request,
    slug: str,
    client: PrismicClient = Depends(get_prismic_client),
):
    # Preview sessions carry the draft ref in a cookie
    ref = request.cookies.get(PREVIEW_COOKIE) or None
    post = get_post(client, slug, ref=ref)
    if post is None:
        return templates.TemplateResponse(request, "404.html", status_code=404)

    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "posts/detail.html",
        detail_view(post, settings.DISPLAY_TIMEZONE),
    )
