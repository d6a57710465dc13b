import logging

from pydantic import ValidationError

from spacetraveling.clients.prismic import PrismicClient, PrismicError, at
from spacetraveling.schemas.post import PostDocument, PostPagination
from spacetraveling.services.dates import format_publication_date
from spacetraveling.services.reading_time import estimate_reading_time
from spacetraveling.services.rich_text import as_html

logger = logging.getLogger(__name__)

POST_TYPE = "post"
LIST_FIELDS = ["post.title", "post.subtitle", "post.author", "post.content"]


def _validate(doc: dict) -> PostDocument:
    try:
        return PostDocument.model_validate(doc)
    except ValidationError as e:
        raise PrismicError(f"Malformed document {doc.get('id')}: {e}") from e


def _pagination(response: dict) -> PostPagination:
    results = []
    for doc in response.get("results") or []:
        # Documents created before the uid field was added have none
        if not doc.get("uid"):
            logger.warning("Skipping document without uid: %s", doc.get("id"))
            continue
        results.append(_validate(doc))
    return PostPagination(next_page=response.get("next_page"), results=results)


def fetch_posts_page(client: PrismicClient, page_size: int = 2) -> PostPagination:
    """First page of posts for the home page."""
    response = client.query(
        [at("document.type", POST_TYPE)],
        page_size=page_size,
        fetch=LIST_FIELDS,
    )
    return _pagination(response)


def fetch_next_page(client: PrismicClient, next_page: str) -> PostPagination:
    return _pagination(client.get_page(next_page))


def get_post(client: PrismicClient, uid: str, ref: str | None = None) -> PostDocument | None:
    doc = client.get_by_uid(POST_TYPE, uid, ref=ref)
    if doc is None:
        logger.info("Post not found: %s", uid)
        return None
    return _validate(doc)


def list_post_uids(client: PrismicClient, page_size: int = 100) -> list[str]:
    """Every post uid in the repository, following the pagination cursor."""
    page = _pagination(
        client.query([at("document.type", POST_TYPE)], page_size=page_size)
    )
    uids = [post.uid for post in page.results]
    while page.next_page:
        page = fetch_next_page(client, page.next_page)
        uids.extend(post.uid for post in page.results)
    return uids


def summary_view(post: PostDocument, tz: str = "UTC") -> dict:
    return {
        "uid": post.uid,
        "title": post.data.title,
        "subtitle": post.data.subtitle,
        "author": post.data.author,
        "publication_date": format_publication_date(post.first_publication_date, tz),
    }


def detail_view(post: PostDocument, tz: str = "UTC") -> dict:
    return {
        "post": post,
        "title": post.data.title,
        "author": post.data.author,
        "banner_url": post.data.banner.url,
        "publication_date": format_publication_date(post.first_publication_date, tz),
        "reading_time": estimate_reading_time(post.data.content),
        "sections": [
            {"heading": block.heading, "html": as_html(block.body)}
            for block in post.data.content
        ],
    }
