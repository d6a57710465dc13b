import json
import logging
import shutil
import tempfile
from pathlib import Path

from spacetraveling.clients.prismic import PrismicClient
from spacetraveling.config import Settings
from spacetraveling.deps import templates
from spacetraveling.services.posts import (
    detail_view,
    fetch_next_page,
    fetch_posts_page,
    get_post,
    list_post_uids,
    summary_view,
)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def _page_url(number: int) -> str:
    return f"/posts/page-{number}.json"


def _render(name: str, context: dict) -> str:
    return templates.env.get_template(name).render(**context)


def _write(path: Path, content: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def build_site(client: PrismicClient, output_dir: str | Path, settings: Settings) -> dict:
    """Render the whole blog into ``output_dir``. Returns summary stats.

    The home page is followed by ``posts/page-N.json`` files that the
    "load more" button walks through, one per remaining cursor page.
    """
    target = Path(output_dir).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    out = Path(tempfile.mkdtemp(prefix=f".{target.name}-", dir=target.parent))
    out.chmod(0o755)
    try:
        stats = _build_into(client, out, settings)
    except Exception:
        shutil.rmtree(out, ignore_errors=True)
        raise
    _swap(out, target)
    logger.info("Site build into %s: %s", target, stats)
    return stats


def _swap(built: Path, target: Path):
    """Replace ``target`` with ``built``, dropping whatever the old tree had."""
    old = None
    if target.exists():
        old = target.with_name(f".{target.name}-old")
        shutil.rmtree(old, ignore_errors=True)
        target.rename(old)
    built.rename(target)
    if old is not None:
        shutil.rmtree(old, ignore_errors=True)


def _build_into(client: PrismicClient, out: Path, settings: Settings) -> dict:
    tz = settings.DISPLAY_TIMEZONE
    base = {"app_title": settings.APP_TITLE}

    first = fetch_posts_page(client, settings.POSTS_PAGE_SIZE)
    _write(
        out / "index.html",
        _render(
            "home.html",
            {
                **base,
                "posts": [summary_view(p, tz) for p in first.results],
                "next_url": _page_url(2) if first.next_page else None,
            },
        ),
    )

    stats = {"pages": 1, "posts": 0, "failed": 0}
    next_page = first.next_page
    number = 2
    while next_page:
        page = fetch_next_page(client, next_page)
        payload = {
            "results": [summary_view(p, tz) for p in page.results],
            "next": _page_url(number + 1) if page.next_page else None,
        }
        _write(out / "posts" / f"page-{number}.json", json.dumps(payload, ensure_ascii=False))
        stats["pages"] += 1
        next_page = page.next_page
        number += 1

    for uid in list_post_uids(client):
        try:
            post = get_post(client, uid)
            if post is None:
                stats["failed"] += 1
                continue
            _write(
                out / "post" / uid / "index.html",
                _render("posts/detail.html", {**base, **detail_view(post, tz)}),
            )
            stats["posts"] += 1
        except Exception:
            logger.exception("Failed to render post %s", uid)
            stats["failed"] += 1

    _write(out / "404.html", _render("404.html", base))
    shutil.copytree(STATIC_DIR, out / "static", dirs_exist_ok=True)

    return stats
