import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from spacetraveling.clients.prismic import PrismicError
from spacetraveling.config import get_settings
from spacetraveling.deps import close_prismic_client, templates

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from spacetraveling.scheduler.setup import start_scheduler

    scheduler = start_scheduler()
    yield
    if scheduler:
        scheduler.shutdown(wait=False)
    close_prismic_client()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.APP_TITLE, debug=settings.DEBUG, lifespan=lifespan)

    static_dir = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    from spacetraveling.api import api_router
    from spacetraveling.routes.home import router as home_router
    from spacetraveling.routes.posts import router as posts_router

    app.include_router(home_router)
    app.include_router(posts_router, prefix="/post")
    app.include_router(api_router)

    @app.exception_handler(PrismicError)
    async def content_api_error_handler(request: Request, exc: PrismicError):
        logger.error("Content API error on %s: %s", request.url.path, exc)
        return templates.TemplateResponse(
            request, "error.html", status_code=502
        )

    templates.env.globals["app_title"] = settings.APP_TITLE

    return app


app = create_app()
