"""FastAPI app serving the site pages and outline endpoints."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from aiblog import __version__
from aiblog.config import Settings, load_settings
from aiblog.errors import PostNotFoundError
from aiblog.logging import configure_logging, get_logger
from aiblog.models.outline import Outline
from aiblog.models.post import PostMeta
from aiblog.outline.extractor import OutlineExtractor
from aiblog.site import Site


class OutlineRequest(BaseModel):
    """Rendered HTML to extract an outline from."""

    html: str
    selector: str | None = None
    document_id: str | None = None


class OutlineResponse(BaseModel):
    outline: Outline
    html: str = Field(description="Input markup with anchor ids assigned")


def create_app(settings: Settings | None = None, site: Site | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)
    site = site or Site(settings)

    app = FastAPI(title=settings.site_name, version=__version__)

    def _not_found(e: PostNotFoundError) -> HTTPException:
        logger.info("Unknown post requested", extra={"slug": e.slug})
        return HTTPException(status_code=404, detail="post not found")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def landing(theme: str | None = Query(default=None)) -> str:
        return site.render_landing(site.theme(theme))

    @app.get("/blog", response_class=HTMLResponse)
    def blog_index(theme: str | None = Query(default=None)) -> str:
        return site.render_index(site.theme(theme))

    @app.get("/blog/{slug}", response_class=HTMLResponse)
    def article(slug: str, theme: str | None = Query(default=None)) -> str:
        try:
            return site.render_article(slug, site.theme(theme))
        except PostNotFoundError as e:
            raise _not_found(e) from e

    @app.get("/api/posts")
    def posts() -> list[PostMeta]:
        return [p.meta for p in site.library.posts()]

    @app.get("/api/posts/{slug}/outline")
    def post_outline(slug: str) -> Outline:
        try:
            return site.outline(slug)
        except PostNotFoundError as e:
            raise _not_found(e) from e

    @app.post("/api/outline")
    def extract_outline(req: OutlineRequest) -> OutlineResponse:
        extractor = site.extractor
        if req.selector:
            extractor = OutlineExtractor(req.selector, dedupe=settings.dedupe_anchors)
        outline, html = extractor.extract_html(req.html, document_id=req.document_id)
        logger.info("API outline requested", extra={"headings": len(outline)})
        return OutlineResponse(outline=outline, html=html)

    return app
