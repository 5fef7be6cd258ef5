"""Wiring between content, outline extraction, and page rendering."""

from __future__ import annotations

from aiblog.config import Settings
from aiblog.content.loader import ContentLibrary
from aiblog.logging import get_logger
from aiblog.models.outline import Outline
from aiblog.models.post import Post
from aiblog.outline.extractor import OutlineExtractor
from aiblog.outline.watcher import OutlineWatcher
from aiblog.render.pages import PageRenderer
from aiblog.theme import Theme, ThemeContext

logger = get_logger(__name__)


class Site:
    """The blog: a content library plus the renderers that turn posts into pages."""

    def __init__(self, settings: Settings, library: ContentLibrary | None = None) -> None:
        self.settings = settings
        self.library = library or ContentLibrary(settings.content_dir)
        self.extractor = OutlineExtractor(settings.content_selector, dedupe=settings.dedupe_anchors)
        self.pages = PageRenderer(site_name=settings.site_name)

    def theme(self, value: str | None = None) -> ThemeContext:
        return ThemeContext(theme=Theme.parse(value, Theme(self.settings.default_theme)))

    def prepare(self, post: Post) -> tuple[Outline, str]:
        """Extract the outline of a rendered post and return it with the annotated content.

        Posts are fully rendered before this is called, so the scan runs on the ready signal
        instead of after a delay.
        """

        watcher = OutlineWatcher(self.extractor, delay_s=self.settings.scan_delay_s)
        outline = watcher.content_ready(post.content_id, post.html)
        return outline, watcher.annotated_html or post.html

    def outline(self, slug: str) -> Outline:
        outline, _ = self.prepare(self.library.get(slug))
        return outline

    def render_landing(self, theme: ThemeContext) -> str:
        return self.pages.landing(theme)

    def render_index(self, theme: ThemeContext) -> str:
        return self.pages.blog_index(self.library.posts(), theme)

    def render_article(self, slug: str, theme: ThemeContext) -> str:
        post = self.library.get(slug)
        outline, content = self.prepare(post)
        logger.info("Rendering %s with %d outline entries", slug, len(outline))
        return self.pages.article(post, outline, content, theme)
