"""Full-page rendering: landing page, blog index, and articles."""

from __future__ import annotations

from dataclasses import dataclass

from markupsafe import Markup

from aiblog.models.outline import Outline
from aiblog.models.post import Post
from aiblog.render.navbar import render_navbar
from aiblog.render.panel import render_outline_panel
from aiblog.render.templating import get_environment
from aiblog.theme import ThemeContext

HERO_TOPICS = ["Coding", "Web Development", "Design", "Tailwind CSS", "React", "Next.js"]


@dataclass(frozen=True)
class Plan:
    name: str
    price: str
    features: tuple[str, ...] = ("Feature 1", "Feature 2", "Feature 3")


PLANS = (
    Plan("Basic", "$10/month"),
    Plan("Standard", "$20/month"),
    Plan("Premium", "$30/month"),
)


@dataclass
class PageRenderer:
    """Render site pages. The theme is passed per call, never stored."""

    site_name: str = "AI-assisted-blog"

    def _render(self, template_name: str, *, theme: ThemeContext, current_path: str, **context: object) -> str:
        navbar = render_navbar(theme, current_path=current_path, site_name=self.site_name)
        template = get_environment().get_template(template_name)
        return template.render(
            site_name=self.site_name,
            theme=theme,
            navbar=Markup(navbar),
            **context,
        )

    def landing(self, theme: ThemeContext) -> str:
        return self._render(
            "landing.html",
            theme=theme,
            current_path="/",
            topics=HERO_TOPICS,
            plans=PLANS,
        )

    def blog_index(self, posts: list[Post], theme: ThemeContext) -> str:
        return self._render("blog_index.html", theme=theme, current_path="/blog", posts=posts)

    def article(self, post: Post, outline: Outline, content_html: str, theme: ThemeContext) -> str:
        """Render an article.

        `content_html` is the content region after outline extraction, so its headings carry
        the anchors the panel links to.
        """

        return self._render(
            "article.html",
            theme=theme,
            current_path=f"/blog/{post.slug}",
            post=post,
            content=Markup(content_html),
            panel=Markup(render_outline_panel(outline, theme)),
        )
