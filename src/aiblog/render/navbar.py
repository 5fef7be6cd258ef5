"""Site navigation bar."""

from __future__ import annotations

from aiblog.render.templating import get_environment
from aiblog.theme import ThemeContext

NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("Home", "/"),
    ("About", "/about"),
    ("Blog", "/blog"),
    ("Contact", "/contact"),
)


def _is_active(href: str, current_path: str) -> bool:
    if href == "/":
        return current_path == "/"
    return current_path == href or current_path.startswith(href + "/")


def render_navbar(theme: ThemeContext, *, current_path: str = "/", site_name: str = "AI-assisted-blog") -> str:
    links = [
        {"label": label, "href": href, "active": _is_active(href, current_path)}
        for label, href in NAV_LINKS
    ]
    template = get_environment().get_template("navbar.html")
    return template.render(links=links, theme=theme, site_name=site_name)
