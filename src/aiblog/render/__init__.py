"""HTML rendering for the site."""

from __future__ import annotations

from aiblog.render.navbar import NAV_LINKS, render_navbar
from aiblog.render.pages import PageRenderer
from aiblog.render.panel import render_outline_panel

__all__ = ["NAV_LINKS", "PageRenderer", "render_navbar", "render_outline_panel"]
