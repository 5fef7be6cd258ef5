"""Tests for page and panel rendering."""

from __future__ import annotations

from aiblog.models.outline import HeadingEntry, HeadingLevel, Outline
from aiblog.render.navbar import render_navbar
from aiblog.render.panel import render_outline_panel
from aiblog.theme import Theme, ThemeContext


def _outline() -> Outline:
    return Outline(
        document_id="doc",
        entries=[
            HeadingEntry(text="Introduction", id="introduction", level=HeadingLevel.SECTION),
            HeadingEntry(text="Key <Features>", id="key-features", level=HeadingLevel.SUBSECTION),
        ],
    )


def test_panel_indents_subsections_and_escapes_text() -> None:
    html = render_outline_panel(_outline(), ThemeContext())

    assert "On This Page" in html
    assert '<li><a href="#introduction"' in html
    assert '<li class="ml-4"><a href="#key-features"' in html
    assert "Key &lt;Features&gt;" in html


def test_panel_not_rendered_for_empty_outline() -> None:
    assert render_outline_panel(Outline(), ThemeContext()) == ""


def test_panel_background_follows_theme() -> None:
    assert "bg-gray-900" in render_outline_panel(_outline(), ThemeContext(theme=Theme.DARK))
    assert "bg-gray-50" in render_outline_panel(_outline(), ThemeContext(theme=Theme.LIGHT))


def test_navbar_marks_active_link_and_sheet_theme() -> None:
    html = render_navbar(ThemeContext(theme=Theme.LIGHT), current_path="/blog/tailwind-css")

    assert 'href="/blog" class="hover:scale-105 hover:font-semibold font-semibold" aria-current="page"' in html
    assert "mobile-sheet bg-white" in html
    assert html.count('aria-current="page"') == 1


def test_navbar_dark_sheet() -> None:
    html = render_navbar(ThemeContext(theme=Theme.DARK))
    assert "mobile-sheet bg-black" in html


def test_theme_parse_falls_back() -> None:
    assert Theme.parse("DARK") is Theme.DARK
    assert Theme.parse("neon") is Theme.SYSTEM
    assert Theme.parse(None, Theme.LIGHT) is Theme.LIGHT
