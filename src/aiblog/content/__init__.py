"""Markdown content loading."""

from __future__ import annotations

from aiblog.content.loader import ContentLibrary, parse_front_matter, render_markdown

__all__ = ["ContentLibrary", "parse_front_matter", "render_markdown"]
