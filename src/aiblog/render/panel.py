"""The "On This Page" navigation panel."""

from __future__ import annotations

from aiblog.models.outline import HeadingLevel, Outline
from aiblog.render.templating import get_environment
from aiblog.theme import ThemeContext

INDENT_CLASS = "ml-4"


def render_outline_panel(outline: Outline, theme: ThemeContext) -> str:
    """Render the outline as an anchor list.

    Returns an empty string for an empty outline so the panel is left out entirely.
    Subsection entries are indented relative to sections.
    """

    if outline.is_empty:
        return ""
    items = [
        {
            "text": entry.text,
            "href": f"#{entry.id}",
            "css": INDENT_CLASS if entry.level is HeadingLevel.SUBSECTION else "",
        }
        for entry in outline.entries
    ]
    template = get_environment().get_template("panel.html")
    return template.render(items=items, theme=theme)
