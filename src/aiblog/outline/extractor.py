"""Build an "On This Page" outline from rendered article HTML."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from aiblog.logging import get_logger
from aiblog.models.outline import HeadingEntry, HeadingLevel, Outline
from aiblog.utils.ids import AnchorRegistry

logger = get_logger(__name__)

DEFAULT_SELECTOR = ".blog-content"
HEADING_TAGS = [level.tag for level in HeadingLevel]


class OutlineExtractor:
    """Collect section headings of a content region and make sure each one is linkable.

    The content region is found by a CSS selector. Every `h2`/`h3` inside it becomes an
    outline entry in document order; headings without an `id` get one derived from their
    text, written back onto the element so `#id` links resolve.
    """

    def __init__(self, selector: str = DEFAULT_SELECTOR, *, dedupe: bool = True) -> None:
        self.selector = selector
        self.dedupe = dedupe

    def extract(self, root: BeautifulSoup | Tag, *, document_id: str | None = None) -> Outline:
        """Extract the outline from a parsed tree, annotating headings in place."""

        region = root.select_one(self.selector)
        if region is None:
            logger.debug("Content region %r not found", self.selector)
            return Outline(document_id=document_id)

        headings = region.find_all(HEADING_TAGS)
        if not headings:
            logger.debug("No headings in content region")
            return Outline(document_id=document_id)

        registry = AnchorRegistry(dedupe=self.dedupe)
        # Ids on any other element in the document are off limits for headings
        heading_keys = {id(h) for h in headings}
        for element in root.select("[id]"):
            if id(element) not in heading_keys:
                registry.reserve(element["id"])

        # The first heading carrying a free author id keeps it; later repeats are suffixed
        owners: dict[str, Tag] = {}
        for heading in headings:
            existing = heading.get("id")
            if existing and existing not in registry and existing not in owners:
                owners[existing] = heading
        for anchor in owners:
            registry.reserve(anchor)

        entries: list[HeadingEntry] = []
        for heading in headings:
            text = _heading_text(heading)
            existing = heading.get("id")
            if existing and owners.get(existing) is heading:
                anchor = existing
            elif existing:
                anchor = registry.claim_anchor(existing)
            else:
                anchor = registry.claim(text)
            heading["id"] = anchor
            entries.append(
                HeadingEntry(text=text, id=anchor, level=HeadingLevel.from_tag(heading.name))
            )

        logger.debug("Extracted %d headings", len(entries))
        return Outline(document_id=document_id, entries=entries)

    def extract_html(self, html: str, *, document_id: str | None = None) -> tuple[Outline, str]:
        """Parse `html`, extract its outline, and return it with the annotated markup.

        Fragments come back as fragments; full documents come back whole.
        """

        soup = BeautifulSoup(html, "lxml")
        outline = self.extract(soup, document_id=document_id)
        if "<html" not in html.lower():
            # lxml moves leading <style>, <script>, <meta>, ... into <head>
            parts = [part.decode_contents() for part in (soup.head, soup.body) if part is not None]
            return outline, "".join(parts)
        return outline, str(soup)


def _heading_text(heading: Tag) -> str:
    return " ".join(heading.get_text().split())
