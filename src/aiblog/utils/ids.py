"""Anchor identifier utilities."""

from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

FALLBACK_ANCHOR = "section"


def slugify_heading(text: str) -> str:
    """Derive an anchor id from heading text.

    Lower-cases the text, replaces every run of characters outside `[a-z0-9]` with a single
    hyphen, and trims leading/trailing hyphens.

    Example:
        "Getting Started with Next.js" -> "getting-started-with-next-js"
    """

    return _NON_ALNUM_RE.sub("-", text.lower()).strip("-")


class AnchorRegistry:
    """Hands out anchor ids that are unique within one document.

    Ids already present in the document are reserved first so that a derived id never collides
    with an author-supplied one. Collisions get `-1`, `-2`, ... suffixes in document order.
    """

    def __init__(self, *, dedupe: bool = True) -> None:
        self.dedupe = dedupe
        self._taken: set[str] = set()

    def reserve(self, anchor: str) -> None:
        self._taken.add(anchor)

    def __contains__(self, anchor: str) -> bool:
        return anchor in self._taken

    def claim(self, text: str) -> str:
        """Derive an id for `text` and mark it taken."""

        return self.claim_anchor(slugify_heading(text) or FALLBACK_ANCHOR)

    def claim_anchor(self, base: str) -> str:
        """Mark `base` taken, suffixing it first if another element already uses it."""

        anchor = base
        if self.dedupe:
            n = 1
            while anchor in self._taken:
                anchor = f"{base}-{n}"
                n += 1
        self._taken.add(anchor)
        return anchor
