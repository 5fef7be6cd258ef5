"""Exception hierarchy."""

from __future__ import annotations


class AiblogError(Exception):
    """Base class for site errors."""


class ContentError(AiblogError):
    """Raised when a content file cannot be read or its front matter is malformed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class PostNotFoundError(AiblogError):
    """Raised when no post matches the requested slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"post not found: {slug}")
        self.slug = slug
