"""Blog post models."""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict


class PostMeta(BaseModel):
    """Front matter of a Markdown post.

    `date` is free text and is kept exactly as authored.
    """

    model_config = ConfigDict(extra="ignore")

    slug: str
    title: str | None = None
    description: str | None = None
    date: str | None = None
    author: str | None = None
    image: str | None = None


class Post(BaseModel):
    """A loaded post: front matter, Markdown body, and the rendered content region."""

    meta: PostMeta
    body: str
    html: str

    @property
    def slug(self) -> str:
        return self.meta.slug

    @property
    def title(self) -> str:
        return self.meta.title or self.meta.slug

    @property
    def content_id(self) -> str:
        """Identity of the displayed document; changes whenever slug or body changes."""

        digest = hashlib.sha1(f"{self.meta.slug}\n{self.body}".encode("utf-8")).hexdigest()
        return f"{self.meta.slug}:{digest[:12]}"
