"""Load Markdown posts with YAML front matter and render them to the article content region."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import markdown
import yaml

from aiblog.errors import ContentError, PostNotFoundError
from aiblog.logging import get_logger
from aiblog.models.post import Post, PostMeta

logger = get_logger(__name__)

FRONT_MATTER_FIELDS = ("title", "slug", "description", "date", "author", "image")
CONTENT_CLASS = "blog-content"


def parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split `---` delimited YAML front matter from the body.

    Returns an empty mapping and the whole text when there is no front matter block.

    Raises:
        yaml.YAMLError: If the block is not valid YAML.
        ValueError: If the block is not a mapping.
    """

    clean = text.lstrip("\ufeff")
    lines = clean.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, clean

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end = i
            break
    if end is None:
        return {}, clean

    meta = yaml.safe_load("\n".join(lines[1:end])) or {}
    if not isinstance(meta, dict):
        raise ValueError("front matter must be a mapping")
    body = "\n".join(lines[end + 1 :]).lstrip("\n")
    return meta, body


def render_markdown(body: str) -> str:
    """Render a Markdown body wrapped in the article content region."""

    md = markdown.Markdown(extensions=["fenced_code", "tables"])
    return f'<div class="{CONTENT_CLASS}">\n{md.convert(body)}\n</div>'


def load_post(path: Path) -> Post:
    """Load a single post file."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ContentError(str(path), f"unreadable: {e}") from e

    try:
        meta, body = parse_front_matter(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise ContentError(str(path), f"invalid front matter: {e}") from e

    fields = {k: _scalar(meta[k]) for k in FRONT_MATTER_FIELDS if meta.get(k) is not None}
    fields.setdefault("slug", path.stem)
    return Post(meta=PostMeta(**fields), body=body, html=render_markdown(body))


def _scalar(value: Any) -> str:
    # YAML turns `date: 2024-01-15` into a date; the site shows what the author wrote
    return str(value).strip()


class ContentLibrary:
    """The set of posts under a content directory, keyed by slug."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self._posts: dict[str, Post] | None = None

    def _load(self) -> dict[str, Post]:
        posts: dict[str, Post] = {}
        if not self.root.is_dir():
            logger.warning("Content directory %s does not exist", self.root)
            return posts
        for path in sorted(self.root.glob("*.md")):
            post = load_post(path)
            if post.slug in posts:
                logger.warning("Duplicate slug %r in %s, keeping first", post.slug, path.name)
                continue
            posts[post.slug] = post
        logger.info("Loaded %d posts from %s", len(posts), self.root)
        return posts

    def reload(self) -> dict[str, Post]:
        self._posts = self._load()
        return self._posts

    def posts(self) -> list[Post]:
        posts = self._posts if self._posts is not None else self.reload()
        return list(posts.values())

    def get(self, slug: str) -> Post:
        for post in self.posts():
            if post.slug == slug:
                return post
        raise PostNotFoundError(slug)
