"""Pydantic models used across the project."""

from __future__ import annotations

from aiblog.models.outline import HeadingEntry, HeadingLevel, Outline, OutlineState
from aiblog.models.post import Post, PostMeta

__all__ = [
    "HeadingEntry",
    "HeadingLevel",
    "Outline",
    "OutlineState",
    "Post",
    "PostMeta",
]
