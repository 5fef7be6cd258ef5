"""Outline extraction and scheduling."""

from __future__ import annotations

from aiblog.outline.extractor import OutlineExtractor
from aiblog.outline.watcher import OutlineWatcher

__all__ = ["OutlineExtractor", "OutlineWatcher"]
