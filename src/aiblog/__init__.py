"""AI-assisted-blog: Markdown blog site with an auto-generated "On This Page" outline."""

from __future__ import annotations

__version__ = "0.1.0"
