"""Theme selection.

The theme is a plain value handed to whatever renders theme-aware markup. Nothing reads it from
shared mutable state.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @classmethod
    def parse(cls, value: str | None, default: Theme | None = None) -> Theme:
        """Parse a user-supplied theme name, falling back to `default` (or SYSTEM)."""

        fallback = default or cls.SYSTEM
        if not value:
            return fallback
        try:
            return cls(value.strip().lower())
        except ValueError:
            return fallback


class ThemeContext(BaseModel):
    """Read-only theme configuration for one render."""

    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.SYSTEM

    @property
    def is_light(self) -> bool:
        return self.theme is Theme.LIGHT

    @property
    def html_class(self) -> str:
        """Class for the `<html>` element; empty lets the browser preference decide."""

        return "" if self.theme is Theme.SYSTEM else self.theme.value

    @property
    def sheet_class(self) -> str:
        return "bg-white" if self.is_light else "bg-black"

    @property
    def panel_class(self) -> str:
        return "bg-gray-50" if self.theme is not Theme.DARK else "bg-gray-900"
