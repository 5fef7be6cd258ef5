"""Outline lifecycle events.

The watcher publishes a sequence of events as documents change and scans complete. Consumers
(the navigation panel, logging, tests) subscribe to them instead of polling watcher state.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

from aiblog.models.outline import Outline


class OutlineEventType(str, Enum):
    """What happened to the outline."""

    SCAN_SCHEDULED = "scan_scheduled"
    SCAN_CANCELLED = "scan_cancelled"
    OUTLINE_UPDATED = "outline_updated"
    OUTLINE_CLEARED = "outline_cleared"


class OutlineEvent(BaseModel):
    """A single event emitted by an outline watcher."""

    seq: int = Field(ge=1)
    ts: datetime = Field(default_factory=lambda: datetime.now(UTC))

    event_type: OutlineEventType
    document_id: str | None = None

    outline: Outline | None = None
    metadata: dict[str, str | int | float | bool | None] = Field(default_factory=dict)
