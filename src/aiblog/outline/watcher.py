"""Event-loop driver for outline extraction."""

from __future__ import annotations

import asyncio
import contextlib
import itertools
from typing import Any, Callable

from aiblog.events import OutlineEvent, OutlineEventType
from aiblog.logging import document_context, get_logger, log_exception
from aiblog.models.outline import Outline, OutlineState
from aiblog.outline.extractor import OutlineExtractor

logger = get_logger(__name__)

DocumentSource = str | Callable[[], str]
Subscriber = Callable[[OutlineEvent], Any]


class OutlineWatcher:
    """Keep one document's outline in sync with its content identity.

    Two triggers are supported:

    * `content_changed` for renderers that cannot tell when they are done. The outline is
      cleared immediately and a single scan runs after `delay_s`. A newer change cancels the
      pending scan, so only the latest document is ever scanned.
    * `content_ready` for renderers that signal completion. It scans right away.

    The source may be the HTML itself or a callable returning it; callables are read when the
    scan runs, not when it is scheduled.
    """

    def __init__(self, extractor: OutlineExtractor | None = None, *, delay_s: float = 0.3) -> None:
        self.extractor = extractor or OutlineExtractor()
        self.delay_s = delay_s
        self.outline = Outline()
        self.annotated_html: str | None = None
        self._pending: asyncio.Task[Outline] | None = None
        self._pending_id: str | None = None
        self._subscribers: list[Subscriber] = []
        self._seq = itertools.count(1)

    @property
    def state(self) -> OutlineState:
        return self.outline.state

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register an event callback. Returns a function that unsubscribes it."""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._subscribers.remove(callback)

        return _unsubscribe

    def content_changed(self, content_id: str, source: DocumentSource) -> asyncio.Task[Outline]:
        """Schedule a deferred scan for a new document, replacing any pending one.

        Must be called from a running event loop.
        """

        loop = asyncio.get_running_loop()
        self._cancel_pending()
        self.annotated_html = None
        self._publish(Outline(document_id=content_id))

        task = loop.create_task(self._deferred_scan(content_id, source))
        self._pending = task
        self._pending_id = content_id
        self._emit(
            OutlineEventType.SCAN_SCHEDULED,
            content_id,
            metadata={"delay_s": self.delay_s},
        )
        return task

    def content_ready(self, content_id: str, source: DocumentSource) -> Outline:
        """Scan immediately; the renderer has finished producing the document."""

        self._cancel_pending()
        return self._scan(content_id, source)

    async def wait(self) -> Outline:
        """Wait for the pending scan, if any, and return the current outline."""

        while self._pending is not None and not self._pending.done():
            task = self._pending
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                current = asyncio.current_task()
                if current is not None and current.cancelling():
                    raise
                # The scan itself was superseded; wait for its replacement, if any
        return self.outline

    def close(self) -> None:
        """Cancel any pending scan."""

        self._cancel_pending()

    async def _deferred_scan(self, content_id: str, source: DocumentSource) -> Outline:
        await asyncio.sleep(self.delay_s)
        # Subscribers may schedule the next scan while this one publishes
        if self._pending is asyncio.current_task():
            self._pending = None
            self._pending_id = None
        return self._scan(content_id, source)

    def _scan(self, content_id: str, source: DocumentSource) -> Outline:
        with document_context(content_id):
            html = source() if callable(source) else source
            outline, annotated = self.extractor.extract_html(html, document_id=content_id)
            self.annotated_html = annotated
            logger.debug("Scan complete: %d headings", len(outline))
            self._publish(outline)
            return outline

    def _cancel_pending(self) -> None:
        task = self._pending
        if task is None or task.done():
            self._pending = None
            return
        task.cancel()
        logger.debug("Cancelled pending scan for %s", self._pending_id)
        self._emit(OutlineEventType.SCAN_CANCELLED, self._pending_id)
        self._pending = None
        self._pending_id = None

    def _publish(self, outline: Outline) -> None:
        was_populated = self.outline.state is OutlineState.POPULATED
        self.outline = outline
        if not outline.is_empty:
            self._emit(
                OutlineEventType.OUTLINE_UPDATED,
                outline.document_id,
                outline=outline,
                metadata={"headings": len(outline)},
            )
        elif was_populated:
            self._emit(OutlineEventType.OUTLINE_CLEARED, outline.document_id, outline=outline)

    def _emit(self, event_type: OutlineEventType, document_id: str | None, **kwargs: Any) -> None:
        event = OutlineEvent(seq=next(self._seq), event_type=event_type, document_id=document_id, **kwargs)
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                log_exception(logger, "Outline subscriber failed", event_type=event_type.value)
