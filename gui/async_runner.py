"""Run notes service coroutines off the Qt thread.

All coroutines share one asyncio event loop hosted on a background thread, so
store updates happen on a single logical thread while the UI stays responsive.
Completion callbacks are delivered back on the Qt main thread through a queued
signal.

Updates:
  v0.1.0 - 2026-10-18 - Introduce AsyncRunner with a dedicated event loop thread.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any

from PySide6.QtCore import QObject, Signal

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine

logger = logging.getLogger("notes_client.gui.async_runner")


class AsyncRunner(QObject):
    """Schedule coroutines on a background loop and report back on the GUI thread."""

    _completed = Signal(object, object, object)  # callback, payload, error

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._run_loop,
            name="notes-client-io",
            daemon=True,
        )
        self._completed.connect(self._dispatch)  # type: ignore[arg-type]
        self._thread.start()

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()
        self._loop.close()

    def submit(
        self,
        coroutine: Coroutine[Any, Any, Any],
        *,
        on_success: Callable[[Any], None] | None = None,
        on_error: Callable[[BaseException], None] | None = None,
    ) -> Future[Any]:
        """Schedule *coroutine* and invoke one of the callbacks when it settles."""
        future = asyncio.run_coroutine_threadsafe(coroutine, self._loop)

        def _settled(done: Future[Any]) -> None:
            if done.cancelled():
                return
            error = done.exception()
            if error is not None:
                self._completed.emit(on_error, None, error)
            else:
                self._completed.emit(on_success, done.result(), None)

        future.add_done_callback(_settled)
        return future

    def _dispatch(self, callback: object, payload: object, error: object) -> None:
        if error is not None:
            if callback is None:
                logger.error("Background task failed: %s", error)
                return
            callback(error)  # type: ignore[operator]
            return
        if callback is not None:
            callback(payload)  # type: ignore[operator]

    def shutdown(self, timeout: float = 2.0) -> None:
        """Stop the event loop and wait briefly for the thread to exit."""
        if not self._thread.is_alive():
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)


__all__ = ["AsyncRunner"]
