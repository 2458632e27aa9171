"""Background QRunnable workers for recipe searches."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from recipeBrowser.gui.viewmodels.fetch_runner import (
    ErrorCallback,
    FetchHandle,
    NotificationCallback,
    NotificationSource,
    iterate_notifications,
)

_logger = logging.getLogger(__name__)


class _SearchSignals(QObject):
    notified = Signal(int, object)
    failed = Signal(int, object)
    completed = Signal(int)


class _SearchWorker(QRunnable):
    def __init__(self, handle: FetchHandle, source: NotificationSource) -> None:
        super().__init__()
        self._handle = handle
        self._source = source
        self.signals = _SearchSignals()

    def run(self) -> None:
        fetch_id = self._handle.id
        try:
            iterate_notifications(
                self._handle,
                self._source,
                lambda notification: self.signals.notified.emit(fetch_id, notification),
            )
        except Exception as exc:
            _logger.error("[SEARCH-WORKER] Fetch %d failed: %s", fetch_id, exc)
            self.signals.failed.emit(fetch_id, exc)
        finally:
            self.signals.completed.emit(fetch_id)


@dataclass
class _ActiveFetch:
    handle: FetchHandle
    worker: _SearchWorker
    on_notification: NotificationCallback
    on_error: ErrorCallback


class QtFetchRunner(QObject):
    """Run fetch cycles on a ``QThreadPool``.

    The worker iterates the search off the GUI thread; its signals are
    connected to slots on this object, so every report is delivered on the
    thread that owns the runner.
    """

    def __init__(
        self,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._thread_pool = thread_pool or QThreadPool.globalInstance()
        self._active: Dict[int, _ActiveFetch] = {}

    def is_busy(self) -> bool:
        return bool(self._active)

    def start(
        self,
        handle: FetchHandle,
        source: NotificationSource,
        on_notification: NotificationCallback,
        on_error: ErrorCallback,
    ) -> None:
        worker = _SearchWorker(handle, source)
        worker.signals.notified.connect(self._on_notified)
        worker.signals.failed.connect(self._on_failed)
        worker.signals.completed.connect(self._on_completed)
        self._active[handle.id] = _ActiveFetch(handle, worker, on_notification, on_error)
        self._thread_pool.start(worker)

    def wait_for_done(self, msecs: int = -1) -> bool:
        """Block until the pool is idle; reports still need an event loop turn."""
        return self._thread_pool.waitForDone(msecs)

    @Slot(int, object)
    def _on_notified(self, fetch_id: int, notification: object) -> None:
        active = self._active.get(fetch_id)
        if active is None or active.handle.cancelled:
            return
        active.on_notification(notification)

    @Slot(int, object)
    def _on_failed(self, fetch_id: int, error: object) -> None:
        active = self._active.get(fetch_id)
        if active is None or active.handle.cancelled:
            return
        active.on_error(error)

    @Slot(int)
    def _on_completed(self, fetch_id: int) -> None:
        active = self._active.pop(fetch_id, None)
        if active is None:
            return
        active.handle.mark_finished()
        active.worker.signals.deleteLater()
