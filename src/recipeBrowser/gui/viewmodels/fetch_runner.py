"""Fetch-cycle bookkeeping and the synchronous runner.

A fetch cycle iterates the reports produced by a search and hands each one to
the view model.  Runners differ only in *where* the iteration happens; the
``FetchHandle`` lets the view model abandon a cycle that a newer search has
superseded.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Callable, Iterable, Protocol

from recipeBrowser.domain.models import DataState

_logger = logging.getLogger(__name__)

_fetch_ids = itertools.count(1)

NotificationSource = Callable[[], Iterable[DataState]]
NotificationCallback = Callable[[DataState], None]
ErrorCallback = Callable[[Exception], None]


class FetchHandle:
    """Cancellation token and completion flag for one fetch cycle."""

    def __init__(self) -> None:
        self.id = next(_fetch_ids)
        self._cancelled = threading.Event()
        self._finished = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def mark_finished(self) -> None:
        self._finished.set()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "finished" if self.finished else "active"
        return f"FetchHandle(id={self.id}, {state})"


class FetchRunner(Protocol):
    """Runs a fetch cycle and reports back on the view model's thread."""

    def start(
        self,
        handle: FetchHandle,
        source: NotificationSource,
        on_notification: NotificationCallback,
        on_error: ErrorCallback,
    ) -> None: ...


def iterate_notifications(
    handle: FetchHandle,
    source: NotificationSource,
    deliver: NotificationCallback,
) -> None:
    """Pull reports from *source* until it is exhausted or *handle* is cancelled.

    The underlying iterator is closed when iteration stops early so that a
    generator-based search can release its resources.
    """

    notifications = iter(source())
    try:
        for notification in notifications:
            if handle.cancelled:
                _logger.debug("Fetch %d cancelled; stop iterating", handle.id)
                break
            deliver(notification)
    finally:
        close = getattr(notifications, "close", None)
        if close is not None:
            close()


class InlineFetchRunner:
    """Run the fetch cycle synchronously on the calling thread."""

    def start(
        self,
        handle: FetchHandle,
        source: NotificationSource,
        on_notification: NotificationCallback,
        on_error: ErrorCallback,
    ) -> None:
        try:
            iterate_notifications(handle, source, on_notification)
        except Exception as exc:
            on_error(exc)
        finally:
            handle.mark_finished()
