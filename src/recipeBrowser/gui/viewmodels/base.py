"""BaseViewModel: pure Python, no Qt dependency.

Provides fetch lifecycle management so that concrete ViewModels can start
background searches and have them cancelled automatically via ``dispose()``.
"""

from __future__ import annotations

from recipeBrowser.gui.viewmodels.fetch_runner import FetchHandle


class BaseViewModel:
    """ViewModel base class without Qt dependencies."""

    def __init__(self) -> None:
        self._fetches: list[FetchHandle] = []

    def track_fetch(self, handle: FetchHandle) -> FetchHandle:
        """Track *handle* so that ``dispose()`` can cancel it."""
        self._fetches = [f for f in self._fetches if not f.finished]
        self._fetches.append(handle)
        return handle

    def dispose(self) -> None:
        """Cancel all tracked fetches."""
        for handle in self._fetches:
            handle.cancel()
        self._fetches.clear()
