"""Snapshot publication for the recipe list view model.

``Signal`` fans a published value out to renderer callbacks, and
``ObservableProperty`` holds the current ``RecipeListState`` and announces
each replacement.  Neither needs a Qt event loop; Qt widgets observe through
``RecipeListBridge`` instead.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Ordered list of observers notified with each emitted value.

    Observers run in connection order on the emitting thread.  Connecting the
    same callable twice keeps one registration.  A renderer that raises is
    logged and skipped; the remaining renderers still receive the snapshot.
    """

    def __init__(self) -> None:
        self._observers: list[Callable] = []
        self._lock = threading.Lock()

    def connect(self, observer: Callable) -> Callable[[], None]:
        """Register *observer* and return a callable that removes it."""
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
        return lambda: self.disconnect(observer)

    def disconnect(self, observer: Callable) -> None:
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                _logger.debug("Observer %r was not connected", observer)

    def emit(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            observers = tuple(self._observers)
        for observer in observers:
            try:
                observer(*args, **kwargs)
            except Exception as exc:
                _logger.error("Snapshot observer %r failed: %s", observer, exc)

    @property
    def handler_count(self) -> int:
        with self._lock:
            return len(self._observers)


class ObservableProperty:
    """Current snapshot plus a ``changed(new, old)`` announcement.

    Assigning a value equal to the current one publishes nothing, so
    renderers see each distinct snapshot once, in assignment order.
    """

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value == new_value:
            return
        old_value, self._value = self._value, new_value
        self.changed.emit(new_value, old_value)

    def subscribe(self, renderer: Callable[[Any], None]) -> Callable[[], None]:
        """Render the current snapshot now and every later one.

        Returns a callable that stops further deliveries.
        """

        def _forward(new_value: Any, _old_value: Any) -> None:
            renderer(new_value)

        unsubscribe = self.changed.connect(_forward)
        renderer(self._value)
        return unsubscribe
