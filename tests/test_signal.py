"""Tests for the pure-Python Signal / ObservableProperty helpers."""

from recipeBrowser.gui.viewmodels.signal import ObservableProperty, Signal


def test_failing_handler_does_not_block_others():
    signal = Signal()
    seen = []

    def _broken(value):
        raise RuntimeError("boom")

    signal.connect(_broken)
    signal.connect(seen.append)
    signal.emit(1)

    assert seen == [1]
    assert signal.handler_count == 2


def test_observable_emits_only_on_change():
    prop = ObservableProperty(0)
    changes = []
    prop.changed.connect(lambda new, old: changes.append((new, old)))

    prop.value = 0
    prop.value = 1
    prop.value = 1
    prop.value = 2

    assert changes == [(1, 0), (2, 1)]


def test_subscribe_replays_current_value_and_unsubscribes():
    prop = ObservableProperty("a")
    seen = []

    unsubscribe = prop.subscribe(seen.append)
    prop.value = "b"
    unsubscribe()
    prop.value = "c"

    assert seen == ["a", "b"]
    assert prop.changed.handler_count == 0


def test_connect_returns_disconnect_and_ignores_repeats():
    signal = Signal()
    seen = []

    disconnect = signal.connect(seen.append)
    signal.connect(seen.append)
    signal.emit("first")
    disconnect()
    disconnect()
    signal.emit("second")

    assert seen == ["first"]
    assert signal.handler_count == 0
