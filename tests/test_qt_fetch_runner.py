"""Tests for QtFetchRunner: background iteration, GUI-thread delivery."""

from __future__ import annotations

import threading

from PySide6.QtCore import QThreadPool

from recipeBrowser.domain.models import DataState, Recipe
from recipeBrowser.gui.viewmodels.fetch_runner import FetchHandle
from recipeBrowser.gui.viewmodels.fetch_workers import QtFetchRunner
from recipeBrowser.gui.viewmodels.recipe_list_events import NextPage
from recipeBrowser.gui.viewmodels.recipe_list_viewmodel import RecipeListViewModel


class _Gateway:
    def __init__(self) -> None:
        self.worker_threads = set()

    def search(self, page, query):
        self.worker_threads.add(threading.get_ident())
        yield DataState.loading()
        yield DataState.data_of([Recipe(id=page * 10 + i, title=query) for i in range(2)])


def test_reports_arrive_in_order_on_gui_thread(qtbot):
    runner = QtFetchRunner()
    handle = FetchHandle()
    received, threads, errors = [], [], []
    recipe = Recipe(id=1, title="Soup")

    def _deliver(report):
        received.append(report)
        threads.append(threading.get_ident())

    runner.start(
        handle,
        lambda: iter([DataState.loading(), DataState.data_of([recipe])]),
        _deliver,
        errors.append,
    )
    qtbot.waitUntil(lambda: handle.finished, timeout=5000)

    assert received == [DataState.loading(), DataState.data_of([recipe])]
    assert set(threads) == {threading.get_ident()}
    assert errors == []
    assert not runner.is_busy()


def test_cancelled_fetch_delivers_nothing_and_closes_source(qtbot):
    runner = QtFetchRunner()
    handle = FetchHandle()
    gate = threading.Event()
    closed = threading.Event()
    received = []

    def _source():
        try:
            yield DataState.loading()
            gate.wait(5)
            yield DataState.data_of([])
        finally:
            closed.set()

    runner.start(handle, _source, received.append, received.append)
    handle.cancel()
    gate.set()
    qtbot.waitUntil(lambda: handle.finished, timeout=5000)

    assert received == []
    assert closed.is_set()


def test_failure_is_reported_on_gui_thread(qtbot):
    runner = QtFetchRunner()
    handle = FetchHandle()
    errors, threads = [], []

    def _source():
        yield DataState.loading()
        raise ConnectionError("offline")

    def _on_error(exc):
        errors.append(exc)
        threads.append(threading.get_ident())

    runner.start(handle, _source, lambda report: None, _on_error)
    qtbot.waitUntil(lambda: handle.finished, timeout=5000)

    assert len(errors) == 1
    assert isinstance(errors[0], ConnectionError)
    assert threads == [threading.get_ident()]


def test_view_model_with_background_runner(qtbot):
    gateway = _Gateway()
    vm = RecipeListViewModel(search_recipes=gateway, runner=QtFetchRunner())
    qtbot.waitUntil(lambda: len(vm.state.value.recipes) == 2, timeout=5000)

    vm.on_trigger_event(NextPage())
    qtbot.waitUntil(lambda: len(vm.state.value.recipes) == 4, timeout=5000)

    assert vm.state.value.page == 2
    assert vm.state.value.is_loading is False
    assert threading.get_ident() not in gateway.worker_threads
    vm.dispose()


def test_wait_for_done_blocks_until_worker_finishes(qtbot):
    pool = QThreadPool()
    runner = QtFetchRunner(thread_pool=pool)
    handle = FetchHandle()
    worker_done = threading.Event()
    received = []

    def _source():
        yield DataState.loading()
        worker_done.set()

    runner.start(handle, _source, received.append, received.append)

    assert runner.wait_for_done(5000)
    assert worker_done.is_set()
    # Reports are queued for the GUI thread until the event loop runs.
    qtbot.waitUntil(lambda: handle.finished, timeout=5000)
    assert received == [DataState.loading()]
    assert not runner.is_busy()
