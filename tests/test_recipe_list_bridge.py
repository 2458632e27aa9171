from __future__ import annotations

import pytest
from PySide6.QtTest import QSignalSpy

from recipeBrowser.domain.models import DataState, Recipe
from recipeBrowser.gui.viewmodels.recipe_list_bridge import RecipeListBridge
from recipeBrowser.gui.viewmodels.recipe_list_events import NewSearch, OnUpdateQuery
from recipeBrowser.gui.viewmodels.recipe_list_viewmodel import RecipeListViewModel


class _Gateway:
    def search(self, page, query):
        yield DataState.loading()
        yield DataState.data_of([Recipe(id=1, title=query)])


@pytest.fixture
def bridge(qtbot):
    vm = RecipeListViewModel(search_recipes=_Gateway())
    return RecipeListBridge(vm)


def test_dispatch_republishes_snapshot(bridge):
    spy = QSignalSpy(bridge.stateChanged)

    bridge.dispatch(OnUpdateQuery("pasta"))

    assert spy.count() == 1
    assert spy.at(0)[0].query == "pasta"
    assert bridge.state.query == "pasta"


def test_every_snapshot_is_forwarded_in_order(bridge):
    spy = QSignalSpy(bridge.stateChanged)
    bridge.dispatch(OnUpdateQuery("soup"))

    bridge.dispatch(NewSearch())

    # query edit, page reset, loading, data
    assert spy.count() == 4
    assert spy.at(1)[0].recipes == ()
    assert spy.at(2)[0].is_loading is True
    assert spy.at(3)[0].recipes == (Recipe(id=1, title="soup"),)


def test_dispose_stops_forwarding(bridge):
    spy = QSignalSpy(bridge.stateChanged)
    bridge.dispose()

    bridge.dispatch(OnUpdateQuery("late"))

    assert spy.count() == 0
