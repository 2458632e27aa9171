"""Qt adapter exposing ``RecipeListViewModel`` to widgets and QML."""

from __future__ import annotations

from typing import Any, Optional

from PySide6.QtCore import QObject, Signal, Slot

from recipeBrowser.gui.viewmodels.recipe_list_state import RecipeListState
from recipeBrowser.gui.viewmodels.recipe_list_viewmodel import RecipeListViewModel


class RecipeListBridge(QObject):
    """Re-emit every published snapshot as a Qt signal."""

    stateChanged = Signal(object)

    def __init__(self, view_model: RecipeListViewModel, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._view_model.state.changed.connect(self._on_state_changed)

    @property
    def state(self) -> RecipeListState:
        return self._view_model.state.value

    @Slot(object)
    def dispatch(self, event: Any) -> None:
        self._view_model.on_trigger_event(event)

    def dispose(self) -> None:
        self._view_model.state.changed.disconnect(self._on_state_changed)
        self._view_model.dispose()

    def _on_state_changed(self, new_state: RecipeListState, _old_state: RecipeListState) -> None:
        self.stateChanged.emit(new_state)
