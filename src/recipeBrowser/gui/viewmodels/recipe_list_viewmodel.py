"""Pure Python RecipeListViewModel (MVVM) without Qt dependencies.

Owns the recipe list snapshot, turns screen events into state transitions
and folds search progress into successive snapshots.  Renderers observe
``state.changed``; Qt renderers go through ``RecipeListBridge``.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Optional

from recipeBrowser.application.interfaces import SearchGateway
from recipeBrowser.config import (
    INVALID_EVENT_DESCRIPTION,
    INVALID_EVENT_TITLE,
    SEARCH_ERROR_ID,
    SEARCH_ERROR_TITLE,
    UNKNOWN_ERROR_DESCRIPTION,
)
from recipeBrowser.domain.models import (
    DataState,
    FoodCategory,
    GenericMessageInfo,
    UIComponentType,
)
from recipeBrowser.errors import EmptyQueueError
from recipeBrowser.gui.viewmodels.base import BaseViewModel
from recipeBrowser.gui.viewmodels.fetch_runner import (
    FetchHandle,
    FetchRunner,
    InlineFetchRunner,
)
from recipeBrowser.gui.viewmodels.recipe_list_events import (
    LoadRecipes,
    NewSearch,
    NextPage,
    OnRemoveHeadMessageFromQueue,
    OnSelectCategory,
    OnUpdateQuery,
)
from recipeBrowser.gui.viewmodels.recipe_list_state import RecipeListState
from recipeBrowser.gui.viewmodels.signal import ObservableProperty


class RecipeListViewModel(BaseViewModel):
    """Recipe list ViewModel, pure Python with no Qt dependency.

    Events must be dispatched from a single thread (the GUI thread).  Only
    one fetch cycle is live at a time: starting a new one cancels the
    previous handle, and any report still in flight from it is dropped by
    the generation check in :meth:`_on_data_state`.
    """

    def __init__(
        self,
        search_recipes: SearchGateway,
        runner: Optional[FetchRunner] = None,
    ) -> None:
        super().__init__()
        self._search_recipes = search_recipes
        self._runner = runner or InlineFetchRunner()
        self._logger = logging.getLogger(__name__)

        self._generation = 0
        self._active_fetch: Optional[FetchHandle] = None

        # Observable properties
        self.state = ObservableProperty(RecipeListState())

        self._load_recipes()

    def on_trigger_event(self, event: Any) -> None:
        """Apply one screen event to the current state."""
        if isinstance(event, LoadRecipes):
            self._load_recipes()
        elif isinstance(event, NewSearch):
            self._new_search()
        elif isinstance(event, NextPage):
            self._next_page()
        elif isinstance(event, OnSelectCategory):
            self._on_select_category(event.category)
        elif isinstance(event, OnUpdateQuery):
            self.state.value = self.state.value.with_query(event.query)
        elif isinstance(event, OnRemoveHeadMessageFromQueue):
            self._remove_head_message()
        else:
            self._logger.info("Unrecognized event %r", event)
            self._append_to_message_queue(
                GenericMessageInfo.create(
                    title=INVALID_EVENT_TITLE,
                    ui_component_type=UIComponentType.DIALOG,
                    description=INVALID_EVENT_DESCRIPTION,
                )
            )

    def dispose(self) -> None:
        # Reports already queued for delivery must not land after disposal.
        self._generation += 1
        self._active_fetch = None
        super().dispose()

    # -- transitions ---------------------------------------------------------

    def _remove_head_message(self) -> None:
        try:
            self.state.value = self.state.value.without_head_message()
        except EmptyQueueError:
            self._logger.info("Nothing to remove from the message queue")

    def _on_select_category(self, category: FoodCategory) -> None:
        self.state.value = self.state.value.with_category(category)
        self._new_search()

    def _next_page(self) -> None:
        self.state.value = self.state.value.advance_page()
        self._load_recipes()

    def _new_search(self) -> None:
        self.state.value = self.state.value.reset_search()
        self._load_recipes()

    def _load_recipes(self) -> None:
        if self._active_fetch is not None:
            self._active_fetch.cancel()
        self._generation += 1
        generation = self._generation

        state = self.state.value
        page, query = state.page, state.query
        self._logger.debug("Fetch %d started (page=%d, query=%r)", generation, page, query)

        handle = self.track_fetch(FetchHandle())
        self._active_fetch = handle
        self._runner.start(
            handle,
            partial(self._search_recipes.search, page, query),
            partial(self._on_data_state, generation),
            partial(self._on_fetch_failed, generation),
        )

    # -- fetch folding -------------------------------------------------------

    def _on_data_state(self, generation: int, data_state: DataState) -> None:
        if generation != self._generation:
            self._logger.debug("Dropping report from superseded fetch %d", generation)
            return
        state = self.state.value.with_loading(data_state.is_loading)
        if data_state.data is not None:
            state = state.with_appended_recipes(data_state.data)
        if data_state.message is not None:
            state, _ = state.with_message(data_state.message)
        self.state.value = state

    def _on_fetch_failed(self, generation: int, error: Exception) -> None:
        if generation != self._generation:
            return
        self._logger.error("Recipe fetch %d failed: %s", generation, error)
        self._on_data_state(
            generation,
            DataState.error(
                GenericMessageInfo(
                    id=SEARCH_ERROR_ID,
                    title=SEARCH_ERROR_TITLE,
                    ui_component_type=UIComponentType.DIALOG,
                    description=str(error) or UNKNOWN_ERROR_DESCRIPTION,
                )
            ),
        )

    def _append_to_message_queue(self, message: GenericMessageInfo) -> None:
        state, accepted = self.state.value.with_message(message)
        if accepted:
            self.state.value = state
