"""Immutable snapshot of the recipe list screen."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from recipeBrowser.domain.message_queue import MessageQueue
from recipeBrowser.domain.models import FoodCategory, GenericMessageInfo, Recipe


@dataclass(frozen=True)
class RecipeListState:
    """Everything a renderer needs to draw the recipe list.

    Snapshots are never changed after publication; every transition below
    returns a new instance.  ``page`` and ``recipes`` only move together:
    a new search resets both, pagination bumps the page and later appends.
    """

    query: str = ""
    selected_category: Optional[FoodCategory] = None
    page: int = 1
    recipes: Tuple[Recipe, ...] = ()
    is_loading: bool = False
    queue: MessageQueue = field(default_factory=MessageQueue)

    def with_query(self, query: str) -> RecipeListState:
        return replace(self, query=query)

    def with_category(self, category: FoodCategory) -> RecipeListState:
        return replace(self, selected_category=category, query=category.value)

    def reset_search(self) -> RecipeListState:
        return replace(self, page=1, recipes=())

    def advance_page(self) -> RecipeListState:
        return replace(self, page=self.page + 1)

    def with_loading(self, is_loading: bool) -> RecipeListState:
        return replace(self, is_loading=is_loading)

    def with_appended_recipes(self, recipes: Iterable[Recipe]) -> RecipeListState:
        return replace(self, recipes=self.recipes + tuple(recipes))

    def with_message(self, message: GenericMessageInfo) -> Tuple[RecipeListState, bool]:
        """Queue *message* unless a content-duplicate is already waiting."""
        queue, accepted = self.queue.enqueue_if_new(message)
        if not accepted:
            return self, False
        return replace(self, queue=queue), True

    def without_head_message(self) -> RecipeListState:
        """Drop the head of the message queue; raises ``EmptyQueueError``."""
        _, queue = self.queue.remove_head()
        return replace(self, queue=queue)
