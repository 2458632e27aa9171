"""Intents a recipe list screen can send to its view model."""

from __future__ import annotations

from dataclasses import dataclass

from recipeBrowser.domain.models import FoodCategory


class RecipeListEvent:
    """Base class for recipe list events."""


@dataclass(frozen=True)
class LoadRecipes(RecipeListEvent):
    pass


@dataclass(frozen=True)
class NewSearch(RecipeListEvent):
    pass


@dataclass(frozen=True)
class NextPage(RecipeListEvent):
    pass


@dataclass(frozen=True)
class OnSelectCategory(RecipeListEvent):
    category: FoodCategory


@dataclass(frozen=True)
class OnUpdateQuery(RecipeListEvent):
    query: str


@dataclass(frozen=True)
class OnRemoveHeadMessageFromQueue(RecipeListEvent):
    pass


__all__ = [
    "LoadRecipes",
    "NewSearch",
    "NextPage",
    "OnRemoveHeadMessageFromQueue",
    "OnSelectCategory",
    "OnUpdateQuery",
    "RecipeListEvent",
]
