from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .fetch_runner import FetchHandle, FetchRunner, InlineFetchRunner
from .recipe_list_state import RecipeListState
from .recipe_list_viewmodel import RecipeListViewModel

__all__ = [
    "BaseViewModel",
    "FetchHandle",
    "FetchRunner",
    "InlineFetchRunner",
    "ObservableProperty",
    "RecipeListState",
    "RecipeListViewModel",
    "Signal",
]
