from .core import FoodCategory, GenericMessageInfo, MessageAction, Recipe, UIComponentType
from .data_state import DataState

__all__ = [
    "DataState",
    "FoodCategory",
    "GenericMessageInfo",
    "MessageAction",
    "Recipe",
    "UIComponentType",
]
