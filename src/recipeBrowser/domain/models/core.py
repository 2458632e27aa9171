from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Tuple
import uuid


@dataclass(frozen=True)
class Recipe:
    id: int
    title: str
    publisher: str = ""
    featured_image: str = ""
    rating: int = 0
    source_url: str = ""
    ingredients: Tuple[str, ...] = ()
    date_added: Optional[datetime] = None
    date_updated: Optional[datetime] = None


class FoodCategory(str, Enum):
    # The value doubles as the search text sent to the recipe source
    CHICKEN = "Chicken"
    BEEF = "Beef"
    SOUP = "Soup"
    DESSERT = "Dessert"
    VEGETARIAN = "Vegetarian"
    MILK = "Milk"
    VEGAN = "Vegan"
    PIZZA = "Pizza"
    DONUT = "Donut"

    @classmethod
    def all_categories(cls) -> List[FoodCategory]:
        return list(cls)

    @classmethod
    def from_value(cls, value: str) -> Optional[FoodCategory]:
        needle = value.strip().lower()
        for category in cls:
            if category.value.lower() == needle:
                return category
        return None


class UIComponentType(str, Enum):
    DIALOG = "dialog"
    SNACKBAR = "snackbar"
    TOAST = "toast"
    NONE = "none"


@dataclass(frozen=True)
class MessageAction:
    button_text: str
    on_action: Optional[Callable[[], None]] = field(default=None, compare=False)


@dataclass(frozen=True)
class GenericMessageInfo:
    """A user-facing message waiting to be displayed.

    Two messages with the same :attr:`content_key` are duplicates even when
    their ids differ; the message queue relies on this to avoid showing the
    same dialog twice.
    """

    id: str
    title: str
    ui_component_type: UIComponentType
    description: Optional[str] = None
    positive_action: Optional[MessageAction] = None
    negative_action: Optional[MessageAction] = None
    on_dismiss: Optional[Callable[[], None]] = field(default=None, compare=False)

    @classmethod
    def create(
        cls,
        title: str,
        ui_component_type: UIComponentType,
        description: Optional[str] = None,
        **kwargs,
    ) -> GenericMessageInfo:
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            ui_component_type=ui_component_type,
            description=description,
            **kwargs,
        )

    @property
    def content_key(self) -> Tuple[str, Optional[str], UIComponentType]:
        return (self.title, self.description, self.ui_component_type)
