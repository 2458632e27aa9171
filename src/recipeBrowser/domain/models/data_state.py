"""Progress reports emitted while a recipe search is running."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .core import GenericMessageInfo, Recipe


@dataclass(frozen=True)
class DataState:
    """One point-in-time report from a search.

    A search usually yields ``loading()`` first and finishes with either
    ``data(...)`` or ``error(...)``, both of which clear ``is_loading``.
    """

    is_loading: bool = False
    data: Optional[Sequence[Recipe]] = None
    message: Optional[GenericMessageInfo] = None

    @classmethod
    def loading(cls) -> DataState:
        return cls(is_loading=True)

    @classmethod
    def data_of(
        cls,
        items: Sequence[Recipe],
        message: Optional[GenericMessageInfo] = None,
    ) -> DataState:
        return cls(is_loading=False, data=tuple(items), message=message)

    @classmethod
    def error(cls, message: GenericMessageInfo) -> DataState:
        return cls(is_loading=False, message=message)
