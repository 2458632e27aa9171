"""Recipe repository backed by an in-memory catalogue."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ...config import DEFAULT_PAGE_SIZE
from ...domain.models import Recipe
from ...domain.repositories import IRecipeRepository
from ...errors import GatewayError

LOGGER = logging.getLogger(__name__)


def _parse_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        LOGGER.warning("Ignoring malformed date %r in catalogue", value)
        return None


def _recipe_from_dict(row: Dict[str, Any]) -> Recipe:
    return Recipe(
        id=int(row["id"]),
        title=str(row["title"]),
        publisher=str(row.get("publisher", "")),
        featured_image=str(row.get("featured_image", "")),
        rating=int(row.get("rating", 0)),
        source_url=str(row.get("source_url", "")),
        ingredients=tuple(str(i) for i in row.get("ingredients", ())),
        date_added=_parse_datetime(row.get("date_added")),
        date_updated=_parse_datetime(row.get("date_updated")),
    )


def load_catalog(path: Path) -> List[Recipe]:
    """Read a JSON array of recipe objects from *path*."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise GatewayError(f"Cannot read recipe catalogue {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise GatewayError(f"Recipe catalogue {path} must contain a JSON array")
    try:
        return [_recipe_from_dict(row) for row in payload]
    except (KeyError, TypeError, ValueError) as exc:
        raise GatewayError(f"Malformed recipe in {path}: {exc}") from exc


class InMemoryRecipeRepository(IRecipeRepository):
    """Serve recipe searches page by page from a fixed list.

    A blank query matches everything; otherwise the query is matched
    case-insensitively against the title and each ingredient.
    """

    def __init__(self, recipes: Iterable[Recipe] = (), page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._recipes: List[Recipe] = list(recipes)
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def search(self, page: int, query: str) -> List[Recipe]:
        if page < 1:
            raise GatewayError(f"Invalid page {page}")
        matches = [r for r in self._recipes if self._matches(r, query)]
        offset = (page - 1) * self._page_size
        return matches[offset : offset + self._page_size]

    @staticmethod
    def _matches(recipe: Recipe, query: str) -> bool:
        needle = query.strip().lower()
        if not needle:
            return True
        if needle in recipe.title.lower():
            return True
        return any(needle in ingredient.lower() for ingredient in recipe.ingredients)
