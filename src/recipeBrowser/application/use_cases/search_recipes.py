import logging
from dataclasses import dataclass
from typing import Iterator

from ...config import SEARCH_ERROR_ID, SEARCH_ERROR_TITLE, UNKNOWN_ERROR_DESCRIPTION
from ...domain.models import DataState, GenericMessageInfo, UIComponentType
from ...domain.repositories import IRecipeRepository
from .base import UseCase, UseCaseRequest


@dataclass(frozen=True)
class SearchRecipesRequest(UseCaseRequest):
    page: int = 1
    query: str = ""


class SearchRecipesUseCase(UseCase):
    """Search the recipe repository and report progress as ``DataState``s.

    Repository failures never escape: they are turned into a Dialog message
    carried by the final report.
    """

    def __init__(self, recipe_repo: IRecipeRepository):
        self._recipe_repo = recipe_repo
        self._logger = logging.getLogger(__name__)

    def execute(self, request: SearchRecipesRequest) -> Iterator[DataState]:
        yield DataState.loading()
        try:
            recipes = self._recipe_repo.search(request.page, request.query)
        except Exception as exc:
            self._logger.error(
                "Recipe search failed (page=%d, query=%r): %s",
                request.page, request.query, exc,
            )
            yield DataState.error(
                GenericMessageInfo(
                    id=SEARCH_ERROR_ID,
                    title=SEARCH_ERROR_TITLE,
                    ui_component_type=UIComponentType.DIALOG,
                    description=str(exc) or UNKNOWN_ERROR_DESCRIPTION,
                )
            )
            return
        yield DataState.data_of(recipes)

    def search(self, page: int, query: str) -> Iterator[DataState]:
        return self.execute(SearchRecipesRequest(page=page, query=query))
