from .base import UseCase, UseCaseRequest
from .search_recipes import SearchRecipesRequest, SearchRecipesUseCase

__all__ = [
    "SearchRecipesRequest",
    "SearchRecipesUseCase",
    "UseCase",
    "UseCaseRequest",
]
