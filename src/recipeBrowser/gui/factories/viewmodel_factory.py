"""ViewModelFactory: centralised ViewModel creation.

Wires repository, search use case and fetch runner from the user settings by
plain constructor composition.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from recipeBrowser.application.use_cases import SearchRecipesUseCase
from recipeBrowser.domain.repositories import IRecipeRepository
from recipeBrowser.gui.viewmodels.fetch_runner import FetchRunner, InlineFetchRunner
from recipeBrowser.gui.viewmodels.recipe_list_viewmodel import RecipeListViewModel
from recipeBrowser.infrastructure.repositories import InMemoryRecipeRepository, load_catalog
from recipeBrowser.settings import SettingsManager

_logger = logging.getLogger(__name__)


class ViewModelFactory:
    """Centrally creates ViewModels from the current settings."""

    def __init__(self, settings: SettingsManager) -> None:
        self._settings = settings

    def create_recipe_repository(self) -> IRecipeRepository:
        page_size = int(self._settings.get("search.page_size"))
        catalog_path = self._settings.get("catalog_path")
        recipes = load_catalog(Path(catalog_path)) if catalog_path else []
        _logger.info("Loaded %d recipes (page size %d)", len(recipes), page_size)
        return InMemoryRecipeRepository(recipes, page_size=page_size)

    def create_fetch_runner(self) -> FetchRunner:
        if self._settings.get("search.fetch_mode") == "inline":
            return InlineFetchRunner()
        from recipeBrowser.gui.viewmodels.fetch_workers import QtFetchRunner

        return QtFetchRunner()

    def create_recipe_list_vm(
        self,
        repository: Optional[IRecipeRepository] = None,
    ) -> RecipeListViewModel:
        return RecipeListViewModel(
            search_recipes=SearchRecipesUseCase(repository or self.create_recipe_repository()),
            runner=self.create_fetch_runner(),
        )
