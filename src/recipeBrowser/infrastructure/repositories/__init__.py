from .memory_recipe_repository import InMemoryRecipeRepository, load_catalog

__all__ = ["InMemoryRecipeRepository", "load_catalog"]
