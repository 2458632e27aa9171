from abc import ABC, abstractmethod
from typing import List

from .models import Recipe


class IRecipeRepository(ABC):
    @abstractmethod
    def search(self, page: int, query: str) -> List[Recipe]:
        """Return one page (1-based) of recipes matching *query*."""
        pass
