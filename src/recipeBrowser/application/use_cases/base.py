from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UseCaseRequest:
    """Use Case input DTO base."""
    pass


class UseCase(ABC):
    """Use Case base class."""

    @abstractmethod
    def execute(self, request: UseCaseRequest) -> Any:
        ...
