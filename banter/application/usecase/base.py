"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base for use cases that change a topic through the mutation coordinator."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
