"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic read-only repository interface.

    Geometry inputs are never written back, so only lookup is part of
    the contract.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID."""
        pass

    @abstractmethod
    def list_ids(self) -> List[str]:
        """List the IDs of all available entities."""
        pass
