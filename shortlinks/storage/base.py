"""Abstract base class for mapping storage implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Mapping


class MappingStore(ABC):
    """Abstract base class for key -> target storage.

    Implementations do no locking of their own; the directory serializes
    access with its reader/writer lock.
    """

    @abstractmethod
    async def put(self, mapping: Mapping) -> None:
        """Insert a mapping.

        Args:
            mapping: The mapping to store
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[Mapping]:
        """Get the mapping for a key.

        Args:
            key: The key to lookup

        Returns:
            The mapping if found, None otherwise
        """
        pass

    @abstractmethod
    async def contains(self, key: str) -> bool:
        """Check if a key already exists.

        Args:
            key: The key to check

        Returns:
            True if exists, False otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored mappings."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release storage resources."""
        pass
