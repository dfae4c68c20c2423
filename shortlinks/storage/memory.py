"""In-process memory storage for mappings."""

import logging
from typing import Dict, Optional

from .base import MappingStore
from ..models import Mapping
from ..common.logging_config import get_logger


class InMemoryMappingStore(MappingStore):
    """Dictionary-backed mapping store. Contents are lost on restart."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger("storage")
        self._mappings: Dict[str, Mapping] = {}

    async def put(self, mapping: Mapping) -> None:
        self._mappings[mapping.key] = mapping

    async def get(self, key: str) -> Optional[Mapping]:
        return self._mappings.get(key)

    async def contains(self, key: str) -> bool:
        return key in self._mappings

    async def count(self) -> int:
        return len(self._mappings)

    async def close(self) -> None:
        self.logger.debug(f"Discarding {len(self._mappings)} in-memory mappings")
        self._mappings.clear()
