"""Short-link directory: key generation and guarded key -> target lookup."""

import logging
from typing import Optional

from .errors import EmptyInput, KeySpaceExhausted, NotFound
from .keygen import KeyGenerator
from .models import Mapping
from .rwlock import ReadWriteLock
from .storage.base import MappingStore
from .common.validators import normalize_target
from .common.logging_config import get_logger


class ShortLinkDirectory:
    """Maps generated short keys to target URLs.

    All access to the injected storage goes through one reader/writer lock:
    `store` holds it exclusively for key generation plus insertion, while
    `resolve` shares it for the lookup only.
    """

    def __init__(
        self,
        storage: MappingStore,
        key_generator: Optional[KeyGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 5,
    ):
        """Initialize the directory.

        Args:
            storage: Mapping storage backend
            key_generator: Optional key generator (4 random bytes by default)
            logger: Optional logger
            max_collision_retries: Extra key draws when a key is already taken
        """
        self.storage = storage
        self.generator = key_generator or KeyGenerator()
        self.logger = logger or get_logger("directory")
        self.max_collision_retries = max_collision_retries
        self._lock = ReadWriteLock()

    async def store(self, target: Optional[str]) -> str:
        """Store a target URL under a fresh key.

        Args:
            target: The original URL; http:// is prepended when it has no scheme

        Returns:
            The generated key

        Raises:
            EmptyInput: If target is missing or blank
            RandomnessFailure: If the secure random source fails
            KeySpaceExhausted: If every generated key was already taken
        """
        normalized = normalize_target(target)

        async with self._lock.writer():
            key = await self._generate_unique_key()
            await self.storage.put(Mapping(key=key, target=normalized))

        self.logger.info(f"Created short URL: {key} -> {normalized}")
        return key

    async def resolve(self, key: Optional[str]) -> str:
        """Resolve a key to its target URL.

        Raises:
            EmptyInput: If key is missing or empty
            NotFound: If no mapping exists for key
        """
        mapping = await self.get_mapping(key)
        return mapping.target

    async def get_mapping(self, key: Optional[str]) -> Mapping:
        """Get the full mapping record for a key.

        Raises:
            EmptyInput: If key is missing or empty
            NotFound: If no mapping exists for key
        """
        if not key:
            raise EmptyInput("Key is required")

        if not self.generator.is_valid_format(key):
            self.logger.warning(f"Malformed short URL key: {key!r}")
            raise NotFound(key)

        async with self._lock.reader():
            mapping = await self.storage.get(key)

        if mapping is None:
            self.logger.warning(f"Short URL not found: {key}")
            raise NotFound(key)

        self.logger.debug(f"Resolved short URL: {key} -> {mapping.target}")
        return mapping

    async def count(self) -> int:
        """Number of stored mappings."""
        async with self._lock.reader():
            return await self.storage.count()

    async def close(self) -> None:
        """Close the storage backend."""
        async with self._lock.writer():
            await self.storage.close()

    async def _generate_unique_key(self) -> str:
        """Draw keys until one is not already taken. Caller holds the write lock."""
        for attempt in range(self.max_collision_retries + 1):
            key = self.generator.generate()

            if not await self.storage.contains(key):
                if attempt:
                    self.logger.debug(f"Generated key after {attempt + 1} attempts: {key}")
                return key

            self.logger.warning(f"Key collision on attempt {attempt + 1}: {key}")

        raise KeySpaceExhausted(
            f"Unable to generate unique key after {self.max_collision_retries + 1} attempts"
        )
