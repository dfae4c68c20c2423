"""Storage layer for the short-link directory."""

from .base import MappingStore
from .memory import InMemoryMappingStore

__all__ = ["MappingStore", "InMemoryMappingStore"]
