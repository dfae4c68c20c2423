"""Core short-link directory: key generation and guarded lookup."""

from .directory import ShortLinkDirectory
from .keygen import KeyGenerator, KEY_BYTES
from .errors import (
    ShortLinkError,
    EmptyInput,
    NotFound,
    RandomnessFailure,
    KeySpaceExhausted,
)

__all__ = [
    "ShortLinkDirectory",
    "KeyGenerator",
    "KEY_BYTES",
    "ShortLinkError",
    "EmptyInput",
    "NotFound",
    "RandomnessFailure",
    "KeySpaceExhausted",
]
