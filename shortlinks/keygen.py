"""Key generation for short links."""

import os
import string
from typing import Callable

from .errors import RandomnessFailure


# Number of random bytes per key; rendered as twice as many hex characters.
KEY_BYTES = 4


class KeyGenerator:
    """Generate short keys from a cryptographically secure random source."""

    HEX_CHARS = frozenset(string.digits + "abcdef")

    def __init__(
        self,
        num_bytes: int = KEY_BYTES,
        random_source: Callable[[int], bytes] = os.urandom,
    ):
        """Initialize key generator.

        Args:
            num_bytes: Number of random bytes drawn per key
            random_source: Callable returning N secure random bytes
        """
        self.num_bytes = num_bytes
        self.random_source = random_source

    @property
    def key_length(self) -> int:
        """Length of generated keys in characters."""
        return self.num_bytes * 2

    def generate(self) -> str:
        """Generate a random key.

        Returns:
            Lowercase hexadecimal key of `key_length` characters

        Raises:
            RandomnessFailure: If the random source cannot supply bytes
        """
        try:
            raw = self.random_source(self.num_bytes)
        except (OSError, NotImplementedError) as e:
            raise RandomnessFailure(f"Secure random source unavailable: {e}") from e

        if len(raw) != self.num_bytes:
            raise RandomnessFailure(
                f"Secure random source returned {len(raw)} bytes, expected {self.num_bytes}"
            )

        return raw.hex()

    def is_valid_format(self, key: str) -> bool:
        """Check if key has the generated format (fixed-length lowercase hex).

        Args:
            key: Key to validate

        Returns:
            True if valid format
        """
        return len(key) == self.key_length and all(c in self.HEX_CHARS for c in key)
