"""Error types raised by the short-link directory."""


class ShortLinkError(Exception):
    """Base class for short-link directory errors."""


class EmptyInput(ShortLinkError, ValueError):
    """A URL or key was required but missing."""


class NotFound(ShortLinkError, LookupError):
    """No mapping exists for the requested key."""

    def __init__(self, key: str):
        super().__init__(f"Short URL '{key}' does not exist")
        self.key = key


class RandomnessFailure(ShortLinkError, RuntimeError):
    """The secure random source could not supply bytes."""


class KeySpaceExhausted(ShortLinkError, RuntimeError):
    """Every generated key collided with an existing mapping."""
