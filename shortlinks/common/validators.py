"""Input normalization and validation for the short-link directory."""

from typing import Optional

from ..errors import EmptyInput


SCHEME_PREFIXES = ("http://", "https://")
DEFAULT_SCHEME_PREFIX = "http://"


def has_scheme(url: str) -> bool:
    """Check whether a URL starts with an http:// or https:// prefix.

    The comparison ignores case since URL schemes are case-insensitive.
    """
    return url.lower().startswith(SCHEME_PREFIXES)


def normalize_target(url: Optional[str]) -> str:
    """Normalize a target URL for storage.

    Prepends http:// when the URL has no http:// or https:// prefix.
    Nothing else is rewritten, whitespace included.

    Args:
        url: The submitted URL

    Returns:
        Normalized URL

    Raises:
        EmptyInput: If the URL is missing or empty
    """
    if not url:
        raise EmptyInput("URL is required")

    if not has_scheme(url):
        url = DEFAULT_SCHEME_PREFIX + url
    return url
