"""Proxy header handling for building the public base URL of short links."""

from typing import Mapping, NamedTuple, Optional


class ForwardedInfo(NamedTuple):
    """Values taken from X-Forwarded-* headers (first hop only)."""

    proto: Optional[str]
    host: Optional[str]
    client: Optional[str]


def _first_hop(value: Optional[str]) -> Optional[str]:
    # Proxies append to these headers; the left-most entry is the client-facing one
    if not value:
        return None
    first = value.split(",")[0].strip()
    return first or None


def extract_forwarded_headers(headers: Mapping[str, str]) -> ForwardedInfo:
    """Extract X-Forwarded-* headers from request headers.

    Args:
        headers: Request headers (any case)

    Returns:
        ForwardedInfo with proto, host and client address
    """
    lowered = {k.lower(): v for k, v in headers.items()}

    return ForwardedInfo(
        proto=_first_hop(lowered.get("x-forwarded-proto")),
        host=_first_hop(lowered.get("x-forwarded-host")),
        client=_first_hop(lowered.get("x-forwarded-for")),
    )


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build the base URL short links are served from.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + Host header
    3. Configured base URL

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded.proto and forwarded.host:
        return f"{forwarded.proto}://{forwarded.host}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")
