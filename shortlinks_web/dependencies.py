"""Request-scoped accessors shared by the API and web routes."""

from fastapi import Request

from shortlinks.directory import ShortLinkDirectory
from shortlinks.common.headers import build_base_url
from shortlinks.common.url_builder import build_short_url


def get_directory(request: Request) -> ShortLinkDirectory:
    """The directory instance the app was created with."""
    return request.app.state.directory


def short_url_for(request: Request, key: str) -> str:
    """Fully qualified short URL for key as seen by the requesting client."""
    config = request.app.state.config

    base_url = build_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    return build_short_url(
        key=key,
        base_url=base_url,
        path_prefix=config.path_prefix,
    )
