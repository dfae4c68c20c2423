"""API routes implementation."""

from fastapi import APIRouter, Request, status
from datetime import datetime, timezone

from shortlinks.errors import ShortLinkError
from .schemas import (
    ShortenRequest,
    ShortenResponse,
    MappingResponse,
    HealthResponse,
    ErrorResponse,
)
from ..dependencies import get_directory, short_url_for
from ..errors import to_http_exception

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "URL is missing"},
        500: {"model": ErrorResponse, "description": "Key generation failed"},
    },
    summary="Create short URL",
    description="Store a URL under a freshly generated 8-character key.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    directory = get_directory(request)

    try:
        key = await directory.store(body.url)
        mapping = await directory.get_mapping(key)
    except ShortLinkError as e:
        raise to_http_exception(e)

    return ShortenResponse(
        key=mapping.key,
        short_url=short_url_for(request, mapping.key),
        target=mapping.target,
        created_at=mapping.created_at,
    )


@router.get(
    "/urls/{key}",
    response_model=MappingResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Key not found"},
    },
    summary="Get mapping",
    description="Get the target stored for a key.",
)
async def get_mapping(request: Request, key: str):
    """Get the mapping stored for a key."""
    directory = get_directory(request)

    try:
        mapping = await directory.get_mapping(key)
    except ShortLinkError as e:
        raise to_http_exception(e)

    return MappingResponse(**mapping.to_dict())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is up and report the mapping count.",
)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    directory = get_directory(request)

    return HealthResponse(
        status="healthy",
        mappings=await directory.count(),
        timestamp=datetime.now(timezone.utc),
    )
