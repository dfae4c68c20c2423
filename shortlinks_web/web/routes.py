"""Plain-text create/resolve surface and HTML form routes."""

import os
from typing import Optional

from fastapi import APIRouter, Request, Form, HTTPException, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.requests import ClientDisconnect

from shortlinks.errors import NotFound, ShortLinkError
from ..dependencies import get_directory, short_url_for
from ..errors import status_for, to_http_exception

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _trimmed(value) -> Optional[str]:
    # Piped request bodies usually end with a newline
    return value.strip() if isinstance(value, str) else None


def _header_safe(value: str) -> bool:
    """Printable ASCII with no space at either end can go out verbatim in a header."""
    return value == value.strip(" ") and all(" " <= c <= "~" for c in value)


async def _submitted_url(request: Request) -> Optional[str]:
    """Read the URL from the query string, a form field, or the raw body."""
    url = _trimmed(request.query_params.get("url"))
    if url:
        return url

    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            return _trimmed(form.get("url"))

        body = await request.body()
    except ClientDisconnect:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error reading request body",
        )

    return _trimmed(body.decode("utf-8", errors="replace"))


def _error_page(
    request: Request,
    message: str,
    status_code: int,
    back_url: str = "./",
) -> HTMLResponse:
    # back_url is relative to the failing page so links survive a proxy prefix
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error_message": message, "back_url": back_url},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the form for creating short URLs."""
    return templates.TemplateResponse(request, "index.html", {})


@router.post("/", response_class=PlainTextResponse, include_in_schema=False)
async def create_short_url(request: Request):
    """Create a short URL and return it as plain text."""
    directory = get_directory(request)
    url = await _submitted_url(request)

    try:
        key = await directory.store(url)
    except ShortLinkError as e:
        raise to_http_exception(e, plain=True)

    return PlainTextResponse(
        short_url_for(request, key),
        status_code=status.HTTP_201_CREATED,
    )


@router.post("/create", response_class=HTMLResponse, include_in_schema=False)
async def create_short_url_web(request: Request, url: Optional[str] = Form(None)):
    """Handle form submission to create a short URL."""
    directory = get_directory(request)

    try:
        key = await directory.store(_trimmed(url))
    except ShortLinkError as e:
        return _error_page(request, str(e), status_for(e))

    # Relative redirect so it resolves against whatever prefix the browser used
    return RedirectResponse(
        url=f"result/{key}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/result/{key}", response_class=HTMLResponse, include_in_schema=False)
async def result_page(request: Request, key: str):
    """Show result page with the short URL."""
    directory = get_directory(request)

    try:
        mapping = await directory.get_mapping(key)
    except NotFound as e:
        return _error_page(request, str(e), status.HTTP_404_NOT_FOUND, back_url="../")

    return templates.TemplateResponse(
        request,
        "result.html",
        {
            "short_url": short_url_for(request, key),
            "key": key,
            "target": mapping.target,
        },
    )


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    return {"status": "healthy"}


@router.get("/{key}", include_in_schema=False)
async def redirect_to_target(request: Request, key: str):
    """Redirect to the target URL."""
    directory = get_directory(request)

    try:
        target = await directory.resolve(key)
    except ShortLinkError as e:
        raise to_http_exception(e, plain=True)

    response = RedirectResponse(url=target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    if _header_safe(target):
        # RedirectResponse percent-quotes characters such as |{}; send the target as stored
        response.headers["location"] = target
    return response
