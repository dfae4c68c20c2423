"""Plain-text and HTML routes for the short-link service."""

from .routes import router as web_router

__all__ = ["web_router"]
