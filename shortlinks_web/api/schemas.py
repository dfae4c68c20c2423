"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field("", description="The URL to shorten; http:// is prepended when no scheme is given")

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        """Drop surrounding whitespace from the submitted URL."""
        return v.strip()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
                {"url": "example.com"},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    key: str = Field(..., description="The generated key")
    short_url: str = Field(..., description="The complete short URL")
    target: str = Field(..., description="The stored target URL")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "key": "1a2b3c4d",
                    "short_url": "https://short.link/1a2b3c4d",
                    "target": "https://example.com/very/long/path",
                    "created_at": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }


class MappingResponse(BaseModel):
    """Response with a stored mapping."""

    key: str
    target: str
    created_at: datetime


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    mappings: int = Field(..., description="Number of stored mappings")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")
