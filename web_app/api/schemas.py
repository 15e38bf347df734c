"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from tinylink.models import Link


class CreateLinkBody(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The URL to shorten; https:// is assumed when no scheme is given")
    code: Optional[str] = Field(None, description="Optional custom short code (6-8 alphanumeric characters)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/my-long-article",
                    "code": None
                },
                {
                    "url": "example.com/summer-sale",
                    "code": "summer24"
                }
            ]
        }
    }


class LinkResponse(BaseModel):
    """A stored link."""

    code: str = Field(..., description="The short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The destination URL")
    created_at: datetime = Field(..., description="Creation timestamp")
    clicks: int = Field(..., description="Number of recorded clicks")
    last_clicked_at: Optional[datetime] = Field(None, description="Timestamp of the latest click")

    @classmethod
    def from_link(cls, link: Link, short_url: str) -> "LinkResponse":
        return cls(
            code=link.code,
            short_url=short_url,
            original_url=link.original_url,
            created_at=link.created_at,
            clicks=link.clicks,
            last_clicked_at=link.last_clicked_at,
        )


class LinkListResponse(BaseModel):
    """Links, newest first."""

    count: int
    links: List[LinkResponse]


class ClickHistoryPointResponse(BaseModel):
    name: str
    clicks: int


class LinkStatsResponse(BaseModel):
    """Link details with per-day click history."""

    link: LinkResponse
    history: List[ClickHistoryPointResponse]
    simulated: bool = Field(True, description="History is a random split of the click total")


class DeleteResponse(BaseModel):
    code: str
    deleted: bool


class ClickResponse(BaseModel):
    code: str
    original_url: str


class HealthResponse(BaseModel):
    """Health check response."""

    ok: bool = Field(..., description="Storage is usable")
    version: str
    uptime: float = Field(..., description="Seconds since service start")
    timestamp: str = Field(..., description="Check timestamp (ISO-8601)")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")
