"""Data models for TinyLink."""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Optional, Any, Dict


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as ISO-8601 with a ``Z`` suffix for UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp (``Z`` or offset form) into an aware datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Link:
    """A stored short link."""

    code: str
    original_url: str
    created_at: datetime
    clicks: int = 0
    last_clicked_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to the stored (camelCase) record form."""
        return {
            "code": self.code,
            "originalUrl": self.original_url,
            "createdAt": format_timestamp(self.created_at),
            "clicks": self.clicks,
            "lastClickedAt": format_timestamp(self.last_clicked_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        """Create from a stored record.

        Raises:
            KeyError: If a required field is missing
            ValueError: If ``createdAt`` is null or a timestamp cannot be parsed
        """
        created_at = parse_timestamp(data["createdAt"])
        if created_at is None:
            raise ValueError("createdAt must not be null")
        return cls(
            code=data["code"],
            original_url=data["originalUrl"],
            created_at=created_at,
            clicks=int(data.get("clicks", 0)),
            last_clicked_at=parse_timestamp(data.get("lastClickedAt")),
        )


@dataclass
class CreateLinkRequest:
    """Request to create a link. ``code`` is an optional custom short code."""

    url: str
    code: Optional[str] = None


@dataclass
class ApiResponse:
    """Status-coded result of a link operation."""

    status: int
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass
class HealthStatus:
    """Service health snapshot."""

    ok: bool
    version: str
    uptime: float
    timestamp: str = field(default_factory=lambda: format_timestamp(utc_now()))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ClickHistoryPoint:
    """One day of (synthesized) click history."""

    name: str
    clicks: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
