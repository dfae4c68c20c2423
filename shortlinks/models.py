"""Data models for the short-link directory."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Mapping:
    """A key -> target association."""

    key: str
    target: str
    created_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "key": self.key,
            "target": self.target,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
