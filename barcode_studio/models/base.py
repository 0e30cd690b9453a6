"""
Common base models and utilities.
"""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredModel(BaseModel):
    """Base model for values persisted in the key-value store as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_storage(self) -> dict[str, Any]:
        """Convert model to its stored JSON-compatible form."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_storage(cls, data: dict[str, Any]) -> Self:
        """Create model from a stored JSON object."""
        if data is None:
            raise ValueError("Cannot create model from None")
        return cls.model_validate(data)


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def now_millis() -> int:
    """Milliseconds since the epoch."""
    return int(utc_now().timestamp() * 1000)


def format_timestamp(timestamp_ms: int) -> str:
    """Human-readable local date for a millisecond timestamp."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")
