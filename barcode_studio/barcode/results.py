"""
Result values returned by encoding and rendering.
"""

from dataclasses import dataclass
from enum import Enum

from PIL import Image

CANNOT_RENDER = "cannot render"


class EncodeError(str, Enum):
    """Reasons an encode request is rejected."""

    UNKNOWN_FORMAT = "unknown_format"
    EMPTY_INPUT = "empty_input"
    TOO_LONG = "too_long"
    INVALID = "invalid"


@dataclass(frozen=True)
class EncodeResult:
    """Outcome of an encode request."""

    is_valid: bool
    format_id: str
    normalized_value: str | None = None
    error: EncodeError | None = None
    reason: str | None = None

    @classmethod
    def valid(cls, normalized_value: str, format_id: str) -> "EncodeResult":
        return cls(is_valid=True, format_id=format_id, normalized_value=normalized_value)

    @classmethod
    def invalid(cls, error: EncodeError, reason: str, format_id: str) -> "EncodeResult":
        return cls(is_valid=False, format_id=format_id, error=error, reason=reason)


@dataclass(frozen=True)
class RenderFailure:
    """A backend could not draw an already-validated value."""

    reason: str = CANNOT_RENDER
    detail: str | None = None


@dataclass(frozen=True)
class RenderResult:
    """Rendered image, or the failure that prevented it."""

    image: Image.Image | None = None
    failure: RenderFailure | None = None

    @property
    def ok(self) -> bool:
        return self.image is not None

    @classmethod
    def failed(cls, detail: str | None = None) -> "RenderResult":
        return cls(failure=RenderFailure(detail=detail))
