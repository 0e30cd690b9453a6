"""
History entries for scanned and generated codes.
"""

from pydantic import Field

from barcode_studio.models.base import StoredModel, format_timestamp, now_millis


class ScanHistoryItem(StoredModel):
    """
    A scanned code.

    Storage key: scanHistory
    """

    id: str = Field(..., description="scan_<timestamp>")
    data: str = Field(..., description="Decoded content")
    type: str = Field(..., description="Symbology reported by the scanner")
    timestamp: int = Field(..., description="Milliseconds since epoch")
    formatted_date: str = Field("", description="Display date at time of scan")

    @classmethod
    def create(cls, data: str, type: str, timestamp: int | None = None) -> "ScanHistoryItem":
        ts = now_millis() if timestamp is None else timestamp
        return cls(
            id=f"scan_{ts}",
            data=data,
            type=type,
            timestamp=ts,
            formatted_date=format_timestamp(ts),
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive search over data, type and date."""
        query = query.lower()
        return (
            query in self.data.lower()
            or query in self.type.lower()
            or query in self.formatted_date.lower()
        )


class GenerationHistoryItem(StoredModel):
    """
    A generated code.

    Storage key: generationHistory
    """

    id: str = Field(..., description="gen_<timestamp>")
    data: str = Field(..., description="Input that was encoded")
    format: str = Field(..., description="Encoded format tag, or format id for QR")
    format_name: str = Field(..., description="Display name of the format")
    timestamp: int = Field(..., description="Milliseconds since epoch")
    formatted_date: str = Field("", description="Display date at time of generation")

    @classmethod
    def create(
        cls,
        data: str,
        format: str,
        format_name: str,
        timestamp: int | None = None,
    ) -> "GenerationHistoryItem":
        ts = now_millis() if timestamp is None else timestamp
        return cls(
            id=f"gen_{ts}",
            data=data,
            format=format,
            format_name=format_name,
            timestamp=ts,
            formatted_date=format_timestamp(ts),
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive search over data, format name and date."""
        query = query.lower()
        return (
            query in self.data.lower()
            or query in self.format_name.lower()
            or query in self.formatted_date.lower()
        )


def format_scan_data(data: str, max_length: int = 50) -> str:
    """Truncate long content for list display."""
    if len(data) <= max_length:
        return data
    return f"{data[:max_length]}..."
