"""
Pydantic models for persisted history and preferences.
"""

from barcode_studio.models.history import (
    GenerationHistoryItem,
    ScanHistoryItem,
    format_scan_data,
)
from barcode_studio.models.preferences import Preferences

__all__ = [
    # History
    "ScanHistoryItem",
    "GenerationHistoryItem",
    "format_scan_data",
    # Preferences
    "Preferences",
]
