"""
Repository layer over the key-value store.
"""

from barcode_studio.repositories.history import (
    GenerationHistoryRepository,
    ScanHistoryRepository,
)
from barcode_studio.repositories.preferences import PreferencesRepository

__all__ = [
    "ScanHistoryRepository",
    "GenerationHistoryRepository",
    "PreferencesRepository",
]
