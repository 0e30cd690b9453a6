"""
Generator workflow: encode user input and record it in history.
"""

import structlog

from barcode_studio.barcode import Encoder, EncodeResult, get_registry
from barcode_studio.repositories import (
    GenerationHistoryRepository,
    PreferencesRepository,
    ScanHistoryRepository,
)
from barcode_studio.storage import KeyValueStore, StorageError

logger = structlog.get_logger(__name__)


class GeneratorService:
    """Runs encode requests and applies the history side effects the screens expect."""

    def __init__(
        self,
        encoder: Encoder,
        generations: GenerationHistoryRepository,
        scans: ScanHistoryRepository,
        preferences: PreferencesRepository,
    ):
        self.encoder = encoder
        self.generations = generations
        self.scans = scans
        self.preferences = preferences

    @classmethod
    def from_store(cls, store: KeyValueStore, history_limit: int = 100) -> "GeneratorService":
        """Wire a service against one store with the default registry."""
        return cls(
            encoder=Encoder(get_registry()),
            generations=GenerationHistoryRepository(store, limit=history_limit),
            scans=ScanHistoryRepository(store, limit=history_limit),
            preferences=PreferencesRepository(store),
        )

    def generate(self, format_id: str, raw_input: str) -> EncodeResult:
        """
        Encode input and, if history is enabled, remember it.

        The history entry keeps the input as typed (trimmed); the result carries
        the normalized value for rendering. A failed history write is logged
        and does not change the result.
        """
        result = self.encoder.encode(format_id, raw_input)
        if not result.is_valid:
            logger.info(
                "Generation rejected",
                format_id=format_id,
                error=result.error.value if result.error else None,
            )
            return result

        if self.preferences.get().save_history:
            descriptor = self.encoder.registry.get_format(format_id)
            try:
                self.generations.save(
                    raw_input.strip(),
                    descriptor.history_format,
                    descriptor.display_name,
                )
            except StorageError as e:
                logger.warning("Failed to save generation to history", format_id=format_id, error=str(e))
        logger.info("Code generated", format_id=format_id)
        return result

    def record_scan(self, data: str, type: str) -> bool:
        """Store a scanned value when history is enabled. Returns True if stored."""
        if not data:
            return False
        if not self.preferences.get().save_history:
            return False
        try:
            self.scans.save(data, type)
        except StorageError as e:
            logger.warning("Failed to save scan to history", type=type, error=str(e))
            return False
        logger.info("Scan recorded", type=type)
        return True
