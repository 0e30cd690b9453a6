"""
Repository for user preferences.
"""

import json
from typing import Any

import structlog
from pydantic import ValidationError

from barcode_studio.models import Preferences
from barcode_studio.storage import KeyValueStore, StorageKeys

logger = structlog.get_logger(__name__)


class PreferencesRepository:
    """Load and update the persisted preferences object."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get(self) -> Preferences:
        """Current preferences; defaults when nothing (or nothing readable) is stored."""
        raw = self.store.get_item(StorageKeys.PREFERENCES)
        if not raw:
            return Preferences()
        try:
            return Preferences.from_storage(json.loads(raw))
        except (json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.warning("Corrupt preferences, using defaults", error=str(e))
            return Preferences()

    def save(self, preferences: Preferences) -> None:
        self.store.set_item(StorageKeys.PREFERENCES, json.dumps(preferences.to_storage()))

    def update(self, **changes: Any) -> Preferences:
        """
        Apply field changes and persist.

        Raises:
            ValueError: For unknown preference names or invalid values
        """
        unknown = set(changes) - set(Preferences.model_fields)
        if unknown:
            raise ValueError(f"Unknown preferences: {', '.join(sorted(unknown))}")

        current = self.get().model_dump()
        current.update(changes)
        updated = Preferences.model_validate(current)
        self.save(updated)
        return updated

    def reset(self) -> Preferences:
        """Drop stored preferences and return the defaults."""
        self.store.remove_item(StorageKeys.PREFERENCES)
        return Preferences()

    def language(self, default: str) -> str:
        """The language picked by the user, else ``default``."""
        preferences = self.get()
        if preferences.has_selected_language:
            return preferences.language
        return default
