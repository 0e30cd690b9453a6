"""
Repositories for scan and generation history.

Each history is a JSON array under one store key, newest first, capped, with
duplicates removed on insert.
"""

from __future__ import annotations

import json
from typing import Generic, TypeVar

import structlog
from pydantic import ValidationError

from barcode_studio.models import GenerationHistoryItem, ScanHistoryItem
from barcode_studio.storage import KeyValueStore, StorageKeys

logger = structlog.get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 100

ItemT = TypeVar("ItemT", ScanHistoryItem, GenerationHistoryItem)


class _HistoryRepository(Generic[ItemT]):
    """Shared load/save logic for a capped history list."""

    key: str
    model: type[ItemT]

    def __init__(self, store: KeyValueStore, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.store = store
        self.limit = limit

    def list(self) -> list[ItemT]:
        """All entries, newest first. Unreadable data reads as empty."""
        raw = self.store.get_item(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt history data", key=self.key, error=str(e))
            return []
        if not isinstance(data, list):
            logger.warning("History data is not a list", key=self.key)
            return []

        items: list[ItemT] = []
        for entry in data:
            try:
                items.append(self.model.from_storage(entry))
            except (ValidationError, ValueError, TypeError) as e:
                logger.warning("Skipping invalid history entry", key=self.key, error=str(e))
        return items

    def _write(self, items: list[ItemT]) -> None:
        payload = json.dumps([item.to_storage() for item in items], ensure_ascii=False)
        self.store.set_item(self.key, payload)

    def _insert(self, item: ItemT) -> ItemT:
        existing = [entry for entry in self.list() if not self._is_duplicate(entry, item)]
        self._write([item, *existing][: self.limit])
        logger.debug("History entry saved", key=self.key, id=item.id)
        return item

    def _is_duplicate(self, existing: ItemT, new: ItemT) -> bool:
        raise NotImplementedError

    def get(self, item_id: str) -> ItemT | None:
        """Get an entry by id."""
        for item in self.list():
            if item.id == item_id:
                return item
        return None

    def delete(self, item_id: str) -> bool:
        """Delete an entry by id."""
        items = self.list()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            return False
        self._write(remaining)
        return True

    def clear(self) -> None:
        """Remove the whole history."""
        self.store.remove_item(self.key)

    def search(self, query: str) -> list[ItemT]:
        """Entries matching a case-insensitive query; empty query returns all."""
        items = self.list()
        if not query:
            return items
        return [item for item in items if item.matches(query)]

    def count(self) -> int:
        return len(self.list())


class ScanHistoryRepository(_HistoryRepository[ScanHistoryItem]):
    """History of scanned codes. Duplicates share the same content."""

    key = StorageKeys.SCAN_HISTORY
    model = ScanHistoryItem

    def save(self, data: str, type: str, timestamp: int | None = None) -> ScanHistoryItem:
        """Record a scan, moving an earlier scan of the same content to the top."""
        return self._insert(ScanHistoryItem.create(data, type, timestamp))

    def _is_duplicate(self, existing: ScanHistoryItem, new: ScanHistoryItem) -> bool:
        return existing.data == new.data


class GenerationHistoryRepository(_HistoryRepository[GenerationHistoryItem]):
    """History of generated codes. Duplicates share content and format."""

    key = StorageKeys.GENERATION_HISTORY
    model = GenerationHistoryItem

    def save(
        self,
        data: str,
        format: str,
        format_name: str,
        timestamp: int | None = None,
    ) -> GenerationHistoryItem:
        """Record a generation, replacing an earlier one with the same data and format."""
        return self._insert(GenerationHistoryItem.create(data, format, format_name, timestamp))

    def _is_duplicate(
        self,
        existing: GenerationHistoryItem,
        new: GenerationHistoryItem,
    ) -> bool:
        return existing.data == new.data and existing.format == new.format
