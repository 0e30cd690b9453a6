"""
Tests for history and preferences repositories and history export.
"""

import csv
import json
from io import StringIO

import pytest

from barcode_studio.models import Preferences
from barcode_studio.repositories import (
    GenerationHistoryRepository,
    PreferencesRepository,
    ScanHistoryRepository,
)
from barcode_studio.repositories.export import format_csv, format_markdown
from barcode_studio.storage import MemoryStore, StorageKeys


@pytest.fixture
def store():
    return MemoryStore()


class TestScanHistoryRepository:
    """Tests for ScanHistoryRepository."""

    def test_empty(self, store):
        repo = ScanHistoryRepository(store)
        assert repo.list() == []
        assert repo.count() == 0

    def test_newest_first(self, store):
        """Entries are prepended."""
        repo = ScanHistoryRepository(store)
        repo.save("first", "qr", timestamp=1)
        repo.save("second", "ean13", timestamp=2)

        assert [item.data for item in repo.list()] == ["second", "first"]

    def test_duplicate_moves_to_top(self, store):
        """Scanning the same content again replaces the older entry."""
        repo = ScanHistoryRepository(store)
        repo.save("a", "qr", timestamp=1)
        repo.save("b", "qr", timestamp=2)
        repo.save("a", "code128", timestamp=3)

        items = repo.list()
        assert [item.data for item in items] == ["a", "b"]
        assert items[0].id == "scan_3"
        assert items[0].type == "code128"

    def test_limit(self, store):
        """Only the newest entries up to the limit are kept."""
        repo = ScanHistoryRepository(store, limit=3)
        for i in range(5):
            repo.save(f"code-{i}", "qr", timestamp=i)

        assert [item.data for item in repo.list()] == ["code-4", "code-3", "code-2"]

    def test_invalid_limit(self, store):
        with pytest.raises(ValueError):
            ScanHistoryRepository(store, limit=0)

    def test_stored_as_camel_case_array(self, store):
        """History is one JSON array under the scanHistory key."""
        ScanHistoryRepository(store).save("x", "qr", timestamp=7)

        data = json.loads(store.get_item(StorageKeys.SCAN_HISTORY))
        assert isinstance(data, list)
        assert data[0]["id"] == "scan_7"
        assert "formattedDate" in data[0]

    def test_get_and_delete(self, store):
        repo = ScanHistoryRepository(store)
        repo.save("a", "qr", timestamp=1)
        repo.save("b", "qr", timestamp=2)

        assert repo.get("scan_1").data == "a"
        assert repo.delete("scan_1") is True
        assert repo.get("scan_1") is None
        assert repo.delete("scan_1") is False
        assert repo.count() == 1

    def test_clear(self, store):
        repo = ScanHistoryRepository(store)
        repo.save("a", "qr", timestamp=1)
        repo.clear()

        assert repo.list() == []
        assert store.get_item(StorageKeys.SCAN_HISTORY) is None

    def test_search(self, store):
        repo = ScanHistoryRepository(store)
        repo.save("https://example.com", "qr", timestamp=1)
        repo.save("4006381333931", "ean13", timestamp=2)

        assert [item.data for item in repo.search("EXAMPLE")] == ["https://example.com"]
        assert [item.data for item in repo.search("ean")] == ["4006381333931"]
        assert len(repo.search("")) == 2
        assert repo.search("nothing") == []

    def test_corrupt_json_reads_empty(self, store):
        """Unparseable history reads as empty and can be overwritten."""
        store.set_item(StorageKeys.SCAN_HISTORY, "not json")
        repo = ScanHistoryRepository(store)

        assert repo.list() == []
        repo.save("a", "qr", timestamp=1)
        assert repo.count() == 1

    def test_non_list_reads_empty(self, store):
        store.set_item(StorageKeys.SCAN_HISTORY, '{"id": "scan_1"}')
        assert ScanHistoryRepository(store).list() == []

    def test_invalid_entries_skipped(self, store):
        """Malformed entries are dropped, valid ones kept."""
        valid = {
            "id": "scan_1",
            "data": "a",
            "type": "qr",
            "timestamp": 1,
            "formattedDate": "x",
        }
        store.set_item(StorageKeys.SCAN_HISTORY, json.dumps([valid, {"id": 2}, None]))

        items = ScanHistoryRepository(store).list()
        assert [item.id for item in items] == ["scan_1"]


class TestGenerationHistoryRepository:
    """Tests for GenerationHistoryRepository."""

    def test_save(self, store):
        repo = GenerationHistoryRepository(store)
        item = repo.save("400638133393", "EAN13", "EAN-13", timestamp=10)

        assert item.id == "gen_10"
        assert repo.list() == [item]

    def test_duplicate_needs_same_format(self, store):
        """The same data in another format is a separate entry."""
        repo = GenerationHistoryRepository(store)
        repo.save("1234", "ITF", "ITF", timestamp=1)
        repo.save("1234", "MSI", "MSI", timestamp=2)
        repo.save("1234", "ITF", "ITF", timestamp=3)

        items = repo.list()
        assert [(item.format, item.timestamp) for item in items] == [("ITF", 3), ("MSI", 2)]

    def test_separate_from_scans(self, store):
        """Scan and generation histories use different keys."""
        GenerationHistoryRepository(store).save("x", "qr", "QR Code", timestamp=1)

        assert ScanHistoryRepository(store).list() == []
        assert store.get_item(StorageKeys.GENERATION_HISTORY) is not None


class TestPreferencesRepository:
    """Tests for PreferencesRepository."""

    def test_defaults_when_empty(self, store):
        assert PreferencesRepository(store).get() == Preferences()

    def test_update_persists(self, store):
        repo = PreferencesRepository(store)
        updated = repo.update(save_history=False, language="es")

        assert updated.save_history is False
        assert repo.get().language == "es"
        assert json.loads(store.get_item(StorageKeys.PREFERENCES))["saveHistory"] is False

    def test_update_keeps_other_fields(self, store):
        repo = PreferencesRepository(store)
        repo.update(auto_copy=True)
        repo.update(multi_scan=True)

        prefs = repo.get()
        assert prefs.auto_copy is True
        assert prefs.multi_scan is True

    def test_update_unknown_field(self, store):
        with pytest.raises(ValueError, match="not_a_pref"):
            PreferencesRepository(store).update(not_a_pref=True)

    def test_update_invalid_value(self, store):
        """Values are validated before saving."""
        repo = PreferencesRepository(store)
        with pytest.raises(ValueError):
            repo.update(save_history="definitely")
        assert store.get_item(StorageKeys.PREFERENCES) is None

    def test_corrupt_reads_defaults(self, store):
        store.set_item(StorageKeys.PREFERENCES, "{broken")
        assert PreferencesRepository(store).get() == Preferences()

    def test_language(self, store):
        """The chosen language wins only once the user has picked one."""
        repo = PreferencesRepository(store)
        repo.update(language="fr")
        assert repo.language("es") == "es"

        repo.update(has_selected_language=True)
        assert repo.language("es") == "fr"

    def test_reset(self, store):
        repo = PreferencesRepository(store)
        repo.update(sound_enabled=False)

        assert repo.reset() == Preferences()
        assert store.get_item(StorageKeys.PREFERENCES) is None


class TestExport:
    """Tests for history export formats."""

    def test_scan_csv(self, store):
        repo = ScanHistoryRepository(store)
        repo.save('say "hi", ok', "qr", timestamp=1)

        rows = list(csv.reader(StringIO(format_csv(repo.list()))))
        assert rows[0] == ["timestamp", "date", "type", "data"]
        assert rows[1][0] == "1"
        assert rows[1][2:] == ["qr", 'say "hi", ok']

    def test_generation_csv(self, store):
        repo = GenerationHistoryRepository(store)
        repo.save("400638133393", "EAN13", "EAN-13", timestamp=1)

        rows = list(csv.reader(StringIO(format_csv(repo.list()))))
        assert rows[0] == ["timestamp", "date", "format", "data"]
        assert rows[1][2:] == ["EAN-13", "400638133393"]

    def test_markdown_escapes_pipes(self, store):
        repo = ScanHistoryRepository(store)
        repo.save("a|b", "qr", timestamp=1)

        lines = format_markdown(repo.list()).splitlines()
        assert lines[0] == "| timestamp | date | type | data |"
        assert lines[1] == "|---|---|---|---|"
        assert lines[2].endswith("| qr | a\\|b |")
