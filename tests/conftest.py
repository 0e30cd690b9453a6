import pytest

from barcode_studio.config import get_settings


@pytest.fixture
def storage_path(tmp_path, monkeypatch):
    """Point settings at a temporary storage file."""
    path = tmp_path / "storage.json"
    monkeypatch.setenv("BARCODE_STUDIO_STORAGE_PATH", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()
