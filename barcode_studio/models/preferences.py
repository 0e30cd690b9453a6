"""
User preferences toggled from the settings screen.
"""

from pydantic import Field

from barcode_studio.models.base import StoredModel


class Preferences(StoredModel):
    """
    Persisted user preferences.

    Storage key: preferences
    """

    # Feedback
    haptic_enabled: bool = True
    sound_enabled: bool = True

    # History
    save_history: bool = Field(True, description="Record scans and generations")
    require_auth_for_history: bool = False

    # Scanning behaviour
    auto_copy: bool = False
    auto_open_url: bool = False
    multi_scan: bool = False

    # Onboarding / localization
    language: str = "en"
    has_seen_welcome: bool = False
    has_selected_language: bool = False
