"""
Storage keys used in the key-value store.
"""


class StorageKeys:
    """
    Standardized key names.

    Layout:
    - scanHistory        -> JSON array of scan entries, newest first
    - generationHistory  -> JSON array of generation entries, newest first
    - preferences        -> JSON object of user preferences
    """

    SCAN_HISTORY = "scanHistory"
    GENERATION_HISTORY = "generationHistory"
    PREFERENCES = "preferences"

    @staticmethod
    def all() -> tuple[str, ...]:
        """Every key the application writes."""
        return (
            StorageKeys.SCAN_HISTORY,
            StorageKeys.GENERATION_HISTORY,
            StorageKeys.PREFERENCES,
        )
