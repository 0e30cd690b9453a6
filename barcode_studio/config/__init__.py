"""
Configuration management for Barcode Studio.
"""

from barcode_studio.config.logging import configure_logging
from barcode_studio.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
