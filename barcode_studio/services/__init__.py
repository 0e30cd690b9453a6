"""
Application services.
"""

from barcode_studio.services.generator import GeneratorService

__all__ = ["GeneratorService"]
