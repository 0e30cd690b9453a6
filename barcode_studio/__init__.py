"""
Barcode Studio: barcode/QR validation, encoding and rendering.
"""

__version__ = "0.1.0"
