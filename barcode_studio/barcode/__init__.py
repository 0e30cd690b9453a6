"""
Symbology registry, checksums, encoding and rendering.
"""

from barcode_studio.barcode.checksum import (
    ChecksumScheme,
    compute_check_digit,
    is_valid_checksum,
)
from barcode_studio.barcode.encoder import Encoder, encode
from barcode_studio.barcode.qr import (
    QRMatrix,
    RenderSize,
    compute_render_size,
    extract_modules,
    render_qr_image,
)
from barcode_studio.barcode.registry import (
    FormatRegistry,
    SymbologyDescriptor,
    SymbologyKind,
    UnknownFormatError,
    get_format,
    get_registry,
    list_formats,
)
from barcode_studio.barcode.render import image_to_png, render, render_barcode
from barcode_studio.barcode.results import (
    EncodeError,
    EncodeResult,
    RenderFailure,
    RenderResult,
)

__all__ = [
    # Checksum
    "ChecksumScheme",
    "compute_check_digit",
    "is_valid_checksum",
    # Registry
    "FormatRegistry",
    "SymbologyDescriptor",
    "SymbologyKind",
    "UnknownFormatError",
    "get_format",
    "get_registry",
    "list_formats",
    # Encoding
    "Encoder",
    "encode",
    "EncodeError",
    "EncodeResult",
    # QR
    "QRMatrix",
    "RenderSize",
    "compute_render_size",
    "extract_modules",
    "render_qr_image",
    # Rendering
    "RenderFailure",
    "RenderResult",
    "render",
    "render_barcode",
    "image_to_png",
]
