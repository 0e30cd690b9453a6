"""
Image rendering for encoded values.

Linear symbologies go through python-barcode's ImageWriter; QR codes are drawn
from the extracted module matrix. Rendering never raises: backend errors come
back as a ``RenderFailure`` so callers can show a fallback.
"""

from io import BytesIO
from typing import Any, TypedDict

import barcode as pybarcode
import structlog
from barcode.writer import ImageWriter
from PIL import Image

from barcode_studio.barcode.qr import render_qr_image
from barcode_studio.barcode.registry import (
    FormatRegistry,
    SymbologyDescriptor,
    SymbologyKind,
    UnknownFormatError,
    get_registry,
)
from barcode_studio.barcode.results import EncodeResult, RenderResult

logger = structlog.get_logger(__name__)


class BarcodeRenderOptions(TypedDict, total=False):
    """Writer options passed through to python-barcode."""

    module_width: float
    module_height: float
    font_size: int
    dpi: int
    text_distance: float
    quiet_zone: float
    write_text: bool
    background: str
    foreground: str


DEFAULT_RENDER_OPTIONS: BarcodeRenderOptions = {
    "module_width": 0.2,
    "font_size": 12,
    "dpi": 144,
    "text_distance": 1,
    "quiet_zone": 2,
    "write_text": True,
}

# Encoded format tag -> python-barcode class name. Tags missing here
# (UPCE, ITF14, MSI, pharmacode) have no python-barcode implementation.
PYBARCODE_CLASSES: dict[str, str] = {
    "CODE128": "code128",
    "EAN13": "ean13",
    "EAN8": "ean8",
    "UPC": "upca",
    "CODE39": "code39",
    "ITF": "itf",
    "codabar": "codabar",
}


def supported_tags() -> set[str]:
    """Encoded format tags this module can draw as linear barcodes."""
    return set(PYBARCODE_CLASSES)


def render_barcode(
    result: EncodeResult,
    descriptor: SymbologyDescriptor,
    options: BarcodeRenderOptions | None = None,
) -> RenderResult:
    """
    Render a validated linear barcode as a PIL image.

    Args:
        result: Successful encode result
        descriptor: Descriptor of the result's format
        options: Writer overrides (module_width, dpi, ...)

    Returns:
        RenderResult with an RGB image, or a failure
    """
    if not result.is_valid or result.normalized_value is None:
        return RenderResult.failed(result.reason or "Input was not encoded")

    barcode_name = PYBARCODE_CLASSES.get(descriptor.encoded_format_tag or "")
    if barcode_name is None:
        logger.warning(
            "No linear renderer for format",
            format_id=descriptor.id,
            tag=descriptor.encoded_format_tag,
        )
        return RenderResult.failed(f"{descriptor.display_name} rendering is not supported")

    writer_options: dict[str, Any] = {**DEFAULT_RENDER_OPTIONS, **(options or {})}
    try:
        barcode_class = pybarcode.get_barcode_class(barcode_name)
        instance = barcode_class(result.normalized_value, writer=ImageWriter())
        image = instance.render(writer_options=writer_options)
    except Exception as e:
        logger.warning(
            "Barcode rendering failed",
            format_id=descriptor.id,
            error=str(e),
        )
        return RenderResult.failed(str(e))

    if not isinstance(image, Image.Image):
        return RenderResult.failed("Barcode output is not an image")
    return RenderResult(image=image.convert("RGB"))


def render(
    result: EncodeResult,
    registry: FormatRegistry | None = None,
    size: int = 200,
    options: BarcodeRenderOptions | None = None,
) -> RenderResult:
    """Render any encode result, dispatching on the format's kind."""
    if not result.is_valid or result.normalized_value is None:
        return RenderResult.failed(result.reason or "Input was not encoded")

    registry = registry or get_registry()
    try:
        descriptor = registry.get_format(result.format_id)
    except UnknownFormatError as e:
        return RenderResult.failed(str(e))

    if descriptor.kind == SymbologyKind.QR:
        return render_qr_image(result.normalized_value, size)
    return render_barcode(result, descriptor, options)


def image_to_png(image: Image.Image) -> bytes:
    """Serialize an image as PNG bytes."""
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
