"""
QR module extraction and render sizing.

Symbol construction (mode selection, Reed-Solomon, masking) is delegated to
the ``qrcode`` library; this module reads out the module grid and decides how
large each module is drawn.
"""

from dataclasses import dataclass

import qrcode
import structlog
from PIL import Image, ImageDraw
from qrcode.constants import ERROR_CORRECT_M

from barcode_studio.barcode.results import RenderFailure, RenderResult

logger = structlog.get_logger(__name__)

DARK = (0, 0, 0)
LIGHT = (255, 255, 255)


@dataclass(frozen=True)
class QRMatrix:
    """Square grid of QR modules; True is a dark module."""

    modules: tuple[tuple[bool, ...], ...]

    @property
    def size(self) -> int:
        return len(self.modules)

    def is_dark(self, row: int, col: int) -> bool:
        return self.modules[row][col]


@dataclass(frozen=True)
class RenderSize:
    """Pixel geometry for drawing a module grid."""

    cell_size: int
    actual_size: int


def extract_modules(value: str) -> QRMatrix | RenderFailure:
    """
    Encode a string as QR (error correction M) and read out its module grid.

    Returns:
        QRMatrix without quiet zone, or RenderFailure if the encoder rejects
        the value (e.g. too long for any QR version)
    """
    try:
        qr = qrcode.QRCode(
            version=None,
            error_correction=ERROR_CORRECT_M,
            border=0,
        )
        qr.add_data(value)
        qr.make(fit=True)
        grid = qr.get_matrix()
    except Exception as e:
        logger.warning("QR encoding failed", error=str(e), length=len(value))
        return RenderFailure(detail=str(e))

    return QRMatrix(modules=tuple(tuple(bool(cell) for cell in row) for row in grid))


def compute_render_size(target_size: int, module_count: int) -> RenderSize:
    """
    Size each module to a whole number of pixels.

    The cell size is floored so the grid never exceeds the target and never
    has sub-pixel seams; the result may be smaller than ``target_size``.
    """
    if target_size <= 0:
        raise ValueError(f"Target size must be positive, got {target_size}")
    if module_count <= 0:
        raise ValueError(f"Module count must be positive, got {module_count}")

    cell_size = target_size // module_count
    return RenderSize(cell_size=cell_size, actual_size=cell_size * module_count)


def render_matrix(matrix: QRMatrix, target_size: int) -> RenderResult:
    """Draw a module grid as an RGB image no larger than ``target_size``."""
    if target_size <= 0:
        return RenderResult.failed(f"Target size must be positive, got {target_size}")

    geometry = compute_render_size(target_size, matrix.size)
    cell = geometry.cell_size
    if cell == 0:
        return RenderResult.failed(
            f"{target_size}px is smaller than {matrix.size} modules"
        )

    image = Image.new("RGB", (geometry.actual_size, geometry.actual_size), LIGHT)
    draw = ImageDraw.Draw(image)
    for row_index, row in enumerate(matrix.modules):
        top = row_index * cell
        for col_index, dark in enumerate(row):
            if dark:
                left = col_index * cell
                # Whole-pixel rectangles with inclusive bounds tile without gaps
                draw.rectangle(
                    (left, top, left + cell - 1, top + cell - 1),
                    fill=DARK,
                )
    return RenderResult(image=image)


def render_qr_image(value: str, size: int = 200) -> RenderResult:
    """Render a QR code for ``value`` at (at most) ``size`` pixels square."""
    if size <= 0:
        return RenderResult.failed(f"Target size must be positive, got {size}")
    matrix = extract_modules(value)
    if isinstance(matrix, RenderFailure):
        return RenderResult(failure=matrix)
    return render_matrix(matrix, size)
