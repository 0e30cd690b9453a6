"""
Registry of supported symbologies.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from barcode_studio.barcode.checksum import ChecksumScheme
from barcode_studio.barcode.rules import (
    ChecksumRule,
    CompositeRule,
    RangeRule,
    RegexRule,
    Rule,
)


class SymbologyKind(str, Enum):
    """Rendering family of a symbology."""

    QR = "qr"
    LINEAR_BARCODE = "barcode"


class UnknownFormatError(KeyError):
    """Raised when a format id is not registered."""

    def __init__(self, format_id: str):
        super().__init__(format_id)
        self.format_id = format_id

    def __str__(self) -> str:
        return f"Unknown barcode format: {self.format_id!r}"


@dataclass(frozen=True)
class SymbologyDescriptor:
    """Static description of one supported symbology."""

    id: str
    display_name: str
    kind: SymbologyKind
    encoded_format_tag: str | None = None
    max_length: int | None = None
    character_class: str | None = None
    rule: Rule | None = None
    validation_message: str = ""
    placeholder: str = ""
    keyboard_type: str = "default"
    uppercase: bool = False

    def validate(self, value: str) -> bool:
        """Check input against this symbology's rule; no rule accepts anything."""
        if self.rule is None:
            return True
        return self.rule.check(value)

    @property
    def history_format(self) -> str:
        """Format label stored in generation history (tag for barcodes, id for QR)."""
        return self.encoded_format_tag or self.id


DIGITS = "[0-9]"

DEFAULT_FORMATS: tuple[SymbologyDescriptor, ...] = (
    SymbologyDescriptor(
        id="qr",
        display_name="QR Code",
        kind=SymbologyKind.QR,
        placeholder="Enter any text or URL",
    ),
    SymbologyDescriptor(
        id="code128",
        display_name="CODE 128",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="CODE128",
        character_class=r"[\x00-\x7F]",
        rule=RegexRule(r"[\x00-\x7F]{1,80}"),
        validation_message="CODE 128 requires 1-80 characters",
        placeholder="Enter any text",
        keyboard_type="ascii-capable",
    ),
    SymbologyDescriptor(
        id="ean13",
        display_name="EAN-13",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="EAN13",
        max_length=13,
        character_class=DIGITS,
        rule=ChecksumRule(ChecksumScheme.EAN_13),
        validation_message="EAN-13 requires 12 digits (auto checksum) or 13 with valid checksum",
        placeholder="Enter 13 digits (with valid checksum)",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="ean8",
        display_name="EAN-8",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="EAN8",
        max_length=8,
        character_class=DIGITS,
        rule=ChecksumRule(ChecksumScheme.EAN_8),
        validation_message="EAN-8 requires 7 digits (auto checksum) or 8 with valid checksum",
        placeholder="Enter 8 digits (with valid checksum)",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="upca",
        display_name="UPC-A",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="UPC",
        max_length=12,
        character_class=DIGITS,
        rule=ChecksumRule(ChecksumScheme.UPC_A),
        validation_message="UPC-A requires 11 digits (auto checksum) or 12 with valid checksum",
        placeholder="Enter 12 digits (with valid checksum)",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="upce",
        display_name="UPC-E",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="UPCE",
        max_length=8,
        character_class=DIGITS,
        # Structural check only: no UPC-E expansion or check digit
        rule=RegexRule(r"[0-9]{6}|[01][0-9]{6,7}"),
        validation_message="UPC-E requires 6-8 digits, must start with 0 or 1 if 7-8 digits",
        placeholder="Enter 6-8 digits (start with 0)",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="code39",
        display_name="CODE 39",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="CODE39",
        character_class=r"[A-Z0-9\-. $/+%]",
        rule=RegexRule(r"[A-Z0-9\-. $/+%]+", re.IGNORECASE),
        validation_message="CODE 39 supports A-Z, 0-9, and -. $/+%",
        placeholder="Enter alphanumeric text",
        keyboard_type="ascii-capable",
        uppercase=True,
    ),
    SymbologyDescriptor(
        id="itf14",
        display_name="ITF-14",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="ITF14",
        max_length=14,
        character_class=DIGITS,
        rule=ChecksumRule(ChecksumScheme.ITF_14),
        validation_message="ITF-14 requires 13 digits (auto checksum) or 14 with valid checksum",
        placeholder="Enter 13-14 digits",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="itf",
        display_name="ITF",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="ITF",
        character_class=DIGITS,
        rule=RegexRule(r"(?:[0-9]{2})+"),
        validation_message="ITF requires an even number of digits",
        placeholder="Enter even number of digits",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="msi",
        display_name="MSI",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="MSI",
        character_class=DIGITS,
        rule=RegexRule(r"[0-9]+"),
        validation_message="MSI requires only digits",
        placeholder="Enter digits",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="pharmacode",
        display_name="Pharmacode",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="pharmacode",
        character_class=DIGITS,
        rule=CompositeRule((RegexRule(r"[0-9]+"), RangeRule(3, 131070))),
        validation_message="Pharmacode requires a number between 3 and 131070",
        placeholder="Enter number 3-131070",
        keyboard_type="numeric",
    ),
    SymbologyDescriptor(
        id="codabar",
        display_name="Codabar",
        kind=SymbologyKind.LINEAR_BARCODE,
        encoded_format_tag="codabar",
        character_class=r"[0-9\-$:/.+A-Da-d]",
        rule=RegexRule(r"[A-Da-d][0-9\-$:/.+]+[A-Da-d]"),
        validation_message="Codabar must start/end with A-D",
        placeholder="A1234B (start/end with A-D)",
        keyboard_type="ascii-capable",
        uppercase=True,
    ),
)


class FormatRegistry:
    """Ordered, read-only lookup of symbology descriptors."""

    def __init__(self, formats: Iterable[SymbologyDescriptor] = DEFAULT_FORMATS):
        self._formats = tuple(formats)
        self._by_id: dict[str, SymbologyDescriptor] = {}
        for descriptor in self._formats:
            if descriptor.id in self._by_id:
                raise ValueError(f"Duplicate format id: {descriptor.id}")
            self._by_id[descriptor.id] = descriptor

    def list_formats(self) -> tuple[SymbologyDescriptor, ...]:
        """All formats in picker order: QR first, then linear formats."""
        return self._formats

    def get_format(self, format_id: str) -> SymbologyDescriptor:
        """
        Look up a format by id.

        Raises:
            UnknownFormatError: If the id is not registered
        """
        try:
            return self._by_id[format_id]
        except KeyError:
            raise UnknownFormatError(format_id) from None

    def __contains__(self, format_id: object) -> bool:
        return format_id in self._by_id

    def __len__(self) -> int:
        return len(self._formats)


@lru_cache
def get_registry() -> FormatRegistry:
    """Get the process-wide default registry."""
    return FormatRegistry()


def list_formats() -> tuple[SymbologyDescriptor, ...]:
    """List formats of the default registry."""
    return get_registry().list_formats()


def get_format(format_id: str) -> SymbologyDescriptor:
    """Look up a format in the default registry."""
    return get_registry().get_format(format_id)
