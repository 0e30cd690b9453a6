"""
Encode orchestration: validate raw input and produce the value handed to a renderer.
"""

import structlog

from barcode_studio.barcode.registry import (
    FormatRegistry,
    UnknownFormatError,
    get_registry,
)
from barcode_studio.barcode.results import EncodeError, EncodeResult
from barcode_studio.barcode.rules import find_checksum_rule
from barcode_studio.i18n import translate

logger = structlog.get_logger(__name__)


class Encoder:
    """
    Turns a (format id, raw input) request into an ``EncodeResult``.

    Never raises for bad input: every rejection is returned as an invalid
    result carrying an ``EncodeError`` and a user-facing reason.
    """

    def __init__(self, registry: FormatRegistry):
        self.registry = registry

    def encode(self, format_id: str, raw_input: str) -> EncodeResult:
        """
        Validate and normalize input for a symbology.

        Args:
            format_id: Registered format id (e.g. "ean13")
            raw_input: Text as typed or scanned

        Returns:
            Valid result with the normalized value, or an invalid result
        """
        try:
            descriptor = self.registry.get_format(format_id)
        except UnknownFormatError as e:
            # Picker and registry disagree; not a user mistake
            logger.error("Unknown format requested", format_id=format_id)
            return EncodeResult.invalid(EncodeError.UNKNOWN_FORMAT, str(e), format_id)

        value = raw_input.strip()
        if not value:
            return EncodeResult.invalid(
                EncodeError.EMPTY_INPUT,
                translate("generator.empty_input"),
                format_id,
            )

        if descriptor.max_length is not None and len(value) > descriptor.max_length:
            return EncodeResult.invalid(
                EncodeError.TOO_LONG,
                f"{descriptor.display_name} allows at most {descriptor.max_length} characters",
                format_id,
            )

        if not descriptor.validate(value):
            logger.debug("Input rejected", format_id=format_id, length=len(value))
            return EncodeResult.invalid(
                EncodeError.INVALID,
                descriptor.validation_message,
                format_id,
            )

        checksum_rule = find_checksum_rule(descriptor.rule)
        if checksum_rule is not None:
            normalized = checksum_rule.complete(value)
        elif descriptor.uppercase:
            normalized = value.upper()
        else:
            normalized = value

        logger.debug("Input encoded", format_id=format_id, normalized_length=len(normalized))
        return EncodeResult.valid(normalized, format_id)


def encode(format_id: str, raw_input: str) -> EncodeResult:
    """
    Convenience function to encode against the default registry.

    Args:
        format_id: Registered format id
        raw_input: Raw text

    Returns:
        Encode result
    """
    return Encoder(get_registry()).encode(format_id, raw_input)
