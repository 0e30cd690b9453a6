"""
Tests for the encode orchestrator.
"""

from barcode_studio.barcode.encoder import Encoder, encode
from barcode_studio.barcode.registry import (
    FormatRegistry,
    SymbologyDescriptor,
    SymbologyKind,
)
from barcode_studio.barcode.results import EncodeError, EncodeResult
from barcode_studio.i18n import translate


class TestEncodeValid:
    """Tests for accepted input."""

    def test_ean13_short_form_gets_check_digit(self):
        """Known EAN-13 vector: 12 digits are completed with check digit 1."""
        result = encode("ean13", "400638133393")
        assert result == EncodeResult.valid("4006381333931", "ean13")
        assert result.normalized_value[-1] == "1"

    def test_ean13_full_form_unchanged(self):
        """Full-length input with a valid checksum passes through."""
        result = encode("ean13", "5901234123457")
        assert result.is_valid
        assert result.normalized_value == "5901234123457"

    def test_other_checksum_formats_complete(self):
        """EAN-8, UPC-A and ITF-14 complete their short forms."""
        assert encode("ean8", "9638507").normalized_value == "96385074"
        assert encode("upca", "03600029145").normalized_value == "036000291452"
        assert encode("itf14", "1540014128876").normalized_value == "15400141288769"

    def test_input_is_trimmed(self):
        """Surrounding whitespace is ignored."""
        result = encode("ean13", "  400638133393\n")
        assert result.normalized_value == "4006381333931"

    def test_code39_is_uppercased(self):
        """CODE 39 values are folded to upper case."""
        result = encode("code39", "abc-123")
        assert result.normalized_value == "ABC-123"

    def test_codabar(self):
        """Codabar with start/stop letters is accepted and upper-cased."""
        assert encode("codabar", "A1234B") == EncodeResult.valid("A1234B", "codabar")
        assert encode("codabar", "a1234b").normalized_value == "A1234B"

    def test_itf_even_digits(self):
        """ITF accepts an even digit count."""
        assert encode("itf", "1234") == EncodeResult.valid("1234", "itf")

    def test_pharmacode_bounds(self):
        """Pharmacode accepts 3 through 131070."""
        assert encode("pharmacode", "3").is_valid
        assert encode("pharmacode", "131070") == EncodeResult.valid("131070", "pharmacode")

    def test_qr_passes_through(self):
        """QR text is not altered beyond trimming."""
        result = encode("qr", "https://example.com/a b")
        assert result.normalized_value == "https://example.com/a b"

    def test_code128_case_preserved(self):
        """CODE 128 keeps the input's case."""
        assert encode("code128", "Hello").normalized_value == "Hello"

    def test_upce_unchanged(self):
        """UPC-E gets no check digit appended."""
        assert encode("upce", "0123456").normalized_value == "0123456"


class TestEncodeInvalid:
    """Tests for rejected input."""

    def test_empty_input(self):
        """Empty or blank input is rejected for every format."""
        for format_id in ("qr", "ean13", "code128"):
            for raw in ("", "   "):
                result = encode(format_id, raw)
                assert not result.is_valid
                assert result.error == EncodeError.EMPTY_INPUT
                assert result.reason == translate("generator.empty_input")
                assert result.normalized_value is None

    def test_too_long(self):
        """Input over the format's ceiling is rejected before validation."""
        result = encode("ean13", "40063813339312")
        assert result.error == EncodeError.TOO_LONG
        assert "13" in result.reason

    def test_bad_checksum(self):
        """A wrong check digit returns the format's message."""
        result = encode("ean13", "4006381333932")
        assert result.error == EncodeError.INVALID
        assert result.reason == (
            "EAN-13 requires 12 digits (auto checksum) or 13 with valid checksum"
        )

    def test_codabar_missing_start_stop(self):
        """Codabar without start/end letters is invalid."""
        result = encode("codabar", "1234")
        assert result.error == EncodeError.INVALID
        assert result.reason == "Codabar must start/end with A-D"

    def test_itf_odd_digits(self):
        """ITF with an odd digit count is invalid."""
        result = encode("itf", "123")
        assert result.error == EncodeError.INVALID
        assert "even" in result.reason

    def test_pharmacode_out_of_range(self):
        """Pharmacode outside 3..131070 is invalid."""
        assert encode("pharmacode", "2").error == EncodeError.INVALID
        assert encode("pharmacode", "131071").error == EncodeError.INVALID

    def test_code128_over_80(self):
        """CODE 128 has no input ceiling but validation caps it at 80."""
        result = encode("code128", "x" * 81)
        assert result.error == EncodeError.INVALID

    def test_unknown_format_returns_result(self):
        """Unknown formats come back as a result, not an exception."""
        result = encode("aztec", "hello")
        assert not result.is_valid
        assert result.error == EncodeError.UNKNOWN_FORMAT
        assert result.format_id == "aztec"


class TestEncoderInjection:
    """Tests for encoding against a custom registry."""

    def test_custom_registry(self):
        """The encoder only knows the formats it was given."""
        registry = FormatRegistry(
            [SymbologyDescriptor(id="plain", display_name="Plain", kind=SymbologyKind.QR)]
        )
        encoder = Encoder(registry)

        assert encoder.encode("plain", "x").is_valid
        assert encoder.encode("ean13", "400638133393").error == EncodeError.UNKNOWN_FORMAT

    def test_deterministic(self):
        """Same request, same result."""
        encoder = Encoder(FormatRegistry())
        assert encoder.encode("upca", "01234567890") == encoder.encode("upca", "01234567890")
