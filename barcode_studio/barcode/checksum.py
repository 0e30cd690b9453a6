"""
Modulo-10 check digit computation for fixed-length numeric symbologies.
"""

from enum import Enum


class ChecksumScheme(str, Enum):
    """Weighted modulo-10 schemes, keyed by symbology."""

    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"
    ITF_14 = "ITF-14"

    @property
    def length(self) -> int:
        """Full code length, check digit included."""
        return _LENGTHS[self]

    @property
    def even_weight(self) -> int:
        """Weight for digits at even 0-based positions; odd positions get the other one."""
        return _EVEN_WEIGHTS[self]


_LENGTHS = {
    ChecksumScheme.EAN_13: 13,
    ChecksumScheme.EAN_8: 8,
    ChecksumScheme.UPC_A: 12,
    ChecksumScheme.ITF_14: 14,
}

# EAN-8 and UPC-A weight the leftmost digit by 3, EAN-13 and ITF-14 by 1.
_EVEN_WEIGHTS = {
    ChecksumScheme.EAN_13: 1,
    ChecksumScheme.EAN_8: 3,
    ChecksumScheme.UPC_A: 3,
    ChecksumScheme.ITF_14: 1,
}


def compute_check_digit(digits: str, scheme: ChecksumScheme) -> int:
    """
    Calculate the check digit for the leading digits of a code.

    Algorithm:
    1. Multiply each of the first N-1 digits by its positional weight
       (even positions by ``scheme.even_weight``, odd positions by the other of 1/3)
    2. Sum all results
    3. Checksum = (10 - (sum mod 10)) mod 10

    Only the first N-1 characters are read, so a full-length code can be passed
    as well. Charset is not checked here; a non-digit raises ``ValueError``.
    """
    data_length = scheme.length - 1
    if len(digits) < data_length:
        raise ValueError(f"Code must have at least {data_length} digits for {scheme.value}")

    even_weight = scheme.even_weight
    odd_weight = 4 - even_weight

    total = 0
    for i, digit in enumerate(digits[:data_length]):
        weight = even_weight if i % 2 == 0 else odd_weight
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def is_valid_checksum(code: str, scheme: ChecksumScheme) -> bool:
    """
    Validate a full-length code against its check digit.

    Returns:
        True if the code has the scheme's length, is numeric and the
        trailing digit matches the computed check digit
    """
    if len(code) != scheme.length:
        return False
    if not (code.isascii() and code.isdigit()):
        return False

    return compute_check_digit(code, scheme) == int(code[-1])


def complete_code(digits: str, scheme: ChecksumScheme) -> str:
    """Append the check digit to a short-form code."""
    return digits + str(compute_check_digit(digits, scheme))
