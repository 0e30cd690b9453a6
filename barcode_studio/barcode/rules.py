"""
Validation rules for symbology input.

Each rule is a frozen dataclass with ``check`` and ``describe``.
"""

import re
from dataclasses import dataclass, field

from barcode_studio.barcode.checksum import (
    ChecksumScheme,
    complete_code,
    is_valid_checksum,
)


@dataclass(frozen=True)
class RegexRule:
    """Input must fully match a regular expression."""

    pattern: str
    flags: int = 0
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern, self.flags))

    def check(self, value: str) -> bool:
        return self._compiled.fullmatch(value) is not None

    def describe(self) -> str:
        suffix = " (case-insensitive)" if self.flags & re.IGNORECASE else ""
        return f"matches /{self.pattern}/{suffix}"


@dataclass(frozen=True)
class ChecksumRule:
    """
    Fixed-length numeric input guarded by a modulo-10 check digit.

    Full-length input must carry a matching check digit; short-form input
    (one digit short) is always accepted and completed by ``complete``.
    """

    scheme: ChecksumScheme

    @property
    def full_length(self) -> int:
        return self.scheme.length

    @property
    def short_length(self) -> int:
        return self.scheme.length - 1

    def is_short_form(self, value: str) -> bool:
        return len(value) == self.short_length and value.isdigit()

    def check(self, value: str) -> bool:
        if not value.isascii() or not value.isdigit():
            return False
        if len(value) == self.short_length:
            return True
        return is_valid_checksum(value, self.scheme)

    def complete(self, value: str) -> str:
        """Return the full-length code, appending the check digit if missing."""
        if self.is_short_form(value):
            return complete_code(value, self.scheme)
        return value

    def describe(self) -> str:
        return (
            f"{self.short_length} digits, or {self.full_length} digits "
            f"with a valid {self.scheme.value} check digit"
        )


@dataclass(frozen=True)
class RangeRule:
    """Input read as a base-10 integer must fall within inclusive bounds."""

    minimum: int
    maximum: int

    def check(self, value: str) -> bool:
        try:
            number = int(value, 10)
        except ValueError:
            return False
        return self.minimum <= number <= self.maximum

    def describe(self) -> str:
        return f"integer between {self.minimum} and {self.maximum}"


@dataclass(frozen=True)
class CompositeRule:
    """All sub-rules must pass, checked in order."""

    rules: tuple["Rule", ...]

    def check(self, value: str) -> bool:
        return all(rule.check(value) for rule in self.rules)

    def describe(self) -> str:
        return " and ".join(rule.describe() for rule in self.rules)


Rule = RegexRule | ChecksumRule | RangeRule | CompositeRule


def find_checksum_rule(rule: Rule | None) -> ChecksumRule | None:
    """Return the first checksum rule in a rule tree, if any."""
    if isinstance(rule, ChecksumRule):
        return rule
    if isinstance(rule, CompositeRule):
        for child in rule.rules:
            found = find_checksum_rule(child)
            if found is not None:
                return found
    return None
