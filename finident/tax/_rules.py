"""Shared rule shape for country-routed tax and registry numbers."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from finident.core.normalize import is_blank, strip_country_prefix
from finident.core.registry import CountryRegistry
from finident.core.validation import (
    ValidationResult,
    invalid_checksum,
    invalid_format,
    invalid_input,
    invalid_length,
    unsupported_country,
)

_SEPARATORS = "-./"


def sanitize(raw: str | None, keep: str = "") -> str:
    """Drop whitespace and the separators - . / (except those in keep); upper-case."""
    if not raw:
        return ""
    return "".join(
        c for c in raw if not (c.isspace() or (c in _SEPARATORS and c not in keep))
    ).upper()


@final
@dataclass(frozen=True, slots=True)
class NumberRule:
    """One country's rule for a single number family.

    prefixes and suffixes are stripped before matching (VAT 'GB', 'MVA').
    keep names separator characters that carry meaning (Finnish '-').
    pad_to left-pads a digit string one short of that length with '0'.
    structure checks what a pattern cannot (embedded birth dates) and
    reports a format error; checksum is None for numbers without one.
    """

    country_code: str
    name: str
    lengths: tuple[int, ...]
    pattern: re.Pattern[str]
    checksum: Callable[[str], bool] | None
    prefixes: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ()
    keep: str = ""
    pad_to: int = 0
    display_prefix: str = ""
    structure: Callable[[str], bool] | None = None

    def bare(self, raw: str | None) -> str:
        value = strip_country_prefix(sanitize(raw, self.keep), self.prefixes)
        for suffix in self.suffixes:
            if value.endswith(suffix) and len(value) > len(suffix):
                value = value[:-len(suffix)]
                break
        if self.pad_to and value.isdigit() and len(value) == self.pad_to - 1:
            value = "0" + value
        return value

    def check(self, raw: str | None) -> ValidationResult:
        number = self.bare(raw)
        if not number:
            return invalid_input()
        if len(number) not in self.lengths:
            expected = " or ".join(map(str, self.lengths))
            return invalid_length(
                f"{self.country_code} {self.name} must be {expected} characters, got {len(number)}"
            )
        if not self.pattern.fullmatch(number):
            return invalid_format(f"{self.country_code} {self.name} has an invalid format")
        if self.structure is not None and not self.structure(number):
            return invalid_format(f"{self.country_code} {self.name} has an invalid date")
        if self.checksum is not None and not self.checksum(number):
            return invalid_checksum(f"{self.country_code} {self.name} check digits are invalid")
        return ValidationResult.success()


def validate_routed(
    registry: CountryRegistry[NumberRule],
    raw: str | None,
    country_code: str | None,
) -> ValidationResult:
    """Blank input, then country routing, then the country's own rule."""
    if is_blank(raw):
        return invalid_input()
    rule = registry.resolve(country_code)
    if rule is None:
        return unsupported_country((country_code or "").strip().upper(), registry.name)
    return rule.check(raw)
