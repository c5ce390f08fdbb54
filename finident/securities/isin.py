"""ISIN (ISO 6166): 2-letter country + 9-character NSIN + 1 Luhn check digit.

The check digit is Luhn over the letter expansion (A=10..Z=35), so
'US0378331005' is verified as Luhn('3028' + '0378331005').
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.checksum import isin_check_digit, isin_verify
from finident.core.errors import GenerationError
from finident.core.normalize import is_blank, normalize
from finident.core.result import Err, Ok
from finident.core.validation import (
    ValidationResult,
    invalid_checksum,
    invalid_format,
    invalid_input,
    invalid_length,
)
from finident.infra.config import ISIN_BASE_LENGTH, ISIN_LENGTH

ISIN_PATTERN = re.compile(r"^[A-Z]{2}[A-Z0-9]{9}[0-9]$")
_BASE_PATTERN = re.compile(r"^[A-Z]{2}[A-Z0-9]{9}$")


@final
@dataclass(frozen=True, slots=True)
class IsinDetails:
    """Decomposed ISIN. Only produced for valid input."""

    isin: str
    country_code: str
    nsin: str
    check_digit: str
    is_valid: bool = True

    @property
    def content(self) -> str:
        """The generator payload: everything but the check digit."""
        return self.isin[:ISIN_BASE_LENGTH]


def validate_isin(raw: str | None) -> ValidationResult:
    if is_blank(raw):
        return invalid_input()
    isin = normalize(raw)
    if len(isin) != ISIN_LENGTH:
        return invalid_length(f"ISIN must be {ISIN_LENGTH} characters, got {len(isin)}")
    if not ISIN_PATTERN.match(isin):
        return invalid_format(
            "ISIN must be 2 letters, 9 alphanumerics and a numeric check digit"
        )
    if not isin_verify(isin):
        return invalid_checksum(f"ISIN check digit invalid for '{isin}'")
    return ValidationResult.success()


def parse_isin(raw: str | None) -> IsinDetails | None:
    if not validate_isin(raw):
        return None
    isin = normalize(raw)
    return IsinDetails(isin=isin, country_code=isin[:2], nsin=isin[2:11], check_digit=isin[11])


def compute_isin_check_digit(base: str) -> Ok[str] | Err[GenerationError]:
    """Check digit for an 11-character base (country + NSIN)."""
    payload = normalize(base)
    if len(payload) != ISIN_BASE_LENGTH:
        return Err(GenerationError(
            kind="ISIN", payload=base,
            message=f"ISIN base must be {ISIN_BASE_LENGTH} characters, got {len(payload)}",
        ))
    if not _BASE_PATTERN.match(payload):
        return Err(GenerationError(
            kind="ISIN", payload=base,
            message="ISIN base must be 2 letters followed by 9 alphanumerics",
        ))
    return Ok(str(isin_check_digit(payload)))


def generate_isin(base: str) -> Ok[str] | Err[GenerationError]:
    """Append the check digit: generate_isin('US037833100') == Ok('US0378331005')."""
    return compute_isin_check_digit(base).map(lambda d: normalize(base) + d)


def generate_isin_from_parts(country_code: str, nsin: str) -> Ok[str] | Err[GenerationError]:
    cc, body = normalize(country_code), normalize(nsin)
    if len(cc) != 2:
        return Err(GenerationError(
            kind="ISIN", payload=country_code,
            message=f"Country code must be 2 characters, got {len(cc)}",
        ))
    if len(body) != 9:
        return Err(GenerationError(
            kind="ISIN", payload=nsin, message=f"NSIN must be 9 characters, got {len(body)}",
        ))
    return generate_isin(cc + body)
