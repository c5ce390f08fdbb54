"""CUSIP: 6-character issuer + 2-character issue + 1 check digit.

Positions 0-7 take digit, letter (A=10..Z=35) or private-placement symbol
(* = 36, @ = 37, # = 38) values; odd positions are doubled and the digits
of every value are summed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.checksum import cusip_check_digit, cusip_verify
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
from finident.infra.config import CUSIP_BASE_LENGTH, CUSIP_LENGTH

CUSIP_PATTERN = re.compile(r"^[A-Z0-9*@#]{8}[0-9]$")
_BASE_PATTERN = re.compile(r"^[A-Z0-9*@#]{8}$")


@final
@dataclass(frozen=True, slots=True)
class CusipDetails:
    cusip: str
    issuer_number: str
    issue_number: str
    check_digit: str
    is_valid: bool = True

    @property
    def content(self) -> str:
        return self.cusip[:CUSIP_BASE_LENGTH]


def validate_cusip(raw: str | None) -> ValidationResult:
    if is_blank(raw):
        return invalid_input()
    cusip = normalize(raw)
    if len(cusip) != CUSIP_LENGTH:
        return invalid_length(f"CUSIP must be {CUSIP_LENGTH} characters, got {len(cusip)}")
    if not CUSIP_PATTERN.match(cusip):
        return invalid_format("CUSIP must be 8 characters of A-Z 0-9 * @ # and a numeric check digit")
    if not cusip_verify(cusip):
        return invalid_checksum(f"CUSIP check digit invalid for '{cusip}'")
    return ValidationResult.success()


def parse_cusip(raw: str | None) -> CusipDetails | None:
    """parse_cusip('037833100') -> issuer '037833', issue '10', check '0'."""
    if not validate_cusip(raw):
        return None
    cusip = normalize(raw)
    return CusipDetails(
        cusip=cusip,
        issuer_number=cusip[:6],
        issue_number=cusip[6:8],
        check_digit=cusip[8],
    )


def compute_cusip_check_digit(base: str) -> Ok[str] | Err[GenerationError]:
    payload = normalize(base)
    if len(payload) != CUSIP_BASE_LENGTH:
        return Err(GenerationError(
            kind="CUSIP", payload=base,
            message=f"CUSIP base must be {CUSIP_BASE_LENGTH} characters, got {len(payload)}",
        ))
    if not _BASE_PATTERN.match(payload):
        return Err(GenerationError(
            kind="CUSIP", payload=base, message="CUSIP base may only contain A-Z 0-9 * @ #",
        ))
    return Ok(str(cusip_check_digit(payload)))


def generate_cusip(base: str) -> Ok[str] | Err[GenerationError]:
    """Append the check digit to an 8-character base; a full CUSIP is rejected."""
    return compute_cusip_check_digit(base).map(lambda d: normalize(base) + d)


def generate_cusip_from_parts(issuer_number: str, issue_number: str) -> Ok[str] | Err[GenerationError]:
    issuer, issue = normalize(issuer_number), normalize(issue_number)
    if len(issuer) != 6:
        return Err(GenerationError(
            kind="CUSIP", payload=issuer_number,
            message=f"Issuer number must be 6 characters, got {len(issuer)}",
        ))
    if len(issue) != 2:
        return Err(GenerationError(
            kind="CUSIP", payload=issue_number,
            message=f"Issue number must be 2 characters, got {len(issue)}",
        ))
    return generate_cusip(issuer + issue)
