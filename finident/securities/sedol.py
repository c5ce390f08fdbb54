"""SEDOL: 6-character base + 1 check digit, weights 1,3,1,7,3,9,1.

Letters use their base-36 value (B=11 .. Z=35); vowels are never issued
and are rejected as a format error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.checksum import sedol_check_digit, sedol_verify
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
from finident.infra.config import SEDOL_BASE_LENGTH, SEDOL_LENGTH

SEDOL_PATTERN = re.compile(r"^[0-9BCDFGHJKLMNPQRSTVWXYZ]{6}[0-9]$")
_BASE_PATTERN = re.compile(r"^[0-9BCDFGHJKLMNPQRSTVWXYZ]{6}$")


@final
@dataclass(frozen=True, slots=True)
class SedolDetails:
    sedol: str
    base_code: str
    check_digit: str
    is_valid: bool = True

    @property
    def content(self) -> str:
        return self.base_code


def validate_sedol(raw: str | None) -> ValidationResult:
    if is_blank(raw):
        return invalid_input()
    sedol = normalize(raw)
    if len(sedol) != SEDOL_LENGTH:
        return invalid_length(f"SEDOL must be {SEDOL_LENGTH} characters, got {len(sedol)}")
    if not SEDOL_PATTERN.match(sedol):
        return invalid_format("SEDOL contains invalid characters; vowels are not allowed")
    if not sedol_verify(sedol):
        return invalid_checksum(f"SEDOL check digit invalid for '{sedol}'")
    return ValidationResult.success()


def parse_sedol(raw: str | None) -> SedolDetails | None:
    if not validate_sedol(raw):
        return None
    sedol = normalize(raw)
    return SedolDetails(sedol=sedol, base_code=sedol[:6], check_digit=sedol[6])


def compute_sedol_check_digit(base: str) -> Ok[str] | Err[GenerationError]:
    payload = normalize(base)
    if len(payload) != SEDOL_BASE_LENGTH:
        return Err(GenerationError(
            kind="SEDOL", payload=base,
            message=f"SEDOL base must be {SEDOL_BASE_LENGTH} characters, got {len(payload)}",
        ))
    if not _BASE_PATTERN.match(payload):
        return Err(GenerationError(
            kind="SEDOL", payload=base,
            message="SEDOL base may only contain digits and consonants",
        ))
    return Ok(str(sedol_check_digit(payload)))


def generate_sedol(base: str) -> Ok[str] | Err[GenerationError]:
    return compute_sedol_check_digit(base).map(lambda d: normalize(base) + d)
