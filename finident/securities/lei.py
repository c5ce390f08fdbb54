"""LEI (ISO 17442): 18 alphanumerics + 2 check digits, ISO 7064 MOD 97-10.

Layout: LOU prefix (4) + reserved/entity part (14) + check digits (2).
The whole 20-character expansion is congruent to 1 mod 97.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.checksum import mod97_10_check_digits, mod97_10_verify
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
from finident.infra.config import LEI_BASE_LENGTH, LEI_LENGTH

LEI_PATTERN = re.compile(r"^[A-Z0-9]{18}[0-9]{2}$")
_BASE_PATTERN = re.compile(r"^[A-Z0-9]{18}$")


@final
@dataclass(frozen=True, slots=True)
class LeiDetails:
    lei: str
    lou_prefix: str
    entity_code: str
    check_digits: str
    is_valid: bool = True

    @property
    def content(self) -> str:
        return self.lei[:LEI_BASE_LENGTH]


def validate_lei(raw: str | None) -> ValidationResult:
    if is_blank(raw):
        return invalid_input("LEI cannot be empty.")
    lei = normalize(raw)
    if len(lei) != LEI_LENGTH:
        return invalid_length(f"LEI must be {LEI_LENGTH} characters, got {len(lei)}")
    if not LEI_PATTERN.match(lei):
        return invalid_format("LEI must be 18 alphanumerics followed by 2 check digits")
    if not mod97_10_verify(lei):
        return invalid_checksum(f"LEI check digits invalid for '{lei}'")
    return ValidationResult.success()


def parse_lei(raw: str | None) -> LeiDetails | None:
    if not validate_lei(raw):
        return None
    lei = normalize(raw)
    return LeiDetails(lei=lei, lou_prefix=lei[:4], entity_code=lei[4:18], check_digits=lei[18:])


def generate_lei(base: str) -> Ok[str] | Err[GenerationError]:
    """Append MOD 97-10 check digits to an 18-character base."""
    payload = normalize(base)
    if len(payload) != LEI_BASE_LENGTH:
        return Err(GenerationError(
            kind="LEI", payload=base,
            message=f"LEI base must be {LEI_BASE_LENGTH} characters, got {len(payload)}",
        ))
    if not _BASE_PATTERN.match(payload):
        return Err(GenerationError(kind="LEI", payload=base, message="LEI base must be alphanumeric"))
    return Ok(payload + mod97_10_check_digits(payload))
