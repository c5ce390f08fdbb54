"""BIC / SWIFT code (ISO 9362): a single global rule, no country routing.

    bank (4 letters) + country (2 letters) + location (2) + [branch (3)]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.normalize import is_blank, normalize
from finident.core.validation import (
    ValidationResult,
    invalid_format,
    invalid_input,
    invalid_length,
)
from finident.infra.config import BIC_DEFAULT_BRANCH, BIC_LENGTHS

_BANK = re.compile(r"^[A-Z]{4}")
_COUNTRY = re.compile(r"^[A-Z]{2}")
_ALNUM = re.compile(r"^[A-Z0-9]+$")


@final
@dataclass(frozen=True, slots=True)
class BicDetails:
    bic: str
    bank_code: str
    country_code: str
    location_code: str
    branch_code: str
    is_valid: bool = True

    @property
    def is_primary_office(self) -> bool:
        return self.branch_code == BIC_DEFAULT_BRANCH

    @property
    def is_test_bic(self) -> bool:
        """A '0' in the second location character marks a test and training BIC."""
        return self.location_code[1] == "0"

    @property
    def bic11(self) -> str:
        return self.bic[:8] + self.branch_code


def validate_bic(raw: str | None) -> ValidationResult:
    if is_blank(raw):
        return invalid_input("BIC cannot be empty.")
    bic = normalize(raw)
    if len(bic) not in BIC_LENGTHS:
        return invalid_length(f"BIC must be 8 or 11 characters, got {len(bic)}")
    if not _BANK.match(bic):
        return invalid_format("BIC bank code must be 4 letters")
    if not _COUNTRY.match(bic[4:6]):
        return invalid_format("BIC country code must be 2 letters")
    if not _ALNUM.match(bic[6:8]):
        return invalid_format("BIC location code must be alphanumeric")
    if len(bic) == 11 and not _ALNUM.match(bic[8:]):
        return invalid_format("BIC branch code must be alphanumeric")
    return ValidationResult.success()


def parse_bic(raw: str | None) -> BicDetails | None:
    if not validate_bic(raw):
        return None
    bic = normalize(raw)
    return BicDetails(
        bic=bic,
        bank_code=bic[:4],
        country_code=bic[4:6],
        location_code=bic[6:8],
        branch_code=bic[8:] if len(bic) == 11 else BIC_DEFAULT_BRANCH,
    )


def validate_bic_iban_consistency(bic: str | None, iban_country_code: str | None) -> ValidationResult:
    """The BIC's country segment must equal the IBAN's country code."""
    if is_blank(bic) or is_blank(iban_country_code):
        return invalid_input("BIC and IBAN country code cannot be empty.")
    b = normalize(bic)
    if len(b) < 6:
        return invalid_length("BIC is too short to carry a country code")
    if b[4:6] != normalize(iban_country_code):
        return invalid_format("BIC country code does not match IBAN country code")
    return ValidationResult.success()


def validate_bic_iban_compatibility(bic: str | None, iban: str | None) -> ValidationResult:
    if is_blank(bic) or is_blank(iban):
        return invalid_input("BIC and IBAN cannot be empty.")
    iban_norm = normalize(iban)
    if len(iban_norm) < 2:
        return invalid_format("IBAN too short to carry a country code")
    return validate_bic_iban_consistency(bic, iban_norm[:2])


def is_consistent_with_iban(bic: str | None, iban_country_code: str | None) -> bool:
    return validate_bic_iban_consistency(bic, iban_country_code).is_valid
