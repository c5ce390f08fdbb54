"""IBAN (ISO 13616) validation and decomposition.

Pipeline: normalize -> length 15..34 -> generic shape -> country template
(exact length, BBAN layout) -> mod-97 -> national BBAN check. Countries
without a template fall back to the generic rule: shape plus mod-97 only.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import final

from finident.banking.templates import GENERIC_TEMPLATE, IBAN_TEMPLATES, CountryTemplate
from finident.core.checksum import mod97_10_verify
from finident.core.expansion import rotate
from finident.core.normalize import alphanumeric_only, is_blank, normalize
from finident.core.validation import (
    ValidationResult,
    invalid_checksum,
    invalid_format,
    invalid_input,
    invalid_length,
    unsupported_country,
)
from finident.infra.config import DEFAULT_LIMITS, Limits

log = logging.getLogger(__name__)

IBAN_SHAPE = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]+$")


@final
@dataclass(frozen=True, slots=True)
class IbanDetails:
    """Decomposed IBAN. Segment fields are None under the generic rule."""

    iban: str
    country_code: str
    check_digits: str
    bban: str
    bank_code: str | None = None
    branch_code: str | None = None
    account_number: str | None = None
    is_generic: bool = False
    is_valid: bool = True

    @property
    def formatted(self) -> str:
        return format_iban(self.iban)


def _template_for(iban: str) -> CountryTemplate:
    return IBAN_TEMPLATES.resolve(iban[:2]) or GENERIC_TEMPLATE


def validate_iban(
    raw: str | None,
    country_code: str | None = None,
    limits: Limits = DEFAULT_LIMITS,
) -> ValidationResult:
    """Validate an IBAN; an explicit country_code must agree with its prefix."""
    if is_blank(raw):
        return invalid_input()
    iban = normalize(raw)
    if not limits.iban.contains(len(iban)):
        return invalid_length(
            f"IBAN length must be {limits.iban.describe()}, got {len(iban)}"
        )
    if not IBAN_SHAPE.match(iban):
        return invalid_format("IBAN must be 2 letters, 2 check digits and an alphanumeric BBAN")
    if country_code is not None and IBAN_TEMPLATES.canonical(country_code) != iban[:2]:
        return invalid_format(
            f"IBAN country '{iban[:2]}' does not match expected country '{country_code.upper()}'"
        )

    template = _template_for(iban)
    bban = iban[4:]
    if template.is_generic:
        log.debug("IBAN %s: no template for %s, checking mod-97 only", iban[:4], iban[:2])
    else:
        if len(iban) != template.length:
            return invalid_length(
                f"{template.country_code} IBAN must be {template.length} characters, got {len(iban)}"
            )
        if template.bban_format is not None and not template.bban_format.matches(bban):
            return invalid_format(
                f"{template.country_code} BBAN must match {template.bban_format.notation}"
            )

    if not mod97_10_verify(rotate(iban)):
        return invalid_checksum("IBAN check digits do not satisfy mod 97")
    if template.national_check is not None and not template.national_check(bban):
        return invalid_checksum(f"{template.country_code} national BBAN check digits are invalid")
    return ValidationResult.success()


def parse_iban(raw: str | None, country_code: str | None = None) -> IbanDetails | None:
    if not validate_iban(raw, country_code):
        return None
    iban = normalize(raw)
    template = _template_for(iban)
    bban = iban[4:]
    return IbanDetails(
        iban=iban,
        country_code=iban[:2],
        check_digits=iban[2:4],
        bban=bban,
        bank_code=template.bank.take(bban) if template.bank else None,
        branch_code=template.branch.take(bban) if template.branch else None,
        account_number=template.account.take(bban) if template.account else None,
        is_generic=template.is_generic,
    )


def normalize_iban(raw: str | None) -> str:
    """Electronic format: upper-case alphanumerics only."""
    return alphanumeric_only(raw)


def format_iban(raw: str | None) -> str:
    """Print format: groups of four separated by single spaces."""
    iban = normalize_iban(raw)
    return " ".join(iban[i:i + 4] for i in range(0, len(iban), 4))


def validate_bban(country_code: str | None, raw: str | None) -> ValidationResult:
    """Validate a bare BBAN against its country template.

    There is no generic BBAN rule, so an unregistered country is rejected.
    """
    template = IBAN_TEMPLATES.lookup(country_code)
    if template is None or template.bban_format is None:
        return unsupported_country((country_code or "").upper(), "BBAN")
    if is_blank(raw):
        return invalid_input()
    bban = normalize(raw)
    if len(bban) != template.bban_length:
        return invalid_length(
            f"{template.country_code} BBAN must be {template.bban_length} characters, got {len(bban)}"
        )
    if not template.bban_format.matches(bban):
        return invalid_format(f"{template.country_code} BBAN must match {template.bban_format.notation}")
    if template.national_check is not None and not template.national_check(bban):
        return invalid_checksum(f"{template.country_code} national BBAN check digits are invalid")
    return ValidationResult.success()


def iban_countries() -> tuple[str, ...]:
    return IBAN_TEMPLATES.countries()
