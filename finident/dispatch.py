"""Type registry: one entry point per operation, routed by IdentifierKind.

validate and parse accept an optional country code. It is required for
national IDs and enterprise numbers, optional for IBAN and VAT, selects
the domestic scheme for payment references (RF when absent) and is
ignored elsewhere. generate takes the same optional country code.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import final

from finident.banking.bic import parse_bic, validate_bic
from finident.banking.currency import parse_currency, validate_currency
from finident.banking.iban import parse_iban, validate_iban
from finident.banking.payment_card import parse_card_number, validate_card_number
from finident.banking.payment_reference import (
    ReferenceFormat,
    generate_reference,
    parse_reference,
    validate_reference,
)
from finident.core.errors import GenerationError
from finident.core.result import Err, Ok
from finident.core.types import FrozenMap
from finident.core.validation import ValidationResult
from finident.securities.cusip import generate_cusip, parse_cusip, validate_cusip
from finident.securities.isin import generate_isin, parse_isin, validate_isin
from finident.securities.lei import generate_lei, parse_lei, validate_lei
from finident.securities.sedol import generate_sedol, parse_sedol, validate_sedol
from finident.tax.enterprise import parse_enterprise_number, validate_enterprise_number
from finident.tax.national_id import parse_national_id, validate_national_id
from finident.tax.vat import parse_vat, validate_vat


class IdentifierKind(Enum):
    IBAN = "Iban"
    BIC = "Bic"
    ISIN = "Isin"
    CUSIP = "Cusip"
    SEDOL = "Sedol"
    LEI = "Lei"
    VAT = "Vat"
    NATIONAL_ID = "NationalId"
    ENTERPRISE = "Enterprise"
    PAYMENT_CARD = "PaymentCard"
    PAYMENT_REFERENCE = "PaymentReference"
    CURRENCY = "Currency"


type Validator = Callable[[str | None, str | None], ValidationResult]
type Parser = Callable[[str | None, str | None], object | None]
type Generator = Callable[[str, str | None], Ok[str] | Err[GenerationError]]


@final
@dataclass(frozen=True, slots=True)
class IdentifierHandle:
    """The operations one identifier family supports."""

    kind: IdentifierKind
    validate: Validator
    parse: Parser
    generate: Generator | None = None


_REFERENCE_FORMATS: FrozenMap[str, ReferenceFormat] = FrozenMap.of({
    "BE": ReferenceFormat.BELGIUM_OGM,
    "CH": ReferenceFormat.SWISS_QR,
    "FI": ReferenceFormat.FINLAND,
    "NO": ReferenceFormat.NORWAY_KID,
    "SE": ReferenceFormat.SWEDEN_OCR,
})


def _reference_format(country_code: str | None) -> ReferenceFormat:
    if country_code is None:
        return ReferenceFormat.ISO_RF
    return _REFERENCE_FORMATS.get(country_code.strip().upper()) or ReferenceFormat.ISO_RF


def _handles() -> FrozenMap[str, IdentifierHandle]:
    k = IdentifierKind
    handles = (
        IdentifierHandle(k.IBAN, validate_iban, parse_iban),
        IdentifierHandle(k.BIC, lambda raw, _: validate_bic(raw), lambda raw, _: parse_bic(raw)),
        IdentifierHandle(
            k.ISIN, lambda raw, _: validate_isin(raw), lambda raw, _: parse_isin(raw),
            lambda payload, _: generate_isin(payload),
        ),
        IdentifierHandle(
            k.CUSIP, lambda raw, _: validate_cusip(raw), lambda raw, _: parse_cusip(raw),
            lambda payload, _: generate_cusip(payload),
        ),
        IdentifierHandle(
            k.SEDOL, lambda raw, _: validate_sedol(raw), lambda raw, _: parse_sedol(raw),
            lambda payload, _: generate_sedol(payload),
        ),
        IdentifierHandle(
            k.LEI, lambda raw, _: validate_lei(raw), lambda raw, _: parse_lei(raw),
            lambda payload, _: generate_lei(payload),
        ),
        IdentifierHandle(k.VAT, validate_vat, parse_vat),
        IdentifierHandle(k.NATIONAL_ID, validate_national_id, parse_national_id),
        IdentifierHandle(k.ENTERPRISE, validate_enterprise_number, parse_enterprise_number),
        IdentifierHandle(
            k.PAYMENT_CARD,
            lambda raw, _: validate_card_number(raw),
            lambda raw, _: parse_card_number(raw),
        ),
        IdentifierHandle(
            k.PAYMENT_REFERENCE,
            lambda raw, cc: validate_reference(raw, _reference_format(cc)),
            lambda raw, cc: parse_reference(raw, _reference_format(cc)),
            lambda payload, cc: generate_reference(payload, _reference_format(cc)),
        ),
        IdentifierHandle(
            k.CURRENCY, lambda raw, _: validate_currency(raw), lambda raw, _: parse_currency(raw),
        ),
    )
    return FrozenMap.of({h.kind.value: h for h in handles})


_HANDLES = _handles()


def handle(kind: IdentifierKind) -> IdentifierHandle:
    """Registered handle for kind; every IdentifierKind member is registered."""
    return _HANDLES[kind.value]


def validate(kind: IdentifierKind, raw: str | None, country_code: str | None = None) -> ValidationResult:
    return handle(kind).validate(raw, country_code)


def parse(kind: IdentifierKind, raw: str | None, country_code: str | None = None) -> object | None:
    return handle(kind).parse(raw, country_code)


def generate(
    kind: IdentifierKind, payload: str, country_code: str | None = None,
) -> Ok[str] | Err[GenerationError]:
    """Build a complete identifier from its content, for kinds that have check digits to compute.

    country_code picks the payment reference scheme, as it does for validate and parse.
    """
    generator = handle(kind).generate
    if generator is None:
        return Err(GenerationError(
            kind=kind.value, payload=payload,
            message=f"{kind.value} has no construction rule",
        ))
    return generator(payload, country_code)


def supported_kinds() -> tuple[IdentifierKind, ...]:
    return tuple(IdentifierKind)


def generatable_kinds() -> tuple[IdentifierKind, ...]:
    return tuple(k for k in IdentifierKind if handle(k).generate is not None)
