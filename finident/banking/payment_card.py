"""Payment card numbers (PAN): Luhn, brand detection, CVV and expiry checks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import Enum
from typing import final

from dateutil.relativedelta import relativedelta

from finident.core.checksum import luhn_verify
from finident.core.normalize import is_blank
from finident.core.validation import (
    ValidationResult,
    invalid_checksum,
    invalid_format,
    invalid_input,
    invalid_length,
)
from finident.infra.config import DEFAULT_LIMITS, Limits

_CARD_CHARS = re.compile(r"^[0-9\s\-]+$")
_DIGITS = re.compile(r"^[0-9]+$")
_SEPARATORS = re.compile(r"[\s\-]+")


class CardBrand(Enum):
    VISA = "Visa"
    MASTERCARD = "Mastercard"
    AMERICAN_EXPRESS = "AmericanExpress"
    DISCOVER = "Discover"
    UNIONPAY = "ChinaUnionPay"
    JCB = "JCB"
    DINERS_CLUB = "DinersClub"
    MIR = "Mir"
    VERVE = "Verve"
    RUPAY = "RuPay"
    TROY = "Troy"
    MAESTRO = "Maestro"
    UNKNOWN = "Unknown"


@final
@dataclass(frozen=True, slots=True)
class _PrefixRange:
    """Inclusive range over the first `width` digits of the PAN."""

    brand: CardBrand
    width: int
    low: int
    high: int

    def matches(self, number: str) -> bool:
        return len(number) >= self.width and self.low <= int(number[:self.width]) <= self.high


# First match wins; narrower ranges precede the broad ones they overlap.
_BRAND_RANGES: tuple[_PrefixRange, ...] = (
    _PrefixRange(CardBrand.VISA, 1, 4, 4),
    _PrefixRange(CardBrand.AMERICAN_EXPRESS, 2, 34, 34),
    _PrefixRange(CardBrand.AMERICAN_EXPRESS, 2, 37, 37),
    _PrefixRange(CardBrand.MASTERCARD, 2, 51, 55),
    _PrefixRange(CardBrand.MASTERCARD, 4, 2221, 2720),
    _PrefixRange(CardBrand.DISCOVER, 4, 6011, 6011),
    _PrefixRange(CardBrand.DISCOVER, 2, 65, 65),
    _PrefixRange(CardBrand.DISCOVER, 3, 644, 649),
    _PrefixRange(CardBrand.DISCOVER, 6, 622126, 622925),
    _PrefixRange(CardBrand.UNIONPAY, 2, 62, 62),
    _PrefixRange(CardBrand.JCB, 4, 3528, 3589),
    _PrefixRange(CardBrand.DINERS_CLUB, 3, 300, 305),
    _PrefixRange(CardBrand.DINERS_CLUB, 3, 309, 309),
    _PrefixRange(CardBrand.DINERS_CLUB, 2, 36, 36),
    _PrefixRange(CardBrand.DINERS_CLUB, 2, 38, 39),
    _PrefixRange(CardBrand.MIR, 4, 2200, 2204),
    _PrefixRange(CardBrand.VERVE, 6, 506099, 506198),
    _PrefixRange(CardBrand.RUPAY, 2, 60, 60),
    _PrefixRange(CardBrand.TROY, 4, 9792, 9792),
    _PrefixRange(CardBrand.MAESTRO, 2, 50, 50),
    _PrefixRange(CardBrand.MAESTRO, 2, 56, 69),
)

_CVV_LENGTHS: dict[CardBrand, tuple[int, ...]] = {
    CardBrand.AMERICAN_EXPRESS: (4,),
    CardBrand.VISA: (3,),
    CardBrand.MASTERCARD: (3,),
    CardBrand.DISCOVER: (3,),
    CardBrand.JCB: (3,),
    CardBrand.DINERS_CLUB: (3,),
    CardBrand.MAESTRO: (3,),
}


@final
@dataclass(frozen=True, slots=True)
class PaymentCardDetails:
    number: str
    brand: CardBrand
    is_valid: bool = True

    @property
    def last4(self) -> str:
        return self.number[-4:]

    @property
    def masked(self) -> str:
        """All but the last four digits replaced with '*'."""
        return "*" * (len(self.number) - 4) + self.last4

    @property
    def iin(self) -> str:
        return self.number[:6]


def _clean(raw: str) -> str:
    return _SEPARATORS.sub("", raw)


def validate_card_number(raw: str | None, limits: Limits = DEFAULT_LIMITS) -> ValidationResult:
    if is_blank(raw):
        return invalid_input()
    if not _CARD_CHARS.match(raw):
        return invalid_format("Card number may only contain digits, spaces and dashes")
    number = _clean(raw)
    if not limits.payment_card.contains(len(number)):
        return invalid_length(
            f"Card number length must be {limits.payment_card.describe()}, got {len(number)}"
        )
    if not luhn_verify(number):
        return invalid_checksum("Card number fails the Luhn check")
    return ValidationResult.success()


def detect_brand(raw: str | None) -> CardBrand:
    """Brand from the IIN prefix; UNKNOWN for anything shorter than 12 digits."""
    if is_blank(raw):
        return CardBrand.UNKNOWN
    number = _clean(raw)
    if len(number) < 12 or not _DIGITS.match(number):
        return CardBrand.UNKNOWN
    for rule in _BRAND_RANGES:
        if rule.matches(number):
            return rule.brand
    return CardBrand.UNKNOWN


def parse_card_number(raw: str | None) -> PaymentCardDetails | None:
    if not validate_card_number(raw):
        return None
    number = _clean(raw)
    return PaymentCardDetails(number=number, brand=detect_brand(number))


def validate_cvv(cvv: str | None, brand: CardBrand) -> ValidationResult:
    if is_blank(cvv):
        return invalid_input()
    value = cvv.strip()
    if not _DIGITS.match(value):
        return invalid_format("CVV must contain digits only")
    allowed = _CVV_LENGTHS.get(brand, (3, 4))
    if len(value) not in allowed:
        return invalid_length(
            f"CVV for {brand.value} must be {' or '.join(map(str, allowed))} digits"
        )
    return ValidationResult.success()


def validate_expiration(
    month: int,
    year: int,
    today: date | None = None,
    limits: Limits = DEFAULT_LIMITS,
) -> ValidationResult:
    """A card is valid through the last day of its expiry month.

    Two-digit years are read as 20xx. Years beyond the configured horizon
    are rejected as implausible.
    """
    if not 1 <= month <= 12:
        return invalid_format(f"Expiry month must be 1-12, got {month}")
    if year < 100:
        year += 2000
    if not 1 <= year <= 9998:
        return invalid_format(f"Expiry year out of range: {year}")
    today = today or datetime.now(tz=UTC).date()
    last_valid_day = date(year, month, 1) + relativedelta(months=1, days=-1)
    if last_valid_day < today:
        return invalid_format("Card has expired")
    horizon = today + relativedelta(years=limits.card_expiry_horizon_years)
    if year > horizon.year:
        return invalid_format(
            f"Expiry year is more than {limits.card_expiry_horizon_years} years ahead"
        )
    return ValidationResult.success()
