"""Creditor payment references.

ISO 11649 ("RF" + 2 check digits + up to 21 alphanumerics, MOD 97-10) is
the international format. Domestic structured references are numeric
with their own check digits:

  BELGIUM_OGM  +++ddd/dddd/ddddd+++, last two digits = first ten mod 97
  FINLAND      4..20 digits, weights 7,3,1 from the right
  NORWAY_KID   3..25 digits, Luhn or MOD11 check digit
  SWEDEN_OCR   2..25 digits, length digit + Luhn check digit
  SWISS_QR     27 digits, recursive mod 10
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import final

from finident.core.checksum import (
    luhn_check_digit,
    luhn_verify,
    mod10_recursive_check_digit,
    mod11_weights_2_to_7_check_digit,
    mod97,
    mod97_10_check_digits,
    mod97_10_verify,
    weights_731_check_digit,
)
from finident.core.errors import GenerationError
from finident.core.expansion import rotate
from finident.core.normalize import digits_only, is_blank, normalize
from finident.core.result import Err, Ok
from finident.core.validation import (
    ValidationResult,
    invalid_checksum,
    invalid_format,
    invalid_input,
    invalid_length,
)
from finident.infra.config import DEFAULT_LIMITS, LengthBounds, Limits

RF_PREFIX = "RF"
RF_PATTERN = re.compile(r"^RF[0-9]{2}[A-Z0-9]+$")
_RF_CONTENT = re.compile(r"^[A-Z0-9]+$")
_LOCAL_CHARS = re.compile(r"^[0-9\s+/\-.]+$")


class ReferenceFormat(Enum):
    ISO_RF = "IsoRf"
    BELGIUM_OGM = "LocalBelgian"
    FINLAND = "LocalFinland"
    NORWAY_KID = "LocalNorway"
    SWEDEN_OCR = "LocalSweden"
    SWISS_QR = "LocalSwitzerland"


@final
@dataclass(frozen=True, slots=True)
class PaymentReferenceDetails:
    """reference is the canonical electronic form; content excludes check digits."""

    reference: str
    content: str
    format: ReferenceFormat
    is_valid: bool = True


# ---------------------------------------------------------------------------
# ISO 11649
# ---------------------------------------------------------------------------


def validate_rf(raw: str | None, limits: Limits = DEFAULT_LIMITS) -> ValidationResult:
    if is_blank(raw):
        return invalid_input("Reference cannot be empty.")
    ref = normalize(raw)
    if not limits.rf_reference.contains(len(ref)):
        return invalid_length(
            f"RF reference length must be {limits.rf_reference.describe()}, got {len(ref)}"
        )
    if not ref.startswith(RF_PREFIX):
        return invalid_format("RF reference must start with 'RF'")
    if not RF_PATTERN.match(ref):
        return invalid_format("RF reference must be 'RF', 2 check digits and alphanumerics")
    if not mod97_10_verify(rotate(ref)):
        return invalid_checksum("RF reference check digits are invalid")
    return ValidationResult.success()


def parse_rf(raw: str | None) -> PaymentReferenceDetails | None:
    if not validate_rf(raw):
        return None
    ref = normalize(raw)
    return PaymentReferenceDetails(reference=ref, content=ref[4:], format=ReferenceFormat.ISO_RF)


def generate_rf(content: str, limits: Limits = DEFAULT_LIMITS) -> Ok[str] | Err[GenerationError]:
    """RF + check digits + content, for 1..21 alphanumerics of content."""
    body = normalize(content)
    if not limits.rf_content.contains(len(body)):
        return Err(GenerationError(
            kind="RF", payload=content,
            message=f"RF content length must be {limits.rf_content.describe()}, got {len(body)}",
        ))
    if not _RF_CONTENT.match(body):
        return Err(GenerationError(kind="RF", payload=content, message="RF content must be alphanumeric"))
    return Ok(RF_PREFIX + mod97_10_check_digits(body + RF_PREFIX) + body)


# ---------------------------------------------------------------------------
# Domestic numeric schemes
# ---------------------------------------------------------------------------


def _ogm_check(data: str) -> str:
    return f"{mod97(data) or 97:02d}"


def _kid_mod11(data: str) -> str | None:
    d = mod11_weights_2_to_7_check_digit(data)
    return None if d < 0 else str(d)


def _ocr_length_digit(total_length: int) -> str:
    return str(total_length % 10)


def _verify_ogm(digits: str) -> bool:
    return _ogm_check(digits[:10]) == digits[10:]


def _verify_finland(digits: str) -> bool:
    return str(weights_731_check_digit(digits[:-1])) == digits[-1]


def _verify_kid(digits: str) -> bool:
    return luhn_verify(digits) or _kid_mod11(digits[:-1]) == digits[-1]


def _verify_ocr(digits: str) -> bool:
    return luhn_verify(digits) and digits[-2] == _ocr_length_digit(len(digits))


def _verify_qr(digits: str) -> bool:
    return str(mod10_recursive_check_digit(digits[:-1])) == digits[-1]


def _build_ogm(data: str) -> str:
    padded = data.zfill(10)
    return padded + _ogm_check(padded)


def _build_finland(data: str) -> str:
    return data + str(weights_731_check_digit(data))


def _build_kid(data: str) -> str:
    return data + str(luhn_check_digit(data))


def _build_ocr(data: str) -> str:
    with_length = data + _ocr_length_digit(len(data) + 2)
    return with_length + str(luhn_check_digit(with_length))


def _build_qr(data: str) -> str:
    padded = data.zfill(26)
    return padded + str(mod10_recursive_check_digit(padded))


@final
@dataclass(frozen=True, slots=True)
class _LocalScheme:
    """A numeric domestic reference: bounds, verifier and builder."""

    format: ReferenceFormat
    reference_length: LengthBounds
    data_length: LengthBounds
    check_length: int
    verify: Callable[[str], bool]
    build: Callable[[str], str]


_LOCAL_SCHEMES: dict[ReferenceFormat, _LocalScheme] = {
    s.format: s
    for s in (
        _LocalScheme(ReferenceFormat.BELGIUM_OGM, LengthBounds(12, 12), LengthBounds(1, 10), 2, _verify_ogm, _build_ogm),
        _LocalScheme(ReferenceFormat.SWISS_QR, LengthBounds(27, 27), LengthBounds(1, 26), 1, _verify_qr, _build_qr),
        _LocalScheme(ReferenceFormat.FINLAND, LengthBounds(4, 20), LengthBounds(3, 19), 1, _verify_finland, _build_finland),
        _LocalScheme(ReferenceFormat.SWEDEN_OCR, LengthBounds(2, 25), LengthBounds(1, 23), 2, _verify_ocr, _build_ocr),
        _LocalScheme(ReferenceFormat.NORWAY_KID, LengthBounds(3, 25), LengthBounds(2, 24), 1, _verify_kid, _build_kid),
    )
}


def format_ogm(digits: str) -> str:
    """Render 12 OGM digits as +++ddd/dddd/ddddd+++."""
    return f"+++{digits[:3]}/{digits[3:7]}/{digits[7:12]}+++"


def _validate_local(raw: str | None, scheme: _LocalScheme) -> ValidationResult:
    if is_blank(raw):
        return invalid_input("Reference cannot be empty.")
    if not _LOCAL_CHARS.match(raw):
        return invalid_format(f"{scheme.format.value} reference must be numeric")
    digits = digits_only(raw)
    if not scheme.reference_length.contains(len(digits)):
        return invalid_length(
            f"{scheme.format.value} reference must be {scheme.reference_length.describe()} digits, "
            f"got {len(digits)}"
        )
    if not scheme.verify(digits):
        return invalid_checksum(f"{scheme.format.value} reference check digits are invalid")
    return ValidationResult.success()


def _local_data(content: str, scheme: _LocalScheme) -> Ok[str] | Err[GenerationError]:
    """Digits of a local reference payload; anything but digits and separators is rejected."""
    if is_blank(content) or not _LOCAL_CHARS.match(content):
        return Err(GenerationError(
            kind=scheme.format.value, payload=content, message="Reference content must be numeric",
        ))
    data = digits_only(content)
    if not scheme.data_length.contains(len(data)):
        return Err(GenerationError(
            kind=scheme.format.value, payload=content,
            message=f"Reference content must be {scheme.data_length.describe()} digits, got {len(data)}",
        ))
    return Ok(data)


def _generate_local(content: str, scheme: _LocalScheme) -> Ok[str] | Err[GenerationError]:
    match _local_data(content, scheme):
        case Ok(data) if scheme.format is ReferenceFormat.BELGIUM_OGM:
            return Ok(format_ogm(scheme.build(data)))
        case Ok(data):
            return Ok(scheme.build(data))
        case err:
            return err


def generate_kid_mod11(content: str) -> Ok[str] | Err[GenerationError]:
    """Norwegian KID with a MOD11 check digit; fails when the remainder forbids one."""
    scheme = _LOCAL_SCHEMES[ReferenceFormat.NORWAY_KID]
    match _local_data(content, scheme):
        case Ok(data):
            check = _kid_mod11(data)
            if check is None:
                return Err(GenerationError(
                    kind=scheme.format.value, payload=content,
                    message="MOD11 yields no check digit for this content",
                ))
            return Ok(data + check)
        case err:
            return err


# ---------------------------------------------------------------------------
# Format-routed entry points
# ---------------------------------------------------------------------------

# Detection order: most constrained shapes first.
_DETECTION_ORDER: tuple[ReferenceFormat, ...] = (
    ReferenceFormat.BELGIUM_OGM,
    ReferenceFormat.SWISS_QR,
    ReferenceFormat.FINLAND,
    ReferenceFormat.SWEDEN_OCR,
    ReferenceFormat.NORWAY_KID,
)


def validate_reference(raw: str | None, fmt: ReferenceFormat = ReferenceFormat.ISO_RF) -> ValidationResult:
    if fmt is ReferenceFormat.ISO_RF:
        return validate_rf(raw)
    return _validate_local(raw, _LOCAL_SCHEMES[fmt])


def generate_reference(
    content: str, fmt: ReferenceFormat = ReferenceFormat.ISO_RF,
) -> Ok[str] | Err[GenerationError]:
    if fmt is ReferenceFormat.ISO_RF:
        return generate_rf(content)
    return _generate_local(content, _LOCAL_SCHEMES[fmt])


def detect_reference_format(raw: str | None) -> ReferenceFormat | None:
    """First format under which raw validates; several numeric schemes overlap."""
    if is_blank(raw):
        return None
    if normalize(raw).startswith(RF_PREFIX):
        return ReferenceFormat.ISO_RF if validate_rf(raw) else None
    for fmt in _DETECTION_ORDER:
        if _validate_local(raw, _LOCAL_SCHEMES[fmt]):
            return fmt
    return None


def parse_reference(raw: str | None, fmt: ReferenceFormat | None = None) -> PaymentReferenceDetails | None:
    """Parse under fmt, or under the detected format when fmt is None."""
    fmt = fmt or detect_reference_format(raw)
    if fmt is None or not validate_reference(raw, fmt):
        return None
    if fmt is ReferenceFormat.ISO_RF:
        return parse_rf(raw)
    digits = digits_only(raw)
    scheme = _LOCAL_SCHEMES[fmt]
    reference = format_ogm(digits) if fmt is ReferenceFormat.BELGIUM_OGM else digits
    return PaymentReferenceDetails(
        reference=reference,
        content=digits[:-scheme.check_length],
        format=fmt,
    )
