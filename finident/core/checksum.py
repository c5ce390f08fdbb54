"""Checksum engine: the check-digit algorithms shared across identifier families.

Families:
  - MOD 97-10 (ISO 7064)    IBAN, LEI, ISO 11649 RF references
  - Luhn double-add-double  ISIN (over the letter expansion), cards, SIREN
  - Weighted modulus 10     SEDOL (1,3,1,7,3,9,1), CUSIP (double odd index)
  - Mod-11 / mod-10 variants used by the national tables

All functions expect input that has already passed the structural checks
for its family. Arithmetic is streaming modular reduction on Python ints,
so no intermediate value grows with the input length.
"""

from __future__ import annotations

from collections.abc import Sequence

from finident.core.expansion import char_value, cusip_value, expand, sedol_value

SEDOL_WEIGHTS: tuple[int, ...] = (1, 3, 1, 7, 3, 9, 1)

_MOD10_RECURSIVE_TABLE: tuple[int, ...] = (0, 9, 4, 6, 8, 2, 7, 1, 3, 5)


def _is_digits(s: str) -> bool:
    return bool(s) and all("0" <= c <= "9" for c in s)


# ---------------------------------------------------------------------------
# MOD 97-10
# ---------------------------------------------------------------------------


def mod97(digits: str) -> int:
    """Remainder of a decimal digit string modulo 97, or -1 if not all digits."""
    if not _is_digits(digits):
        return -1
    acc = 0
    for c in digits:
        acc = (acc * 10 + (ord(c) - 48)) % 97
    return acc


def mod97_alnum(s: str) -> int:
    """Remainder modulo 97 of the letter expansion of s (A=10..Z=35).

    Letters contribute two decimal digits, so the accumulator is scaled by
    100 for them. Returns -1 on a non-alphanumeric character.
    """
    if not s:
        return -1
    acc = 0
    for c in s:
        v = char_value(c)
        if v < 0:
            return -1
        acc = (acc * (100 if v >= 10 else 10) + v) % 97
    return acc


def mod97_10_verify(s: str) -> bool:
    """ISO 7064 MOD 97-10: the expansion of s is congruent to 1 mod 97."""
    return mod97_alnum(s) == 1


def mod97_10_check_digits(payload: str) -> str:
    """Two check digits that make payload + digits pass MOD 97-10.

    The payload must already be in verification order (e.g. BBAN + country
    for IBAN, content + 'RF' for ISO 11649, the 18-char base for LEI).
    """
    r = mod97_alnum(payload + "00")
    if r < 0:
        raise ValueError(f"Cannot compute MOD 97-10 check digits for {payload!r}")
    return f"{98 - r:02d}"


# ---------------------------------------------------------------------------
# Luhn (double-add-double)
# ---------------------------------------------------------------------------


def _luhn_sum(digits: str, double_rightmost: bool) -> int:
    total = 0
    double = double_rightmost
    for c in reversed(digits):
        d = ord(c) - 48
        if double:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        double = not double
    return total


def luhn_verify(digits: str) -> bool:
    """Rightmost digit is position 0 (not doubled); odd positions are doubled."""
    if not _is_digits(digits):
        return False
    return _luhn_sum(digits, double_rightmost=False) % 10 == 0


def luhn_check_digit(digits: str) -> int:
    """Digit to append so that digits + check passes luhn_verify."""
    if not _is_digits(digits):
        raise ValueError(f"Luhn input must be digits, got {digits!r}")
    return (10 - _luhn_sum(digits, double_rightmost=True) % 10) % 10


def isin_verify(isin: str) -> bool:
    """Luhn over the letter expansion of a 12-char ISIN."""
    return luhn_verify(expand(isin))


def isin_check_digit(base: str) -> int:
    return luhn_check_digit(expand(base))


# ---------------------------------------------------------------------------
# Weighted modulus 10: SEDOL and CUSIP
# ---------------------------------------------------------------------------


def _sedol_sum(chars: str) -> int:
    total = 0
    for c, w in zip(chars, SEDOL_WEIGHTS, strict=False):
        v = sedol_value(c)
        if v < 0:
            return -1
        total += v * w
    return total


def sedol_verify(sedol: str) -> bool:
    if len(sedol) != 7:
        return False
    total = _sedol_sum(sedol)
    return total >= 0 and total % 10 == 0


def sedol_check_digit(base: str) -> int:
    total = _sedol_sum(base[:6])
    if len(base) != 6 or total < 0:
        raise ValueError(f"Invalid SEDOL base {base!r}")
    return (10 - total % 10) % 10


def _cusip_sum(base: str) -> int:
    total = 0
    for i, c in enumerate(base):
        v = cusip_value(c)
        if v < 0:
            return -1
        if i % 2 == 1:
            v *= 2
        total += v // 10 + v % 10
    return total


def cusip_check_digit(base: str) -> int:
    total = _cusip_sum(base)
    if len(base) != 8 or total < 0:
        raise ValueError(f"Invalid CUSIP base {base!r}")
    return (10 - total % 10) % 10


def cusip_verify(cusip: str) -> bool:
    if len(cusip) != 9 or not cusip[8].isdigit():
        return False
    total = _cusip_sum(cusip[:8])
    return total >= 0 and (10 - total % 10) % 10 == int(cusip[8])


# ---------------------------------------------------------------------------
# Schemes used by national tables
# ---------------------------------------------------------------------------


def weighted_sum(digits: str, weights: Sequence[int]) -> int:
    """Sum of digit * weight, left-aligned. -1 on length mismatch or non-digits."""
    if len(digits) != len(weights) or not _is_digits(digits):
        return -1
    return sum((ord(c) - 48) * w for c, w in zip(digits, weights, strict=True))


def iso7064_mod11_10_verify(digits: str) -> bool:
    """ISO 7064 MOD 11,10 (hybrid system), e.g. Croatian OIB."""
    if len(digits) < 2 or not _is_digits(digits):
        return False
    product = 10
    for c in digits[:-1]:
        s = (ord(c) - 48 + product) % 10
        if s == 0:
            s = 10
        product = (2 * s) % 11
    check = (11 - product) % 10
    return check == ord(digits[-1]) - 48


def mod10_recursive_check_digit(digits: str) -> int:
    """Swiss QR-reference / ESR check digit (recursive mod 10)."""
    carry = 0
    for c in digits:
        carry = _MOD10_RECURSIVE_TABLE[(carry + ord(c) - 48) % 10]
    return (10 - carry) % 10


def weights_731_check_digit(digits: str) -> int:
    """Finnish reference check digit: weights 7,3,1 repeating from the right."""
    weights = (7, 3, 1)
    total = sum((ord(c) - 48) * weights[i % 3] for i, c in enumerate(reversed(digits)))
    return (10 - total % 10) % 10


def mod11_weights_2_to_7_check_digit(digits: str) -> int:
    """Right-to-left weights 2..7 repeating; -1 when the remainder forbids a digit."""
    total = 0
    weight = 2
    for c in reversed(digits):
        total += (ord(c) - 48) * weight
        weight = 2 if weight == 7 else weight + 1
    r = total % 11
    if r == 0:
        return 0
    if r == 1:
        return -1
    return 11 - r
