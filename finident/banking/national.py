"""National BBAN check-digit rules layered on top of the IBAN mod-97 check.

Each function takes a BBAN that already matched its country's SWIFT
format and returns True when the domestic check digits agree.
"""

from __future__ import annotations

from finident.core.checksum import (
    luhn_verify,
    mod97,
    mod97_10_verify,
    weighted_sum,
)

# ---------------------------------------------------------------------------
# Belgium: last two digits = first ten mod 97 (0 -> 97)
# ---------------------------------------------------------------------------


def belgium_bban(bban: str) -> bool:
    r = mod97(bban[:10])
    return (r or 97) == int(bban[10:12])


# ---------------------------------------------------------------------------
# France / Monaco: RIB key
# ---------------------------------------------------------------------------

# Letters in a RIB account number stand for digits: A-I -> 1-9, J-R -> 1-9,
# S-Z -> 2-9.
_RIB_LETTERS = {
    **{c: str(i + 1) for i, c in enumerate("ABCDEFGHI")},
    **{c: str(i + 1) for i, c in enumerate("JKLMNOPQR")},
    **{c: str(i + 2) for i, c in enumerate("STUVWXYZ")},
}


def rib_digits(s: str) -> str:
    return "".join(_RIB_LETTERS.get(c, c) for c in s)


def rib_key(bank: str, branch: str, account: str) -> int:
    b, g, a = int(rib_digits(bank)), int(rib_digits(branch)), int(rib_digits(account))
    return 97 - (89 * b + 15 * g + 3 * a) % 97


def france_bban(bban: str) -> bool:
    return rib_key(bban[:5], bban[5:10], bban[10:21]) == int(bban[21:23])


# ---------------------------------------------------------------------------
# Spain: two control digits (DC), weighted mod 11
# ---------------------------------------------------------------------------

_SPAIN_WEIGHTS = (1, 2, 4, 8, 5, 10, 9, 7, 3, 6)


def _spain_dc(ten_digits: str) -> int:
    r = 11 - weighted_sum(ten_digits, _SPAIN_WEIGHTS) % 11
    if r == 11:
        return 0
    if r == 10:
        return 1
    return r


def spain_bban(bban: str) -> bool:
    bank_branch, dc, account = bban[:8], bban[8:10], bban[10:20]
    expected = f"{_spain_dc('00' + bank_branch)}{_spain_dc(account)}"
    return dc == expected


# ---------------------------------------------------------------------------
# Italy / San Marino: CIN letter
# ---------------------------------------------------------------------------

_CIN_ODD = (1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18, 20, 11, 3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23)


def _cin_value(c: str) -> int:
    return ord(c) - 48 if c.isdigit() else ord(c) - 65


def cin(chars: str) -> str:
    """CIN over bank (5) + branch (5) + account (12)."""
    total = 0
    for i, c in enumerate(chars):
        v = _cin_value(c)
        total += _CIN_ODD[v] if i % 2 == 0 else v
    return chr(65 + total % 26)


def italy_bban(bban: str) -> bool:
    return cin(bban[1:23]) == bban[0]


# ---------------------------------------------------------------------------
# Nordics and Portugal
# ---------------------------------------------------------------------------

_NORWAY_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)


def norway_bban(bban: str) -> bool:
    r = weighted_sum(bban[:10], _NORWAY_WEIGHTS) % 11
    if r == 1:
        return False
    check = 0 if r == 0 else 11 - r
    return check == int(bban[10])


def finland_bban(bban: str) -> bool:
    return luhn_verify(bban)


def portugal_bban(bban: str) -> bool:
    """NIB: the 21 digits satisfy ISO 7064 MOD 97-10."""
    return mod97_10_verify(bban)
