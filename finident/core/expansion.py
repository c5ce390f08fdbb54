"""Alphanumeric-to-decimal expansion.

Every function here is a pure function of its input. Values:
  '0'..'9' -> 0..9, 'A'..'Z' -> 10..35 (base-36 digit value).
CUSIP additionally maps '*' -> 36, '@' -> 37, '#' -> 38; SEDOL rejects
vowels. Unmappable characters yield -1 from the *_value helpers.
"""

from __future__ import annotations

_CUSIP_SYMBOLS = {"*": 36, "@": 37, "#": 38}
_VOWELS = frozenset("AEIOU")


def char_value(c: str) -> int:
    """Base-36 value of an upper-case ASCII alphanumeric, else -1."""
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    return -1


def cusip_value(c: str) -> int:
    v = char_value(c)
    if v >= 0:
        return v
    return _CUSIP_SYMBOLS.get(c, -1)


def sedol_value(c: str) -> int:
    if c in _VOWELS:
        return -1
    return char_value(c)


def expand(s: str) -> str:
    """Replace each letter with its two-digit value: 'BE' -> '1114'.

    Raises ValueError on a character outside 0-9/A-Z; callers run the
    structural checks first, so this only fires on programming errors.
    """
    parts: list[str] = []
    for c in s:
        v = char_value(c)
        if v < 0:
            raise ValueError(f"Cannot expand character {c!r}")
        parts.append(str(v))
    return "".join(parts)


def rotate(s: str, n: int = 4) -> str:
    """Move the first n characters to the end (IBAN / RF rearrangement)."""
    return s[n:] + s[:n]
