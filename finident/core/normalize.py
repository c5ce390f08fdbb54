"""Input normalization applied before any structural check.

normalize() is total (never raises) and idempotent:
normalize(normalize(x)) == normalize(x).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SEPARATORS = re.compile(r"[\s\-./]+")
_NON_DIGITS = re.compile(r"[^0-9]")
_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def normalize(raw: str | None) -> str:
    """Strip whitespace and the separators - . / and upper-case.

    Upper-casing uses str.upper(), which is locale-independent.
    """
    if not raw:
        return ""
    return _SEPARATORS.sub("", raw).upper()


def alphanumeric_only(raw: str | None) -> str:
    """Upper-case and drop everything that is not A-Z or 0-9."""
    if not raw:
        return ""
    return _NON_ALNUM.sub("", raw.upper())


def digits_only(raw: str | None) -> str:
    """Keep ASCII digits only (e.g. '+++090/9337/55493+++' -> '090933755493')."""
    if not raw:
        return ""
    return _NON_DIGITS.sub("", raw)


def is_blank(raw: str | None) -> bool:
    """True when nothing survives normalize(): None, whitespace or separators only."""
    return not normalize(raw)


def strip_country_prefix(value: str, prefixes: Iterable[str]) -> str:
    """Remove the first matching leading prefix, longest first."""
    for prefix in sorted(prefixes, key=len, reverse=True):
        if prefix and value.startswith(prefix):
            return value[len(prefix):]
    return value
