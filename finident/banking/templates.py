"""IBAN country templates: expected length, BBAN layout, national check.

BBAN formats are written in SWIFT IBAN-registry notation and compiled to
regular expressions once at import:

    n  digits 0-9         a  upper-case letters      c  upper-case alphanumerics
    e  blank space        3!n  exactly 3 digits      11c  up to 11 alphanumerics

Segment offsets (bank / branch / account) are relative to the BBAN.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from finident.banking.national import (
    belgium_bban,
    finland_bban,
    france_bban,
    italy_bban,
    norway_bban,
    portugal_bban,
    spain_bban,
)
from finident.core.registry import CountryRegistry, FallbackPolicy
from finident.core.result import Err, Ok, collect

_TOKEN = re.compile(r"(\d+)(!?)([nace])")
_CLASSES = {"n": "[0-9]", "a": "[A-Z]", "c": "[A-Z0-9]", "e": " "}


@final
@dataclass(frozen=True, slots=True)
class Span:
    """Half-open [start, end) slice of a BBAN."""

    start: int
    end: int

    def take(self, s: str) -> str:
        return s[self.start:self.end]


@final
@dataclass(frozen=True, slots=True)
class BbanFormat:
    """A compiled SWIFT format string."""

    notation: str
    pattern: re.Pattern[str]
    length: int          # maximum length; equals the exact length when fixed
    fixed: bool

    @staticmethod
    def compile(notation: str) -> Ok[BbanFormat] | Err[str]:
        pos = 0
        parts: list[str] = []
        length = 0
        fixed = True
        for m in _TOKEN.finditer(notation):
            if m.start() != pos:
                return Err(f"Unparseable BBAN format at {notation[pos:]!r}")
            n, exact, kind = int(m.group(1)), m.group(2) == "!", m.group(3)
            if n == 0:
                return Err(f"Zero-width segment in BBAN format {notation!r}")
            parts.append(f"{_CLASSES[kind]}{{{n}}}" if exact else f"{_CLASSES[kind]}{{1,{n}}}")
            length += n
            fixed = fixed and exact
            pos = m.end()
        if pos != len(notation) or not parts:
            return Err(f"Unparseable BBAN format {notation!r}")
        return Ok(BbanFormat(
            notation=notation,
            pattern=re.compile("".join(parts)),
            length=length,
            fixed=fixed,
        ))

    def matches(self, bban: str) -> bool:
        return self.pattern.fullmatch(bban) is not None


@final
@dataclass(frozen=True, slots=True)
class CountryTemplate:
    """Per-country IBAN rule. The generic template has no BBAN layout."""

    country_code: str
    length: int
    bban_format: BbanFormat | None = None
    bank: Span | None = None
    branch: Span | None = None
    account: Span | None = None
    national_check: Callable[[str], bool] | None = None

    @property
    def is_generic(self) -> bool:
        return self.bban_format is None

    @property
    def bban_length(self) -> int:
        return self.length - 4


GENERIC_TEMPLATE = CountryTemplate(country_code="", length=0)


# ---------------------------------------------------------------------------
# SWIFT IBAN registry data
# ---------------------------------------------------------------------------

type _Seg = tuple[int, int] | None

# country: (bban format, bank, branch, account, national check)
_IBAN_TABLE: dict[str, tuple[str, _Seg, _Seg, _Seg, Callable[[str], bool] | None]] = {
    "AD": ("4!n4!n12!c", (0, 4), (4, 8), (8, 20), None),
    "AE": ("3!n16!n", (0, 3), None, (3, 19), None),
    "AL": ("8!n16!c", (0, 3), (3, 7), (8, 24), None),
    "AT": ("5!n11!n", (0, 5), None, (5, 16), None),
    "AZ": ("4!a20!c", (0, 4), None, (4, 24), None),
    "BA": ("3!n3!n8!n2!n", (0, 3), (3, 6), (6, 14), None),
    "BE": ("3!n7!n2!n", (0, 3), None, (3, 12), belgium_bban),
    "BG": ("4!a4!n2!n8!c", (0, 4), (4, 8), (8, 18), None),
    "BH": ("4!a14!c", (0, 4), None, (4, 18), None),
    "BR": ("8!n5!n10!n1!a1!c", (0, 8), (8, 13), (13, 23), None),
    "CH": ("5!n12!c", (0, 5), None, (5, 17), None),
    "CR": ("4!n14!n", (0, 4), None, (4, 18), None),
    "CY": ("3!n5!n16!c", (0, 3), (3, 8), (8, 24), None),
    "CZ": ("4!n6!n10!n", (0, 4), None, (4, 20), None),
    "DE": ("8!n10!n", (0, 8), None, (8, 18), None),
    "DK": ("4!n9!n1!n", (0, 4), None, (4, 14), None),
    "DO": ("4!c20!n", (0, 4), None, (4, 24), None),
    "EE": ("2!n2!n11!n1!n", (0, 2), None, (2, 16), None),
    "EG": ("4!n4!n17!n", (0, 4), (4, 8), (8, 25), None),
    "ES": ("4!n4!n1!n1!n10!n", (0, 4), (4, 8), (10, 20), spain_bban),
    "FI": ("3!n11!n", (0, 3), None, (3, 14), finland_bban),
    "FO": ("4!n9!n1!n", (0, 4), None, (4, 14), None),
    "FR": ("5!n5!n11!c2!n", (0, 5), (5, 10), (10, 21), france_bban),
    "GB": ("4!a6!n8!n", (0, 4), (4, 10), (10, 18), None),
    "GE": ("2!a16!n", (0, 2), None, (2, 18), None),
    "GI": ("4!a15!c", (0, 4), None, (4, 19), None),
    "GL": ("4!n9!n1!n", (0, 4), None, (4, 14), None),
    "GR": ("3!n4!n16!c", (0, 3), (3, 7), (7, 23), None),
    "GT": ("4!c20!c", (0, 4), None, (4, 24), None),
    "HR": ("7!n10!n", (0, 7), None, (7, 17), None),
    "HU": ("3!n4!n1!n15!n1!n", (0, 3), (3, 7), (8, 23), None),
    "IE": ("4!a6!n8!n", (0, 4), (4, 10), (10, 18), None),
    "IL": ("3!n3!n13!n", (0, 3), (3, 6), (6, 19), None),
    "IQ": ("4!a3!n12!n", (0, 4), (4, 7), (7, 19), None),
    "IS": ("4!n2!n6!n10!n", (0, 4), None, (6, 12), None),
    "IT": ("1!a5!n5!n12!c", (1, 6), (6, 11), (11, 23), italy_bban),
    "JO": ("4!a4!n18!c", (0, 4), (4, 8), (8, 26), None),
    "KW": ("4!a22!c", (0, 4), None, (4, 26), None),
    "KZ": ("3!n13!c", (0, 3), None, (3, 16), None),
    "LB": ("4!n20!c", (0, 4), None, (4, 24), None),
    "LC": ("4!a24!c", (0, 4), None, (4, 28), None),
    "LI": ("5!n12!c", (0, 5), None, (5, 17), None),
    "LT": ("5!n11!n", (0, 5), None, (5, 16), None),
    "LU": ("3!n13!c", (0, 3), None, (3, 16), None),
    "LV": ("4!a13!c", (0, 4), None, (4, 17), None),
    "MC": ("5!n5!n11!c2!n", (0, 5), (5, 10), (10, 21), france_bban),
    "MD": ("2!c18!c", (0, 2), None, (2, 20), None),
    "ME": ("3!n13!n2!n", (0, 3), None, (3, 16), None),
    "MK": ("3!n10!c2!n", (0, 3), None, (3, 13), None),
    "MR": ("5!n5!n11!n2!n", (0, 5), (5, 10), (10, 21), None),
    "MT": ("4!a5!n18!c", (0, 4), (4, 9), (9, 27), None),
    "MU": ("4!a2!n2!n12!n3!n3!a", (0, 6), (6, 8), (8, 20), None),
    "NL": ("4!a10!n", (0, 4), None, (4, 14), None),
    "NO": ("4!n6!n1!n", (0, 4), None, (4, 11), norway_bban),
    "PK": ("4!a16!c", (0, 4), None, (4, 20), None),
    "PL": ("8!n16!n", (0, 8), None, (8, 24), None),
    "PS": ("4!a21!c", (0, 4), None, (4, 25), None),
    "PT": ("4!n4!n11!n2!n", (0, 4), (4, 8), (8, 19), portugal_bban),
    "QA": ("4!a21!c", (0, 4), None, (4, 25), None),
    "RO": ("4!a16!c", (0, 4), None, (4, 20), None),
    "RS": ("3!n13!n2!n", (0, 3), None, (3, 16), None),
    "SA": ("2!n18!c", (0, 2), None, (2, 20), None),
    "SC": ("4!a2!n2!n16!n3!a", (0, 6), (6, 8), (8, 24), None),
    "SE": ("3!n16!n1!n", (0, 3), None, (3, 19), None),
    "SI": ("5!n8!n2!n", (0, 5), None, (5, 13), None),
    "SK": ("4!n6!n10!n", (0, 4), None, (4, 20), None),
    "SM": ("1!a5!n5!n12!c", (1, 6), (6, 11), (11, 23), italy_bban),
    "ST": ("4!n4!n11!n2!n", (0, 4), (4, 8), (8, 19), None),
    "SV": ("4!a20!n", (0, 4), None, (4, 24), None),
    "TL": ("3!n14!n2!n", (0, 3), None, (3, 17), None),
    "TN": ("2!n3!n13!n2!n", (0, 2), (2, 5), (5, 18), None),
    "TR": ("5!n1!n16!c", (0, 5), None, (6, 22), None),
    "UA": ("6!n19!c", (0, 6), None, (6, 25), None),
    "VA": ("3!n15!n", (0, 3), None, (3, 18), None),
    "VG": ("4!a16!n", (0, 4), None, (4, 20), None),
    "XK": ("4!n10!n2!n", (0, 4), None, (4, 14), None),
}


def _span(seg: _Seg) -> Span | None:
    return Span(*seg) if seg is not None else None


def _template(country: str, row: tuple[str, _Seg, _Seg, _Seg, Callable[[str], bool] | None]) -> Ok[CountryTemplate] | Err[str]:
    notation, bank, branch, account, check = row
    match BbanFormat.compile(notation):
        case Err(e):
            return Err(f"{country}: {e}")
        case Ok(fmt):
            if not fmt.fixed:
                return Err(f"{country}: IBAN BBAN formats must be fixed-length")
            return Ok(CountryTemplate(
                country_code=country,
                length=fmt.length + 4,
                bban_format=fmt,
                bank=_span(bank),
                branch=_span(branch),
                account=_span(account),
                national_check=check,
            ))
    raise AssertionError("unreachable")


def build_templates(
    table: dict[str, tuple[str, _Seg, _Seg, _Seg, Callable[[str], bool] | None]],
) -> Ok[CountryRegistry[CountryTemplate]] | Err[str]:
    """Compile a country table into the IBAN registry (GENERIC fallback)."""
    return collect(_template(cc, row) for cc, row in table.items()).and_then(
        lambda templates: CountryRegistry.build(
            "IBAN",
            {t.country_code: t for t in templates},
            FallbackPolicy.GENERIC,
            fallback=GENERIC_TEMPLATE,
        )
    )


def _load() -> CountryRegistry[CountryTemplate]:
    match build_templates(_IBAN_TABLE):
        case Ok(registry):
            return registry
        case Err(e):
            raise ValueError(e)
    raise AssertionError("unreachable")


IBAN_TEMPLATES: CountryRegistry[CountryTemplate] = _load()
