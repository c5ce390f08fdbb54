"""EU and EFTA VAT identification numbers.

The country comes from the explicit argument or the first two characters
of the input. Greece files VAT under 'EL' and Switzerland under 'CHE';
both are aliases of their ISO codes. Unregistered countries are rejected.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from finident.core.registry import CountryRegistry, FallbackPolicy
from finident.core.validation import ValidationResult
from finident.tax import checks
from finident.tax._rules import NumberRule, sanitize, validate_routed


@final
@dataclass(frozen=True, slots=True)
class VatDetails:
    """vat_number is the prefixed form; number is the bare national part."""

    vat_number: str
    country_code: str
    number: str
    is_valid: bool = True


def _vat(
    cc: str,
    lengths: tuple[int, ...],
    pattern: str,
    checksum: Callable[[str], bool],
    prefixes: tuple[str, ...] | None = None,
    suffixes: tuple[str, ...] = (),
    pad_to: int = 0,
    display_prefix: str = "",
) -> NumberRule:
    return NumberRule(
        country_code=cc,
        name="VAT number",
        lengths=lengths,
        pattern=re.compile(pattern),
        checksum=checksum,
        prefixes=prefixes if prefixes is not None else (cc,),
        suffixes=suffixes,
        pad_to=pad_to,
        display_prefix=display_prefix,
    )


VAT_RULES: CountryRegistry[NumberRule] = CountryRegistry.of(
    "VAT",
    {
        r.country_code: r
        for r in (
            _vat("AT", (9,), r"U[0-9]{8}", checks.austria_uid),
            _vat("BE", (10,), r"[01][0-9]{9}", checks.belgium_kbo, pad_to=10),
            _vat("CH", (9,), r"[0-9]{9}", checks.swiss_uid, ("CHE", "CH"),
                 suffixes=("MWST", "TVA", "IVA"), display_prefix="CHE"),
            _vat("DE", (9,), r"[1-9][0-9]{8}", checks.germany_ust_idnr),
            _vat("DK", (8,), r"[1-9][0-9]{7}", checks.denmark_cvr),
            _vat("ES", (9,), r"[0-9A-Z][0-9]{7}[0-9A-Z]", checks.spain_nif),
            _vat("FI", (8,), r"[0-9]{8}", checks.finland_alv),
            _vat("FR", (11,), r"[0-9]{11}", checks.france_tva),
            _vat("GB", (5, 9, 12), r"[0-9]{9}|[0-9]{12}|GD[0-9]{3}|HA[0-9]{3}", checks.united_kingdom_vat),
            _vat("GR", (9,), r"[0-9]{9}", checks.greece_afm, ("EL", "GR"), display_prefix="EL"),
            _vat("HR", (11,), r"[0-9]{11}", checks.croatia_oib),
            _vat("IT", (11,), r"[0-9]{11}", checks.italy_partita_iva),
            _vat("LU", (8,), r"[0-9]{8}", checks.luxembourg_tva),
            _vat("NL", (12,), r"[0-9]{9}B[0-9]{2}", checks.netherlands_btw),
            _vat("NO", (9,), r"[0-9]{9}", checks.norway_orgnr, suffixes=("MVA",)),
            _vat("PL", (10,), r"[0-9]{10}", checks.poland_nip),
            _vat("PT", (9,), r"[0-9]{9}", checks.portugal_nif),
            _vat("SE", (12,), r"[0-9]{10}01", checks.sweden_momsnr),
            _vat("SI", (8,), r"[1-9][0-9]{7}", checks.slovenia_ddv),
        )
    },
    FallbackPolicy.REJECT,
    aliases={"EL": "GR", "CHE": "CH"},
)


def _country_of(raw: str | None, country_code: str | None) -> str:
    return country_code if country_code is not None else sanitize(raw)[:2]


def validate_vat(raw: str | None, country_code: str | None = None) -> ValidationResult:
    """Validate a VAT number; the country prefix is optional when country_code is given."""
    return validate_routed(VAT_RULES, raw, _country_of(raw, country_code))


def parse_vat(raw: str | None, country_code: str | None = None) -> VatDetails | None:
    if not validate_vat(raw, country_code):
        return None
    rule = VAT_RULES.resolve(_country_of(raw, country_code))
    if rule is None:
        return None
    number = rule.bare(raw)
    return VatDetails(
        vat_number=(rule.display_prefix or rule.country_code) + number,
        country_code=rule.country_code,
        number=number,
    )


def vat_countries() -> tuple[str, ...]:
    return VAT_RULES.countries()
