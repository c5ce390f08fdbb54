"""Personal identification numbers. The country is always explicit."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.registry import CountryRegistry, FallbackPolicy
from finident.core.validation import ValidationResult
from finident.tax import checks
from finident.tax._rules import NumberRule, validate_routed


@final
@dataclass(frozen=True, slots=True)
class NationalIdDetails:
    country_code: str
    number: str
    kind: str
    is_valid: bool = True


NATIONAL_ID_RULES: CountryRegistry[NumberRule] = CountryRegistry.of(
    "national ID",
    {
        r.country_code: r
        for r in (
            NumberRule(
                "BE", "national register number", (11,), re.compile(r"[0-9]{11}"), checks.belgium_rrn,
                structure=checks.belgium_rrn_date,
            ),
            NumberRule(
                "DK", "CPR number", (10,), re.compile(r"[0-9]{10}"), None,
                structure=checks.denmark_cpr_date,
            ),
            NumberRule("EE", "isikukood", (11,), re.compile(r"[1-8][0-9]{10}"), checks.estonia_isikukood),
            NumberRule("ES", "DNI/NIE", (9,), re.compile(r"[0-9KLMXYZ][0-9]{7}[A-Z]"), checks.spain_dni),
            NumberRule(
                "FI", "henkilötunnus", (11,), re.compile(r"[0-9]{6}[-+A-FU-Y][0-9]{3}[0-9A-Y]"),
                checks.finland_hetu, keep="-", structure=checks.finland_hetu_date,
            ),
            NumberRule("NL", "BSN", (9,), re.compile(r"[0-9]{9}"), checks.netherlands_bsn, pad_to=9),
            NumberRule("NO", "fødselsnummer", (11,), re.compile(r"[0-9]{11}"), checks.norway_fodselsnummer),
            NumberRule(
                "PL", "PESEL", (11,), re.compile(r"[0-9]{11}"), checks.poland_pesel,
                structure=checks.poland_pesel_date,
            ),
            NumberRule(
                "SE", "personnummer", (10, 11, 12), re.compile(r"[0-9]{6}\+?[0-9]{4}|[0-9]{12}"),
                checks.sweden_personnummer, structure=checks.sweden_personnummer_date,
            ),
        )
    },
    FallbackPolicy.REJECT,
)


def validate_national_id(raw: str | None, country_code: str | None) -> ValidationResult:
    return validate_routed(NATIONAL_ID_RULES, raw, country_code)


def parse_national_id(raw: str | None, country_code: str | None) -> NationalIdDetails | None:
    if not validate_national_id(raw, country_code):
        return None
    rule = NATIONAL_ID_RULES.resolve(country_code)
    if rule is None:
        return None
    return NationalIdDetails(country_code=rule.country_code, number=rule.bare(raw), kind=rule.name)


def national_id_countries() -> tuple[str, ...]:
    return NATIONAL_ID_RULES.countries()
