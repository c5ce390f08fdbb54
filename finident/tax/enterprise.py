"""Company registry numbers (structure and check digits only, no registry lookups)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.registry import CountryRegistry, FallbackPolicy
from finident.core.validation import ValidationResult
from finident.tax import checks
from finident.tax._rules import NumberRule, validate_routed

# Countries whose single rule covers several number kinds, told apart by length.
_KINDS: dict[str, dict[int, str]] = {"FR": {9: "SIREN", 14: "SIRET"}}


@final
@dataclass(frozen=True, slots=True)
class EnterpriseDetails:
    country_code: str
    number: str
    kind: str
    is_valid: bool = True


def _france(number: str) -> bool:
    return checks.france_siren(number) if len(number) == 9 else checks.france_siret(number)


ENTERPRISE_RULES: CountryRegistry[NumberRule] = CountryRegistry.of(
    "enterprise number",
    {
        r.country_code: r
        for r in (
            NumberRule(
                "BE", "enterprise number", (10,), re.compile(r"[01][0-9]{9}"), checks.belgium_kbo,
                prefixes=("BE",), pad_to=10,
            ),
            NumberRule("DK", "CVR number", (8,), re.compile(r"[1-9][0-9]{7}"), checks.denmark_cvr),
            NumberRule("FI", "Y-tunnus", (8,), re.compile(r"[0-9]{8}"), checks.finland_y_tunnus),
            NumberRule("FR", "SIREN/SIRET", (9, 14), re.compile(r"[0-9]{9}|[0-9]{14}"), _france),
            NumberRule("NL", "KvK number", (8,), re.compile(r"(?!0{8})[0-9]{8}"), None),
            NumberRule("NO", "organisasjonsnummer", (9,), re.compile(r"[0-9]{9}"), checks.norway_orgnr),
            NumberRule("SE", "organisationsnummer", (10,), re.compile(r"[0-9]{10}"), checks.sweden_orgnr),
        )
    },
    FallbackPolicy.REJECT,
)


def validate_enterprise_number(raw: str | None, country_code: str | None) -> ValidationResult:
    return validate_routed(ENTERPRISE_RULES, raw, country_code)


def parse_enterprise_number(raw: str | None, country_code: str | None) -> EnterpriseDetails | None:
    if not validate_enterprise_number(raw, country_code):
        return None
    rule = ENTERPRISE_RULES.resolve(country_code)
    if rule is None:
        return None
    number = rule.bare(raw)
    kind = _KINDS.get(rule.country_code, {}).get(len(number), rule.name)
    return EnterpriseDetails(country_code=rule.country_code, number=number, kind=kind)


def enterprise_countries() -> tuple[str, ...]:
    return ENTERPRISE_RULES.countries()
