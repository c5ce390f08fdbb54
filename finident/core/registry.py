"""Country-keyed rule registries with an explicit fallback policy.

Every country-routed family (IBAN templates, VAT, national IDs, enterprise
numbers) owns one CountryRegistry. The registry is the only place that
decides what happens for an unregistered country:

  GENERIC -- return the family's generic rule (IBAN: mod-97 only)
  REJECT  -- return None; the caller reports UNSUPPORTED_COUNTRY
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import final

from finident.core.result import Err, Ok
from finident.core.types import FrozenMap

log = logging.getLogger(__name__)


class FallbackPolicy(Enum):
    GENERIC = "Generic"
    REJECT = "Reject"


def _is_routing_key(key: str) -> bool:
    return 2 <= len(key) <= 3 and key.isascii() and key.isalpha() and key.isupper()


@final
@dataclass(frozen=True, slots=True)
class CountryRegistry[R]:
    """Immutable routing table: country code -> rule."""

    name: str
    rules: FrozenMap[str, R]
    fallback_policy: FallbackPolicy
    fallback: R | None = None
    aliases: FrozenMap[str, str] = field(default_factory=lambda: FrozenMap.EMPTY)

    @staticmethod
    def build(
        name: str,
        rules: Mapping[str, R],
        fallback_policy: FallbackPolicy,
        fallback: R | None = None,
        aliases: Mapping[str, str] | None = None,
    ) -> Ok[CountryRegistry[R]] | Err[str]:
        """Validate the configuration and freeze it.

        Rejects: GENERIC without a fallback rule, REJECT with one, keys that
        are not 2-3 upper-case letters, and aliases pointing at nothing.
        """
        if fallback_policy is FallbackPolicy.GENERIC and fallback is None:
            return Err(f"{name}: GENERIC fallback policy requires a fallback rule")
        if fallback_policy is FallbackPolicy.REJECT and fallback is not None:
            return Err(f"{name}: REJECT fallback policy must not carry a fallback rule")
        bad = [k for k in rules if not _is_routing_key(k)]
        if bad:
            return Err(f"{name}: invalid routing keys {sorted(bad)}")
        alias_map = dict(aliases or {})
        dangling = [a for a, target in alias_map.items() if target not in rules]
        if dangling:
            return Err(f"{name}: aliases {sorted(dangling)} point at unregistered countries")
        match FrozenMap.create(rules):
            case Err(e):
                return Err(f"{name}: {e}")
            case Ok(frozen):
                registry = CountryRegistry(
                    name=name,
                    rules=frozen,
                    fallback_policy=fallback_policy,
                    fallback=fallback,
                    aliases=FrozenMap.of(alias_map),
                )
        log.debug(
            "Built %s registry: %d countries, %d aliases, fallback=%s",
            name, len(frozen), len(alias_map), fallback_policy.value,
        )
        return Ok(registry)

    @staticmethod
    def of(
        name: str,
        rules: Mapping[str, R],
        fallback_policy: FallbackPolicy,
        fallback: R | None = None,
        aliases: Mapping[str, str] | None = None,
    ) -> CountryRegistry[R]:
        """Module-level construction: a bad static table is a programming error."""
        match CountryRegistry.build(name, rules, fallback_policy, fallback, aliases):
            case Ok(registry):
                return registry
            case Err(e):
                raise ValueError(e)
        raise AssertionError("unreachable")

    def canonical(self, key: str | None) -> str:
        """Upper-case the key and follow a single alias hop (EL -> GR)."""
        k = (key or "").strip().upper()
        return self.aliases.get(k, k) or k

    def lookup(self, key: str | None) -> R | None:
        """The registered rule only; never the fallback."""
        return self.rules.get(self.canonical(key))

    def resolve(self, key: str | None) -> R | None:
        rule = self.lookup(key)
        if rule is not None:
            return rule
        if self.fallback_policy is FallbackPolicy.GENERIC:
            log.debug("%s: no rule for %r, using generic fallback", self.name, key)
            return self.fallback
        return None

    def supports(self, key: str | None) -> bool:
        return self.canonical(key) in self.rules

    def countries(self) -> tuple[str, ...]:
        return self.rules.keys()
