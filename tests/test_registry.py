"""Tests for finident.core.registry — country routing and fallback policy."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from finident.core.registry import CountryRegistry, FallbackPolicy
from finident.core.result import Err, Ok, unwrap


def _generic() -> CountryRegistry[str]:
    return CountryRegistry.of(
        "IBAN-like", {"BE": "belgium", "FR": "france"}, FallbackPolicy.GENERIC, fallback="generic",
    )


def _reject() -> CountryRegistry[str]:
    return CountryRegistry.of(
        "VAT-like", {"GR": "greece", "CH": "switzerland"}, FallbackPolicy.REJECT,
        aliases={"EL": "GR", "CHE": "CH"},
    )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestBuild:
    def test_generic_requires_fallback(self) -> None:
        result = CountryRegistry.build("X", {"BE": 1}, FallbackPolicy.GENERIC)
        assert isinstance(result, Err)
        assert "fallback" in result.error

    def test_reject_forbids_fallback(self) -> None:
        assert isinstance(CountryRegistry.build("X", {"BE": 1}, FallbackPolicy.REJECT, fallback=0), Err)

    def test_routing_keys_must_be_upper_letters(self) -> None:
        for bad in ("be", "B", "BELG", "B1"):
            assert isinstance(CountryRegistry.build("X", {bad: 1}, FallbackPolicy.REJECT), Err)

    def test_dangling_alias(self) -> None:
        result = CountryRegistry.build("X", {"GR": 1}, FallbackPolicy.REJECT, aliases={"EL": "GB"})
        assert isinstance(result, Err)

    def test_valid_configuration(self) -> None:
        result = CountryRegistry.build("X", {"BE": 1}, FallbackPolicy.REJECT)
        assert isinstance(result, Ok)
        assert unwrap(result).countries() == ("BE",)

    def test_of_raises_on_bad_configuration(self) -> None:
        with pytest.raises(ValueError):
            CountryRegistry.of("X", {"BE": 1}, FallbackPolicy.GENERIC)

    def test_build_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="finident.core.registry"):
            CountryRegistry.build("Probe", {"BE": 1, "FR": 2}, FallbackPolicy.REJECT)
        assert any("Probe" in r.getMessage() and "2 countries" in r.getMessage() for r in caplog.records)

    def test_is_frozen(self) -> None:
        reg = _reject()
        with pytest.raises(dataclasses.FrozenInstanceError):
            reg.name = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TestResolve:
    def test_registered_key(self) -> None:
        assert _generic().resolve("BE") == "belgium"

    def test_key_is_case_insensitive(self) -> None:
        assert _generic().resolve(" fr ") == "france"

    def test_generic_fallback(self) -> None:
        reg = _generic()
        assert reg.resolve("DE") == "generic"
        assert reg.lookup("DE") is None
        assert not reg.supports("DE")

    def test_reject_returns_none(self) -> None:
        assert _reject().resolve("DE") is None
        assert _reject().resolve(None) is None

    def test_aliases(self) -> None:
        reg = _reject()
        assert reg.resolve("EL") == "greece"
        assert reg.resolve("che") == "switzerland"
        assert reg.canonical("EL") == "GR"
        assert reg.supports("EL")

    def test_countries_exclude_aliases(self) -> None:
        assert _reject().countries() == ("CH", "GR")
