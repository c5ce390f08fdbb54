"""Tests for finident.dispatch and finident.infra.batch."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from conftest import raw_inputs
from finident.core.errors import ErrorCode, GenerationError
from finident.core.result import Err, Ok
from finident.core.validation import ValidationResult
from finident.dispatch import (
    IdentifierKind,
    generatable_kinds,
    generate,
    handle,
    parse,
    supported_kinds,
    validate,
)
from finident.infra.batch import invalid_items, validate_batch
from finident.securities.isin import IsinDetails

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------


class TestDispatch:
    @pytest.mark.parametrize(
        ("kind", "raw", "country"),
        [
            (IdentifierKind.IBAN, "DE89370400440532013000", None),
            (IdentifierKind.BIC, "DEUTDEFF", None),
            (IdentifierKind.ISIN, "US0378331005", None),
            (IdentifierKind.CUSIP, "037833100", None),
            (IdentifierKind.SEDOL, "0263494", None),
            (IdentifierKind.LEI, "5493001KJTIIGC8Y1R12", None),
            (IdentifierKind.VAT, "DE136695976", None),
            (IdentifierKind.NATIONAL_ID, "111222333", "NL"),
            (IdentifierKind.ENTERPRISE, "303265045", "FR"),
            (IdentifierKind.PAYMENT_CARD, "4111111111111111", None),
            (IdentifierKind.PAYMENT_REFERENCE, "RF18539007547034", None),
            (IdentifierKind.CURRENCY, "EUR", None),
        ],
    )
    def test_every_kind_validates(self, kind: IdentifierKind, raw: str, country: str | None) -> None:
        assert validate(kind, raw, country).is_valid
        assert parse(kind, raw, country) is not None

    def test_every_kind_has_a_handle(self) -> None:
        assert len(supported_kinds()) == 12
        for kind in supported_kinds():
            assert handle(kind).kind is kind

    def test_country_ignored_for_global_identifiers(self) -> None:
        assert validate(IdentifierKind.ISIN, "US0378331005", "FR").is_valid

    def test_national_id_needs_country(self) -> None:
        assert validate(IdentifierKind.NATIONAL_ID, "111222333").error_codes == (
            ErrorCode.UNSUPPORTED_COUNTRY,
        )

    def test_reference_country_selects_domestic_scheme(self) -> None:
        assert validate(IdentifierKind.PAYMENT_REFERENCE, "090933755493", "BE").is_valid
        assert not validate(IdentifierKind.PAYMENT_REFERENCE, "090933755493").is_valid
        assert validate(IdentifierKind.PAYMENT_REFERENCE, "RF18539007547034", "DE").is_valid

    def test_parse_returns_family_details(self) -> None:
        d = parse(IdentifierKind.ISIN, "US0378331005")
        assert isinstance(d, IsinDetails)
        assert d.country_code == "US"

    def test_parse_invalid_is_none(self) -> None:
        assert parse(IdentifierKind.LEI, "5493001KJTIIGC8Y1R13") is None

    @given(st.sampled_from(list(IdentifierKind)), raw_inputs())
    def test_parse_agrees_with_validate(self, kind: IdentifierKind, raw: str | None) -> None:
        result = validate(kind, raw)
        assert isinstance(result, ValidationResult)
        assert (parse(kind, raw) is not None) == result.is_valid


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_generatable_kinds(self) -> None:
        assert generatable_kinds() == (
            IdentifierKind.ISIN,
            IdentifierKind.CUSIP,
            IdentifierKind.SEDOL,
            IdentifierKind.LEI,
            IdentifierKind.PAYMENT_REFERENCE,
        )

    def test_generate_routes_to_family(self) -> None:
        assert generate(IdentifierKind.ISIN, "US037833100") == Ok("US0378331005")
        assert generate(IdentifierKind.PAYMENT_REFERENCE, "539007547034") == Ok("RF18539007547034")

    def test_reference_country_selects_generated_scheme(self) -> None:
        kind = IdentifierKind.PAYMENT_REFERENCE
        ogm = generate(kind, "0909337554", "BE")
        assert ogm == Ok("+++090/9337/55493+++")
        assert isinstance(ogm, Ok)
        assert parse(kind, ogm.value, "BE") is not None
        assert generate(kind, "539007547034", "DE") == Ok("RF18539007547034")

    def test_country_ignored_for_securities_generation(self) -> None:
        assert generate(IdentifierKind.ISIN, "US037833100", "FR") == Ok("US0378331005")

    def test_kind_without_construction_rule(self) -> None:
        result = generate(IdentifierKind.CURRENCY, "EUR")
        assert isinstance(result, Err)
        assert isinstance(result.error, GenerationError)
        assert result.error.kind == "Currency"
        assert result.error.payload == "EUR"

    def test_generation_failure_propagates(self) -> None:
        assert isinstance(generate(IdentifierKind.SEDOL, "02634"), Err)


# ---------------------------------------------------------------------------
# Batch validation
# ---------------------------------------------------------------------------


class TestBatch:
    def test_results_in_input_order(self) -> None:
        inputs = ["US0378331005", "US0378331006", None, " us-0378331005 "]
        items, summary = validate_batch(IdentifierKind.ISIN, inputs)
        assert [item.input for item in items] == inputs
        assert [item.result.is_valid for item in items] == [True, False, False, True]
        assert items[3].normalized == "US0378331005"
        assert items[2].normalized == ""
        assert (summary.total, summary.valid, summary.invalid) == (4, 2, 2)
        assert not summary.all_valid

    def test_invalid_items(self) -> None:
        items, _ = validate_batch(IdentifierKind.ISIN, ["US0378331005", "US0378331006"])
        bad = invalid_items(items)
        assert len(bad) == 1
        assert bad[0].result.error_codes == (ErrorCode.INVALID_CHECKSUM,)

    def test_country_applies_to_every_item(self) -> None:
        items, summary = validate_batch(IdentifierKind.NATIONAL_ID, ["111222333", "44051401359"], "NL")
        assert summary.valid == 1
        assert items[1].result.error_codes == (ErrorCode.INVALID_LENGTH,)

    def test_empty_batch(self) -> None:
        items, summary = validate_batch(IdentifierKind.IBAN, [])
        assert items == ()
        assert summary.total == 0
        assert summary.all_valid

    def test_accepts_generator(self) -> None:
        _, summary = validate_batch(IdentifierKind.CURRENCY, (c for c in ("EUR", "USD", "XXZ")))
        assert summary.valid == 2

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="finident.infra.batch"):
            validate_batch(IdentifierKind.BIC, ["DEUTDEFF", "DEUTDEF"])
        assert any(
            "2 Bic inputs: 1 valid, 1 invalid" in r.getMessage() for r in caplog.records
        )
