"""Tests for finident.securities — ISIN, CUSIP, SEDOL, LEI."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given

from conftest import cusip_bases, isin_bases, lei_bases, raw_inputs, sedol_bases
from finident.core.errors import ErrorCode, GenerationError
from finident.core.result import Err, Ok, unwrap
from finident.securities.cusip import (
    compute_cusip_check_digit,
    generate_cusip,
    generate_cusip_from_parts,
    parse_cusip,
    validate_cusip,
)
from finident.securities.isin import (
    compute_isin_check_digit,
    generate_isin,
    generate_isin_from_parts,
    parse_isin,
    validate_isin,
)
from finident.securities.lei import generate_lei, parse_lei, validate_lei
from finident.securities.sedol import (
    compute_sedol_check_digit,
    generate_sedol,
    parse_sedol,
    validate_sedol,
)

# ---------------------------------------------------------------------------
# ISIN
# ---------------------------------------------------------------------------


class TestIsin:
    def test_apple_is_valid(self) -> None:
        assert validate_isin("US0378331005").is_valid

    def test_altered_check_digit(self) -> None:
        assert validate_isin("US0378331006").error_codes == (ErrorCode.INVALID_CHECKSUM,)

    def test_case_and_separators(self) -> None:
        assert validate_isin("us0378331005").is_valid
        assert validate_isin(" US-037833100-5 ").is_valid

    @pytest.mark.parametrize(
        ("raw", "code"),
        [
            (None, ErrorCode.INVALID_INPUT),
            ("   ", ErrorCode.INVALID_INPUT),
            ("-./ ", ErrorCode.INVALID_INPUT),
            ("US037833100", ErrorCode.INVALID_LENGTH),
            ("US03783310055", ErrorCode.INVALID_LENGTH),
            ("1S0378331005", ErrorCode.INVALID_FORMAT),
            ("US037833100X", ErrorCode.INVALID_FORMAT),
        ],
    )
    def test_failures(self, raw: str | None, code: ErrorCode) -> None:
        assert validate_isin(raw).error_codes == (code,)

    def test_parse(self) -> None:
        d = parse_isin("US0378331005")
        assert d is not None
        assert (d.country_code, d.nsin, d.check_digit) == ("US", "037833100", "5")
        assert d.content == "US037833100"
        assert d.is_valid

    def test_parse_invalid_is_none(self) -> None:
        assert parse_isin("US0378331006") is None

    def test_details_frozen(self) -> None:
        d = unwrap_details(parse_isin("US0378331005"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.isin = "X"  # type: ignore[misc]

    def test_generate(self) -> None:
        assert generate_isin("US037833100") == Ok("US0378331005")
        assert compute_isin_check_digit("US037833100") == Ok("5")
        assert generate_isin_from_parts("us", "037833100") == Ok("US0378331005")

    def test_generate_wrong_length(self) -> None:
        result = generate_isin("US0378331005")
        assert isinstance(result, Err)
        assert isinstance(result.error, GenerationError)
        assert result.error.kind == "ISIN"

    def test_generate_bad_charset(self) -> None:
        assert isinstance(generate_isin("1S037833100"), Err)
        assert isinstance(generate_isin_from_parts("USA", "037833100"), Err)
        assert isinstance(generate_isin_from_parts("US", "0378331"), Err)

    @given(isin_bases())
    def test_round_trip(self, base: str) -> None:
        isin = unwrap(generate_isin(base))
        assert validate_isin(isin).is_valid
        assert unwrap_details(parse_isin(isin)).content == base
        assert validate_isin(isin.lower()).is_valid

    @given(raw_inputs())
    def test_never_raises(self, raw: str | None) -> None:
        result = validate_isin(raw)
        assert (parse_isin(raw) is not None) == result.is_valid


# ---------------------------------------------------------------------------
# CUSIP
# ---------------------------------------------------------------------------


class TestCusip:
    def test_apple_is_valid(self) -> None:
        assert validate_cusip("037833100").is_valid

    def test_parse(self) -> None:
        d = unwrap_details(parse_cusip("037833100"))
        assert d.issuer_number == "037833"
        assert d.issue_number == "10"
        assert d.check_digit == "0"
        assert d.content == "03783310"

    def test_failures(self) -> None:
        assert validate_cusip("").error_codes == (ErrorCode.INVALID_INPUT,)
        assert validate_cusip("03783310").error_codes == (ErrorCode.INVALID_LENGTH,)
        assert validate_cusip("0378331!0").error_codes == (ErrorCode.INVALID_FORMAT,)
        assert validate_cusip("037833101").error_codes == (ErrorCode.INVALID_CHECKSUM,)

    def test_generate(self) -> None:
        assert generate_cusip("03783310") == Ok("037833100")
        assert compute_cusip_check_digit("03783310") == Ok("0")
        assert generate_cusip_from_parts("037833", "10") == Ok("037833100")

    def test_generate_rejects_full_cusip(self) -> None:
        assert isinstance(generate_cusip("037833100"), Err)

    def test_generate_rejects_bad_parts(self) -> None:
        assert isinstance(generate_cusip_from_parts("03783", "10"), Err)
        assert isinstance(generate_cusip_from_parts("037833", "1"), Err)
        assert isinstance(generate_cusip("0378331!"), Err)

    @given(cusip_bases())
    def test_round_trip(self, base: str) -> None:
        cusip = unwrap(generate_cusip(base))
        assert len(cusip) == 9
        assert validate_cusip(cusip).is_valid
        assert unwrap_details(parse_cusip(cusip)).content == base

    @given(raw_inputs())
    def test_never_raises(self, raw: str | None) -> None:
        assert (parse_cusip(raw) is not None) == validate_cusip(raw).is_valid


# ---------------------------------------------------------------------------
# SEDOL
# ---------------------------------------------------------------------------


class TestSedol:
    def test_valid(self) -> None:
        assert validate_sedol("0263494").is_valid

    def test_altered_check_digit(self) -> None:
        assert validate_sedol("0263495").error_codes == (ErrorCode.INVALID_CHECKSUM,)

    def test_vowel_is_format_error(self) -> None:
        assert validate_sedol("A263494").error_codes == (ErrorCode.INVALID_FORMAT,)

    def test_length(self) -> None:
        assert validate_sedol("026349").error_codes == (ErrorCode.INVALID_LENGTH,)

    def test_parse(self) -> None:
        d = unwrap_details(parse_sedol("0263494"))
        assert (d.base_code, d.check_digit, d.content) == ("026349", "4", "026349")

    def test_generate(self) -> None:
        assert generate_sedol("026349") == Ok("0263494")
        assert compute_sedol_check_digit("026349") == Ok("4")
        assert isinstance(generate_sedol("02634"), Err)
        assert isinstance(generate_sedol("E26349"), Err)

    @given(sedol_bases())
    def test_round_trip(self, base: str) -> None:
        sedol = unwrap(generate_sedol(base))
        assert validate_sedol(sedol).is_valid
        assert unwrap_details(parse_sedol(sedol)).content == base


# ---------------------------------------------------------------------------
# LEI
# ---------------------------------------------------------------------------


class TestLei:
    def test_valid(self) -> None:
        assert validate_lei("5493001KJTIIGC8Y1R12").is_valid

    def test_altered_check_digits(self) -> None:
        assert validate_lei("5493001KJTIIGC8Y1R13").error_codes == (ErrorCode.INVALID_CHECKSUM,)

    def test_failures(self) -> None:
        r = validate_lei(None)
        assert r.error_codes == (ErrorCode.INVALID_INPUT,)
        assert r.first_error.message == "LEI cannot be empty."  # type: ignore[union-attr]
        assert validate_lei("5493001KJTIIGC8Y1R1").error_codes == (ErrorCode.INVALID_LENGTH,)
        assert validate_lei("5493001KJTIIGC8Y1R1X").error_codes == (ErrorCode.INVALID_FORMAT,)

    def test_parse(self) -> None:
        d = unwrap_details(parse_lei("5493001kjtiigc8y1r12"))
        assert d.lei == "5493001KJTIIGC8Y1R12"
        assert d.lou_prefix == "5493"
        assert d.entity_code == "001KJTIIGC8Y1R"
        assert d.check_digits == "12"

    def test_generate(self) -> None:
        assert generate_lei("5493001KJTIIGC8Y1R") == Ok("5493001KJTIIGC8Y1R12")
        assert isinstance(generate_lei("5493001KJTIIGC8Y1"), Err)

    @given(lei_bases())
    def test_round_trip(self, base: str) -> None:
        lei = unwrap(generate_lei(base))
        assert validate_lei(lei).is_valid
        assert unwrap_details(parse_lei(lei)).content == base


def unwrap_details[T](details: T | None) -> T:
    assert details is not None
    return details
