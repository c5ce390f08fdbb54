"""Tests for finident.core.checksum — the shared check-digit algorithms."""

from __future__ import annotations

import pytest
from hypothesis import given

from conftest import digit_strings, isin_bases
from finident.core.checksum import (
    cusip_check_digit,
    cusip_verify,
    isin_check_digit,
    isin_verify,
    iso7064_mod11_10_verify,
    luhn_check_digit,
    luhn_verify,
    mod10_recursive_check_digit,
    mod11_weights_2_to_7_check_digit,
    mod97,
    mod97_10_check_digits,
    mod97_10_verify,
    mod97_alnum,
    sedol_check_digit,
    sedol_verify,
    weighted_sum,
    weights_731_check_digit,
)
from finident.core.expansion import expand, rotate

# ---------------------------------------------------------------------------
# MOD 97-10
# ---------------------------------------------------------------------------


class TestMod97:
    def test_streaming_remainder(self) -> None:
        assert mod97("5390075470") == 34
        assert mod97("97") == 0

    def test_non_digits(self) -> None:
        assert mod97("") == -1
        assert mod97("12A") == -1

    def test_long_input_does_not_overflow(self) -> None:
        assert mod97("9" * 500) == int("9" * 500) % 97

    @given(digit_strings(1, 40))
    def test_matches_int_arithmetic(self, digits: str) -> None:
        assert mod97(digits) == int(digits) % 97

    def test_alnum_matches_expansion(self) -> None:
        s = "539007547034BE68"
        assert mod97_alnum(s) == int(expand(s)) % 97

    def test_alnum_rejects_symbols(self) -> None:
        assert mod97_alnum("AB-1") == -1
        assert mod97_alnum("") == -1

    def test_iban_verifies_after_rotation(self) -> None:
        assert mod97_10_verify(rotate("BE68539007547034"))
        assert not mod97_10_verify(rotate("BE68539007547035"))

    def test_lei_verifies_whole_string(self) -> None:
        assert mod97_10_verify("5493001KJTIIGC8Y1R12")

    def test_check_digits(self) -> None:
        assert mod97_10_check_digits("539007547034BE") == "68"

    def test_check_digits_reject_symbols(self) -> None:
        with pytest.raises(ValueError):
            mod97_10_check_digits("12-34")


# ---------------------------------------------------------------------------
# Luhn
# ---------------------------------------------------------------------------


class TestLuhn:
    def test_known_number(self) -> None:
        assert luhn_verify("79927398713")
        assert not luhn_verify("79927398710")

    def test_check_digit(self) -> None:
        assert luhn_check_digit("7992739871") == 3

    def test_non_digits(self) -> None:
        assert not luhn_verify("")
        assert not luhn_verify("7992 7398 713")
        with pytest.raises(ValueError):
            luhn_check_digit("12a")

    @given(digit_strings(1, 30))
    def test_appended_check_digit_verifies(self, digits: str) -> None:
        assert luhn_verify(digits + str(luhn_check_digit(digits)))

    def test_isin(self) -> None:
        assert isin_verify("US0378331005")
        assert not isin_verify("US0378331006")
        assert isin_check_digit("US037833100") == 5

    @given(isin_bases())
    def test_isin_check_digit_verifies(self, base: str) -> None:
        assert isin_verify(base + str(isin_check_digit(base)))


# ---------------------------------------------------------------------------
# Weighted modulus 10
# ---------------------------------------------------------------------------


class TestWeightedMod10:
    def test_sedol(self) -> None:
        assert sedol_verify("0263494")
        assert not sedol_verify("0263495")
        assert sedol_check_digit("026349") == 4

    def test_sedol_vowel_fails(self) -> None:
        assert not sedol_verify("A263494")
        with pytest.raises(ValueError):
            sedol_check_digit("E26349")

    def test_cusip(self) -> None:
        assert cusip_verify("037833100")
        assert not cusip_verify("037833101")
        assert cusip_check_digit("03783310") == 0

    def test_cusip_wrong_length(self) -> None:
        assert not cusip_verify("03783310")
        with pytest.raises(ValueError):
            cusip_check_digit("0378331")


# ---------------------------------------------------------------------------
# National schemes
# ---------------------------------------------------------------------------


class TestNationalSchemes:
    def test_weighted_sum(self) -> None:
        assert weighted_sum("123", (1, 2, 3)) == 14
        assert weighted_sum("12", (1, 2, 3)) == -1
        assert weighted_sum("1a3", (1, 2, 3)) == -1

    def test_iso7064_mod11_10(self) -> None:
        assert iso7064_mod11_10_verify("33392005961")
        assert iso7064_mod11_10_verify("136695976")
        assert not iso7064_mod11_10_verify("33392005962")
        assert not iso7064_mod11_10_verify("3")

    def test_mod10_recursive(self) -> None:
        assert mod10_recursive_check_digit("21000000000313947143000901") == 7

    def test_weights_731(self) -> None:
        assert weights_731_check_digit("123") == 2

    def test_mod11_weights_2_to_7(self) -> None:
        assert mod11_weights_2_to_7_check_digit("1234567") == 4
        assert mod11_weights_2_to_7_check_digit("0") == 0
        assert mod11_weights_2_to_7_check_digit("5") == 1
        assert mod11_weights_2_to_7_check_digit("6") == -1
