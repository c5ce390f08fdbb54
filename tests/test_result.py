"""Tests for finident.core.result — Ok/Err values for construction helpers."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from finident.core.result import Err, Ok, collect, unwrap

# ---------------------------------------------------------------------------
# Core: Ok and Err hold values, are frozen, support pattern matching
# ---------------------------------------------------------------------------


class TestOkBasics:
    def test_ok_holds_value(self) -> None:
        assert Ok("US0378331005").value == "US0378331005"

    def test_ok_is_frozen(self) -> None:
        ok = Ok(42)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ok.value = 99  # type: ignore[misc]

    def test_ok_equality(self) -> None:
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(99)

    def test_pattern_match_ok(self) -> None:
        match Ok(42):
            case Ok(v):
                assert v == 42
            case _:
                pytest.fail("Should match Ok")


class TestErrBasics:
    def test_err_holds_error(self) -> None:
        assert Err("fail").error == "fail"

    def test_err_is_frozen(self) -> None:
        err = Err("fail")
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.error = "other"  # type: ignore[misc]

    def test_pattern_match_err(self) -> None:
        match Err("fail"):
            case Err(e):
                assert e == "fail"
            case _:
                pytest.fail("Should match Err")

    def test_ok_is_not_err(self) -> None:
        assert not isinstance(Ok(1), Err)
        assert not isinstance(Err("e"), Ok)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def _half(x: int) -> Ok[int] | Err[str]:
    if x % 2:
        return Err("odd")
    return Ok(x // 2)


class TestMap:
    def test_ok_map_applies_function(self) -> None:
        assert Ok(5).map(lambda x: x * 2) == Ok(10)

    def test_err_map_passthrough(self) -> None:
        assert Err("fail").map(lambda x: x * 2) == Err("fail")


class TestAndThen:
    def test_ok_and_then_returns_ok(self) -> None:
        assert Ok(4).and_then(_half) == Ok(2)

    def test_ok_and_then_returns_err(self) -> None:
        assert Ok(3).and_then(_half) == Err("odd")

    def test_err_and_then_passthrough(self) -> None:
        assert Err("initial").and_then(_half) == Err("initial")

    def test_combinator_surface(self) -> None:
        for name in ("bind", "unwrap_or", "map_err", "unwrap"):
            assert not hasattr(Ok(1), name)
            assert not hasattr(Err("e"), name)


class TestFreeFunctions:
    def test_unwrap_ok(self) -> None:
        assert unwrap(Ok(42)) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="unwrap on Err"):
            unwrap(Err("fail"))

    def test_unwrap_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            unwrap(42)  # type: ignore[arg-type]

    def test_collect_all_ok(self) -> None:
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok((1, 2, 3))

    def test_collect_first_err(self) -> None:
        assert collect([Ok(1), Err("a"), Err("b")]) == Err("a")

    def test_collect_empty(self) -> None:
        assert collect([]) == Ok(())

    def test_collect_short_circuits(self) -> None:
        consumed: list[int] = []

        def gen():  # type: ignore[no-untyped-def]
            consumed.append(1)
            yield Ok(1)
            consumed.append(2)
            yield Err("stop")
            consumed.append(3)
            yield Ok(3)

        assert collect(gen()) == Err("stop")
        assert consumed == [1, 2]


# ---------------------------------------------------------------------------
# Property-based tests (Hypothesis)
# ---------------------------------------------------------------------------


class TestMonadLaws:
    @given(st.integers())
    def test_map_identity_law(self, x: int) -> None:
        assert Ok(x).map(lambda v: v) == Ok(x)

    @given(st.integers())
    def test_and_then_left_identity(self, x: int) -> None:
        assert Ok(x).and_then(_half) == _half(x)

    @given(st.text())
    def test_err_map_identity(self, e: str) -> None:
        assert Err(e).map(lambda v: v * 2) == Err(e)
