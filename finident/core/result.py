"""Result[T, E] — explicit success/failure values for finident.

Construction helpers (generate_isin, CountryRegistry.build, ...) return
Ok[T] on success and Err[E] on a caller error instead of raising.
Validators do not use Result: they return a ValidationResult.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant."""

    value: T

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a step that can itself fail."""
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure variant."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise ValueError. Tests and call boundaries only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise ValueError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[tuple[T, ...]] | Err[E]:
    """Gather Ok values into a tuple; the first Err short-circuits."""
    values: list[T] = []
    for r in results:
        if isinstance(r, Err):
            return r
        values.append(r.value)
    return Ok(tuple(values))
