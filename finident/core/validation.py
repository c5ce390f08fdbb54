"""ValidationResult — the uniform outcome of every validate_* call.

Invariant: is_valid == (not errors). Validation is first-failure-wins, so
a failed result normally carries exactly one error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from finident.core.errors import ErrorCode, ValidationError


@final
@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable valid/invalid outcome with an ordered tuple of errors."""

    errors: tuple[ValidationError, ...] = ()

    SUCCESS: ClassVar[ValidationResult]  # Assigned after class definition

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            raise TypeError(
                f"ValidationResult.errors must be a tuple, got {type(self.errors).__name__}"
            )

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> ValidationError | None:
        return self.errors[0] if self.errors else None

    @property
    def error_codes(self) -> tuple[ErrorCode, ...]:
        return tuple(e.code for e in self.errors)

    def __bool__(self) -> bool:
        return self.is_valid

    @staticmethod
    def success() -> ValidationResult:
        return ValidationResult.SUCCESS

    @staticmethod
    def failure(code: ErrorCode, message: str) -> ValidationResult:
        return ValidationResult(errors=(ValidationError(code=code, message=message),))

    def to_dict(self) -> dict[str, object]:
        return {
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
        }


ValidationResult.SUCCESS = ValidationResult(errors=())


def invalid_input(message: str = "Input cannot be empty.") -> ValidationResult:
    return ValidationResult.failure(ErrorCode.INVALID_INPUT, message)


def invalid_length(message: str) -> ValidationResult:
    return ValidationResult.failure(ErrorCode.INVALID_LENGTH, message)


def invalid_format(message: str) -> ValidationResult:
    return ValidationResult.failure(ErrorCode.INVALID_FORMAT, message)


def invalid_checksum(message: str) -> ValidationResult:
    return ValidationResult.failure(ErrorCode.INVALID_CHECKSUM, message)


def unsupported_country(country_code: str, family: str) -> ValidationResult:
    return ValidationResult.failure(
        ErrorCode.UNSUPPORTED_COUNTRY,
        f"No {family} rule registered for country code '{country_code}'",
    )
