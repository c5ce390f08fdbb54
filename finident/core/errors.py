"""Error values — validators and generators never raise for bad input.

ErrorCode is the closed taxonomy shared by every identifier family.
ValidationError is one reported failure; GenerationError is the Err payload
of the generate_* construction helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import final


class ErrorCode(Enum):
    """Kind of a validation failure (the message text is not part of the contract)."""

    INVALID_INPUT = "InvalidInput"
    INVALID_LENGTH = "InvalidLength"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_CHECKSUM = "InvalidChecksum"
    UNSUPPORTED_COUNTRY = "UnsupportedCountry"


@final
@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single typed failure with a human-readable message."""

    code: ErrorCode
    message: str

    def with_context(self, context: str) -> ValidationError:
        """Return a copy with context prepended to the message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


@final
@dataclass(frozen=True, slots=True)
class GenerationError:
    """A generate_* payload was malformed (wrong length or charset)."""

    kind: str      # identifier family, e.g. "ISIN"
    payload: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "payload": self.payload, "message": self.message}
