"""Length bounds and horizons read by the validators.

Pure configuration data. No environment variables, no files: every value
is fixed by the governing standard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Fixed identifier lengths
# ---------------------------------------------------------------------------

ISIN_LENGTH: int = 12
CUSIP_LENGTH: int = 9
SEDOL_LENGTH: int = 7
LEI_LENGTH: int = 20

BIC_LENGTHS: tuple[int, ...] = (8, 11)
BIC_DEFAULT_BRANCH: str = "XXX"

# Base payload length accepted by each generator
ISIN_BASE_LENGTH: int = ISIN_LENGTH - 1
CUSIP_BASE_LENGTH: int = CUSIP_LENGTH - 1
SEDOL_BASE_LENGTH: int = SEDOL_LENGTH - 1
LEI_BASE_LENGTH: int = LEI_LENGTH - 2


# ---------------------------------------------------------------------------
# Bounded lengths
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class LengthBounds:
    """Inclusive length range."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum < 0 or self.maximum < self.minimum:
            raise ValueError(
                f"LengthBounds requires 0 <= minimum <= maximum, "
                f"got {self.minimum}..{self.maximum}"
            )

    def contains(self, length: int) -> bool:
        return self.minimum <= length <= self.maximum

    def describe(self) -> str:
        return f"between {self.minimum} and {self.maximum}"


@final
@dataclass(frozen=True, slots=True)
class Limits:
    """Validator limits; DEFAULT_LIMITS mirrors the published standards."""

    iban: LengthBounds = LengthBounds(15, 34)
    rf_reference: LengthBounds = LengthBounds(5, 25)
    rf_content: LengthBounds = LengthBounds(1, 21)
    payment_card: LengthBounds = LengthBounds(12, 19)
    card_expiry_horizon_years: int = 20


DEFAULT_LIMITS: Limits = Limits()
