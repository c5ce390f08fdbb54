"""finident.infra — limits and batch validation."""

from finident.infra.config import DEFAULT_LIMITS as DEFAULT_LIMITS
from finident.infra.config import LengthBounds as LengthBounds
from finident.infra.config import Limits as Limits
