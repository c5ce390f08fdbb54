"""finident.core — normalization, expansion, checksums, results and registries."""

from finident.core.checksum import cusip_check_digit as cusip_check_digit
from finident.core.checksum import cusip_verify as cusip_verify
from finident.core.checksum import isin_check_digit as isin_check_digit
from finident.core.checksum import isin_verify as isin_verify
from finident.core.checksum import luhn_check_digit as luhn_check_digit
from finident.core.checksum import luhn_verify as luhn_verify
from finident.core.checksum import mod97 as mod97
from finident.core.checksum import mod97_10_check_digits as mod97_10_check_digits
from finident.core.checksum import mod97_10_verify as mod97_10_verify
from finident.core.checksum import sedol_check_digit as sedol_check_digit
from finident.core.checksum import sedol_verify as sedol_verify
from finident.core.errors import ErrorCode as ErrorCode
from finident.core.errors import GenerationError as GenerationError
from finident.core.errors import ValidationError as ValidationError
from finident.core.expansion import char_value as char_value
from finident.core.expansion import expand as expand
from finident.core.expansion import rotate as rotate
from finident.core.normalize import digits_only as digits_only
from finident.core.normalize import normalize as normalize
from finident.core.registry import CountryRegistry as CountryRegistry
from finident.core.registry import FallbackPolicy as FallbackPolicy
from finident.core.result import Err as Err
from finident.core.result import Ok as Ok
from finident.core.result import collect as collect
from finident.core.result import unwrap as unwrap
from finident.core.types import FrozenMap as FrozenMap
from finident.core.validation import ValidationResult as ValidationResult
