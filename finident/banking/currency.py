"""ISO 4217 currency codes: alphabetic code, name, numeric code, minor units.

Minor units are None for funds and metals where ISO 4217 lists "N.A.".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from finident.core.normalize import is_blank
from finident.core.types import FrozenMap
from finident.core.validation import (
    ValidationResult,
    invalid_format,
    invalid_input,
    invalid_length,
)

_ALPHA3 = re.compile(r"^[A-Z]{3}$")


@final
@dataclass(frozen=True, slots=True)
class CurrencyDetails:
    code: str
    name: str
    numeric_code: str
    minor_units: int | None
    is_valid: bool = True


# code: (name, numeric code, minor units)
_ISO4217: FrozenMap[str, tuple[str, str, int | None]] = FrozenMap.of({
    "EUR": ("Euro", "978", 2),
    "USD": ("US Dollar", "840", 2),
    "GBP": ("Pound Sterling", "826", 2),
    "JPY": ("Yen", "392", 0),
    "CHF": ("Swiss Franc", "756", 2),
    "AUD": ("Australian Dollar", "036", 2),
    "CAD": ("Canadian Dollar", "124", 2),
    "CNY": ("Yuan Renminbi", "156", 2),
    "HKD": ("Hong Kong Dollar", "344", 2),
    "NZD": ("New Zealand Dollar", "554", 2),
    "SEK": ("Swedish Krona", "752", 2),
    "KRW": ("Won", "410", 0),
    "SGD": ("Singapore Dollar", "702", 2),
    "NOK": ("Norwegian Krone", "578", 2),
    "MXN": ("Mexican Peso", "484", 2),
    "INR": ("Indian Rupee", "356", 2),
    "RUB": ("Russian Ruble", "643", 2),
    "ZAR": ("Rand", "710", 2),
    "TRY": ("Turkish Lira", "949", 2),
    "BRL": ("Brazilian Real", "986", 2),
    "DKK": ("Danish Krone", "208", 2),
    "PLN": ("Zloty", "985", 2),
    "CZK": ("Czech Koruna", "203", 2),
    "HUF": ("Forint", "348", 2),
    "RON": ("Romanian Leu", "946", 2),
    "BGN": ("Bulgarian Lev", "975", 2),
    "HRK": ("Kuna", "191", 2),
    "ISK": ("Iceland Krona", "352", 0),
    "RSD": ("Serbian Dinar", "941", 2),
    "UAH": ("Hryvnia", "980", 2),
    "ALL": ("Lek", "008", 2),
    "MKD": ("Denar", "807", 2),
    "BAM": ("Convertible Mark", "977", 2),
    "MDL": ("Moldovan Leu", "498", 2),
    "GEL": ("Lari", "981", 2),
    "AMD": ("Armenian Dram", "051", 2),
    "AZN": ("Azerbaijan Manat", "944", 2),
    "BYN": ("Belarusian Ruble", "933", 2),
    "AED": ("UAE Dirham", "784", 2),
    "SAR": ("Saudi Riyal", "682", 2),
    "ILS": ("New Israeli Sheqel", "376", 2),
    "QAR": ("Qatari Rial", "634", 2),
    "KWD": ("Kuwaiti Dinar", "414", 3),
    "BHD": ("Bahraini Dinar", "048", 3),
    "OMR": ("Rial Omani", "512", 3),
    "JOD": ("Jordanian Dinar", "400", 3),
    "LBP": ("Lebanese Pound", "422", 2),
    "EGP": ("Egyptian Pound", "818", 2),
    "THB": ("Baht", "764", 2),
    "MYR": ("Malaysian Ringgit", "458", 2),
    "IDR": ("Rupiah", "360", 2),
    "PHP": ("Philippine Peso", "608", 2),
    "VND": ("Dong", "704", 0),
    "TWD": ("New Taiwan Dollar", "901", 2),
    "PKR": ("Pakistan Rupee", "586", 2),
    "BDT": ("Taka", "050", 2),
    "LKR": ("Sri Lanka Rupee", "144", 2),
    "NPR": ("Nepalese Rupee", "524", 2),
    "MMK": ("Kyat", "104", 2),
    "KHR": ("Riel", "116", 2),
    "LAK": ("Lao Kip", "418", 2),
    "MNT": ("Tugrik", "496", 2),
    "KZT": ("Tenge", "398", 2),
    "UZS": ("Uzbekistan Sum", "860", 2),
    "NGN": ("Naira", "566", 2),
    "KES": ("Kenyan Shilling", "404", 2),
    "GHS": ("Ghana Cedi", "936", 2),
    "TZS": ("Tanzanian Shilling", "834", 2),
    "UGX": ("Uganda Shilling", "800", 0),
    "MAD": ("Moroccan Dirham", "504", 2),
    "DZD": ("Algerian Dinar", "012", 2),
    "TND": ("Tunisian Dinar", "788", 3),
    "XOF": ("CFA Franc BCEAO", "952", 0),
    "XAF": ("CFA Franc BEAC", "950", 0),
    "ARS": ("Argentine Peso", "032", 2),
    "CLP": ("Chilean Peso", "152", 0),
    "COP": ("Colombian Peso", "170", 2),
    "PEN": ("Sol", "604", 2),
    "VES": ("Bolivar Soberano", "928", 2),
    "UYU": ("Peso Uruguayo", "858", 2),
    "PYG": ("Guarani", "600", 0),
    "BOB": ("Boliviano", "068", 2),
    "DOP": ("Dominican Peso", "214", 2),
    "CRC": ("Costa Rican Colon", "188", 2),
    "GTQ": ("Quetzal", "320", 2),
    "HNL": ("Lempira", "340", 2),
    "NIO": ("Cordoba Oro", "558", 2),
    "PAB": ("Balboa", "590", 2),
    "JMD": ("Jamaican Dollar", "388", 2),
    "TTD": ("Trinidad and Tobago Dollar", "780", 2),
    "FJD": ("Fiji Dollar", "242", 2),
    "PGK": ("Kina", "598", 2),
    "WST": ("Tala", "882", 2),
    "VUV": ("Vatu", "548", 0),
    "SBD": ("Solomon Islands Dollar", "090", 2),
    "TOP": ("Pa'anga", "776", 2),
    "XAU": ("Gold", "959", None),
    "XAG": ("Silver", "961", None),
    "XPT": ("Platinum", "962", None),
    "XPD": ("Palladium", "964", None),
    "XDR": ("SDR (Special Drawing Right)", "960", None),
    "XXX": ("No currency", "999", None),
    "XTS": ("Testing", "963", None),
})

_BY_NUMERIC: FrozenMap[str, str] = FrozenMap.of({num: code for code, (_, num, _) in _ISO4217.items()})


def _clean(raw: str) -> str:
    return raw.strip().upper()


def validate_currency(raw: str | None) -> ValidationResult:
    if is_blank(raw):
        return invalid_input()
    code = _clean(raw)
    if len(code) != 3:
        return invalid_length(f"Currency code must be 3 characters, got {len(code)}")
    if not _ALPHA3.match(code) or code not in _ISO4217:
        return invalid_format(f"Unknown currency code: {code}")
    return ValidationResult.success()


def parse_currency(raw: str | None) -> CurrencyDetails | None:
    if not validate_currency(raw):
        return None
    code = _clean(raw)
    name, numeric, minor = _ISO4217[code]
    return CurrencyDetails(code=code, name=name, numeric_code=numeric, minor_units=minor)


def currency_by_numeric(numeric_code: str) -> CurrencyDetails | None:
    """Reverse lookup: '978' -> EUR."""
    code = _BY_NUMERIC.get(numeric_code.strip().zfill(3))
    return parse_currency(code) if code else None


def currency_codes() -> tuple[str, ...]:
    return _ISO4217.keys()
