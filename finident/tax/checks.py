"""Domestic check-digit algorithms for tax, personal and company numbers.

Every function takes the bare number (country prefix, separators and
suffixes already removed, shape already matched) and returns a bool.
"""

from __future__ import annotations

from datetime import date

from finident.core.checksum import (
    iso7064_mod11_10_verify,
    luhn_verify,
    mod97,
    mod97_alnum,
    weighted_sum,
)

_DNI_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"
_NIE_PREFIX = {"X": "0", "Y": "1", "Z": "2"}
_CIF_LETTERS = "JABCDEFGHI"
_FI_HETU_CHARS = "0123456789ABCDEFHJKLMNPRSTUVWXY"
_FI_CENTURY = {"+": 1800, "-": 1900, "A": 2000}


def _mod11_complement(total: int) -> int:
    """11 - total % 11, with 11 -> 0. Returns 10 when no digit exists."""
    r = total % 11
    return 0 if r == 0 else 11 - r


def _is_date(year: int, month: int, day: int) -> bool:
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Company and VAT numbers
# ---------------------------------------------------------------------------


def austria_uid(number: str) -> bool:
    """U + 8 digits; Luhn-style weights 1,2 over digits 1-7, offset 4."""
    digits = number[1:]
    total = 0
    for i, c in enumerate(digits[:7]):
        p = int(c) * (2 if i % 2 else 1)
        total += p // 10 + p % 10
    return (10 - (total + 4) % 10) % 10 == int(digits[7])


def belgium_kbo(number: str) -> bool:
    """Ten digits starting 0 or 1: last two = 97 - first eight mod 97."""
    return number[0] in "01" and 97 - mod97(number[:8]) == int(number[8:])


def swiss_uid(number: str) -> bool:
    """Nine digits, weights 5,4,3,2,7,6,5,4; a remainder giving 10 is invalid."""
    check = _mod11_complement(weighted_sum(number[:8], (5, 4, 3, 2, 7, 6, 5, 4)))
    return check != 10 and check == int(number[8])


def germany_ust_idnr(number: str) -> bool:
    return number[0] != "0" and iso7064_mod11_10_verify(number)


def denmark_cvr(number: str) -> bool:
    return number[0] != "0" and weighted_sum(number, (2, 7, 6, 5, 4, 3, 2, 1)) % 11 == 0


def finland_y_tunnus(number: str) -> bool:
    check = _mod11_complement(weighted_sum(number[:7], (7, 9, 10, 5, 8, 4, 2)))
    return check != 10 and check == int(number[7])


def france_siren(number: str) -> bool:
    return luhn_verify(number)


def france_siret(number: str) -> bool:
    """Luhn over 14 digits; La Poste establishments use a digit sum mod 5."""
    if number.startswith("356000000"):
        return sum(int(c) for c in number) % 5 == 0
    return luhn_verify(number)


def france_tva(number: str) -> bool:
    """Two-digit key = (12 + 3 * (SIREN mod 97)) mod 97, plus the SIREN Luhn."""
    siren = number[2:]
    return int(number[:2]) == (12 + 3 * mod97(siren)) % 97 and france_siren(siren)


def spain_nif(number: str) -> bool:
    """DNI, NIE or CIF."""
    first = number[0]
    if first.isdigit() and number[-1].isalpha():
        return _DNI_LETTERS[int(number[:8]) % 23] == number[-1]
    if first in _NIE_PREFIX:
        return _DNI_LETTERS[int(_NIE_PREFIX[first] + number[1:8]) % 23] == number[-1]
    if first.isalpha():
        return _spain_cif(number)
    return False


def _spain_cif(number: str) -> bool:
    digits = number[1:8]
    if not digits.isdigit():
        return False
    even = sum(int(digits[i]) for i in (1, 3, 5))
    odd = sum(sum(divmod(int(digits[i]) * 2, 10)) for i in (0, 2, 4, 6))
    check = (10 - (even + odd) % 10) % 10
    control = number[-1]
    if number[0] in "PQRSNW":
        return control == _CIF_LETTERS[check]
    if number[0] in "ABEH":
        return control == str(check)
    return control in (str(check), _CIF_LETTERS[check])


def finland_alv(number: str) -> bool:
    return finland_y_tunnus(number)


def united_kingdom_vat(number: str) -> bool:
    """Government (GD) below 500, health authorities (HA) from 500; else mod 97."""
    if number.startswith("GD"):
        return int(number[2:]) < 500
    if number.startswith("HA"):
        return int(number[2:]) >= 500
    total = weighted_sum(number[:7], (8, 7, 6, 5, 4, 3, 2)) + int(number[7:9])
    return total % 97 == 0 or (total + 55) % 97 == 0


def greece_afm(number: str) -> bool:
    total = weighted_sum(number[:8], (256, 128, 64, 32, 16, 8, 4, 2))
    return total % 11 % 10 == int(number[8])


def croatia_oib(number: str) -> bool:
    return iso7064_mod11_10_verify(number)


def italy_partita_iva(number: str) -> bool:
    return number != "0" * 11 and luhn_verify(number)


def luxembourg_tva(number: str) -> bool:
    return int(number[:6]) % 89 == int(number[6:])


def netherlands_btw(number: str) -> bool:
    """Sole-proprietor numbers pass MOD 97-10 over 'NL' + number; others the elfproef."""
    if mod97_alnum("NL" + number) == 1:
        return True
    total = weighted_sum(number[:8], (9, 8, 7, 6, 5, 4, 3, 2))
    return total % 11 == int(number[8])


def norway_orgnr(number: str) -> bool:
    check = _mod11_complement(weighted_sum(number[:8], (3, 2, 7, 6, 5, 4, 3, 2)))
    return check != 10 and check == int(number[8])


def poland_nip(number: str) -> bool:
    check = weighted_sum(number[:9], (6, 5, 7, 2, 3, 4, 5, 6, 7)) % 11
    return check != 10 and check == int(number[9])


def portugal_nif(number: str) -> bool:
    r = weighted_sum(number[:8], (9, 8, 7, 6, 5, 4, 3, 2)) % 11
    return (0 if r < 2 else 11 - r) == int(number[8])


def sweden_orgnr(number: str) -> bool:
    """Ten digits, Luhn; the third digit is at least 2 for legal entities."""
    return int(number[2]) >= 2 and luhn_verify(number)


def sweden_momsnr(number: str) -> bool:
    return number.endswith("01") and luhn_verify(number[:10])


def slovenia_ddv(number: str) -> bool:
    check = 11 - weighted_sum(number[:7], (8, 7, 6, 5, 4, 3, 2)) % 11
    if check == 11:
        return False
    return (0 if check == 10 else check) == int(number[7])


# ---------------------------------------------------------------------------
# Personal identification numbers
#
# *_date functions check the embedded birth date (reported as a format
# error); the others check the check digits.
# ---------------------------------------------------------------------------


def belgium_rrn_date(number: str) -> bool:
    """YYMMDD, where bis numbers add 20 or 40 to the month."""
    month, day = int(number[2:4]), int(number[4:6])
    if month > 40:
        month -= 40
    elif month > 20:
        month -= 20
    # Month and day 0 stand for an unknown birth date.
    return month <= 12 and day <= 31


def belgium_rrn(number: str) -> bool:
    """Births from 2000 compute the key over '2' + the first nine digits."""
    check = int(number[9:])
    return 97 - mod97(number[:9]) == check or 97 - mod97("2" + number[:9]) == check


def netherlands_bsn(number: str) -> bool:
    """Elfproef with weight -1 on the last digit."""
    if number == "0" * 9:
        return False
    total = weighted_sum(number[:8], (9, 8, 7, 6, 5, 4, 3, 2)) - int(number[8])
    return total % 11 == 0


def spain_dni(number: str) -> bool:
    if number[0] in "KLM":
        return _DNI_LETTERS[int(number[1:8]) % 23] == number[-1]
    return spain_nif(number)


def finland_hetu_date(number: str) -> bool:
    """DDMMYY plus a century sign: '+' 1800s, '-' and U-Y 1900s, A-F 2000s."""
    sign = number[6]
    if sign in _FI_CENTURY:
        century = _FI_CENTURY[sign]
    elif sign in "BCDEF":
        century = 2000
    else:
        century = 1900
    return _is_date(century + int(number[4:6]), int(number[2:4]), int(number[:2]))


def finland_hetu(number: str) -> bool:
    return _FI_HETU_CHARS[int(number[:6] + number[7:10]) % 31] == number[10]


def _sweden_last_ten(number: str) -> str:
    return number.replace("+", "")[-10:]


def sweden_personnummer_date(number: str) -> bool:
    digits = _sweden_last_ten(number)
    month, day = int(digits[2:4]), int(digits[4:6])
    # Co-ordination numbers add 60 to the day.
    if day > 60:
        day -= 60
    return 1 <= month <= 12 and 1 <= day <= 31


def sweden_personnummer(number: str) -> bool:
    """Luhn over the last ten digits; a '+' marks age 100 or more."""
    return luhn_verify(_sweden_last_ten(number))


def norway_fodselsnummer(number: str) -> bool:
    k1 = _mod11_complement(weighted_sum(number[:9], (3, 7, 6, 1, 8, 9, 4, 5, 2)))
    if k1 == 10 or k1 != int(number[9]):
        return False
    k2 = _mod11_complement(weighted_sum(number[:10], (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)))
    return k2 != 10 and k2 == int(number[10])


def estonia_isikukood(number: str) -> bool:
    r = weighted_sum(number[:10], (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)) % 11
    if r == 10:
        r = weighted_sum(number[:10], (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)) % 11
        if r == 10:
            r = 0
    return r == int(number[10])


def poland_pesel_date(number: str) -> bool:
    """The month carries the century in steps of 20."""
    return 1 <= int(number[2:4]) % 20 <= 12 and 1 <= int(number[4:6]) <= 31


def poland_pesel(number: str) -> bool:
    total = weighted_sum(number[:10], (1, 3, 7, 9, 1, 3, 7, 9, 1, 3))
    return (10 - total % 10) % 10 == int(number[10])


def denmark_cpr_date(number: str) -> bool:
    """DDMMYY-SSSS; the seventh digit and the year fix the century."""
    day, month, yy = int(number[:2]), int(number[2:4]), int(number[4:6])
    seventh = int(number[6])
    if seventh <= 3:
        century = 1900
    elif seventh in (4, 9):
        century = 2000 if yy <= 36 else 1900
    else:
        century = 2000 if yy <= 57 else 1800
    return _is_date(century + yy, month, day)
