"""finident.banking — IBAN/BBAN, BIC, payment cards, payment references, currencies."""

from finident.banking.bic import BicDetails as BicDetails
from finident.banking.bic import is_consistent_with_iban as is_consistent_with_iban
from finident.banking.bic import parse_bic as parse_bic
from finident.banking.bic import validate_bic as validate_bic
from finident.banking.bic import validate_bic_iban_compatibility as validate_bic_iban_compatibility
from finident.banking.bic import validate_bic_iban_consistency as validate_bic_iban_consistency
from finident.banking.currency import CurrencyDetails as CurrencyDetails
from finident.banking.currency import currency_by_numeric as currency_by_numeric
from finident.banking.currency import currency_codes as currency_codes
from finident.banking.currency import parse_currency as parse_currency
from finident.banking.currency import validate_currency as validate_currency
from finident.banking.iban import IbanDetails as IbanDetails
from finident.banking.iban import format_iban as format_iban
from finident.banking.iban import iban_countries as iban_countries
from finident.banking.iban import normalize_iban as normalize_iban
from finident.banking.iban import parse_iban as parse_iban
from finident.banking.iban import validate_bban as validate_bban
from finident.banking.iban import validate_iban as validate_iban
from finident.banking.payment_card import CardBrand as CardBrand
from finident.banking.payment_card import PaymentCardDetails as PaymentCardDetails
from finident.banking.payment_card import detect_brand as detect_brand
from finident.banking.payment_card import parse_card_number as parse_card_number
from finident.banking.payment_card import validate_card_number as validate_card_number
from finident.banking.payment_card import validate_cvv as validate_cvv
from finident.banking.payment_card import validate_expiration as validate_expiration
from finident.banking.payment_reference import PaymentReferenceDetails as PaymentReferenceDetails
from finident.banking.payment_reference import ReferenceFormat as ReferenceFormat
from finident.banking.payment_reference import detect_reference_format as detect_reference_format
from finident.banking.payment_reference import format_ogm as format_ogm
from finident.banking.payment_reference import generate_kid_mod11 as generate_kid_mod11
from finident.banking.payment_reference import generate_reference as generate_reference
from finident.banking.payment_reference import generate_rf as generate_rf
from finident.banking.payment_reference import parse_reference as parse_reference
from finident.banking.payment_reference import parse_rf as parse_rf
from finident.banking.payment_reference import validate_reference as validate_reference
from finident.banking.payment_reference import validate_rf as validate_rf
from finident.banking.templates import CountryTemplate as CountryTemplate
from finident.banking.templates import IBAN_TEMPLATES as IBAN_TEMPLATES
