"""finident.tax — VAT numbers, national IDs and enterprise numbers."""

from finident.tax.enterprise import ENTERPRISE_RULES as ENTERPRISE_RULES
from finident.tax.enterprise import EnterpriseDetails as EnterpriseDetails
from finident.tax.enterprise import enterprise_countries as enterprise_countries
from finident.tax.enterprise import parse_enterprise_number as parse_enterprise_number
from finident.tax.enterprise import validate_enterprise_number as validate_enterprise_number
from finident.tax.national_id import NATIONAL_ID_RULES as NATIONAL_ID_RULES
from finident.tax.national_id import NationalIdDetails as NationalIdDetails
from finident.tax.national_id import national_id_countries as national_id_countries
from finident.tax.national_id import parse_national_id as parse_national_id
from finident.tax.national_id import validate_national_id as validate_national_id
from finident.tax.vat import VAT_RULES as VAT_RULES
from finident.tax.vat import VatDetails as VatDetails
from finident.tax.vat import parse_vat as parse_vat
from finident.tax.vat import validate_vat as validate_vat
from finident.tax.vat import vat_countries as vat_countries
