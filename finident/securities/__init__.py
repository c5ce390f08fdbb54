"""finident.securities — ISIN, CUSIP, SEDOL and LEI."""

from finident.securities.cusip import CusipDetails as CusipDetails
from finident.securities.cusip import compute_cusip_check_digit as compute_cusip_check_digit
from finident.securities.cusip import generate_cusip as generate_cusip
from finident.securities.cusip import generate_cusip_from_parts as generate_cusip_from_parts
from finident.securities.cusip import parse_cusip as parse_cusip
from finident.securities.cusip import validate_cusip as validate_cusip
from finident.securities.isin import IsinDetails as IsinDetails
from finident.securities.isin import compute_isin_check_digit as compute_isin_check_digit
from finident.securities.isin import generate_isin as generate_isin
from finident.securities.isin import generate_isin_from_parts as generate_isin_from_parts
from finident.securities.isin import parse_isin as parse_isin
from finident.securities.isin import validate_isin as validate_isin
from finident.securities.lei import LeiDetails as LeiDetails
from finident.securities.lei import generate_lei as generate_lei
from finident.securities.lei import parse_lei as parse_lei
from finident.securities.lei import validate_lei as validate_lei
from finident.securities.sedol import SedolDetails as SedolDetails
from finident.securities.sedol import compute_sedol_check_digit as compute_sedol_check_digit
from finident.securities.sedol import generate_sedol as generate_sedol
from finident.securities.sedol import parse_sedol as parse_sedol
from finident.securities.sedol import validate_sedol as validate_sedol
