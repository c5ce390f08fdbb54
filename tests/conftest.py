"""Hypothesis strategies and settings for finident tests.

Strategies produce generator payloads (ISIN/CUSIP/SEDOL/LEI bases, RF
contents) and arbitrary raw input for the never-raises properties.
"""

from __future__ import annotations

import string

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

UPPER = string.ascii_uppercase
DIGITS = string.digits
ALNUM = UPPER + DIGITS
SEDOL_CHARS = DIGITS + "BCDFGHJKLMNPQRSTVWXYZ"


def fixed_text(alphabet: str, length: int) -> SearchStrategy[str]:
    return st.text(alphabet=alphabet, min_size=length, max_size=length)


def digit_strings(min_size: int = 1, max_size: int = 20) -> SearchStrategy[str]:
    return st.text(alphabet=DIGITS, min_size=min_size, max_size=max_size)


def raw_inputs() -> SearchStrategy[str | None]:
    """Anything a caller might pass: None, blanks, unicode, near-misses."""
    return st.none() | st.text(max_size=40) | st.text(alphabet=ALNUM + " -./+", max_size=40)


# ===================================================================
# GENERATOR PAYLOADS
# ===================================================================


@st.composite
def isin_bases(draw: st.DrawFn) -> str:
    return draw(fixed_text(UPPER, 2)) + draw(fixed_text(ALNUM, 9))


@st.composite
def cusip_bases(draw: st.DrawFn) -> str:
    return draw(fixed_text(ALNUM + "*@#", 8))


@st.composite
def sedol_bases(draw: st.DrawFn) -> str:
    return draw(fixed_text(SEDOL_CHARS, 6))


@st.composite
def lei_bases(draw: st.DrawFn) -> str:
    return draw(fixed_text(ALNUM, 18))


@st.composite
def rf_contents(draw: st.DrawFn) -> str:
    return draw(st.text(alphabet=ALNUM, min_size=1, max_size=21))
