"""Numerology Deriver: birth date -> NumerologyProfile. Pure, deterministic, no IO.

Invariants:
    - Steps run in dependency order: I..III -> IV -> V -> A..D -> lines -> connection
    - II is the raw month (already 1–12); every other sum passes through reduce_to_twelve
    - Same BirthDate always yields an equal profile
"""

import logging

from sofia_blend.core.birth_date import BirthDate
from sofia_blend.core.domain_types import ParameterValue
from sofia_blend.core.numerology_profile import LineBands, NumerologyProfile
from sofia_blend.core.reduce_digits import digit_sum, reduce_to_twelve

logger = logging.getLogger(__name__)


def derive_profile(birth_date: BirthDate) -> NumerologyProfile:
    """Compute the nine scalars and the three banded families."""
    # Base
    i = _reduce(birth_date.day)
    ii = ParameterValue(birth_date.month)
    iii = _reduce(digit_sum(birth_date.year))
    iv = _reduce(i + ii + iii)
    v = _reduce(i + ii + iii + iv)

    # Secondary
    a = _reduce(i + v)
    b = _reduce(ii + v)
    c = _reduce(iii + v)
    d = _reduce(iv + v)

    spirit_line = LineBands(
        years_20_40=_reduce(ii + iv),
        years_40_60=_reduce(ii + b + d + iv),
        years_60_plus=_reduce(ii + b + v + d + iv),
    )
    matter_line = LineBands(
        years_20_40=_reduce(i + iii),
        years_40_60=_reduce(i + a + c + iii),
        years_60_plus=_reduce(i + a + v + c + iii),
    )
    connection = _connect(spirit_line, matter_line)

    logger.debug(
        "Derived profile for %04d-%02d-%02d: I=%d II=%d III=%d IV=%d V=%d",
        birth_date.year, birth_date.month, birth_date.day, i, ii, iii, iv, v,
    )
    return NumerologyProfile(
        I=i, II=ii, III=iii, IV=iv, V=v,
        A=a, B=b, C=c, D=d,
        spirit_line=spirit_line,
        matter_line=matter_line,
        connection=connection,
    )


def _connect(spirit_line: LineBands, matter_line: LineBands) -> LineBands:
    """Band-wise reduced sum of the spirit and matter lines."""
    return LineBands(
        years_20_40=_reduce(spirit_line.years_20_40 + matter_line.years_20_40),
        years_40_60=_reduce(spirit_line.years_40_60 + matter_line.years_40_60),
        years_60_plus=_reduce(spirit_line.years_60_plus + matter_line.years_60_plus),
    )


def _reduce(n: int) -> ParameterValue:
    return ParameterValue(reduce_to_twelve(n))
