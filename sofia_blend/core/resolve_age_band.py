"""Age Band Resolution: the one place the 40/60 thresholds live.

Invariants:
    - age >= 60 -> 60_plus; age >= 40 -> 40_60; anything lower -> 20_40
"""

from sofia_blend.core.domain_types import AgeBand


MATURITY_AGE: int = 40
WISDOM_AGE: int = 60


def resolve_age_band(age: int) -> AgeBand:
    """Pick the band whose values apply at this age."""
    if age >= WISDOM_AGE:
        return AgeBand.YEARS_60_PLUS
    if age >= MATURITY_AGE:
        return AgeBand.YEARS_40_60
    return AgeBand.YEARS_20_40
