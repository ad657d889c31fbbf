"""Numerology Profile: the full derived parameter set ("Wisdom Flower") for one birth date.

Invariants:
    - Every scalar and every band value lies in [MIN_PARAMETER_VALUE, MAX_PARAMETER_VALUE]
    - Frozen: a profile is the return value of derive_profile, never edited afterwards
    - to_dict() keys are the wire names used by the API and by saved snapshots
    - LineBands.get accepts an AgeBand or its wire name; anything else raises ValueError

Design Decisions:
    - Upper-case scalar fields (I, II, ..., D) mirror the parameter names used by the
      recipe catalog, so catalog keys resolve with a plain getattr
"""

from dataclasses import dataclass

from sofia_blend.core.domain_types import (
    AgeBand,
    BandedFamily,
    BASE_PARAMETERS,
    ParameterValue,
    ScalarParameter,
    SECONDARY_PARAMETERS,
)


@dataclass(frozen=True)
class LineBands:
    """One banded family: a value per age band."""
    years_20_40: ParameterValue
    years_40_60: ParameterValue
    years_60_plus: ParameterValue

    def get(self, band: AgeBand | str) -> ParameterValue:
        band = AgeBand(band)
        return {
            AgeBand.YEARS_20_40: self.years_20_40,
            AgeBand.YEARS_40_60: self.years_40_60,
            AgeBand.YEARS_60_PLUS: self.years_60_plus,
        }[band]

    def to_dict(self) -> dict[str, int]:
        return {band.value: self.get(band) for band in AgeBand}


@dataclass(frozen=True)
class NumerologyProfile:
    """Nine scalars plus three age-banded families."""

    # === Base parameters ===
    I: ParameterValue
    II: ParameterValue
    III: ParameterValue
    IV: ParameterValue
    V: ParameterValue

    # === Secondary parameters ===
    A: ParameterValue
    B: ParameterValue
    C: ParameterValue
    D: ParameterValue

    # === Age-banded families ===
    spirit_line: LineBands
    matter_line: LineBands
    connection: LineBands

    def scalar(self, parameter: ScalarParameter) -> ParameterValue:
        return getattr(self, parameter.value)

    def family(self, family: BandedFamily) -> LineBands:
        return getattr(self, family.value)

    def all_values(self) -> list[ParameterValue]:
        """Every value in the profile, scalars first, then bands family by family."""
        values = [self.scalar(p) for p in BASE_PARAMETERS + SECONDARY_PARAMETERS]
        for family in BandedFamily:
            values.extend(self.family(family).get(band) for band in AgeBand)
        return values

    def to_dict(self) -> dict:
        result: dict = {
            p.value: self.scalar(p) for p in BASE_PARAMETERS + SECONDARY_PARAMETERS
        }
        for family in BandedFamily:
            result[family.value] = self.family(family).to_dict()
        return result
