"""Flower Report: per-parameter readout of a NumerologyProfile joined with its oils.

Invariants:
    - Row order: base I..V, secondary A..D, then spirit, matter, connection bands (20_40, 40_60, 60_plus)
    - Every row's oil data comes from lookup_oil(value)
    - 21 rows for any profile (9 scalars + 3 families x 3 bands)
"""

from dataclasses import dataclass
from types import MappingProxyType

from sofia_blend.core.domain_types import (
    AgeBand,
    BandedFamily,
    BASE_PARAMETERS,
    ParameterValue,
    ScalarParameter,
    SECONDARY_PARAMETERS,
)
from sofia_blend.core.numerology_profile import NumerologyProfile
from sofia_blend.core.oil_catalog import lookup_oil


@dataclass(frozen=True)
class ParameterDescription:
    name: str
    interpretation: str


@dataclass(frozen=True)
class ParameterReading:
    """One line of the Wisdom Flower readout."""
    key: str
    name: str
    value: ParameterValue
    energy: str
    main_oil: str
    supporting_actions: str
    interpretation: str


SCALAR_DESCRIPTIONS: MappingProxyType[ScalarParameter, ParameterDescription] = MappingProxyType({
    ScalarParameter.I: ParameterDescription(
        "Личность", "Как вы проявляетесь в мире, ваша природная манера действовать",
    ),
    ScalarParameter.II: ParameterDescription(
        "Душа", "Чем питается ваша душа, что даёт внутреннее наполнение",
    ),
    ScalarParameter.III: ParameterDescription(
        "Род", "Ресурсы и задачи, переданные семьёй и поколением",
    ),
    ScalarParameter.IV: ParameterDescription(
        "Задача воплощения", "Главный урок, который приходит через жизненный опыт",
    ),
    ScalarParameter.V: ParameterDescription(
        "Центр цветка", "Ядро личности, точка опоры и баланса всех энергий",
    ),
    ScalarParameter.A: ParameterDescription(
        "Таланты", "Способности, которые раскрываются через личное действие",
    ),
    ScalarParameter.B: ParameterDescription(
        "Путь души", "Качества, которые развиваются через чувства и отношения",
    ),
    ScalarParameter.C: ParameterDescription(
        "Родовая сила", "Поддержка, доступная через связь с корнями",
    ),
    ScalarParameter.D: ParameterDescription(
        "Испытания", "Области роста, где требуется осознанность",
    ),
})

BAND_DESCRIPTIONS: MappingProxyType[tuple[BandedFamily, AgeBand], ParameterDescription] = MappingProxyType({
    (BandedFamily.SPIRIT_LINE, AgeBand.YEARS_20_40): ParameterDescription(
        "Духовное развитие 20–40 лет", "Этап духовного развития",
    ),
    (BandedFamily.SPIRIT_LINE, AgeBand.YEARS_40_60): ParameterDescription(
        "Зрелость духа 40–60 лет", "Этап зрелости духа",
    ),
    (BandedFamily.SPIRIT_LINE, AgeBand.YEARS_60_PLUS): ParameterDescription(
        "Мудрость 60+ лет", "Мудрость и духовная зрелость",
    ),
    (BandedFamily.MATTER_LINE, AgeBand.YEARS_20_40): ParameterDescription(
        "Реализация 20–40 лет", "Реализация в материи",
    ),
    (BandedFamily.MATTER_LINE, AgeBand.YEARS_40_60): ParameterDescription(
        "Материальные итоги 40–60 лет", "Материальные итоги зрелости",
    ),
    (BandedFamily.MATTER_LINE, AgeBand.YEARS_60_PLUS): ParameterDescription(
        "Итоги материальной жизни", "Итоги материальной жизни",
    ),
    (BandedFamily.CONNECTION, AgeBand.YEARS_20_40): ParameterDescription(
        "Синтез 20–40 лет", "Синтез духа и материи",
    ),
    (BandedFamily.CONNECTION, AgeBand.YEARS_40_60): ParameterDescription(
        "Синтез 40–60 лет", "Синтез духа и материи в зрелости",
    ),
    (BandedFamily.CONNECTION, AgeBand.YEARS_60_PLUS): ParameterDescription(
        "Итог всей жизни", "Итог всей жизни",
    ),
})


def describe_profile(profile: NumerologyProfile) -> list[ParameterReading]:
    """Readout rows for every scalar and every band of the profile."""
    readings = [
        _reading(parameter.value, profile.scalar(parameter), SCALAR_DESCRIPTIONS[parameter])
        for parameter in BASE_PARAMETERS + SECONDARY_PARAMETERS
    ]
    for family in BandedFamily:
        bands = profile.family(family)
        for band in AgeBand:
            readings.append(_reading(
                f"{family.value}.{band.value}",
                bands.get(band),
                BAND_DESCRIPTIONS[(family, band)],
            ))
    return readings


def _reading(key: str, value: ParameterValue, description: ParameterDescription) -> ParameterReading:
    oil = lookup_oil(value)
    return ParameterReading(
        key=key,
        name=description.name,
        value=value,
        energy=oil.energy,
        main_oil=oil.main_oil,
        supporting_actions=oil.supporting_actions,
        interpretation=description.interpretation,
    )
