"""Domain Types: rich types that replace bare primitives across the engine.

Invariants:
    - ParameterValue is bounded 1–12 (the digit reducer's codomain)
    - Parameter keys and age bands are Enums: no raw string matching in core logic
    - Enum values are the wire names ("I", "spirit_line", "20_40")

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

ParameterValue = NewType("ParameterValue", int)   # 1–12

MIN_PARAMETER_VALUE: int = 1
MAX_PARAMETER_VALUE: int = 12


# ─── Enums ───────────────────────────────────────────────────────

class ScalarParameter(str, Enum):
    """Directly derived parameters: five base, four secondary."""
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    A = "A"
    B = "B"
    C = "C"
    D = "D"


BASE_PARAMETERS: tuple[ScalarParameter, ...] = (
    ScalarParameter.I, ScalarParameter.II, ScalarParameter.III,
    ScalarParameter.IV, ScalarParameter.V,
)
SECONDARY_PARAMETERS: tuple[ScalarParameter, ...] = (
    ScalarParameter.A, ScalarParameter.B, ScalarParameter.C, ScalarParameter.D,
)


class BandedFamily(str, Enum):
    """Parameter families with one value per age band."""
    SPIRIT_LINE = "spirit_line"
    MATTER_LINE = "matter_line"
    CONNECTION = "connection"

    @property
    def display_name(self) -> str:
        return _FAMILY_DISPLAY_NAMES[self]


_FAMILY_DISPLAY_NAMES = {
    BandedFamily.SPIRIT_LINE: "Линия духа",
    BandedFamily.MATTER_LINE: "Линия материи",
    BandedFamily.CONNECTION: "Соединение",
}


class AgeBand(str, Enum):
    """Age ranges under which banded families have their own values."""
    YEARS_20_40 = "20_40"
    YEARS_40_60 = "40_60"
    YEARS_60_PLUS = "60_plus"

    @property
    def label(self) -> str:
        """Human label used in band-qualified parameter names ("20-40", "60+")."""
        return _BAND_LABELS[self]


_BAND_LABELS = {
    AgeBand.YEARS_20_40: "20-40",
    AgeBand.YEARS_40_60: "40-60",
    AgeBand.YEARS_60_PLUS: "60+",
}


def parse_parameter_key(key: str) -> ScalarParameter | BandedFamily | None:
    """Map a catalog parameter key to its enum, or None if it names nothing."""
    try:
        return ScalarParameter(key)
    except ValueError:
        pass
    try:
        return BandedFamily(key)
    except ValueError:
        return None
