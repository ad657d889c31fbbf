"""Wisdom Flower: derives the numerology profile and its oil readout for a birth date.

Invariants:
    - Birth date is validated by BirthDate.create (InvalidBirthDateError -> 400)
    - Missing age is computed from today's date (whole-year difference)

Design Decisions:
    - resolve_request_age exported for reuse by the recipes router (DRY over duplication)
"""

import logging
from datetime import date

from fastapi import APIRouter

from sofia_blend.core.birth_date import BirthDate, age_in_years
from sofia_blend.core.derive_profile import derive_profile
from sofia_blend.core.flower_report import describe_profile
from sofia_blend.core.resolve_age_band import resolve_age_band
from sofia_blend.schemas.blend import FlowerRequest, FlowerResponse, ParameterReadingOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/flower", tags=["flower"])


def resolve_request_age(birth_date: BirthDate, age: int | None) -> int:
    """Explicit age wins; otherwise the age this calendar year."""
    if age is not None:
        return age
    return age_in_years(birth_date, date.today())


@router.post("", response_model=FlowerResponse)
async def calculate_flower(body: FlowerRequest):
    """Derive the profile and describe every parameter."""
    birth_date = body.to_birth_date()
    age = resolve_request_age(birth_date, body.age)
    profile = derive_profile(birth_date)
    return FlowerResponse(
        age=age,
        age_band=resolve_age_band(age),
        profile=profile.to_dict(),
        readings=[
            ParameterReadingOut.model_validate(reading)
            for reading in describe_profile(profile)
        ],
    )
