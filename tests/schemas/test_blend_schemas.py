"""Blend Schemas: boundary validation for request models.

Invariants:
    - BirthDateIn enforces field ranges; calendar validity is left to BirthDate.create
    - RecommendationRequest requires exactly one of answers / votes
    - ComposeRequest strips recipe_name and rejects blank names
"""

import pytest
from pydantic import ValidationError

from sofia_blend.core.errors import InvalidBirthDateError
from sofia_blend.schemas.blend import (
    BirthDateIn,
    ComposeRequest,
    FlowerRequest,
    RecommendationRequest,
)


# --- BirthDateIn ---------------------------------------------------------------

def test_birth_date_in_accepts_valid_fields():
    bd = BirthDateIn(day=15, month=5, year=1990).to_birth_date()
    assert (bd.day, bd.month, bd.year) == (15, 5, 1990)


@pytest.mark.parametrize("fields", [
    {"day": 0, "month": 5, "year": 1990},
    {"day": 15, "month": 13, "year": 1990},
    {"day": 15, "month": 5, "year": 1899},
    {"day": 15, "month": 5, "year": 2026},
])
def test_birth_date_in_rejects_out_of_range(fields):
    with pytest.raises(ValidationError):
        BirthDateIn(**fields)


def test_calendar_check_happens_in_core():
    body = BirthDateIn(day=31, month=2, year=1990)
    with pytest.raises(InvalidBirthDateError):
        body.to_birth_date()


def test_flower_request_age_optional():
    assert FlowerRequest(day=1, month=1, year=2000).age is None
    with pytest.raises(ValidationError):
        FlowerRequest(day=1, month=1, year=2000, age=-1)


# --- ComposeRequest ------------------------------------------------------------

def test_compose_request_strips_recipe_name():
    req = ComposeRequest(
        recipe_name="  Дыхание жизни ", birth_date={"day": 1, "month": 1, "year": 2000},
    )
    assert req.recipe_name == "Дыхание жизни"


def test_compose_request_rejects_blank_recipe_name():
    with pytest.raises(ValidationError):
        ComposeRequest(recipe_name="   ", birth_date={"day": 1, "month": 1, "year": 2000})


# --- RecommendationRequest -----------------------------------------------------

def test_recommendation_accepts_answers():
    assert RecommendationRequest(answers=[0, 1, 2]).answers == [0, 1, 2]


def test_recommendation_accepts_votes():
    assert RecommendationRequest(votes=["R1"]).votes == ["R1"]


def test_recommendation_rejects_both():
    with pytest.raises(ValidationError):
        RecommendationRequest(answers=[0, 0, 0], votes=["R1"])


def test_recommendation_rejects_neither():
    with pytest.raises(ValidationError):
        RecommendationRequest()
