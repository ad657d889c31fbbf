"""Blend Schemas: Pydantic models for the flower, recipe and questionnaire endpoints.

Invariants:
    - BirthDateIn range-checks fields; calendar validity is checked by BirthDate.create
    - RecommendationRequest carries exactly one of answers / votes
    - Response models are built from core dataclasses via from_attributes

Design Decisions:
    - Field-level bounds (ge/le) for fast 400s; the core keeps its own checks so
      it stays correct when called without the HTTP shell
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sofia_blend.core.birth_date import MAX_BIRTH_YEAR, MIN_BIRTH_YEAR, BirthDate
from sofia_blend.core.domain_types import AgeBand


class BirthDateIn(BaseModel):
    """Birth date as entered by the user."""
    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=MIN_BIRTH_YEAR, le=MAX_BIRTH_YEAR)

    def to_birth_date(self) -> BirthDate:
        return BirthDate.create(self.day, self.month, self.year)


class FlowerRequest(BirthDateIn):
    """Wisdom Flower calculation request; age defaults to the current-year difference."""
    age: int | None = Field(None, ge=0, le=150)


class ParameterReadingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str
    value: int
    energy: str
    main_oil: str
    supporting_actions: str
    interpretation: str


class FlowerResponse(BaseModel):
    age: int
    age_band: AgeBand
    profile: dict
    readings: list[ParameterReadingOut]


# --- Recipes -------------------------------------------------------------------

class RecipeDefinitionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    purpose: str
    parameters: list[str]
    when_to_use: str
    helps: str
    is_age_sensitive: bool


class ComposeRequest(BaseModel):
    """Compose a named recipe for a birth date."""
    recipe_name: str = Field(min_length=1, max_length=200)
    birth_date: BirthDateIn
    age: int | None = Field(None, ge=0, le=150)

    @field_validator("recipe_name")
    @classmethod
    def strip_recipe_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("recipe_name cannot be empty or whitespace")
        return v


class IngredientOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    parameter: str
    parameter_name: str
    value: int
    energy: str
    main_oil: str
    additional_oils: list[str]
    drops: int


class ComposedRecipeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    purpose: str
    when_to_use: str
    helps: str
    age_band: AgeBand
    ingredients: list[IngredientOut]
    total_drops: int


class ComposeResponse(BaseModel):
    age: int
    profile: dict
    recipe: ComposedRecipeOut


# --- Questionnaire -------------------------------------------------------------

class AnswerOptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    text: str
    recipe: str


class QuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question: str
    options: list[AnswerOptionOut]


class RecommendationRequest(BaseModel):
    """Either option indices (one per question) or raw recipe-name votes."""
    answers: list[int] | None = None
    votes: list[str] | None = None

    @model_validator(mode="after")
    def exactly_one_source(self) -> "RecommendationRequest":
        if (self.answers is None) == (self.votes is None):
            raise ValueError("provide exactly one of 'answers' or 'votes'")
        return self


class RecommendationResponse(BaseModel):
    recipe_name: str
    tally: dict[str, int]
    recipe: RecipeDefinitionOut
