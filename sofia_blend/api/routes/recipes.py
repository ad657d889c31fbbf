"""Recipes: catalog listing and per-user recipe composition.

Invariants:
    - Unknown recipe names -> UnknownRecipeError (404 via global handler)
    - Composition delegates entirely to compose_recipe; no drop math here
"""

import logging

from fastapi import APIRouter

from sofia_blend.api.routes.flower import resolve_request_age
from sofia_blend.core.compose_recipe import compose_recipe
from sofia_blend.core.derive_profile import derive_profile
from sofia_blend.core.recipe_catalog import get_recipe, list_recipes
from sofia_blend.schemas.blend import (
    ComposedRecipeOut,
    ComposeRequest,
    ComposeResponse,
    RecipeDefinitionOut,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.get("", response_model=list[RecipeDefinitionOut])
async def get_recipes():
    """All recipes in catalog order."""
    return [RecipeDefinitionOut.model_validate(r) for r in list_recipes()]


@router.get("/{recipe_name}", response_model=RecipeDefinitionOut)
async def get_recipe_definition(recipe_name: str):
    """One recipe definition by name."""
    return RecipeDefinitionOut.model_validate(get_recipe(recipe_name))


@router.post("/compose", response_model=ComposeResponse)
async def compose(body: ComposeRequest):
    """Derive the profile for the birth date and compose the named recipe."""
    birth_date = body.birth_date.to_birth_date()
    age = resolve_request_age(birth_date, body.age)
    profile = derive_profile(birth_date)
    composed = compose_recipe(body.recipe_name, profile, age)
    return ComposeResponse(
        age=age,
        profile=profile.to_dict(),
        recipe=ComposedRecipeOut.model_validate(composed),
    )
