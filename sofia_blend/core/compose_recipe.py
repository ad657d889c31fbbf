"""Recipe Composer: RecipeDefinition x NumerologyProfile x age -> ComposedRecipe.

Invariants:
    - Unknown recipe name fails before any parameter is resolved
    - Banded families resolve through resolve_age_band (single threshold rule)
    - drops = min(recommended_drops, MAX_DROPS_PER_OIL) for every ingredient
    - total_drops == sum of ingredient drops; ingredient order == recipe parameter order
    - All-or-nothing: a full ComposedRecipe or an exception, never a partial list

Design Decisions:
    - catalog is an explicit keyword argument: callers and tests can supply their own
      definitions without touching the module-level table
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from sofia_blend.core.domain_types import AgeBand, BandedFamily, ScalarParameter, parse_parameter_key
from sofia_blend.core.errors import IncompleteProfileError
from sofia_blend.core.numerology_profile import NumerologyProfile
from sofia_blend.core.oil_catalog import lookup_oil
from sofia_blend.core.recipe_catalog import RECIPE_CATALOG, RecipeDefinition, get_recipe
from sofia_blend.core.resolve_age_band import resolve_age_band

logger = logging.getLogger(__name__)

MAX_DROPS_PER_OIL: int = 2


@dataclass(frozen=True)
class ComposedIngredient:
    """One resolved parameter of a blend and the oil it contributes."""
    parameter: str
    parameter_name: str
    value: int
    energy: str
    main_oil: str
    additional_oils: tuple[str, ...]
    drops: int


@dataclass(frozen=True)
class ComposedRecipe:
    """A recipe instantiated for one profile and age."""
    name: str
    purpose: str
    when_to_use: str
    helps: str
    age_band: AgeBand
    ingredients: tuple[ComposedIngredient, ...]
    total_drops: int


def compose_recipe(
    recipe_name: str,
    profile: NumerologyProfile,
    age: int,
    *,
    catalog: Mapping[str, RecipeDefinition] = RECIPE_CATALOG,
) -> ComposedRecipe:
    """Resolve every parameter of the recipe and cap the drops per oil."""
    recipe = get_recipe(recipe_name, catalog)
    band = resolve_age_band(age)

    ingredients = tuple(
        _compose_ingredient(key, profile, band, recipe.name)
        for key in recipe.parameters
    )
    total_drops = sum(ingredient.drops for ingredient in ingredients)

    logger.info(
        f"Composed recipe '{recipe.name}': {len(ingredients)} oils, {total_drops} drops",
        extra={"recipe_name": recipe.name, "age_band": band.value},
    )
    return ComposedRecipe(
        name=recipe.name,
        purpose=recipe.purpose,
        when_to_use=recipe.when_to_use,
        helps=recipe.helps,
        age_band=band,
        ingredients=ingredients,
        total_drops=total_drops,
    )


def resolve_parameter(
    key: str, profile: NumerologyProfile, band: AgeBand,
    recipe_name: str | None = None,
) -> tuple[int, str]:
    """Value and display name for one catalog key. Raises IncompleteProfileError."""
    parameter = parse_parameter_key(key)
    if isinstance(parameter, BandedFamily):
        return (
            profile.family(parameter).get(band),
            f"{parameter.display_name} {band.label}",
        )
    if isinstance(parameter, ScalarParameter):
        return profile.scalar(parameter), key
    raise IncompleteProfileError(key, recipe_name=recipe_name)


def _compose_ingredient(
    key: str, profile: NumerologyProfile, band: AgeBand, recipe_name: str,
) -> ComposedIngredient:
    value, parameter_name = resolve_parameter(key, profile, band, recipe_name)
    oil = lookup_oil(value)
    return ComposedIngredient(
        parameter=key,
        parameter_name=parameter_name,
        value=value,
        energy=oil.energy,
        main_oil=oil.main_oil,
        additional_oils=oil.additional_oils,
        drops=min(oil.recommended_drops, MAX_DROPS_PER_OIL),
    )
