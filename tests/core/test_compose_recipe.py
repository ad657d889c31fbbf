"""Recipe Composer: tests for compose_recipe on the 1990-05-15 profile.

Tests cover:
    - Scalar-only recipe: values, oils, drop cap, total
    - Age-banded recipe at each band, band-qualified display names
    - Band boundaries 39/40/59/60
    - Drop cap and total invariants across every recipe and band
    - UnknownRecipeError before any work; IncompleteProfileError for bad keys
"""

import logging
from unittest.mock import patch

import pytest

from sofia_blend.core.compose_recipe import MAX_DROPS_PER_OIL, compose_recipe, resolve_parameter
from sofia_blend.core.domain_types import AgeBand
from sofia_blend.core.errors import IncompleteProfileError, UnknownRecipeError
from sofia_blend.core.oil_catalog import lookup_oil
from sofia_blend.core.recipe_catalog import (
    AROMA_OF_PURPOSE,
    DIALOGUE_WITH_SHADOW,
    RECIPE_CATALOG,
    WHOLE_IMAGE,
    RecipeDefinition,
)


# ─── Scalar recipes ──────────────────────────────────────────────

def test_whole_image_ingredients(profile_1990):
    recipe = compose_recipe(WHOLE_IMAGE, profile_1990, 30)
    assert [i.parameter for i in recipe.ingredients] == ["I", "II", "III", "V"]
    assert [i.value for i in recipe.ingredients] == [6, 5, 1, 6]
    assert [i.main_oil for i in recipe.ingredients] == [
        "Роза", "Мята перечная", "Розмарин", "Роза",
    ]
    # Розмарин recommends 3 drops alone, capped at 2 in a blend
    assert [i.drops for i in recipe.ingredients] == [1, 1, 2, 1]
    assert recipe.total_drops == 5


def test_scalar_parameter_name_is_the_key(profile_1990):
    recipe = compose_recipe(DIALOGUE_WITH_SHADOW, profile_1990, 30)
    assert [i.parameter_name for i in recipe.ingredients] == ["A", "B", "C", "D"]
    assert [i.value for i in recipe.ingredients] == [12, 11, 7, 9]
    assert recipe.total_drops == 7


def test_recipe_metadata_copied(profile_1990):
    recipe = compose_recipe(WHOLE_IMAGE, profile_1990, 30)
    definition = RECIPE_CATALOG[WHOLE_IMAGE]
    assert recipe.name == definition.name
    assert recipe.purpose == definition.purpose
    assert recipe.when_to_use == definition.when_to_use
    assert recipe.helps == definition.helps


def test_ingredient_carries_oil_profile_fields(profile_1990):
    ingredient = compose_recipe(WHOLE_IMAGE, profile_1990, 30).ingredients[0]
    oil = lookup_oil(ingredient.value)
    assert ingredient.energy == oil.energy
    assert ingredient.additional_oils == oil.additional_oils


# ─── Age-banded recipe ───────────────────────────────────────────

def test_aroma_of_purpose_young(profile_1990):
    recipe = compose_recipe(AROMA_OF_PURPOSE, profile_1990, 30)
    assert recipe.age_band is AgeBand.YEARS_20_40
    assert [i.parameter_name for i in recipe.ingredients] == [
        "Линия духа 20-40", "Линия материи 20-40", "Соединение 20-40",
    ]
    assert [i.value for i in recipe.ingredients] == [8, 7, 6]
    assert [i.drops for i in recipe.ingredients] == [2, 2, 1]
    assert recipe.total_drops == 5


def test_aroma_of_purpose_mature(profile_1990):
    recipe = compose_recipe(AROMA_OF_PURPOSE, profile_1990, 45)
    assert [i.value for i in recipe.ingredients] == [10, 8, 9]
    assert [i.parameter_name for i in recipe.ingredients][0] == "Линия духа 40-60"
    assert recipe.total_drops == 6


def test_aroma_of_purpose_sixty_plus(profile_1990):
    recipe = compose_recipe(AROMA_OF_PURPOSE, profile_1990, 65)
    assert [i.value for i in recipe.ingredients] == [7, 5, 12]
    assert [i.parameter_name for i in recipe.ingredients][2] == "Соединение 60+"
    assert recipe.total_drops == 5


@pytest.mark.parametrize("age, band", [
    (39, AgeBand.YEARS_20_40),
    (40, AgeBand.YEARS_40_60),
    (59, AgeBand.YEARS_40_60),
    (60, AgeBand.YEARS_60_PLUS),
])
def test_band_boundaries_select_family_values(profile_1990, age, band):
    recipe = compose_recipe(AROMA_OF_PURPOSE, profile_1990, age)
    assert recipe.age_band is band
    assert recipe.ingredients[0].value == profile_1990.spirit_line.get(band)


def test_scalar_recipe_ignores_age(profile_1990):
    young = compose_recipe(WHOLE_IMAGE, profile_1990, 25)
    old = compose_recipe(WHOLE_IMAGE, profile_1990, 75)
    assert young.ingredients == old.ingredients


# ─── Invariants ──────────────────────────────────────────────────

def test_drop_cap_and_total_for_every_recipe_and_band(profile_1990):
    for name in RECIPE_CATALOG:
        for age in (20, 45, 70):
            recipe = compose_recipe(name, profile_1990, age)
            assert len(recipe.ingredients) == len(RECIPE_CATALOG[name].parameters)
            for ingredient in recipe.ingredients:
                expected = min(lookup_oil(ingredient.value).recommended_drops, MAX_DROPS_PER_OIL)
                assert ingredient.drops == expected
                assert 1 <= ingredient.drops <= MAX_DROPS_PER_OIL
            assert recipe.total_drops == sum(i.drops for i in recipe.ingredients)


def test_oil_recommending_more_than_cap_gets_exactly_cap(profile_1990):
    recipe = compose_recipe(AROMA_OF_PURPOSE, profile_1990, 45)
    # connection 40_60 = 9 -> Лаванда, 4 drops recommended
    lavender = recipe.ingredients[2]
    assert lookup_oil(lavender.value).recommended_drops == 4
    assert lavender.drops == 2


def test_compose_is_repeatable(profile_1990):
    assert compose_recipe(AROMA_OF_PURPOSE, profile_1990, 45) == compose_recipe(
        AROMA_OF_PURPOSE, profile_1990, 45,
    )


def test_compose_logs_recipe_name(profile_1990, caplog):
    with caplog.at_level(logging.INFO, logger="sofia_blend.core.compose_recipe"):
        compose_recipe(WHOLE_IMAGE, profile_1990, 30)
    assert caplog.records[-1].recipe_name == WHOLE_IMAGE


# ─── Failures ────────────────────────────────────────────────────

def test_unknown_recipe_raises_before_resolution(profile_1990):
    with patch("sofia_blend.core.compose_recipe.resolve_age_band") as band, \
         patch("sofia_blend.core.compose_recipe.lookup_oil") as oil:
        with pytest.raises(UnknownRecipeError):
            compose_recipe("Неизвестная смесь", profile_1990, 30)
    band.assert_not_called()
    oil.assert_not_called()


def test_unresolvable_key_raises_incomplete_profile(profile_1990):
    catalog = {
        "Broken": RecipeDefinition(
            name="Broken", purpose="", parameters=("I", "VI"),
            when_to_use="", helps="",
        ),
    }
    with pytest.raises(IncompleteProfileError) as exc_info:
        compose_recipe("Broken", profile_1990, 30, catalog=catalog)
    assert exc_info.value.parameter_key == "VI"
    assert exc_info.value.context.recipe_name == "Broken"
    assert exc_info.value.http_status == 500


def test_custom_catalog_is_honoured(profile_1990):
    catalog = {
        "Solo": RecipeDefinition(
            name="Solo", purpose="p", parameters=("matter_line",),
            when_to_use="w", helps="h",
        ),
    }
    recipe = compose_recipe("Solo", profile_1990, 61, catalog=catalog)
    assert recipe.ingredients[0].value == 5
    assert recipe.ingredients[0].parameter_name == "Линия материи 60+"


def test_resolve_parameter_scalar_and_family(profile_1990):
    assert resolve_parameter("V", profile_1990, AgeBand.YEARS_20_40) == (6, "V")
    assert resolve_parameter("connection", profile_1990, AgeBand.YEARS_40_60) == (
        9, "Соединение 40-60",
    )
