"""Recipe Catalog: static recipe name -> RecipeDefinition mapping.

Invariants:
    - Every parameter key is a ScalarParameter or BandedFamily value
    - Parameter order is the ingredient order of the composed blend
    - Catalog is read-only after import; keys equal RecipeDefinition.name

Design Decisions:
    - Age variants are not separate catalog entries: a recipe that lists a banded
      family is age-sensitive, and the composer picks the band (ADR: one band rule)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from sofia_blend.core.domain_types import BandedFamily
from sofia_blend.core.errors import UnknownRecipeError


@dataclass(frozen=True)
class RecipeDefinition:
    """Named blend: which parameters it draws on and how to use it."""
    name: str
    purpose: str
    parameters: tuple[str, ...]
    when_to_use: str
    helps: str

    @property
    def is_age_sensitive(self) -> bool:
        family_keys = {family.value for family in BandedFamily}
        return any(key in family_keys for key in self.parameters)


WHOLE_IMAGE = "Целостный образ"
PATH_TO_SOUL = "Путь к душе"
WORKING_WITH_RESISTANCE = "Работа с сопротивлением"
DIALOGUE_WITH_SHADOW = "Диалог с Тенью"
DANCE_OF_UNCONSCIOUS = "Танец Бессознательного"
AROMA_OF_PURPOSE = "Аромат предназначения"
BREATH_OF_LIFE = "Дыхание жизни"


_RECIPES: tuple[RecipeDefinition, ...] = (
    RecipeDefinition(
        name=WHOLE_IMAGE,
        purpose=(
            "Создание устойчивого, гармоничного образа себя, "
            "интеграция личностных аспектов"
        ),
        parameters=("I", "II", "III", "V"),
        when_to_use="При важном выступлении, общении, прояснении своей позиции",
        helps=(
            "Создать гармоничный образ, в котором ваше внешнее проявление будет "
            "соответствовать внутреннему состоянию, а самовыражение станет полным и ярким."
        ),
    ),
    RecipeDefinition(
        name=PATH_TO_SOUL,
        purpose=(
            "Энергетическая подпитка в моменты упадка сил, возвращение к себе, "
            "укрепление стержня и центра"
        ),
        parameters=("V", "II", "B"),
        when_to_use="При усталости, потере опоры, разочаровании, депрессии",
        helps=(
            "Собраться в трудную минуту, когда мы чувствуем, что потеряли "
            "вдохновение и ресурс"
        ),
    ),
    RecipeDefinition(
        name=WORKING_WITH_RESISTANCE,
        purpose=(
            "Осознание внутренних блоков, которые мешают действовать, преодоление "
            "внутреннего сопротивления и неуверенности"
        ),
        parameters=("IV", "D", "C"),
        when_to_use="В терапевтическом процессе, в период прокрастинации",
        helps="Осознать, какие убеждения мешают реализации планов",
    ),
    RecipeDefinition(
        name=DIALOGUE_WITH_SHADOW,
        purpose=(
            "Принятие непризнанных сторон личности, работа с теневыми аспектами, "
            "внутренняя честность"
        ),
        parameters=("A", "B", "C", "D"),
        when_to_use="При внутреннем конфликте, эмоциональных вспышках, снах с тревогой",
        helps=(
            "Можно использовать при работе с психологом или при выполнении практик "
            "на разбор раздражающих или восхищающих ситуаций"
        ),
    ),
    RecipeDefinition(
        name=DANCE_OF_UNCONSCIOUS,
        purpose=(
            "Раскрытие интуитивных озарений, интеграция образов из снов, искусства, "
            "работы с символами"
        ),
        parameters=("III", "C", "connection"),
        when_to_use="Вечером, перед сном, после снов, при ощущении вдохновения",
        helps=(
            "Найти ответы в глубинах психики и понять информацию, полученную "
            "в сновидении или озарении"
        ),
    ),
    RecipeDefinition(
        name=AROMA_OF_PURPOSE,
        purpose=(
            "Поиск смысла, определение направления, поддержка в осознании "
            "призвания и предназначения"
        ),
        parameters=("spirit_line", "matter_line", "connection"),
        when_to_use="В период смены работы, жизненных целей, выбора пути",
        helps=(
            "Найти сферу, где духовный рост и материальное благосостояние "
            "будут гармонично реализованы."
        ),
    ),
    RecipeDefinition(
        name=BREATH_OF_LIFE,
        purpose=(
            "Наполнение энергией и поддержкой изнутри, работа с привычными "
            "реакциями, жизненная сила"
        ),
        parameters=("I", "A", "matter_line"),
        when_to_use="При старте новых дел, реализации творческих проектов",
        helps="Когда нужно быстро восстановиться, обрести внутреннюю силу",
    ),
)

RECIPE_CATALOG: MappingProxyType[str, RecipeDefinition] = MappingProxyType(
    {recipe.name: recipe for recipe in _RECIPES}
)


def get_recipe(
    recipe_name: str,
    catalog: Mapping[str, RecipeDefinition] = RECIPE_CATALOG,
) -> RecipeDefinition:
    """Definition by name. Raises UnknownRecipeError."""
    recipe = catalog.get(recipe_name)
    if recipe is None:
        raise UnknownRecipeError(recipe_name)
    return recipe


def list_recipes() -> list[RecipeDefinition]:
    """All definitions in catalog order."""
    return list(RECIPE_CATALOG.values())
