"""Oil Catalog: static parameter-value -> oil profile table (values 1–12).

Invariants:
    - Exactly one OilProfile per value 1..12; lookup_oil is total over that domain
    - recommended_drops is a positive integer (drops for the oil used on its own)
    - Table is read-only after import (MappingProxyType over frozen dataclasses)

Design Decisions:
    - A missing entry is a catalog defect (OilProfileMissingError, 500), not a caller error
"""

from dataclasses import dataclass
from types import MappingProxyType

from sofia_blend.core.domain_types import ParameterValue
from sofia_blend.core.errors import OilProfileMissingError


@dataclass(frozen=True)
class OilProfile:
    """Oil recommendation for one parameter value."""
    value: ParameterValue
    energy: str
    main_oil: str
    additional_oils: tuple[str, ...]
    recommended_drops: int
    supporting_actions: str
    interpretation: str


_OIL_PROFILES: tuple[OilProfile, ...] = (
    OilProfile(
        value=ParameterValue(1),
        energy="Лидерство",
        main_oil="Розмарин",
        additional_oils=("Лимон", "Имбирь", "Чёрный перец"),
        recommended_drops=3,
        supporting_actions="Начинать новое, брать ответственность, проявлять инициативу",
        interpretation="Энергия первого шага, воли и самостоятельности",
    ),
    OilProfile(
        value=ParameterValue(2),
        energy="Партнёрство",
        main_oil="Герань",
        additional_oils=("Пальмароза", "Иланг-иланг"),
        recommended_drops=2,
        supporting_actions="Договариваться, слушать, искать баланс в отношениях",
        interpretation="Энергия союза, мягкости и взаимной поддержки",
    ),
    OilProfile(
        value=ParameterValue(3),
        energy="Творчество",
        main_oil="Апельсин",
        additional_oils=("Мандарин", "Грейпфрут", "Кориандр"),
        recommended_drops=4,
        supporting_actions="Писать, рисовать, выступать, делиться идеями",
        interpretation="Энергия самовыражения, радости и лёгкости",
    ),
    OilProfile(
        value=ParameterValue(4),
        energy="Структура",
        main_oil="Кедр",
        additional_oils=("Ветивер", "Кипарис"),
        recommended_drops=2,
        supporting_actions="Планировать, наводить порядок, доводить дела до конца",
        interpretation="Энергия опоры, дисциплины и надёжности",
    ),
    OilProfile(
        value=ParameterValue(5),
        energy="Свобода",
        main_oil="Мята перечная",
        additional_oils=("Эвкалипт", "Лемонграсс"),
        recommended_drops=1,
        supporting_actions="Путешествовать, пробовать новое, менять обстановку",
        interpretation="Энергия перемен, движения и любознательности",
    ),
    OilProfile(
        value=ParameterValue(6),
        energy="Гармония",
        main_oil="Роза",
        additional_oils=("Жасмин", "Нероли", "Пальмароза"),
        recommended_drops=1,
        supporting_actions="Заботиться о близких, создавать красоту и уют",
        interpretation="Энергия любви, красоты и ответственности за близких",
    ),
    OilProfile(
        value=ParameterValue(7),
        energy="Мудрость",
        main_oil="Ладан",
        additional_oils=("Сандал", "Мирра"),
        recommended_drops=3,
        supporting_actions="Медитировать, учиться, уединяться для размышлений",
        interpretation="Энергия познания, глубины и духовного поиска",
    ),
    OilProfile(
        value=ParameterValue(8),
        energy="Сила",
        main_oil="Пачули",
        additional_oils=("Гвоздика", "Корица", "Мускатный орех"),
        recommended_drops=2,
        supporting_actions="Управлять ресурсами, отстаивать границы, достигать целей",
        interpretation="Энергия власти, изобилия и материального воплощения",
    ),
    OilProfile(
        value=ParameterValue(9),
        energy="Служение",
        main_oil="Лаванда",
        additional_oils=("Ромашка", "Мелисса"),
        recommended_drops=4,
        supporting_actions="Помогать другим, завершать циклы, отпускать прошлое",
        interpretation="Энергия сострадания, принятия и завершения",
    ),
    OilProfile(
        value=ParameterValue(10),
        energy="Удача",
        main_oil="Бергамот",
        additional_oils=("Лайм", "Петитгрейн"),
        recommended_drops=3,
        supporting_actions="Замечать возможности, доверять течению жизни",
        interpretation="Энергия цикла, везения и открытости переменам",
    ),
    OilProfile(
        value=ParameterValue(11),
        energy="Интуиция",
        main_oil="Жасмин",
        additional_oils=("Мирт", "Клари шалфей", "Нероли"),
        recommended_drops=1,
        supporting_actions="Записывать сны, слушать внутренний голос, вдохновлять",
        interpretation="Энергия озарения, чувствительности и вдохновения",
    ),
    OilProfile(
        value=ParameterValue(12),
        energy="Трансформация",
        main_oil="Мирра",
        additional_oils=("Ветивер", "Можжевельник"),
        recommended_drops=2,
        supporting_actions="Смотреть на ситуацию с новой стороны, проживать паузу",
        interpretation="Энергия жертвы, переосмысления и внутреннего перерождения",
    ),
)

OIL_PROFILES: MappingProxyType[ParameterValue, OilProfile] = MappingProxyType(
    {profile.value: profile for profile in _OIL_PROFILES}
)


def lookup_oil(value: ParameterValue) -> OilProfile:
    """Oil profile for a parameter value. Raises OilProfileMissingError outside 1..12."""
    profile = OIL_PROFILES.get(value)
    if profile is None:
        raise OilProfileMissingError(value)
    return profile
