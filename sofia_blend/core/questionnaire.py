"""Questionnaire: static questions whose options each vote for one recipe.

Invariants:
    - Each option names a recipe present in RECIPE_CATALOG
    - votes_from_answers takes exactly one option index per question, in question order
    - Pure data + one pure conversion; tallying is select_recipe's job
"""

from dataclasses import dataclass

from sofia_blend.core.errors import InvalidAnswerError
from sofia_blend.core.recipe_catalog import (
    AROMA_OF_PURPOSE,
    BREATH_OF_LIFE,
    DANCE_OF_UNCONSCIOUS,
    DIALOGUE_WITH_SHADOW,
    PATH_TO_SOUL,
    WHOLE_IMAGE,
    WORKING_WITH_RESISTANCE,
)


@dataclass(frozen=True)
class AnswerOption:
    text: str
    recipe: str


@dataclass(frozen=True)
class Question:
    id: int
    question: str
    options: tuple[AnswerOption, ...]


QUESTIONS: tuple[Question, ...] = (
    Question(
        id=1,
        question="Какой сейчас у Вас жизненный контекст?",
        options=(
            AnswerOption("Подготовка к важному событию", WHOLE_IMAGE),
            AnswerOption("Усталость, потеря вдохновения, сил", PATH_TO_SOUL),
            AnswerOption("Поиск смысла, смена работы, важные решения", AROMA_OF_PURPOSE),
            AnswerOption("Внутренний конфликт, раздражение", DIALOGUE_WITH_SHADOW),
            AnswerOption(
                "Поиск озарений, работа с символами, вдохновение", DANCE_OF_UNCONSCIOUS,
            ),
            AnswerOption("Новое дело, проект, заряд энергии", BREATH_OF_LIFE),
        ),
    ),
    Question(
        id=2,
        question="Какие ощущения хотите усилить?",
        options=(
            AnswerOption("Гармония и уверенность", WHOLE_IMAGE),
            AnswerOption("Энергия и мотивация", PATH_TO_SOUL),
            AnswerOption("Творческое вдохновение", DANCE_OF_UNCONSCIOUS),
            AnswerOption("Внутренняя честность и принятие", DIALOGUE_WITH_SHADOW),
            AnswerOption("Наполнение жизненной силы", BREATH_OF_LIFE),
        ),
    ),
    Question(
        id=3,
        question="Что важно в результате?",
        options=(
            AnswerOption("Создать уверенный и гармоничный образ", WHOLE_IMAGE),
            AnswerOption("Вернуть вдохновение и ресурс", PATH_TO_SOUL),
            AnswerOption("Осознать и преодолеть барьеры", WORKING_WITH_RESISTANCE),
            AnswerOption(
                "Получить озарения и символические ответы", DANCE_OF_UNCONSCIOUS,
            ),
            AnswerOption("Найти предназначение и направление", AROMA_OF_PURPOSE),
            AnswerOption("Быстро восстановиться и зарядиться энергией", BREATH_OF_LIFE),
        ),
    ),
)


def votes_from_answers(
    option_indices: list[int],
    questions: tuple[Question, ...] = QUESTIONS,
) -> list[str]:
    """Map one chosen option per question to the recipe it votes for."""
    if len(option_indices) != len(questions):
        raise InvalidAnswerError(
            f"Expected {len(questions)} answers, got {len(option_indices)}",
        )
    votes = []
    for question, index in zip(questions, option_indices):
        if not 0 <= index < len(question.options):
            raise InvalidAnswerError(
                f"Question {question.id} has no option {index} "
                f"({len(question.options)} options)",
            )
        votes.append(question.options[index].recipe)
    return votes
