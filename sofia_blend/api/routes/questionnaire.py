"""Questionnaire: serves the questions and turns answers into a recipe recommendation.

Invariants:
    - Option indices are converted by votes_from_answers (InvalidAnswerError -> 400)
    - Votes are tallied once; the same tally picks the winner and is returned
    - The winner must exist in the catalog
"""

import logging

from fastapi import APIRouter

from sofia_blend.core.questionnaire import QUESTIONS, votes_from_answers
from sofia_blend.core.recipe_catalog import get_recipe
from sofia_blend.core.select_recipe import pick_winner, tally_votes
from sofia_blend.schemas.blend import (
    QuestionOut,
    RecipeDefinitionOut,
    RecommendationRequest,
    RecommendationResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/questionnaire", tags=["questionnaire"])


@router.get("", response_model=list[QuestionOut])
async def get_questions():
    return [QuestionOut.model_validate(q) for q in QUESTIONS]


@router.post("/recommendation", response_model=RecommendationResponse)
async def recommend(body: RecommendationRequest):
    """Tally the votes and return the winning recipe."""
    votes = body.votes if body.votes is not None else votes_from_answers(body.answers)
    tally = tally_votes(votes)
    recipe_name = pick_winner(tally)
    recipe = get_recipe(recipe_name)
    logger.info(
        f"Recommended '{recipe_name}' from {len(votes)} votes",
        extra={"recipe_name": recipe_name},
    )
    return RecommendationResponse(
        recipe_name=recipe_name,
        tally=tally,
        recipe=RecipeDefinitionOut.model_validate(recipe),
    )
