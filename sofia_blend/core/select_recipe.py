"""Recommendation Selector: questionnaire votes -> single recipe name.

Invariants:
    - Tally preserves first-insertion order of recipe names
    - Winner has the strictly greatest count; ties go to the first name encountered
    - Empty vote list (or empty tally) raises EmptyVoteListError (no default recipe)

Design Decisions:
    - pick_winner works on an existing tally so callers that also report the
      counts tally once
"""

from sofia_blend.core.errors import EmptyVoteListError


def tally_votes(votes: list[str]) -> dict[str, int]:
    """Count votes per recipe name, keyed in first-seen order."""
    tally: dict[str, int] = {}
    for recipe_name in votes:
        tally[recipe_name] = tally.get(recipe_name, 0) + 1
    return tally


def pick_winner(tally: dict[str, int]) -> str:
    """Highest-count name of a tally, first key on ties."""
    if not tally:
        raise EmptyVoteListError()

    winner, best = "", 0
    for recipe_name, count in tally.items():
        if count > best:
            winner, best = recipe_name, count
    return winner


def select_recipe(votes: list[str]) -> str:
    """Most-voted recipe name, first-encountered on ties."""
    return pick_winner(tally_votes(votes))
