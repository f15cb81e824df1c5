"""Filters for narrowing the recipe catalog.

Every filter returns a new sequence in the original order and never
touches the records themselves. An empty result is a normal result.
"""

from enum import Enum
from typing import Sequence

from lib.recipe_catalog import Difficulty, Recipe

QUICK_MAX_MINUTES = 30


class FilterKind(str, Enum):
    ALL = "all"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    QUICK = "quick"


def parse_filter_kind(value) -> FilterKind | None:
    """Map a selector string to a FilterKind, or None if it isn't one."""
    if isinstance(value, FilterKind):
        return value
    try:
        return FilterKind(value)
    except ValueError:
        return None


def filter_by_difficulty(recipes: Sequence[Recipe], difficulty) -> list[Recipe]:
    """Keep recipes whose difficulty equals ``difficulty``.

    A level no recipe can have (e.g. "extreme") gives an empty list.
    """
    return [recipe for recipe in recipes if recipe.difficulty == difficulty]


def filter_by_time(recipes: Sequence[Recipe], max_minutes: int) -> list[Recipe]:
    """Keep recipes that take ``max_minutes`` or less."""
    return [recipe for recipe in recipes if recipe.time <= max_minutes]


def apply_filter(recipes: Sequence[Recipe], kind) -> Sequence[Recipe]:
    """Apply the filter named by ``kind``.

    ``all`` and unrecognised selectors hand back ``recipes`` itself.
    """
    kind = parse_filter_kind(kind)

    if kind is FilterKind.EASY:
        return filter_by_difficulty(recipes, Difficulty.EASY)
    if kind is FilterKind.MEDIUM:
        return filter_by_difficulty(recipes, Difficulty.MEDIUM)
    if kind is FilterKind.HARD:
        return filter_by_difficulty(recipes, Difficulty.HARD)
    if kind is FilterKind.QUICK:
        return filter_by_time(recipes, QUICK_MAX_MINUTES)
    return recipes
