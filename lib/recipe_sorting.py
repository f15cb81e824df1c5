"""Orderings for the recipe catalog. Sorts always return a new list."""

import unicodedata
from enum import Enum
from typing import Sequence

from lib.recipe_catalog import Recipe


class SortKind(str, Enum):
    NONE = "none"
    NAME = "name"
    TIME = "time"


def parse_sort_kind(value) -> SortKind | None:
    """Map a selector string to a SortKind, or None if it isn't one."""
    if isinstance(value, SortKind):
        return value
    try:
        return SortKind(value)
    except ValueError:
        return None


def collation_key(text: str) -> tuple[str, str]:
    """Locale-style key: "éclair" sorts beside "Eclair".

    Accents and case are ignored first. Titles equal on that level put
    lowercase before uppercase and unaccented before accented.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold(), text.swapcase()


def sort_by_name(recipes: Sequence[Recipe]) -> list[Recipe]:
    """A-Z by title. Identical titles keep their input order."""
    return sorted(recipes, key=lambda recipe: collation_key(recipe.title))


def sort_by_time(recipes: Sequence[Recipe]) -> list[Recipe]:
    """Fastest first. Equal times keep their input order."""
    return sorted(recipes, key=lambda recipe: recipe.time)


def apply_sort(recipes: Sequence[Recipe], kind) -> Sequence[Recipe]:
    """Apply the sort named by ``kind``.

    ``none`` and unrecognised selectors hand back ``recipes`` itself.
    """
    kind = parse_sort_kind(kind)

    if kind is SortKind.NAME:
        return sort_by_name(recipes)
    if kind is SortKind.TIME:
        return sort_by_time(recipes)
    return recipes
