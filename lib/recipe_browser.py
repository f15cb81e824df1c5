"""Selection state and the filter -> sort -> render pipeline.

The displayed view is always rebuilt from the full catalog:

    view = apply_sort(apply_filter(recipes, state.active_filter), state.active_sort)

Nothing derived from a previous run is reused.
"""

from dataclasses import dataclass, field, replace
from typing import Protocol, Sequence

from lib.recipe_catalog import Recipe
from lib.recipe_filters import FilterKind, apply_filter, parse_filter_kind
from lib.recipe_sorting import SortKind, apply_sort, parse_sort_kind
from templates.recipe_card_template import render_recipes

FILTER_GROUP = "filter"
SORT_GROUP = "sort"

FILTER_LABELS = {
    FilterKind.ALL: "All Recipes",
    FilterKind.EASY: "Easy",
    FilterKind.MEDIUM: "Medium",
    FilterKind.HARD: "Hard",
    FilterKind.QUICK: "Quick (30 min or less)",
}

SORT_LABELS = {
    SortKind.NONE: "Default",
    SortKind.NAME: "Name (A-Z)",
    SortKind.TIME: "Time (Fastest)",
}


class DisplaySurface(Protocol):
    def set_content(self, html: str) -> None: ...


class HtmlSurface:
    """In-memory display surface holding the last rendered markup."""

    def __init__(self):
        self.content = ""

    def set_content(self, html: str) -> None:
        self.content = html


@dataclass(frozen=True)
class SelectionState:
    active_filter: FilterKind = FilterKind.ALL
    active_sort: SortKind = SortKind.NONE

    def with_filter(self, kind: FilterKind) -> "SelectionState":
        return replace(self, active_filter=kind)

    def with_sort(self, kind: SortKind) -> "SelectionState":
        return replace(self, active_sort=kind)


@dataclass(frozen=True)
class SelectionEvent:
    """A control was activated: ``group`` is "filter" or "sort"."""
    group: str
    key: str

    @classmethod
    def from_dict(cls, d: dict) -> "SelectionEvent":
        if not isinstance(d, dict):
            raise ValueError("Selection must be an object with 'group' and 'key'")
        group = d.get("group")
        key = d.get("key")
        if not group or not key:
            raise ValueError("Selection requires 'group' and 'key'")
        return cls(group=group, key=key)


@dataclass
class Control:
    value: str
    label: str
    active: bool = False


@dataclass
class ControlGroup:
    """One group of selection controls, at most one of them active."""
    name: str
    controls: list[Control] = field(default_factory=list)

    def mark_active(self, value: str) -> None:
        for control in self.controls:
            control.active = control.value == value

    def active_value(self) -> str | None:
        for control in self.controls:
            if control.active:
                return control.value
        return None


def apply_event(state: SelectionState, event: SelectionEvent) -> tuple[SelectionState, list[str]]:
    """Apply one selection event to ``state``.

    Only the field belonging to the event's group changes. A key that
    names no known filter or sort falls back to the identity selector
    (``all`` / ``none``) and is reported in the returned warnings.

    Returns:
        Tuple of (new SelectionState, list of warnings)

    Raises:
        ValueError: If the event's group is neither "filter" nor "sort"
    """
    warnings = []

    if event.group == FILTER_GROUP:
        kind = parse_filter_kind(event.key)
        if kind is None:
            warnings.append(f"Unknown filter '{event.key}', showing all recipes")
            kind = FilterKind.ALL
        return state.with_filter(kind), warnings

    if event.group == SORT_GROUP:
        kind = parse_sort_kind(event.key)
        if kind is None:
            warnings.append(f"Unknown sort '{event.key}', keeping catalog order")
            kind = SortKind.NONE
        return state.with_sort(kind), warnings

    raise ValueError(f"Unknown selection group: {event.group}")


def build_view(recipes: Sequence[Recipe], state: SelectionState) -> Sequence[Recipe]:
    filtered = apply_filter(recipes, state.active_filter)
    return apply_sort(filtered, state.active_sort)


def update_display(
    state: SelectionState,
    recipes: Sequence[Recipe],
    surface: DisplaySurface,
) -> Sequence[Recipe]:
    """Rebuild the view from the full catalog and render it to ``surface``.

    Returns:
        The view that was rendered
    """
    view = build_view(recipes, state)
    render_recipes(view, surface)
    print(
        f"Displaying {len(view)} recipes "
        f"(Filter: {state.active_filter.value}, Sort: {state.active_sort.value})"
    )
    return view


def _controls(labels: dict) -> list[Control]:
    return [Control(value=kind.value, label=label) for kind, label in labels.items()]


class RecipeBrowser:
    """The page's single selection state, its controls and its surface."""

    def __init__(self, recipes: Sequence[Recipe], surface: DisplaySurface = None):
        self.recipes = tuple(recipes)
        self.surface = surface if surface is not None else HtmlSurface()
        self.state = SelectionState()
        self.filter_controls = ControlGroup(FILTER_GROUP, _controls(FILTER_LABELS))
        self.sort_controls = ControlGroup(SORT_GROUP, _controls(SORT_LABELS))

    def start(self) -> None:
        """Initial render with the default selection."""
        self._mark_controls()
        update_display(self.state, self.recipes, self.surface)

    def dispatch(self, event: SelectionEvent) -> list[str]:
        """Handle one selection event and re-render.

        Returns:
            Warnings raised while applying the event
        """
        self.state, warnings = apply_event(self.state, event)
        if event.group == FILTER_GROUP:
            self.filter_controls.mark_active(self.state.active_filter.value)
        else:
            self.sort_controls.mark_active(self.state.active_sort.value)
        update_display(self.state, self.recipes, self.surface)
        return warnings

    def reset(self) -> None:
        self.state = SelectionState()
        self.start()

    def current_view(self) -> Sequence[Recipe]:
        return build_view(self.recipes, self.state)

    def _mark_controls(self) -> None:
        self.filter_controls.mark_active(self.state.active_filter.value)
        self.sort_controls.mark_active(self.state.active_sort.value)
