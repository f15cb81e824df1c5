"""Tests for the selection state machine and display pipeline."""

import pytest

from lib.recipe_browser import (
    ControlGroup,
    Control,
    HtmlSurface,
    RecipeBrowser,
    SelectionEvent,
    SelectionState,
    apply_event,
    build_view,
    update_display,
)
from lib.recipe_catalog import Difficulty, Recipe, SAMPLE_RECIPES
from lib.recipe_filters import FilterKind
from lib.recipe_sorting import SortKind
from templates.recipe_card_template import EMPTY_STATE_MESSAGE


def ids(recipes):
    return [r.id for r in recipes]


class RecordingSurface:
    """Surface that keeps every content update."""

    def __init__(self):
        self.updates = []

    def set_content(self, html):
        self.updates.append(html)


class TestSelectionState:
    def test_defaults(self):
        state = SelectionState()
        assert state.active_filter is FilterKind.ALL
        assert state.active_sort is SortKind.NONE

    def test_with_filter_leaves_sort(self):
        state = SelectionState(active_sort=SortKind.TIME).with_filter(FilterKind.EASY)
        assert state == SelectionState(FilterKind.EASY, SortKind.TIME)


class TestSelectionEvent:
    def test_from_dict(self):
        event = SelectionEvent.from_dict({"group": "filter", "key": "hard"})
        assert event == SelectionEvent("filter", "hard")

    def test_from_dict_rejects_non_object(self):
        """A list or string body is not a selection."""
        with pytest.raises(ValueError, match="object"):
            SelectionEvent.from_dict(["filter", "easy"])
        with pytest.raises(ValueError):
            SelectionEvent.from_dict("filter=easy")

    def test_from_dict_requires_group_and_key(self):
        with pytest.raises(ValueError):
            SelectionEvent.from_dict({"group": "filter"})
        with pytest.raises(ValueError):
            SelectionEvent.from_dict({"key": "hard"})


class TestApplyEvent:
    def test_filter_event_only_changes_filter(self):
        state = SelectionState(active_sort=SortKind.NAME)
        new_state, warnings = apply_event(state, SelectionEvent("filter", "quick"))
        assert new_state == SelectionState(FilterKind.QUICK, SortKind.NAME)
        assert warnings == []

    def test_sort_event_only_changes_sort(self):
        state = SelectionState(active_filter=FilterKind.HARD)
        new_state, _ = apply_event(state, SelectionEvent("sort", "time"))
        assert new_state == SelectionState(FilterKind.HARD, SortKind.TIME)

    def test_does_not_modify_original_state(self):
        state = SelectionState()
        apply_event(state, SelectionEvent("filter", "easy"))
        assert state == SelectionState()

    def test_unknown_filter_falls_back_with_warning(self):
        state = SelectionState(active_filter=FilterKind.HARD)
        new_state, warnings = apply_event(state, SelectionEvent("filter", "vegan"))
        assert new_state.active_filter is FilterKind.ALL
        assert len(warnings) == 1
        assert "vegan" in warnings[0]

    def test_unknown_sort_falls_back_with_warning(self):
        state = SelectionState(active_sort=SortKind.NAME)
        new_state, warnings = apply_event(state, SelectionEvent("sort", "rating"))
        assert new_state.active_sort is SortKind.NONE
        assert "rating" in warnings[0]

    def test_unknown_group_raises(self):
        with pytest.raises(ValueError, match="Unknown selection group"):
            apply_event(SelectionState(), SelectionEvent("colour", "red"))


class TestBuildView:
    def test_default_state_is_full_catalog(self):
        assert list(build_view(SAMPLE_RECIPES, SelectionState())) == list(SAMPLE_RECIPES)

    def test_hard_by_name(self):
        view = build_view(SAMPLE_RECIPES, SelectionState(FilterKind.HARD, SortKind.NAME))
        assert [r.title for r in view] == ["Beef Wellington", "Thai Green Curry"]

    def test_easy_by_time(self):
        view = build_view(SAMPLE_RECIPES, SelectionState(FilterKind.EASY, SortKind.TIME))
        assert ids(view) == [3, 5, 1]

    def test_all_ten_combinations_match_composition(self):
        """Sorting a filtered view equals the view built for that state."""
        from lib.recipe_filters import apply_filter
        from lib.recipe_sorting import apply_sort

        for f in FilterKind:
            for s in SortKind:
                expected = apply_sort(apply_filter(SAMPLE_RECIPES, f), s)
                assert list(build_view(SAMPLE_RECIPES, SelectionState(f, s))) == list(expected)


class TestUpdateDisplay:
    def test_renders_and_returns_view(self, capsys):
        surface = RecordingSurface()
        view = update_display(SelectionState(FilterKind.HARD), SAMPLE_RECIPES, surface)

        assert ids(view) == [4, 8]
        assert len(surface.updates) == 1
        assert "Beef Wellington" in surface.updates[0]
        assert "Spaghetti Carbonara" not in surface.updates[0]
        assert "Displaying 2 recipes (Filter: hard, Sort: none)" in capsys.readouterr().out

    def test_empty_view_renders_empty_state(self):
        recipes = [Recipe(1, "Toast", "breakfast", Difficulty.EASY, 5, "", "")]
        surface = RecordingSurface()

        view = update_display(SelectionState(FilterKind.HARD), recipes, surface)

        assert view == []
        assert EMPTY_STATE_MESSAGE in surface.updates[0]
        assert "recipe-card" not in surface.updates[0]


class TestControlGroup:
    def test_mark_active_sets_exactly_one(self):
        group = ControlGroup("filter", [Control("all", "All"), Control("easy", "Easy")])
        group.mark_active("easy")
        assert [c.active for c in group.controls] == [False, True]
        assert group.active_value() == "easy"

    def test_unknown_value_clears_all(self):
        group = ControlGroup("sort", [Control("none", "Default")])
        group.mark_active("rating")
        assert group.active_value() is None


class TestRecipeBrowser:
    def test_start_renders_default_state(self):
        surface = RecordingSurface()
        browser = RecipeBrowser(SAMPLE_RECIPES, surface)

        browser.start()

        assert browser.state == SelectionState()
        assert browser.filter_controls.active_value() == "all"
        assert browser.sort_controls.active_value() == "none"
        assert surface.updates[0].count('class="recipe-card"') == 8

    def test_uses_html_surface_by_default(self):
        browser = RecipeBrowser(SAMPLE_RECIPES)
        browser.start()
        assert isinstance(browser.surface, HtmlSurface)
        assert "Thai Green Curry" in browser.surface.content

    def test_filter_then_sort(self):
        browser = RecipeBrowser(SAMPLE_RECIPES, RecordingSurface())
        browser.start()

        browser.dispatch(SelectionEvent("filter", "hard"))
        browser.dispatch(SelectionEvent("sort", "name"))

        assert [r.title for r in browser.current_view()] == ["Beef Wellington", "Thai Green Curry"]
        assert browser.filter_controls.active_value() == "hard"
        assert browser.sort_controls.active_value() == "name"

    def test_every_dispatch_renders_once(self):
        surface = RecordingSurface()
        browser = RecipeBrowser(SAMPLE_RECIPES, surface)
        browser.start()

        browser.dispatch(SelectionEvent("filter", "easy"))
        browser.dispatch(SelectionEvent("sort", "time"))

        assert len(surface.updates) == 3

    def test_view_is_rebuilt_from_full_catalog(self):
        """Widening the filter brings back recipes hidden by the last one."""
        browser = RecipeBrowser(SAMPLE_RECIPES, RecordingSurface())
        browser.start()

        browser.dispatch(SelectionEvent("filter", "hard"))
        browser.dispatch(SelectionEvent("filter", "all"))

        assert len(browser.current_view()) == 8

    def test_sort_event_leaves_filter_control(self):
        browser = RecipeBrowser(SAMPLE_RECIPES, RecordingSurface())
        browser.start()
        browser.dispatch(SelectionEvent("filter", "medium"))

        browser.dispatch(SelectionEvent("sort", "time"))

        assert browser.filter_controls.active_value() == "medium"
        assert ids(browser.current_view()) == [7, 2, 6]

    def test_unknown_key_returns_warning(self):
        browser = RecipeBrowser(SAMPLE_RECIPES, RecordingSurface())
        browser.start()
        browser.dispatch(SelectionEvent("filter", "hard"))

        warnings = browser.dispatch(SelectionEvent("filter", "vegan"))

        assert warnings
        assert browser.state.active_filter is FilterKind.ALL
        assert browser.filter_controls.active_value() == "all"

    def test_unknown_group_leaves_state(self):
        surface = RecordingSurface()
        browser = RecipeBrowser(SAMPLE_RECIPES, surface)
        browser.start()

        with pytest.raises(ValueError):
            browser.dispatch(SelectionEvent("colour", "red"))

        assert browser.state == SelectionState()
        assert len(surface.updates) == 1

    def test_reset(self):
        browser = RecipeBrowser(SAMPLE_RECIPES, RecordingSurface())
        browser.start()
        browser.dispatch(SelectionEvent("filter", "quick"))
        browser.dispatch(SelectionEvent("sort", "name"))

        browser.reset()

        assert browser.state == SelectionState()
        assert browser.filter_controls.active_value() == "all"
        assert browser.sort_controls.active_value() == "none"
        assert len(browser.current_view()) == 8

    def test_never_mutates_catalog(self):
        recipes = list(SAMPLE_RECIPES)
        browser = RecipeBrowser(recipes, RecordingSurface())
        browser.start()
        browser.dispatch(SelectionEvent("sort", "name"))
        browser.dispatch(SelectionEvent("filter", "easy"))
        assert recipes == list(SAMPLE_RECIPES)
