"""Tests del estado del filtro por región."""

import pytest

from bloommap.models.location import Location
from bloommap.models.overlay import MapOverlay
from bloommap.services.overlay_filter import OverlayFilterSelection
from bloommap.services.overlay_service import build_overlay_stats
from bloommap.utils.mock_data import MOCK_LOCATIONS, MOCK_OVERLAYS


@pytest.fixture
def selection():
    overlays = [MapOverlay.model_validate(o) for o in MOCK_OVERLAYS]
    locations = [Location.model_validate(loc) for loc in MOCK_LOCATIONS]
    return OverlayFilterSelection(build_overlay_stats(overlays, locations))


class TestToggle:
    def test_toggle_adds_then_removes(self, selection):
        selection.toggle(2)
        assert selection.is_selected(2)
        selection.toggle(2)
        assert not selection.is_selected(2)
        assert selection.selected_count == 0


class TestSearch:
    def test_case_insensitive_substring(self, selection):
        names = [o.name for o in selection.search("ANZA")]
        assert names == ["Anza-Borrego Desert State Park, Antelope Valley", "Anza-Borrego"]

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query_returns_all(self, selection, query):
        assert len(selection.search(query)) == 6

    def test_no_match(self, selection):
        assert selection.search("sahara") == []


class TestSelectAll:
    def test_select_all_selects_every_overlay(self, selection):
        selection.select_all()
        assert selection.selected_count == selection.total_count == 6

    def test_select_all_when_all_selected_clears(self, selection):
        selection.select_all()
        selection.select_all()
        assert selection.selected_count == 0

    def test_select_all_uses_search_results(self, selection):
        selection.search("california")
        selection.search("desert")
        selection.select_all()
        assert selection.selected_ids == {1, 5}


class TestClear:
    def test_clear_resets_selection_and_query(self, selection):
        selection.toggle(1)
        selection.search("anza")
        selection.clear()
        assert selection.selected_ids == set()
        assert selection.query == ""
        assert len(selection.results) == 6


class TestSummary:
    def test_sum_of_location_counts(self, selection):
        selection.toggle(1)
        selection.toggle(2)
        assert selection.total_locations_in_selected == 1
        summary = selection.summary()
        assert summary.selectedIds == [1, 2]
        assert summary.selectedCount == 2
        assert summary.totalCount == 6
        assert summary.totalLocationsInSelected == 1
