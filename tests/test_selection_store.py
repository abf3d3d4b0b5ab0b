"""Unit tests for SelectionStore."""
import random

import pytest

from pagepick.core.selection import SelectionStore


class TestSelectionStore:
    """Test suite for SelectionStore."""

    @pytest.fixture
    def store(self):
        return SelectionStore()

    def test_starts_empty(self, store):
        assert store.is_empty()
        assert len(store) == 0
        assert store.sorted_pages == []

    def test_toggle_adds_then_removes(self, store):
        assert store.toggle(3) is True
        assert 3 in store
        assert store.is_selected(3)

        assert store.toggle(3) is False
        assert 3 not in store
        assert store.is_empty()

    def test_final_set_is_pages_toggled_odd_number_of_times(self, store):
        rng = random.Random(1234)
        toggles = [rng.randint(1, 12) for _ in range(200)]

        for page in toggles:
            store.toggle(page)

        expected = {p for p in set(toggles) if toggles.count(p) % 2 == 1}
        assert store.pages == frozenset(expected)

    def test_sorted_view_ignores_toggle_order(self, store):
        for page in (5, 2, 8):
            store.toggle(page)

        assert store.sorted_pages == [2, 5, 8]
        assert list(store) == [2, 5, 8]

    def test_select_all(self, store):
        store.toggle(2)
        store.select_all(5)
        assert store.sorted_pages == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("page_count", [0, 1, 7, 250])
    def test_select_all_then_deselect_all_is_empty(self, store, page_count):
        store.select_all(page_count)
        assert len(store) == page_count

        store.deselect_all()
        assert store.is_empty()

    def test_select_all_zero_pages(self, store):
        store.select_all(0)
        assert store.is_empty()

    def test_reset_clears_any_selection(self, store):
        store.select_all(9)
        store.toggle(4)
        store.reset()
        assert store.is_empty()

    def test_pages_is_a_snapshot(self, store):
        store.toggle(1)
        snapshot = store.pages
        store.toggle(2)
        assert snapshot == frozenset({1})

    def test_selection_changed_reports_count(self, store):
        counts = []
        store.selection_changed.connect(counts.append)

        store.toggle(1)
        store.toggle(2)
        store.toggle(1)
        store.select_all(3)
        store.deselect_all()

        assert counts == [1, 2, 1, 3, 0]

    def test_no_signal_when_bulk_change_is_a_no_op(self, store):
        counts = []
        store.select_all(3)
        store.selection_changed.connect(counts.append)

        store.select_all(3)
        assert counts == []

    def test_reset_always_notifies(self, store):
        counts = []
        store.selection_changed.connect(counts.append)

        store.reset()
        assert counts == [0]
