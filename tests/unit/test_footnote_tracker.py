#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_footnote_tracker.py
"""Unit tests for FootnoteIndexTracker."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2html.utils.footnotes import FootnoteIndexTracker


@pytest.mark.unit
class TestFootnoteIndexTracker:
    """Tests for first-seen footnote numbering."""

    def test_first_identifier_gets_one(self):
        """Test that numbering starts at 1."""
        assert FootnoteIndexTracker().get_index("note1") == 1

    def test_encounter_order_not_sorted_order(self):
        """Test that indices follow encounter order rather than identifier value."""
        tracker = FootnoteIndexTracker()
        assert tracker.get_index("z") == 1
        assert tracker.get_index("10") == 2
        assert tracker.get_index("2") == 3
        assert tracker.get_index("a") == 4

    def test_repeat_returns_same_index(self):
        """Test that a repeated identifier keeps its index."""
        tracker = FootnoteIndexTracker()
        tracker.get_index("a")
        tracker.get_index("b")
        assert tracker.get_index("a") == 1
        assert tracker.get_index("b") == 2
        assert len(tracker) == 2

    def test_identifiers_compared_by_value(self):
        """Test that equal strings built separately share an index."""
        tracker = FootnoteIndexTracker()
        first = tracker.get_index("".join(["no", "te"]))
        assert tracker.get_index("note") == first

    def test_contains_and_items(self):
        """Test the inspection helpers."""
        tracker = FootnoteIndexTracker()
        tracker.get_index("b")
        tracker.get_index("a")
        assert "a" in tracker
        assert "c" not in tracker
        assert list(tracker.items()) == [("b", 1), ("a", 2)]

    def test_trackers_are_independent(self):
        """Test that two trackers never share state."""
        first = FootnoteIndexTracker()
        second = FootnoteIndexTracker()
        first.get_index("x")
        assert second.get_index("y") == 1
        assert "x" not in second


@pytest.mark.unit
@pytest.mark.fuzzing
class TestFootnoteIndexFuzzing:
    """Property-based tests for index stability."""

    @given(st.lists(st.text(max_size=3)))
    def test_indices_follow_first_appearance(self, identifiers):
        """Test that earlier first appearances always get smaller indices."""
        tracker = FootnoteIndexTracker()
        results = [tracker.get_index(identifier) for identifier in identifiers]

        first_seen = list(dict.fromkeys(identifiers))
        expected = {identifier: position + 1 for position, identifier in enumerate(first_seen)}
        assert results == [expected[identifier] for identifier in identifiers]
        assert len(tracker) == len(first_seen)
