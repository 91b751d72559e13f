"""Tests for the matcher module."""

import pytest

from hl.core.matcher import Matcher, Span
from hl.exceptions import PatternError, UnknownColorError


class TestSpan:
    """Tests for Span."""

    def test_contains_is_half_open(self):
        """Test that the end position is excluded."""
        span = Span(2, 5, "red")

        assert not span.contains(1)
        assert span.contains(2)
        assert span.contains(4)
        assert not span.contains(5)
        assert len(span) == 3


class TestMatcher:
    """Tests for Matcher class."""

    def test_single_match(self):
        """Test a single match produces one span."""
        matcher = Matcher([("red", "abc")])

        assert matcher.find_spans("xxabcxx") == [Span(2, 5, "red")]

    def test_find_all_occurrences(self):
        """Test that every occurrence is reported, not just the first."""
        matcher = Matcher([("red", "foo")])

        spans = matcher.find_spans("foo bar foo")

        assert spans == [Span(0, 3, "red"), Span(8, 11, "red")]

    def test_no_match(self):
        """Test that no match is not an error."""
        matcher = Matcher([("red", "zzz")])

        assert matcher.find_spans("hello") == []

    def test_no_bindings(self):
        """Test matcher without bindings."""
        assert Matcher().find_spans("hello") == []

    def test_sorted_by_start(self):
        """Test that spans from different colors are sorted by start."""
        matcher = Matcher([("blue", "def"), ("red", "ab")])

        spans = matcher.find_spans("abcdef")

        assert [s.start for s in spans] == [0, 3]
        assert [s.color for s in spans] == ["red", "blue"]

    def test_same_color_patterns_kept_separate(self):
        """Test that patterns sharing a color each produce spans."""
        matcher = Matcher([("red", "ab"), ("red", "bc")])

        spans = matcher.find_spans("abc")

        assert spans == [Span(0, 2, "red"), Span(1, 3, "red")]

    def test_bindings_grouped_by_color(self):
        """Test that additive bindings share one PatternBinding."""
        matcher = Matcher([("red", "a"), ("blue", "b"), ("red", "c")])

        bindings = matcher.bindings

        assert [b.color for b in bindings] == ["red", "blue"]
        assert [p.pattern for p in bindings[0].patterns] == ["a", "c"]

    def test_empty_matches_skipped(self):
        """Test that zero-length matches produce no span."""
        matcher = Matcher([("red", "x*")])

        assert matcher.find_spans("abc") == []
        assert matcher.find_spans("axxb") == [Span(1, 3, "red")]

    def test_ignore_case(self):
        """Test case-insensitive matching."""
        matcher = Matcher([("red", "error")], ignore_case=True)

        assert matcher.find_spans("ERROR") == [Span(0, 5, "red")]

    def test_unknown_color(self):
        """Test that an unknown color fails at setup."""
        with pytest.raises(UnknownColorError):
            Matcher([("purple", "foo")])

    def test_invalid_pattern(self):
        """Test that an invalid regex fails at setup."""
        with pytest.raises(PatternError) as exc_info:
            Matcher([("red", "(unclosed")])

        assert "(unclosed" in str(exc_info.value)
