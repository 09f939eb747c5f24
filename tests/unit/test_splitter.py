"""
Unit tests for the column splitter (sheetframes.transforms.splitter).

Tests that multi-value frames are melted into one (key, value) frame per
value column, that two-column frames pass through, and that the output
count follows ``sum(max(1, N))``.
"""

from __future__ import annotations

import copy

from sheetframes.transforms.splitter import split_columns


class TestSplitColumns:
    """Tests for split_columns()."""

    def test_two_column_frame_passes_through(self):
        frames = [[["A", "1"], ["B", "2"]]]
        assert split_columns(frames) == [[("A", "1"), ("B", "2")]]

    def test_three_column_frame_splits_in_two(self):
        """Label + 2 values -> 2 frames sharing the label column."""
        frames = [[["Name", "Alice", "Bob"], ["Age", "30", "25"]]]
        result = split_columns(frames)
        assert result == [
            [("Name", "Alice"), ("Age", "30")],
            [("Name", "Bob"), ("Age", "25")],
        ]

    def test_blank_values_are_kept(self):
        frames = [[["Name", "", "Bob"], ["Age", "30", ""]]]
        result = split_columns(frames)
        assert result[0] == [("Name", ""), ("Age", "30")]
        assert result[1] == [("Name", "Bob"), ("Age", "")]

    def test_single_column_frame(self):
        """A label-only frame still yields one frame, with blank values."""
        frames = [[["Z"], ["Y"]]]
        assert split_columns(frames) == [[("Z", ""), ("Y", "")]]

    def test_split_count_law(self):
        frames = [
            [["A"]],
            [["A", "1"]],
            [["A", "1", "2"], ["B", "3", "4"]],
            [["A", "1", "2", "3", "4"]],
        ]
        expected = sum(max(1, len(frame[0]) - 1) for frame in frames)
        assert len(split_columns(frames)) == expected == 8

    def test_order_preserved(self):
        frames = [[["A", "1", "2"]], [["B", "3"]]]
        result = split_columns(frames)
        assert result == [[("A", "1")], [("A", "2")], [("B", "3")]]

    def test_empty_input(self):
        assert split_columns([]) == []

    def test_frame_without_rows_is_dropped(self):
        assert split_columns([[], [["A", "1"]]]) == [[("A", "1")]]

    def test_input_not_mutated(self):
        frames = [[["A", "1", "2"], ["B", "3", "4"]]]
        before = copy.deepcopy(frames)
        split_columns(frames)
        assert frames == before
