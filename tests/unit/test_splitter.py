"""Tests for contour splitting."""

import math

import pytest

from glyphbridge.core.splitter import split_path
from glyphbridge.domain import CommandType, PathCommand, Point, Segment
from glyphbridge.exceptions import MalformedPathError

M = PathCommand.move
L = PathCommand.line
Q = PathCommand.curve
Z = PathCommand.close


class TestSplitPath:
    """Tests for split_path function."""

    def test_single_square(self) -> None:
        """Test a single closed square becomes one contour."""
        contours = split_path([M(0, 0), L(100, 0), L(100, 100), L(0, 100), L(0, 0), Z()])

        assert len(contours) == 1
        contour = contours[0]
        assert len(contour) == 4
        assert contour.is_closed()
        assert contour.segments[0] == Segment(start=Point(0, 0), end=Point(100, 0))

    def test_multiple_contours(self) -> None:
        """Test that each move starts a new contour."""
        path = [
            M(0, 0), L(100, 0), L(100, 100), L(0, 0),
            M(20, 10), L(80, 10), L(80, 70), L(20, 10),
            Z(),
        ]
        contours = split_path(path)

        assert len(contours) == 2
        assert contours[1].points == [Point(20, 10), Point(80, 10), Point(80, 70)]

    def test_curve_keeps_control(self) -> None:
        """Test that quadratic curves keep their control point."""
        contours = split_path([M(0, 0), Q(100, 0, 50, -50), L(50, 80), L(0, 0), Z()])

        segment = contours[0].segments[0]
        assert segment.control == Point(50, -50)
        assert segment.end == Point(100, 0)

    def test_zero_length_segments_dropped(self) -> None:
        """Test that segments ending where they start are skipped."""
        contours = split_path(
            [M(0, 0), L(0, 0), L(100, 0), L(100, 0), L(100, 100), L(0, 0), Z()]
        )
        assert len(contours[0]) == 3

    def test_degenerate_control_becomes_line(self) -> None:
        """Test that a control point on an endpoint yields a straight segment."""
        contours = split_path([M(0, 0), Q(100, 0, 100, 0), L(50, 80), L(0, 0), Z()])
        assert contours[0].segments[0].control is None

    def test_invalid_control_becomes_line(self) -> None:
        """Test that a non-finite control point yields a straight segment."""
        contours = split_path([M(0, 0), Q(100, 0, math.nan, 5), L(50, 80), L(0, 0), Z()])
        assert contours[0].segments[0].control is None

    def test_too_short(self) -> None:
        """Test that a path needs at least two commands."""
        with pytest.raises(MalformedPathError):
            split_path([M(0, 0)])

    def test_must_start_with_move(self) -> None:
        """Test rejection of a path that does not start with a move."""
        with pytest.raises(MalformedPathError, match="did not start with M"):
            split_path([L(10, 0), L(0, 0), Z()])

    def test_must_end_with_close(self) -> None:
        """Test rejection of a path that does not end with a close."""
        with pytest.raises(MalformedPathError, match="did not end with Z"):
            split_path([M(0, 0), L(10, 0), L(0, 0)])

    def test_open_contour_at_close(self) -> None:
        """Test that a contour must return to its start before the close."""
        with pytest.raises(MalformedPathError, match="Open contour"):
            split_path([M(0, 0), L(100, 0), L(100, 100), L(0, 100), Z()])

    def test_open_contour_at_move(self) -> None:
        """Test that a contour must return to its start before the next move."""
        with pytest.raises(MalformedPathError, match="Open contour"):
            split_path([M(0, 0), L(100, 0), L(100, 100), M(10, 10), L(20, 10), L(10, 10), Z()])

    def test_empty_contour(self) -> None:
        """Test that a contour without segments is rejected."""
        with pytest.raises(MalformedPathError, match="Empty contour"):
            split_path([M(0, 0), L(0, 0), Z()])

    def test_ended_early(self) -> None:
        """Test that a close must be the last command."""
        with pytest.raises(MalformedPathError, match="ended early"):
            split_path([M(0, 0), L(10, 0), L(0, 10), L(0, 0), Z(), Z()])

    def test_missing_coordinates(self) -> None:
        """Test that a line without coordinates is rejected."""
        with pytest.raises(MalformedPathError, match="Missing coordinates"):
            split_path([M(0, 0), PathCommand(CommandType.LINE), L(0, 0), Z()])

    def test_error_reports_command_index(self) -> None:
        """Test that errors carry the offending command index."""
        with pytest.raises(MalformedPathError) as exc_info:
            split_path([M(0, 0), L(100, 0), L(100, 100), Z()])
        assert exc_info.value.index == 3
