"""Contour splitting for glyph path commands.

A glyph path is a flat list of commands that may describe several contours.
Each contour starts with a move, continues with lines and quadratic curves,
and must return to its starting point before the next move. A single close
command ends the path.
"""

from collections.abc import Sequence

from glyphbridge.domain import CommandType, Contour, PathCommand, Point, Segment
from glyphbridge.exceptions import InvalidPointError, MalformedPathError


def _command_point(command: PathCommand, index: int) -> Point:
    if not command.has_point():
        raise MalformedPathError(f"Missing coordinates on {command.type.value} command", index)
    return Point(command.x, command.y)  # type: ignore[arg-type]


def _command_control(command: PathCommand, start: Point, end: Point) -> Point | None:
    """Control point of a curve command, or None if the segment is really a line."""
    if command.type is not CommandType.CURVE or not command.has_control():
        return None
    try:
        control = Point(command.x1, command.y1)  # type: ignore[arg-type]
    except InvalidPointError:
        return None
    if control == start or control == end:
        return None
    return control


def split_path(path: Sequence[PathCommand]) -> list[Contour]:
    """Split a path into its closed contours.

    Zero-length segments are dropped, and curves whose control point is
    missing or coincides with an endpoint become lines.

    Args:
        path: Path commands, starting with a move and ending with a close

    Returns:
        Contours in the order they appear in the path

    Raises:
        MalformedPathError: If the path does not start with a move, does not
            end with a close, leaves a contour open or empty, closes early,
            or has a command with missing coordinates
    """
    if len(path) < 2:
        raise MalformedPathError("Path must have at least two commands")
    if path[0].type is not CommandType.MOVE:
        raise MalformedPathError("Path did not start with M", 0)
    if path[-1].type is not CommandType.CLOSE:
        raise MalformedPathError("Path did not end with Z", len(path) - 1)

    contours: list[list[Segment]] = [[]]
    start = _command_point(path[0], 0)
    current = start

    for index in range(1, len(path)):
        command = path[index]

        if command.type in (CommandType.MOVE, CommandType.CLOSE):
            if current != start:
                raise MalformedPathError("Open contour", index)
            if not contours[-1]:
                raise MalformedPathError("Empty contour", index)
            if command.type is CommandType.CLOSE:
                if index != len(path) - 1:
                    raise MalformedPathError("Path ended early", index)
                break
            contours.append([])
            start = _command_point(command, index)
            current = start
            continue

        end = _command_point(command, index)
        if end == current:
            continue

        control = _command_control(command, current, end)
        contours[-1].append(Segment(start=current, end=end, control=control))
        current = end

    return [Contour(tuple(segments)) for segments in contours]
