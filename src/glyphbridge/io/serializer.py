"""Textual serialization of glyph paths.

The serialized path is the `d` field of render data: for each command its
type tag, then the control point for curves, then the target point.

Example:
    M 0 0 L 10 0 Q 10 10 20 10 L 0 0 Z
"""

from collections.abc import Sequence

from glyphbridge.domain import CommandType, PathCommand


def command_tokens(command: PathCommand) -> list[str]:
    """Tokens for a single command."""
    tokens = [command.type.value]
    if command.type is CommandType.CURVE and command.has_control():
        tokens.extend((str(command.x1), str(command.y1)))
    if command.has_point():
        tokens.extend((str(command.x), str(command.y)))
    return tokens


def serialize_path(path: Sequence[PathCommand]) -> str:
    """Serialize path commands to a whitespace-joined token stream.

    Args:
        path: Path commands of one glyph

    Returns:
        Serialized path
    """
    return " ".join(token for command in path for token in command_tokens(command))
