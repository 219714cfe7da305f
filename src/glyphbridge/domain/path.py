"""Path commands: the flat outline representation of a glyph.

A glyph path is a sequence of commands in integer font units. Contours start
with a move and are made of lines and quadratic curves; a single close command
ends the whole path.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from glyphbridge.exceptions import MalformedPathError


class CommandType(str, Enum):
    """Path command type tags."""

    MOVE = "M"
    LINE = "L"
    CURVE = "Q"
    CLOSE = "Z"


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single path command.

    Attributes:
        type: Command type
        x: Target x coordinate (None for close)
        y: Target y coordinate (None for close)
        x1: Curve control x coordinate (curves only)
        y1: Curve control y coordinate (curves only)
    """

    type: CommandType
    x: int | None = None
    y: int | None = None
    x1: int | None = None
    y1: int | None = None

    @classmethod
    def move(cls, x: int, y: int) -> "PathCommand":
        return cls(CommandType.MOVE, x, y)

    @classmethod
    def line(cls, x: int, y: int) -> "PathCommand":
        return cls(CommandType.LINE, x, y)

    @classmethod
    def curve(cls, x: int, y: int, x1: int, y1: int) -> "PathCommand":
        return cls(CommandType.CURVE, x, y, x1, y1)

    @classmethod
    def close(cls) -> "PathCommand":
        return cls(CommandType.CLOSE)

    def has_point(self) -> bool:
        return self.x is not None and self.y is not None

    def has_control(self) -> bool:
        return self.x1 is not None and self.y1 is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Coordinates that are not set are omitted.

        Returns:
            Dictionary with a type field and any present coordinates
        """
        data: dict[str, Any] = {"type": self.type.value}
        for key in ("x", "y", "x1", "y1"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathCommand":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a type field and optional coordinates

        Returns:
            PathCommand instance

        Raises:
            MalformedPathError: If the type tag is missing or unknown
        """
        try:
            command_type = CommandType(data["type"])
        except (KeyError, ValueError) as e:
            raise MalformedPathError(f"Unexpected path command: {data.get('type')!r}") from e

        return cls(
            type=command_type,
            x=data.get("x"),
            y=data.get("y"),
            x1=data.get("x1"),
            y1=data.get("y1"),
        )
