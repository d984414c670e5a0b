"""Door position tokens, door types, and door geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._core_geometry import Rect


class DoorPosition(str, Enum):
    """Closed set of door placements on the cabinet face.

    Each token partitions at most one axis of the face: horizontal tokens
    split the width, vertical tokens split the height, and FULL covers the
    whole face.
    """

    FULL = "full"
    LEFT_HALF = "left-half"
    RIGHT_HALF = "right-half"
    LEFT_THIRD = "left-1/3"
    MIDDLE_THIRD = "middle-1/3"
    RIGHT_THIRD = "right-1/3"
    LEFT_TWO_THIRDS = "left-2/3"
    RIGHT_TWO_THIRDS = "right-2/3"
    UPPER_HALF = "upper-half"
    LOWER_HALF = "lower-half"
    UPPER_THIRD = "upper-1/3"
    MIDDLE_VERT_THIRD = "middle-vert-1/3"
    LOWER_THIRD = "lower-1/3"

    @property
    def axis(self) -> str:
        """Which face axis the token partitions: full, horizontal or vertical."""
        if self is DoorPosition.FULL:
            return "full"
        if self in _VERTICAL_POSITIONS:
            return "vertical"
        return "horizontal"

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. "left 1 of 3"."""
        return _DISPLAY_NAMES[self]


_VERTICAL_POSITIONS = frozenset(
    {
        DoorPosition.UPPER_HALF,
        DoorPosition.LOWER_HALF,
        DoorPosition.UPPER_THIRD,
        DoorPosition.MIDDLE_VERT_THIRD,
        DoorPosition.LOWER_THIRD,
    }
)

_DISPLAY_NAMES: dict[DoorPosition, str] = {
    DoorPosition.FULL: "full",
    DoorPosition.LEFT_HALF: "left half",
    DoorPosition.RIGHT_HALF: "right half",
    DoorPosition.LEFT_THIRD: "left 1 of 3",
    DoorPosition.MIDDLE_THIRD: "middle 1 of 3",
    DoorPosition.RIGHT_THIRD: "right 1 of 3",
    DoorPosition.LEFT_TWO_THIRDS: "left 2 of 3",
    DoorPosition.RIGHT_TWO_THIRDS: "right 2 of 3",
    DoorPosition.UPPER_HALF: "upper half",
    DoorPosition.LOWER_HALF: "lower half",
    DoorPosition.UPPER_THIRD: "upper 1 of 3",
    DoorPosition.MIDDLE_VERT_THIRD: "middle vertical 1 of 3",
    DoorPosition.LOWER_THIRD: "lower 1 of 3",
}


class DoorType(str, Enum):
    """Door panel types. Only display colour and notes depend on the type."""

    SOLID = "solid"
    MIRROR = "mirror"
    GLASS = "glass"

    @property
    def label(self) -> str:
        """Capitalized type name used on labels ("Solid", "Mirror", "Glass")."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Door:
    """A door placed on the cabinet face.

    Raises:
        ValueError: If position or type is not a recognized token.
    """

    position: DoorPosition = DoorPosition.FULL
    type: DoorType = DoorType.SOLID

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", DoorPosition(self.position))
        object.__setattr__(self, "type", DoorType(self.type))


@dataclass(frozen=True)
class DoorGeometry:
    """Door rectangle on the face plus the blank size it is cut from.

    Attributes:
        rect: Door rectangle in face coordinates (no allowance).
        blank_width: rect.width plus the overlay allowance.
        blank_height: rect.height plus the overlay allowance.
    """

    rect: Rect
    blank_width: float
    blank_height: float
