"""Drawing primitives handed to schematic renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._doors import DoorType


class PaletteRole(str, Enum):
    """Semantic colour roles. Renderers map each role to a colour."""

    TOP_BOTTOM = "top_bottom"
    SIDES = "sides"
    SHELVES = "shelves"
    BACK = "back"
    SOLID_DOOR = "solid_door"
    MIRROR_DOOR = "mirror_door"
    GLASS_DOOR = "glass_door"
    DIMENSIONS = "dimensions"
    JOINT_EXTENSION = "joint_extension"

    @classmethod
    def for_door(cls, door_type: DoorType) -> "PaletteRole":
        return _DOOR_ROLES[DoorType(door_type)]


_DOOR_ROLES: dict[DoorType, PaletteRole] = {
    DoorType.SOLID: PaletteRole.SOLID_DOOR,
    DoorType.MIRROR: PaletteRole.MIRROR_DOOR,
    DoorType.GLASS: PaletteRole.GLASS_DOOR,
}


@dataclass(frozen=True)
class RectPrimitive:
    """A scaled rectangle in view coordinates.

    Attributes:
        x: Left edge in pixels.
        y: Top edge in pixels.
        width: Width in pixels.
        height: Height in pixels.
        role: Palette role used for fill and stroke.
        filled: Whether the rectangle is filled or drawn as an outline.
        opacity: Fill opacity when filled.
        dashed: Whether the outline is dashed.
        stroke_width: Outline width in pixels.
    """

    x: float
    y: float
    width: float
    height: float
    role: PaletteRole
    filled: bool = True
    opacity: float = 1.0
    dashed: bool = False
    stroke_width: float = 1.0


@dataclass(frozen=True)
class TextPrimitive:
    """A text label in view coordinates.

    Attributes:
        x: Anchor x in pixels.
        y: Anchor y in pixels.
        text: Label text.
        role: Palette role used for the text colour.
        rotation: Rotation in degrees about the anchor, if any.
        anchor: Horizontal text anchor ("start", "middle", "end").
    """

    x: float
    y: float
    text: str
    role: PaletteRole = PaletteRole.DIMENSIONS
    rotation: float | None = None
    anchor: str = "middle"


@dataclass(frozen=True)
class SchematicView:
    """One view of the cabinet.

    Attributes:
        name: View name ("front", "side", "door_layout").
        width: Drawing width in pixels, excluding margins.
        height: Drawing height in pixels, excluding margins.
        rects: Rectangles in paint order.
        labels: Text labels in paint order.
    """

    name: str
    width: float
    height: float
    rects: tuple[RectPrimitive, ...] = field(default_factory=tuple)
    labels: tuple[TextPrimitive, ...] = field(default_factory=tuple)

    def rects_with_role(self, role: PaletteRole) -> list[RectPrimitive]:
        """Rectangles drawn with the given palette role."""
        return [rect for rect in self.rects if rect.role == role]


@dataclass(frozen=True)
class Schematic:
    """The three schematic views at a single pixel-per-inch scale."""

    scale: float
    front: SchematicView
    side: SchematicView
    door_layout: SchematicView

    @property
    def views(self) -> dict[str, SchematicView]:
        return {
            self.front.name: self.front,
            self.side.name: self.side,
            self.door_layout.name: self.door_layout,
        }
