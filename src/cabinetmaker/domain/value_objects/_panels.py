"""Panel types, joinery selections, and fabrication allowances."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PanelType(str, Enum):
    """Structural panels that appear on a cut list."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT_SIDE = "left_side"
    RIGHT_SIDE = "right_side"
    BACK = "back"
    SHELF = "shelf"
    DOOR = "door"


class SideJointType(str, Enum):
    """How the side panels are joined to the top and bottom.

    Attributes:
        SCREWED: Butt joint, screwed and glued. No length change.
        SCREWLESS: Mechanical joint that needs extra length at each end,
            parameterized by a depth fraction of the material thickness.
    """

    SCREWED = "screwed"
    SCREWLESS = "screwless"


class ShelfMount(str, Enum):
    """How shelves are held between the sides."""

    FIXED = "fixed"
    ADJUSTABLE = "adjustable"


class BackPanelMount(str, Enum):
    """How the back panel seats into the case."""

    RABBETED = "rabbeted"
    INSET = "inset"


@dataclass(frozen=True)
class SideJoint:
    """Side panel joint selection.

    Attributes:
        type: Joint type.
        depth: Fraction of material thickness engaged at each end, in [0, 1].
            Only meaningful for screwless joints.
    """

    type: SideJointType = SideJointType.SCREWED
    depth: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", SideJointType(self.type))


@dataclass(frozen=True)
class JoineryConfig:
    """Complete joinery selection for a cabinet."""

    side_joint: SideJoint = field(default_factory=SideJoint)
    shelves: ShelfMount = ShelfMount.FIXED
    back_panel: BackPanelMount = BackPanelMount.RABBETED

    def __post_init__(self) -> None:
        object.__setattr__(self, "shelves", ShelfMount(self.shelves))
        object.__setattr__(self, "back_panel", BackPanelMount(self.back_panel))


@dataclass(frozen=True)
class Allowances:
    """Fixed fabrication allowances in inches.

    Attributes:
        door_overlay: Added to each axis of a door's face rectangle to
            make its blank, so the door overlaps the frame edge.
        door_stock: Extra stock added to each axis of the blank for the
            door cut piece.
        shelf_setback: Front-face setback subtracted from shelf width.
        shelf_pin_clearance: Subtracted from adjustable shelf length for
            pin hardware.
        back_panel_thickness: Back panel stock, named in its notes.
    """

    door_overlay: float = 0.5
    door_stock: float = 1.0
    shelf_setback: float = 0.75
    shelf_pin_clearance: float = 0.125
    back_panel_thickness: float = 0.25


DEFAULT_ALLOWANCES = Allowances()
