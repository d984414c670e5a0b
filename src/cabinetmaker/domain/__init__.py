"""Domain layer - cabinet dimension derivation."""

from .entities import CabinetSpec
from .services import (
    CutListGenerator,
    JointAdjustment,
    SchematicLayoutService,
    build_cut_list,
    door_geometry,
    joint_adjustment,
    resolve_position,
    shelf_positions,
)
from .value_objects import (
    Allowances,
    BackPanelMount,
    CutPiece,
    Dimensions,
    Door,
    DoorGeometry,
    DoorPosition,
    DoorType,
    JoineryConfig,
    MaterialThickness,
    PaletteRole,
    PanelType,
    Rect,
    Schematic,
    SchematicView,
    ShelfMount,
    SideJoint,
    SideJointType,
)

__all__ = [
    "Allowances",
    "BackPanelMount",
    "CabinetSpec",
    "CutListGenerator",
    "CutPiece",
    "Dimensions",
    "Door",
    "DoorGeometry",
    "DoorPosition",
    "DoorType",
    "JoineryConfig",
    "JointAdjustment",
    "MaterialThickness",
    "PaletteRole",
    "PanelType",
    "Rect",
    "Schematic",
    "SchematicLayoutService",
    "SchematicView",
    "ShelfMount",
    "SideJoint",
    "SideJointType",
    "build_cut_list",
    "door_geometry",
    "joint_adjustment",
    "resolve_position",
    "shelf_positions",
]
