"""Value objects for the cabinet domain.

This module provides immutable data types used throughout the cabinet
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Panels, joinery and allowances
from ._panels import (
    DEFAULT_ALLOWANCES,
    Allowances,
    BackPanelMount,
    JoineryConfig,
    PanelType,
    ShelfMount,
    SideJoint,
    SideJointType,
)

# Core geometry and materials
from ._core_geometry import (
    CutPiece,
    Dimensions,
    MaterialThickness,
    Rect,
)

# Doors
from ._doors import (
    Door,
    DoorGeometry,
    DoorPosition,
    DoorType,
)

# Schematic primitives
from ._schematic import (
    PaletteRole,
    RectPrimitive,
    Schematic,
    SchematicView,
    TextPrimitive,
)

__all__ = [
    "DEFAULT_ALLOWANCES",
    "Allowances",
    "BackPanelMount",
    "CutPiece",
    "Dimensions",
    "Door",
    "DoorGeometry",
    "DoorPosition",
    "DoorType",
    "JoineryConfig",
    "MaterialThickness",
    "PaletteRole",
    "PanelType",
    "Rect",
    "RectPrimitive",
    "Schematic",
    "SchematicView",
    "ShelfMount",
    "SideJoint",
    "SideJointType",
    "TextPrimitive",
]
