"""Domain services for cabinet derivation.

All services are pure: they read a cabinet spec (or its parts) and return
new value objects.
"""

from .cut_list import CutListGenerator, build_cut_list, format_fraction
from .door_geometry import door_geometry
from .joinery import JointAdjustment, joint_adjustment
from .position_resolver import resolve_position
from .schematic import DEFAULT_SCALE, SchematicLayoutService, shelf_positions

__all__ = [
    "DEFAULT_SCALE",
    "CutListGenerator",
    "JointAdjustment",
    "SchematicLayoutService",
    "build_cut_list",
    "door_geometry",
    "format_fraction",
    "joint_adjustment",
    "resolve_position",
    "shelf_positions",
]
