"""Schematic layout engine.

Produces the scaled rectangles and labels for the front, side and door
layout views. Door placement comes from the same door geometry used by the
cut list, and the joint extension comes from the joinery rules, so the
drawing and the cut list cannot disagree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..value_objects import (
    PaletteRole,
    RectPrimitive,
    Schematic,
    SchematicView,
    SideJointType,
    TextPrimitive,
)
from .door_geometry import door_geometry
from .joinery import joint_adjustment

if TYPE_CHECKING:
    from ..entities import CabinetSpec

__all__ = ["DEFAULT_SCALE", "SchematicLayoutService", "shelf_positions"]

# Pixels per inch
DEFAULT_SCALE = 4.0

# Gap between a frame edge and its dimension label, in pixels
LABEL_OFFSET = 5.0

FILL_OPACITY = 0.3
BACK_OPACITY = 0.2


def shelf_positions(height: float, shelf_count: int) -> list[float]:
    """Evenly spaced shelf centre lines.

    Returns ``k * height / (shelf_count + 1)`` for ``k = 1..shelf_count``,
    which leaves equal gaps above the top shelf, between shelves and below
    the bottom shelf. Zero shelves gives an empty list.
    """
    return [k * height / (shelf_count + 1) for k in range(1, shelf_count + 1)]


class SchematicLayoutService:
    """Builds scaled schematic views of a cabinet.

    Attributes:
        scale: Pixels per inch.
    """

    def __init__(self, scale: float = DEFAULT_SCALE) -> None:
        self.scale = scale

    def build(self, spec: CabinetSpec) -> Schematic:
        """Build all three views for a cabinet spec.

        Raises:
            ValueError: If a door carries an unrecognized position token.
        """
        return Schematic(
            scale=self.scale,
            front=self.front_view(spec),
            side=self.side_view(spec),
            door_layout=self.door_layout_view(spec),
        )

    def front_view(self, spec: CabinetSpec) -> SchematicView:
        """Front view: case frame, panel bands, shelves and door outlines."""
        dims = spec.dimensions
        drawn = dims.scaled(self.scale)
        width = drawn.width
        height = drawn.height
        thickness = spec.material_thickness * self.scale

        rects = [
            RectPrimitive(
                0, 0, width, height, PaletteRole.SIDES,
                filled=False, stroke_width=thickness,
            ),
            RectPrimitive(0, 0, width, thickness, PaletteRole.TOP_BOTTOM),
            RectPrimitive(0, height - thickness, width, thickness, PaletteRole.TOP_BOTTOM),
            RectPrimitive(0, 0, thickness, height, PaletteRole.SIDES),
            RectPrimitive(width - thickness, 0, thickness, height, PaletteRole.SIDES),
        ]
        for y in shelf_positions(height, spec.shelf_count):
            rects.append(
                RectPrimitive(
                    thickness,
                    y - thickness / 2,
                    width - thickness * 2,
                    thickness,
                    PaletteRole.SHELVES,
                )
            )
        for door in spec.doors:
            rect = door_geometry(door, width, height).rect
            rects.append(
                RectPrimitive(
                    rect.x, rect.y, rect.width, rect.height,
                    PaletteRole.for_door(door.type),
                    filled=False, dashed=True,
                )
            )

        labels = (
            TextPrimitive(width / 2, -LABEL_OFFSET, f'{dims.width:g}"'),
            TextPrimitive(
                -LABEL_OFFSET, height / 2, f'{dims.height:g}"', rotation=-90
            ),
        )
        return SchematicView("front", width, height, tuple(rects), labels)

    def side_view(self, spec: CabinetSpec) -> SchematicView:
        """Side view: depth profile, shelves and screwless joint extensions."""
        dims = spec.dimensions
        drawn = dims.scaled(self.scale)
        depth = drawn.depth
        height = drawn.height
        thickness = spec.material_thickness * self.scale

        rects = [
            RectPrimitive(0, 0, depth, height, PaletteRole.BACK, opacity=BACK_OPACITY),
            RectPrimitive(
                0, 0, depth, height, PaletteRole.SIDES,
                filled=False, stroke_width=thickness,
            ),
        ]
        for y in shelf_positions(height, spec.shelf_count):
            rects.append(
                RectPrimitive(0, y - thickness / 2, depth, thickness, PaletteRole.SHELVES)
            )

        labels: list[TextPrimitive] = []
        depth_label_y = -LABEL_OFFSET
        if spec.joinery.side_joint.type is SideJointType.SCREWLESS:
            extension = joint_adjustment(
                spec.joinery, spec.material_thickness, spec.allowances
            ).side_extension
            band = extension * self.scale
            note = f'+{extension:.3f}"'
            rects.append(
                RectPrimitive(0, -band, depth, band, PaletteRole.JOINT_EXTENSION)
            )
            rects.append(
                RectPrimitive(0, height, depth, band, PaletteRole.JOINT_EXTENSION)
            )
            labels.append(
                TextPrimitive(
                    depth + LABEL_OFFSET, -band / 2, note,
                    role=PaletteRole.JOINT_EXTENSION, anchor="start",
                )
            )
            labels.append(
                TextPrimitive(
                    depth + LABEL_OFFSET, height + band / 2, note,
                    role=PaletteRole.JOINT_EXTENSION, anchor="start",
                )
            )
            depth_label_y -= band

        labels.insert(0, TextPrimitive(depth / 2, depth_label_y, f'{dims.depth:g}"'))
        labels.insert(
            1,
            TextPrimitive(-LABEL_OFFSET, height / 2, f'{dims.height:g}"', rotation=-90),
        )
        return SchematicView("side", depth, height, tuple(rects), tuple(labels))

    def door_layout_view(self, spec: CabinetSpec) -> SchematicView:
        """Door layout view: dashed outline with filled, labelled doors."""
        drawn = spec.dimensions.scaled(self.scale)
        width = drawn.width
        height = drawn.height

        rects = [
            RectPrimitive(
                0, 0, width, height, PaletteRole.DIMENSIONS,
                filled=False, dashed=True,
            )
        ]
        labels = []
        for door in spec.doors:
            rect = door_geometry(door, width, height).rect
            rects.append(
                RectPrimitive(
                    rect.x, rect.y, rect.width, rect.height,
                    PaletteRole.for_door(door.type),
                    opacity=FILL_OPACITY,
                )
            )
            center_x, center_y = rect.center
            labels.append(TextPrimitive(center_x, center_y, door.type.label))

        return SchematicView("door_layout", width, height, tuple(rects), tuple(labels))
