"""Cut list generation service."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction
from typing import TYPE_CHECKING

from ..value_objects import (
    DEFAULT_ALLOWANCES,
    Allowances,
    CutPiece,
    Dimensions,
    Door,
    DoorType,
    JoineryConfig,
    PanelType,
)
from .door_geometry import door_geometry
from .joinery import joint_adjustment

if TYPE_CHECKING:
    from ..entities import CabinetSpec

__all__ = ["CutListGenerator", "build_cut_list", "format_fraction"]


def format_fraction(value: float) -> str:
    """Format an inch value as a shop fraction, e.g. 0.5 -> '1/2"'."""
    fraction = Fraction(value).limit_denominator(64)
    sign = "-" if fraction < 0 else ""
    whole, remainder = divmod(abs(fraction.numerator), fraction.denominator)
    if remainder == 0:
        return f'{sign}{whole}"'
    if whole == 0:
        return f'{sign}{remainder}/{fraction.denominator}"'
    return f'{sign}{whole}-{remainder}/{fraction.denominator}"'


def _inches(value: float) -> str:
    return f'{value:g}"'


def build_cut_list(
    dimensions: Dimensions,
    material_thickness: float,
    shelf_count: int,
    joinery: JoineryConfig,
    doors: Sequence[Door],
    allowances: Allowances = DEFAULT_ALLOWANCES,
) -> list[CutPiece]:
    """Build the ordered cut list for a cabinet.

    Pieces are always emitted in this order: Top, Bottom, Left Side,
    Right Side, Back Panel, Shelf (one row, quantity = shelf_count, present
    even when the count is 0), then one row per door in input order.

    Args:
        dimensions: Overall cabinet dimensions in inches.
        material_thickness: Case material thickness in inches.
        shelf_count: Number of shelves.
        joinery: Joinery selection.
        doors: Doors in input order.
        allowances: Fabrication allowances.

    Returns:
        Cut pieces with unrounded dimensions.

    Raises:
        ValueError: If a door carries an unrecognized position token.
    """
    adjustment = joint_adjustment(joinery, material_thickness, allowances)
    thickness = _inches(material_thickness)

    side_length = (dimensions.height - 2 * material_thickness) + adjustment.side_length_delta
    pieces = [
        CutPiece(
            name="Top",
            quantity=1,
            width=dimensions.width,
            length=dimensions.depth,
            notes=f"Main cabinet top ({thickness}) - {adjustment.side_note}",
            panel_type=PanelType.TOP,
        ),
        CutPiece(
            name="Bottom",
            quantity=1,
            width=dimensions.width,
            length=dimensions.depth,
            notes=f"Main cabinet bottom ({thickness}) - {adjustment.side_note}",
            panel_type=PanelType.BOTTOM,
        ),
        CutPiece(
            name="Left Side",
            quantity=1,
            width=dimensions.depth,
            length=side_length,
            notes=f"Left side ({thickness}) - {adjustment.side_note}",
            panel_type=PanelType.LEFT_SIDE,
        ),
        CutPiece(
            name="Right Side",
            quantity=1,
            width=dimensions.depth,
            length=side_length,
            notes=f"Right side ({thickness}) - {adjustment.side_note}",
            panel_type=PanelType.RIGHT_SIDE,
        ),
        CutPiece(
            name="Back Panel",
            quantity=1,
            width=dimensions.width - adjustment.back_delta,
            length=dimensions.height - adjustment.back_delta,
            notes=(
                f"{format_fraction(allowances.back_panel_thickness)} back panel"
                f" - {adjustment.back_note}"
            ),
            panel_type=PanelType.BACK,
        ),
        CutPiece(
            name="Shelf",
            quantity=shelf_count,
            width=dimensions.depth - material_thickness - allowances.shelf_setback,
            length=dimensions.width - material_thickness - adjustment.shelf_width_delta,
            notes=f"{thickness} shelves - {adjustment.shelf_note}",
            panel_type=PanelType.SHELF,
        ),
    ]

    overlay = format_fraction(allowances.door_overlay)
    for door in doors:
        geometry = door_geometry(
            door, dimensions.width, dimensions.height, allowances.door_overlay
        )
        glazing = " with mirror" if door.type is DoorType.MIRROR else ""
        pieces.append(
            CutPiece(
                name=f"{door.type.label} Door ({door.position.value})",
                quantity=1,
                width=geometry.blank_width + allowances.door_stock,
                length=geometry.blank_height + allowances.door_stock,
                notes=f"{thickness} door{glazing} - {overlay} overlay",
                panel_type=PanelType.DOOR,
            )
        )

    return pieces


class CutListGenerator:
    """Generates ordered cut lists from cabinet specs."""

    def generate(self, spec: CabinetSpec) -> list[CutPiece]:
        """Generate the cut list for the given cabinet spec.

        Args:
            spec: The cabinet configuration snapshot.

        Returns:
            List of CutPiece objects in the fixed emission order.
        """
        return build_cut_list(
            spec.dimensions,
            spec.material_thickness,
            spec.shelf_count,
            spec.joinery,
            spec.doors,
            spec.allowances,
        )
