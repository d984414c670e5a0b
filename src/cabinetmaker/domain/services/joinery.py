"""Joinery rules.

Maps a joinery selection to the length and width adjustments it causes on
the affected panels, together with the fabrication note for each. These
adjustments are the single source of truth: the cut list and any note text
derive from ``joint_adjustment`` rather than recomputing them.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import (
    DEFAULT_ALLOWANCES,
    Allowances,
    BackPanelMount,
    JoineryConfig,
    ShelfMount,
    SideJointType,
)

__all__ = ["JointAdjustment", "joint_adjustment"]

SCREWED_SIDE_NOTE = "cut to fit, pre-drill for screws and glue"
RABBET_BACK_NOTE = "fits in rabbet"
DADO_BACK_NOTE = "fits in dado"
FIXED_SHELF_NOTE = "for dado joint"
ADJUSTABLE_SHELF_NOTE = "for shelf pins"


@dataclass(frozen=True)
class JointAdjustment:
    """Panel adjustments caused by a joinery selection.

    Attributes:
        side_extension: Extra side length at each end (0 unless screwless).
        side_length_delta: Total extra side length, both ends combined.
        side_note: Fabrication note for the side panels.
        back_delta: Subtracted from back panel width and height.
        back_note: Fabrication note for the back panel.
        shelf_width_delta: Subtracted from shelf length.
        shelf_note: Fabrication note for the shelves.
    """

    side_extension: float
    side_length_delta: float
    side_note: str
    back_delta: float
    back_note: str
    shelf_width_delta: float
    shelf_note: str


def joint_adjustment(
    joinery: JoineryConfig,
    material_thickness: float,
    allowances: Allowances = DEFAULT_ALLOWANCES,
) -> JointAdjustment:
    """Derive panel adjustments and notes from a joinery selection.

    Args:
        joinery: Side, shelf and back panel joinery.
        material_thickness: Case material thickness in inches.
        allowances: Source of the shelf pin clearance.

    Returns:
        JointAdjustment with every delta and note.
    """
    side_joint = joinery.side_joint
    if side_joint.type is SideJointType.SCREWLESS:
        side_extension = material_thickness * side_joint.depth
        side_length_delta = side_extension * 2
        side_note = f'extend {side_extension:.3f}" each end for screwless joint'
    else:
        side_extension = 0.0
        side_length_delta = 0.0
        side_note = SCREWED_SIDE_NOTE

    if joinery.back_panel is BackPanelMount.RABBETED:
        back_delta = material_thickness * 2
        back_note = RABBET_BACK_NOTE
    else:
        back_delta = 0.0
        back_note = DADO_BACK_NOTE

    if joinery.shelves is ShelfMount.ADJUSTABLE:
        shelf_width_delta = allowances.shelf_pin_clearance
        shelf_note = ADJUSTABLE_SHELF_NOTE
    else:
        shelf_width_delta = 0.0
        shelf_note = FIXED_SHELF_NOTE

    return JointAdjustment(
        side_extension=side_extension,
        side_length_delta=side_length_delta,
        side_note=side_note,
        back_delta=back_delta,
        back_note=back_note,
        shelf_width_delta=shelf_width_delta,
        shelf_note=shelf_note,
    )
