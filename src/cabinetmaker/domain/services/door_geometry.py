"""Door geometry calculation."""

from __future__ import annotations

from ..value_objects import DEFAULT_ALLOWANCES, Door, DoorGeometry
from .position_resolver import resolve_position

__all__ = ["door_geometry"]


def door_geometry(
    door: Door,
    face_width: float,
    face_height: float,
    overlay_allowance: float = DEFAULT_ALLOWANCES.door_overlay,
) -> DoorGeometry:
    """Compute a door's rectangle on the face and the blank it is cut from.

    Face dimensions may already be scaled for drawing; the calculator does
    not care about units. The blank adds ``overlay_allowance`` to both axes
    of the rectangle and is the same for every door type.

    Args:
        door: The door to place.
        face_width: Face width in the caller's units.
        face_height: Face height in the caller's units.
        overlay_allowance: Added to each axis of the rectangle for the blank.

    Returns:
        DoorGeometry with the face rectangle and the blank size.

    Raises:
        ValueError: If the door position is not a recognized token.
    """
    rect = resolve_position(door.position, face_width, face_height)
    return DoorGeometry(
        rect=rect,
        blank_width=rect.width + overlay_allowance,
        blank_height=rect.height + overlay_allowance,
    )
