"""Door position resolution.

Maps a door position token to the exact fractional sub-rectangle of the
cabinet face it occupies. The resolver is unit-agnostic: pass face
dimensions in inches for the cut list or in pixels for a drawing.
"""

from __future__ import annotations

from ..value_objects import DoorPosition, Rect

__all__ = ["resolve_position"]


def resolve_position(
    position: DoorPosition | str, face_width: float, face_height: float
) -> Rect:
    """Resolve a door position token to a rectangle on the face.

    The result always lies within ``[0, face_width] x [0, face_height]``.
    Cases are matched in a fixed order (halves, vertical thirds,
    horizontal thirds, two-thirds) so that the order is preserved if the
    token set grows.

    Args:
        position: Door position token.
        face_width: Width of the face.
        face_height: Height of the face.

    Returns:
        Rectangle with origin at the face's top-left corner.

    Raises:
        ValueError: If ``position`` is not a recognized token.
    """
    position = DoorPosition(position)

    width = face_width
    height = face_height
    x = 0.0
    y = 0.0

    match position:
        case DoorPosition.FULL:
            pass

        case DoorPosition.LEFT_HALF | DoorPosition.RIGHT_HALF:
            width = face_width / 2
            if position is DoorPosition.RIGHT_HALF:
                x = face_width / 2

        case DoorPosition.UPPER_HALF | DoorPosition.LOWER_HALF:
            height = face_height / 2
            if position is DoorPosition.LOWER_HALF:
                y = face_height / 2

        case DoorPosition.UPPER_THIRD:
            height = face_height / 3
        case DoorPosition.MIDDLE_VERT_THIRD:
            height = face_height / 3
            y = face_height / 3
        case DoorPosition.LOWER_THIRD:
            height = face_height / 3
            y = face_height * 2 / 3

        case DoorPosition.LEFT_THIRD:
            width = face_width / 3
        case DoorPosition.MIDDLE_THIRD:
            width = face_width / 3
            x = face_width / 3
        case DoorPosition.RIGHT_THIRD:
            width = face_width / 3
            x = face_width * 2 / 3

        case DoorPosition.LEFT_TWO_THIRDS:
            width = face_width * 2 / 3
        case DoorPosition.RIGHT_TWO_THIRDS:
            width = face_width * 2 / 3
            x = face_width / 3

        case _:
            raise ValueError(f"Unhandled door position: {position.value!r}")

    return Rect(x=x, y=y, width=width, height=height)
