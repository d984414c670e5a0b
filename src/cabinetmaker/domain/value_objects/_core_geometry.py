"""Core geometry and material value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._panels import PanelType


@dataclass(frozen=True)
class Dimensions:
    """Immutable overall cabinet dimensions in inches.

    Zero is accepted and yields degenerate (zero-area) geometry. Negative
    values are a caller precondition violation and are rejected at the
    configuration boundary, not here.
    """

    width: float
    height: float
    depth: float

    def scaled(self, scale: float) -> "Dimensions":
        """Return these dimensions multiplied by a drawing scale."""
        return Dimensions(
            width=self.width * scale,
            height=self.height * scale,
            depth=self.depth * scale,
        )


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def overlap_area(self, other: "Rect") -> float:
        """Area shared with another rectangle (0.0 if they only touch)."""
        overlap_w = min(self.right, other.right) - max(self.x, other.x)
        overlap_h = min(self.bottom, other.bottom) - max(self.y, other.y)
        if overlap_w <= 0 or overlap_h <= 0:
            return 0.0
        return overlap_w * overlap_h


class MaterialThickness:
    """Common sheet good thicknesses in inches."""

    THREE_QUARTER = 0.75
    HALF = 0.5
    QUARTER = 0.25

    @classmethod
    def presets(cls) -> dict[str, float]:
        """Nominal label to thickness mapping, thickest first."""
        return {
            '3/4"': cls.THREE_QUARTER,
            '1/2"': cls.HALF,
            '1/4"': cls.QUARTER,
        }


@dataclass(frozen=True)
class CutPiece:
    """A flat panel to be cut, as listed on the cut list.

    Width and length keep full floating point precision. Rounding for
    display happens in the formatters only.

    Attributes:
        name: Display name of the piece (e.g. "Left Side", "Solid Door (full)").
        quantity: Number of identical pieces. May be 0 for the shelf row
            when the cabinet has no shelves.
        width: Piece width in inches.
        length: Piece length in inches.
        notes: Fabrication notes.
        panel_type: Structural role of the piece.
    """

    name: str
    quantity: int
    width: float
    length: float
    notes: str
    panel_type: PanelType

    @property
    def area(self) -> float:
        """Total area for all pieces of this type in square inches."""
        return self.width * self.length * self.quantity
