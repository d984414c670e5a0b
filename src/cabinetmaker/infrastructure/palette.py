"""Colour palette for schematic rendering.

The palette is a lookup table keyed by semantic role. Schematic primitives
carry only a role; renderers resolve the colour here.
"""

from __future__ import annotations

from cabinetmaker.domain import PaletteRole

PALETTE: dict[PaletteRole, str] = {
    PaletteRole.TOP_BOTTOM: "#A0522D",  # Sienna
    PaletteRole.SIDES: "#DEB887",  # Burlywood
    PaletteRole.SHELVES: "#CD853F",  # Peru
    PaletteRole.BACK: "#D2B48C",  # Tan
    PaletteRole.SOLID_DOOR: "#8B4513",  # Saddle brown
    PaletteRole.MIRROR_DOOR: "#88CCE7",  # Light blue
    PaletteRole.GLASS_DOOR: "#AAD7D9",  # Light cyan
    PaletteRole.DIMENSIONS: "#666666",  # Gray
    PaletteRole.JOINT_EXTENSION: "#E9967A",  # Dark salmon
}

LEGEND_LABELS: dict[PaletteRole, str] = {
    PaletteRole.TOP_BOTTOM: "Top/Bottom",
    PaletteRole.SIDES: "Sides",
    PaletteRole.SHELVES: "Shelves",
    PaletteRole.BACK: "Back",
    PaletteRole.SOLID_DOOR: "Solid Door",
    PaletteRole.MIRROR_DOOR: "Mirror Door",
    PaletteRole.GLASS_DOOR: "Glass Door",
    PaletteRole.JOINT_EXTENSION: "Joint Extension",
}

# Door swatches are shown at the same opacity as doors in the layout view
LEGEND_OPACITY: dict[PaletteRole, float] = {
    PaletteRole.SOLID_DOOR: 0.3,
    PaletteRole.MIRROR_DOOR: 0.3,
    PaletteRole.GLASS_DOOR: 0.3,
}


def color_for(role: PaletteRole) -> str:
    """Colour for a palette role."""
    return PALETTE[role]
