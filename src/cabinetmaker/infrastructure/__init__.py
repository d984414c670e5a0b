"""Infrastructure layer - output formatters and renderers."""

from .formatters import (
    CutListFormatter,
    CutListJsonFormatter,
    JointSummaryFormatter,
    format_dimension,
    round_for_display,
)
from .palette import LEGEND_LABELS, PALETTE, color_for
from .schematic_renderer import SchematicSvgRenderer

__all__ = [
    "LEGEND_LABELS",
    "PALETTE",
    "CutListFormatter",
    "CutListJsonFormatter",
    "JointSummaryFormatter",
    "SchematicSvgRenderer",
    "color_for",
    "format_dimension",
    "round_for_display",
]
