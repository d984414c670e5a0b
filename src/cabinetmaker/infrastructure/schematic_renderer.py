"""SVG rendering of cabinet schematics.

Renders the views produced by the schematic layout service as standalone
SVG documents. Rendering is string-only; callers decide where the markup
goes.
"""

from __future__ import annotations

import logging
from xml.sax.saxutils import escape

from cabinetmaker.domain import PaletteRole, Schematic, SchematicView
from cabinetmaker.domain.value_objects import RectPrimitive, TextPrimitive

from .palette import LEGEND_LABELS, LEGEND_OPACITY, color_for

logger = logging.getLogger(__name__)

# Blank space around every view, in pixels
MARGIN = 20.0

# Extra room on the right for labels placed past the drawing edge
LABEL_ROOM = 60.0


def _num(value: float) -> str:
    """Compact number formatting for SVG attributes."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class SchematicSvgRenderer:
    """Renders schematic views as SVG.

    Attributes:
        margin: Blank space around the drawing in pixels.
        font_size: Label font size in pixels.
        background: Background fill colour.
    """

    def __init__(
        self,
        margin: float = MARGIN,
        font_size: int = 10,
        background: str = "#FFFFFF",
    ) -> None:
        self.margin = margin
        self.font_size = font_size
        self.background = background

    def render_view(self, view: SchematicView) -> str:
        """Render a single view as an SVG document."""
        logger.debug(
            "Rendering %s view with %d rects and %d labels",
            view.name,
            len(view.rects),
            len(view.labels),
        )
        svg_width = view.width + 2 * self.margin
        if any(
            label.anchor == "start" and label.x >= view.width for label in view.labels
        ):
            svg_width += LABEL_ROOM
        svg_height = view.height + 2 * self.margin

        parts = [
            f'<svg width="{_num(svg_width)}" height="{_num(svg_height)}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f"  <!-- {escape(view.name)} view -->",
            f'  <rect x="0" y="0" width="{_num(svg_width)}" '
            f'height="{_num(svg_height)}" fill="{self.background}"/>',
            f'  <g transform="translate({_num(self.margin)},{_num(self.margin)})">',
        ]
        parts.extend(self._render_rect(rect) for rect in view.rects)
        parts.extend(self._render_text(label) for label in view.labels)
        parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all(self, schematic: Schematic) -> dict[str, str]:
        """Render every view, keyed by view name."""
        return {name: self.render_view(view) for name, view in schematic.views.items()}

    def render_legend(self) -> str:
        """Render the colour legend as an SVG document."""
        row_height = self.font_size + 8
        swatch = self.font_size
        svg_width = 160.0
        svg_height = 2 * self.margin + row_height * len(LEGEND_LABELS)

        parts = [
            f'<svg width="{_num(svg_width)}" height="{_num(svg_height)}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "  <!-- legend -->",
            f'  <g transform="translate({_num(self.margin)},{_num(self.margin)})">',
        ]
        for index, (role, label) in enumerate(LEGEND_LABELS.items()):
            y = index * row_height
            color = color_for(role)
            opacity = LEGEND_OPACITY.get(role, 1.0)
            parts.append(
                f'    <rect x="0" y="{_num(y)}" width="{swatch}" height="{swatch}" '
                f'fill="{color}" fill-opacity="{_num(opacity)}" stroke="{color}"/>'
            )
            parts.append(
                f'    <text x="{swatch + 6}" y="{_num(y + swatch - 1)}" '
                f'font-family="sans-serif" font-size="{self.font_size}" '
                f'fill="{color_for(PaletteRole.DIMENSIONS)}">{escape(label)}</text>'
            )
        parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_rect(self, rect: RectPrimitive) -> str:
        color = color_for(rect.role)
        attrs = [
            f'x="{_num(rect.x)}"',
            f'y="{_num(rect.y)}"',
            f'width="{_num(rect.width)}"',
            f'height="{_num(rect.height)}"',
        ]
        if rect.filled:
            attrs.append(f'fill="{color}"')
            if rect.opacity != 1.0:
                attrs.append(f'fill-opacity="{_num(rect.opacity)}"')
        else:
            attrs.append('fill="none"')
        attrs.append(f'stroke="{color}"')
        attrs.append(f'stroke-width="{_num(rect.stroke_width)}"')
        if rect.dashed:
            attrs.append('stroke-dasharray="4,2"')
        return f"    <rect {' '.join(attrs)}/>"

    def _render_text(self, label: TextPrimitive) -> str:
        attrs = [
            f'x="{_num(label.x)}"',
            f'y="{_num(label.y)}"',
            f'text-anchor="{label.anchor}"',
            'font-family="sans-serif"',
            f'font-size="{self.font_size}"',
            f'fill="{color_for(label.role)}"',
        ]
        if label.rotation is not None:
            attrs.append(
                f'transform="rotate({_num(label.rotation)},{_num(label.x)},{_num(label.y)})"'
            )
        return f"    <text {' '.join(attrs)}>{escape(label.text)}</text>"
