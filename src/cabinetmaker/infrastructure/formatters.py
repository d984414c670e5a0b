"""Output formatters for cut lists and joinery summaries."""

from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from cabinetmaker.domain import CutPiece, JointAdjustment

DISPLAY_PLACES = Decimal("0.01")


def round_for_display(value: float) -> Decimal:
    """Round half-up to 2 decimal places for presentation.

    Uses the shortest decimal representation of the float so that values
    such as 23.125 round to 23.13 rather than down.
    """
    return Decimal(repr(value)).quantize(DISPLAY_PLACES, rounding=ROUND_HALF_UP)


def format_dimension(value: float) -> str:
    """Format inches for display: 24.0 -> '24"', 23.125 -> '23.13"'."""
    rounded = round_for_display(value).normalize()
    if rounded == 0:
        rounded = Decimal(0)
    return f'{rounded:f}"'


class CutListFormatter:
    """Formats cut lists as a text table.

    Columns are Piece, Qty, Width, Length and Notes. Width and length are
    rounded to 2 decimals here and nowhere earlier.
    """

    def __init__(self, name_width: int | None = None) -> None:
        """Initialize formatter.

        Args:
            name_width: Fixed Piece column width. Defaults to the longest
                piece name.
        """
        self._name_width = name_width

    def format(self, cut_list: list[CutPiece]) -> str:
        """Format cut list as a table."""
        if not cut_list:
            return "No pieces in cut list."

        name_width = self._name_width or max(
            len("Piece"), *(len(piece.name) for piece in cut_list)
        )
        rule_width = name_width + 36 + max(len(piece.notes) for piece in cut_list)
        lines = [
            "CUT LIST",
            "=" * rule_width,
            f"{'Piece':<{name_width}} {'Qty':>4} {'Width':>10} {'Length':>10}   Notes",
            "-" * rule_width,
        ]
        for piece in cut_list:
            lines.append(
                f"{piece.name:<{name_width}} {piece.quantity:>4} "
                f"{format_dimension(piece.width):>10} "
                f"{format_dimension(piece.length):>10}   {piece.notes}"
            )
        lines.append("-" * rule_width)
        total_pieces = sum(piece.quantity for piece in cut_list)
        lines.append(f"{'TOTAL':<{name_width}} {total_pieces:>4}")
        return "\n".join(lines)


class CutListJsonFormatter:
    """Formats cut lists as JSON with unrounded dimensions."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def to_dict(self, piece: CutPiece) -> dict[str, Any]:
        return {
            "name": piece.name,
            "quantity": piece.quantity,
            "width": piece.width,
            "length": piece.length,
            "notes": piece.notes,
            "panel_type": piece.panel_type.value,
        }

    def format(self, cut_list: list[CutPiece]) -> str:
        return json.dumps(
            {"cut_list": [self.to_dict(piece) for piece in cut_list]},
            indent=self.indent,
        )


class JointSummaryFormatter:
    """Formats the joinery adjustments applied to the case panels."""

    def format(self, adjustment: JointAdjustment) -> str:
        lines = [
            "JOINERY",
            "=" * 60,
            f"Sides: {adjustment.side_note}",
        ]
        if adjustment.side_extension:
            lines.append(
                f"  Extension per end: {adjustment.side_extension:.3f}\" "
                f"(total {adjustment.side_length_delta:.3f}\")"
            )
        lines.append(f"Back panel: {adjustment.back_note}")
        if adjustment.back_delta:
            lines.append(
                f"  Reduced by {adjustment.back_delta:.3f}\" in width and height"
            )
        lines.append(f"Shelves: {adjustment.shelf_note}")
        if adjustment.shelf_width_delta:
            lines.append(
                f"  Length reduced by {adjustment.shelf_width_delta:.3f}\" for clearance"
            )
        return "\n".join(lines)
