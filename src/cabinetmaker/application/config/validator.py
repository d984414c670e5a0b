"""Validation results and construction advisories.

Schema validation guarantees well-formed input. This module goes one step
further and checks what the derivation would produce: pieces that come out
with no material are errors, and layouts that are legal but probably not
intended (overlapping doors, uncovered face, ignored settings) are warnings.
"""

from dataclasses import dataclass, field
from itertools import combinations
from typing import Any

from cabinetmaker.application.config.adapter import config_to_spec
from cabinetmaker.application.config.schema import CabinetConfiguration
from cabinetmaker.domain import (
    CabinetSpec,
    CutListGenerator,
    PanelType,
    Rect,
    SideJointType,
    resolve_position,
)

# Tolerance for comparing covered and total face area
AREA_TOLERANCE = 1e-9

_PIECE_PATHS: dict[PanelType, str] = {
    PanelType.TOP: "cabinet.width",
    PanelType.BOTTOM: "cabinet.width",
    PanelType.LEFT_SIDE: "cabinet.material_thickness",
    PanelType.RIGHT_SIDE: "cabinet.material_thickness",
    PanelType.BACK: "cabinet.joinery.back_panel",
    PanelType.SHELF: "cabinet.shelf_count",
    PanelType.DOOR: "cabinet.doors",
}


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the offending field (e.g. "cabinet.height").
        message: Human-readable description of the error.
        value: The value that caused the error.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking advisory.

    Attributes:
        path: JSON path to the concerning field.
        message: Human-readable description of the concern.
        suggestion: Optional suggested remediation.
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_piece_sizes(spec: CabinetSpec) -> ValidationResult:
    """Report cut pieces that would come out with no material.

    A zero overall dimension is reported once as a warning instead, since
    degenerate geometry is allowed.
    """
    result = ValidationResult()
    dims = spec.dimensions
    for name in ("width", "height", "depth"):
        if getattr(dims, name) == 0:
            result.add_warning(
                f"cabinet.{name}",
                f"Cabinet {name} is 0; derived geometry will be degenerate",
            )
    if result.has_warnings:
        return result

    cut_list = CutListGenerator().generate(spec)
    doors_start = len(cut_list) - len(spec.doors)
    for index, piece in enumerate(cut_list):
        if piece.quantity == 0:
            continue
        if piece.width <= 0 or piece.length <= 0:
            path = _PIECE_PATHS[piece.panel_type]
            if piece.panel_type is PanelType.DOOR:
                path = f"{path}[{index - doors_start}]"
            result.add_error(
                path,
                f"{piece.name} would be {piece.width:.3f}\" x {piece.length:.3f}\"",
                value=(piece.width, piece.length),
            )
    return result


def check_joinery_advisories(config: CabinetConfiguration) -> ValidationResult:
    """Warn about joinery settings that have no effect."""
    result = ValidationResult()
    side_joint = config.cabinet.joinery.side_joint
    if side_joint.type is SideJointType.SCREWLESS and side_joint.depth == 0:
        result.add_warning(
            "cabinet.joinery.side_joint.depth",
            "Screwless joint depth is 0, so the joint has no engagement",
            suggestion="Use a depth between 0.25 and 0.5 of the material thickness",
        )
    if side_joint.type is SideJointType.SCREWED and "depth" in side_joint.model_fields_set:
        result.add_warning(
            "cabinet.joinery.side_joint.depth",
            "Joint depth is ignored for screwed side joints",
        )
    return result


def _uncovered_area(face: Rect, rects: list[Rect]) -> float:
    """Face area not covered by any of the rectangles."""
    xs = sorted({face.x, face.right, *(r.x for r in rects), *(r.right for r in rects)})
    ys = sorted({face.y, face.bottom, *(r.y for r in rects), *(r.bottom for r in rects)})
    uncovered = 0.0
    for x0, x1 in zip(xs, xs[1:]):
        for y0, y1 in zip(ys, ys[1:]):
            cx = (x0 + x1) / 2
            cy = (y0 + y1) / 2
            if not any(r.x <= cx <= r.right and r.y <= cy <= r.bottom for r in rects):
                uncovered += (x1 - x0) * (y1 - y0)
    return uncovered


def check_door_layout(spec: CabinetSpec) -> ValidationResult:
    """Warn about overlapping doors and partly uncovered faces."""
    result = ValidationResult()
    if not spec.doors:
        return result

    width = spec.dimensions.width
    height = spec.dimensions.height
    rects = [resolve_position(door.position, width, height) for door in spec.doors]

    for (i, first), (j, second) in combinations(enumerate(rects), 2):
        if first.overlap_area(second) > AREA_TOLERANCE:
            result.add_warning(
                f"cabinet.doors[{j}]",
                f"Door {j} ({spec.doors[j].position.value}) overlaps door {i} "
                f"({spec.doors[i].position.value})",
                suggestion="Choose positions that partition the face",
            )

    face = Rect(0.0, 0.0, width, height)
    uncovered = _uncovered_area(face, rects)
    if uncovered > AREA_TOLERANCE:
        result.add_warning(
            "cabinet.doors",
            f"Doors leave {uncovered:.1f} sq in ({uncovered / face.area:.0%}) "
            "of the face uncovered",
            suggestion="Add doors for the remaining openings or remove all doors",
        )
    return result


def validate_config(config: CabinetConfiguration) -> ValidationResult:
    """Run every check against a schema-valid configuration.

    Args:
        config: A validated CabinetConfiguration.

    Returns:
        ValidationResult with errors and advisory warnings.
    """
    spec = config_to_spec(config)
    result = ValidationResult()
    result.merge(check_piece_sizes(spec))
    result.merge(check_joinery_advisories(config))
    result.merge(check_door_layout(spec))
    return result
