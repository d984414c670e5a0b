"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinetmaker.domain import CabinetSpec, CutPiece, JointAdjustment, Schematic


@dataclass
class PlanOutput:
    """Output DTO containing the derived cabinet plan.

    Attributes:
        spec: The configuration snapshot the plan was derived from.
        cut_list: Ordered cut pieces with unrounded dimensions.
        joint_adjustment: Panel adjustments from the joinery selection.
        schematic: Scaled front, side and door layout views.
        errors: Error messages if derivation failed.
    """

    spec: CabinetSpec
    cut_list: list[CutPiece] = field(default_factory=list)
    joint_adjustment: JointAdjustment | None = None
    schematic: Schematic | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the plan was derived successfully."""
        return len(self.errors) == 0
