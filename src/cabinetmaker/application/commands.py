"""Application commands (use cases) for cabinet planning."""

from __future__ import annotations

import logging

from cabinetmaker.domain import (
    CabinetSpec,
    CutListGenerator,
    SchematicLayoutService,
    joint_adjustment,
)

from .dtos import PlanOutput

logger = logging.getLogger(__name__)


class GenerateCabinetPlanCommand:
    """Derive the cut list and schematic for one cabinet snapshot.

    The command is stateless between calls; executing it twice with the
    same spec yields equal output.
    """

    def __init__(
        self,
        cut_list_generator: CutListGenerator | None = None,
        schematic_service: SchematicLayoutService | None = None,
    ) -> None:
        self.cut_list_generator = cut_list_generator or CutListGenerator()
        self.schematic_service = schematic_service or SchematicLayoutService()

    def execute(self, spec: CabinetSpec, scale: float | None = None) -> PlanOutput:
        """Execute the plan derivation.

        A precondition violation in the domain (for example a door position
        outside the closed token set) fails this call only and is reported
        in ``errors``.

        Args:
            spec: Cabinet configuration snapshot.
            scale: Optional pixels-per-inch override for the schematic.

        Returns:
            PlanOutput with the cut list, joint adjustment and schematic.
        """
        schematic_service = self.schematic_service
        if scale is not None and scale != schematic_service.scale:
            schematic_service = SchematicLayoutService(scale=scale)

        logger.debug(
            f"Deriving plan for {spec.dimensions.width}x{spec.dimensions.height}"
            f"x{spec.dimensions.depth} cabinet with {len(spec.doors)} door(s)"
        )
        try:
            adjustment = joint_adjustment(
                spec.joinery, spec.material_thickness, spec.allowances
            )
            cut_list = self.cut_list_generator.generate(spec)
            schematic = schematic_service.build(spec)
        except ValueError as e:
            logger.debug(f"Plan derivation failed: {e}")
            return PlanOutput(spec=spec, errors=[str(e)])

        logger.debug(f"Derived {len(cut_list)} cut list rows")
        return PlanOutput(
            spec=spec,
            cut_list=cut_list,
            joint_adjustment=adjustment,
            schematic=schematic,
        )
