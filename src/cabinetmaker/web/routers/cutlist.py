"""Cut list endpoints."""

from typing import Any

from fastapi import APIRouter

from cabinetmaker.application import GenerateCabinetPlanCommand, PlanOutput
from cabinetmaker.application.config import config_to_spec, load_config_from_dict
from cabinetmaker.web.dependencies import PlanCommandDep
from cabinetmaker.web.exceptions import CabinetPlanError
from cabinetmaker.web.schemas.requests import PlanRequest
from cabinetmaker.web.schemas.responses import (
    CabinetSummarySchema,
    CutListResponseSchema,
    CutPieceSchema,
    JointSummarySchema,
)

router = APIRouter(prefix="/cutlist", tags=["cutlist"])


def derive_plan(
    config_data: dict[str, Any], command: GenerateCabinetPlanCommand
) -> PlanOutput:
    """Load a configuration dict and derive its plan.

    Raises:
        ConfigError: If the configuration is invalid.
        CabinetPlanError: If derivation fails.
    """
    config = load_config_from_dict(config_data)
    output = command.execute(config_to_spec(config), scale=config.schematic.scale)
    if not output.is_valid:
        raise CabinetPlanError(output.errors)
    return output


def _plan_output_to_schema(output: PlanOutput) -> CutListResponseSchema:
    """Convert PlanOutput to response schema."""
    spec = output.spec
    adjustment = output.joint_adjustment
    assert adjustment is not None
    return CutListResponseSchema(
        cabinet=CabinetSummarySchema(
            width=spec.dimensions.width,
            height=spec.dimensions.height,
            depth=spec.dimensions.depth,
            material_thickness=spec.material_thickness,
            shelf_count=spec.shelf_count,
            door_count=len(spec.doors),
            total_area=sum(piece.area for piece in output.cut_list),
        ),
        cut_list=[
            CutPieceSchema(
                name=piece.name,
                quantity=piece.quantity,
                width=piece.width,
                length=piece.length,
                notes=piece.notes,
                panel_type=piece.panel_type.value,
            )
            for piece in output.cut_list
        ],
        joinery=JointSummarySchema(
            side_extension=adjustment.side_extension,
            side_length_delta=adjustment.side_length_delta,
            side_note=adjustment.side_note,
            back_delta=adjustment.back_delta,
            back_note=adjustment.back_note,
            shelf_width_delta=adjustment.shelf_width_delta,
            shelf_note=adjustment.shelf_note,
        ),
    )


@router.post("", response_model=CutListResponseSchema)
async def derive_cut_list(
    request: PlanRequest,
    command: PlanCommandDep,
) -> CutListResponseSchema:
    """Derive the cut list for a cabinet configuration.

    Args:
        request: Request containing the configuration.
        command: Injected plan command.

    Returns:
        Cabinet summary, ordered cut pieces and joinery adjustments.
    """
    return _plan_output_to_schema(derive_plan(request.config, command))
