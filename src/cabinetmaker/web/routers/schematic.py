"""Schematic endpoints."""

from fastapi import APIRouter

from cabinetmaker.web.dependencies import PlanCommandDep, SvgRendererDep
from cabinetmaker.web.routers.cutlist import derive_plan
from cabinetmaker.web.schemas.requests import PlanRequest
from cabinetmaker.web.schemas.responses import SchematicResponseSchema

router = APIRouter(prefix="/schematic", tags=["schematic"])


@router.post("", response_model=SchematicResponseSchema)
async def render_schematic(
    request: PlanRequest,
    command: PlanCommandDep,
    renderer: SvgRendererDep,
) -> SchematicResponseSchema:
    """Render the front, side and door layout views as SVG strings."""
    output = derive_plan(request.config, command)
    assert output.schematic is not None
    return SchematicResponseSchema(
        scale=output.schematic.scale,
        views=renderer.render_all(output.schematic),
        legend=renderer.render_legend(),
    )
