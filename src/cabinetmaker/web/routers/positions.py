"""Door position endpoints."""

from fastapi import APIRouter

from cabinetmaker.domain import DoorPosition
from cabinetmaker.web.schemas.responses import PositionSchema

router = APIRouter(prefix="/positions", tags=["positions"])


@router.get("", response_model=list[PositionSchema])
async def list_positions() -> list[PositionSchema]:
    """List the door position tokens in declaration order."""
    return [
        PositionSchema(
            token=position.value,
            display_name=position.display_name,
            axis=position.axis,
        )
        for position in DoorPosition
    ]
