"""API routers for the REST API."""

from cabinetmaker.web.routers.cutlist import router as cutlist_router
from cabinetmaker.web.routers.positions import router as positions_router
from cabinetmaker.web.routers.schematic import router as schematic_router
from cabinetmaker.web.routers.validate import router as validate_router

__all__ = [
    "cutlist_router",
    "positions_router",
    "schematic_router",
    "validate_router",
]
