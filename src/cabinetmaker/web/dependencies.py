"""FastAPI dependency injection for cabinet services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cabinetmaker.application.commands import GenerateCabinetPlanCommand
from cabinetmaker.application.factory import ServiceFactory, get_factory
from cabinetmaker.infrastructure import SchematicSvgRenderer


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_plan_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateCabinetPlanCommand:
    """Dependency for GenerateCabinetPlanCommand."""
    return factory.create_plan_command()


def get_svg_renderer() -> SchematicSvgRenderer:
    """Dependency for SchematicSvgRenderer."""
    return SchematicSvgRenderer()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
PlanCommandDep = Annotated[GenerateCabinetPlanCommand, Depends(get_plan_command)]
SvgRendererDep = Annotated[SchematicSvgRenderer, Depends(get_svg_renderer)]
