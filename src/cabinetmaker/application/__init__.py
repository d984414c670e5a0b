"""Application layer - use cases and orchestration."""

from .commands import GenerateCabinetPlanCommand
from .dtos import PlanOutput
from .factory import ServiceFactory, get_factory

__all__ = [
    "GenerateCabinetPlanCommand",
    "PlanOutput",
    "ServiceFactory",
    "get_factory",
]
