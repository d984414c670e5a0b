"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinetmaker.application.commands import GenerateCabinetPlanCommand
from cabinetmaker.domain import CutListGenerator, SchematicLayoutService


@dataclass
class ServiceFactory:
    """Factory for creating and caching service instances.

    Attributes:
        scale: Default schematic scale in pixels per inch.
    """

    scale: float = 4.0
    _cut_list_generator: CutListGenerator | None = field(
        default=None, init=False, repr=False
    )
    _schematic_service: SchematicLayoutService | None = field(
        default=None, init=False, repr=False
    )

    def get_cut_list_generator(self) -> CutListGenerator:
        """Get or create the cut list generator."""
        if self._cut_list_generator is None:
            self._cut_list_generator = CutListGenerator()
        return self._cut_list_generator

    def get_schematic_service(self) -> SchematicLayoutService:
        """Get or create the schematic layout service."""
        if self._schematic_service is None:
            self._schematic_service = SchematicLayoutService(scale=self.scale)
        return self._schematic_service

    def create_plan_command(self) -> GenerateCabinetPlanCommand:
        """Create a GenerateCabinetPlanCommand wired to the cached services."""
        return GenerateCabinetPlanCommand(
            cut_list_generator=self.get_cut_list_generator(),
            schematic_service=self.get_schematic_service(),
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory
