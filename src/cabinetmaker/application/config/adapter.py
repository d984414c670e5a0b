"""Conversion from configuration models to domain objects."""

from cabinetmaker.application.config.schema import (
    AllowancesConfig,
    CabinetConfiguration,
    JoineryConfigSchema,
)
from cabinetmaker.domain import (
    Allowances,
    CabinetSpec,
    Dimensions,
    Door,
    JoineryConfig,
    SideJoint,
)


def config_to_joinery(joinery: JoineryConfigSchema) -> JoineryConfig:
    """Convert a joinery configuration to the domain JoineryConfig."""
    return JoineryConfig(
        side_joint=SideJoint(
            type=joinery.side_joint.type,
            depth=joinery.side_joint.depth,
        ),
        shelves=joinery.shelves,
        back_panel=joinery.back_panel,
    )


def config_to_allowances(allowances: AllowancesConfig) -> Allowances:
    """Convert an allowances configuration to the domain Allowances."""
    return Allowances(**allowances.model_dump())


def config_to_spec(config: CabinetConfiguration) -> CabinetSpec:
    """Convert a validated configuration to an immutable CabinetSpec.

    Args:
        config: A validated CabinetConfiguration.

    Returns:
        CabinetSpec snapshot for the derivation services.
    """
    cabinet = config.cabinet
    return CabinetSpec(
        dimensions=Dimensions(
            width=cabinet.width,
            height=cabinet.height,
            depth=cabinet.depth,
        ),
        material_thickness=cabinet.material_thickness,
        shelf_count=cabinet.shelf_count,
        joinery=config_to_joinery(cabinet.joinery),
        doors=tuple(
            Door(position=door.position, type=door.type) for door in cabinet.doors
        ),
        allowances=config_to_allowances(config.allowances),
    )

