"""Pydantic models for cabinet configuration files.

The schema is the configuration boundary: it rejects unknown fields,
out-of-range numbers and door position tokens outside the closed set, so
the domain services only ever see well-formed input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cabinetmaker.domain.value_objects import (
    BackPanelMount,
    DoorPosition,
    DoorType,
    ShelfMount,
    SideJointType,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SideJointConfig(BaseModel):
    """Side panel joint configuration.

    Attributes:
        type: Joint type (screwed or screwless).
        depth: Fraction of material thickness engaged at each end, 0 to 1.
            Only used by screwless joints.
    """

    model_config = ConfigDict(extra="forbid")

    type: SideJointType = SideJointType.SCREWED
    depth: float = Field(default=0.5, ge=0.0, le=1.0)


class JoineryConfigSchema(BaseModel):
    """Joinery selection for the case."""

    model_config = ConfigDict(extra="forbid")

    side_joint: SideJointConfig = Field(default_factory=SideJointConfig)
    shelves: ShelfMount = ShelfMount.FIXED
    back_panel: BackPanelMount = BackPanelMount.RABBETED


class DoorConfig(BaseModel):
    """A single door on the cabinet face."""

    model_config = ConfigDict(extra="forbid")

    position: DoorPosition = DoorPosition.FULL
    type: DoorType = DoorType.SOLID


class CabinetConfig(BaseModel):
    """Cabinet dimensions and construction.

    Attributes:
        width: Overall width in inches (0 to 240).
        height: Overall height in inches (0 to 120).
        depth: Overall depth in inches (0 to 48).
        material_thickness: Case material thickness in inches (> 0, up to 2).
        shelf_count: Number of evenly spaced shelves (0 to 20).
        joinery: Joinery selection.
        doors: Doors in the order they appear on the cut list.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=0.0, le=240.0)
    height: float = Field(..., ge=0.0, le=120.0)
    depth: float = Field(..., ge=0.0, le=48.0)
    material_thickness: float = Field(default=0.75, gt=0.0, le=2.0)
    shelf_count: int = Field(default=0, ge=0, le=20)
    joinery: JoineryConfigSchema = Field(default_factory=JoineryConfigSchema)
    doors: list[DoorConfig] = Field(default_factory=list, max_length=12)


class AllowancesConfig(BaseModel):
    """Fabrication allowances in inches. Defaults match the domain defaults."""

    model_config = ConfigDict(extra="forbid")

    door_overlay: float = Field(default=0.5, ge=0.0, le=2.0)
    door_stock: float = Field(default=1.0, ge=0.0, le=4.0)
    shelf_setback: float = Field(default=0.75, ge=0.0, le=6.0)
    shelf_pin_clearance: float = Field(default=0.125, ge=0.0, le=1.0)
    back_panel_thickness: float = Field(default=0.25, gt=0.0, le=1.0)


class SchematicConfig(BaseModel):
    """Schematic drawing options."""

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=4.0, gt=0.0, le=50.0, description="Pixels per inch")


class CabinetConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Configuration format version.
        cabinet: Cabinet dimensions and construction.
        allowances: Fabrication allowances.
        schematic: Schematic drawing options.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    cabinet: CabinetConfig
    allowances: AllowancesConfig = Field(default_factory=AllowancesConfig)
    schematic: SchematicConfig = Field(default_factory=SchematicConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Ensure the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
