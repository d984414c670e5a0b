"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CutPieceSchema(BaseModel):
    """Cut piece in the cut list. Dimensions are unrounded."""

    name: str = Field(..., description="Piece name")
    quantity: int = Field(..., description="Number of pieces")
    width: float = Field(..., description="Width in inches")
    length: float = Field(..., description="Length in inches")
    notes: str = Field(default="", description="Construction notes")
    panel_type: str = Field(..., description="Panel type")


class JointSummarySchema(BaseModel):
    """Panel adjustments implied by the joinery selection."""

    side_extension: float = Field(..., description="Side extension per end in inches")
    side_length_delta: float = Field(..., description="Total side length added")
    side_note: str = Field(..., description="Side panel joinery note")
    back_delta: float = Field(..., description="Back panel reduction per axis")
    back_note: str = Field(..., description="Back panel joinery note")
    shelf_width_delta: float = Field(..., description="Shelf length reduction")
    shelf_note: str = Field(..., description="Shelf joinery note")


class CabinetSummarySchema(BaseModel):
    """Summary of the derived cabinet."""

    width: float = Field(..., description="Cabinet width in inches")
    height: float = Field(..., description="Cabinet height in inches")
    depth: float = Field(..., description="Cabinet depth in inches")
    material_thickness: float = Field(..., description="Material thickness in inches")
    shelf_count: int = Field(..., description="Number of shelves")
    door_count: int = Field(..., description="Number of doors")
    total_area: float = Field(
        ..., description="Total panel area of the cut list in square inches"
    )


class CutListResponseSchema(BaseModel):
    """Response for cut list derivation."""

    cabinet: CabinetSummarySchema = Field(..., description="Cabinet summary")
    cut_list: list[CutPieceSchema] = Field(
        default_factory=list, description="Ordered cut pieces"
    )
    joinery: JointSummarySchema = Field(..., description="Joinery adjustments")


class SchematicResponseSchema(BaseModel):
    """Response for schematic rendering."""

    scale: float = Field(..., description="Pixels per inch")
    views: dict[str, str] = Field(..., description="SVG markup keyed by view name")
    legend: str = Field(..., description="Colour legend SVG markup")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class PositionSchema(BaseModel):
    """A door position token."""

    token: str = Field(..., description="Position token")
    display_name: str = Field(..., description="Human readable name")
    axis: str = Field(..., description="Split axis: full, horizontal or vertical")


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
