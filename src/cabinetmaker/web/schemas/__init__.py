"""Pydantic schemas for the REST API."""

from cabinetmaker.web.schemas.requests import ConfigValidateRequest, PlanRequest
from cabinetmaker.web.schemas.responses import (
    CabinetSummarySchema,
    CutListResponseSchema,
    CutPieceSchema,
    ErrorResponseSchema,
    JointSummarySchema,
    PositionSchema,
    SchematicResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "PlanRequest",
    # Responses
    "CabinetSummarySchema",
    "CutListResponseSchema",
    "CutPieceSchema",
    "ErrorResponseSchema",
    "JointSummarySchema",
    "PositionSchema",
    "SchematicResponseSchema",
    "ValidationResultSchema",
]
