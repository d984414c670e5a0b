"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlanRequest(BaseModel):
    """Request for deriving a cut list or schematic from a configuration."""

    config: dict[str, Any] = Field(..., description="Full cabinet configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Cabinet configuration JSON")
