"""FastAPI REST API for cabinet planning.

This module provides a REST API for deriving cut lists and schematics and
for validating configurations.

Usage:
    uvicorn cabinetmaker.web:app --reload
"""

from cabinetmaker.web.app import app, create_app

__all__ = ["app", "create_app"]
