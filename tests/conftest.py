"""Pytest configuration and shared fixtures for cabinetmaker tests."""

from __future__ import annotations

import pytest

from cabinetmaker.domain import (
    BackPanelMount,
    CabinetSpec,
    Dimensions,
    Door,
    JoineryConfig,
    ShelfMount,
    SideJoint,
    SideJointType,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests exercising the CLI or API")


# =============================================================================
# Shared cabinet specs
# =============================================================================


@pytest.fixture
def scenario_spec() -> CabinetSpec:
    """The 24 x 30 x 12 reference cabinet with two doors and adjustable shelves."""
    return CabinetSpec(
        dimensions=Dimensions(width=24.0, height=30.0, depth=12.0),
        material_thickness=0.75,
        shelf_count=2,
        joinery=JoineryConfig(
            side_joint=SideJoint(type=SideJointType.SCREWED),
            shelves=ShelfMount.ADJUSTABLE,
            back_panel=BackPanelMount.RABBETED,
        ),
        doors=(Door("left-2/3", "solid"), Door("right-1/3", "solid")),
    )


@pytest.fixture
def screwless_spec() -> CabinetSpec:
    """A cabinet with screwless side joints at half thickness depth."""
    return CabinetSpec(
        dimensions=Dimensions(width=24.0, height=30.0, depth=12.0),
        material_thickness=0.75,
        shelf_count=1,
        joinery=JoineryConfig(
            side_joint=SideJoint(type=SideJointType.SCREWLESS, depth=0.5),
        ),
    )


@pytest.fixture
def scenario_config_dict() -> dict:
    """The reference cabinet as a configuration dictionary."""
    return {
        "schema_version": "1.0",
        "cabinet": {
            "width": 24,
            "height": 30,
            "depth": 12,
            "material_thickness": 0.75,
            "shelf_count": 2,
            "joinery": {
                "side_joint": {"type": "screwed"},
                "shelves": "adjustable",
                "back_panel": "rabbeted",
            },
            "doors": [
                {"position": "left-2/3", "type": "solid"},
                {"position": "right-1/3", "type": "solid"},
            ],
        },
    }
