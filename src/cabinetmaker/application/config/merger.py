"""Configuration merging for CLI overrides.

Precedence is CLI arguments > configuration file values > defaults. Only
arguments that are not None override the configuration.
"""

from typing import Any

from cabinetmaker.application.config.loader import load_config_from_dict
from cabinetmaker.application.config.schema import CabinetConfiguration


def merge_config_with_cli(
    config: CabinetConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    depth: float | None = None,
    material_thickness: float | None = None,
    shelf_count: int | None = None,
    side_joint: str | None = None,
    joint_depth: float | None = None,
    shelf_mount: str | None = None,
    back_panel: str | None = None,
    doors: list[dict[str, str]] | None = None,
    scale: float | None = None,
) -> CabinetConfiguration:
    """Return a new configuration with the non-None CLI values applied.

    The merged data is validated again, so an out-of-range override fails
    the same way it would in a file. A doors override replaces the whole
    door list rather than appending to it.

    Example:
        >>> merged = merge_config_with_cli(config, width=36.0)
        >>> merged.cabinet.width
        36.0

    Raises:
        ConfigError: If an override is out of range or not a known token.
    """
    data = config.model_dump(mode="json", exclude_unset=True)
    cabinet: dict[str, Any] = data["cabinet"]

    overrides = {
        "width": width,
        "height": height,
        "depth": depth,
        "material_thickness": material_thickness,
        "shelf_count": shelf_count,
    }
    for key, value in overrides.items():
        if value is not None:
            cabinet[key] = value

    joinery: dict[str, Any] = cabinet.setdefault("joinery", {})
    side: dict[str, Any] = joinery.setdefault("side_joint", {})
    if side_joint is not None:
        side["type"] = side_joint
    if joint_depth is not None:
        side["depth"] = joint_depth
    if shelf_mount is not None:
        joinery["shelves"] = shelf_mount
    if back_panel is not None:
        joinery["back_panel"] = back_panel

    if doors is not None:
        cabinet["doors"] = doors

    if scale is not None:
        data.setdefault("schematic", {})["scale"] = scale

    return load_config_from_dict(data)
