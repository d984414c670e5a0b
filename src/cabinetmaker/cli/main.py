"""Typer CLI for cabinet cut lists and schematics."""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from cabinetmaker.application import PlanOutput, get_factory
from cabinetmaker.application.config import (
    CabinetConfiguration,
    ConfigError,
    config_to_spec,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from cabinetmaker.cli.commands import display_load_error, validate_command
from cabinetmaker.domain import DoorPosition, MaterialThickness
from cabinetmaker.infrastructure import (
    CutListFormatter,
    CutListJsonFormatter,
    JointSummaryFormatter,
    SchematicSvgRenderer,
)


class CutListFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


class SchematicViewName(str, Enum):
    FRONT = "front"
    SIDE = "side"
    DOORS = "doors"
    LEGEND = "legend"
    ALL = "all"


_VIEW_KEYS = {
    SchematicViewName.FRONT: "front",
    SchematicViewName.SIDE: "side",
    SchematicViewName.DOORS: "door_layout",
}


app = typer.Typer(
    name="cabinetmaker",
    help="Derive cut lists and schematics for a single cabinet box.",
)

# Register validate command
app.command(name="validate")(validate_command)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Cabinet width in inches")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-h", help="Cabinet height in inches")
]
DepthOption = Annotated[
    float | None, typer.Option("--depth", "-d", help="Cabinet depth in inches")
]
_THICKNESS_PRESETS = ", ".join(
    f"{label} = {value:g}" for label, value in MaterialThickness.presets().items()
)

ThicknessOption = Annotated[
    float | None,
    typer.Option(
        "--thickness",
        "-t",
        help=f"Material thickness in inches (common: {_THICKNESS_PRESETS})",
    ),
]
ShelvesOption = Annotated[
    int | None, typer.Option("--shelves", help="Number of shelves")
]
SideJointOption = Annotated[
    str | None,
    typer.Option("--side-joint", help="Side joint: screwed or screwless"),
]
JointDepthOption = Annotated[
    float | None,
    typer.Option(
        "--joint-depth",
        help="Screwless joint depth as a fraction of material thickness (0-1)",
    ),
]
ShelfMountOption = Annotated[
    str | None,
    typer.Option("--shelf-mount", help="Shelf mounting: fixed or adjustable"),
]
BackPanelOption = Annotated[
    str | None,
    typer.Option("--back-panel", help="Back panel mounting: rabbeted or inset"),
]
DoorOption = Annotated[
    list[str] | None,
    typer.Option(
        "--door",
        help="Door as position:type, e.g. left-half:solid (repeatable)",
    ),
]


def parse_door(value: str) -> dict[str, str]:
    """Parse a ``position:type`` door option. The type defaults to solid."""
    position, _, door_type = value.partition(":")
    return {"position": position.strip(), "type": door_type.strip() or "solid"}


def build_configuration(
    config_file: Path | None,
    *,
    width: float | None = None,
    height: float | None = None,
    depth: float | None = None,
    thickness: float | None = None,
    shelves: int | None = None,
    side_joint: str | None = None,
    joint_depth: float | None = None,
    shelf_mount: str | None = None,
    back_panel: str | None = None,
    doors: list[str] | None = None,
    scale: float | None = None,
) -> CabinetConfiguration:
    """Build a validated configuration from a config file and CLI options.

    Without a config file, width, height and depth are required. With one,
    every option that is given overrides the file.

    Raises:
        ConfigError: If the file or any option is invalid.
        typer.Exit: If dimensions are missing in CLI-only mode.
    """
    if config_file is not None:
        base = load_config(config_file)
    else:
        if width is None or height is None or depth is None:
            typer.echo(
                "Error: --width, --height, and --depth are required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)
        base = load_config_from_dict(
            {"cabinet": {"width": width, "height": height, "depth": depth}}
        )

    return merge_config_with_cli(
        base,
        width=width,
        height=height,
        depth=depth,
        material_thickness=thickness,
        shelf_count=shelves,
        side_joint=side_joint,
        joint_depth=joint_depth,
        shelf_mount=shelf_mount,
        back_panel=back_panel,
        doors=[parse_door(door) for door in doors] if doors else None,
        scale=scale,
    )


def _load_or_exit(config_file: Path | None, **options) -> CabinetConfiguration:
    try:
        return build_configuration(config_file, **options)
    except ConfigError as e:
        if e.error_type == "validation":
            display_load_error(e)
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _plan_or_exit(config: CabinetConfiguration) -> PlanOutput:
    command = get_factory().create_plan_command()
    result = command.execute(config_to_spec(config), scale=config.schematic.scale)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


@app.command()
def cutlist(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    thickness: ThicknessOption = None,
    shelves: ShelvesOption = None,
    side_joint: SideJointOption = None,
    joint_depth: JointDepthOption = None,
    shelf_mount: ShelfMountOption = None,
    back_panel: BackPanelOption = None,
    door: DoorOption = None,
    output_format: Annotated[
        CutListFormat,
        typer.Option("--format", "-f", help="Output format: table or json"),
    ] = CutListFormat.TABLE,
) -> None:
    """Print the cut list for a cabinet.

    Examples:
        cabinetmaker cutlist --width 24 --height 30 --depth 12 --shelves 1
        cabinetmaker cutlist -w 24 -h 30 -d 12 --door left-half:solid --door right-half:glass
        cabinetmaker cutlist --config vanity.json --width 30 --format json
    """
    config = _load_or_exit(
        config_file,
        width=width,
        height=height,
        depth=depth,
        thickness=thickness,
        shelves=shelves,
        side_joint=side_joint,
        joint_depth=joint_depth,
        shelf_mount=shelf_mount,
        back_panel=back_panel,
        doors=door,
    )
    result = _plan_or_exit(config)

    if output_format == CutListFormat.JSON:
        typer.echo(CutListJsonFormatter().format(result.cut_list))
        return

    typer.echo(CutListFormatter().format(result.cut_list))
    if result.joint_adjustment is not None:
        typer.echo()
        typer.echo(JointSummaryFormatter().format(result.joint_adjustment))


@app.command()
def schematic(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    thickness: ThicknessOption = None,
    shelves: ShelvesOption = None,
    side_joint: SideJointOption = None,
    joint_depth: JointDepthOption = None,
    shelf_mount: ShelfMountOption = None,
    back_panel: BackPanelOption = None,
    door: DoorOption = None,
    view: Annotated[
        SchematicViewName,
        typer.Option("--view", help="View to print: front, side, doors, legend, all"),
    ] = SchematicViewName.FRONT,
    scale: Annotated[
        float | None,
        typer.Option("--scale", help="Pixels per inch"),
    ] = None,
) -> None:
    """Print schematic SVG for a cabinet to stdout.

    Examples:
        cabinetmaker schematic -w 24 -h 30 -d 12 --shelves 2 > front.svg
        cabinetmaker schematic --config vanity.json --view side --scale 6
    """
    renderer = SchematicSvgRenderer()
    if view == SchematicViewName.LEGEND:
        typer.echo(renderer.render_legend())
        return

    config = _load_or_exit(
        config_file,
        width=width,
        height=height,
        depth=depth,
        thickness=thickness,
        shelves=shelves,
        side_joint=side_joint,
        joint_depth=joint_depth,
        shelf_mount=shelf_mount,
        back_panel=back_panel,
        doors=door,
        scale=scale,
    )
    result = _plan_or_exit(config)
    assert result.schematic is not None

    if view == SchematicViewName.ALL:
        for name, svg in renderer.render_all(result.schematic).items():
            typer.echo(f"<!-- view: {name} -->")
            typer.echo(svg)
        typer.echo("<!-- view: legend -->")
        typer.echo(renderer.render_legend())
        return

    typer.echo(renderer.render_view(result.schematic.views[_VIEW_KEYS[view]]))


@app.command()
def positions() -> None:
    """List the door position tokens."""
    width = max(len(position.value) for position in DoorPosition)
    for position in DoorPosition:
        typer.echo(f"{position.value:<{width}}  {position.display_name}")


if __name__ == "__main__":
    app()
