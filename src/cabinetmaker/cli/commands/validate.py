"""The ``validate`` command.

Loads a cabinet configuration, runs the construction checks and prints a
report. Problems are grouped by what they concern: each door gets its own
heading, and every other problem is listed under its JSON path. Errors go
to stderr, warnings to stdout.
"""

import re
from pathlib import Path
from typing import Annotated

import typer

from cabinetmaker.application.config import (
    CabinetConfiguration,
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)
from cabinetmaker.infrastructure import format_dimension

_DOOR_PATH = re.compile(r"^cabinet\.doors\[(\d+)\]")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Check a cabinet configuration file before cutting.

    Reports schema problems, pieces that would come out with no material,
    overlapping doors, an uncovered face and joint settings that have no
    effect.

    Exit codes: 0 clean, 1 errors, 2 warnings only.

    Example:
        cabinetmaker validate vanity.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _print_errors(result, config)
    _print_warnings(result, config)
    typer.echo(_verdict(result), err=not result.is_valid)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Print why a configuration file could not be loaded, on stderr."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(f"  {line}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        return ["Invalid JSON syntax"] + [
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', 'Unknown error')}"
            for d in error.details
        ]
    if error.error_type != "validation":
        return [error.message]

    lines = []
    for detail in error.details:
        lines.append(f"{detail.get('path', 'unknown')}: {detail.get('message')}")
        if detail.get("value") is not None:
            lines.append(f"  Value: {detail['value']!r}")
    return lines


def _subject(path: str, config: CabinetConfiguration) -> str:
    """Heading for a problem: the door it concerns, or its JSON path."""
    match = _DOOR_PATH.match(path)
    if match is None:
        return path
    index = int(match.group(1))
    return f"Door {index} ({config.cabinet.doors[index].position.value})"


def _grouped(items, config: CabinetConfiguration) -> dict[str, list]:
    groups: dict[str, list] = {}
    for item in items:
        groups.setdefault(_subject(item.path, config), []).append(item)
    return groups


def _print_errors(result: ValidationResult, config: CabinetConfiguration) -> None:
    if not result.errors:
        return
    typer.echo("Errors:", err=True)
    for subject, errors in _grouped(result.errors, config).items():
        typer.echo(f"  {subject}:", err=True)
        for error in errors:
            typer.echo(f"    - {error.message}", err=True)
            # Piece-size errors carry the (width, length) the cut would have
            if isinstance(error.value, tuple):
                width, length = error.value
                typer.echo(
                    f"      Cut size: {format_dimension(width)} x "
                    f"{format_dimension(length)}",
                    err=True,
                )
            elif error.value is not None:
                typer.echo(f"      Value: {error.value!r}", err=True)
    typer.echo()


def _print_warnings(result: ValidationResult, config: CabinetConfiguration) -> None:
    if not result.warnings:
        return
    typer.echo("Warnings:")
    for subject, warnings in _grouped(result.warnings, config).items():
        typer.echo(f"  {subject}:")
        for warning in warnings:
            typer.echo(f"    - {warning.message}")
            if warning.suggestion:
                typer.echo(f"      Suggestion: {warning.suggestion}")
    typer.echo()


def _verdict(result: ValidationResult) -> str:
    if result.errors:
        return (
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)"
        )
    if result.warnings:
        return f"Validation passed with {len(result.warnings)} warning(s)"
    return "Validation passed. Configuration is valid."
