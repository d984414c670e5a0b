"""Configuration file loader.

Loads JSON cabinet configurations and turns file system, JSON and schema
problems into a single ConfigError carrying a category and structured
details that the CLI and the web API can render.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinetmaker.application.config.schema import CabinetConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded or validated.

    Attributes:
        message: The primary error message.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: Path to the configuration file, if loaded from disk.
        details: Per-problem details (JSON path and message for schema
            errors, line and column for JSON errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a JSON path.

    Examples:
        >>> _format_json_path(("cabinet", "width"))
        'cabinet.width'
        >>> _format_json_path(("cabinet", "doors", 1, "position"))
        'cabinet.doors[1].position'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> CabinetConfiguration:
    try:
        return CabinetConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        logger.debug(f"Configuration rejected with {len(details)} error(s)")
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> CabinetConfiguration:
    """Load and validate a cabinet configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A validated CabinetConfiguration.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON, or
            does not match the schema. ``error_type`` names the category.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Loaded configuration from {path}")
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CabinetConfiguration:
    """Validate a cabinet configuration supplied as a dictionary.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)
