"""Configuration schema and loading for cabinet specifications.

Public API:
    - CabinetConfiguration: Root configuration model
    - CabinetConfig, JoineryConfigSchema, SideJointConfig, DoorConfig,
      AllowancesConfig, SchematicConfig: Nested configuration models
    - load_config / load_config_from_dict: Load and validate configurations
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_spec: Convert a configuration to a domain CabinetSpec
    - validate_config: Run construction advisories
    - ValidationResult, ValidationError, ValidationWarning: Validation results

Example:
    >>> from pathlib import Path
    >>> from cabinetmaker.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("vanity.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinetmaker.application.config.adapter import (
    config_to_allowances,
    config_to_joinery,
    config_to_spec,
)
from cabinetmaker.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinetmaker.application.config.merger import merge_config_with_cli
from cabinetmaker.application.config.schema import (
    SUPPORTED_VERSIONS,
    AllowancesConfig,
    CabinetConfig,
    CabinetConfiguration,
    DoorConfig,
    JoineryConfigSchema,
    SchematicConfig,
    SideJointConfig,
)
from cabinetmaker.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AllowancesConfig",
    "CabinetConfig",
    "CabinetConfiguration",
    "ConfigError",
    "DoorConfig",
    "JoineryConfigSchema",
    "SchematicConfig",
    "SideJointConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_allowances",
    "config_to_joinery",
    "config_to_spec",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
