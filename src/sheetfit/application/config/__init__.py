"""Configuration schema and loading system for packing calculations.

Public API:
    - PackingConfiguration: Root configuration model
    - SheetConfig, PieceConfig, SearchConfig, OutputConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_input, config_to_solver, config_to_budget: Adapters
    - validate_config: Advisory checks returning a ValidationResult

Example:
    >>> from pathlib import Path
    >>> from sheetfit.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("sheet.json"))
    ...     print(f"Sheet: {config.sheet.length}x{config.sheet.width}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sheetfit.application.config.adapter import (
    config_to_budget,
    config_to_input,
    config_to_solver,
)
from sheetfit.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sheetfit.application.config.merger import merge_config_with_cli
from sheetfit.application.config.schema import (
    SUPPORTED_VERSIONS,
    OutputConfig,
    PackingConfiguration,
    PieceConfig,
    SearchConfig,
    SheetConfig,
)
from sheetfit.application.config.validator import (
    LARGE_SEARCH_POSITIONS,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    search_positions,
    validate_config,
)

__all__ = [
    "ConfigError",
    "LARGE_SEARCH_POSITIONS",
    "OutputConfig",
    "PackingConfiguration",
    "PieceConfig",
    "SUPPORTED_VERSIONS",
    "SearchConfig",
    "SheetConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_budget",
    "config_to_input",
    "config_to_solver",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "search_positions",
    "validate_config",
]
