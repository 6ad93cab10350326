"""Loading of JSON packing configuration files.

Both entry points end in the same Pydantic validation. Every failure is
raised as a ConfigError whose ``error_type`` tells the CLI how to present
it: ``file_not_found``, ``permission_denied``, ``file_read_error``,
``json_parse`` or ``validation``.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from sheetfit.application.config.schema import PackingConfiguration


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded.

    Attributes:
        message: Human-readable summary
        error_type: Failure category (see module docstring)
        path: Configuration file, when loading from disk
        details: ``line``/``column``/``message`` for JSON errors, or one
            ``path``/``message``/``value`` entry per invalid field
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


def _read_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        )
    except OSError as e:
        raise ConfigError(f"Error reading config file: {path}: {e}", "file_read_error", path)

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(data: Any, path: Path | None = None) -> PackingConfiguration:
    try:
        return PackingConfiguration.model_validate(data)
    except PydanticValidationError as e:
        # Sections are plain objects, so a location is a dotted field path
        details = [
            {
                "path": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
            }
            for err in e.errors()
        ]
        raise ConfigError(_summarize(details, path), "validation", path, details)


def _summarize(details: list[dict[str, Any]], path: Path | None) -> str:
    lines = [f"Invalid packing configuration{f' in {path}' if path else ''}:"]
    for detail in details:
        value = detail["value"]
        shown = f" (got: {value!r})" if value is not None and not isinstance(value, dict) else ""
        lines.append(f"  - {detail['path']}: {detail['message']}{shown}")
    return "\n".join(lines)


def load_config(path: Path) -> PackingConfiguration:
    """Load and validate a packing configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> config = load_config(Path("sheet.json"))
        >>> config.sheet.length
        100.0
    """
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> PackingConfiguration:
    """Validate a packing configuration given as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
