"""Configuration merging utilities for CLI override support.

Precedence is: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from sheetfit.application.config.schema import (
    OutputConfig,
    PackingConfiguration,
    PieceConfig,
    SearchConfig,
    SheetConfig,
)


def _pick(override: Any, current: Any) -> Any:
    return override if override is not None else current


def merge_config_with_cli(
    config: PackingConfiguration,
    *,
    sheet_length: float | None = None,
    sheet_width: float | None = None,
    piece_length: float | None = None,
    piece_width: float | None = None,
    margin_length: float | None = None,
    margin_width: float | None = None,
    timeout_seconds: float | None = None,
    split_step: float | None = None,
    output_format: str | None = None,
) -> PackingConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base PackingConfiguration to merge with
        sheet_length: Override for sheet.length
        sheet_width: Override for sheet.width
        piece_length: Override for piece.length
        piece_width: Override for piece.width
        margin_length: Override for piece.margin_length
        margin_width: Override for piece.margin_width
        timeout_seconds: Override for search.timeout_seconds
        split_step: Override for search.split_step
        output_format: Override for output.format

    Returns:
        A new PackingConfiguration with merged values

    Example:
        >>> merged = merge_config_with_cli(config, sheet_length=120.0)
        >>> merged.sheet.length
        120.0
    """
    sheet = config.sheet
    piece = config.piece
    search = config.search
    output = config.output

    sheet_data = {
        "length": _pick(sheet_length, sheet.length),
        "width": _pick(sheet_width, sheet.width),
    }
    piece_data = {
        "length": _pick(piece_length, piece.length),
        "width": _pick(piece_width, piece.width),
        "margin_length": _pick(margin_length, piece.margin_length),
        "margin_width": _pick(margin_width, piece.margin_width),
    }
    search_data = {
        "timeout_seconds": _pick(timeout_seconds, search.timeout_seconds),
        "split_step": _pick(split_step, search.split_step),
    }
    output_data = {
        "format": _pick(output_format, output.format),
        "precision": output.precision,
    }

    return PackingConfiguration(
        schema_version=config.schema_version,
        sheet=SheetConfig.model_validate(sheet_data),
        piece=PieceConfig.model_validate(piece_data),
        search=SearchConfig.model_validate(search_data),
        output=OutputConfig.model_validate(output_data),
    )
