"""Typer CLI for sheet packing calculations."""

from pathlib import Path
from typing import Annotated

import typer

from sheetfit.application import (
    INVALID_DIMENSIONS_MESSAGE,
    CalculatePackingCommand,
    InputValidationError,
    PackingInput,
    PackingOutput,
    parse_dimension,
)
from sheetfit.application.config import (
    ConfigError,
    config_to_budget,
    config_to_input,
    config_to_solver,
    load_config,
    merge_config_with_cli,
)
from sheetfit.cli.commands import validate_command
from sheetfit.domain import SearchBudget, SearchCancelledError, SplitSearchSolver
from sheetfit.infrastructure import JsonExporter, ResultSummaryFormatter, setup_logging

OUTPUT_FORMATS = ("text", "json")


def _echo_input_errors(errors: list[str]) -> None:
    typer.echo(f"Error: {INVALID_DIMENSIONS_MESSAGE}", err=True)
    for error in errors:
        typer.echo(f"  - {error}", err=True)


def _parse_overrides(**values: str | None) -> dict[str, float | None]:
    """Parse CLI dimension overrides given alongside a config file.

    Raises:
        InputValidationError: If any given value is invalid.
    """
    labels = {
        "sheet_length": ("Sheet length", True),
        "sheet_width": ("Sheet width", True),
        "piece_length": ("Piece length", True),
        "piece_width": ("Piece width", True),
        "margin_length": ("Margin length", False),
        "margin_width": ("Margin width", False),
    }
    parsed: dict[str, float | None] = {}
    errors: list[str] = []
    for name, text in values.items():
        if text is None:
            parsed[name] = None
            continue
        label, required = labels[name]
        try:
            parsed[name] = parse_dimension(text, label, required=required)
        except InputValidationError as e:
            errors.extend(e.errors)
    if errors:
        raise InputValidationError(errors)
    return parsed


def _render(output: PackingOutput, output_format: str, precision: int) -> str:
    if output_format == "json":
        return JsonExporter(precision=precision).export(output)
    return ResultSummaryFormatter(precision=precision).format(output)


app = typer.Typer(
    name="sheetfit",
    help="Calculate how many identical pieces can be cut from a sheet.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def calculate(
    sheet_length: Annotated[
        str | None,
        typer.Option("--sheet-length", "-L", help="Sheet length"),
    ] = None,
    sheet_width: Annotated[
        str | None,
        typer.Option("--sheet-width", "-W", help="Sheet width"),
    ] = None,
    piece_length: Annotated[
        str | None,
        typer.Option("--piece-length", "-l", help="Piece length"),
    ] = None,
    piece_width: Annotated[
        str | None,
        typer.Option("--piece-width", "-w", help="Piece width"),
    ] = None,
    margin_length: Annotated[
        str | None,
        typer.Option("--margin-length", help="Margin on each end of the piece length (default: 0)"),
    ] = None,
    margin_width: Annotated[
        str | None,
        typer.Option("--margin-width", help="Margin on each side of the piece width (default: 0)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Abort the split search after this many seconds"),
    ] = None,
    split_step: Annotated[
        float | None,
        typer.Option("--split-step", help="Distance between candidate cut positions (default: 1)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log search progress to stderr"),
    ] = False,
) -> None:
    """Calculate the best packing of pieces on a sheet.

    Dimensions can be given as options or in a JSON configuration file.
    When using --config, options override config file values.

    Examples:
        sheetfit calculate -L 100 -W 70 -l 30 -w 20
        sheetfit calculate -L 100 -W 70 -l 30 -w 20 --margin-length 0.5 --format json
        sheetfit calculate --config sheet.json --sheet-length 120
    """
    if verbose:
        setup_logging("DEBUG")

    if output_format is not None and output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    if timeout is not None and timeout <= 0:
        typer.echo("Error: --timeout must be positive", err=True)
        raise typer.Exit(code=1)
    if split_step is not None and split_step <= 0:
        typer.echo("Error: --split-step must be positive", err=True)
        raise typer.Exit(code=1)

    precision = 2
    budget: SearchBudget | None

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        try:
            overrides = _parse_overrides(
                sheet_length=sheet_length,
                sheet_width=sheet_width,
                piece_length=piece_length,
                piece_width=piece_width,
                margin_length=margin_length,
                margin_width=margin_width,
            )
        except InputValidationError as e:
            _echo_input_errors(e.errors)
            raise typer.Exit(code=1)

        config = merge_config_with_cli(
            config,
            timeout_seconds=timeout,
            split_step=split_step,
            output_format=output_format,
            **overrides,
        )

        packing_input = config_to_input(config)
        solver = config_to_solver(config)
        budget = config_to_budget(config)
        output_format = config.output.format
        precision = config.output.precision
    else:
        # CLI-only mode: all four dimensions are required
        try:
            packing_input = PackingInput.from_text(
                sheet_length,
                sheet_width,
                piece_length,
                piece_width,
                margin_length,
                margin_width,
            )
        except InputValidationError as e:
            _echo_input_errors(e.errors)
            raise typer.Exit(code=1)

        solver = SplitSearchSolver(split_step=split_step if split_step is not None else 1)
        budget = SearchBudget(timeout_seconds=timeout) if timeout is not None else None

    if output_format is None:
        output_format = "text"

    command = CalculatePackingCommand(solver=solver)
    try:
        output = command.execute(packing_input, budget=budget)
    except SearchCancelledError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not output.is_valid:
        _echo_input_errors(output.errors)
        raise typer.Exit(code=1)

    typer.echo(_render(output, output_format, precision))


if __name__ == "__main__":
    app()
