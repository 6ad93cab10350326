"""Adapter to convert PackingConfiguration to DTOs and domain objects."""

from sheetfit.application.config.schema import PackingConfiguration
from sheetfit.application.dtos import PackingInput
from sheetfit.domain import SearchBudget, SplitSearchSolver


def config_to_input(config: PackingConfiguration) -> PackingInput:
    """Convert a PackingConfiguration to a PackingInput DTO.

    Example:
        >>> packing_input = config_to_input(load_config(Path("sheet.json")))
        >>> output = CalculatePackingCommand().execute(packing_input)
    """
    return PackingInput(
        sheet_length=config.sheet.length,
        sheet_width=config.sheet.width,
        piece_length=config.piece.length,
        piece_width=config.piece.width,
        margin_length=config.piece.margin_length,
        margin_width=config.piece.margin_width,
    )


def config_to_solver(config: PackingConfiguration) -> SplitSearchSolver:
    """Build the solver configured by the search section."""
    return SplitSearchSolver(split_step=config.search.split_step)


def config_to_budget(config: PackingConfiguration) -> SearchBudget | None:
    """Build a search budget, or None when no time limit is configured."""
    if config.search.timeout_seconds is None:
        return None
    return SearchBudget(timeout_seconds=config.search.timeout_seconds)
