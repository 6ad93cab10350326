"""Application commands (use cases) for sheet packing."""

from __future__ import annotations

import logging

from sheetfit.domain import (
    SearchBudget,
    SplitSearchSolver,
    plan_regions,
    stacking_plans,
)

from .dtos import PackingInput, PackingOutput

logger = logging.getLogger(__name__)


class CalculatePackingCommand:
    """Command to calculate the best packing of pieces on a sheet.

    Normalizes the raw input (margins, longer side first), runs the split
    search and derives the per-region plans a diagram needs.
    """

    def __init__(self, solver: SplitSearchSolver | None = None) -> None:
        self.solver = solver or SplitSearchSolver()

    def execute(
        self,
        packing_input: PackingInput,
        budget: SearchBudget | None = None,
    ) -> PackingOutput:
        """Execute the packing calculation.

        Args:
            packing_input: Raw sheet and piece dimensions with margins.
            budget: Optional timeout/cancellation hook for the search.

        Returns:
            PackingOutput with the result, or with errors if the input is
            invalid. The solver is not run for invalid input.

        Raises:
            SearchCancelledError: If the budget stops the search.
        """
        errors = packing_input.validate()
        if errors:
            return PackingOutput(input=packing_input, errors=errors)

        sheet = packing_input.sheet_dimensions()
        piece = packing_input.piece_dimensions()

        logger.info(
            "Packing %sx%s pieces on %sx%s sheet",
            piece.length,
            piece.width,
            sheet.length,
            sheet.width,
        )

        result = self.solver.solve(sheet, piece, budget=budget)

        logger.info(
            "Best layout: %d pieces, %.2f residue (%.1f%% waste)",
            result.max_fit,
            result.residue,
            result.waste_percentage,
        )

        return PackingOutput(
            input=packing_input,
            result=result,
            region_plans=plan_regions(result),
            stacking=stacking_plans(sheet, piece),
        )
