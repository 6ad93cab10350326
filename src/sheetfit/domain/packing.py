"""Piece-count optimization for cutting one sheet into identical pieces.

The sheet may be divided by a single vertical and a single horizontal cut
into up to four regions. Each region is tiled independently as a simple
grid, with the piece in whichever of its two orientations yields more.
The solver searches every cut position and keeps the best total.

All dataclasses are frozen (immutable).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal

from sheetfit.domain.search_budget import SearchBudget
from sheetfit.domain.value_objects import Dimensions, Orientation, Region, SplitPoint

logger = logging.getLogger(__name__)

REGION_NAMES: tuple[str, ...] = ("top_left", "top_right", "bottom_left", "bottom_right")


def grid(
    piece_length: float,
    piece_width: float,
    area_length: float,
    area_width: float,
) -> tuple[int, int]:
    """Columns and rows of a non-rotated grid tiling of an area.

    Returns (0, 0) when the piece does not fit even once, which includes
    zero or negative area extents.
    """
    if area_length < piece_length or area_width < piece_width:
        return (0, 0)
    return (
        math.floor(area_length / piece_length),
        math.floor(area_width / piece_width),
    )


def fit(
    piece_length: float,
    piece_width: float,
    area_length: float,
    area_width: float,
) -> int:
    """Number of pieces in a simple grid tiling of an area.

    Examples:
        >>> fit(30, 20, 100, 100)
        15
        >>> fit(20, 20, 10, 10)
        0
    """
    columns, rows = grid(piece_length, piece_width, area_length, area_width)
    return columns * rows


def best_orientation(
    piece: Dimensions, area_length: float, area_width: float
) -> Orientation:
    """Orientation that tiles the area with more pieces.

    VERTICAL is chosen only when it is strictly better.
    """
    horizontal = fit(piece.length, piece.width, area_length, area_width)
    vertical = fit(piece.width, piece.length, area_length, area_width)
    return Orientation.VERTICAL if vertical > horizontal else Orientation.HORIZONTAL


def best_fit(piece: Dimensions, area_length: float, area_width: float) -> int:
    """Larger of the two single-orientation tilings of an area."""
    return max(
        fit(piece.length, piece.width, area_length, area_width),
        fit(piece.width, piece.length, area_length, area_width),
    )


def residue(
    sheet_length: float,
    sheet_width: float,
    piece_length: float,
    piece_width: float,
    max_fit: int,
) -> float:
    """Sheet area left over after cutting ``max_fit`` pieces."""
    return sheet_length * sheet_width - max_fit * piece_length * piece_width


def waste_percentage(sheet_area: float, leftover: float) -> float:
    """Leftover area as a percentage of the sheet area."""
    if sheet_area == 0:
        return 0.0
    return 100 * leftover / sheet_area


def split_position_count(extent: float, step: float = 1) -> int:
    """Number of candidate cut positions along one side of the sheet."""
    return int(Decimal(str(extent)) // Decimal(str(step))) + 1


def split_positions(extent: float, step: float = 1) -> list[float]:
    """Candidate cut positions ``k * step`` from 0 up to ``extent``.

    Positions are computed in decimal from the values as written, so a
    step of 0.1 yields 0.3 rather than 0.30000000000000004. No position
    exceeds ``extent``, and ``extent`` itself is included when it is a
    multiple of ``step``.

    Examples:
        >>> split_positions(10.5)
        [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
        >>> split_positions(0.3, 0.1)
        [0.0, 0.1, 0.2, 0.3]
    """
    exact_step = Decimal(str(step))
    return [float(k * exact_step) for k in range(split_position_count(extent, step))]


@dataclass(frozen=True)
class PackingResult:
    """Outcome of one solver run.

    Attributes:
        sheet: Sheet dimensions the solver was given.
        piece: Piece dimensions the solver was given (margins included).
        max_fit: Best piece count found.
        best_split: Winning cut position; (0, 0) in simple mode.
        simple_mode: True when no split beat tiling the whole sheet.
        baseline_fit: Best whole-sheet single-orientation count.
        residue: Sheet area not covered by pieces.
    """

    sheet: Dimensions
    piece: Dimensions
    max_fit: int
    best_split: SplitPoint
    simple_mode: bool
    baseline_fit: int
    residue: float

    def __post_init__(self) -> None:
        if self.max_fit < 0:
            raise ValueError("Piece count must be non-negative")
        if self.max_fit < self.baseline_fit:
            raise ValueError("Piece count cannot be below the whole-sheet baseline")

    @property
    def used_area(self) -> float:
        """Area covered by the placed pieces."""
        return self.max_fit * self.piece.area

    @property
    def waste_percentage(self) -> float:
        """Residue as a percentage of the sheet area."""
        return waste_percentage(self.sheet.area, self.residue)


class SplitSearchSolver:
    """Exhaustive search over single-cross splits of a sheet.

    Cut positions are stepped at ``split_step`` granularity starting from 0,
    so with the default step of 1 only integer coordinates are tried even
    when the dimensions are fractional. The result is the optimum over those
    positions, not over every possible cut.

    Ties keep the first split found, scanning split lengths ascending in
    the outer loop and split widths ascending in the inner loop.

    Attributes:
        split_step: Distance between candidate cut positions.
    """

    def __init__(self, split_step: float = 1) -> None:
        if split_step <= 0:
            raise ValueError("Split step must be positive")
        self.split_step = split_step

    def solve(
        self,
        sheet: Dimensions,
        piece: Dimensions,
        budget: SearchBudget | None = None,
    ) -> PackingResult:
        """Find the split giving the most pieces.

        Args:
            sheet: Sheet dimensions.
            piece: Piece dimensions, margins already applied. Both
                orientations are tried in every region.
            budget: Optional timeout/cancellation hook checked once per
                split length.

        Returns:
            PackingResult with the best count, split and residue.

        Raises:
            SearchCancelledError: If the budget stops the search.
        """
        baseline = best_fit(piece, sheet.length, sheet.width)
        max_fit = baseline
        best_split = SplitPoint()
        simple_mode = True

        split_lengths = split_positions(sheet.length, self.split_step)
        split_widths = split_positions(sheet.width, self.split_step)

        logger.debug(
            "Searching %d x %d split positions for %sx%s pieces on %sx%s sheet",
            len(split_lengths),
            len(split_widths),
            piece.length,
            piece.width,
            sheet.length,
            sheet.width,
        )

        if budget is not None:
            budget.start()

        for index, split_length in enumerate(split_lengths):
            if budget is not None:
                budget.check(scanned=index, total=len(split_lengths))

            right_length = sheet.length - split_length
            for split_width in split_widths:
                bottom_width = sheet.width - split_width
                total_fit = (
                    best_fit(piece, split_length, split_width)
                    + best_fit(piece, right_length, split_width)
                    + best_fit(piece, split_length, bottom_width)
                    + best_fit(piece, right_length, bottom_width)
                )
                if total_fit > max_fit:
                    max_fit = total_fit
                    best_split = SplitPoint(length=split_length, width=split_width)
                    simple_mode = False

        leftover = residue(sheet.length, sheet.width, piece.length, piece.width, max_fit)

        if simple_mode:
            logger.debug("No split beats the whole sheet: %d pieces", max_fit)
        else:
            logger.debug(
                "Split at (%s, %s) yields %d pieces (baseline %d)",
                best_split.length,
                best_split.width,
                max_fit,
                baseline,
            )

        return PackingResult(
            sheet=sheet,
            piece=piece,
            max_fit=max_fit,
            best_split=best_split,
            simple_mode=simple_mode,
            baseline_fit=baseline,
            residue=leftover,
        )


def solve(
    sheet_length: float,
    sheet_width: float,
    piece_length: float,
    piece_width: float,
    *,
    split_step: float = 1,
    budget: SearchBudget | None = None,
) -> PackingResult:
    """Solve for plain numeric dimensions.

    Raises:
        ValueError: If any dimension is not positive.
    """
    sheet = Dimensions(length=sheet_length, width=sheet_width)
    piece = Dimensions(length=piece_length, width=piece_width)
    return SplitSearchSolver(split_step=split_step).solve(sheet, piece, budget=budget)
