"""Per-region tiling plans derived from a packing result.

PackingResult only records the total count and the cut position. A
diagram needs to know, for each region, which orientation won and how
many columns and rows of pieces it holds. These helpers recompute that
from the result by repeating the orientation comparison per region.
"""

from __future__ import annotations

from dataclasses import dataclass

from sheetfit.domain.packing import REGION_NAMES, PackingResult, best_orientation, grid
from sheetfit.domain.value_objects import Dimensions, Orientation, Region, SplitPoint


@dataclass(frozen=True)
class RegionPlan:
    """Grid of pieces laid in one region.

    Attributes:
        region: Region of the sheet being tiled.
        orientation: Orientation of every piece in the region.
        placed: Piece dimensions as placed (rotated for VERTICAL).
        columns: Pieces along the region length.
        rows: Pieces along the region width.
    """

    region: Region
    orientation: Orientation
    placed: Dimensions
    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns < 0 or self.rows < 0:
            raise ValueError("Grid size must be non-negative")

    @property
    def count(self) -> int:
        return self.columns * self.rows

    @property
    def used_area(self) -> float:
        return self.count * self.placed.area


def split_regions(sheet: Dimensions, split: SplitPoint) -> tuple[Region, ...]:
    """The four regions produced by cutting the sheet at ``split``.

    Order is top-left, top-right, bottom-left, bottom-right. Regions on a
    cut that lies on the sheet edge are empty.
    """
    right_length = max(sheet.length - split.length, 0)
    bottom_width = max(sheet.width - split.width, 0)
    extents = (
        (0, 0, split.length, split.width),
        (split.length, 0, right_length, split.width),
        (0, split.width, split.length, bottom_width),
        (split.length, split.width, right_length, bottom_width),
    )
    return tuple(
        Region(name=name, x=x, y=y, length=length, width=width)
        for name, (x, y, length, width) in zip(REGION_NAMES, extents)
    )


def plan_region(
    region: Region,
    piece: Dimensions,
    orientation: Orientation | None = None,
) -> RegionPlan:
    """Tile a region with the piece.

    Args:
        region: Region to tile.
        piece: Piece dimensions (unrotated).
        orientation: Forced orientation; the better one when None.

    Returns:
        RegionPlan for the region.
    """
    if orientation is None:
        orientation = best_orientation(piece, region.length, region.width)
    placed = piece.oriented(orientation)
    columns, rows = grid(placed.length, placed.width, region.length, region.width)
    return RegionPlan(
        region=region,
        orientation=orientation,
        placed=placed,
        columns=columns,
        rows=rows,
    )


def plan_regions(result: PackingResult) -> tuple[RegionPlan, ...]:
    """Plans for every region of the winning layout.

    In simple mode there is a single plan covering the whole sheet;
    otherwise one plan per split region. The plan counts sum to
    ``result.max_fit``.
    """
    if result.simple_mode:
        sheet_region = Region(
            name="sheet",
            x=0,
            y=0,
            length=result.sheet.length,
            width=result.sheet.width,
        )
        return (plan_region(sheet_region, result.piece),)

    return tuple(
        plan_region(region, result.piece)
        for region in split_regions(result.sheet, result.best_split)
    )


def stacking_plans(sheet: Dimensions, piece: Dimensions) -> tuple[RegionPlan, RegionPlan]:
    """Whole-sheet tilings in each fixed orientation.

    Returns:
        (horizontal stacking, vertical stacking).
    """
    horizontal = plan_region(
        Region(name="horizontal_stacking", x=0, y=0, length=sheet.length, width=sheet.width),
        piece,
        Orientation.HORIZONTAL,
    )
    vertical = plan_region(
        Region(name="vertical_stacking", x=0, y=0, length=sheet.length, width=sheet.width),
        piece,
        Orientation.VERTICAL,
    )
    return horizontal, vertical
