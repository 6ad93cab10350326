"""Domain layer - packing geometry and the split search."""

from .packing import (
    PackingResult,
    SplitSearchSolver,
    best_fit,
    best_orientation,
    fit,
    grid,
    residue,
    solve,
    split_position_count,
    split_positions,
    waste_percentage,
)
from .region_plan import (
    RegionPlan,
    plan_region,
    plan_regions,
    split_regions,
    stacking_plans,
)
from .search_budget import SearchBudget, SearchCancelledError
from .value_objects import Dimensions, Orientation, Region, SplitPoint

__all__ = [
    "Dimensions",
    "Orientation",
    "PackingResult",
    "Region",
    "RegionPlan",
    "SearchBudget",
    "SearchCancelledError",
    "SplitPoint",
    "SplitSearchSolver",
    "best_fit",
    "best_orientation",
    "fit",
    "grid",
    "plan_region",
    "plan_regions",
    "residue",
    "solve",
    "split_position_count",
    "split_positions",
    "split_regions",
    "stacking_plans",
    "waste_percentage",
]
