"""Text and JSON output formatters for packing results."""

from __future__ import annotations

import json
from typing import Any

from sheetfit.application.dtos import PackingOutput
from sheetfit.domain import RegionPlan


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


class ResultSummaryFormatter:
    """Formats a packing output as a plain-text report.

    Attributes:
        precision: Decimal places for residue and area values.
    """

    def __init__(self, precision: int = 2) -> None:
        self.precision = precision

    def format(self, output: PackingOutput) -> str:
        """Generate the report, or the error list for invalid output."""
        result = output.result
        if output.errors or result is None:
            lines = ["Errors:"]
            lines.extend(f"  - {error}" for error in output.errors)
            return "\n".join(lines)

        p = self.precision

        lines: list[str] = [
            "PACKING SUMMARY",
            "=" * 40,
            f"Sheet: {result.sheet.length:g} x {result.sheet.width:g}",
            f"Piece: {result.piece.length:g} x {result.piece.width:g} (with margins)",
            f"Max Pieces: {result.max_fit}",
            f"Sheet Scraps: {result.residue:.{p}f}",
            f"Waste: {result.waste_percentage:.1f}%",
        ]

        if result.simple_mode:
            lines.append("Layout: whole sheet, no split")
        else:
            split_length, split_width = result.best_split.as_tuple()
            lines.append(
                f"Layout: split at ({split_length:g}, {split_width:g}), "
                f"{result.max_fit - result.baseline_fit} more than the whole sheet"
            )

        lines.append("")
        lines.append("Regions:")
        for plan in output.region_plans:
            lines.append(f"  {self._format_plan(plan)}")

        lines.append("")
        lines.append("Stacking Alternatives:")
        for plan in output.stacking:
            label = plan.orientation.value.capitalize()
            lines.append(f"  {label}: {_plural(plan.count, 'piece')}")

        return "\n".join(lines)

    def _format_plan(self, plan: RegionPlan) -> str:
        region = plan.region
        extent = f"{region.length:g} x {region.width:g} at ({region.x:g}, {region.y:g})"
        if plan.count == 0:
            return f"{region.name}: {extent}, empty"
        return (
            f"{region.name}: {extent}, "
            f"{plan.columns} x {plan.rows} {plan.orientation.value} "
            f"({_plural(plan.count, 'piece')})"
        )


class JsonExporter:
    """Exports packing output as JSON."""

    def __init__(self, indent: int = 2, precision: int = 2) -> None:
        self.indent = indent
        self.precision = precision

    def export(self, output: PackingOutput) -> str:
        """Export packing output as JSON string."""
        return json.dumps(self.to_dict(output), indent=self.indent)

    def to_dict(self, output: PackingOutput) -> dict[str, Any]:
        """Build the JSON-ready dictionary."""
        result = output.result
        if output.errors or result is None:
            return {"errors": output.errors}

        return {
            "sheet": {"length": result.sheet.length, "width": result.sheet.width},
            "piece": {"length": result.piece.length, "width": result.piece.width},
            "max_fit": result.max_fit,
            "baseline_fit": result.baseline_fit,
            "best_split": {
                "length": result.best_split.length,
                "width": result.best_split.width,
            },
            "simple_mode": result.simple_mode,
            "residue": round(result.residue, self.precision),
            "waste_percentage": round(result.waste_percentage, self.precision),
            "regions": [self._format_plan(plan) for plan in output.region_plans],
            "stacking": {
                plan.orientation.value: plan.count for plan in output.stacking
            },
        }

    def _format_plan(self, plan: RegionPlan) -> dict[str, Any]:
        region = plan.region
        return {
            "name": region.name,
            "x": region.x,
            "y": region.y,
            "length": region.length,
            "width": region.width,
            "orientation": plan.orientation.value,
            "piece_length": plan.placed.length,
            "piece_width": plan.placed.width,
            "columns": plan.columns,
            "rows": plan.rows,
            "count": plan.count,
        }
