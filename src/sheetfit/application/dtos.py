"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from sheetfit.application.input_parser import InputValidationError, parse_dimension
from sheetfit.domain import Dimensions, PackingResult, RegionPlan


@dataclass
class PackingInput:
    """Input DTO for one packing calculation.

    Piece dimensions are the raw sizes; margins are added on both sides by
    ``piece_dimensions()``.
    """

    sheet_length: float
    sheet_width: float
    piece_length: float
    piece_width: float
    margin_length: float = 0.0
    margin_width: float = 0.0

    @classmethod
    def from_text(
        cls,
        sheet_length: str | None,
        sheet_width: str | None,
        piece_length: str | None,
        piece_width: str | None,
        margin_length: str | None = None,
        margin_width: str | None = None,
    ) -> PackingInput:
        """Build an input from user-entered text.

        Every field is checked before raising, so the error lists all
        invalid fields at once.

        Raises:
            InputValidationError: If any field is invalid.
        """
        fields = (
            ("sheet_length", "Sheet length", sheet_length, True),
            ("sheet_width", "Sheet width", sheet_width, True),
            ("piece_length", "Piece length", piece_length, True),
            ("piece_width", "Piece width", piece_width, True),
            ("margin_length", "Margin length", margin_length, False),
            ("margin_width", "Margin width", margin_width, False),
        )
        values: dict[str, float] = {}
        errors: list[str] = []
        for name, label, text, required in fields:
            try:
                values[name] = parse_dimension(text, label, required=required)
            except InputValidationError as e:
                errors.extend(e.errors)

        if errors:
            raise InputValidationError(errors)
        return cls(**values)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        required = (
            ("Sheet length", self.sheet_length),
            ("Sheet width", self.sheet_width),
            ("Piece length", self.piece_length),
            ("Piece width", self.piece_width),
        )
        for label, value in required:
            if not math.isfinite(value) or value <= 0:
                errors.append(f"{label} must be positive")
        for label, value in (
            ("Margin length", self.margin_length),
            ("Margin width", self.margin_width),
        ):
            if not math.isfinite(value) or value < 0:
                errors.append(f"{label} must be non-negative")
        return errors

    def sheet_dimensions(self) -> Dimensions:
        """Sheet with the longer side as length."""
        return Dimensions(length=self.sheet_length, width=self.sheet_width).normalized()

    def piece_dimensions(self) -> Dimensions:
        """Piece inflated by margins on both sides, longer side as length.

        The length margin applies to the raw piece length and the width
        margin to the raw piece width, before the sides are ordered.
        """
        inflated_a = self.piece_length + 2 * self.margin_length
        inflated_b = self.piece_width + 2 * self.margin_width
        return Dimensions(
            length=max(inflated_a, inflated_b),
            width=min(inflated_a, inflated_b),
        )


@dataclass
class PackingOutput:
    """Output DTO for a packing calculation.

    Attributes:
        input: The input that was calculated.
        result: Solver result, None when the input was invalid.
        region_plans: Tiling of each region of the winning layout.
        stacking: Whole-sheet horizontal and vertical stackings.
        errors: Validation errors; empty on success.
    """

    input: PackingInput
    result: PackingResult | None = None
    region_plans: tuple[RegionPlan, ...] = ()
    stacking: tuple[RegionPlan, ...] = ()
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if calculation was successful."""
        return len(self.errors) == 0 and self.result is not None
