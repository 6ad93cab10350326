"""Validation structures and packing advisory checks.

Structural validation is done by the Pydantic schema. The checks here
flag configurations that are valid but probably not what the user wants,
such as a piece that never fits or a search that will run for a long time.
"""

from dataclasses import dataclass, field
from typing import Any

from sheetfit.application.config.adapter import config_to_input
from sheetfit.application.config.schema import PackingConfiguration
from sheetfit.domain import best_fit, split_position_count

# Split positions above which a search without a time limit gets a warning
LARGE_SEARCH_POSITIONS: int = 1_000_000

# Field labels used by PackingInput.validate() and their config paths
_LABEL_PATHS: dict[str, str] = {
    "Sheet length": "sheet.length",
    "Sheet width": "sheet.width",
    "Piece length": "piece.length",
    "Piece width": "piece.width",
    "Margin length": "piece.margin_length",
    "Margin width": "piece.margin_width",
}


@dataclass
class ValidationError:
    """Blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "piece.length")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _error_path(message: str) -> str:
    for label, path in _LABEL_PATHS.items():
        if message.startswith(label):
            return path
    return "piece"


def search_positions(config: PackingConfiguration) -> int:
    """Number of split positions the search will evaluate."""
    packing_input = config_to_input(config)
    sheet = packing_input.sheet_dimensions()
    step = config.search.split_step
    return split_position_count(sheet.length, step) * split_position_count(sheet.width, step)


def validate_config(config: PackingConfiguration) -> ValidationResult:
    """Run advisory checks on a configuration already validated by Pydantic.

    Args:
        config: A PackingConfiguration instance

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()

    packing_input = config_to_input(config)
    errors = packing_input.validate()
    for message in errors:
        result.add_error(path=_error_path(message), message=message)
    if errors:
        return result

    sheet = packing_input.sheet_dimensions()
    piece = packing_input.piece_dimensions()

    if best_fit(piece, sheet.length, sheet.width) == 0:
        result.add_warning(
            path="piece",
            message=(
                f"Piece with margins ({piece.length:g} x {piece.width:g}) does not fit "
                f"on the sheet ({sheet.length:g} x {sheet.width:g})"
            ),
            suggestion="Reduce the piece size or margins, or use a larger sheet",
        )

    if config.search.split_step > sheet.width:
        result.add_warning(
            path="search.split_step",
            message=(
                f"Split step ({config.search.split_step:g}) exceeds the sheet width "
                f"({sheet.width:g}); only cuts on the sheet edge are tried"
            ),
            suggestion="Use a split step of 1 or smaller",
        )

    positions = search_positions(config)
    if positions > LARGE_SEARCH_POSITIONS and config.search.timeout_seconds is None:
        result.add_warning(
            path="search",
            message=f"Search covers {positions:,} split positions and may run for a long time",
            suggestion="Set search.timeout_seconds or increase search.split_step",
        )

    return result
