"""Parsing of user-entered dimension text.

Dimensions arrive as free text (form fields, CLI options). Required values
must be positive numbers; margins are optional and default to zero.
"""

from __future__ import annotations

import math

INVALID_DIMENSIONS_MESSAGE = "Please enter valid positive numbers for all dimensions."


class InputValidationError(ValueError):
    """Raised when user-entered dimensions cannot be used.

    Attributes:
        errors: One message per offending field.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def parse_dimension(text: str | float | None, label: str, *, required: bool = True) -> float:
    """Parse one dimension value.

    Args:
        text: Raw value. Numbers are accepted as-is.
        label: Field name used in error messages.
        required: Required values must be positive. Optional values
            default to 0 when blank and must be non-negative.

    Returns:
        The parsed value.

    Raises:
        InputValidationError: If the value is missing, not a finite number,
            or out of range.

    Examples:
        >>> parse_dimension(" 12.5 ", "Sheet length")
        12.5
        >>> parse_dimension("", "Margin length", required=False)
        0.0
    """
    if text is None or (isinstance(text, str) and not text.strip()):
        if required:
            raise InputValidationError([f"{label} is required"])
        return 0.0

    try:
        value = float(text.strip() if isinstance(text, str) else text)
    except ValueError:
        raise InputValidationError([f"{label} must be a number (got: {text!r})"])

    if not math.isfinite(value):
        raise InputValidationError([f"{label} must be a finite number"])
    if required and value <= 0:
        raise InputValidationError([f"{label} must be positive"])
    if not required and value < 0:
        raise InputValidationError([f"{label} must be non-negative"])
    return value
