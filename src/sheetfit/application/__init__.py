"""Application layer - use cases and orchestration."""

from .commands import CalculatePackingCommand
from .dtos import PackingInput, PackingOutput
from .input_parser import (
    INVALID_DIMENSIONS_MESSAGE,
    InputValidationError,
    parse_dimension,
)

__all__ = [
    "CalculatePackingCommand",
    "INVALID_DIMENSIONS_MESSAGE",
    "InputValidationError",
    "PackingInput",
    "PackingOutput",
    "parse_dimension",
]
