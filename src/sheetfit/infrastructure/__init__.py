"""Infrastructure layer - output formatting and logging setup."""

from .formatters import JsonExporter, ResultSummaryFormatter
from .logging_config import setup_logging

__all__ = [
    "JsonExporter",
    "ResultSummaryFormatter",
    "setup_logging",
]
