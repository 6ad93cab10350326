"""Pydantic configuration schema models for packing calculations.

This module defines the configuration schema for JSON-based packing
configuration files. It uses Pydantic v2 for validation and serialization.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for configuration files
# Version 1.0: Sheet, piece with margins, search budget and output options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SheetConfig(BaseModel):
    """Sheet dimensions.

    Either side may be the longer one; the sheet is turned so the longer
    side is its length before packing.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    length: float = Field(..., gt=0, description="Sheet length")
    width: float = Field(..., gt=0, description="Sheet width")


class PieceConfig(BaseModel):
    """Piece dimensions and the margin kept around each piece.

    Margins are added on both sides: the effective length is
    ``length + 2 * margin_length``.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    length: float = Field(..., gt=0, description="Piece length")
    width: float = Field(..., gt=0, description="Piece width")
    margin_length: float = Field(default=0.0, ge=0, description="Margin on each end of the length")
    margin_width: float = Field(default=0.0, ge=0, description="Margin on each side of the width")


class SearchConfig(BaseModel):
    """Split search options.

    Attributes:
        timeout_seconds: Abort the search after this many seconds.
        split_step: Distance between candidate cut positions. The default
            of 1 tries integer positions only.
    """

    model_config = ConfigDict(extra="forbid")

    timeout_seconds: float | None = Field(
        default=None, gt=0, description="Search time limit in seconds"
    )
    split_step: float = Field(
        default=1, gt=0, description="Distance between candidate cut positions"
    )


class OutputConfig(BaseModel):
    """Configuration for output format."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json"] = "text"
    precision: int = Field(default=2, ge=0, le=6, description="Decimal places for areas")


class PackingConfiguration(BaseModel):
    """Root configuration model for a packing calculation.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        sheet: Sheet dimensions
        piece: Piece dimensions and margins
        search: Split search options
        output: Output format configuration

    Example:
        >>> config = PackingConfiguration(
        ...     schema_version="1.0",
        ...     sheet=SheetConfig(length=100, width=70),
        ...     piece=PieceConfig(length=30, width=20),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    sheet: SheetConfig
    piece: PieceConfig
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
