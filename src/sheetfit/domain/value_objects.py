"""Geometry value objects for sheet packing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Orientation(str, Enum):
    """How a piece is laid on a region.

    HORIZONTAL places the piece as (length, width) along the region's
    (length, width) axes. VERTICAL rotates it 90 degrees, placing it as
    (width, length).
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Dimensions:
    """Immutable rectangle size, used for both sheets and pieces."""

    length: float
    width: float

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def area(self) -> float:
        """Area of the rectangle."""
        return self.length * self.width

    def rotated(self) -> Dimensions:
        """Same rectangle turned 90 degrees."""
        return Dimensions(length=self.width, width=self.length)

    def oriented(self, orientation: Orientation) -> Dimensions:
        """Dimensions as placed in the given orientation."""
        if orientation is Orientation.VERTICAL:
            return self.rotated()
        return self

    def normalized(self) -> Dimensions:
        """Landscape form with the longer side as length."""
        if self.length >= self.width:
            return self
        return self.rotated()


@dataclass(frozen=True)
class SplitPoint:
    """Crossing point of one vertical and one horizontal cut.

    ``length`` is the distance of the vertical cut from the left edge and
    ``width`` the distance of the horizontal cut from the top edge.
    """

    length: float = 0
    width: float = 0

    def __post_init__(self) -> None:
        if self.length < 0 or self.width < 0:
            raise ValueError("Split coordinates must be non-negative")

    @property
    def is_origin(self) -> bool:
        """True for the default (0, 0) split, which means no split."""
        return self.length == 0 and self.width == 0

    def as_tuple(self) -> tuple[float, float]:
        return (self.length, self.width)


@dataclass(frozen=True)
class Region:
    """Axis-aligned sub-rectangle of a sheet.

    Unlike Dimensions, a region may be empty (zero length or width) when a
    cut lies on the sheet edge.

    Attributes:
        name: Region identifier (e.g. "top_left", or "sheet").
        x: Offset of the left edge from the sheet's left edge.
        y: Offset of the top edge from the sheet's top edge.
        length: Extent along the sheet length.
        width: Extent along the sheet width.
    """

    name: str
    x: float
    y: float
    length: float
    width: float

    def __post_init__(self) -> None:
        if self.length < 0 or self.width < 0:
            raise ValueError("Region extent must be non-negative")

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def is_empty(self) -> bool:
        return self.length == 0 or self.width == 0
