"""Geometry value types shared by the layout engine and its consumers.

All coordinates are in layout units with the origin at the top-left of the
content area and y growing downwards.
"""
from pydantic import BaseModel, ConfigDict, Field


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=0.0, ge=0.0)
    height: float = Field(default=0.0, ge=0.0)


class EdgeInsets(BaseModel):
    model_config = ConfigDict(frozen=True)

    top: float = Field(default=0.0, ge=0.0)
    left: float = Field(default=0.0, ge=0.0)
    bottom: float = Field(default=0.0, ge=0.0)
    right: float = Field(default=0.0, ge=0.0)

    @property
    def horizontal(self) -> float:
        return self.left + self.right


class Rect(BaseModel):
    """Axis-aligned rectangle. Width and height are never negative."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=0.0, ge=0.0)
    height: float = Field(default=0.0, ge=0.0)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(width=self.width, height=self.height)

    def inset(self, dx: float, dy: float) -> "Rect":
        """Shrink by dx on the left and right and dy on the top and bottom.

        Insets larger than half the extent collapse that extent to zero around
        the rectangle's centre.
        """
        width = self.width - 2 * dx
        height = self.height - 2 * dy
        x = self.x + dx if width >= 0 else self.x + self.width / 2
        y = self.y + dy if height >= 0 else self.y + self.height / 2
        return Rect(x=x, y=y, width=max(width, 0.0), height=max(height, 0.0))

    def intersects(self, other: "Rect") -> bool:
        """Half-open overlap test on both axes.

        Two spans also count as overlapping when they start at the same
        coordinate, so a zero-size rectangle is found by an identical query.
        """
        return (
            _spans_overlap(self.min_x, self.max_x, other.min_x, other.max_x)
            and _spans_overlap(self.min_y, self.max_y, other.min_y, other.max_y)
        )


def _spans_overlap(a0: float, a1: float, b0: float, b1: float) -> bool:
    return a0 == b0 or (a0 < b1 and b0 < a1)
