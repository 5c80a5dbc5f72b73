"""Rectangular regions of the character grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in cell coordinates.

    Width and height are never negative; zero-area regions are valid and
    simply receive no writes.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Region extent must be non-negative: {self.width}x{self.height}")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def contains_region(self, other: "Region") -> bool:
        if other.is_empty():
            return True
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersection(self, other: "Region") -> "Region":
        """Overlap of two regions; zero-area at the clamped origin when disjoint."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Region(x, y, max(0, right - x), max(0, bottom - y))

    def inset(self, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> "Region":
        """Shrink from each edge, saturating at zero extent."""
        width = max(0, self.width - left - right)
        height = max(0, self.height - top - bottom)
        return Region(self.x + min(left, self.width), self.y + min(top, self.height), width, height)

    def centered(self, width: int, height: int) -> "Region":
        """Sub-region of at most width x height centered inside this region."""
        w = min(max(0, width), self.width)
        h = min(max(0, height), self.height)
        return Region(self.x + (self.width - w) // 2, self.y + (self.height - h) // 2, w, h)

    def rows(self):
        return range(self.y, self.bottom)
