"""
Geometric Primitives for the letter ring.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point on the drawing surface (y grows downwards, like screen coordinates)."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned rectangle, edges stored as (left, top, right, bottom).

    Containment is half-open: the left/top edges are inside, the right/bottom
    edges are not.
    """
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def of_points(cls, points: Iterable[Point]) -> BoundingBox:
        coords = np.array([p.to_array() for p in points])
        if coords.size == 0:
            raise ValueError("Cannot compute bounds of an empty point set.")
        x_min, y_min = coords.min(axis=0)
        x_max, y_max = coords.max(axis=0)
        return cls(float(x_min), float(y_min), float(x_max), float(y_max))

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def inset(self, dx: float, dy: float) -> BoundingBox:
        """Shrink by dx/dy on each side. Negative values grow the box."""
        return BoundingBox(self.left + dx, self.top + dy, self.right - dx, self.bottom - dy)

    def contains(self, x: float, y: float) -> bool:
        if self.is_empty():
            return False
        return self.left <= x < self.right and self.top <= y < self.bottom


def hexagon_vertices(center: Point, size: float) -> tuple[Point, ...]:
    """
    Six corners of a hexagon with circumradius `size`.

    Vertex 0 lies due east of the center, the rest follow at increasing
    multiples of 60 degrees. The outline is implicitly closed.
    """
    angles = np.pi / 3 * np.arange(6)
    xs = center.x + size * np.cos(angles)
    ys = center.y + size * np.sin(angles)
    return tuple(Point(float(x), float(y)) for x, y in zip(xs, ys))


def point_on_circle(center: Point, radius: float, angle_rad: float) -> Point:
    return Point(center.x + radius * math.cos(angle_rad), center.y + radius * math.sin(angle_rad))
