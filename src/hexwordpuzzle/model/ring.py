"""
Ring Layout
===========
Places one hexagonal cell per letter evenly around a circle centred on the
drawing surface.

The layout is a pure function of (letters, width, height): no state is kept
between calls, and the same inputs always produce the same coordinates.

Classes:
    Cell: One hexagon with its letter.
    Ring: The ordered cells of one layout computation.
    RingLayoutEngine: Computes a Ring.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging
import math
from typing import Sequence

from hexwordpuzzle import config
from hexwordpuzzle.errors import InvalidInputError
from hexwordpuzzle.model.geometry_primitives import Point, BoundingBox, hexagon_vertices, point_on_circle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    letter: str
    center: Point
    boundary: tuple[Point, ...]

    @cached_property
    def bounds(self) -> BoundingBox:
        return BoundingBox.of_points(self.boundary)

    def hit_box(self, margin: float = config.HIT_MARGIN) -> BoundingBox:
        """Bounding box of the hexagon grown by `margin` on every side."""
        return self.bounds.inset(-margin, -margin)

    def hit_test(self, x: float, y: float, margin: float = config.HIT_MARGIN) -> bool:
        # Approximation of hexagon containment: corners of neighbouring
        # boxes overlap, so one sample may hit two cells.
        return self.hit_box(margin).contains(x, y)


@dataclass(frozen=True)
class Ring:
    """
    Cells in angular order, starting at the top of the circle and going
    clockwise on screen. All cells share `hexagon_size` and `radius`.
    """
    cells: tuple[Cell, ...]
    center: Point
    radius: float
    hexagon_size: float
    width: float
    height: float

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    @property
    def letters(self) -> tuple[str, ...]:
        return tuple(cell.letter for cell in self.cells)

    @property
    def text_size(self) -> float:
        """Glyph size for drawing the letters."""
        return self.hexagon_size / config.TEXT_SIZE_DIVISOR


def validate_letters(letters: Sequence[str]) -> tuple[str, ...]:
    letters = tuple(letters)
    if not letters:
        raise InvalidInputError("At least one letter is required.")
    for i, letter in enumerate(letters):
        if not isinstance(letter, str) or not letter:
            raise InvalidInputError(f"Letter at position {i} must be a non-empty string, got {letter!r}.")
    return letters


class RingLayoutEngine:
    """Stateless calculator of ring geometry."""

    def __init__(
        self,
        surface_fill: float = config.SURFACE_FILL,
        cell_factor: float = config.CELL_FACTOR,
        radius_factor: float = config.RING_RADIUS_FACTOR,
    ) -> None:
        self.surface_fill = surface_fill
        self.cell_factor = cell_factor
        self.radius_factor = radius_factor

    def layout(self, letters: Sequence[str], width: float, height: float) -> Ring:
        """
        Compute the ring for `letters` on a `width` x `height` surface.

        Args:
            letters: Letters in ring order, one cell each.
            width: Surface width, must be positive.
            height: Surface height, must be positive.

        Returns:
            A new Ring with one cell per letter.

        Raises:
            InvalidInputError: If there are no letters or a dimension is not positive.
        """
        letters = validate_letters(letters)
        if width <= 0 or height <= 0:
            raise InvalidInputError(f"Surface size must be positive, got {width} x {height}.")

        count = len(letters)
        available_size = min(width, height) * self.surface_fill
        hexagon_size = available_size / (count * self.cell_factor)
        radius = hexagon_size * self.radius_factor
        center = Point(width / 2, height / 2)

        start_angle = -math.pi / 2
        angle_step = 2 * math.pi / count

        cells = []
        for i, letter in enumerate(letters):
            cell_center = point_on_circle(center, radius, start_angle + angle_step * i)
            cells.append(Cell(letter=letter, center=cell_center, boundary=hexagon_vertices(cell_center, hexagon_size)))

        logger.debug(
            f"Laid out {count} cells on {width}x{height}: hexagon size {hexagon_size:.2f}, ring radius {radius:.2f}"
        )
        return Ring(
            cells=tuple(cells),
            center=center,
            radius=radius,
            hexagon_size=hexagon_size,
            width=width,
            height=height,
        )


def layout(letters: Sequence[str], width: float, height: float) -> Ring:
    """Lay out `letters` with the default factors."""
    return RingLayoutEngine().layout(letters, width, height)
