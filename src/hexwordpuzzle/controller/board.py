"""
Hexagon Board
=============
The host-facing side of the puzzle core.

Why is this file needed?
------------------------
A GUI toolkit only knows about pointer events, resizes and painting. This
class gives it exactly those entry points and hides the ring layout and the
selection tracker behind them, so the widget stays a thin adapter.

Classes:
    CellView: Read-only drawing data for one cell.
    HexagonBoard: Letters + surface size -> Ring, and gesture delegation.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Sequence

from hexwordpuzzle.controller.selection import SelectionTracker, SelectionListener, GestureState
from hexwordpuzzle.model.geometry_primitives import Point
from hexwordpuzzle.model.ring import Ring, RingLayoutEngine, validate_letters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellView:
    index: int
    letter: str
    center: Point
    boundary: tuple[Point, ...]
    selected: bool


class HexagonBoard:
    def __init__(
        self,
        engine: Optional[RingLayoutEngine] = None,
        tracker: Optional[SelectionTracker] = None,
    ) -> None:
        self._engine = engine or RingLayoutEngine()
        self._tracker = tracker or SelectionTracker()
        self._letters: tuple[str, ...] = ()
        self._width: float = 0.0
        self._height: float = 0.0
        self._ring: Optional[Ring] = None

    # ---- state ----

    @property
    def letters(self) -> tuple[str, ...]:
        return self._letters

    @property
    def size(self) -> tuple[float, float]:
        return self._width, self._height

    @property
    def ring(self) -> Optional[Ring]:
        return self._ring

    @property
    def state(self) -> GestureState:
        return self._tracker.state

    @property
    def current_word(self) -> str:
        return self._tracker.current_word

    def set_listener(self, listener: Optional[SelectionListener]) -> None:
        self._tracker.set_listener(listener)

    # ---- layout ----

    def set_letters(self, letters: Sequence[str]) -> Optional[Ring]:
        """
        Replace the letters on the ring.

        The ring is computed right away when the surface size is known,
        otherwise on the first `resize`. Calling again with the same letters
        and size keeps the current ring.

        Raises:
            InvalidInputError: If the letter list is empty or contains a non-letter.
        """
        letters = validate_letters(letters)
        if letters == self._letters and self._ring is not None and self._ring_matches_size():
            return self._ring

        self._letters = letters
        if not self._has_surface():
            logger.debug(f"Surface has no size yet; layout of {len(letters)} letters deferred.")
            self._replace_ring(None)
            return None
        return self._relayout()

    def resize(self, width: float, height: float) -> Optional[Ring]:
        """
        Record a new surface size and rebuild the ring from the current letters.

        Raises:
            InvalidInputError: If letters are set and a dimension is not positive.
        """
        if (width, height) == (self._width, self._height) and self._ring is not None:
            return self._ring
        if self._letters:
            # A failed layout leaves the previous size and ring in place
            ring = self._engine.layout(self._letters, width, height)
            self._width, self._height = width, height
            self._replace_ring(ring)
            logger.info(f"Relayout after resize to {width}x{height}")
            return ring
        self._width, self._height = width, height
        return None

    def _has_surface(self) -> bool:
        return self._width > 0 and self._height > 0

    def _ring_matches_size(self) -> bool:
        return (self._ring.width, self._ring.height) == (self._width, self._height)

    def _relayout(self) -> Ring:
        ring = self._engine.layout(self._letters, self._width, self._height)
        self._replace_ring(ring)
        logger.info(f"Laid out {len(ring)} letters: {' '.join(ring.letters)}")
        return ring

    def _replace_ring(self, ring: Optional[Ring]) -> None:
        self._ring = ring
        self._tracker.set_ring(ring)

    # ---- gestures ----

    def begin_gesture(self, x: float, y: float) -> None:
        self._tracker.begin_gesture(x, y)

    def continue_gesture(self, x: float, y: float) -> None:
        self._tracker.continue_gesture(x, y)

    def end_gesture(self) -> None:
        self._tracker.end_gesture()

    def cancel_gesture(self) -> None:
        self._tracker.cancel_gesture()

    # ---- render data ----

    @property
    def text_size(self) -> float:
        return self._ring.text_size if self._ring is not None else 0.0

    @property
    def selection_polyline(self) -> tuple[Point, ...]:
        return self._tracker.polyline

    def cells(self) -> list[CellView]:
        if self._ring is None:
            return []
        return [
            CellView(
                index=i,
                letter=cell.letter,
                center=cell.center,
                boundary=cell.boundary,
                selected=self._tracker.is_selected(i),
            )
            for i, cell in enumerate(self._ring)
        ]
