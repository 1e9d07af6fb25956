"""
Drag Selection
==============
Turns a stream of pointer samples (press, move, release) into an ordered,
duplicate-free list of touched cells and reports the spelled word.

The tracker owns the only record of which cells are selected; a cell is
selected exactly when its index is in `path`.

Classes:
    GestureState: IDLE or DRAGGING.
    SelectionListener: Callback protocol for the host.
    SelectionTracker: The state machine.
"""
from __future__ import annotations

from enum import Enum
import logging
from typing import Optional, Protocol

from hexwordpuzzle import config
from hexwordpuzzle.model.geometry_primitives import Point
from hexwordpuzzle.model.ring import Ring

logger = logging.getLogger(__name__)


class GestureState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class SelectionListener(Protocol):
    """Receives selection lifecycle callbacks, synchronously, during gesture handling."""
    def on_selection_started(self) -> None: ...
    def on_selection_updated(self, current_word: str) -> None: ...
    def on_word_selected(self, word: str) -> None: ...


class SelectionTracker:
    def __init__(
        self,
        ring: Optional[Ring] = None,
        listener: Optional[SelectionListener] = None,
        hit_margin: float = config.HIT_MARGIN,
    ) -> None:
        self._ring = ring
        self._listener = listener
        self._hit_margin = hit_margin
        self._path: list[int] = []
        self._state = GestureState.IDLE

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def ring(self) -> Optional[Ring]:
        return self._ring

    @property
    def path(self) -> tuple[int, ...]:
        return tuple(self._path)

    @property
    def current_word(self) -> str:
        if self._ring is None:
            return ""
        return "".join(self._ring[i].letter for i in self._path)

    @property
    def polyline(self) -> tuple[Point, ...]:
        """Centers of the selected cells in selection order, for the feedback line."""
        if self._ring is None:
            return ()
        return tuple(self._ring[i].center for i in self._path)

    def is_selected(self, index: int) -> bool:
        return index in self._path

    def set_listener(self, listener: Optional[SelectionListener]) -> None:
        self._listener = listener

    def set_ring(self, ring: Optional[Ring]) -> None:
        """
        Point the tracker at a freshly computed ring.

        A relayout of the same letters keeps the in-progress path, since the
        indices still name the same cells. Any other change abandons the
        gesture without callbacks.
        """
        same_letters = (
            ring is not None and self._ring is not None and ring.letters == self._ring.letters
        )
        self._ring = ring
        if not same_letters and (self._path or self._state is GestureState.DRAGGING):
            logger.debug("Ring replaced during a gesture; selection dropped.")
            self._reset()

    def begin_gesture(self, x: float, y: float) -> None:
        self._reset()
        self._state = GestureState.DRAGGING
        logger.debug(f"Gesture started at ({x:.1f}, {y:.1f})")
        if self._listener is not None:
            self._listener.on_selection_started()
        self._hit(x, y)

    def continue_gesture(self, x: float, y: float) -> None:
        if self._state is not GestureState.DRAGGING:
            return
        self._hit(x, y)
        if self._listener is not None and self._path:
            self._listener.on_selection_updated(self.current_word)

    def end_gesture(self) -> None:
        if self._state is not GestureState.DRAGGING:
            return
        word = self.current_word
        logger.debug(f"Gesture finished with word '{word}'")
        if self._listener is not None and self._path:
            self._listener.on_word_selected(word)
        self._reset()

    def cancel_gesture(self) -> None:
        """Abandon the gesture without reporting a word."""
        if self._state is GestureState.DRAGGING:
            logger.debug("Gesture cancelled.")
        self._reset()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _reset(self) -> None:
        self._path.clear()
        self._state = GestureState.IDLE

    def _hit(self, x: float, y: float) -> None:
        if self._ring is None:
            return
        # Ring order, not drag order, decides between cells hit by the same sample.
        for index, cell in enumerate(self._ring):
            if index not in self._path and cell.hit_test(x, y, self._hit_margin):
                self._path.append(index)
                logger.debug(f"Selected cell {index} ('{cell.letter}')")
