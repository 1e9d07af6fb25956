from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import Qt, Signal, QPointF
from PySide6.QtGui import QPainter, QPainterPath, QColor, QPen, QBrush, QFont, QMouseEvent, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget, QSizePolicy

from hexwordpuzzle import config
from hexwordpuzzle.controller.board import HexagonBoard, CellView
from hexwordpuzzle.errors import InvalidInputError

logger = logging.getLogger(__name__)


def _qcolor(rgb: tuple[int, int, int]) -> QColor:
    return QColor(*rgb)


def cell_path(cell: CellView) -> QPainterPath:
    path = QPainterPath()
    first, *rest = cell.boundary
    path.moveTo(first.x, first.y)
    for p in rest:
        path.lineTo(p.x, p.y)
    path.closeSubpath()
    return path


class HexagonView(QWidget):
    """
    Qt adapter over a HexagonBoard.

    Left-button press/move/release drive the board's gesture calls, resizes
    relayout the ring, and paintEvent draws whatever the board reports.
    Selection callbacks are re-emitted as Qt signals.
    """
    selection_started = Signal()
    selection_updated = Signal(str)
    word_selected = Signal(str)

    def __init__(self, parent: QWidget | None = None, board: HexagonBoard | None = None) -> None:
        super().__init__(parent)
        self.board = board or HexagonBoard()
        self.board.set_listener(self)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 200)
        self.setAutoFillBackground(False)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_letters(self, letters: Sequence[str]) -> None:
        self.board.set_letters(letters)
        self.update()

    # ---- SelectionListener ----

    def on_selection_started(self) -> None:
        self.selection_started.emit()

    def on_selection_updated(self, current_word: str) -> None:
        self.selection_updated.emit(current_word)

    def on_word_selected(self, word: str) -> None:
        self.word_selected.emit(word)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        w, h = event.size().width(), event.size().height()
        if w <= 0 or h <= 0:
            return
        try:
            self.board.resize(w, h)
        except InvalidInputError as e:
            logger.warning(f"Relayout skipped: {e}")
        self.update()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self.board.begin_gesture(pos.x(), pos.y())
        self.update()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if not event.buttons() & Qt.MouseButton.LeftButton:
            super().mouseMoveEvent(event)
            return
        pos = event.position()
        self.board.continue_gesture(pos.x(), pos.y())
        self.update()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self.board.end_gesture()
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), _qcolor(config.BACKGROUND_COLOR))

        font = QFont(self.font())
        font.setBold(True)
        text_size = self.board.text_size
        if text_size > 0:
            font.setPixelSize(max(1, round(text_size)))
        painter.setFont(font)

        for cell in self.board.cells():
            color = config.CELL_SELECTED_COLOR if cell.selected else config.CELL_COLOR
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(_qcolor(color)))
            painter.drawPath(cell_path(cell))

            painter.setPen(_qcolor(config.LETTER_COLOR))
            painter.drawText(
                QPointF(cell.center.x - painter.fontMetrics().horizontalAdvance(cell.letter) / 2,
                        cell.center.y + text_size / 3),
                cell.letter,
            )

        polyline = self.board.selection_polyline
        if polyline:
            line = QPainterPath()
            line.moveTo(polyline[0].x, polyline[0].y)
            for p in polyline[1:]:
                line.lineTo(p.x, p.y)
            pen = QPen(_qcolor(config.LINE_COLOR))
            pen.setWidthF(config.LINE_WIDTH)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawPath(line)

        painter.end()
