"""
The single puzzle screen: target words on top, the live guess, the letter
ring and a Clear button.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot, QVariantAnimation, QPropertyAnimation, QSequentialAnimationGroup, QAbstractAnimation
from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGraphicsOpacityEffect
)

from hexwordpuzzle import config
from hexwordpuzzle.app.application import VISIBLE_APP_NAME
from hexwordpuzzle.app.state import Store
from hexwordpuzzle.app.ui.hexagon_view import HexagonView
from hexwordpuzzle.model.words import WordList

logger = logging.getLogger(__name__)

WORD_SEPARATOR = " • "


class WordsRow(QWidget):
    """Prompts of all words in one row; solved ones are struck through."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(8, 4, 8, 4)
        self._layout.setSpacing(0)
        self.labels: list[QLabel] = []

    def set_words(self, word_list: WordList) -> None:
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        self.labels = []

        self._layout.addStretch(1)
        for i, word in enumerate(word_list.words):
            if i > 0:
                self._layout.addWidget(QLabel(WORD_SEPARATOR, self))
            label = QLabel(word.prompt, self)
            font = QFont(label.font())
            font.setPointSize(16)
            font.setStrikeOut(word.is_solved)
            label.setFont(font)
            self._layout.addWidget(label)
            self.labels.append(label)
        self._layout.addStretch(1)


class GuessLabel(QLabel):
    """Shows the word being dragged and flashes the verdict once it is released."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = QFont(self.font())
        font.setPointSize(24)
        font.setBold(True)
        self.setFont(font)
        self.setMinimumHeight(48)

        # The label keeps its row while hidden, so the hexagon view never resizes mid-gesture
        policy = self.sizePolicy()
        policy.setRetainSizeWhenHidden(True)
        self.setSizePolicy(policy)

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(1.0)
        self.setGraphicsEffect(self._opacity)

        # One animation set for the whole session, restarted for every guess
        self.color_animation = QVariantAnimation(self)
        self.color_animation.setStartValue(QColor(*config.BACKGROUND_COLOR))
        self.color_animation.setDuration(config.FEEDBACK_FLASH_MS)
        self.color_animation.valueChanged.connect(self._set_background)

        self.fade_animation = QPropertyAnimation(self._opacity, b"opacity", self)
        self.fade_animation.setStartValue(1.0)
        self.fade_animation.setEndValue(0.0)
        self.fade_animation.setDuration(config.FEEDBACK_FADE_MS)

        self.feedback = QSequentialAnimationGroup(self)
        self.feedback.addAnimation(self.color_animation)
        self.feedback.addAnimation(self.fade_animation)
        self.feedback.finished.connect(self.reset)

        self.reset()

    def _set_background(self, color: QColor) -> None:
        self.setStyleSheet(f"background-color: {color.name(QColor.NameFormat.HexArgb)};")

    def reset(self) -> None:
        """Hide and restore the plain look."""
        if self.feedback.state() != QAbstractAnimation.State.Stopped:
            self.feedback.stop()
        self._opacity.setOpacity(1.0)
        self._set_background(QColor(Qt.GlobalColor.transparent))
        self.setVisible(False)

    def start_selection(self) -> None:
        self.reset()
        self.setText("")
        self.setVisible(True)

    def flash(self, correct: bool) -> None:
        rgb = config.FEEDBACK_CORRECT_COLOR if correct else config.FEEDBACK_WRONG_COLOR
        if self.feedback.state() != QAbstractAnimation.State.Stopped:
            self.feedback.stop()
        self._opacity.setOpacity(1.0)
        self.color_animation.setEndValue(QColor(*rgb))
        self.feedback.start()


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(480, 800)

        self.store = store

        central = QWidget(self)
        v = QVBoxLayout(central)

        self.words_row = WordsRow(central)
        v.addWidget(self.words_row, 0)

        self.guess_label = GuessLabel(central)
        v.addWidget(self.guess_label, 0)

        self.hexagon_view = HexagonView(central)
        v.addWidget(self.hexagon_view, 1)

        self.clear_button = QPushButton(self.tr("Clear"), central)
        v.addWidget(self.clear_button, 0, Qt.AlignmentFlag.AlignHCenter)

        self.setCentralWidget(central)
        self.statusBar()

        # ---- wiring ----
        self.hexagon_view.selection_started.connect(self._on_selection_started)
        self.hexagon_view.selection_updated.connect(self.guess_label.setText)
        self.hexagon_view.word_selected.connect(self._on_word_selected)
        self.clear_button.clicked.connect(self.clear_selection)

        self.store.words_changed.connect(self.words_row.set_words)
        self.store.puzzle_completed.connect(self._on_puzzle_completed)

        self.words_row.set_words(self.store.word_list)
        self.hexagon_view.set_letters(self.store.letters())

    @Slot()
    def _on_selection_started(self) -> None:
        self.guess_label.start_selection()

    @Slot(str)
    def _on_word_selected(self, word: str) -> None:
        self.guess_label.setText(word)
        correct = self.store.check_word(word)
        self.guess_label.flash(correct)

    @Slot()
    def _on_puzzle_completed(self) -> None:
        self.statusBar().showMessage(self.tr("All words found!"))

    @Slot()
    def clear_selection(self) -> None:
        self.guess_label.setText("")
        self.guess_label.reset()
