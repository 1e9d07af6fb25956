from __future__ import annotations

import logging
import random
from typing import Optional

from PySide6.QtCore import QObject, Signal

from hexwordpuzzle.model.words import Word, WordList

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central puzzle state with signals for the window to follow."""
    words_changed = Signal(object)
    word_solved = Signal(object)
    guess_rejected = Signal(str)
    puzzle_completed = Signal()

    def __init__(self, word_list: WordList, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self.word_list = word_list
        self._rng = rng or random.Random()

    @property
    def words(self) -> list[Word]:
        return self.word_list.words

    def letters(self) -> list[str]:
        """Shuffled letters for the ring."""
        return self.word_list.shuffled_letters(self._rng)

    def check_word(self, guess: str) -> bool:
        word = self.word_list.check(guess)
        if word is None:
            self.guess_rejected.emit(guess)
            return False

        self.word_solved.emit(word)
        self.words_changed.emit(self.word_list)
        if self.word_list.all_solved:
            logger.info("All words solved.")
            self.puzzle_completed.emit()
        return True
