"""
Puzzle Words
============
The fixed list of words a puzzle asks for, the letters placed on the ring,
and guess checking.

Classes:
    Word: One target word and its prompt.
    WordList: The puzzle's words.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging
import random
from typing import Optional

logger = logging.getLogger(__name__)

# Locales whose dotted/dotless i pair does not follow str.upper()
_DOTTED_I_LOCALES = ("tr", "az")


def upper(text: str, locale: str = "") -> str:
    """
    Upper-case `text` for comparison.

    For Turkish and Azerbaijani, 'i' becomes 'İ' and 'ı' becomes 'I'.
    """
    if locale.lower().split("_")[0].split("-")[0] in _DOTTED_I_LOCALES:
        text = text.replace("i", "İ").replace("ı", "I")
    return text.upper()


@dataclass
class Word:
    prompt: str   # what the player is shown, e.g. a translation
    answer: str   # what has to be spelled on the ring
    is_solved: bool = False


@dataclass
class WordList:
    words: list[Word] = field(default_factory=list)
    locale: str = ""

    def normalized(self, word: Word) -> str:
        return upper(word.answer, self.locale)

    def letter_pool(self) -> list[str]:
        """
        Letters to place on the ring.

        Each letter appears as often as it does in the answer that uses it
        most, so any single answer can be spelled without reusing a cell.
        """
        pool: Counter[str] = Counter()
        for word in self.words:
            pool |= Counter(self.normalized(word))
        return sorted(pool.elements())

    def shuffled_letters(self, rng: Optional[random.Random] = None) -> list[str]:
        letters = self.letter_pool()
        (rng or random.Random()).shuffle(letters)
        return letters

    def check(self, guess: str) -> Optional[Word]:
        """
        Mark and return the first unsolved word spelled by `guess`.

        Returns None when the guess matches no unsolved word.
        """
        for word in self.words:
            if not word.is_solved and guess == self.normalized(word):
                word.is_solved = True
                logger.info(f"Solved '{word.prompt}' with '{guess}'")
                return word
        logger.info(f"Rejected guess '{guess}'")
        return None

    @property
    def all_solved(self) -> bool:
        return all(word.is_solved for word in self.words)

    @property
    def solved_count(self) -> int:
        return sum(word.is_solved for word in self.words)
