"""
Word List I/O
Loads the puzzle's word list from a JSON file.

Expected layout:

    {
        "locale": "tr",
        "words": [
            {"prompt": "book", "answer": "KİTAP"},
            ...
        ]
    }
"""
from __future__ import annotations

import json
import logging
import os

from hexwordpuzzle.errors import WordListError
from hexwordpuzzle.model.words import Word, WordList

logger = logging.getLogger(__name__)


def _require_text(entry: dict, key: str, position: int) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise WordListError(f"Word #{position}: '{key}' must be a non-empty string.")
    return value.strip()


def parse_word_list(data: object) -> WordList:
    """Build a WordList from already decoded JSON data."""
    if not isinstance(data, dict):
        raise WordListError("Word list must be a JSON object.")

    locale = data.get("locale", "")
    if not isinstance(locale, str):
        raise WordListError("'locale' must be a string.")

    entries = data.get("words")
    if not isinstance(entries, list) or not entries:
        raise WordListError("'words' must be a non-empty list.")

    words = []
    for i, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise WordListError(f"Word #{i} must be an object.")
        words.append(Word(prompt=_require_text(entry, "prompt", i), answer=_require_text(entry, "answer", i)))

    return WordList(words=words, locale=locale)


def load_word_list(filepath: str) -> WordList:
    """
    Read a word list file.

    Raises:
        WordListError: If the file cannot be read or does not describe a word list.
    """
    logger.info(f"Loading word list from: {filepath}")
    if not os.path.exists(filepath):
        raise WordListError(f"Word list not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise WordListError(f"Word list '{filepath}' is not valid JSON: {e}") from e
    except OSError as e:
        raise WordListError(f"Could not read word list '{filepath}': {e}") from e

    word_list = parse_word_list(data)
    logger.debug(f"Loaded {len(word_list.words)} words (locale '{word_list.locale}').")
    return word_list
