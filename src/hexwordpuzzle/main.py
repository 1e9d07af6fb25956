"""
Application Initialization
==========================
This module wires the word list, the puzzle store and the main window
together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Loads the word list (Model).
3. Instantiates the Store and the Main Window (View) and connects them.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

from PySide6.QtWidgets import QMessageBox

from hexwordpuzzle import config
from hexwordpuzzle.app.application import create_app
from hexwordpuzzle.app.state import Store
from hexwordpuzzle.app.ui.main_window import MainWindow
from hexwordpuzzle.errors import WordListError
from hexwordpuzzle.logging_config import setup_logging, install_qt_message_handler
from hexwordpuzzle.model.io import load_word_list

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hexwordpuzzle", description="Spell words on a ring of hexagons.")
    parser.add_argument("--words", default=config.DEFAULT_WORDS_PATH, help="Path to a word list JSON file.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for shuffling the letters.")
    parser.add_argument("--debug", action="store_true", help="Log gesture and layout details.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)
    install_qt_message_handler()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Load the words
    try:
        word_list = load_word_list(args.words)
    except WordListError as e:
        logger.error(f"Cannot start: {e}")
        QMessageBox.critical(None, "Word list", str(e))
        return 1

    # 4. Initialize the Store and the Main Window
    store = Store(word_list, rng=random.Random(args.seed))
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
