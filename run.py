"""
Entry Point Script (Bootstrap)
==============================
Starts the puzzle straight from a source checkout, without installing it.

It is located outside the 'src' package and puts 'src' on 'sys.path' so that
imports like 'from hexwordpuzzle.model...' resolve.

Usage:
    $ python run.py [--words path/to/words.json] [--seed 7] [--debug]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'hexwordpuzzle.WordPuzzle'  # Arbitrary string, groups the taskbar icon on Windows
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from hexwordpuzzle.main import main

if __name__ == "__main__":
    sys.exit(main())
