"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers scattered
   throughout the layout, hit-testing and drawing code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (word lists) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_WORDS_PATH (str): Absolute path to the bundled word list.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/hexwordpuzzle/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_WORDS_PATH: str = os.path.join(ASSETS_PATH, "words.json")

# Ring layout
SURFACE_FILL: float = 0.8      # share of the shorter surface side used by the ring
CELL_FACTOR: float = 0.8       # hexagon_size = available / (count * CELL_FACTOR)
RING_RADIUS_FACTOR: float = 3.0  # ring radius in multiples of hexagon_size
TEXT_SIZE_DIVISOR: float = 1.8   # glyph size = hexagon_size / TEXT_SIZE_DIVISOR

# Hit testing: bounding box of a hexagon grown by this many units on every side
HIT_MARGIN: float = 20.0

# Drawing (RGB)
BACKGROUND_COLOR = (255, 255, 255)
CELL_COLOR = (204, 204, 204)
CELL_SELECTED_COLOR = (0, 200, 0)
LETTER_COLOR = (0, 150, 0)
LINE_COLOR = (0, 150, 0)
LINE_WIDTH: float = 10.0

# Guess feedback
FEEDBACK_CORRECT_COLOR = (0, 255, 0)
FEEDBACK_WRONG_COLOR = (255, 0, 0)
FEEDBACK_FLASH_MS: int = 500
FEEDBACK_FADE_MS: int = 500
