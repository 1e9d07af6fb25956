"""
Run with: python -m hexwordpuzzle
"""
import sys

from hexwordpuzzle.main import main

if __name__ == "__main__":
    sys.exit(main())
