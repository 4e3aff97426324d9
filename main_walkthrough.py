# main_walkthrough.py

"""
Standalone entry point for the walkthrough.

Usage:
    poetry run python main_walkthrough.py
"""

import sys

from bookshelf.walkthrough import main

if __name__ == "__main__":
    sys.exit(main())
