"""
Policy OCR entry point.

Usage:
    python -m policy_ocr [INPUT] [-o OUTPUT] [--no-correct]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
