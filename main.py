#!/usr/bin/env python3
"""Hourglass — entry point.

Run with:
    python main.py
    python -m hourglass
"""

import sys

from hourglass.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
