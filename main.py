#!/usr/bin/env python3
"""Booklayout - lay out text as written book pages.

Usage:
    python main.py [filename]
    python main.py --help-book sample
"""

import sys
from booklayout.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
