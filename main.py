#!/usr/bin/env python3
"""epomo entry point.

Run with:
    python main.py
    python -m epomo
"""

from epomo.__main__ import main


if __name__ == "__main__":
    main()
