#!/usr/bin/env python3
"""
Точка входа для домена Sorting.

Использование:
    python scripts/sort_lines.py input.txt --variant integer --descending

См. linesort/cli.py.
"""

from linesort.cli import main


if __name__ == "__main__":
    main()
