"""linesort - сортировка строк текста (лексикографически и по числам)."""

from linesort.sorting import (
    Direction,
    Variant,
    SortResult,
    SorterFactory,
    sort_lines,
)

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "Variant",
    "SortResult",
    "SorterFactory",
    "sort_lines",
]
