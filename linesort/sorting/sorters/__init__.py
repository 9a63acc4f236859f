"""
Sorters sub-package: лексикографический и числовой сортировщики.
"""

from .lexicographic import LexicographicSorter
from .numeric import NumericSorter

__all__ = [
    "LexicographicSorter",
    "NumericSorter",
]
