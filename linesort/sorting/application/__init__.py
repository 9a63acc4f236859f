"""
Application слой домена Sorting.
"""

from .factory import SorterFactory
from .line_sort_service import LineSortService, sort_lines

__all__ = [
    "SorterFactory",
    "LineSortService",
    "sort_lines",
]
