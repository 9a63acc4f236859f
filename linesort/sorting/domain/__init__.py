"""
Domain слой домена Sorting.

Содержит типы, интерфейсы и исключения.
"""

from .types import Direction, Variant, Line, SortResult
from .interfaces import ISorter
from .exceptions import (
    SortingError,
    NumberConversionError,
    UnparseableLineError,
    SortingConfigurationError,
)

__all__ = [
    # Типы
    "Direction",
    "Variant",
    "Line",
    "SortResult",

    # Интерфейсы
    "ISorter",

    # Исключения
    "SortingError",
    "NumberConversionError",
    "UnparseableLineError",
    "SortingConfigurationError",
]
