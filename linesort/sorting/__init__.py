"""
Домен Sorting: перестановка пакета строк.

Варианты:
- Lexicographic: сравнение по кодам символов
- Integer: 64-битные целые
- DecimalComma: десятичные числа с запятой ("3,14")
- DecimalDot: десятичные числа с точкой ("3.14")

Вход: последовательность строк + вариант + направление
Выход: SortResult (строки или индекс неразобранной строки)
"""

from linesort.sorting.domain import (
    Direction,
    Variant,
    Line,
    SortResult,
    ISorter,
    SortingError,
    NumberConversionError,
    UnparseableLineError,
    SortingConfigurationError,
)
from linesort.sorting.locales import ParsingContext, DEFAULT_PARSING_CONTEXT
from linesort.sorting.strategies import (
    NumericStrategy,
    INTEGER_STRATEGY,
    DECIMAL_COMMA_STRATEGY,
    DECIMAL_DOT_STRATEGY,
    StrategyFactory,
)
from linesort.sorting.sorters import LexicographicSorter, NumericSorter
from linesort.sorting.application import SorterFactory, LineSortService, sort_lines

__all__ = [
    # Domain
    "Direction",
    "Variant",
    "Line",
    "SortResult",
    "ISorter",
    "SortingError",
    "NumberConversionError",
    "UnparseableLineError",
    "SortingConfigurationError",
    # Parsing context
    "ParsingContext",
    "DEFAULT_PARSING_CONTEXT",
    # Strategies
    "NumericStrategy",
    "INTEGER_STRATEGY",
    "DECIMAL_COMMA_STRATEGY",
    "DECIMAL_DOT_STRATEGY",
    "StrategyFactory",
    # Sorters
    "LexicographicSorter",
    "NumericSorter",
    # Application
    "SorterFactory",
    "LineSortService",
    "sort_lines",
]
