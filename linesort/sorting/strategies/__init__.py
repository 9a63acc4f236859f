"""
Strategies sub-package для числовой сортировки.

Каждый числовой вариант - значение NumericStrategy, а не подкласс сортировщика.
"""

from .base import NumericStrategy, take_while_admissible
from .integer import INTEGER_STRATEGY
from .decimal_point import DECIMAL_COMMA_STRATEGY, DECIMAL_DOT_STRATEGY
from .factory import StrategyFactory

__all__ = [
    "NumericStrategy",
    "take_while_admissible",
    "INTEGER_STRATEGY",
    "DECIMAL_COMMA_STRATEGY",
    "DECIMAL_DOT_STRATEGY",
    "StrategyFactory",
]
