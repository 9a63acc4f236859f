"""
Фабрика для создания сортировщиков домена Sorting.

Вызывающая сторона выбирает вариант и направление и получает ISorter,
не зная конкретного класса.
"""

from typing import Optional

from loguru import logger

from ..domain.interfaces import ISorter
from ..domain.types import Direction, Variant
from ..locales.parsing_context import ParsingContext
from ..sorters.lexicographic import LexicographicSorter
from ..sorters.numeric import NumericSorter
from ..strategies.factory import StrategyFactory


class SorterFactory:
    """
    Фабрика для создания сортировщиков.

    Пример:
        sorter = SorterFactory().create("decimal_comma", "descending")
        result = sorter.sort(lines)
    """

    def __init__(self, strategy_factory: Optional[StrategyFactory] = None):
        self.strategy_factory = strategy_factory or StrategyFactory()

    def create(
        self,
        variant: "Variant | str",
        direction: "Direction | str" = Direction.ASCENDING,
        context: Optional[ParsingContext] = None,
    ) -> ISorter:
        """
        Создает сортировщик для варианта.

        Args:
            variant: Вариант сортировки (имя или Variant)
            direction: Направление (имя или Direction)
            context: Контекст разбора чисел для числовых вариантов (опционально)

        Returns:
            Сортировщик, реализующий интерфейс ISorter

        Raises:
            SortingConfigurationError: Неизвестный вариант или направление
        """
        variant = Variant.parse(variant)
        direction = Direction.parse(direction)
        logger.debug(f"[SorterFactory] Создание сортировщика: {variant.value}, {direction.value}")

        if not variant.is_numeric:
            return LexicographicSorter(direction)

        strategy = self.strategy_factory.get(variant)
        return NumericSorter(strategy, direction, context=context)
