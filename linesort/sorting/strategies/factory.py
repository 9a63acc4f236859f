"""
Strategy Factory - выбор числовой стратегии по варианту сортировки.
"""

from typing import Dict

from loguru import logger

from ..domain.exceptions import SortingConfigurationError
from ..domain.types import Variant
from .base import NumericStrategy
from .integer import INTEGER_STRATEGY
from .decimal_point import DECIMAL_COMMA_STRATEGY, DECIMAL_DOT_STRATEGY


class StrategyFactory:
    """
    Фабрика для выбора стратегии по варианту.

    Пример:
        factory = StrategyFactory()
        strategy = factory.get(Variant.DECIMAL_COMMA)
        prepared = strategy.prepare("3,14 kg", context)
    """

    def __init__(self):
        self._strategies: Dict[Variant, NumericStrategy] = {
            Variant.INTEGER: INTEGER_STRATEGY,
            Variant.DECIMAL_COMMA: DECIMAL_COMMA_STRATEGY,
            Variant.DECIMAL_DOT: DECIMAL_DOT_STRATEGY,
        }

    def get(self, variant: "Variant | str") -> NumericStrategy:
        """
        Получить стратегию для числового варианта.

        Raises:
            SortingConfigurationError: Вариант не числовой или стратегия не зарегистрирована
        """
        variant = Variant.parse(variant)
        if variant not in self._strategies:
            raise SortingConfigurationError(
                f"для варианта '{variant.value}' нет числовой стратегии", component="StrategyFactory"
            )
        strategy = self._strategies[variant]
        logger.debug(f"[StrategyFactory] Выбрана стратегия: {strategy.name}")
        return strategy

    def register(self, variant: "Variant | str", strategy: NumericStrategy) -> None:
        """
        Заменить стратегию для числового варианта.

        Args:
            variant: Числовой вариант (Integer, DecimalComma, DecimalDot)
            strategy: Экземпляр NumericStrategy
        """
        variant = Variant.parse(variant)
        if not variant.is_numeric:
            raise SortingConfigurationError(
                "лексикографический вариант не использует числовую стратегию", component="StrategyFactory"
            )
        self._strategies[variant] = strategy
        logger.info(f"[StrategyFactory] Зарегистрирована стратегия {strategy.name} для {variant.value}")
