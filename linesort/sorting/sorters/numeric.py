"""
Numeric Sorter - общий алгоритм числовой сортировки.

ЦКП: перестановка исходных строк по числовому ключу или индекс строки, которую не удалось разобрать.

Алгоритм:
1. Подготовка строки стратегией (фильтр допустимых символов, нормализация разделителя)
2. Классификация: пустые строки откладываются в исходном порядке
3. Преобразование в число через ParsingContext (первая ошибка прерывает сортировку)
4. Устойчивая сортировка пар (индекс, значение)
5. Сборка: исходный текст по индексу, пустые строки в начало (asc) или в конец (desc)
"""

from typing import Generic, List, Optional, Sequence, Tuple

from loguru import logger

from ..domain.exceptions import NumberConversionError
from ..domain.interfaces import ISorter
from ..domain.types import Direction, Line, SortResult
from ..locales.parsing_context import DEFAULT_PARSING_CONTEXT, ParsingContext
from ..strategies.base import NumericStrategy, T


class NumericSorter(ISorter, Generic[T]):
    """
    Числовой сортировщик, параметризованный стратегией.

    Пример:
        sorter = NumericSorter(INTEGER_STRATEGY, Direction.DESCENDING)
        result = sorter.sort(["10", "-3", "", "7"])
        result.lines  # ["10", "7", "-3", ""]
    """

    def __init__(
        self,
        strategy: NumericStrategy[T],
        direction: Direction = Direction.ASCENDING,
        context: Optional[ParsingContext] = None,
    ):
        """
        Args:
            strategy: Числовая стратегия (Integer, DecimalComma, DecimalDot)
            direction: Направление по умолчанию
            context: Контекст разбора чисел (по умолчанию en_US)
        """
        super().__init__(direction)
        self.strategy = strategy
        self.context = context if context is not None else DEFAULT_PARSING_CONTEXT

    def sort(self, lines: Sequence[str], direction: Optional[Direction] = None) -> SortResult:
        direction = self._resolve_direction(direction)
        batch = [Line(index=idx, text=text) for idx, text in enumerate(lines)]

        empties: List[str] = []
        numbers: List[Tuple[int, T]] = []

        for line in batch:
            prepared = self.strategy.prepare(line.text, self.context)
            if self.context.is_blank(prepared):
                empties.append(line.text)
                continue

            try:
                numbers.append((line.index, self.strategy.convert(prepared, self.context)))
            except NumberConversionError as e:
                logger.warning(
                    f"[NumericSorter - {self.strategy.name}] Строка {line.index} не разобрана: "
                    f"{line.text!r} ({e.message})"
                )
                return SortResult.failure(line.index)

        assert len(numbers) + len(empties) == len(batch)

        # sorted() устойчива и при reverse=True: равные ключи сохраняют исходный порядок
        numbers = sorted(numbers, key=lambda pair: pair[1], reverse=direction.is_descending)
        ordered = [batch[idx].text for idx, _ in numbers]

        if direction.is_descending:
            output = ordered + empties
        else:
            output = empties + ordered

        assert len(output) == len(batch)
        logger.debug(
            f"[NumericSorter - {self.strategy.name}] Отсортировано {len(output)} строк "
            f"({direction.value}, пустых: {len(empties)})"
        )
        return SortResult.success(output)
