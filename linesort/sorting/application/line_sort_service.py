"""
Line Sort Service - точка входа домена Sorting для вызывающей стороны.

Принимает SortRequestDTO, возвращает SortResponseDTO.
Документ вызывающей стороны при ошибке не меняется: сервис не возвращает частичный результат.
"""

import time
from typing import Optional, Sequence, TYPE_CHECKING

from loguru import logger

from ..domain.types import Direction, SortResult, Variant
from .factory import SorterFactory

if TYPE_CHECKING:
    from contracts.sorting_dto import SortRequestDTO, SortResponseDTO


class LineSortService:
    """
    Сервис сортировки строк.

    ЦКП: SortResponseDTO с отсортированными строками или индексом неразобранной строки.
    """

    def __init__(self, sorter_factory: Optional[SorterFactory] = None):
        self.sorter_factory = sorter_factory or SorterFactory()

    def sort(
        self,
        lines: Sequence[str],
        variant: "Variant | str",
        direction: "Direction | str" = Direction.ASCENDING,
    ) -> SortResult:
        """Сортирует пакет строк одним вызовом: создание сортировщика + sort()."""
        start = time.perf_counter()
        sorter = self.sorter_factory.create(variant, direction)
        result = sorter.sort(lines)
        elapsed_ms = (time.perf_counter() - start) * 1000

        if result.ok:
            logger.info(f"[LineSortService] {len(lines)} строк отсортировано за {elapsed_ms:.1f}ms")
        else:
            logger.warning(f"[LineSortService] Сортировка прервана: строка {result.failed_line_index}")
        return result

    def process(self, request: "SortRequestDTO") -> "SortResponseDTO":
        """
        Обрабатывает запрос на сортировку.

        Args:
            request: Строки, вариант и направление

        Returns:
            SortResponseDTO (lines при успехе, failed_line_index при ошибке)
        """
        # contracts импортирует типы домена, поэтому импорт здесь, а не на уровне модуля
        from contracts.sorting_dto import SortResponseDTO

        result = self.sort(request.lines, request.variant, request.direction)
        return SortResponseDTO(
            lines=result.lines,
            failed_line_index=result.failed_line_index,
            variant=request.variant,
            direction=request.direction,
        )


def sort_lines(
    lines: Sequence[str],
    variant: "Variant | str" = Variant.LEXICOGRAPHIC,
    direction: "Direction | str" = Direction.ASCENDING,
) -> SortResult:
    """
    Сортирует строки выбранным вариантом.

    Пример:
        sort_lines(["10", "-3", "", "7"], "integer").lines  # ["", "-3", "7", "10"]
    """
    return SorterFactory().create(variant, direction).sort(lines)
