"""
Lexicographic Sorter - сортировка строк по кодам символов.

Понятия "пустой строки" нет: "" - наименьшее значение. Никогда не завершается ошибкой.
"""

from typing import Optional, Sequence

from loguru import logger

from ..domain.interfaces import ISorter
from ..domain.types import Direction, SortResult


class LexicographicSorter(ISorter):
    """Сортировка строк прямым сравнением (без учёта языка)."""

    def sort(self, lines: Sequence[str], direction: Optional[Direction] = None) -> SortResult:
        direction = self._resolve_direction(direction)
        output = sorted(lines, reverse=direction.is_descending)
        logger.debug(f"[LexicographicSorter] Отсортировано {len(output)} строк ({direction.value})")
        return SortResult.success(output)
