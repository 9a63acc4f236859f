"""
Интерфейсы (абстрактные классы) для домена Sorting.

Домен Sorting отвечает за:
1. Перестановку пакета строк выбранным вариантом
2. Классификацию пустых строк для числовых вариантов
3. Сообщение об индексе строки, которую не удалось разобрать
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .types import Direction, SortResult


class ISorter(ABC):
    """
    Интерфейс сортировщика строк (домен Sorting).

    Направление фиксируется при создании; sort() может переопределить его для одного вызова.
    """

    def __init__(self, direction: Direction = Direction.ASCENDING):
        self._direction = Direction.parse(direction)

    @property
    def direction(self) -> Direction:
        return self._direction

    def _resolve_direction(self, direction: Optional[Direction]) -> Direction:
        if direction is None:
            return self._direction
        return Direction.parse(direction)

    @abstractmethod
    def sort(self, lines: Sequence[str], direction: Optional[Direction] = None) -> SortResult:
        """
        Сортирует пакет строк.

        Args:
            lines: Упорядоченный пакет строк (не изменяется)
            direction: Направление для этого вызова (по умолчанию - направление сортировщика)

        Returns:
            SortResult с новой последовательностью строк или индексом неразобранной строки
        """
        pass
