"""
Numeric Strategy - значение, параметризующее числовой сортировщик.

Стратегия не является подклассом: это неизменяемый набор из трёх частей:
1. Допустимые символы (фильтр перед разбором)
2. Нормализация разделителя дроби
3. Преобразование подготовленного текста в число через ParsingContext

Паттерн "Лаборант":
- Получает строку как есть
- Отрезает всё, начиная с первого недопустимого символа
- Приводит разделитель к виду фиксированной локали
- Отдаёт число или поднимает NumberConversionError
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from ..locales.parsing_context import ParsingContext

T = TypeVar("T", int, float)


def take_while_admissible(text: str, admissible: str) -> str:
    """Возвращает начало строки до первого символа вне admissible."""
    for idx, ch in enumerate(text):
        if ch not in admissible:
            return text[:idx]
    return text


@dataclass(frozen=True)
class NumericStrategy(Generic[T]):
    """
    Стратегия числового варианта сортировки.

    Attributes:
        name: Имя стратегии (для логирования)
        admissible: Допустимые символы в начале строки
        converter: Преобразование подготовленного текста в число (ParsingContext, text) -> T
        separator: Пара (что заменить, на что) после фильтрации или None
    """
    name: str
    admissible: str
    converter: Callable[[ParsingContext, str], T]
    separator: Optional[Tuple[str, str]] = None

    def prepare(self, text: str, context: ParsingContext) -> str:
        """
        Готовит строку к преобразованию в число.

        Если допустимое начало строки пустое, а сама строка нет ("abc"),
        возвращается вся строка: такая строка не считается пустой и не разбирается.
        """
        prepared = take_while_admissible(text, self.admissible)
        if context.is_blank(prepared) and not context.is_blank(text):
            prepared = text
        if self.separator:
            old, new = self.separator
            prepared = prepared.replace(old, new)
        return prepared

    def convert(self, prepared: str, context: ParsingContext) -> T:
        """
        Raises:
            NumberConversionError: Текст не является числом нужного типа
        """
        return self.converter(context, prepared)
