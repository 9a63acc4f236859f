"""
Типы домена Sorting: направление, вариант, строка и результат сортировки.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .exceptions import SortingConfigurationError, UnparseableLineError


class Direction(str, Enum):
    """Направление сортировки."""
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @property
    def is_descending(self) -> bool:
        return self is Direction.DESCENDING

    @classmethod
    def parse(cls, name: "str | Direction") -> "Direction":
        """
        Преобразует имя направления в Direction.

        Принимает "ascending"/"descending", короткие "asc"/"desc" и сам Direction.
        """
        if isinstance(name, Direction):
            return name
        normalized = str(name).strip().lower()
        aliases = {"asc": cls.ASCENDING, "desc": cls.DESCENDING}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError as e:
            raise SortingConfigurationError(
                f"неизвестное направление сортировки '{name}'", component="Direction", original_error=e
            )


class Variant(str, Enum):
    """Вариант сортировки: какой фильтр символов и какое преобразование применять."""
    LEXICOGRAPHIC = "lexicographic"
    INTEGER = "integer"
    DECIMAL_COMMA = "decimal_comma"
    DECIMAL_DOT = "decimal_dot"

    @property
    def is_numeric(self) -> bool:
        return self is not Variant.LEXICOGRAPHIC

    @classmethod
    def parse(cls, name: "str | Variant") -> "Variant":
        """
        Преобразует имя варианта в Variant.

        Регистр, пробелы по краям и дефисы не важны: "Decimal-Comma" == "decimal_comma".
        """
        if isinstance(name, Variant):
            return name
        normalized = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(normalized)
        except ValueError as e:
            raise SortingConfigurationError(
                f"неизвестный вариант сортировки '{name}'", component="Variant", original_error=e
            )


@dataclass(frozen=True)
class Line:
    """Строка входного пакета вместе с её исходной позицией."""
    index: int
    text: str


@dataclass(frozen=True)
class SortResult:
    """
    Результат сортировки: либо переставленные строки, либо индекс строки, которую не удалось разобрать.

    ЦКП: вызывающая сторона получает явное значение, а не исключение.
    """
    lines: Optional[List[str]] = None
    failed_line_index: Optional[int] = None

    @classmethod
    def success(cls, lines: List[str]) -> "SortResult":
        return cls(lines=lines)

    @classmethod
    def failure(cls, line_index: int) -> "SortResult":
        return cls(failed_line_index=line_index)

    @property
    def ok(self) -> bool:
        return self.failed_line_index is None

    @property
    def failed(self) -> bool:
        return not self.ok

    def unwrap(self) -> List[str]:
        """Возвращает строки или поднимает UnparseableLineError."""
        if self.failed_line_index is not None:
            raise UnparseableLineError(self.failed_line_index, component="SortResult")
        return list(self.lines or [])

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "lines": self.lines,
            "failed_line_index": self.failed_line_index,
        }
