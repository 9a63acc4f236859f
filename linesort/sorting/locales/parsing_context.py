"""
Контекст разбора чисел с фиксированной локалью.

Гарантирует одинаковое преобразование строки в число на всех компьютерах,
независимо от региональных настроек системы: десятичная точка всегда ".".

Использует Pydantic для валидации и неизменяемости конфигурации.
"""

import math
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.settings import (
    BLANK_CHARACTERS,
    INT64_MAX,
    INT64_MIN,
    PARSING_DECIMAL_SEPARATOR,
    PARSING_LOCALE,
)
from ..domain.exceptions import NumberConversionError


_INTEGER_PATTERN = re.compile(r"-?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


class ParsingContext(BaseModel):
    """
    Неизменяемая конфигурация разбора чисел.

    Передаётся по значению, ручного освобождения не требует.
    """
    code: str = Field(PARSING_LOCALE, description="Код фиксированной локали (en_US)")
    decimal_separator: str = Field(PARSING_DECIMAL_SEPARATOR, description='Разделитель дроби (всегда ".")')
    blank_characters: str = Field(BLANK_CHARACTERS, description="Символы, которые считаются пробельными")
    int_min: int = Field(INT64_MIN, description="Нижняя граница целого")
    int_max: int = Field(INT64_MAX, description="Верхняя граница целого")

    model_config = ConfigDict(frozen=True)

    @field_validator("decimal_separator")
    @classmethod
    def validate_decimal_separator(cls, v):
        if v != ".":
            raise ValueError(f'Разделитель дроби фиксирован и должен быть ".", получено: {v!r}')
        return v

    @field_validator("blank_characters")
    @classmethod
    def validate_blank_characters(cls, v):
        if not v or any(not ch.isspace() for ch in v):
            raise ValueError(f"blank_characters должны быть пробельными символами, получено: {v!r}")
        return v

    def is_blank(self, text: str) -> bool:
        """Строка не содержит ничего, кроме пробельных символов контекста."""
        return all(ch in self.blank_characters for ch in text)

    def strip(self, text: str) -> str:
        return text.strip(self.blank_characters)

    def parse_int(self, text: str) -> int:
        """
        Разбирает целое число со знаком в пределах [int_min, int_max].

        Весь текст (без пробелов по краям) должен быть одним числом: "1 2" и "1-2" - ошибка.

        Raises:
            NumberConversionError: Некорректный синтаксис или выход за диапазон
        """
        candidate = self.strip(text)
        if not _INTEGER_PATTERN.fullmatch(candidate):
            raise NumberConversionError(f"'{text}' не является целым числом", component="ParsingContext")

        # int() ограничивает длину строки: ведущие нули убираем, слишком длинное число отсекаем
        sign = "-" if candidate.startswith("-") else ""
        significant_digits = candidate.lstrip("-").lstrip("0")
        if len(significant_digits) > len(str(max(-self.int_min, self.int_max))):
            raise NumberConversionError(
                f"'{candidate}' вне диапазона [{self.int_min}, {self.int_max}]", component="ParsingContext"
            )

        value = int(sign + (significant_digits or "0"))
        if value < self.int_min or value > self.int_max:
            raise NumberConversionError(
                f"'{candidate}' вне диапазона [{self.int_min}, {self.int_max}]", component="ParsingContext"
            )
        return value

    def parse_float(self, text: str) -> float:
        """
        Разбирает десятичное число с фиксированным разделителем дроби.

        Допустимо: "1.5", "-2", ".5", "5." Ошибка: "1.2.3", "-", ".", переполнение до бесконечности.

        Raises:
            NumberConversionError: Некорректный синтаксис или переполнение
        """
        candidate = self.strip(text)
        if not _FLOAT_PATTERN.fullmatch(candidate):
            raise NumberConversionError(f"'{text}' не является десятичным числом", component="ParsingContext")

        value = float(candidate)
        if math.isinf(value):
            raise NumberConversionError(f"'{candidate}' вне диапазона double", component="ParsingContext")
        return value


# Контекст по умолчанию (en_US): используется всеми числовыми сортировщиками
DEFAULT_PARSING_CONTEXT = ParsingContext()
