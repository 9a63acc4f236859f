"""
Исключения для домена Sorting.

Единственная ошибка, которую видит вызывающая сторона - строка, которую не удалось разобрать как число.
"""

from typing import Optional


class SortingError(Exception):
    """Базовое исключение для ошибок домена Sorting."""

    def __init__(self, message: str, component: Optional[str] = None, original_error: Optional[Exception] = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Sorting Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class NumberConversionError(SortingError):
    """Подготовленный текст не является числом нужного типа (синтаксис или переполнение)."""
    pass


class UnparseableLineError(SortingError):
    """Строка с индексом line_index не разбирается выбранным числовым вариантом."""

    def __init__(self, line_index: int, component: Optional[str] = None, original_error: Optional[Exception] = None):
        self.line_index = line_index
        super().__init__(
            f"не удалось разобрать строку {line_index}",
            component=component,
            original_error=original_error,
        )


class SortingConfigurationError(SortingError, ValueError):
    """Неизвестный вариант, направление или стратегия."""
    pass
