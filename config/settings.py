"""
Настройки проекта linesort.

Все значения фиксированы: пользователь выбирает только вариант и направление сортировки.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent

# =============================================================================
# НАСТРОЙКИ СОРТИРОВКИ ПО УМОЛЧАНИЮ
# =============================================================================
# Вариант сортировки, если не указан явно
DEFAULT_VARIANT = "lexicographic"

# Направление сортировки, если не указано явно
DEFAULT_DIRECTION = "ascending"

# =============================================================================
# НАСТРОЙКИ ПАРСИНГА ЧИСЕЛ
# =============================================================================
# Фиксированная локаль: одинаковое преобразование строки в число на всех машинах
PARSING_LOCALE = "en_US"

# Десятичный разделитель фиксированной локали
PARSING_DECIMAL_SEPARATOR = "."

# Символы, которые считаются "пустыми" при классификации строк
BLANK_CHARACTERS = " \t\r\n"

# Границы 64-битного знакового целого
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# =============================================================================
# ЛОГИРОВАНИЕ И CLI
# =============================================================================
LOG_LEVEL = os.getenv("LINESORT_LOG_LEVEL", "INFO")

# Кодировка файлов для scripts/sort_lines.py
FILE_ENCODING = "utf-8"

# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if DEFAULT_DIRECTION not in ("ascending", "descending"):
        errors.append(f"DEFAULT_DIRECTION должен быть 'ascending' или 'descending', получено: {DEFAULT_DIRECTION}")

    if PARSING_DECIMAL_SEPARATOR != ".":
        errors.append(
            "PARSING_DECIMAL_SEPARATOR должен быть '.'!\n"
            "Разбор чисел не должен зависеть от региональных настроек."
        )

    if LOG_LEVEL.upper() not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"Неизвестный уровень логирования: {LOG_LEVEL}")

    if errors:
        raise ValueError("\n".join(errors))

    return True
