"""
CLI домена Sorting (сортировка строк файла).

Использование:
    # Лексикографически, по возрастанию, результат в stdout
    linesort input.txt

    # Как целые числа, по убыванию
    linesort input.txt --variant integer --descending

    # Десятичные числа с запятой, результат в файл
    linesort input.txt --variant decimal_comma -o sorted.txt

При ошибке разбора файл не меняется, код выхода 1, в лог пишется номер строки.
"""

import re
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from loguru import logger

from config.settings import DEFAULT_DIRECTION, DEFAULT_VARIANT, FILE_ENCODING, LOG_LEVEL
from linesort.sorting import Direction, LineSortService, SortingError, Variant

_EOL_PATTERN = re.compile(r"\r\n|\r|\n")


def read_lines(file_path: Path) -> List[str]:
    """
    Читает строки из файла (без символов конца строки).

    Строки делятся только по CRLF, CR и LF: "\\x0c" и "\\u2028" остаются внутри строки.
    """
    with open(file_path, "r", encoding=FILE_ENCODING, newline="") as f:
        text = f.read()
    if not text:
        return []
    lines = _EOL_PATTERN.split(text)
    # EOL в конце файла не порождает лишнюю пустую строку
    if lines[-1] == "":
        lines.pop()
    return lines


def write_lines(lines: List[str], output_file: Optional[Path]) -> None:
    """Записывает строки в файл или в stdout."""
    text = "\n".join(lines) + ("\n" if lines else "")
    if output_file is None:
        sys.stdout.write(text)
        return
    with open(output_file, "w", encoding=FILE_ENCODING) as f:
        f.write(text)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Парсит аргументы командной строки."""
    parser = argparse.ArgumentParser(description="linesort - сортировка строк файла")
    parser.add_argument("input_file", type=Path, help="Файл для сортировки")
    parser.add_argument(
        "--variant",
        default=DEFAULT_VARIANT,
        choices=[v.value for v in Variant],
        help="Вариант сортировки",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        default=DEFAULT_DIRECTION == Direction.DESCENDING.value,
        help="Сортировать по убыванию",
    )
    parser.add_argument("-o", "--output", type=Path, help="Файл для результата (по умолчанию stdout)")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Уровень логирования loguru")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    """
    Сортирует файл.

    Returns:
        0 если успешно, 1 если строку не удалось разобрать или файл не прочитан
    """
    args = parse_args(argv)

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=args.log_level.upper(),
    )

    try:
        lines = read_lines(args.input_file)
    except OSError as e:
        logger.error(f"[sort_lines] Не удалось прочитать {args.input_file}: {e}")
        return 1

    direction = Direction.DESCENDING if args.descending else Direction.ASCENDING
    try:
        result = LineSortService().sort(lines, args.variant, direction)
    except SortingError as e:
        logger.error(f"[sort_lines] {e}")
        return 1

    if result.failed:
        # Для пользователя строки нумеруются с 1
        logger.error(
            f"[sort_lines] Строка {result.failed_line_index + 1} не является числом "
            f"({args.variant}): {lines[result.failed_line_index]!r}"
        )
        return 1

    write_lines(result.lines, args.output)
    logger.info(f"[sort_lines] Готово: {len(result.lines)} строк ({args.variant}, {direction.value})")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
