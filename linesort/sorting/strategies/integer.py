"""
Integer Strategy - строки сортируются как 64-битные целые со знаком.
"""

from config.settings import BLANK_CHARACTERS
from ..locales.parsing_context import ParsingContext
from .base import NumericStrategy


def _to_int(context: ParsingContext, text: str) -> int:
    return context.parse_int(text)


INTEGER_STRATEGY: NumericStrategy[int] = NumericStrategy(
    name="Integer",
    admissible=BLANK_CHARACTERS + "0123456789-",
    converter=_to_int,
)
