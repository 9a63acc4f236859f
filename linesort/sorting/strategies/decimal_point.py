"""
Decimal Strategies - строки сортируются как double.

Decimal-Comma: "3,14" -> "3.14" (запятая приводится к точке фиксированной локали)
Decimal-Dot:   "3.14" без замены
"""

from config.settings import BLANK_CHARACTERS, PARSING_DECIMAL_SEPARATOR
from ..locales.parsing_context import ParsingContext
from .base import NumericStrategy


def _to_float(context: ParsingContext, text: str) -> float:
    return context.parse_float(text)


DECIMAL_COMMA_STRATEGY: NumericStrategy[float] = NumericStrategy(
    name="DecimalComma",
    admissible=BLANK_CHARACTERS + "0123456789,-",
    converter=_to_float,
    separator=(",", PARSING_DECIMAL_SEPARATOR),
)

DECIMAL_DOT_STRATEGY: NumericStrategy[float] = NumericStrategy(
    name="DecimalDot",
    admissible=BLANK_CHARACTERS + "0123456789.-",
    converter=_to_float,
)
