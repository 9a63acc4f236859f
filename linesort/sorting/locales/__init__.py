"""
Locales sub-package: фиксированный контекст разбора чисел.
"""

from .parsing_context import ParsingContext, DEFAULT_PARSING_CONTEXT

__all__ = [
    "ParsingContext",
    "DEFAULT_PARSING_CONTEXT",
]
