"""
Контракты DTO между редактором и доменом Sorting.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Editor -> Sorting: SortRequestDTO
- Sorting -> Editor: SortResponseDTO
"""

from .sorting_dto import SortRequestDTO, SortResponseDTO

__all__ = [
    "SortRequestDTO",
    "SortResponseDTO",
]
