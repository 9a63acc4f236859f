"""
DTO контракт: вызывающая сторона (редактор) <-> домен Sorting.

Редактор сам получает строки из выделения и сам пишет результат обратно;
контракт содержит только пакет строк, вариант и направление.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from linesort.sorting.domain.types import Direction, Variant


class SortRequestDTO(BaseModel):
    """Запрос на сортировку пакета строк."""

    lines: List[str] = Field(default_factory=list, description="Строки в исходном порядке (без EOL)")
    variant: Variant = Field(Variant.LEXICOGRAPHIC, description="Вариант сортировки")
    direction: Direction = Field(Direction.ASCENDING, description="Направление сортировки")

    model_config = ConfigDict(frozen=True)

    @field_validator("variant", mode="before")
    @classmethod
    def validate_variant(cls, v):
        return Variant.parse(v)

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, v):
        return Direction.parse(v)


class SortResponseDTO(BaseModel):
    """
    Результат сортировки.

    Ровно одно из полей lines / failed_line_index заполнено.
    """

    lines: Optional[List[str]] = Field(None, description="Отсортированные строки (при успехе)")
    failed_line_index: Optional[int] = Field(
        None, ge=0, description="0-based индекс строки, которую не удалось разобрать"
    )
    variant: Variant = Field(..., description="Вариант сортировки")
    direction: Direction = Field(..., description="Направление сортировки")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_exclusive(self):
        if (self.lines is None) == (self.failed_line_index is None):
            raise ValueError("Должно быть заполнено ровно одно поле: lines или failed_line_index")
        return self

    @property
    def ok(self) -> bool:
        return self.failed_line_index is None
