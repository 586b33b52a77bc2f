"""
DTO контракт: PriceExtractor -> дисплей.

Результат разбора одного кадра: каноническая цена за кг/литр или "не найдено".

ВНИМАНИЕ: Это публичный контракт. Изменения должны быть обратно совместимы.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CanonicalUnit(str, Enum):
    """Каноническая единица, к которой приводится цена."""
    KILOGRAM = "kilogram"
    LITER = "liter"


class ResultStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


class ParseResult(BaseModel):
    """
    Результат извлечения цены за единицу.

    Два исхода:
    - FOUND: unit и value заполнены
    - NOT_FOUND: unit и value пустые (нет совпадения или данные некорректны)
    """

    status: ResultStatus = Field(..., description="Исход разбора")
    unit: Optional[CanonicalUnit] = Field(None, description="Каноническая единица (кг или литр)")
    value: Optional[Decimal] = Field(None, description="Цена за каноническую единицу")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_consistency(self) -> "ParseResult":
        if self.status is ResultStatus.FOUND:
            if self.unit is None or self.value is None:
                raise ValueError("FOUND result requires unit and value")
        elif self.unit is not None or self.value is not None:
            raise ValueError("NOT_FOUND result must not carry unit or value")
        return self

    @classmethod
    def found(cls, unit: CanonicalUnit, value: Decimal) -> "ParseResult":
        return cls(status=ResultStatus.FOUND, unit=unit, value=value)

    @classmethod
    def not_found(cls) -> "ParseResult":
        return cls(status=ResultStatus.NOT_FOUND)

    @property
    def is_found(self) -> bool:
        return self.status is ResultStatus.FOUND

    def to_dict(self) -> dict:
        """Преобразует в словарь для сериализации в JSON."""
        return {
            "status": self.status.value,
            "unit": self.unit.value if self.unit else None,
            "value": str(self.value) if self.value is not None else None,
        }
