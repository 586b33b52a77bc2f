"""
DTO для конфигурации ценников локали.

Содержит все специфичные для страны токены:
- Валюта (сокращения в ценнике, символ для вывода)
- Разделители между ценой и единицей
- Суффиксы единиц
- Шаблоны вывода на экран

Использует Pydantic для валидации структуры конфигурации.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class CurrencyConfig(BaseModel):
    """Конфигурация валюты."""
    code: str = Field(..., description="ISO код (RUB)")
    symbol: str = Field(..., description="Символ для вывода (₽)")
    tokens: List[str] = Field(..., description='Сокращения в ценнике ("р", "Р")')

    @field_validator('tokens')
    @classmethod
    def validate_tokens(cls, v):
        if not v or any(not token.strip() for token in v):
            raise ValueError('tokens не может быть пустым или содержать пустые строки')
        return v


class UnitsConfig(BaseModel):
    """Суффиксы единиц для каждого вида правила."""
    per_mass_small: List[str] = Field(..., description='Граммы ("г")')
    per_volume_small: List[str] = Field(..., description='Миллилитры ("мл")')
    per_mass_large: List[str] = Field(..., description='Килограммы ("кг")')
    per_volume_large: List[str] = Field(..., description='Литры ("л")')

    @field_validator('per_mass_small', 'per_volume_small', 'per_mass_large', 'per_volume_large')
    @classmethod
    def validate_suffixes(cls, v):
        if not v or any(not suffix.strip() for suffix in v):
            raise ValueError('Список суффиксов не может быть пустым')
        return v


class DisplayConfig(BaseModel):
    """Шаблоны вывода. Поддерживают подстановки {value} и {symbol}."""
    kilogram: str = Field(default="Price per kilogram: {value} {symbol}")
    liter: str = Field(default="Price per liter: {value} {symbol}")
    not_found: str = Field(default="Not found")

    @field_validator('kilogram', 'liter')
    @classmethod
    def validate_template(cls, v):
        if "{value}" not in v:
            raise ValueError(f'Шаблон должен содержать {{value}}, получено: {v}')
        return v


class PriceLabelConfig(BaseModel):
    """
    Полная конфигурация ценников локали.

    Загружается из YAML файла и используется правилами и форматтером.
    """
    locale_code: str = Field(..., description='Код локали (ru_RU)')
    name: str = Field(default="", description='Название страны')
    currency: CurrencyConfig
    separators: List[str] = Field(..., description='Разделители ("за", "/")')
    units: UnitsConfig
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator('locale_code')
    @classmethod
    def validate_code(cls, v):
        """Валидация формата кода локали (xx_XX)."""
        parts = v.split('_')
        if len(parts) != 2 or len(parts[0]) != 2 or len(parts[1]) != 2:
            raise ValueError(f'Код локали должен быть в формате "xx_XX" (например, ru_RU), получено: {v}')
        return v

    @field_validator('separators')
    @classmethod
    def validate_separators(cls, v):
        if not v or any(not sep.strip() for sep in v):
            raise ValueError('separators не может быть пустым')
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Преобразует в словарь для сериализации."""
        return self.model_dump()
