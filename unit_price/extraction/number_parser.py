from decimal import Decimal, InvalidOperation
from typing import Optional

from ..domain.exceptions import MalformedQuantityError, NumericParseError


def to_decimal(raw: str) -> Decimal:
    """
    Нормализует цену ("25,5" -> "25.5") и парсит в Decimal.

    Raises:
        NumericParseError: строка не число после нормализации
    """
    normalized = (raw or "").strip().replace(',', '.')
    try:
        value = Decimal(normalized)
    except InvalidOperation as e:
        raise NumericParseError(f"Не число: {raw!r}", component="number_parser", original_error=e)
    if not value.is_finite():
        raise NumericParseError(f"Не конечное число: {raw!r}", component="number_parser")
    return value


def to_quantity(raw: Optional[str]) -> int:
    """
    Парсит количество граммов/миллилитров.

    Raises:
        MalformedQuantityError: количество отсутствует, не целое или <= 0
    """
    if raw is None or not raw.strip().isdecimal():
        raise MalformedQuantityError(f"Нет количества: {raw!r}", component="number_parser")
    quantity = int(raw)
    if quantity <= 0:
        raise MalformedQuantityError(f"Количество должно быть > 0: {raw!r}", component="number_parser")
    return quantity
