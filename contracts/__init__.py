"""
Контракты DTO проекта Unit Price OCR.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- OCR -> PriceExtractor: RecognizedText (recognized_text_dto.py)
- PriceExtractor -> дисплей: ParseResult (price_result_dto.py)
"""

from .recognized_text_dto import RecognizedText
from .price_result_dto import CanonicalUnit, ParseResult, ResultStatus

__all__ = [
    "RecognizedText",
    "CanonicalUnit",
    "ParseResult",
    "ResultStatus",
]
