"""
Unit Price OCR: цена за кг/литр из распознанного текста ценника.

Вход: распознанный текст кадра (contracts.RecognizedText или str)
Выход: contracts.ParseResult и строка для дисплея
"""

from contracts import CanonicalUnit, ParseResult, RecognizedText

from .application import PriceComponentFactory
from .extraction import PriceExtractor, PriceRule, UnitKind, extract
from .presentation import PriceResultFormatter
from .scanning import FrameOutcome, FrameScanner

__all__ = [
    "CanonicalUnit",
    "FrameOutcome",
    "FrameScanner",
    "ParseResult",
    "PriceComponentFactory",
    "PriceExtractor",
    "PriceResultFormatter",
    "PriceRule",
    "RecognizedText",
    "UnitKind",
    "extract",
]
