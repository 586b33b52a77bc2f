"""
Domain слой: интерфейсы (абстрактные классы) и исключения.
"""

from .interfaces import IPriceExtractor, IResultFormatter

from .exceptions import (
    PriceExtractionError,
    MalformedQuantityError,
    NumericParseError,
    PriceConfigurationError,
)

__all__ = [
    # Интерфейсы
    "IPriceExtractor",
    "IResultFormatter",

    # Исключения
    "PriceExtractionError",
    "MalformedQuantityError",
    "NumericParseError",
    "PriceConfigurationError",
]
