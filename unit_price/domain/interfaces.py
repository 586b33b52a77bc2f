"""
Интерфейсы (абстрактные классы) для извлечения цены за единицу.
"""

from abc import ABC, abstractmethod
from typing import Optional

from contracts.price_result_dto import ParseResult


class IPriceExtractor(ABC):
    """Интерфейс для экстракторов цены за единицу."""

    @abstractmethod
    def extract(self, text: Optional[str]) -> ParseResult:
        """
        Извлекает цену за кг/литр из распознанного текста.

        Args:
            text: Распознанный текст кадра

        Returns:
            ParseResult (FOUND или NOT_FOUND), никогда не бросает исключений
        """
        pass


class IResultFormatter(ABC):
    """Интерфейс для форматирования результата на экран."""

    @abstractmethod
    def format(self, result: ParseResult) -> str:
        """
        Форматирует результат для отображения.

        Args:
            result: Результат извлечения

        Returns:
            Строка для дисплея
        """
        pass
