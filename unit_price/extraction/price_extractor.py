"""
Price Extractor - Извлечение цены за кг/литр из распознанного текста.

ЦКП: ParseResult (FOUND с канонической ценой или NOT_FOUND).

Алгоритм:
1. Правила проверяются в фиксированном порядке (г, мл, кг, л)
2. Первое правило с совпадением выигрывает, остальные не проверяются
3. Цена нормализуется (запятая -> точка) и приводится к цене за кг/л
4. Округление до RESULT_DECIMAL_PLACES (half-up)

Любая ошибка данных (0 г, не число) превращается в NOT_FOUND:
функция вызывается на каждом кадре и не должна ронять вызывающего.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import lru_cache
from typing import Optional, Tuple

from loguru import logger

from config import settings
from contracts.price_result_dto import ParseResult
from ..domain.exceptions import NumericParseError, PriceExtractionError
from ..domain.interfaces import IPriceExtractor
from ..locales.config_loader import ConfigLoader
from ..locales.label_config import PriceLabelConfig
from .price_rules import PriceRule, build_rules


class PriceExtractor(IPriceExtractor):
    """
    Извлечение цены за единицу.

    Не хранит изменяемого состояния: правила строятся один раз в __init__,
    поэтому один экземпляр можно вызывать из нескольких потоков.
    """

    def __init__(
        self,
        config: Optional[PriceLabelConfig] = None,
        decimal_places: int = settings.RESULT_DECIMAL_PLACES,
    ):
        """
        Args:
            config: Конфигурация ценников (по умолчанию DEFAULT_LOCALE)
            decimal_places: Знаков после запятой в результате
        """
        self.config = config or ConfigLoader().load()
        self.rules: Tuple[PriceRule, ...] = build_rules(self.config)
        self._quantum = Decimal(1).scaleb(-decimal_places)

    def extract(self, text: Optional[str]) -> ParseResult:
        if not text:
            return ParseResult.not_found()

        for rule in self.rules:
            match = rule.search(text)
            if match is None:
                continue

            try:
                value = self._round(rule.canonicalize(match))
            except PriceExtractionError as e:
                logger.debug(f"[PriceExtractor] {rule.kind.value}: '{match.group(0)}' отброшен: {e.message}")
                return ParseResult.not_found()

            logger.debug(
                f"[PriceExtractor] {rule.kind.value}: '{match.group(0)}' -> "
                f"{value} за {rule.canonical_unit.value}"
            )
            return ParseResult.found(rule.canonical_unit, value)

        return ParseResult.not_found()

    def _round(self, value: Decimal) -> Decimal:
        try:
            return value.quantize(self._quantum, rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            raise NumericParseError(f"Не округляется: {value}", component="PriceExtractor", original_error=e)


@lru_cache(maxsize=1)
def default_extractor() -> PriceExtractor:
    """Экстрактор для локали по умолчанию (создаётся один раз)."""
    return PriceExtractor()


def extract(text: Optional[str]) -> ParseResult:
    """Извлекает цену за кг/литр экстрактором по умолчанию."""
    return default_extractor().extract(text)
