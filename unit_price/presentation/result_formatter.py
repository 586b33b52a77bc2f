"""
Форматирование ParseResult для дисплея.

"Price per kilogram: 250.00 ₽" / "Price per liter: 74.47 ₽" / "Not found"
"""

from typing import Optional

from config import settings
from contracts.price_result_dto import CanonicalUnit, ParseResult
from ..domain.interfaces import IResultFormatter
from ..locales.config_loader import ConfigLoader
from ..locales.label_config import PriceLabelConfig


class PriceResultFormatter(IResultFormatter):
    """Рендерит результат по шаблонам из секции display конфига локали."""

    def __init__(
        self,
        config: Optional[PriceLabelConfig] = None,
        decimal_places: int = settings.RESULT_DECIMAL_PLACES,
    ):
        self.config = config or ConfigLoader().load()
        self.decimal_places = decimal_places

    def format(self, result: ParseResult) -> str:
        display = self.config.display
        if not result.is_found:
            return display.not_found

        template = display.kilogram if result.unit is CanonicalUnit.KILOGRAM else display.liter
        return template.format(
            value=f"{result.value:.{self.decimal_places}f}",
            symbol=self.config.currency.symbol,
        )
