"""
Фабрика для создания компонентов извлечения цены.

Все компоненты одной локали получают один и тот же PriceLabelConfig.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from ..domain.interfaces import IPriceExtractor, IResultFormatter
from ..extraction.price_extractor import PriceExtractor
from ..locales.config_loader import ConfigLoader
from ..locales.label_config import PriceLabelConfig
from ..presentation.result_formatter import PriceResultFormatter
from ..scanning.frame_scanner import FrameScanner


class PriceComponentFactory:
    """Фабрика для создания extractor, formatter и scanner."""

    def __init__(self, locale_code: Optional[str] = None, config_dir: Optional[Path] = None):
        """
        Args:
            locale_code: Код локали (по умолчанию settings.DEFAULT_LOCALE)
            config_dir: Директория локалей (по умолчанию settings.LOCALES_DIR)

        Raises:
            PriceConfigurationError: Конфиг локали недоступен или некорректен
        """
        self.config: PriceLabelConfig = ConfigLoader(config_dir).load(locale_code)

    def create_extractor(self) -> IPriceExtractor:
        logger.debug(f"[PriceComponentFactory] Создание экстрактора для {self.config.locale_code}")
        return PriceExtractor(self.config)

    def create_formatter(self) -> IResultFormatter:
        return PriceResultFormatter(self.config)

    def create_scanner(self) -> FrameScanner:
        """Создаёт сканер для одной сессии захвата."""
        return FrameScanner(self.create_extractor(), self.create_formatter())
