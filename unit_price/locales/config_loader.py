"""
Config Loader для конфигураций ценников.

ЦКП: Загрузка провалидированной PriceLabelConfig для локали.

Файлы: <locales_dir>/<locale_code>/price_labels.yaml
"""

from pathlib import Path
from typing import ClassVar, Dict, List, Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from config import settings
from ..domain.exceptions import PriceConfigurationError
from .label_config import PriceLabelConfig


class ConfigLoader:
    """
    Загрузчик конфигураций ценников с кешем по (директория, локаль).

    Если запрошенная локаль недоступна, загружается FALLBACK_LOCALE
    (с предупреждением в лог).
    """

    _cache: ClassVar[Dict[str, PriceLabelConfig]] = {}

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Args:
            config_dir: Директория локалей (по умолчанию settings.LOCALES_DIR)
        """
        self.config_dir = Path(config_dir) if config_dir else settings.LOCALES_DIR

    def load(self, locale_code: Optional[str] = None) -> PriceLabelConfig:
        """
        Загружает конфигурацию локали.

        Args:
            locale_code: Код локали (по умолчанию settings.DEFAULT_LOCALE)

        Raises:
            PriceConfigurationError: Конфиг не найден или не проходит валидацию
        """
        locale_code = locale_code or settings.DEFAULT_LOCALE

        cache_key = f"{self.config_dir}:{locale_code}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        config_file = self._config_file(locale_code)
        if not config_file.exists():
            if locale_code == settings.FALLBACK_LOCALE:
                raise PriceConfigurationError(
                    f"Конфиг для {locale_code} не найден: {config_file}",
                    component="ConfigLoader"
                )
            logger.warning(
                f"[ConfigLoader] Конфиг для {locale_code} не найден, "
                f"используется {settings.FALLBACK_LOCALE}"
            )
            return self.load(settings.FALLBACK_LOCALE)

        label_config = self._load_yaml(config_file)
        self._cache[cache_key] = label_config

        logger.debug(
            f"[ConfigLoader] Загружен PriceLabelConfig для {locale_code}: "
            f"{len(label_config.currency.tokens)} currency tokens, "
            f"{len(label_config.separators)} separators"
        )
        return label_config

    def available_locales(self) -> List[str]:
        """Список локалей, для которых есть конфиг."""
        if not self.config_dir.is_dir():
            return []
        return sorted(
            path.name for path in self.config_dir.iterdir()
            if (path / settings.LABELS_FILE_NAME).exists()
        )

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()

    def _config_file(self, locale_code: str) -> Path:
        return self.config_dir / locale_code / settings.LABELS_FILE_NAME

    def _load_yaml(self, config_file: Path) -> PriceLabelConfig:
        """Читает YAML и валидирует через Pydantic."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PriceConfigurationError(
                f"Некорректный YAML: {config_file}",
                component="ConfigLoader",
                original_error=e
            )

        if not isinstance(config_data, dict):
            raise PriceConfigurationError(
                f"Ожидался словарь верхнего уровня: {config_file}",
                component="ConfigLoader"
            )

        try:
            return PriceLabelConfig(**config_data)
        except ValidationError as e:
            raise PriceConfigurationError(
                f"Конфиг не прошёл валидацию: {config_file}",
                component="ConfigLoader",
                original_error=e
            )
