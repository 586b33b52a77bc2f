"""
Unit-тесты для загрузки конфигураций ценников через ConfigLoader.
"""

import pytest

from config import settings
from unit_price.domain.exceptions import PriceConfigurationError
from unit_price.locales.config_loader import ConfigLoader
from unit_price.locales.label_config import PriceLabelConfig

MOCK_LABELS_YAML = """
locale_code: ru_RU
currency:
  code: RUB
  symbol: "₽"
  tokens: ["р", "Р"]
separators: ["за", "/"]
units:
  per_mass_small: ["г"]
  per_volume_small: ["мл"]
  per_mass_large: ["кг"]
  per_volume_large: ["л"]
"""

MOCK_BROKEN_YAML = """
locale_code: ru_RU
currency: [unclosed
"""

MOCK_INVALID_CODE_YAML = MOCK_LABELS_YAML.replace("locale_code: ru_RU", "locale_code: russia")


@pytest.fixture(autouse=True)
def clear_cache():
    ConfigLoader.clear_cache()
    yield
    ConfigLoader.clear_cache()


def write_locale(root, code, content):
    locale_dir = root / code
    locale_dir.mkdir()
    (locale_dir / settings.LABELS_FILE_NAME).write_text(content, encoding="utf-8")


class TestBundledLocale:

    def test_load_ru_RU(self):
        config = ConfigLoader().load("ru_RU")

        assert isinstance(config, PriceLabelConfig)
        assert config.locale_code == "ru_RU"
        assert config.currency.symbol == "₽"
        assert "р" in config.currency.tokens
        assert "Р" in config.currency.tokens
        assert config.separators == ["за", "/"]
        assert config.units.per_volume_small == ["мл"]

    def test_default_locale(self):
        assert ConfigLoader().load().locale_code == settings.DEFAULT_LOCALE

    def test_display_templates(self):
        display = ConfigLoader().load("ru_RU").display
        assert display.kilogram == "Price per kilogram: {value} {symbol}"
        assert display.liter == "Price per liter: {value} {symbol}"
        assert display.not_found == "Not found"

    def test_config_caching(self):
        loader = ConfigLoader()
        assert loader.load("ru_RU") is loader.load("ru_RU")

    def test_available_locales(self):
        assert "ru_RU" in ConfigLoader().available_locales()


class TestCustomDirectory:

    def test_load_from_directory(self, tmp_path):
        write_locale(tmp_path, "ru_RU", MOCK_LABELS_YAML)
        config = ConfigLoader(tmp_path).load("ru_RU")

        assert config.currency.code == "RUB"
        # Секция display не указана - берутся значения по умолчанию
        assert config.display.not_found == "Not found"

    def test_missing_locale_falls_back(self, tmp_path):
        write_locale(tmp_path, settings.FALLBACK_LOCALE, MOCK_LABELS_YAML)
        config = ConfigLoader(tmp_path).load("kk_KZ")
        assert config.locale_code == settings.FALLBACK_LOCALE

    def test_missing_fallback_raises(self, tmp_path):
        with pytest.raises(PriceConfigurationError):
            ConfigLoader(tmp_path).load("kk_KZ")

    def test_broken_yaml_raises(self, tmp_path):
        write_locale(tmp_path, "ru_RU", MOCK_BROKEN_YAML)
        with pytest.raises(PriceConfigurationError) as exc_info:
            ConfigLoader(tmp_path).load("ru_RU")
        assert exc_info.value.component == "ConfigLoader"

    def test_invalid_locale_code_raises(self, tmp_path):
        write_locale(tmp_path, "ru_RU", MOCK_INVALID_CODE_YAML)
        with pytest.raises(PriceConfigurationError):
            ConfigLoader(tmp_path).load("ru_RU")

    def test_empty_file_raises(self, tmp_path):
        write_locale(tmp_path, "ru_RU", "")
        with pytest.raises(PriceConfigurationError):
            ConfigLoader(tmp_path).load("ru_RU")

    def test_available_locales_empty_dir(self, tmp_path):
        assert ConfigLoader(tmp_path / "missing").available_locales() == []
