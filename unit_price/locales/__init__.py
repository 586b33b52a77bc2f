"""Конфигурации ценников по локалям."""

from .config_loader import ConfigLoader
from .label_config import CurrencyConfig, DisplayConfig, PriceLabelConfig, UnitsConfig

__all__ = [
    "ConfigLoader",
    "CurrencyConfig",
    "DisplayConfig",
    "PriceLabelConfig",
    "UnitsConfig",
]
