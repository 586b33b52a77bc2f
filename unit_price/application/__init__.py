"""
Application слой: фабрика компонентов.
"""

from .factory import PriceComponentFactory

__all__ = ["PriceComponentFactory"]
