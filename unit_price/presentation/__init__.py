from .result_formatter import PriceResultFormatter

__all__ = ["PriceResultFormatter"]
