from .number_parser import to_decimal, to_quantity
from .price_extractor import PriceExtractor, default_extractor, extract
from .price_rules import RULE_PRIORITY, PriceRule, UnitKind, build_rules

__all__ = [
    "PriceExtractor",
    "PriceRule",
    "RULE_PRIORITY",
    "UnitKind",
    "build_rules",
    "default_extractor",
    "extract",
    "to_decimal",
    "to_quantity",
]
