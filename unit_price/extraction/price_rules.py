"""
Правила распознавания форматов ценников.

Каждое правило несёт явный тег вида единицы и функцию приведения к
канонической цене. Порядок правил фиксирован: мелкие единицы раньше крупных,
так как оформленный текст может частично подходить под несколько правил.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from re import Match, Pattern
from typing import Callable, List, Optional, Tuple

from config import settings
from contracts.price_result_dto import CanonicalUnit
from ..locales.label_config import PriceLabelConfig
from .number_parser import to_decimal, to_quantity

# Число с необязательной дробной частью через точку или запятую
PRICE_GROUP = r"(\d+[.,]?\d*)"
QUANTITY_GROUP = r"(\d+)"


class UnitKind(str, Enum):
    """Вид единицы в исходном ценнике."""
    PER_MASS_SMALL = "per-mass-small"        # граммы
    PER_VOLUME_SMALL = "per-volume-small"    # миллилитры
    PER_MASS_LARGE = "per-mass-large"        # килограммы
    PER_VOLUME_LARGE = "per-volume-large"    # литры


# Порядок проверки правил (первое совпадение выигрывает)
RULE_PRIORITY: Tuple[UnitKind, ...] = (
    UnitKind.PER_MASS_SMALL,
    UnitKind.PER_VOLUME_SMALL,
    UnitKind.PER_MASS_LARGE,
    UnitKind.PER_VOLUME_LARGE,
)

CANONICAL_UNITS = {
    UnitKind.PER_MASS_SMALL: CanonicalUnit.KILOGRAM,
    UnitKind.PER_VOLUME_SMALL: CanonicalUnit.LITER,
    UnitKind.PER_MASS_LARGE: CanonicalUnit.KILOGRAM,
    UnitKind.PER_VOLUME_LARGE: CanonicalUnit.LITER,
}

SMALL_UNIT_KINDS = frozenset({UnitKind.PER_MASS_SMALL, UnitKind.PER_VOLUME_SMALL})


def per_small_unit(price: Decimal, raw_quantity: Optional[str]) -> Decimal:
    """Цена за N г/мл -> цена за кг/л."""
    quantity = to_quantity(raw_quantity)
    return price * settings.SMALL_TO_LARGE_UNIT_FACTOR / quantity


def per_large_unit(price: Decimal, raw_quantity: Optional[str]) -> Decimal:
    """Цена уже за кг/л."""
    return price


@dataclass(frozen=True)
class PriceRule:
    """Один распознаваемый формат ценника."""
    kind: UnitKind
    matcher: Pattern
    canonical_unit: CanonicalUnit
    convert: Callable[[Decimal, Optional[str]], Decimal]

    def search(self, text: str) -> Optional[Match]:
        return self.matcher.search(text)

    def canonicalize(self, match: Match) -> Decimal:
        """
        Приводит совпадение к цене за каноническую единицу.

        Raises:
            NumericParseError: цена не парсится
            MalformedQuantityError: количество 0 или отсутствует
        """
        price = to_decimal(match.group(1))
        raw_quantity = match.group(2) if self.matcher.groups >= 2 else None
        return self.convert(price, raw_quantity)


def _alternation(tokens: List[str]) -> str:
    # Длинные токены раньше коротких, чтобы "мл" не терялся за "м"
    ordered = sorted(set(tokens), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(token) for token in ordered) + ")"


def build_matcher(config: PriceLabelConfig, kind: UnitKind) -> Pattern:
    """Собирает регулярку правила из токенов локали."""
    currency = _alternation(config.currency.tokens)
    separator = _alternation(config.separators)
    suffix = _alternation(getattr(config.units, kind.name.lower()))

    head = rf"{PRICE_GROUP}\s*{currency}\s*{separator}\s*"
    if kind in SMALL_UNIT_KINDS:
        return re.compile(rf"{head}{QUANTITY_GROUP}\s*{suffix}")
    return re.compile(rf"{head}{suffix}")


def build_rules(config: PriceLabelConfig) -> Tuple[PriceRule, ...]:
    """Строит упорядоченный набор правил для локали."""
    return tuple(
        PriceRule(
            kind=kind,
            matcher=build_matcher(config, kind),
            canonical_unit=CANONICAL_UNITS[kind],
            convert=per_small_unit if kind in SMALL_UNIT_KINDS else per_large_unit,
        )
        for kind in RULE_PRIORITY
    )
