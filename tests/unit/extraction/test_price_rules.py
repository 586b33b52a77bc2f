"""
Unit-тесты для набора правил форматов ценников.
"""

from decimal import Decimal

import pytest

from contracts.price_result_dto import CanonicalUnit
from unit_price.domain.exceptions import MalformedQuantityError
from unit_price.extraction.price_rules import (
    RULE_PRIORITY,
    UnitKind,
    build_rules,
    per_large_unit,
    per_small_unit,
)
from unit_price.locales.config_loader import ConfigLoader
from unit_price.locales.label_config import PriceLabelConfig


@pytest.fixture
def ru_config():
    return ConfigLoader().load("ru_RU")


@pytest.fixture
def rules(ru_config):
    return {rule.kind: rule for rule in build_rules(ru_config)}


class TestRuleOrder:
    """Порядок правил фиксирован: г, мл, кг, л."""

    def test_priority_order(self, ru_config):
        kinds = [rule.kind for rule in build_rules(ru_config)]
        assert kinds == [
            UnitKind.PER_MASS_SMALL,
            UnitKind.PER_VOLUME_SMALL,
            UnitKind.PER_MASS_LARGE,
            UnitKind.PER_VOLUME_LARGE,
        ]
        assert tuple(kinds) == RULE_PRIORITY

    def test_canonical_units(self, rules):
        assert rules[UnitKind.PER_MASS_SMALL].canonical_unit is CanonicalUnit.KILOGRAM
        assert rules[UnitKind.PER_VOLUME_SMALL].canonical_unit is CanonicalUnit.LITER
        assert rules[UnitKind.PER_MASS_LARGE].canonical_unit is CanonicalUnit.KILOGRAM
        assert rules[UnitKind.PER_VOLUME_LARGE].canonical_unit is CanonicalUnit.LITER


class TestMatchers:
    """Проверка регулярок каждого правила."""

    @pytest.mark.parametrize("kind,text", [
        (UnitKind.PER_MASS_SMALL, "25р за 100г"),
        (UnitKind.PER_MASS_SMALL, "25р/100г"),
        (UnitKind.PER_VOLUME_SMALL, "70р за 940мл"),
        (UnitKind.PER_MASS_LARGE, "250р/кг"),
        (UnitKind.PER_VOLUME_LARGE, "80р/л"),
    ])
    def test_matches_own_format(self, rules, kind, text):
        assert rules[kind].search(text) is not None

    @pytest.mark.parametrize("text", ["250р/кг", "80р/л", "70р за 940мл"])
    def test_grams_rule_rejects_other_formats(self, rules, text):
        assert rules[UnitKind.PER_MASS_SMALL].search(text) is None

    def test_liter_rule_rejects_milliliters(self, rules):
        assert rules[UnitKind.PER_VOLUME_LARGE].search("70р/мл") is None

    def test_large_unit_rule_has_no_quantity(self, rules):
        match = rules[UnitKind.PER_MASS_LARGE].search("250р/кг")
        assert rules[UnitKind.PER_MASS_LARGE].matcher.groups == 1
        assert rules[UnitKind.PER_MASS_LARGE].canonicalize(match) == Decimal("250")

    def test_canonicalize_small_unit(self, rules):
        rule = rules[UnitKind.PER_VOLUME_SMALL]
        assert rule.canonicalize(rule.search("50р за 500мл")) == Decimal("100")

    def test_canonicalize_zero_quantity_raises(self, rules):
        rule = rules[UnitKind.PER_MASS_SMALL]
        with pytest.raises(MalformedQuantityError):
            rule.canonicalize(rule.search("25р за 0г"))


class TestConversions:

    def test_per_small_unit(self):
        assert per_small_unit(Decimal("25"), "100") == Decimal("250")

    @pytest.mark.parametrize("quantity", [None, "0", ""])
    def test_per_small_unit_bad_quantity(self, quantity):
        with pytest.raises(MalformedQuantityError):
            per_small_unit(Decimal("25"), quantity)

    def test_per_large_unit_is_identity(self):
        assert per_large_unit(Decimal("80.5"), None) == Decimal("80.5")


def test_rules_built_from_custom_tokens(ru_config):
    """Токены берутся из конфига, а не из кода."""
    data = ru_config.model_dump()
    data["currency"]["tokens"] = ["руб", "р"]
    config = PriceLabelConfig(**data)

    rules = {rule.kind: rule for rule in build_rules(config)}
    match = rules[UnitKind.PER_MASS_SMALL].search("25руб за 100г")
    assert match is not None
    assert match.group(1) == "25"
    assert rules[UnitKind.PER_MASS_LARGE].search("250руб/кг") is not None
