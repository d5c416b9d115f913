from __future__ import annotations

from unittest.mock import Mock

import pytest

from suite_money.api.comparison import (
    compare,
    equal,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    maximum,
    minimum,
)
from suite_money.calculator.impl.integer import IntegerCalculator
from suite_money.calculator.protocol import ComparisonOperator
from suite_money.domain.monetary.errors import CalculatorMismatchError, CurrencyMismatchError
from suite_money.domain.monetary.money import Money
from tests.helpers.helper_currency import EUR, USD
from tests.helpers.helper_money import DECIMAL, INTEGER, parametrize_flavors

ORDERING_OPERATORS = [compare, greater_than, greater_than_or_equal, less_than, less_than_or_equal]


# region greater_than


@parametrize_flavors
def test_greater_than_returns_false_when_the_first_amount_is_less(flavor):
    assert greater_than(flavor.money(500, USD), flavor.money(800, USD)) is False


@parametrize_flavors
def test_greater_than_returns_false_when_amounts_are_equal(flavor):
    assert greater_than(flavor.money(500, USD), flavor.money(500, USD)) is False


@parametrize_flavors
def test_greater_than_returns_true_when_the_first_amount_is_greater(flavor):
    assert greater_than(flavor.money(800, USD), flavor.money(500, USD)) is True


@parametrize_flavors
def test_greater_than_normalizes_to_the_highest_scale(flavor):
    # 800 at scale 2 is 8000 at scale 3, which is more than 5000
    d1 = flavor.money(800, USD)
    d2 = flavor.money(5000, USD, scale=3)

    assert greater_than(d1, d2) is True


@parametrize_flavors
def test_greater_than_raises_when_using_different_currencies(flavor):
    d1 = flavor.money(800, USD)
    d2 = flavor.money(500, EUR)

    with pytest.raises(CurrencyMismatchError, match="Objects must have the same currency"):
        greater_than(d1, d2)


def test_currency_check_runs_before_scale_normalization():
    """A currency mismatch is detected without rescaling any amount."""
    calculator = Mock(wraps=IntegerCalculator())
    d1 = Money(500, USD, calculator=calculator)
    d2 = Money(500, EUR, 3, calculator=calculator)

    with pytest.raises(CurrencyMismatchError):
        greater_than(d1, d2)

    calculator.power.assert_not_called()
    calculator.multiply.assert_not_called()

    assert equal(d1, d2) is False

    calculator.power.assert_not_called()
    calculator.multiply.assert_not_called()


# endregion

# region less_than


@parametrize_flavors
def test_less_than_returns_true_when_the_first_amount_is_less(flavor):
    assert less_than(flavor.money(500, USD), flavor.money(800, USD)) is True


@parametrize_flavors
def test_less_than_returns_false_when_amounts_are_equal(flavor):
    assert less_than(flavor.money(500, USD), flavor.money(500, USD)) is False


@parametrize_flavors
def test_less_than_normalizes_to_the_highest_scale(flavor):
    d1 = flavor.money(800, USD)
    d2 = flavor.money(5000, USD, scale=3)

    assert less_than(d2, d1) is True
    assert less_than(d1, d2) is False


@parametrize_flavors
def test_less_than_raises_when_using_different_currencies(flavor):
    with pytest.raises(CurrencyMismatchError):
        less_than(flavor.money(800, USD), flavor.money(500, EUR))


# endregion

# region Or-equal variants and compare


@parametrize_flavors
def test_or_equal_variants_accept_equal_values_at_different_scales(flavor):
    d1 = flavor.money(500, USD)
    d2 = flavor.money(5000, USD, scale=3)

    assert greater_than_or_equal(d1, d2) is True
    assert less_than_or_equal(d1, d2) is True


@parametrize_flavors
def test_compare_returns_comparison_operator(flavor):
    assert compare(flavor.money(500, USD), flavor.money(800, USD)) == ComparisonOperator.LT
    assert compare(flavor.money(800, USD), flavor.money(500, USD)) == ComparisonOperator.GT
    assert compare(flavor.money(500, USD), flavor.money(5000, USD, scale=3)) == ComparisonOperator.EQ


@pytest.mark.parametrize("operator", ORDERING_OPERATORS, ids=[operator.__name__ for operator in ORDERING_OPERATORS])
@pytest.mark.parametrize("scale", [2, 3, 6])
def test_ordering_operators_always_raise_for_different_currencies(operator, scale):
    """The currency check does not depend on amount or scale."""
    d1 = INTEGER.money(800, USD, scale=scale)
    d2 = INTEGER.money(-500, EUR)

    with pytest.raises(CurrencyMismatchError) as exc_info:
        operator(d1, d2)

    assert exc_info.value.operation == operator.__name__
    assert exc_info.value.currency_codes == ("USD", "EUR")


def test_ordering_operators_raise_for_different_calculators():
    d1 = INTEGER.money(800, USD)
    d2 = DECIMAL.money(500, USD)

    with pytest.raises(CalculatorMismatchError, match="integer.*decimal"):
        greater_than(d1, d2)


# endregion

# region minimum / maximum


@parametrize_flavors
def test_minimum_and_maximum_return_objects_at_common_scale(flavor):
    d1 = flavor.money(150, USD)
    d2 = flavor.money(1000, USD, scale=3)
    d3 = flavor.money(-20, USD)

    lowest = minimum([d1, d2, d3])
    highest = maximum([d1, d2, d3])

    assert lowest.amount == flavor.cast(-200)
    assert lowest.scale == flavor.cast(3)
    assert highest.amount == flavor.cast(1500)
    assert highest.scale == flavor.cast(3)


def test_minimum_raises_for_empty_sequence():
    with pytest.raises(ValueError, match="Cannot call `minimum` because \\$money_objects is empty"):
        minimum([])


def test_maximum_raises_for_different_currencies():
    with pytest.raises(CurrencyMismatchError):
        maximum([INTEGER.money(1, USD), INTEGER.money(2, EUR)])


# endregion
