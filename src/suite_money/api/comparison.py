"""Comparison operators over Money objects.

`equal` answers False for different currencies, while the ordering operators raise
`CurrencyMismatchError`: ordering across currencies has no meaning without an exchange rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence, TypeVar

from suite_money.api.guards import assert_same_calculator, assert_same_currency, have_same_currency
from suite_money.api.scale import normalize_scale
from suite_money.calculator.protocol import Calculator, ComparisonOperator
from suite_money.utils import calculator_tools

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money

T = TypeVar("T")


# region Helpers


def _normalized_amounts(operation: str, money_1: Money[T], money_2: Money[T]) -> tuple[Calculator[T], T, T]:
    """Check currencies, then return the calculator and both amounts at the common scale."""
    assert_same_currency(operation, money_1, money_2)
    assert_same_calculator(operation, money_1, money_2)

    normalized_1, normalized_2 = normalize_scale([money_1, money_2])
    return money_1.calculator, normalized_1.amount, normalized_2.amount


# endregion

# region Sign


def is_negative(money: Money[T]) -> bool:
    """Return True if the amount of $money is below zero (independent of scale)."""
    calculator = money.calculator
    return calculator_tools.less_than(calculator, money.amount, calculator.zero())


def is_zero(money: Money[T]) -> bool:
    calculator = money.calculator
    return calculator_tools.equal(calculator, money.amount, calculator.zero())


def is_positive(money: Money[T]) -> bool:
    """Return True if the amount of $money is strictly above zero."""
    calculator = money.calculator
    return calculator_tools.greater_than(calculator, money.amount, calculator.zero())


# endregion

# region Binary comparison


def equal(money_1: Money[T], money_2: Money[T]) -> bool:
    """Return True if both objects have the same currency and the same value.

    Amounts are compared at the common scale, so `500 USD` (scale 2) equals `5000 USD` (scale 3).
    Different currencies are simply not equal; no error is raised.
    """
    if not have_same_currency([money_1, money_2]):
        return False

    calculator, amount_1, amount_2 = _normalized_amounts("equal", money_1, money_2)
    return calculator_tools.equal(calculator, amount_1, amount_2)


def compare(money_1: Money[T], money_2: Money[T]) -> ComparisonOperator:
    """Compare the values of two objects with the same currency.

    Raises:
        CurrencyMismatchError: If the currencies differ.
    """
    calculator, amount_1, amount_2 = _normalized_amounts("compare", money_1, money_2)
    return calculator.compare(amount_1, amount_2)


def greater_than(money_1: Money[T], money_2: Money[T]) -> bool:
    """Return True if $money_1 is worth more than $money_2.

    Raises:
        CurrencyMismatchError: If the currencies differ.
    """
    calculator, amount_1, amount_2 = _normalized_amounts("greater_than", money_1, money_2)
    return calculator_tools.greater_than(calculator, amount_1, amount_2)


def greater_than_or_equal(money_1: Money[T], money_2: Money[T]) -> bool:
    calculator, amount_1, amount_2 = _normalized_amounts("greater_than_or_equal", money_1, money_2)
    return calculator_tools.greater_than_or_equal(calculator, amount_1, amount_2)


def less_than(money_1: Money[T], money_2: Money[T]) -> bool:
    """Return True if $money_1 is worth less than $money_2.

    Raises:
        CurrencyMismatchError: If the currencies differ.
    """
    calculator, amount_1, amount_2 = _normalized_amounts("less_than", money_1, money_2)
    return calculator_tools.less_than(calculator, amount_1, amount_2)


def less_than_or_equal(money_1: Money[T], money_2: Money[T]) -> bool:
    calculator, amount_1, amount_2 = _normalized_amounts("less_than_or_equal", money_1, money_2)
    return calculator_tools.less_than_or_equal(calculator, amount_1, amount_2)


# endregion

# region Many objects


def have_same_amount(money_objects: Sequence[Money[T]]) -> bool:
    """Return True if all $money_objects have the same amount at the common scale.

    Currencies are ignored; use `have_same_currency` or `equal` to include them.
    """
    normalized = normalize_scale(money_objects)
    if not normalized:
        return True

    calculator = normalized[0].calculator
    first_amount = normalized[0].amount
    return all(calculator_tools.equal(calculator, money.amount, first_amount) for money in normalized[1:])


def minimum(money_objects: Sequence[Money[T]]) -> Money[T]:
    """Return the lowest of $money_objects, expressed at their common scale.

    Raises:
        ValueError: If $money_objects is empty.
        CurrencyMismatchError: If the currencies differ.
    """
    return _pick("minimum", money_objects, calculator_tools.less_than)


def maximum(money_objects: Sequence[Money[T]]) -> Money[T]:
    """Return the highest of $money_objects, expressed at their common scale.

    Raises:
        ValueError: If $money_objects is empty.
        CurrencyMismatchError: If the currencies differ.
    """
    return _pick("maximum", money_objects, calculator_tools.greater_than)


def _pick(operation: str, money_objects: Sequence[Money[T]], is_better: Callable[[Calculator[T], T, T], bool]) -> Money[T]:
    # Raise: there is nothing to pick from an empty sequence
    if not money_objects:
        raise ValueError(f"Cannot call `{operation}` because $money_objects is empty")

    assert_same_currency(operation, *money_objects)
    normalized = normalize_scale(money_objects)
    calculator = normalized[0].calculator

    result = normalized[0]
    for money in normalized[1:]:
        if is_better(calculator, money.amount, result.amount):
            result = money
    return result


# endregion
