from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from suite_money.calculator.registry import describe_calculator
from suite_money.domain.monetary.errors import CalculatorMismatchError, CurrencyMismatchError

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money


def have_same_currency(money_objects: Sequence[Money[Any]]) -> bool:
    """Return True if all $money_objects share the same currency code."""
    if not money_objects:
        return True

    first_code = money_objects[0].currency.code
    return all(money.currency.code == first_code for money in money_objects[1:])


def assert_same_currency(operation: str, *money_objects: Money[Any]) -> None:
    """Raise `CurrencyMismatchError` unless all $money_objects share the same currency code.

    Args:
        operation: Name of the calling operation, reported in the error.
        *money_objects: Operands of the operation.
    """
    # Raise: operations across currencies need an exchange rate, which this library does not have
    if not have_same_currency(money_objects):
        raise CurrencyMismatchError(operation, [money.currency.code for money in money_objects])


def assert_same_calculator(operation: str, *money_objects: Money[Any]) -> None:
    """Raise `CalculatorMismatchError` unless all $money_objects use the same calculator instance."""
    if not money_objects:
        return

    first_calculator = money_objects[0].calculator
    # Raise: amounts of different numeric flavors cannot be combined by one calculator
    if any(money.calculator is not first_calculator for money in money_objects[1:]):
        raise CalculatorMismatchError(operation, [describe_calculator(money.calculator) for money in money_objects])
