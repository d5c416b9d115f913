from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence, TypeVar

from suite_money.api.guards import assert_same_calculator
from suite_money.calculator.protocol import ComparisonOperator
from suite_money.utils.calculator_tools import count_trailing_zeros, equal, maximum
from suite_money.utils.rounding import DivideFunction, half_even

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money

T = TypeVar("T")

logger = logging.getLogger(__name__)


def normalize_scale(money_objects: Sequence[Money[T]]) -> list[Money[T]]:
    """Bring all $money_objects to the highest scale among them.

    Lower-scale amounts are multiplied by `base ** (highest_scale - scale)`, which is exact.
    Objects already at the highest scale are returned as they are, without any
    `power` or `multiply` call.

    Args:
        money_objects: Money objects built with the same calculator.

    Returns:
        list[Money]: Objects in the same order, all at the highest scale.

    Raises:
        CalculatorMismatchError: If the objects use different calculators.
    """
    if not money_objects:
        return []

    assert_same_calculator("normalize_scale", *money_objects)
    calculator = money_objects[0].calculator

    highest_scale = maximum(calculator, (money.scale for money in money_objects))
    return [transform_scale(money, highest_scale) for money in money_objects]


def transform_scale(money: Money[T], new_scale: T, divide: DivideFunction = half_even) -> Money[T]:
    """Express $money at $new_scale.

    Raising the scale is exact. Lowering it divides the amount by `base ** (scale - new_scale)`
    and rounds with $divide, so precision may be lost.

    Args:
        money: Money object to transform.
        new_scale: Target scale.
        divide: Rounding function from `suite_money.utils.rounding`, used only when lowering the scale.

    Returns:
        Money: $money itself when the scale is unchanged, otherwise a new object.
    """
    calculator = money.calculator
    scale_comparison = calculator.compare(new_scale, money.scale)

    if scale_comparison == ComparisonOperator.EQ:
        return money

    base = money.currency.base
    if scale_comparison == ComparisonOperator.GT:
        factor = calculator.power(base, calculator.subtract(new_scale, money.scale))
        return money.replace(amount=calculator.multiply(money.amount, factor), scale=new_scale)

    factor = calculator.power(base, calculator.subtract(money.scale, new_scale))
    new_amount = divide(money.amount, factor, calculator)
    if logger.isEnabledFor(logging.DEBUG) and not equal(calculator, calculator.multiply(new_amount, factor), money.amount):
        logger.debug(f"Rounded amount {money.amount!r} from scale {money.scale!r} to {new_amount!r} at scale {new_scale!r} using `{getattr(divide, '__name__', divide)}`")

    return money.replace(amount=new_amount, scale=new_scale)


def trim_scale(money: Money[T]) -> Money[T]:
    """Remove trailing zeros from the amount, never going below the currency exponent.

    A zero amount is trimmed to the currency exponent. The result always denotes the same value.
    """
    calculator = money.calculator
    currency = money.currency

    if equal(calculator, money.amount, calculator.zero()):
        return transform_scale(money, currency.exponent)

    trailing_zeros = count_trailing_zeros(calculator, money.amount, currency.base)
    trimmed_scale = maximum(calculator, [calculator.subtract(money.scale, trailing_zeros), currency.exponent])
    return transform_scale(money, trimmed_scale)


def has_sub_units(money: Money[T]) -> bool:
    """Return True if $money has a non-zero fractional part in major units."""
    calculator = money.calculator
    unit_factor = calculator.power(money.currency.base, money.scale)
    return not equal(calculator, calculator.modulo(money.amount, unit_factor), calculator.zero())
