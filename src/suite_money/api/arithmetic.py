from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence, TypeVar, Union

from suite_money.api.guards import assert_same_calculator, assert_same_currency
from suite_money.api.scale import normalize_scale, transform_scale
from suite_money.domain.monetary.scaled_amount import ScaledAmount
from suite_money.utils.calculator_tools import distribute, equal, less_than, maximum

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money

T = TypeVar("T")

logger = logging.getLogger(__name__)


def add(augend: Money[T], addend: Money[T]) -> Money[T]:
    """Add two Money objects with the same currency. The result is at the higher of both scales.

    Raises:
        CurrencyMismatchError: If the currencies differ.
    """
    assert_same_currency("add", augend, addend)
    assert_same_calculator("add", augend, addend)

    normalized_augend, normalized_addend = normalize_scale([augend, addend])
    calculator = augend.calculator
    return normalized_augend.replace(amount=calculator.add(normalized_augend.amount, normalized_addend.amount))


def subtract(minuend: Money[T], subtrahend: Money[T]) -> Money[T]:
    """Subtract $subtrahend from $minuend. The result is at the higher of both scales.

    Raises:
        CurrencyMismatchError: If the currencies differ.
    """
    assert_same_currency("subtract", minuend, subtrahend)
    assert_same_calculator("subtract", minuend, subtrahend)

    normalized_minuend, normalized_subtrahend = normalize_scale([minuend, subtrahend])
    calculator = minuend.calculator
    return normalized_minuend.replace(amount=calculator.subtract(normalized_minuend.amount, normalized_subtrahend.amount))


def multiply(multiplicand: Money[T], multiplier: Union[T, ScaledAmount[T]]) -> Money[T]:
    """Multiply $multiplicand by an integer or a `ScaledAmount`.

    A scaled multiplier raises the scale of the result by $multiplier.scale, so nothing is rounded:
    `multiply(Money(400, USD), ScaledAmount(2001, 3))` is `Money(800400, USD, 5)` (8.00400 USD).
    """
    calculator = multiplicand.calculator

    if isinstance(multiplier, ScaledAmount):
        new_scale = calculator.add(multiplicand.scale, multiplier.scale)
        return multiplicand.replace(amount=calculator.multiply(multiplicand.amount, multiplier.amount), scale=new_scale)

    return multiplicand.replace(amount=calculator.multiply(multiplicand.amount, multiplier))


def allocate(money: Money[T], ratios: Sequence[Union[T, ScaledAmount[T]]]) -> list[Money[T]]:
    """Split $money into parts proportional to $ratios without losing a single unit.

    Units that cannot be split evenly go to the first parts with a non-zero ratio, e.g. 1003 split
    by [50, 50] gives 502 and 501. Scaled ratios raise the scale of every part by the highest ratio scale.

    Args:
        money: Money object to split.
        ratios: Non-negative integers or `ScaledAmount` ratios, at least one of them non-zero.

    Returns:
        list[Money]: One part per ratio, in the same order. The parts always add up to $money.

    Raises:
        ValueError: If $ratios is empty, contains a negative ratio, or all ratios are zero.
    """
    calculator = money.calculator
    zero = calculator.zero()

    # Raise: at least one ratio is needed to split anything
    if not ratios:
        raise ValueError("Cannot call `allocate` because $ratios is empty")

    scaled_ratios = [ratio if isinstance(ratio, ScaledAmount) else ScaledAmount(ratio, zero) for ratio in ratios]

    # Raise: negative ratios have no meaning in a split
    if any(less_than(calculator, ratio.amount, zero) for ratio in scaled_ratios):
        raise ValueError(f"Cannot call `allocate` because $ratios ({list(ratios)}) contain a negative ratio")

    # Raise: all-zero ratios would leave the whole amount unallocated
    if all(equal(calculator, ratio.amount, zero) for ratio in scaled_ratios):
        raise ValueError(f"Cannot call `allocate` because all $ratios ({list(ratios)}) are zero")

    highest_ratio_scale = maximum(calculator, (ratio.scale for ratio in scaled_ratios))
    base = money.currency.base
    normalized_ratios = [
        calculator.multiply(ratio.amount, calculator.power(base, calculator.subtract(highest_ratio_scale, ratio.scale)))
        for ratio in scaled_ratios
    ]

    new_scale = calculator.add(money.scale, highest_ratio_scale)
    scaled_money = transform_scale(money, new_scale)
    shares = distribute(calculator, scaled_money.amount, normalized_ratios)
    logger.debug(f"Allocated amount {scaled_money.amount!r} at scale {new_scale!r} into {len(shares)} share(s)")

    return [scaled_money.replace(amount=share) for share in shares]
