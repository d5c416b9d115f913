"""Integer division with explicit rounding modes.

Every function has the signature `(amount, factor, calculator) -> quotient` and divides the
integer $amount by the positive integer $factor. They are passed to `transform_scale` (and
anything built on it) as the `divide` argument.

Tie-breaking for values exactly halfway between two integers:

    function              2.5   -2.5
    half_up                 3     -2
    half_down               2     -3
    half_even               2     -2
    half_odd                3     -3
    half_towards_zero       2     -2
    half_away_from_zero     3     -3
"""

from __future__ import annotations

from typing import Callable, TypeVar

from suite_money.calculator.protocol import Calculator, ComparisonOperator
from suite_money.utils.calculator_tools import compare_half, equal, greater_than, is_even, less_than

T = TypeVar("T")

DivideFunction = Callable[[T, T, Calculator[T]], T]


# region Helpers


def _away_from_zero(amount: T, quotient: T, calculator: Calculator[T]) -> T:
    """Move the truncated $quotient one unit further from zero, following the sign of $amount."""
    if less_than(calculator, amount, calculator.zero()):
        return calculator.decrement(quotient)
    return calculator.increment(quotient)


def _round_to_nearest(amount: T, factor: T, calculator: Calculator[T], on_tie: Callable[[T, T], T]) -> T:
    """Round $amount / $factor to the nearest integer and resolve exact halves with $on_tie.

    $on_tie receives the truncated quotient and the quotient moved away from zero.
    """
    quotient = calculator.integer_divide(amount, factor)
    remainder = calculator.modulo(amount, factor)
    if equal(calculator, remainder, calculator.zero()):
        return quotient

    away = _away_from_zero(amount, quotient, calculator)
    half_comparison = compare_half(calculator, remainder, factor)
    if half_comparison == ComparisonOperator.LT:
        return quotient
    if half_comparison == ComparisonOperator.GT:
        return away
    return on_tie(quotient, away)


# endregion

# region Directed rounding


def down(amount: T, factor: T, calculator: Calculator[T]) -> T:
    """Round toward negative infinity (floor)."""
    quotient = calculator.integer_divide(amount, factor)
    remainder = calculator.modulo(amount, factor)
    if equal(calculator, remainder, calculator.zero()) or greater_than(calculator, amount, calculator.zero()):
        return quotient
    return calculator.decrement(quotient)


def up(amount: T, factor: T, calculator: Calculator[T]) -> T:
    """Round toward positive infinity (ceiling)."""
    quotient = calculator.integer_divide(amount, factor)
    remainder = calculator.modulo(amount, factor)
    if equal(calculator, remainder, calculator.zero()) or less_than(calculator, amount, calculator.zero()):
        return quotient
    return calculator.increment(quotient)


# endregion

# region Round to nearest


def half_up(amount: T, factor: T, calculator: Calculator[T]) -> T:
    """Round to nearest; ties toward positive infinity."""
    is_positive = greater_than(calculator, amount, calculator.zero())
    return _round_to_nearest(amount, factor, calculator, lambda quotient, away: away if is_positive else quotient)


def half_down(amount: T, factor: T, calculator: Calculator[T]) -> T:
    """Round to nearest; ties toward negative infinity."""
    is_positive = greater_than(calculator, amount, calculator.zero())
    return _round_to_nearest(amount, factor, calculator, lambda quotient, away: quotient if is_positive else away)


def half_even(amount: T, factor: T, calculator: Calculator[T]) -> T:
    """Round to nearest; ties to the even neighbour (banker's rounding)."""
    return _round_to_nearest(amount, factor, calculator, lambda quotient, away: quotient if is_even(calculator, quotient) else away)


def half_odd(amount: T, factor: T, calculator: Calculator[T]) -> T:
    """Round to nearest; ties to the odd neighbour."""
    return _round_to_nearest(amount, factor, calculator, lambda quotient, away: away if is_even(calculator, quotient) else quotient)


def half_towards_zero(amount: T, factor: T, calculator: Calculator[T]) -> T:
    return _round_to_nearest(amount, factor, calculator, lambda quotient, away: quotient)


def half_away_from_zero(amount: T, factor: T, calculator: Calculator[T]) -> T:
    return _round_to_nearest(amount, factor, calculator, lambda quotient, away: away)


# endregion
