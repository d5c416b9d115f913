from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from suite_money.calculator.protocol import Calculator, ComparisonOperator

T = TypeVar("T")


# region Comparison


def equal(calculator: Calculator[T], a: T, b: T) -> bool:
    return calculator.compare(a, b) == ComparisonOperator.EQ


def greater_than(calculator: Calculator[T], a: T, b: T) -> bool:
    return calculator.compare(a, b) == ComparisonOperator.GT


def greater_than_or_equal(calculator: Calculator[T], a: T, b: T) -> bool:
    return calculator.compare(a, b) != ComparisonOperator.LT


def less_than(calculator: Calculator[T], a: T, b: T) -> bool:
    return calculator.compare(a, b) == ComparisonOperator.LT


def less_than_or_equal(calculator: Calculator[T], a: T, b: T) -> bool:
    return calculator.compare(a, b) != ComparisonOperator.GT


def maximum(calculator: Calculator[T], values: Iterable[T]) -> T:
    """Return the largest of $values according to $calculator.

    Raises:
        ValueError: If $values is empty.
    """
    iterator = iter(values)
    try:
        result = next(iterator)
    except StopIteration:
        raise ValueError("Cannot call `maximum` because $values is empty") from None

    for value in iterator:
        if greater_than(calculator, value, result):
            result = value
    return result


def minimum(calculator: Calculator[T], values: Iterable[T]) -> T:
    """Return the smallest of $values according to $calculator.

    Raises:
        ValueError: If $values is empty.
    """
    iterator = iter(values)
    try:
        result = next(iterator)
    except StopIteration:
        raise ValueError("Cannot call `minimum` because $values is empty") from None

    for value in iterator:
        if less_than(calculator, value, result):
            result = value
    return result


# endregion

# region Arithmetic


def two(calculator: Calculator[T]) -> T:
    return calculator.increment(calculator.increment(calculator.zero()))


def negate(calculator: Calculator[T], value: T) -> T:
    return calculator.subtract(calculator.zero(), value)


def absolute(calculator: Calculator[T], value: T) -> T:
    if less_than(calculator, value, calculator.zero()):
        return negate(calculator, value)
    return value


def is_even(calculator: Calculator[T], value: T) -> bool:
    return equal(calculator, calculator.modulo(value, two(calculator)), calculator.zero())


def compare_half(calculator: Calculator[T], remainder: T, divisor: T) -> ComparisonOperator:
    """Compare |$remainder| with half of |$divisor| without leaving integer arithmetic.

    Returns:
        ComparisonOperator: LT when the remainder is below one half, EQ when it is exactly
        one half, GT when it is above.
    """
    doubled_remainder = calculator.multiply(absolute(calculator, remainder), two(calculator))
    return calculator.compare(doubled_remainder, absolute(calculator, divisor))


def count_trailing_zeros(calculator: Calculator[T], value: T, base: T) -> T:
    """Count how many times $value divides by $base without remainder.

    Zero has no trailing zeros by this definition and returns zero.
    """
    zero = calculator.zero()
    count = zero
    if equal(calculator, value, zero):
        return count

    remaining = value
    while equal(calculator, calculator.modulo(remaining, base), zero):
        remaining = calculator.integer_divide(remaining, base)
        count = calculator.increment(count)
    return count


def distribute(calculator: Calculator[T], value: T, ratios: Sequence[T]) -> list[T]:
    """Split $value into integer shares proportional to $ratios, losing nothing.

    Each share is first truncated (`value * ratio / total`); the leftover units are then handed
    out one at a time, in order, to shares whose ratio is non-zero. The shares always sum to $value.
    With the float calculator the shares are only exact while $value stays below 2**53.

    Args:
        value: Integer amount to split (may be negative).
        ratios: Non-negative ratios, at least one of them greater than zero.

    Returns:
        list: One share per ratio.
    """
    zero = calculator.zero()
    total = zero
    for ratio in ratios:
        total = calculator.add(total, ratio)

    if equal(calculator, total, zero):
        return list(ratios)

    remainder = value
    shares = []
    for ratio in ratios:
        share = calculator.integer_divide(calculator.multiply(value, ratio), total)
        remainder = calculator.subtract(remainder, share)
        shares.append(share)

    is_positive = greater_than_or_equal(calculator, value, zero)
    unit = calculator.increment(zero) if is_positive else calculator.decrement(zero)
    has_remainder = greater_than if is_positive else less_than

    index = 0
    while has_remainder(calculator, remainder, zero):
        if not equal(calculator, ratios[index], zero):
            shares[index] = calculator.add(shares[index], unit)
            remainder = calculator.subtract(remainder, unit)
        index += 1

    return shares


# endregion

# region Digits


def to_digits(calculator: Calculator[T], value: T, base: T) -> str:
    """Return the digits of |$value| in $base (base 10 or lower) as a string.

    Digits are extracted through $calculator, so the result is exact for any amount size.
    """
    zero = calculator.zero()
    remaining = absolute(calculator, value)
    if equal(calculator, remaining, zero):
        return "0"

    digits = []
    while greater_than(calculator, remaining, zero):
        digits.append(str(int(calculator.to_number(calculator.modulo(remaining, base)))))
        remaining = calculator.integer_divide(remaining, base)
    return "".join(reversed(digits))


# endregion
