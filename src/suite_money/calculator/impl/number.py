from __future__ import annotations

import math

from suite_money.calculator.protocol import Calculator, ComparisonOperator


class NumberCalculator(Calculator[float]):
    """Calculator for native `float` amounts.

    Amounts are integer-valued floats. Results stay exact while every intermediate value
    fits into the 53-bit mantissa (|value| < 2**53); beyond that the usual float rounding applies.
    """

    __slots__ = ()

    def zero(self) -> float:
        return 0.0

    def increment(self, value: float) -> float:
        return value + 1

    def decrement(self, value: float) -> float:
        return value - 1

    def compare(self, a: float, b: float) -> ComparisonOperator:
        if a < b:
            return ComparisonOperator.LT
        if a > b:
            return ComparisonOperator.GT
        return ComparisonOperator.EQ

    def add(self, augend: float, addend: float) -> float:
        return augend + addend

    def subtract(self, minuend: float, subtrahend: float) -> float:
        return minuend - subtrahend

    def multiply(self, multiplicand: float, multiplier: float) -> float:
        return multiplicand * multiplier

    def integer_divide(self, dividend: float, divisor: float) -> float:
        # `fmod` is exact, so the subtraction leaves an exact multiple of $divisor
        return (dividend - math.fmod(dividend, divisor)) / divisor

    def modulo(self, dividend: float, divisor: float) -> float:
        return math.fmod(dividend, divisor)

    def power(self, base: float, exponent: float) -> float:
        return float(base**exponent)

    def to_number(self, value: float) -> float:
        return float(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


number_calculator = NumberCalculator()
