from __future__ import annotations

from suite_money.calculator.protocol import Calculator, ComparisonOperator


class IntegerCalculator(Calculator[int]):
    """Calculator for arbitrary-precision `int` amounts.

    Python's `//` and `%` floor toward negative infinity; this calculator truncates toward
    zero instead, which is what the rounding functions in `suite_money.utils.rounding` expect.
    """

    __slots__ = ()

    def zero(self) -> int:
        return 0

    def increment(self, value: int) -> int:
        return value + 1

    def decrement(self, value: int) -> int:
        return value - 1

    def compare(self, a: int, b: int) -> ComparisonOperator:
        if a < b:
            return ComparisonOperator.LT
        if a > b:
            return ComparisonOperator.GT
        return ComparisonOperator.EQ

    def add(self, augend: int, addend: int) -> int:
        return augend + addend

    def subtract(self, minuend: int, subtrahend: int) -> int:
        return minuend - subtrahend

    def multiply(self, multiplicand: int, multiplier: int) -> int:
        return multiplicand * multiplier

    def integer_divide(self, dividend: int, divisor: int) -> int:
        quotient = abs(dividend) // abs(divisor)
        # Sign of the quotient follows the usual sign rule
        return quotient if (dividend < 0) == (divisor < 0) else -quotient

    def modulo(self, dividend: int, divisor: int) -> int:
        return dividend - self.integer_divide(dividend, divisor) * divisor

    def power(self, base: int, exponent: int) -> int:
        return base**exponent

    def to_number(self, value: int) -> float:
        return float(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


integer_calculator = IntegerCalculator()
