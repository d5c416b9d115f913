from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_EVEN

from suite_money.calculator.protocol import Calculator, ComparisonOperator

# Significant digits carried by the default decimal calculator
DEFAULT_DECIMAL_PRECISION = 100


class DecimalCalculator(Calculator[Decimal]):
    """Calculator for `decimal.Decimal` amounts.

    Every operation runs in the calculator's own `decimal.Context`, so changes to the
    thread-local context (`decimal.getcontext()`) never affect `Money` arithmetic.

    Args:
        precision: Number of significant digits kept by each operation.
        rounding: Rounding mode used by the context when $precision is exceeded.
    """

    __slots__ = ("_context",)

    def __init__(self, precision: int = DEFAULT_DECIMAL_PRECISION, rounding: str = ROUND_HALF_EVEN) -> None:
        # Raise: precision must be a positive integer
        if not isinstance(precision, int) or precision < 1:
            raise ValueError(f"$precision must be a positive integer, but provided value is: {precision}")

        self._context = Context(prec=precision, rounding=rounding)

    @property
    def context(self) -> Context:
        """Get a copy of the decimal context used by this calculator."""
        return self._context.copy()

    def zero(self) -> Decimal:
        return Decimal(0)

    def increment(self, value: Decimal) -> Decimal:
        return self._context.add(value, 1)

    def decrement(self, value: Decimal) -> Decimal:
        return self._context.subtract(value, 1)

    def compare(self, a: Decimal, b: Decimal) -> ComparisonOperator:
        return ComparisonOperator(int(self._context.compare(a, b)))

    def add(self, augend: Decimal, addend: Decimal) -> Decimal:
        return self._context.add(augend, addend)

    def subtract(self, minuend: Decimal, subtrahend: Decimal) -> Decimal:
        return self._context.subtract(minuend, subtrahend)

    def multiply(self, multiplicand: Decimal, multiplier: Decimal) -> Decimal:
        return self._context.multiply(multiplicand, multiplier)

    def integer_divide(self, dividend: Decimal, divisor: Decimal) -> Decimal:
        # `divide_int` truncates toward zero
        return self._context.divide_int(dividend, divisor)

    def modulo(self, dividend: Decimal, divisor: Decimal) -> Decimal:
        # `remainder` keeps the sign of the dividend
        return self._context.remainder(dividend, divisor)

    def power(self, base: Decimal, exponent: Decimal) -> Decimal:
        return self._context.power(base, exponent)

    def to_number(self, value: Decimal) -> float:
        return float(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(precision={self._context.prec}, rounding={self._context.rounding})"


decimal_calculator = DecimalCalculator()
