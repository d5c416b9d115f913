from __future__ import annotations

from enum import IntEnum
from typing import Protocol, TypeVar

TAmount = TypeVar("TAmount")


class ComparisonOperator(IntEnum):
    """Result of `Calculator.compare`."""

    LT = -1
    EQ = 0
    GT = 1


# region Interface


class Calculator(Protocol[TAmount]):
    """Minimal set of numeric primitives that backs the amount of a `Money` object.

    Purpose:
        Every operation on `Money` is expressed through these primitives only, so the same
        semantics hold for `float`, `int` and `Decimal` amounts (or any other numeric type
        with a matching implementation). No operation on `Money` calls a native arithmetic or
        comparison operator on an amount directly.

    Notes:
        - All methods are pure and must not raise for well-formed inputs.
        - Division by zero is a caller precondition; implementations let the error of the
          underlying numeric type propagate.
        - `integer_divide` truncates toward zero and `modulo` keeps the sign of the dividend,
          so `a == integer_divide(a, b) * b + modulo(a, b)` always holds.

    Example:
        factor = calculator.power(currency.base, calculator.subtract(new_scale, scale))
        scaled_amount = calculator.multiply(amount, factor)
    """

    def zero(self) -> TAmount:
        """Return the additive identity."""
        ...

    def increment(self, value: TAmount) -> TAmount:
        """Return $value + 1."""
        ...

    def decrement(self, value: TAmount) -> TAmount:
        """Return $value - 1."""
        ...

    def compare(self, a: TAmount, b: TAmount) -> ComparisonOperator:
        """Compare $a with $b.

        Returns:
            ComparisonOperator: LT, EQ or GT.
        """
        ...

    def add(self, augend: TAmount, addend: TAmount) -> TAmount:
        ...

    def subtract(self, minuend: TAmount, subtrahend: TAmount) -> TAmount:
        ...

    def multiply(self, multiplicand: TAmount, multiplier: TAmount) -> TAmount:
        ...

    def integer_divide(self, dividend: TAmount, divisor: TAmount) -> TAmount:
        """Divide $dividend by $divisor and truncate the quotient toward zero."""
        ...

    def modulo(self, dividend: TAmount, divisor: TAmount) -> TAmount:
        """Return the remainder consistent with `integer_divide` (sign of $dividend)."""
        ...

    def power(self, base: TAmount, exponent: TAmount) -> TAmount:
        """Raise $base to the non-negative integer $exponent."""
        ...

    def to_number(self, value: TAmount) -> float:
        """Convert $value to a native float. Precision loss is acceptable here."""
        ...


# endregion
