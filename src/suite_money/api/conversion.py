"""Conversion of Money objects into external representations.

`to_unit` and `to_format` go through floats and are meant for display only. `to_decimal` is exact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from suite_money.utils.calculator_tools import less_than, to_digits

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency
    from suite_money.domain.monetary.money import Money, MoneySnapshot

T = TypeVar("T")
R = TypeVar("R")

RoundFunction = Callable[[float], float]


@dataclass(frozen=True)
class FormatPayload(Generic[T]):
    """Data handed to a transformer by `to_format`.

    Attributes:
        amount: Value in major units as a float, rounded to the scale of $money.
        currency: Currency of $money.
        money: The Money object being formatted.
    """

    amount: float
    currency: Currency[T]
    money: Money[T]


Transformer = Callable[[FormatPayload[Any]], R]


def default_transformer(payload: FormatPayload[Any]) -> str:
    """Render a payload as '<CODE> <amount>' with as many fractional digits as the scale, e.g. 'USD 10.50'."""
    money = payload.money
    digits = int(money.calculator.to_number(money.scale))
    return f"{payload.currency.code} {payload.amount:.{max(digits, 0)}f}"


def to_snapshot(money: Money[T]) -> MoneySnapshot[T]:
    return money.to_snapshot()


def to_unit(money: Money[T], digits: int | None = None, rounding: RoundFunction = round) -> float:
    """Convert $money to a float in major units.

    Args:
        money: Money object to convert.
        digits: Number of fractional digits to keep. When None, the value is returned unrounded.
        rounding: Function that rounds a float to an integer. The default is the builtin `round`
            (round half to even); `math.floor`, `math.ceil` and `math.trunc` also fit.

    Returns:
        float: The value in major units, e.g. 10.5 for `Money(1050, USD)`.
    """
    calculator = money.calculator
    unit_factor = calculator.to_number(calculator.power(money.currency.base, money.scale))
    value = calculator.to_number(money.amount) / unit_factor

    if digits is None:
        return value

    factor = 10**digits
    return rounding(value * factor) / factor


def to_format(money: Money[T], transformer: Transformer[R] = default_transformer) -> R:
    """Format $money with a caller-supplied $transformer.

    The amount is converted with `to_unit` using the scale of $money as the number of digits and
    passed to $transformer as a `FormatPayload`. No locale or string logic happens here.

    Example:
        to_format(price, lambda payload: f"{payload.amount:,.2f} {payload.currency.code}")
    """
    calculator = money.calculator
    digits = int(calculator.to_number(money.scale))
    amount = to_unit(money, digits=digits)
    return transformer(FormatPayload(amount, money.currency, money))


def is_decimal_currency(money: Money[Any]) -> bool:
    """Return True if the currency of $money uses base 10."""
    return money.calculator.to_number(money.currency.base) == 10


def to_decimal(money: Money[T]) -> str:
    """Return the exact value of $money in major units as a decimal string.

    Digits are extracted through the calculator, so no precision is lost for any amount size,
    e.g. `Money(-5, USD)` gives '-0.05' and `Money(10500, USD, 3)` gives '10.500'.

    Raises:
        ValueError: If the currency base is not 10.
    """
    # Raise: a decimal string only exists for base-10 currencies
    if not is_decimal_currency(money):
        raise ValueError(f"Cannot call `to_decimal` because currency '{money.currency.code}' has non-decimal $base ({money.currency.base!r})")

    calculator = money.calculator
    digits = to_digits(calculator, money.amount, money.currency.base)
    scale_digits = int(calculator.to_number(money.scale))
    sign = "-" if less_than(calculator, money.amount, calculator.zero()) else ""

    if scale_digits == 0:
        return f"{sign}{digits}"

    # Negative scale: the amount counts tens, hundreds, ...
    if scale_digits < 0:
        return f"{sign}{digits}{'0' * -scale_digits}" if digits != "0" else "0"

    digits = digits.rjust(scale_digits + 1, "0")
    return f"{sign}{digits[:-scale_digits]}.{digits[-scale_digits:]}"
