from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Generic, TypeVar

from suite_money.calculator.protocol import Calculator
from suite_money.calculator.registry import describe_calculator
from suite_money.domain.monetary.currency import Currency
from suite_money.api import arithmetic, comparison, conversion, scale as scale_api
from suite_money.utils.calculator_tools import negate

T = TypeVar("T")


@dataclass(frozen=True)
class MoneySnapshot(Generic[T]):
    """Read-only view of the data held by a `Money` object."""

    amount: T
    currency: Currency[T]
    scale: T


class Money(Generic[T]):
    """Represents an immutable monetary amount with currency and scale.

    $amount is an integer count of `base**scale`-ths of the currency's major unit, e.g.
    `Money(1050, USD)` is 10.50 USD and `Money(10500, USD, 3)` is the same value at scale 3.
    All arithmetic on $amount goes through $calculator, so the amount may be an `int`,
    an integer-valued `float`, a `Decimal`, or any type with a matching calculator.

    Objects are never mutated; every operation returns a new `Money`.
    """

    __slots__ = ("_amount", "_currency", "_scale", "_calculator")

    def __init__(self, amount: T, currency: Currency[T], scale: T | None = None, *, calculator: Calculator[T]):
        """Initialize Money with amount, currency and scale.

        Args:
            amount: Integer amount in minor units at $scale.
            currency (Currency): Currency object.
            scale: Number of fractional digits of $amount. Defaults to $currency.exponent.
            calculator: Calculator for the numeric type of $amount.

        Raises:
            TypeError: If $currency is not a Currency instance or $calculator is None.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: calculator is required to interpret $amount
        if calculator is None:
            raise TypeError("$calculator must be provided, but provided value is: None")

        self._amount = amount
        self._currency = currency
        self._scale = currency.exponent if scale is None else scale
        self._calculator = calculator

    @property
    def amount(self) -> T:
        """Get the integer amount at $scale."""
        return self._amount

    @property
    def currency(self) -> Currency[T]:
        """Get the currency."""
        return self._currency

    @property
    def scale(self) -> T:
        """Get the scale."""
        return self._scale

    @property
    def calculator(self) -> Calculator[T]:
        """Get the calculator this object was built with."""
        return self._calculator

    def to_snapshot(self) -> MoneySnapshot[T]:
        """Return the data of this object as a frozen `MoneySnapshot`."""
        return MoneySnapshot(self._amount, self._currency, self._scale)

    def replace(self, *, amount: T | None = None, scale: T | None = None) -> Money[T]:
        """Return a new Money with the same currency and calculator.

        Args:
            amount: New amount. Keeps the current amount if None.
            scale: New scale. Keeps the current scale if None.
        """
        return self.__class__(
            self._amount if amount is None else amount,
            self._currency,
            self._scale if scale is None else scale,
            calculator=self._calculator,
        )

    # Comparison operators (ordering requires the same currency)
    def __eq__(self, other: Any) -> bool:
        """Check equality with another Money object (different currencies or calculators are never equal)."""
        if not isinstance(other, Money):
            return False
        # Amounts of different numeric types are never compared
        if other.calculator is not self.calculator:
            return False
        return comparison.equal(self, other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return comparison.less_than(self, other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return comparison.less_than_or_equal(self, other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return comparison.greater_than(self, other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return comparison.greater_than_or_equal(self, other)

    # Arithmetic operations
    def __add__(self, other: Any) -> Money[T]:
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other: Any) -> Money[T]:
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __neg__(self) -> Money[T]:
        return self.replace(amount=negate(self._calculator, self._amount))

    def __pos__(self) -> Money[T]:
        return self

    def __hash__(self) -> int:
        """Hash the trimmed representation, so equal objects at different scales hash equal."""
        trimmed = scale_api.trim_scale(self)
        return hash((trimmed.currency.code, trimmed.amount, trimmed.scale))

    # String representations
    def __str__(self) -> str:
        """Return string like '1000.50 USD' (or the raw amount and scale for non-decimal currencies)."""
        if conversion.is_decimal_currency(self):
            return f"{conversion.to_decimal(self)} {self._currency.code}"
        return f"{self._amount} {self._currency.code} (scale {self._scale})"

    def __repr__(self) -> str:
        """Return string like 'Money(100050, USD, scale=2, calculator=integer)'."""
        return f"{self.__class__.__name__}({self._amount!r}, {self._currency.code}, scale={self._scale!r}, calculator={describe_calculator(self._calculator)})"


def create_money(calculator: Calculator[T]) -> Callable[..., Money[T]]:
    """Return a `Money` constructor bound to $calculator.

    Example:
        money = create_money(integer_calculator)
        price = money(1050, USD)
    """
    return partial(Money, calculator=calculator)
