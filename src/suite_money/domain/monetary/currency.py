from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Currency(Generic[T]):
    """Represents a currency with code, base and exponent.

    The numeric fields use the same numeric type as the amounts of the `Money` objects they
    describe (e.g. `int` for the integer calculator, `Decimal` for the decimal calculator).

    Attributes:
        code (str): Currency code (e.g., "USD", "EUR").
        base (T): Radix of the minor unit (10 for decimal currencies).
        exponent (T): Number of minor-unit digits (e.g., 2 for cents).
    """

    __slots__ = ("_code", "_base", "_exponent")

    def __init__(self, code: str, base: T, exponent: T):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "EUR").
            base (T): Radix of the minor unit.
            exponent (T): Number of minor-unit digits.

        Raises:
            ValueError: If $code is not a non-empty string.
        """
        # Raise: code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        self._code = code.upper().strip()
        self._base = base
        self._exponent = exponent

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def base(self) -> T:
        """Get the currency base."""
        return self._base

    @property
    def exponent(self) -> T:
        """Get the currency exponent."""
        return self._exponent

    def cast(self, converter: Callable[[T], R]) -> Currency[R]:
        """Return a copy with $base and $exponent converted by $converter.

        Example:
            decimal_usd = USD.cast(Decimal)
        """
        return Currency(self._code, converter(self._base), converter(self._exponent))

    def __eq__(self, other: Any) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.base!r}, {self.exponent!r})"
