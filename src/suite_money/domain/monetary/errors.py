from __future__ import annotations

from typing import Sequence


class CurrencyMismatchError(ValueError):
    """Raised when an operation that needs a single currency receives several.

    Attributes:
        operation (str): Name of the operation that was called.
        currency_codes (tuple[str, ...]): Currency codes of the operands, in argument order.
    """

    def __init__(self, operation: str, currency_codes: Sequence[str]):
        self.operation = operation
        self.currency_codes = tuple(currency_codes)
        super().__init__(f"Objects must have the same currency. Cannot call `{operation}` with currencies {list(self.currency_codes)}")


class CalculatorMismatchError(TypeError):
    """Raised when one operation receives Money objects built with different calculators.

    Attributes:
        operation (str): Name of the operation that was called.
        calculator_names (tuple[str, ...]): Calculator names (or reprs) of the operands.
    """

    def __init__(self, operation: str, calculator_names: Sequence[str]):
        self.operation = operation
        self.calculator_names = tuple(calculator_names)
        super().__init__(f"Objects must use the same calculator. Cannot call `{operation}` with calculators {list(self.calculator_names)}")
