__version__ = "0.0.1"

from suite_money.calculator import Calculator, decimal_calculator, integer_calculator, number_calculator
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CalculatorMismatchError, CurrencyMismatchError
from suite_money.domain.monetary.money import Money, MoneySnapshot, create_money
from suite_money.domain.monetary.scaled_amount import ScaledAmount

__all__ = [
    "Calculator",
    "number_calculator",
    "integer_calculator",
    "decimal_calculator",
    "Currency",
    "CalculatorMismatchError",
    "CurrencyMismatchError",
    "Money",
    "MoneySnapshot",
    "ScaledAmount",
    "create_money",
]
