"""Calculators: numeric primitives that back the amount of a `Money` object."""

from suite_money.calculator.protocol import Calculator, ComparisonOperator
from suite_money.calculator.impl.number import NumberCalculator, number_calculator
from suite_money.calculator.impl.integer import IntegerCalculator, integer_calculator
from suite_money.calculator.impl.big_decimal import DecimalCalculator, decimal_calculator
from suite_money.calculator.registry import (
    CALCULATOR_REGISTRY,
    CalculatorRegistry,
    describe_calculator,
    get_calculator,
    register_calculator,
)

__all__ = [
    "Calculator",
    "ComparisonOperator",
    "NumberCalculator",
    "IntegerCalculator",
    "DecimalCalculator",
    "number_calculator",
    "integer_calculator",
    "decimal_calculator",
    "CALCULATOR_REGISTRY",
    "CalculatorRegistry",
    "describe_calculator",
    "get_calculator",
    "register_calculator",
]
