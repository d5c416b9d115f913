from __future__ import annotations

import logging
from typing import Any

from bidict import bidict

from suite_money.calculator.protocol import Calculator
from suite_money.calculator.impl.number import number_calculator
from suite_money.calculator.impl.integer import integer_calculator
from suite_money.calculator.impl.big_decimal import decimal_calculator

logger = logging.getLogger(__name__)


class CalculatorRegistry:
    """Named collection of calculators (one unique name per calculator).

    The mapping is bi-directional, so a calculator can be looked up by name and the name of
    a calculator can be resolved for error messages and `repr` output.
    """

    __slots__ = ("_calculators_by_name_bidict",)

    def __init__(self) -> None:
        self._calculators_by_name_bidict: bidict[str, Calculator[Any]] = bidict()

    def register(self, name: str, calculator: Calculator[Any], overwrite: bool = False) -> None:
        """Register $calculator under $name.

        Args:
            name: Unique calculator name within this registry.
            calculator: The calculator instance to register.
            overwrite: Whether to replace a calculator already registered under $name.

        Raises:
            ValueError: If $name is empty, is already taken and $overwrite is False,
                or if $calculator is already registered under another name.
        """
        # Raise: name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        # Raise: name must be unique unless overwrite is requested
        if name in self._calculators_by_name_bidict and not overwrite:
            raise ValueError(f"Cannot call `register` because calculator named ('{name}') is already registered. Use overwrite=True to replace it.")

        # Raise: one calculator instance cannot have two names
        existing_name = self._calculators_by_name_bidict.inverse.get(calculator)
        if existing_name is not None and existing_name != name:
            raise ValueError(f"Cannot call `register` because {calculator!r} is already registered under name '{existing_name}'")

        self._calculators_by_name_bidict.forceput(name, calculator)
        logger.debug(f"CalculatorRegistry registered calculator named '{name}' (class {calculator.__class__.__name__})")

    def unregister(self, name: str) -> None:
        """Remove the calculator registered under $name.

        Raises:
            KeyError: If no calculator with the given $name exists.
        """
        # Raise: calculator name must be registered before removing
        if name not in self._calculators_by_name_bidict:
            raise KeyError(f"Cannot call `unregister` because calculator name $name ('{name}') is not registered")

        del self._calculators_by_name_bidict[name]
        logger.debug(f"CalculatorRegistry removed calculator named '{name}'")

    def get(self, name: str) -> Calculator[Any]:
        """Get the calculator registered under $name.

        Raises:
            KeyError: If no calculator with the given $name exists.
        """
        if name not in self._calculators_by_name_bidict:
            raise KeyError(f"Calculator named '{name}' not found in registry. Available calculators: {self.list_names()}")

        return self._calculators_by_name_bidict[name]

    def find_name(self, calculator: Calculator[Any]) -> str | None:
        """Return the name of $calculator, or None if it is not registered."""
        return self._calculators_by_name_bidict.inverse.get(calculator)

    def list_names(self) -> list[str]:
        """List names of all registered calculators in registration order."""
        return list(self._calculators_by_name_bidict.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._calculators_by_name_bidict


# Default registry with the built-in calculators
CALCULATOR_REGISTRY = CalculatorRegistry()
CALCULATOR_REGISTRY.register("number", number_calculator)
CALCULATOR_REGISTRY.register("integer", integer_calculator)
CALCULATOR_REGISTRY.register("decimal", decimal_calculator)


def register_calculator(name: str, calculator: Calculator[Any], overwrite: bool = False) -> None:
    """Register $calculator in the default registry. See `CalculatorRegistry.register`."""
    CALCULATOR_REGISTRY.register(name, calculator, overwrite=overwrite)


def get_calculator(name: str) -> Calculator[Any]:
    """Get a calculator from the default registry by $name."""
    return CALCULATOR_REGISTRY.get(name)


def describe_calculator(calculator: Calculator[Any]) -> str:
    """Return the registered name of $calculator, or its `repr` when unregistered."""
    name = CALCULATOR_REGISTRY.find_name(calculator)
    return name if name is not None else repr(calculator)
