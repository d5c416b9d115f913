from __future__ import annotations

import pytest

from suite_money.utils.rounding import (
    down,
    half_away_from_zero,
    half_down,
    half_even,
    half_odd,
    half_towards_zero,
    half_up,
    up,
)
from tests.helpers.helper_money import parametrize_flavors

FACTOR = 10

# Expected results of dividing amount by FACTOR:
#   function: {amount: result}
EXPECTED = {
    down: {25: 2, -25: -3, 24: 2, -24: -3, 26: 2, 30: 3, -30: -3},
    up: {25: 3, -25: -2, 24: 3, -24: -2, 26: 3, 30: 3, -30: -3},
    half_up: {25: 3, -25: -2, 35: 4, -35: -3, 24: 2, -26: -3, 30: 3},
    half_down: {25: 2, -25: -3, 35: 3, -35: -4, 26: 3, -24: -2, 30: 3},
    half_even: {25: 2, -25: -2, 35: 4, -35: -4, 24: 2, 26: 3, -26: -3},
    half_odd: {25: 3, -25: -3, 35: 3, -35: -3, 24: 2, 26: 3, -26: -3},
    half_towards_zero: {25: 2, -25: -2, 35: 3, -35: -3, 26: 3, -26: -3},
    half_away_from_zero: {25: 3, -25: -3, 35: 4, -35: -4, 24: 2, -24: -2},
}

CASES = [(function, amount, result) for function, results in EXPECTED.items() for amount, result in results.items()]


@parametrize_flavors
@pytest.mark.parametrize("function, amount, expected", CASES, ids=[f"{function.__name__}({amount})" for function, amount, _ in CASES])
def test_rounding_functions(flavor, function, amount, expected):
    result = function(flavor.cast(amount), flavor.cast(FACTOR), flavor.calculator)

    assert result == flavor.cast(expected)


@parametrize_flavors
def test_rounding_functions_use_non_decimal_factor(flavor):
    # 7 / 5 = 1.4, 8 / 5 = 1.6
    assert half_even(flavor.cast(7), flavor.cast(5), flavor.calculator) == flavor.cast(1)
    assert half_even(flavor.cast(8), flavor.cast(5), flavor.calculator) == flavor.cast(2)
