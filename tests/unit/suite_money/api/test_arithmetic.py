from __future__ import annotations

import pytest

from suite_money.api.arithmetic import add, allocate, multiply, subtract
from suite_money.domain.monetary.errors import CurrencyMismatchError
from suite_money.domain.monetary.scaled_amount import ScaledAmount
from tests.helpers.helper_currency import EUR, USD
from tests.helpers.helper_money import INTEGER, parametrize_flavors


# region add / subtract


@parametrize_flavors
def test_add_same_scale(flavor):
    result = add(flavor.money(500, USD), flavor.money(100, USD))

    assert result.amount == flavor.cast(600)
    assert result.scale == flavor.cast(2)
    assert result.currency == USD


@parametrize_flavors
def test_add_normalizes_to_the_highest_scale(flavor):
    result = add(flavor.money(500, USD), flavor.money(1000, USD, scale=3))

    assert result.amount == flavor.cast(6000)
    assert result.scale == flavor.cast(3)


@parametrize_flavors
def test_subtract_normalizes_to_the_highest_scale(flavor):
    result = subtract(flavor.money(500, USD), flavor.money(1000, USD, scale=3))

    assert result.amount == flavor.cast(4000)
    assert result.scale == flavor.cast(3)


def test_add_and_subtract_do_not_mutate_operands():
    d1 = INTEGER.money(500, USD)
    d2 = INTEGER.money(100, USD)

    add(d1, d2)
    subtract(d1, d2)

    assert d1.amount == 500
    assert d2.amount == 100


@pytest.mark.parametrize("operation", [add, subtract])
def test_add_and_subtract_raise_for_different_currencies(operation):
    with pytest.raises(CurrencyMismatchError, match=f"`{operation.__name__}`"):
        operation(INTEGER.money(500, USD), INTEGER.money(100, EUR))


# endregion

# region multiply


@parametrize_flavors
def test_multiply_by_integer_keeps_scale(flavor):
    result = multiply(flavor.money(400, USD), flavor.cast(4))

    assert result.amount == flavor.cast(1600)
    assert result.scale == flavor.cast(2)


@parametrize_flavors
def test_multiply_by_scaled_amount_raises_scale(flavor):
    # 4.00 USD * 2.001 = 8.00400 USD
    result = multiply(flavor.money(400, USD), ScaledAmount(flavor.cast(2001), flavor.cast(3)))

    assert result.amount == flavor.cast(800400)
    assert result.scale == flavor.cast(5)


# endregion

# region allocate


@parametrize_flavors
def test_allocate_distributes_remainder_to_first_shares(flavor):
    shares = allocate(flavor.money(1003, USD), [flavor.cast(50), flavor.cast(50)])

    assert [share.amount for share in shares] == [flavor.cast(502), flavor.cast(501)]
    assert all(share.scale == flavor.cast(2) for share in shares)


@parametrize_flavors
def test_allocate_skips_zero_ratios_when_distributing_remainder(flavor):
    shares = allocate(flavor.money(100, USD), [flavor.cast(0), flavor.cast(1), flavor.cast(1), flavor.cast(1)])

    assert [share.amount for share in shares] == [flavor.cast(0), flavor.cast(34), flavor.cast(33), flavor.cast(33)]


@parametrize_flavors
def test_allocate_negative_amount(flavor):
    shares = allocate(flavor.money(-100, USD), [flavor.cast(1), flavor.cast(1), flavor.cast(1)])

    assert [share.amount for share in shares] == [flavor.cast(-34), flavor.cast(-33), flavor.cast(-33)]


@parametrize_flavors
def test_allocate_with_scaled_ratios_raises_scale(flavor):
    # Ratios 505.5 and 494.5 applied to 1.00 USD; shares come out at scale 3
    ratios = [ScaledAmount(flavor.cast(5055), flavor.cast(1)), ScaledAmount(flavor.cast(4945), flavor.cast(1))]

    shares = allocate(flavor.money(100, USD), ratios)

    assert [share.amount for share in shares] == [flavor.cast(506), flavor.cast(494)]
    assert all(share.scale == flavor.cast(3) for share in shares)


def test_allocate_mixes_plain_and_scaled_ratios():
    shares = allocate(INTEGER.money(1000, USD), [ScaledAmount(505, 1), 50])

    assert [share.amount for share in shares] == [5025, 4975]
    assert all(share.scale == 3 for share in shares)


@pytest.mark.parametrize("amount", [1, 7, 1003, -1003, 999_999_999_999_999_999_999])
def test_allocate_never_loses_a_unit(amount):
    ratios = [3, 0, 7, 11, 1]

    shares = allocate(INTEGER.money(amount, USD), ratios)

    assert sum(share.amount for share in shares) == amount


def test_allocate_raises_for_empty_ratios():
    with pytest.raises(ValueError, match="\\$ratios is empty"):
        allocate(INTEGER.money(100, USD), [])


def test_allocate_raises_for_negative_ratio():
    with pytest.raises(ValueError, match="negative ratio"):
        allocate(INTEGER.money(100, USD), [50, -50])


def test_allocate_raises_when_all_ratios_are_zero():
    with pytest.raises(ValueError, match="are zero"):
        allocate(INTEGER.money(100, USD), [0, 0])


# endregion
