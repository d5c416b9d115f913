"""Operations over Money objects. Every function delegates numeric work to the object's calculator."""

from suite_money.api.arithmetic import add, allocate, multiply, subtract
from suite_money.api.comparison import (
    compare,
    equal,
    greater_than,
    greater_than_or_equal,
    have_same_amount,
    is_negative,
    is_positive,
    is_zero,
    less_than,
    less_than_or_equal,
    maximum,
    minimum,
)
from suite_money.api.conversion import FormatPayload, default_transformer, to_decimal, to_format, to_snapshot, to_unit
from suite_money.api.guards import assert_same_currency, have_same_currency
from suite_money.api.scale import has_sub_units, normalize_scale, transform_scale, trim_scale

__all__ = [
    "add",
    "subtract",
    "multiply",
    "allocate",
    "compare",
    "equal",
    "greater_than",
    "greater_than_or_equal",
    "less_than",
    "less_than_or_equal",
    "is_negative",
    "is_positive",
    "is_zero",
    "have_same_amount",
    "have_same_currency",
    "assert_same_currency",
    "minimum",
    "maximum",
    "normalize_scale",
    "transform_scale",
    "trim_scale",
    "has_sub_units",
    "FormatPayload",
    "default_transformer",
    "to_decimal",
    "to_format",
    "to_snapshot",
    "to_unit",
]
