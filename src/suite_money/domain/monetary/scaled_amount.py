from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ScaledAmount(Generic[T]):
    """Integer $amount expressed in 10**$scale-ths (or base**$scale-ths) of one unit.

    Used for multipliers and allocation ratios that need fractional precision without
    floats, e.g. `ScaledAmount(2001, 3)` stands for 2.001.
    """

    amount: T
    scale: T
