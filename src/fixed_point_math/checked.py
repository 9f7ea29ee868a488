"""
Checked fixed-point operations for native widths (i64, u64, i128, u128).

Every operation returns the exact directed-rounded result, or None when no
such result exists in the requested width. Nothing here raises for an
arithmetic failure; only malformed inputs (wrong type, operand outside its
width) raise, since those are caller bugs rather than outcomes.

Algorithm (`x * y / z`):
- A zero divisor fails immediately; widening cannot help it.
- The product is formed in the native width. If it fits, the rounded
  quotient is narrowed back (a quotient such as `i64.min / -1` still fails).
- If the product overflows, the whole computation is repeated in the paired
  wider width (i64 -> i128, u64 -> u128) and narrowed back. This recovers
  phantom overflow: an intermediate that overflows while the final result
  fits. The 128-bit widths have no wider native type, so an overflowing
  product there fails; use `fixed_point_math.host` for wider intermediates.

Example:
    >>> from fixed_point_math.types import U64
    >>> fixed_mul_floor(1_5000000, 2_0000000, 1_0000000, U64)
    30000000
"""

from __future__ import annotations

import logging
from typing import Optional

from .rounding import Rounding, checked_div_round
from .types import IntType

logger = logging.getLogger(__name__)


def _require_operands(int_type: IntType, **operands: int) -> None:
    if not isinstance(int_type, IntType):
        raise TypeError("int_type must be an IntType")
    for name, value in operands.items():
        int_type.require(name, value)


def mul_div(x: int, y: int, z: int, rounding: Rounding, int_type: IntType) -> Optional[int]:
    """Directed `x * y / z` in `int_type`, retrying in the wider width on phantom overflow."""
    if z == 0:
        return None

    r = int_type.checked_mul(x, y)
    if r is not None:
        return checked_div_round(r, z, rounding, int_type)

    wider = int_type.wider
    if wider is None:
        return None

    logger.debug("%s product overflow, retrying %s division in %s", int_type, rounding.value, wider)
    res = mul_div(x, y, z, rounding, wider)
    if res is None:
        return None
    return int_type.narrow(res)


def fixed_mul_floor(x: int, y: int, denominator: int, int_type: IntType) -> Optional[int]:
    """floor(x * y / denominator), or None on zero denominator or overflow."""
    _require_operands(int_type, x=x, y=y, denominator=denominator)
    return mul_div(x, y, denominator, Rounding.FLOOR, int_type)


def fixed_mul_ceil(x: int, y: int, denominator: int, int_type: IntType) -> Optional[int]:
    """ceil(x * y / denominator), or None on zero denominator or overflow."""
    _require_operands(int_type, x=x, y=y, denominator=denominator)
    return mul_div(x, y, denominator, Rounding.CEIL, int_type)


def fixed_div_floor(x: int, y: int, denominator: int, int_type: IntType) -> Optional[int]:
    """floor(x * denominator / y), or None when y is zero or on overflow."""
    _require_operands(int_type, x=x, y=y, denominator=denominator)
    return mul_div(x, denominator, y, Rounding.FLOOR, int_type)


def fixed_div_ceil(x: int, y: int, denominator: int, int_type: IntType) -> Optional[int]:
    """ceil(x * denominator / y), or None when y is zero or on overflow."""
    _require_operands(int_type, x=x, y=y, denominator=denominator)
    return mul_div(x, denominator, y, Rounding.CEIL, int_type)


__all__ = [
    "fixed_div_ceil",
    "fixed_div_floor",
    "fixed_mul_ceil",
    "fixed_mul_floor",
    "mul_div",
]
