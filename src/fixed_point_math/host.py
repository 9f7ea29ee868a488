"""
Host-panicking fixed-point operations.

Covers the host wide types (`I256`, `U256`) and the 128-bit native widths
whose products are routed through them. Host arithmetic traps on any fault,
so these operations do the same: a zero divisor, an overflow of the wide
type or a result that does not narrow back to 128 bits raises `HostPanic`.
There is no None path here; callers that need a recoverable signal use
`fixed_point_math.checked`.

Note the deliberate asymmetry with the checked family: a 128-bit result that
does not fit is None there and a panic here.

Usage:
    fixed_mul_floor(I256(x), I256(y), I256(denominator))   -> I256
    fixed_mul_floor(x, y, denominator, I128)               -> int
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .errors import divide_by_zero, does_not_fit
from .rounding import Rounding, checked_div_round, rounding_adjustment
from .types import IntType
from .wide import WideInt

logger = logging.getLogger(__name__)

Operand = Union[int, WideInt]


# -- Wide-type core ----------------------------------------------------------

def wide_mul_div(x: WideInt, y: WideInt, z: WideInt, rounding: Rounding) -> WideInt:
    """Directed `x * y / z` entirely in the host wide type."""
    r = x.mul(y)
    q = r.div(z)
    step = rounding_adjustment(
        rounding,
        negative=not r.is_zero() and r.is_negative() != z.is_negative(),
        inexact=not r.rem_euclid(z).is_zero(),
    )
    if step == 0:
        return q
    one = type(q).from_int(1)
    return q.add(one) if step > 0 else q.sub(one)


# -- 128-bit widened core ------------------------------------------------------

def scaled_mul_div(x: int, y: int, z: int, rounding: Rounding, int_type: IntType) -> int:
    """Directed `x * y / z` in a 128-bit width, widening the product to the host type on overflow."""
    r = int_type.checked_mul(x, y)
    if r is not None:
        if z == 0:
            raise divide_by_zero()
        res = checked_div_round(r, z, rounding, int_type)
        if res is None:
            raise does_not_fit(int_type.name)
        return res

    wide = int_type.host_wide
    logger.debug("%s product overflow, scaling to %s", int_type, wide.NAME)
    res_wide = wide_mul_div(wide(x), wide(y), wide(z), rounding)
    narrowed = res_wide.to_native(int_type)
    if narrowed is None:
        raise does_not_fit(int_type.name)
    return narrowed


# -- Dispatch --------------------------------------------------------------------

def _resolve(
    x: Operand,
    y: Operand,
    denominator: Operand,
    int_type: Optional[IntType],
) -> Optional[IntType]:
    """Validate operands; returns the native width, or None for wide operands."""
    if isinstance(x, WideInt):
        if int_type is not None:
            raise TypeError("int_type is only used with native int operands")
        for v in (y, denominator):
            if type(v) is not type(x):
                raise TypeError(f"operands must all be {type(x).__name__}, got {type(v).__name__}")
        return None

    if not isinstance(int_type, IntType) or int_type.host_wide is None:
        raise TypeError("native operands need an int_type with a host wide pairing (I128 or U128)")
    for v in (x, y, denominator):
        int_type.require("operand", v)
    return int_type


def _mul_div(x: Operand, y: Operand, z: Operand, rounding: Rounding, int_type: Optional[IntType]) -> Operand:
    native = _resolve(x, y, z, int_type)
    if native is None:
        return wide_mul_div(x, y, z, rounding)
    return scaled_mul_div(x, y, z, rounding, native)


def fixed_mul_floor(x: Operand, y: Operand, denominator: Operand, int_type: Optional[IntType] = None) -> Operand:
    """
    floor(x * y / denominator).

    Raises:
        HostPanic: if the denominator is 0, the wide product overflows, or
        the result does not fit the operand width.
    """
    return _mul_div(x, y, denominator, Rounding.FLOOR, int_type)


def fixed_mul_ceil(x: Operand, y: Operand, denominator: Operand, int_type: Optional[IntType] = None) -> Operand:
    """
    ceil(x * y / denominator).

    Raises:
        HostPanic: if the denominator is 0, the wide product overflows, or
        the result does not fit the operand width.
    """
    return _mul_div(x, y, denominator, Rounding.CEIL, int_type)


def fixed_div_floor(x: Operand, y: Operand, denominator: Operand, int_type: Optional[IntType] = None) -> Operand:
    """
    floor(x * denominator / y).

    Raises:
        HostPanic: if y is 0, the wide product overflows, or the result does
        not fit the operand width.
    """
    return _mul_div(x, denominator, y, Rounding.FLOOR, int_type)


def fixed_div_ceil(x: Operand, y: Operand, denominator: Operand, int_type: Optional[IntType] = None) -> Operand:
    """
    ceil(x * denominator / y).

    Raises:
        HostPanic: if y is 0, the wide product overflows, or the result does
        not fit the operand width.
    """
    return _mul_div(x, denominator, y, Rounding.CEIL, int_type)
