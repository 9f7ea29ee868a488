"""
Directed-rounding division primitives (integer-only).

Both fixed-point families start from a quotient truncated toward zero, the
way machine division and the host wide types produce it, and then apply a
single -1/0/+1 correction to reach floor or ceiling.

Rounding rules:
- FLOOR rounds toward negative infinity.
- CEIL rounds toward positive infinity.
- Truncation already equals FLOOR for a non-negative quotient and CEIL for a
  negative one; only an inexact quotient on the other side needs a step.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .types import IntType


@unique
class Rounding(Enum):
    FLOOR = "floor"
    CEIL = "ceil"


def truncated_divmod(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Division rounding toward zero.

    Returns (q, r) such that:
    - numerator = q*denominator + r
    - r has the sign of the numerator and |r| < |denominator|

    Python's `//` floors, so the quotient is built from magnitudes.
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be nonzero")
    q = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        q = -q
    return q, numerator - q * denominator


def rounding_adjustment(rounding: Rounding, *, negative: bool, inexact: bool) -> int:
    """Correction to add to a truncated quotient to obtain the directed result."""
    if not inexact:
        return 0
    if rounding is Rounding.FLOOR:
        return -1 if negative else 0
    return 0 if negative else 1


def quotient_is_negative(numerator: int, denominator: int) -> bool:
    return numerator != 0 and (numerator < 0) != (denominator < 0)


def checked_div_round(
    numerator: int,
    denominator: int,
    rounding: Rounding,
    int_type: "IntType",
) -> Optional[int]:
    """
    Directed division inside `int_type`.

    Returns None when the denominator is zero or the rounded quotient does not
    fit (e.g. `min / -1` for a signed width).
    """
    if denominator == 0:
        return None
    q, r = truncated_divmod(numerator, denominator)
    q += rounding_adjustment(
        rounding,
        negative=quotient_is_negative(numerator, denominator),
        inexact=r != 0,
    )
    return int_type.narrow(q)


def checked_div_floor(numerator: int, denominator: int, int_type: "IntType") -> Optional[int]:
    """floor(numerator / denominator), or None."""
    return checked_div_round(numerator, denominator, Rounding.FLOOR, int_type)


def checked_div_ceil(numerator: int, denominator: int, int_type: "IntType") -> Optional[int]:
    """ceil(numerator / denominator), or None."""
    return checked_div_round(numerator, denominator, Rounding.CEIL, int_type)
