"""`fixed_point_math`: exact fixed-point multiply/divide on integer-backed values.

A fixed-point value is a plain int read as `value / denominator` for a
caller-chosen denominator (e.g. `STROOP` for seven decimals). Every operation
computes `x * y / denominator` or `x * denominator / y` exactly, rounded
toward negative infinity (`*_floor`) or positive infinity (`*_ceil`), and
recovers phantom overflow of the intermediate product where a wider type is
available.

Two families with different failure disciplines:
- `checked`: native widths (I64, U64, I128, U128); failure returns None.
- `host`: host wide types (I256, U256) and the widened 128-bit variants;
  failure raises `HostPanic`.

Public API:
- `checked.fixed_mul_floor(x, y, denominator, int_type) -> int | None`
- `host.fixed_mul_floor(x, y, denominator[, int_type]) -> int | I256 | U256`
  (and the `_ceil` / `fixed_div_*` siblings in both modules)
"""

from . import checked, host
from .errors import HostPanic
from .rounding import Rounding
from .types import I64, I128, NATIVE_TYPES, STROOP, U64, U128, IntType
from .wide import I256, U256, WideInt

__all__ = [
    "checked",
    "host",
    "HostPanic",
    "Rounding",
    "IntType",
    "I64",
    "U64",
    "I128",
    "U128",
    "NATIVE_TYPES",
    "STROOP",
    "WideInt",
    "I256",
    "U256",
]
