"""Native integer widths for fixed-point arithmetic.

Values are plain Python ints; an `IntType` says which machine width they are
held to. Each width carries its overflow-recovery pairing as a fixed
attribute:

- `wider`: the native width the checked family retries in (i64 -> i128,
  u64 -> u128). The 128-bit widths have none.
- `host_wide`: the host wide type the host family routes 128-bit products
  through (i128 -> I256, u128 -> U256).

Units/conventions:
- A fixed-point value `v` with scalar `s` means `v / s`.
- `STROOP` is the seven-decimal "one" (1e7) used by ledger amounts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type

from .wide import I256, U256, WideInt

STROOP: int = 1_0000000


@dataclass(frozen=True)
class IntType:
    """A fixed-width signed or unsigned integer domain."""

    name: str
    bits: int
    signed: bool
    wider: Optional["IntType"] = None
    host_wide: Optional[Type[WideInt]] = None

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def narrow(self, value: int) -> Optional[int]:
        """Checked cast of an exact integer into this width."""
        return value if self.contains(value) else None

    def checked_mul(self, x: int, y: int) -> Optional[int]:
        return self.narrow(x * y)

    def require(self, name: str, value: int) -> None:
        """Validate a caller-supplied operand."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int")
        if not self.contains(value):
            raise ValueError(f"{name} out of range for {self.name}: {value}")

    def __repr__(self) -> str:
        return self.name


I128 = IntType("i128", 128, signed=True, host_wide=I256)
U128 = IntType("u128", 128, signed=False, host_wide=U256)
I64 = IntType("i64", 64, signed=True, wider=I128)
U64 = IntType("u64", 64, signed=False, wider=U128)

NATIVE_TYPES = (I64, U64, I128, U128)
