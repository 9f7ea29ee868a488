"""
Host-provided 256-bit integers.

`I256` and `U256` stand in for the wide integer objects a contract host hands
out. Their arithmetic is exact inside 256 bits and traps on anything else:
every overflow or zero divisor raises `HostPanic` instead of wrapping or
returning a sentinel. Callers treat them as opaque values and only use the
primitives below.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from .errors import HostPanic, divide_by_zero, overflow, remainder_by_zero
from .rounding import truncated_divmod

if TYPE_CHECKING:
    from .types import IntType


_I128_MIN = -(1 << 127)
_I128_MAX = (1 << 127) - 1
_U128_MAX = (1 << 128) - 1


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@total_ordering
class WideInt:
    """Base class for the fixed 256-bit host integers."""

    __slots__ = ("_value",)

    BITS = 256
    SIGNED = True
    NAME = "wide"

    def __init__(self, value: int) -> None:
        _require_int("value", value)
        if not (self.min_value() <= value <= self.max_value()):
            raise HostPanic(f"value out of range for {self.NAME}: {value}")
        self._value = value

    # -- bounds ----------------------------------------------------------

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (cls.BITS - 1)) if cls.SIGNED else 0

    @classmethod
    def max_value(cls) -> int:
        return (1 << (cls.BITS - 1)) - 1 if cls.SIGNED else (1 << cls.BITS) - 1

    # -- construction / narrowing ----------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "WideInt":
        return cls(value)

    @classmethod
    def from_i128(cls, value: int) -> "WideInt":
        _require_int("value", value)
        if not (_I128_MIN <= value <= _I128_MAX):
            raise ValueError(f"value is not an i128: {value}")
        return cls(value)

    @classmethod
    def from_u128(cls, value: int) -> "WideInt":
        _require_int("value", value)
        if not (0 <= value <= _U128_MAX):
            raise ValueError(f"value is not a u128: {value}")
        return cls(value)

    def to_int(self) -> int:
        return self._value

    def to_i128(self) -> Optional[int]:
        if _I128_MIN <= self._value <= _I128_MAX:
            return self._value
        return None

    def to_u128(self) -> Optional[int]:
        if 0 <= self._value <= _U128_MAX:
            return self._value
        return None

    def to_native(self, int_type: "IntType") -> Optional[int]:
        """Checked narrowing into a native width."""
        return int_type.narrow(self._value)

    # -- arithmetic ------------------------------------------------------

    def _other(self, other: "WideInt") -> int:
        if type(other) is not type(self):
            raise TypeError(f"expected {type(self).__name__}, got {type(other).__name__}")
        return other._value

    def _wrap(self, value: int, op: str) -> "WideInt":
        if not (self.min_value() <= value <= self.max_value()):
            raise overflow(op)
        return type(self)(value)

    def add(self, other: "WideInt") -> "WideInt":
        return self._wrap(self._value + self._other(other), "add")

    def sub(self, other: "WideInt") -> "WideInt":
        return self._wrap(self._value - self._other(other), "subtract")

    def mul(self, other: "WideInt") -> "WideInt":
        return self._wrap(self._value * self._other(other), "multiply")

    def div(self, other: "WideInt") -> "WideInt":
        """Quotient rounded toward zero."""
        d = self._other(other)
        if d == 0:
            raise divide_by_zero()
        q, _ = truncated_divmod(self._value, d)
        return self._wrap(q, "divide")

    def rem(self, other: "WideInt") -> "WideInt":
        """Remainder of `div`; takes the sign of the dividend."""
        d = self._other(other)
        if d == 0:
            raise remainder_by_zero()
        if self.SIGNED and self._value == self.min_value() and d == -1:
            raise overflow("calculate the remainder")
        _, r = truncated_divmod(self._value, d)
        return type(self)(r)

    def rem_euclid(self, other: "WideInt") -> "WideInt":
        """Least non-negative remainder."""
        d = self._other(other)
        if d == 0:
            raise remainder_by_zero()
        if self.SIGNED and self._value == self.min_value() and d == -1:
            raise overflow("calculate the remainder")
        return type(self)(self._value % abs(d))

    def is_negative(self) -> bool:
        return self._value < 0

    def is_zero(self) -> bool:
        return self._value == 0

    # -- value semantics -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WideInt):
            return NotImplemented
        return type(other) is type(self) and other._value == self._value

    def __lt__(self, other: "WideInt") -> bool:
        return self._value < self._other(other)

    def __hash__(self) -> int:
        return hash((self.NAME, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class I256(WideInt):
    __slots__ = ()

    SIGNED = True
    NAME = "i256"


class U256(WideInt):
    __slots__ = ()

    SIGNED = False
    NAME = "u256"
